from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from .....db.models import User
from .....exceptions import ValidationError
from .....application.ports.user_repo import UserRepository
from ..errors import storage_errors


def _duplicate_user(exc: IntegrityError) -> ValidationError:
    return ValidationError("Username already exists.")


class SqlUserRepository(UserRepository):
    def __init__(self, session: Session):
        self.session = session

    def get_password_hash(self, username: str) -> Optional[str]:
        with storage_errors(self.session, "checking credentials"):
            user = self.session.exec(select(User).where(User.username == username)).first()
        return user.password if user else None

    def create(self, username: str, password_hash: str) -> None:
        with storage_errors(self.session, "saving user", on_integrity=_duplicate_user):
            self.session.add(User(username=username, password=password_hash))
            self.session.commit()

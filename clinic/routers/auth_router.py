import logging
from fastapi import APIRouter, Depends
from sqlmodel import Session

from ..db.session import get_session
from ..application.services.auth_service import AuthService
from ..exceptions import AuthenticationError, ValidationError
from ..infrastructure.persistence.sqlalchemy.repositories.user_repository_sql import SqlUserRepository
from ..schemas import LoginRequest, LoginResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


def get_auth_service(session: Session = Depends(get_session)) -> AuthService:
    return AuthService(user_repo=SqlUserRepository(session))


@router.post("/login", response_model=LoginResponse)
def login(data: LoginRequest, svc: AuthService = Depends(get_auth_service)):
    # Usernames are trimmed; passwords are taken exactly as typed
    username = data.username.strip()
    if not username or not data.password:
        raise ValidationError("Enter username and password.")
    if not svc.check_credentials(username, data.password):
        raise AuthenticationError("Invalid username or password.")
    logger.info(f"User {username} logged in")
    return LoginResponse(authenticated=True, username=username)

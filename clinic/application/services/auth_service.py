import logging
from dataclasses import dataclass

from ...utils import hash_password
from ...exceptions import ValidationError
from ...validators import require_text
from ..ports.user_repo import UserRepository

logger = logging.getLogger(__name__)

@dataclass
class AuthService:
    user_repo: UserRepository

    def check_credentials(self, username: str, password: str) -> bool:
        # Unsalted sha256 with no lockout; kept compatible with existing user rows
        stored = self.user_repo.get_password_hash(username)
        if stored is None:
            logger.info("Login rejected: unknown user")
            return False
        ok = stored == hash_password(password)
        if not ok:
            logger.info(f"Login rejected for {username}")
        return ok

    def provision_user(self, username: str, password: str) -> None:
        username = require_text(username, "Username")
        if not password:
            raise ValidationError("Password is required.")
        self.user_repo.create(username, hash_password(password))
        logger.info(f"User {username} provisioned")

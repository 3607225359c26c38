from typing import Protocol, Optional

class UserRepository(Protocol):
    def get_password_hash(self, username: str) -> Optional[str]:
        ...

    def create(self, username: str, password_hash: str) -> None:
        ...

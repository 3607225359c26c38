import hashlib
from typing import Optional


def hash_password(password: Optional[str]) -> Optional[str]:
    """SHA-256 of the UTF-8 password, lowercase hex. Unsalted."""
    if password is None:
        return None
    return hashlib.sha256(password.encode("utf-8")).hexdigest()

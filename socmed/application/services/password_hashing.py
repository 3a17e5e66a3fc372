"""Password hashing strategies."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from socmed.domain.users.exceptions import PasswordHashingError
from socmed.domain.users.repositories import PasswordHasher
from socmed.shared.logging import logger


class WerkzeugPasswordHasher(PasswordHasher):
    def __init__(self, method: str = "scrypt") -> None:
        self._method = method

    def hash(self, password: str) -> str:
        try:
            return str(generate_password_hash(password, method=self._method))
        except (ValueError, MemoryError) as exc:
            logger.error(f"password.hash: failed method={self._method} error={type(exc).__name__}")
            raise PasswordHashingError() from exc

    def verify(self, password: str, hashed: str) -> bool:
        try:
            return bool(check_password_hash(hashed, password))
        except (ValueError, TypeError):
            return False

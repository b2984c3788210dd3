"""Password hashing strategies."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from messagely.domain.users.repositories import PasswordHasher
from messagely.shared.logging import logger


class WerkzeugPasswordHasher(PasswordHasher):
    """PBKDF2-SHA256 hashing; ``rounds`` is the work factor."""

    def __init__(self, *, rounds: int) -> None:
        if rounds < 1:
            raise ValueError("rounds must be positive")
        self._method = f"pbkdf2:sha256:{rounds}"

    def hash(self, password: str) -> str:
        return str(generate_password_hash(password, method=self._method))

    def verify(self, password: str, hashed: str) -> bool:
        try:
            return bool(check_password_hash(hashed, password))
        except (ValueError, TypeError) as exc:
            logger.warning(f"password.verify: unusable stored hash ({type(exc).__name__})")
            return False

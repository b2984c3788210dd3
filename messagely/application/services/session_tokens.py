"""Stateless session tokens.

Tokens are JWTs carrying the username in ``sub`` and the issue time in
``iat``. Nothing is stored server side; a token stays valid for as long as the
signing secret is unchanged, or until ``exp`` when a lifetime is configured.
"""

from __future__ import annotations

from datetime import timedelta

from jose import JWTError, jwt

from messagely.domain.users.exceptions import InvalidTokenError
from messagely.domain.users.repositories import SessionTokenService
from messagely.shared.config import AuthConfig
from messagely.shared.logging import logger
from messagely.shared.utils.clock import Clock, utcnow


class JwtSessionTokenService(SessionTokenService):
    def __init__(self, config: AuthConfig, *, clock: Clock = utcnow) -> None:
        if not config.secret_key:
            raise ValueError("secret_key must not be empty")
        self._secret = config.secret_key
        self._algorithm = config.jwt_algorithm
        self._ttl = (
            timedelta(seconds=config.token_ttl_seconds)
            if config.token_ttl_seconds
            else None
        )
        self._clock = clock

    def issue(self, username: str) -> str:
        now = self._clock()
        claims: dict[str, object] = {"sub": username, "iat": int(now.timestamp())}
        if self._ttl is not None:
            claims["exp"] = int((now + self._ttl).timestamp())
        return jwt.encode(claims, self._secret, algorithm=self._algorithm)

    def resolve(self, token: str) -> str:
        if not token:
            raise InvalidTokenError()
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except JWTError as exc:
            logger.info(f"token.resolve: rejected ({type(exc).__name__})")
            raise InvalidTokenError() from exc

        username = payload.get("sub")
        if not isinstance(username, str) or not username:
            logger.info("token.resolve: rejected (missing sub)")
            raise InvalidTokenError()
        return username

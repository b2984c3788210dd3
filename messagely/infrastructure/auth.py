# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Bearer-token authentication for Flask views."""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar, cast

from flask import g, request

from messagely.domain.users.exceptions import InvalidTokenError
from messagely.domain.users.repositories import SessionTokenService
from messagely.shared.logging import logger

F = TypeVar("F", bound=Callable[..., Any])


def bearer_token() -> str:
    auth = request.headers.get("Authorization", "")
    scheme, _, token = auth.partition(" ")
    if scheme.lower() != "bearer":
        return ""
    return token.strip()


def current_username() -> str:
    """Username resolved by ``auth_required`` for the current request."""

    return cast(str, g.username)


def auth_required(tokens: SessionTokenService) -> Callable[[F], F]:
    def decorator(view: F) -> F:
        @wraps(view)
        def inner(*args: Any, **kwargs: Any) -> Any:
            token = bearer_token()
            if not token:
                logger.warning(
                    f"No bearer token on {request.method} {request.path} "
                    f"from {request.headers.get('X-Forwarded-For', request.remote_addr)}"
                )
                raise InvalidTokenError()

            g.username = tokens.resolve(token)
            logger.debug(f"Auth OK: user={g.username} {request.method} {request.path}")
            return view(*args, **kwargs)

        return cast(F, inner)

    return decorator


__all__ = ["auth_required", "bearer_token", "current_username"]

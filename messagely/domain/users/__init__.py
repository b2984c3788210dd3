# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import User, UserDetail, UserProfile
from .exceptions import (
    InvalidCredentialsError,
    InvalidTokenError,
    RegistrationFailedError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from .repositories import PasswordHasher, SessionTokenService, UserRepository

__all__ = [
    "InvalidCredentialsError",
    "InvalidTokenError",
    "PasswordHasher",
    "RegistrationFailedError",
    "SessionTokenService",
    "User",
    "UserAlreadyExistsError",
    "UserDetail",
    "UserNotFoundError",
    "UserProfile",
    "UserRepository",
]

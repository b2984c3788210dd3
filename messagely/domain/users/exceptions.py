# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from messagely.shared.errors.base import DomainError, InfrastructureError


class UserAlreadyExistsError(DomainError):
    code = "username_taken"

    def __init__(self, username: str | None = None) -> None:
        super().__init__(context={"username": username} if username else None)


class RegistrationFailedError(InfrastructureError):
    def __init__(self) -> None:
        super().__init__("registration_failed")


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    status = HTTPStatus.UNAUTHORIZED


class InvalidTokenError(DomainError):
    code = "invalid_token"
    status = HTTPStatus.UNAUTHORIZED


class UserNotFoundError(DomainError):
    code = "user_not_found"
    status = HTTPStatus.NOT_FOUND

    def __init__(self, username: str) -> None:
        super().__init__(context={"username": username})
        self.username = username

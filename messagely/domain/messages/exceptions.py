# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from messagely.shared.errors.base import DomainError


class MessageNotFoundError(DomainError):
    code = "message_not_found"
    status = HTTPStatus.NOT_FOUND

    def __init__(self, message_id: int) -> None:
        super().__init__(context={"message_id": message_id})
        self.message_id = message_id


class UnknownUserError(DomainError):
    code = "unknown_user"

    def __init__(self, username: str | None = None) -> None:
        super().__init__(context={"username": username} if username else None)


class UnauthorizedError(DomainError):
    code = "unauthorized"
    status = HTTPStatus.UNAUTHORIZED

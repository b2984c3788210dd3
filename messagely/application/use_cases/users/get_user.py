# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from messagely.domain.users.entities import UserDetail
from messagely.domain.users.exceptions import UserNotFoundError
from messagely.domain.users.repositories import UserRepository


class GetUserUseCase:
    def __init__(self, *, users: UserRepository) -> None:
        self._users = users

    def execute(self, username: str) -> UserDetail:
        user = self._users.find_by_username(username)
        if user is None:
            raise UserNotFoundError(username)
        return user.detail()

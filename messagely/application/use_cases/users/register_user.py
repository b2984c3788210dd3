# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from messagely.domain.users.entities import User, UserProfile
from messagely.domain.users.repositories import (
    PasswordHasher,
    SessionTokenService,
    UserRepository,
)
from messagely.shared.utils.clock import Clock, utcnow


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: SessionTokenService,
        password_hasher: PasswordHasher,
        clock: Clock = utcnow,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher
        self._clock = clock

    def execute(
        self,
        username: str,
        password: str,
        *,
        first_name: str,
        last_name: str,
        phone: str,
    ) -> tuple[UserProfile, str]:
        # Registration counts as the first login.
        now = self._clock()
        hashed = self._password_hasher.hash(password)
        user = User(
            username=username,
            password_hash=hashed,
            first_name=first_name,
            last_name=last_name,
            phone=phone,
            joined_at=now,
            last_login_at=now,
        )
        persisted = self._users.add(user)
        token = self._tokens.issue(persisted.username)
        return persisted.profile(), token

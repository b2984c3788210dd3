# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from messagely.domain.users.exceptions import InvalidCredentialsError
from messagely.domain.users.repositories import (
    PasswordHasher,
    SessionTokenService,
    UserRepository,
)
from messagely.shared.utils.clock import Clock, utcnow


class LoginUserUseCase:
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
        self._decoy_hash: str | None = None

    def authenticate(self, username: str, password: str) -> bool:
        """Return whether ``password`` matches the stored hash for ``username``.

        Unknown users and wrong passwords are indistinguishable to the caller.
        """

        user = self._users.find_by_username(username)
        if user is None:
            # Spend the same hashing work as a real check before failing.
            if self._decoy_hash is None:
                self._decoy_hash = self._password_hasher.hash("decoy-password")
            self._password_hasher.verify(password, self._decoy_hash)
            return False
        return self._password_hasher.verify(password, user.password_hash)

    def execute(self, username: str, password: str) -> str:
        if not self.authenticate(username, password):
            raise InvalidCredentialsError()

        self._users.touch_login(username, self._clock())
        return self._tokens.issue(username)

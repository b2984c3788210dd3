# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Protocol

from .entities import User, UserProfile


class UserRepository(Protocol):
    def find_by_username(self, username: str) -> User | None: ...
    def add(self, user: User) -> User: ...
    def touch_login(self, username: str, at: datetime) -> None: ...
    def list_profiles(self) -> Sequence[UserProfile]: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class SessionTokenService(Protocol):
    def issue(self, username: str) -> str: ...
    def resolve(self, token: str) -> str: ...

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from messagely.domain.users.entities import User as DomainUser
from messagely.domain.users.entities import UserProfile
from messagely.domain.users.exceptions import RegistrationFailedError, UserAlreadyExistsError
from messagely.domain.users.repositories import UserRepository
from messagely.infrastructure.db.models import User
from messagely.infrastructure.unit_of_work import store_scope, unit_of_work_scope
from messagely.shared.logging import logger
from messagely.shared.utils.clock import as_utc


def to_profile(row: User) -> UserProfile:
    return UserProfile(
        username=row.username,
        first_name=row.first_name,
        last_name=row.last_name,
        phone=row.phone,
    )


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        username=row.username,
        password_hash=row.password_hash,
        first_name=row.first_name,
        last_name=row.last_name,
        phone=row.phone,
        joined_at=as_utc(row.joined_at),
        last_login_at=as_utc(row.last_login_at),
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def find_by_username(self, username: str) -> DomainUser | None:
        with store_scope(self._session_factory, "users.find") as session:
            row = session.get(User, username)
            if row is None:
                return None
            return _to_domain(row)

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = User(
                    username=user.username,
                    password_hash=user.password_hash,
                    first_name=user.first_name,
                    last_name=user.last_name,
                    phone=user.phone,
                    joined_at=user.joined_at,
                    last_login_at=user.last_login_at,
                )
                session.add(row)
                session.flush()
                persisted = _to_domain(row)
        except IntegrityError as exc:
            logger.info(f"users.add: username taken ({user.username})")
            raise UserAlreadyExistsError(user.username) from exc
        except SQLAlchemyError as exc:
            logger.exception(f"users.add: failed ({user.username})")
            raise RegistrationFailedError() from exc
        return persisted

    def touch_login(self, username: str, at: datetime) -> None:
        with store_scope(self._session_factory, "users.touch_login") as session:
            session.execute(
                update(User).where(User.username == username).values(last_login_at=at)
            )

    def list_profiles(self) -> Sequence[UserProfile]:
        with store_scope(self._session_factory, "users.list") as session:
            rows = session.scalars(select(User).order_by(User.username.asc())).all()
            return [to_profile(row) for row in rows]

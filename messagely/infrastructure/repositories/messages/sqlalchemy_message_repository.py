# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from messagely.domain.messages.entities import MailboxEntry, MessageDetail, ReadReceipt
from messagely.domain.messages.entities import Message as DomainMessage
from messagely.domain.messages.exceptions import UnknownUserError
from messagely.domain.messages.repositories import MessageRepository
from messagely.infrastructure.db.models import Message, User
from messagely.infrastructure.repositories.users.sqlalchemy_user_repository import to_profile
from messagely.infrastructure.unit_of_work import store_scope, unit_of_work_scope
from messagely.shared.errors import StoreError
from messagely.shared.logging import logger
from messagely.shared.utils.clock import as_utc

# Ids outside SQLite's signed 64-bit INTEGER range can never name a stored row.
_MAX_MESSAGE_ID = 2**63 - 1


def _valid_id(message_id: int) -> bool:
    return 1 <= message_id <= _MAX_MESSAGE_ID


def _to_domain(row: Message) -> DomainMessage:
    return DomainMessage(
        id=row.id,
        from_username=row.from_username,
        to_username=row.to_username,
        body=row.body,
        sent_at=as_utc(row.sent_at),
        read_at=as_utc(row.read_at),
    )


class SqlAlchemyMessageRepository(MessageRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def add(
        self, from_username: str, to_username: str, body: str, sent_at: datetime
    ) -> DomainMessage:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = Message(
                    from_username=from_username,
                    to_username=to_username,
                    body=body,
                    sent_at=sent_at,
                    read_at=None,
                )
                session.add(row)
                session.flush()
                message = _to_domain(row)
        except IntegrityError as exc:
            missing = self._missing_participant(from_username, to_username)
            logger.info(f"messages.add: unknown participant ({missing})")
            raise UnknownUserError(missing) from exc
        except SQLAlchemyError as exc:
            logger.exception("messages.add: failed")
            raise StoreError() from exc
        return message

    def _missing_participant(self, from_username: str, to_username: str) -> str | None:
        with store_scope(self._session_factory, "messages.missing_participant") as session:
            for username in (to_username, from_username):
                if session.get(User, username) is None:
                    return username
        return None

    def get(self, message_id: int) -> MessageDetail | None:
        if not _valid_id(message_id):
            return None
        with store_scope(self._session_factory, "messages.get") as session:
            row = session.get(Message, message_id)
            if row is None:
                return None
            return MessageDetail(
                message=_to_domain(row),
                from_user=to_profile(row.from_user),
                to_user=to_profile(row.to_user),
            )

    def mark_read(self, message_id: int, at: datetime) -> ReadReceipt | None:
        if not _valid_id(message_id):
            return None
        with store_scope(self._session_factory, "messages.mark_read") as session:
            # Conditional update: only the first caller sets read_at.
            session.execute(
                update(Message)
                .where(Message.id == message_id, Message.read_at.is_(None))
                .values(read_at=at)
                .execution_options(synchronize_session=False)
            )
            read_at = session.scalar(select(Message.read_at).where(Message.id == message_id))
            if read_at is None:
                return None
            return ReadReceipt(id=message_id, read_at=as_utc(read_at))

    def list_to(self, username: str) -> Sequence[MailboxEntry]:
        with store_scope(self._session_factory, "messages.list_to") as session:
            rows = session.scalars(
                select(Message)
                .where(Message.to_username == username)
                .order_by(Message.sent_at.asc(), Message.id.asc())
            ).unique().all()
            return [
                MailboxEntry(message=_to_domain(row), counterpart=to_profile(row.from_user))
                for row in rows
            ]

    def list_from(self, username: str) -> Sequence[MailboxEntry]:
        with store_scope(self._session_factory, "messages.list_from") as session:
            rows = session.scalars(
                select(Message)
                .where(Message.from_username == username)
                .order_by(Message.sent_at.asc(), Message.id.asc())
            ).unique().all()
            return [
                MailboxEntry(message=_to_domain(row), counterpart=to_profile(row.to_user))
                for row in rows
            ]

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Message records and the read-state transition."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime

from messagely.domain.exceptions import InvariantViolation
from messagely.domain.users.entities import UserProfile


@dataclass(slots=True, frozen=True)
class Message:
    """A direct message between two users.

    ``read_at`` starts as ``None`` and is set at most once.
    """

    id: int
    from_username: str
    to_username: str
    body: str
    sent_at: datetime
    read_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.from_username:
            raise InvariantViolation("sender must not be empty", field="from_username")
        if not self.to_username:
            raise InvariantViolation("recipient must not be empty", field="to_username")

    @property
    def is_read(self) -> bool:
        return self.read_at is not None

    def participants(self) -> frozenset[str]:
        return frozenset((self.from_username, self.to_username))

    def mark_read(self, at: datetime) -> Message:
        """Return the message in the read state.

        Already-read messages are returned unchanged, keeping the first
        timestamp.
        """

        if self.read_at is not None:
            return self
        return replace(self, read_at=at)


@dataclass(slots=True, frozen=True)
class ReadReceipt:
    id: int
    read_at: datetime


@dataclass(slots=True, frozen=True)
class MessageDetail:
    """A message together with both participants' profiles."""

    message: Message
    from_user: UserProfile
    to_user: UserProfile


@dataclass(slots=True, frozen=True)
class MailboxEntry:
    """A message as listed in a mailbox, with the other participant's profile.

    For an inbox ``counterpart`` is the sender, for an outbox the recipient.
    """

    message: Message
    counterpart: UserProfile

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Protocol

from .entities import MailboxEntry, Message, MessageDetail, ReadReceipt


class MessageRepository(Protocol):
    def add(
        self, from_username: str, to_username: str, body: str, sent_at: datetime
    ) -> Message: ...
    def get(self, message_id: int) -> MessageDetail | None: ...
    def mark_read(self, message_id: int, at: datetime) -> ReadReceipt | None: ...
    def list_to(self, username: str) -> Sequence[MailboxEntry]: ...
    def list_from(self, username: str) -> Sequence[MailboxEntry]: ...

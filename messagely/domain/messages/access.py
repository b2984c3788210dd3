# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Per-message authorization rules.

Callers must load the message before consulting the guard so that a missing
message is reported as not found to every caller, whoever they are.
"""

from __future__ import annotations

from messagely.shared.logging import logger

from .entities import Message
from .exceptions import UnauthorizedError


class AccessGuard:
    def can_view(self, actor: str, message: Message) -> bool:
        return actor in message.participants()

    def can_mark_read(self, actor: str, message: Message) -> bool:
        return actor == message.to_username

    def can_read_mailbox(self, actor: str, owner: str) -> bool:
        return actor == owner

    def ensure_can_view(self, actor: str, message: Message) -> None:
        if not self.can_view(actor, message):
            logger.warning(f"access.view: denied (actor={actor}, message_id={message.id})")
            raise UnauthorizedError()

    def ensure_can_mark_read(self, actor: str, message: Message) -> None:
        if not self.can_mark_read(actor, message):
            logger.warning(f"access.mark_read: denied (actor={actor}, message_id={message.id})")
            raise UnauthorizedError()

    def ensure_can_read_mailbox(self, actor: str, owner: str) -> None:
        if not self.can_read_mailbox(actor, owner):
            logger.warning(f"access.mailbox: denied (actor={actor}, owner={owner})")
            raise UnauthorizedError()

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from messagely.domain.messages.access import AccessGuard
from messagely.domain.messages.entities import MailboxEntry
from messagely.domain.messages.repositories import MessageRepository


class ListMessagesToUseCase:
    def __init__(self, *, messages: MessageRepository, guard: AccessGuard) -> None:
        self._messages = messages
        self._guard = guard

    def execute(self, actor: str, username: str) -> list[MailboxEntry]:
        self._guard.ensure_can_read_mailbox(actor, username)
        return list(self._messages.list_to(username))


class ListMessagesFromUseCase:
    def __init__(self, *, messages: MessageRepository, guard: AccessGuard) -> None:
        self._messages = messages
        self._guard = guard

    def execute(self, actor: str, username: str) -> list[MailboxEntry]:
        self._guard.ensure_can_read_mailbox(actor, username)
        return list(self._messages.list_from(username))

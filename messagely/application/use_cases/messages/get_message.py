# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from messagely.domain.messages.access import AccessGuard
from messagely.domain.messages.entities import MessageDetail
from messagely.domain.messages.exceptions import MessageNotFoundError
from messagely.domain.messages.repositories import MessageRepository


class GetMessageUseCase:
    def __init__(self, *, messages: MessageRepository, guard: AccessGuard) -> None:
        self._messages = messages
        self._guard = guard

    def execute(self, actor: str, message_id: int) -> MessageDetail:
        detail = self._messages.get(message_id)
        if detail is None:
            raise MessageNotFoundError(message_id)
        self._guard.ensure_can_view(actor, detail.message)
        return detail

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from messagely.domain.messages.access import AccessGuard
from messagely.domain.messages.entities import ReadReceipt
from messagely.domain.messages.exceptions import MessageNotFoundError
from messagely.domain.messages.repositories import MessageRepository
from messagely.shared.utils.clock import Clock, utcnow


class MarkMessageReadUseCase:
    """Mark a message read on behalf of its recipient.

    Re-marking is a no-op: the receipt carries the timestamp of the first
    successful call.
    """

    def __init__(
        self,
        *,
        messages: MessageRepository,
        guard: AccessGuard,
        clock: Clock = utcnow,
    ) -> None:
        self._messages = messages
        self._guard = guard
        self._clock = clock

    def execute(self, actor: str, message_id: int) -> ReadReceipt:
        detail = self._messages.get(message_id)
        if detail is None:
            raise MessageNotFoundError(message_id)
        self._guard.ensure_can_mark_read(actor, detail.message)

        receipt = self._messages.mark_read(message_id, self._clock())
        if receipt is None:
            raise MessageNotFoundError(message_id)
        return receipt

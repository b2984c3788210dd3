# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from messagely.domain.messages.entities import Message
from messagely.domain.messages.repositories import MessageRepository
from messagely.shared.utils.clock import Clock, utcnow


class SendMessageUseCase:
    """Store a message from the authenticated user.

    The repository reports a sender or recipient that does not exist as
    ``UnknownUserError``.
    """

    def __init__(self, *, messages: MessageRepository, clock: Clock = utcnow) -> None:
        self._messages = messages
        self._clock = clock

    def execute(self, sender: str, to_username: str, body: str) -> Message:
        return self._messages.add(sender, to_username, body, self._clock())

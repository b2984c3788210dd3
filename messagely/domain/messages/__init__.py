# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .access import AccessGuard
from .entities import MailboxEntry, Message, MessageDetail, ReadReceipt
from .exceptions import MessageNotFoundError, UnauthorizedError, UnknownUserError
from .repositories import MessageRepository

__all__ = [
    "AccessGuard",
    "MailboxEntry",
    "Message",
    "MessageDetail",
    "MessageNotFoundError",
    "MessageRepository",
    "ReadReceipt",
    "UnauthorizedError",
    "UnknownUserError",
]

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .exceptions import InvariantViolation, InvariantViolationError
from .messages import AccessGuard, MailboxEntry, Message, MessageDetail, ReadReceipt
from .users import User, UserDetail, UserProfile

__all__ = [
    "AccessGuard",
    "InvariantViolation",
    "InvariantViolationError",
    "MailboxEntry",
    "Message",
    "MessageDetail",
    "ReadReceipt",
    "User",
    "UserDetail",
    "UserProfile",
]

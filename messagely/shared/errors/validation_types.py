# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from enum import StrEnum


class ValidationErrorType(StrEnum):
    BLANK = "blank"
    USERNAME_INVALID_CHARS = "username_invalid_chars"
    PASSWORD_TOO_SHORT = "password_too_short"
    PASSWORD_WHITESPACE = "password_whitespace"
    BODY_BLANK = "body_blank"

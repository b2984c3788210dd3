from __future__ import annotations

import re

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

from messagely.shared.errors.validation_types import ValidationErrorType

_USERNAME_RE = re.compile(r"^[a-zA-Z0-9_.\-]+$")


def _check_username(value: str) -> str:
    if not _USERNAME_RE.match(value):
        raise PydanticCustomError(
            ValidationErrorType.USERNAME_INVALID_CHARS,
            "Username may contain only ASCII letters, digits, '.', '_' and '-'",
            {"pattern": _USERNAME_RE.pattern}
        )

    return value


class RegisterRequestDTO(BaseModel):
    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=1, max_length=128)
    first_name: str = Field(min_length=1, max_length=128)
    last_name: str = Field(min_length=1, max_length=128)
    phone: str = Field(min_length=1, max_length=32)

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        return _check_username(value)

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        if len(value) < 8:
            raise PydanticCustomError(
                ValidationErrorType.PASSWORD_TOO_SHORT,
                "Password must be at least 8 characters long",
                {"min_length": 8}
            )

        if value != value.strip():
            raise PydanticCustomError(
                ValidationErrorType.PASSWORD_WHITESPACE,
                "Password must not start or end with whitespace",
                {}
            )

        return value

    @field_validator("first_name", "last_name", "phone")
    @classmethod
    def validate_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise PydanticCustomError(
                ValidationErrorType.BLANK,
                "Value cannot be blank",
                {}
            )
        return value


class LoginRequestDTO(BaseModel):
    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=1, max_length=128)  # No strength check on login


class TokenResponseDTO(BaseModel):
    token: str

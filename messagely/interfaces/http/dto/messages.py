from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

from messagely.domain.messages.entities import (
    MailboxEntry,
    Message,
    MessageDetail,
    ReadReceipt,
)
from messagely.shared.errors.validation_types import ValidationErrorType

from .users import UserProfileDTO


class SendMessageRequestDTO(BaseModel):
    to_username: str = Field(min_length=1, max_length=64)
    body: str = Field(min_length=1, max_length=10_000)

    @field_validator("body")
    @classmethod
    def validate_body(cls, value: str) -> str:
        if not value.strip():
            raise PydanticCustomError(
                ValidationErrorType.BODY_BLANK,
                "Message body cannot be blank",
                {}
            )
        return value


class MessageCreatedDTO(BaseModel):
    id: int
    from_username: str
    to_username: str
    body: str
    sent_at: datetime

    @classmethod
    def from_domain(cls, message: Message) -> MessageCreatedDTO:
        return cls(
            id=message.id,
            from_username=message.from_username,
            to_username=message.to_username,
            body=message.body,
            sent_at=message.sent_at,
        )


class MessageDetailDTO(BaseModel):
    id: int
    body: str
    sent_at: datetime
    read_at: datetime | None
    from_user: UserProfileDTO
    to_user: UserProfileDTO

    @classmethod
    def from_domain(cls, detail: MessageDetail) -> MessageDetailDTO:
        message = detail.message
        return cls(
            id=message.id,
            body=message.body,
            sent_at=message.sent_at,
            read_at=message.read_at,
            from_user=UserProfileDTO.from_domain(detail.from_user),
            to_user=UserProfileDTO.from_domain(detail.to_user),
        )


class InboxEntryDTO(BaseModel):
    id: int
    body: str
    sent_at: datetime
    read_at: datetime | None
    from_user: UserProfileDTO

    @classmethod
    def from_domain(cls, entry: MailboxEntry) -> InboxEntryDTO:
        return cls(
            id=entry.message.id,
            body=entry.message.body,
            sent_at=entry.message.sent_at,
            read_at=entry.message.read_at,
            from_user=UserProfileDTO.from_domain(entry.counterpart),
        )


class OutboxEntryDTO(BaseModel):
    id: int
    body: str
    sent_at: datetime
    read_at: datetime | None
    to_user: UserProfileDTO

    @classmethod
    def from_domain(cls, entry: MailboxEntry) -> OutboxEntryDTO:
        return cls(
            id=entry.message.id,
            body=entry.message.body,
            sent_at=entry.message.sent_at,
            read_at=entry.message.read_at,
            to_user=UserProfileDTO.from_domain(entry.counterpart),
        )


class ReadReceiptDTO(BaseModel):
    id: int
    read_at: datetime

    @classmethod
    def from_domain(cls, receipt: ReadReceipt) -> ReadReceiptDTO:
        return cls(id=receipt.id, read_at=receipt.read_at)

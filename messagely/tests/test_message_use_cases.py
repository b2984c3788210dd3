from __future__ import annotations

from datetime import UTC, datetime

import pytest
from fakes import InMemoryMessageRepository, InMemoryUserRepository

from messagely.application.use_cases.messages.get_message import GetMessageUseCase
from messagely.application.use_cases.messages.list_mailbox import (
    ListMessagesFromUseCase,
    ListMessagesToUseCase,
)
from messagely.application.use_cases.messages.mark_message_read import MarkMessageReadUseCase
from messagely.application.use_cases.messages.send_message import SendMessageUseCase
from messagely.domain.messages.access import AccessGuard
from messagely.domain.messages.exceptions import (
    MessageNotFoundError,
    UnauthorizedError,
    UnknownUserError,
)
from messagely.domain.users.entities import User


def _user(username: str) -> User:
    return User(
        username=username,
        password_hash=f"hashed:{username}",
        first_name=username.title(),
        last_name="Test",
        phone="555-0100",
        joined_at=datetime(2024, 1, 1, tzinfo=UTC),
        last_login_at=datetime(2024, 1, 1, tzinfo=UTC),
    )


@pytest.fixture()
def messages() -> InMemoryMessageRepository:
    users = InMemoryUserRepository()
    for name in ("alice", "bob", "carol"):
        users.add(_user(name))
    return InMemoryMessageRepository(users)


@pytest.fixture()
def guard() -> AccessGuard:
    return AccessGuard()


def test_send_message_sets_sent_at_and_unread(messages, clock) -> None:
    message = SendMessageUseCase(messages=messages, clock=clock).execute("alice", "bob", "hi")

    assert message.from_username == "alice"
    assert message.to_username == "bob"
    assert message.sent_at == datetime(2024, 1, 1, 12, 0, tzinfo=UTC)
    assert message.read_at is None


def test_send_message_to_unknown_user(messages, clock) -> None:
    with pytest.raises(UnknownUserError) as exc_info:
        SendMessageUseCase(messages=messages, clock=clock).execute("alice", "nobody", "hi")
    assert exc_info.value.context == {"username": "nobody"}


def test_get_message_visible_to_participants_only(messages, guard, clock) -> None:
    sent = SendMessageUseCase(messages=messages, clock=clock).execute("alice", "bob", "hi")
    get_message = GetMessageUseCase(messages=messages, guard=guard)

    for actor in ("alice", "bob"):
        detail = get_message.execute(actor, sent.id)
        assert detail.from_user.username == "alice"
        assert detail.to_user.username == "bob"

    with pytest.raises(UnauthorizedError):
        get_message.execute("carol", sent.id)


@pytest.mark.parametrize("actor", ["alice", "bob", "carol"])
def test_missing_message_is_not_found_for_everyone(messages, guard, actor) -> None:
    with pytest.raises(MessageNotFoundError):
        GetMessageUseCase(messages=messages, guard=guard).execute(actor, 999)
    with pytest.raises(MessageNotFoundError):
        MarkMessageReadUseCase(messages=messages, guard=guard).execute(actor, 999)


def test_mark_read_is_recipient_only_and_idempotent(messages, guard, clock) -> None:
    sent = SendMessageUseCase(messages=messages, clock=clock).execute("alice", "bob", "hi")
    mark_read = MarkMessageReadUseCase(messages=messages, guard=guard, clock=clock)

    with pytest.raises(UnauthorizedError):
        mark_read.execute("alice", sent.id)
    with pytest.raises(UnauthorizedError):
        mark_read.execute("carol", sent.id)

    first = mark_read.execute("bob", sent.id)
    second = mark_read.execute("bob", sent.id)

    assert first.read_at is not None
    assert second.read_at == first.read_at
    detail = messages.get(sent.id)
    assert detail is not None
    assert detail.message.read_at == first.read_at


def test_self_message_can_be_read_by_its_author(messages, guard, clock) -> None:
    sent = SendMessageUseCase(messages=messages, clock=clock).execute("alice", "alice", "note")

    receipt = MarkMessageReadUseCase(messages=messages, guard=guard, clock=clock).execute(
        "alice", sent.id
    )

    assert receipt.id == sent.id


def test_mailbox_listings_restricted_to_owner(messages, guard, clock) -> None:
    send = SendMessageUseCase(messages=messages, clock=clock)
    send.execute("alice", "bob", "one")
    send.execute("carol", "bob", "two")

    inbox = ListMessagesToUseCase(messages=messages, guard=guard).execute("bob", "bob")
    assert [(e.message.body, e.counterpart.username) for e in inbox] == [
        ("one", "alice"),
        ("two", "carol"),
    ]

    outbox = ListMessagesFromUseCase(messages=messages, guard=guard).execute("alice", "alice")
    assert [e.counterpart.username for e in outbox] == ["bob"]

    with pytest.raises(UnauthorizedError):
        ListMessagesToUseCase(messages=messages, guard=guard).execute("alice", "bob")
    with pytest.raises(UnauthorizedError):
        ListMessagesFromUseCase(messages=messages, guard=guard).execute("bob", "alice")

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from messagely.domain.exceptions import InvariantViolation
from messagely.domain.messages.access import AccessGuard
from messagely.domain.messages.entities import Message
from messagely.domain.messages.exceptions import UnauthorizedError

SENT_AT = datetime(2024, 1, 1, tzinfo=UTC)


def _message(from_username: str = "alice", to_username: str = "bob") -> Message:
    return Message(
        id=1,
        from_username=from_username,
        to_username=to_username,
        body="hello",
        sent_at=SENT_AT,
    )


@pytest.mark.parametrize(
    ("actor", "can_view", "can_mark_read"),
    [
        ("alice", True, False),
        ("bob", True, True),
        ("carol", False, False),
    ],
)
def test_guard_truth_table(actor: str, can_view: bool, can_mark_read: bool) -> None:
    guard = AccessGuard()
    message = _message()

    assert guard.can_view(actor, message) is can_view
    assert guard.can_mark_read(actor, message) is can_mark_read


def test_ensure_methods_raise_unauthorized() -> None:
    guard = AccessGuard()
    message = _message()

    guard.ensure_can_view("alice", message)
    guard.ensure_can_mark_read("bob", message)
    guard.ensure_can_read_mailbox("bob", "bob")

    with pytest.raises(UnauthorizedError) as exc_info:
        guard.ensure_can_view("carol", message)
    assert exc_info.value.code == "unauthorized"
    assert int(exc_info.value.status) == 401

    with pytest.raises(UnauthorizedError):
        guard.ensure_can_mark_read("alice", message)
    with pytest.raises(UnauthorizedError):
        guard.ensure_can_read_mailbox("alice", "bob")


def test_mark_read_keeps_first_timestamp() -> None:
    message = _message()
    first = message.mark_read(datetime(2024, 1, 2, tzinfo=UTC))
    second = first.mark_read(datetime(2024, 1, 3, tzinfo=UTC))

    assert not message.is_read
    assert first.is_read
    assert second.read_at == datetime(2024, 1, 2, tzinfo=UTC)


def test_message_requires_participants() -> None:
    with pytest.raises(InvariantViolation):
        _message(to_username="")

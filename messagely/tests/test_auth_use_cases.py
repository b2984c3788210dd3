from __future__ import annotations

from datetime import UTC, datetime

import pytest
from fakes import DeterministicHasher, FakeTokenService, InMemoryUserRepository

from messagely.application.use_cases.users.get_user import GetUserUseCase
from messagely.application.use_cases.users.list_users import ListUsersUseCase
from messagely.application.use_cases.users.login_user import LoginUserUseCase
from messagely.application.use_cases.users.register_user import RegisterUserUseCase
from messagely.domain.users.exceptions import (
    InvalidCredentialsError,
    UserAlreadyExistsError,
    UserNotFoundError,
)


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


def _register(users, clock, username: str = "alice", password: str = "password1"):
    use_case = RegisterUserUseCase(
        users=users,
        tokens=FakeTokenService(),
        password_hasher=DeterministicHasher(),
        clock=clock,
    )
    return use_case.execute(
        username, password, first_name="Alice", last_name="Smith", phone="555-0100"
    )


def _login_use_case(users, clock) -> LoginUserUseCase:
    return LoginUserUseCase(
        users=users,
        tokens=FakeTokenService(),
        password_hasher=DeterministicHasher(),
        clock=clock,
    )


def test_register_creates_user_and_returns_token(users, clock) -> None:
    profile, token = _register(users, clock)

    assert profile.username == "alice"
    assert token == "token-alice"

    stored = users.find_by_username("alice")
    assert stored is not None
    assert stored.password_hash == "hashed:password1"
    assert stored.joined_at == stored.last_login_at
    assert stored.joined_at == datetime(2024, 1, 1, 12, 0, tzinfo=UTC)


def test_register_duplicate_username_keeps_first_record(users, clock) -> None:
    _register(users, clock)
    first = users.find_by_username("alice")

    with pytest.raises(UserAlreadyExistsError) as exc_info:
        _register(users, clock, password="different1")

    assert exc_info.value.code == "username_taken"
    assert users.find_by_username("alice") == first


def test_login_touches_last_login_with_increasing_timestamps(users, clock) -> None:
    _register(users, clock)
    login = _login_use_case(users, clock)

    seen = []
    for _ in range(3):
        assert login.execute("alice", "password1") == "token-alice"
        stored = users.find_by_username("alice")
        assert stored is not None
        seen.append(stored.last_login_at)

    assert seen == sorted(seen)
    assert len(set(seen)) == 3
    stored = users.find_by_username("alice")
    assert stored is not None
    assert stored.joined_at < seen[0]


@pytest.mark.parametrize(
    ("username", "password"),
    [("alice", "wrong-password"), ("nobody", "password1")],
)
def test_login_rejects_bad_credentials_uniformly(users, clock, username, password) -> None:
    _register(users, clock)
    before = users.find_by_username("alice")

    with pytest.raises(InvalidCredentialsError) as exc_info:
        _login_use_case(users, clock).execute(username, password)

    assert exc_info.value.code == "invalid_credentials"
    assert users.find_by_username("alice") == before


def test_authenticate_truth_table(users, clock) -> None:
    _register(users, clock)
    login = _login_use_case(users, clock)

    assert login.authenticate("alice", "password1") is True
    assert login.authenticate("alice", "password2") is False
    assert login.authenticate("ghost", "password1") is False


def test_get_user_returns_detail_and_raises_when_missing(users, clock) -> None:
    _register(users, clock)
    get_user = GetUserUseCase(users=users)

    detail = get_user.execute("alice")
    assert detail.first_name == "Alice"
    assert detail.last_login_at is not None

    with pytest.raises(UserNotFoundError):
        get_user.execute("ghost")


def test_list_users_returns_profiles_only(users, clock) -> None:
    _register(users, clock, username="bob")
    _register(users, clock, username="alice")

    profiles = ListUsersUseCase(users=users).execute()

    assert [p.username for p in profiles] == ["alice", "bob"]
    assert not hasattr(profiles[0], "password_hash")

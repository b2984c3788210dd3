from __future__ import annotations

import os
import tempfile

_TMP_DIR = tempfile.mkdtemp(prefix="messagely-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'messagely.db')}"
os.environ["LOG_FILE"] = os.path.join(_TMP_DIR, "messagely.log")
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["PASSWORD_HASH_ROUNDS"] = "1000"
os.environ["APP_ENV"] = "test"

from collections.abc import Iterator  # noqa: E402
from datetime import UTC, datetime, timedelta  # noqa: E402

import pytest  # noqa: E402

from messagely.shared.config import AuthConfig  # noqa: E402


class StepClock:
    """Deterministic clock advancing one second per call."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 1, 1, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        current = self.now
        self.now = current + timedelta(seconds=1)
        return current


@pytest.fixture()
def clock() -> StepClock:
    return StepClock()


@pytest.fixture()
def auth_config() -> AuthConfig:
    return AuthConfig(
        secret_key="unit-test-secret",
        jwt_algorithm="HS256",
        token_ttl_seconds=None,
        password_hash_rounds=1000,
    )


@pytest.fixture()
def reset_database() -> Iterator[None]:
    from messagely.infrastructure.db import ENGINE, Base, init_db

    Base.metadata.drop_all(bind=ENGINE)
    init_db()
    yield
    Base.metadata.drop_all(bind=ENGINE)

from __future__ import annotations

import pytest

from messagely.application.services.password_hashing import WerkzeugPasswordHasher


@pytest.fixture()
def hasher() -> WerkzeugPasswordHasher:
    return WerkzeugPasswordHasher(rounds=1000)


def test_hash_uses_configured_rounds_and_is_salted(hasher) -> None:
    first = hasher.hash("password1")
    second = hasher.hash("password1")

    assert first.startswith("pbkdf2:sha256:1000$")
    assert first != second
    assert "password1" not in first


def test_verify_matches_only_original_password(hasher) -> None:
    hashed = hasher.hash("password1")

    assert hasher.verify("password1", hashed) is True
    assert hasher.verify("password2", hashed) is False


def test_verify_malformed_hash_returns_false(hasher) -> None:
    assert hasher.verify("password1", "not-a-hash") is False
    assert hasher.verify("password1", "nosuchmethod$salt$abc") is False


def test_rounds_must_be_positive() -> None:
    with pytest.raises(ValueError):
        WerkzeugPasswordHasher(rounds=0)

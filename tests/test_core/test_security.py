"""Tests for password hashing and session tokens."""

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from app.core.config import settings
from app.core.exceptions import AuthenticationError
from app.core.security import (
    create_session_token,
    decode_session_token,
    hash_password,
    verify_password,
)


def test_hash_and_verify_password() -> None:
    hashed = hash_password("correct-horse")

    assert hashed != "correct-horse"
    assert hashed.startswith("$2")
    assert verify_password("correct-horse", hashed)
    assert not verify_password("wrong-horse", hashed)


def test_malformed_hash_never_verifies() -> None:
    assert verify_password("anything", "not-a-bcrypt-hash") is False


def test_session_token_round_trip() -> None:
    token = create_session_token(42)
    assert decode_session_token(token) == 42


def test_expired_token() -> None:
    past = datetime.now(UTC) - timedelta(days=1)
    token = jwt.encode(
        {"sub": "42", "iat": past - timedelta(days=7), "exp": past},
        settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
    )

    with pytest.raises(AuthenticationError, match="Session expired"):
        decode_session_token(token)


def test_token_signed_with_other_secret() -> None:
    token = create_session_token(42, secret="y" * 32)

    with pytest.raises(AuthenticationError, match="Invalid token"):
        decode_session_token(token)


@pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
def test_malformed_token(token: str) -> None:
    with pytest.raises(AuthenticationError):
        decode_session_token(token)


def test_token_without_numeric_subject() -> None:
    token = jwt.encode(
        {"sub": "admin", "exp": datetime.now(UTC) + timedelta(hours=1)},
        settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
    )

    with pytest.raises(AuthenticationError, match="Invalid token"):
        decode_session_token(token)

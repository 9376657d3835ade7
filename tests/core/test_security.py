"""Tests for password hashing and access tokens."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from core.config import Settings
from core.exceptions import UnauthorizedError
from core.models.rows import User
from core.security import (
    PasswordService,
    TokenClaims,
    create_token,
    create_user_token,
    decode_token,
)


@pytest.fixture
def settings() -> Settings:
    return Settings(secret_key="test-secret")


def test_hash_and_verify(passwords: PasswordService) -> None:
    hashed = passwords.hash("password1")

    assert hashed != "password1"
    assert passwords.verify(hashed, "password1")
    assert not passwords.verify(hashed, "password2")


def test_verify_invalid_hash(passwords: PasswordService) -> None:
    assert not passwords.verify("not-a-hash", "password1")


def test_token_round_trip(settings: Settings) -> None:
    token = create_token(TokenClaims(id=7, is_admin=True), settings)

    assert decode_token(token, settings) == TokenClaims(id=7, is_admin=True)


def test_token_carries_camel_case_claims(settings: Settings) -> None:
    token = create_token(TokenClaims(id=3), settings)

    payload = jwt.decode(token, "test-secret", algorithms=["HS256"])
    assert payload["id"] == 3
    assert payload["isAdmin"] is False
    assert "exp" in payload


def test_rejects_token_signed_with_other_key(settings: Settings) -> None:
    token = create_token(TokenClaims(id=1), Settings(secret_key="other"))

    with pytest.raises(UnauthorizedError):
        decode_token(token, settings)


def test_rejects_expired_token(settings: Settings) -> None:
    token = jwt.encode(
        {"id": 1, "exp": datetime.now(timezone.utc) - timedelta(minutes=1)},
        "test-secret",
        algorithm="HS256",
    )

    with pytest.raises(UnauthorizedError):
        decode_token(token, settings)


def test_rejects_token_without_id(settings: Settings) -> None:
    token = jwt.encode({"isAdmin": True}, "test-secret", algorithm="HS256")

    with pytest.raises(UnauthorizedError):
        decode_token(token, settings)


def test_rejects_garbage(settings: Settings) -> None:
    with pytest.raises(UnauthorizedError):
        decode_token("garbage", settings)


def test_user_token(settings: Settings) -> None:
    user = User(
        id=5,
        email="u5@email.com",
        password="hash",
        first_name="F",
        last_name="L",
        is_admin=True,
    )

    claims = decode_token(create_user_token(user, settings), settings)

    assert claims == TokenClaims(id=5, is_admin=True)


def test_user_token_requires_saved_user(settings: Settings) -> None:
    user = User(email="u5@email.com", password="hash", first_name="F", last_name="L")

    with pytest.raises(ValueError):
        create_user_token(user, settings)

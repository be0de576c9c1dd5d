"""Password hashing and access tokens."""

from greenpledge.config import get_settings
from greenpledge.infrastructure.security import (
    burn_verify_time, create_access_token, decode_access_token,
    hash_password, verify_password,
)


def test_hash_is_salted_and_verifiable():
    first = hash_password("secret1")
    second = hash_password("secret1")

    assert first != second
    assert verify_password("secret1", first)
    assert not verify_password("secret2", first)


def test_malformed_stored_hash_does_not_raise():
    assert verify_password("secret1", "not-a-bcrypt-hash") is False


def test_burn_verify_time_runs():
    burn_verify_time()


def test_token_round_trip():
    token = create_access_token("user-123")
    assert decode_access_token(token) == "user-123"


def test_tampered_token_rejected():
    token = create_access_token("user-123")
    assert decode_access_token(token[:-2] + "xx") is None
    assert decode_access_token("garbage") is None


def test_expired_token_rejected(monkeypatch):
    monkeypatch.setattr(get_settings(), "auth_token_ttl_minutes", -5)
    token = create_access_token("user-123")
    assert decode_access_token(token) is None

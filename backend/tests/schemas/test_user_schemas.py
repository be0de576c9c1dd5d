"""User Schemas — registration rules and the password-free public shape.

Invariants:
    - username >= 3 chars (after strip), password >= 6 chars, email valid
    - UserResponse has no password attribute and never serializes one
"""

from datetime import datetime, timezone
from uuid import uuid4

import pytest
from pydantic import ValidationError

from greenpledge.schemas.user import (
    LoginRequest, RegisterRequest, UserRecord, UserResponse,
)


def test_valid_registration():
    body = RegisterRequest.model_validate({
        "username": "  ranger  ", "email": "ranger@greenpledge.org", "password": "secret1",
    })
    assert body.username == "ranger"


@pytest.mark.parametrize("payload", [
    {"username": "ab", "email": "a@greenpledge.org", "password": "secret1"},
    {"username": "   ab   ", "email": "a@greenpledge.org", "password": "secret1"},
    {"username": "ranger", "email": "not-an-email", "password": "secret1"},
    {"username": "ranger", "email": "a@greenpledge.org", "password": "12345"},
    {"username": "ranger", "email": "a@greenpledge.org", "password": "x" * 73},
    {"username": "ranger", "password": "secret1"},
])
def test_invalid_registration_rejected(payload):
    with pytest.raises(ValidationError):
        RegisterRequest.model_validate(payload)


def test_login_has_no_length_rules():
    body = LoginRequest.model_validate({"username": "x", "password": "y"})
    assert (body.username, body.password) == ("x", "y")


def test_public_user_drops_password_hash():
    record = UserRecord(
        id=uuid4(), username="ranger", email="ranger@greenpledge.org",
        password_hash="$2b$04$hash", created_at=datetime.now(timezone.utc),
    )
    public = record.to_public()
    dumped = public.model_dump(mode="json", by_alias=True)
    assert set(dumped) == {"id", "username", "email", "createdAt"}
    assert not hasattr(public, "password_hash")
    assert isinstance(public, UserResponse)

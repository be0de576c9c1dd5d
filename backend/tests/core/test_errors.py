"""Error Hierarchy — verifies status codes and envelope shape per error type.

Invariants:
    - Every error serializes to {"error": {code, message, category, severity, ...}}
    - Duplicate user is 400 with a field-specific message
    - Invalid credentials never mention which part was wrong
"""

import pytest

from greenpledge.core.errors import (
    AuthenticationRequiredError, DatabaseError, DuplicateUserError,
    ErrorCategory, GreenPledgeError, InvalidCredentialsError,
    ProjectHasPledgesError, ReferentialIntegrityError, ResourceNotFoundError,
)


@pytest.mark.parametrize("error, status", [
    (ResourceNotFoundError("Project", "abc"), 404),
    (DuplicateUserError("username"), 400),
    (ReferentialIntegrityError("Project", "abc"), 400),
    (ProjectHasPledgesError("abc"), 409),
    (InvalidCredentialsError(), 401),
    (AuthenticationRequiredError(), 401),
    (DatabaseError("boom", "commit"), 500),
])
def test_http_status_per_error(error, status):
    assert isinstance(error, GreenPledgeError)
    assert error.http_status == status


def test_to_response_envelope_shape():
    body = ResourceNotFoundError("Project", "abc").to_response()
    error = body["error"]
    assert error["code"] == "RESOURCE_NOT_FOUND"
    assert error["message"] == "Project not found"
    assert error["category"] == "resource_not_found"
    assert error["severity"] == "error"
    assert error["context"]["resource_id"] == "abc"
    assert "timestamp" in error


def test_duplicate_user_messages_name_the_field():
    assert DuplicateUserError("username").message == "Username already exists"
    assert DuplicateUserError("email").message == "Email already exists"
    assert DuplicateUserError("email").category == ErrorCategory.CONFLICT


def test_invalid_credentials_message_is_generic():
    message = InvalidCredentialsError().message.lower()
    assert message == "invalid credentials"
    assert "password" not in message
    assert "user" not in message

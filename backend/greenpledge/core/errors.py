"""Error Hierarchy — typed, categorized exceptions for all GreenPledge failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope used by every error response
    - No internal details leaked in user-facing messages
    - Login failures share one message whether the user is unknown or the password is wrong

Design Decisions:
    - Single hierarchy with GreenPledgeError base: FastAPI global handler catches all
      (uniform error shape)
    - Duplicate username/email is a conflict by category but surfaces as 400 to keep
      the registration contract stable for existing clients
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    AUTHENTICATION = "authentication"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and the response envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource_id: str | None = None
    field: str | None = None
    debug_info: dict[str, Any] | None = None


class GreenPledgeError(Exception):
    """Base exception for all GreenPledge errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "resource_id": self.context.resource_id,
                    "field": self.context.field,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(GreenPledgeError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_id = resource_id
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.resource_type = resource_type


class DuplicateUserError(GreenPledgeError):
    """Username or email already registered."""
    def __init__(self, field_name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field = field_name
        label = "Username" if field_name == "username" else "Email"
        super().__init__(
            f"{label} already exists",
            "DUPLICATE_USER", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.field = field_name


class ReferentialIntegrityError(GreenPledgeError):
    """A foreign reference points to a record that does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_id = resource_id
        super().__init__(
            f"Referenced {resource_type.lower()} does not exist",
            "REFERENTIAL_INTEGRITY", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.resource_type = resource_type


class ProjectHasPledgesError(GreenPledgeError):
    """Project cannot be deleted while pledges reference it."""
    def __init__(self, project_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.resource_id = project_id
        super().__init__(
            "Project has pledges and cannot be deleted",
            "PROJECT_HAS_PLEDGES", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx, 409,
        )


class InvalidCredentialsError(GreenPledgeError):
    """Login failed. Deliberately silent about which part was wrong."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid credentials",
            "INVALID_CREDENTIALS", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class AuthenticationRequiredError(GreenPledgeError):
    """Mutating endpoint called without a valid bearer token."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Authentication required",
            "AUTHENTICATION_REQUIRED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(GreenPledgeError):
    """Database operation failed. The caller sees only the generic message."""
    def __init__(self, detail: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            "An unexpected error occurred",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.detail = detail
        self.operation = operation

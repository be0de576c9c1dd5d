"""User Schemas — registration, login and public/internal user shapes.

Invariants:
    - RegisterRequest.username: >= 3 chars after stripping
    - RegisterRequest.password: >= 6 chars and <= 72 bytes (bcrypt input limit)
    - RegisterRequest.email: valid address (EmailStr)
    - UserResponse never carries the password hash; UserRecord is internal only

Design Decisions:
    - UserCreate carries the already-hashed password: storage never sees plaintext
    - LoginRequest has no length rules: a short password is just a wrong password,
      and rejecting it early would leak which rule failed
"""

from datetime import datetime
from uuid import UUID

from pydantic import EmailStr, Field, field_validator

from greenpledge.schemas.base import CamelModel

BCRYPT_MAX_PASSWORD_BYTES = 72


class RegisterRequest(CamelModel):
    """Registration body — validated before the password is hashed."""
    username: str = Field(min_length=3, max_length=100)
    email: EmailStr
    password: str = Field(min_length=6)

    @field_validator("username", mode="before")
    @classmethod
    def strip_username(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("password")
    @classmethod
    def check_password_bytes(cls, v: str) -> str:
        if len(v.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
            raise ValueError(
                f"password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes",
            )
        return v


class LoginRequest(CamelModel):
    """Login body."""
    username: str
    password: str

    @field_validator("username", mode="before")
    @classmethod
    def strip_username(cls, v):
        return v.strip() if isinstance(v, str) else v


class UserCreate(CamelModel):
    """Storage insert shape — password already hashed."""
    username: str = Field(min_length=3)
    email: str
    password_hash: str = Field(min_length=1)


class UserRecord(CamelModel):
    """Internal user entity, including the stored hash."""
    id: UUID
    username: str
    email: str
    password_hash: str
    created_at: datetime | None = None

    def to_public(self) -> "UserResponse":
        return UserResponse(
            id=self.id, username=self.username,
            email=self.email, created_at=self.created_at,
        )


class UserResponse(CamelModel):
    """Outward-facing user — no password field exists on this shape."""
    id: UUID
    username: str
    email: str
    created_at: datetime | None = None

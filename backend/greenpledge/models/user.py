"""User ORM — identity record created at registration.

Invariants:
    - username and email are each unique (DB constraints)
    - password column holds a bcrypt hash, never plaintext
    - No update or delete path exists
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from greenpledge.db.base import Base


class User(Base):
    """Registered user."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    username: Mapped[str] = mapped_column(
        String(100), nullable=False, unique=True,
    )
    email: Mapped[str] = mapped_column(
        String(320), nullable=False, unique=True,
    )
    password_hash: Mapped[str] = mapped_column(
        "password", Text, nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    pledges: Mapped[list["Pledge"]] = relationship(
        "Pledge", back_populates="user", passive_deletes="all",
    )

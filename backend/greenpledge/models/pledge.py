"""Pledge ORM — an immutable contribution to a project.

Invariants:
    - project_id is a NOT NULL FK to projects (RESTRICT on delete)
    - user_id is a nullable FK to users (anonymous pledges allowed)
    - amount is Numeric(10, 2) and strictly positive (enforced by schemas)
"""

import uuid
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import Text, Numeric, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from greenpledge.db.base import Base


class Pledge(Base):
    """Pledge entity — one contribution, optionally attributed to a user."""
    __tablename__ = "pledges"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id"), nullable=True, index=True,
    )
    project_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("projects.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    trees_count: Mapped[Decimal | None] = mapped_column(
        Numeric(10, 0), nullable=True,
    )
    message: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    project: Mapped["Project"] = relationship(
        "Project", back_populates="pledges",
    )
    user: Mapped["User | None"] = relationship(
        "User", back_populates="pledges",
    )

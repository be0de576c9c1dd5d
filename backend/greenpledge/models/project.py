"""Project ORM — a conservation initiative shown on the map and list.

Invariants:
    - latitude/longitude are NOT NULL Numeric(10, 7)
    - project_type in ProjectType, status in ProjectStatus (enforced by schemas)
    - Cannot be deleted while pledges reference it (no cascade on pledges FK)

Design Decisions:
    - Numeric columns, not Float: decimal strings on the wire round-trip exactly
    - JSON column for geometry (JSONB on PostgreSQL): stores GeoJSON as-is
"""

import uuid
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import String, Text, Numeric, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import JSONB, UUID

from greenpledge.core.domain_types import ProjectStatus
from greenpledge.db.base import Base


class Project(Base):
    """Conservation project."""
    __tablename__ = "projects"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    location: Mapped[str] = mapped_column(Text, nullable=False)
    latitude: Mapped[Decimal] = mapped_column(Numeric(10, 7), nullable=False)
    longitude: Mapped[Decimal] = mapped_column(Numeric(10, 7), nullable=False)
    project_type: Mapped[str] = mapped_column(String(20), nullable=False)
    area: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    trees_planted: Mapped[Decimal | None] = mapped_column(
        Numeric(12, 0), nullable=True,
    )
    co2_offset: Mapped[Decimal | None] = mapped_column(
        Numeric(12, 2), nullable=True,
    )
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    start_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=ProjectStatus.ACTIVE.value,
    )
    geometry: Mapped[dict | None] = mapped_column(
        JSON().with_variant(JSONB(), "postgresql"), nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    pledges: Mapped[list["Pledge"]] = relationship(
        "Pledge", back_populates="project", passive_deletes="all",
    )

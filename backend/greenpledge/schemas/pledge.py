"""Pledge Schemas — insert and entity shapes for contributions.

Invariants:
    - amount > 0 with at most 2 decimal places
    - treesCount integer-valued and >= 0 when present
    - message <= 500 chars
    - projectId required, userId optional (anonymous pledges)
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated
from uuid import UUID

from pydantic import Field, field_validator

from greenpledge.core.domain_types import PLEDGE_MESSAGE_MAX_LENGTH
from greenpledge.schemas.base import CamelModel

Amount = Annotated[Decimal, Field(gt=0, max_digits=10, decimal_places=2)]
TreeCount = Annotated[Decimal, Field(ge=0, max_digits=10, decimal_places=0)]


class PledgeCreate(CamelModel):
    """Insert shape for a pledge."""
    user_id: UUID | None = None
    project_id: UUID
    amount: Amount
    trees_count: TreeCount | None = None
    message: str | None = Field(None, max_length=PLEDGE_MESSAGE_MAX_LENGTH)

    @field_validator("user_id", "trees_count", "message", mode="before")
    @classmethod
    def blank_optional_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class PledgeResponse(CamelModel):
    """Pledge entity as stored."""
    id: UUID
    user_id: UUID | None = None
    project_id: UUID
    amount: Decimal
    trees_count: Decimal | None = None
    message: str | None = None
    created_at: datetime | None = None

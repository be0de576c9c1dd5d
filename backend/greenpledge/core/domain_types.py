"""Domain Types — identity aliases and enumerations shared across layers.

Invariants:
    - UserId, ProjectId, PledgeId wrap UUIDs
    - ProjectType and ProjectStatus are closed sets; no raw string matching elsewhere
    - Coordinate bounds defined once here and reused by schemas and tests

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders and store as plain text
"""

from decimal import Decimal
from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)
ProjectId = NewType("ProjectId", UUID)
PledgeId = NewType("PledgeId", UUID)


# ─── Value Bounds ────────────────────────────────────────────────

MIN_LATITUDE = Decimal("-90")
MAX_LATITUDE = Decimal("90")
MIN_LONGITUDE = Decimal("-180")
MAX_LONGITUDE = Decimal("180")

PLEDGE_MESSAGE_MAX_LENGTH = 500


# ─── Enums ───────────────────────────────────────────────────────

class ProjectType(str, Enum):
    """Kind of conservation initiative — maps to DB `project_type` column."""
    REFORESTATION = "reforestation"
    CONSERVATION = "conservation"
    RESTORATION = "restoration"
    AFFORESTATION = "afforestation"


class ProjectStatus(str, Enum):
    """Project lifecycle states — maps to DB `status` column."""
    ACTIVE = "active"
    COMPLETED = "completed"
    PLANNED = "planned"


# ─── Wire Constants ──────────────────────────────────────────────

ACCESS_TOKEN_HEADER = "X-Access-Token"

"""Project Schemas — insert, update and entity shapes for conservation projects.

Invariants:
    - ProjectCreate.name: >= 3 chars; description: >= 10 chars; location non-empty
    - latitude in [-90, 90], longitude in [-180, 180]; NaN/Infinity rejected
    - area, treesPlanted, co2Offset >= 0; treesPlanted integer-valued
    - Decimal precision matches the stored column scale; extra digits are an error,
      never silently rounded
    - imageUrl must be an http(s) URL; "" is treated as absent
    - ProjectUpdate: every field optional, same per-field rules, explicit null
      rejected for non-nullable columns

Design Decisions:
    - Decimal over float end to end: coordinates and tonnage keep their exact digits
    - ProjectUpdate declared independently of ProjectCreate (no .partial() derivation)
      so the storage schema and the API contract can drift separately
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any
from uuid import UUID

from pydantic import (
    ConfigDict, Field, HttpUrl, TypeAdapter, ValidationError,
    field_validator, model_validator,
)

from greenpledge.core.domain_types import (
    MAX_LATITUDE, MAX_LONGITUDE, MIN_LATITUDE, MIN_LONGITUDE,
    ProjectStatus, ProjectType,
)
from greenpledge.schemas.base import CamelModel

Latitude = Annotated[
    Decimal,
    Field(ge=MIN_LATITUDE, le=MAX_LATITUDE, max_digits=10, decimal_places=7),
]
Longitude = Annotated[
    Decimal,
    Field(ge=MIN_LONGITUDE, le=MAX_LONGITUDE, max_digits=10, decimal_places=7),
]
Hectares = Annotated[Decimal, Field(ge=0, max_digits=10, decimal_places=2)]
Tonnes = Annotated[Decimal, Field(ge=0, max_digits=12, decimal_places=2)]
TreeTotal = Annotated[Decimal, Field(ge=0, max_digits=12, decimal_places=0)]

_HTTP_URL = TypeAdapter(HttpUrl)

# Columns that are NOT NULL in the projects table
NON_NULLABLE_FIELDS = frozenset({
    "name", "description", "location", "latitude", "longitude",
    "project_type", "status",
})


def _blank_to_none(v):
    if isinstance(v, str) and not v.strip():
        return None
    return v


def _check_image_url(v: str | None) -> str | None:
    if v is None:
        return v
    try:
        _HTTP_URL.validate_python(v)
    except ValidationError:
        raise ValueError("imageUrl must be a valid http(s) URL")
    return v


class ProjectCreate(CamelModel):
    """Insert shape — everything a caller may supply when creating a project."""
    model_config = ConfigDict(use_enum_values=True)

    name: str = Field(min_length=3, max_length=200)
    description: str = Field(min_length=10)
    location: str = Field(min_length=1)
    latitude: Latitude
    longitude: Longitude
    project_type: ProjectType
    area: Hectares | None = None
    trees_planted: TreeTotal | None = None
    co2_offset: Tonnes | None = None
    image_url: str | None = None
    start_date: datetime | None = None
    status: ProjectStatus = Field(ProjectStatus.ACTIVE, validate_default=True)
    geometry: dict[str, Any] | None = None

    @field_validator("area", "trees_planted", "co2_offset", "image_url", mode="before")
    @classmethod
    def blank_optional_to_none(cls, v):
        return _blank_to_none(v)

    @field_validator("image_url")
    @classmethod
    def validate_image_url(cls, v: str | None) -> str | None:
        return _check_image_url(v)


class ProjectUpdate(CamelModel):
    """Partial update shape — omitted fields are left untouched by storage."""
    model_config = ConfigDict(use_enum_values=True)

    name: str | None = Field(None, min_length=3, max_length=200)
    description: str | None = Field(None, min_length=10)
    location: str | None = Field(None, min_length=1)
    latitude: Latitude | None = None
    longitude: Longitude | None = None
    project_type: ProjectType | None = None
    area: Hectares | None = None
    trees_planted: TreeTotal | None = None
    co2_offset: Tonnes | None = None
    image_url: str | None = None
    start_date: datetime | None = None
    status: ProjectStatus | None = None
    geometry: dict[str, Any] | None = None

    @field_validator("area", "trees_planted", "co2_offset", "image_url", mode="before")
    @classmethod
    def blank_optional_to_none(cls, v):
        return _blank_to_none(v)

    @field_validator("image_url")
    @classmethod
    def validate_image_url(cls, v: str | None) -> str | None:
        return _check_image_url(v)

    @model_validator(mode="after")
    def reject_null_required_fields(self):
        nulled = sorted(
            name for name in self.model_fields_set
            if name in NON_NULLABLE_FIELDS and getattr(self, name) is None
        )
        if nulled:
            raise ValueError(f"fields cannot be null: {', '.join(nulled)}")
        return self

    def to_changes(self) -> dict[str, Any]:
        """Only the fields the caller actually sent."""
        return self.model_dump(exclude_unset=True)


class ProjectResponse(CamelModel):
    """Project entity as stored, with server-assigned id and timestamp."""
    id: UUID
    name: str
    description: str
    location: str
    latitude: Decimal
    longitude: Decimal
    project_type: ProjectType
    area: Decimal | None = None
    trees_planted: Decimal | None = None
    co2_offset: Decimal | None = None
    image_url: str | None = None
    start_date: datetime | None = None
    status: ProjectStatus = ProjectStatus.ACTIVE
    geometry: dict[str, Any] | None = None
    created_at: datetime | None = None

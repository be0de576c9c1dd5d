"""Schema Base — camelCase wire format shared by every request/response shape.

Invariants:
    - JSON keys are camelCase; Python attributes stay snake_case
    - Either spelling is accepted on input (populate_by_name)
    - Unknown keys are ignored, never stored

Design Decisions:
    - alias_generator over per-field aliases: one rule for the whole API
    - from_attributes: entity shapes validate straight from ORM rows
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for all API shapes."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        extra="ignore",
    )

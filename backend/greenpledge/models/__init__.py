"""ORM Models — SQLAlchemy declarative models for users, projects and pledges.

Invariants:
    - All models inherit from Base (db/base.py)
    - Pledge references Project (required) and User (optional)

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from greenpledge.models.user import User  # noqa: F401
from greenpledge.models.project import Project  # noqa: F401
from greenpledge.models.pledge import Pledge  # noqa: F401

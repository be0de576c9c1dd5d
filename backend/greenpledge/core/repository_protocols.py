"""Boundary Protocols — the storage contract between routes and the relational store.

Invariants:
    - Routes reach the store ONLY through Storage; no route builds SQL
    - Lookups return None for absence (never raise); malformed ids count as absent
    - Mutations return full entities including server-assigned id and createdAt
    - update_project merges: fields the caller did not send stay unchanged
    - create_pledge raises ReferentialIntegrityError for an unknown project/user
    - create_user raises DuplicateUserError for a taken username/email
    - create_projects is all-or-nothing: one transaction for the whole batch

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO
    - Schema types imported for type checking only: core never imports the API layer
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from greenpledge.schemas.pledge import PledgeCreate, PledgeResponse
    from greenpledge.schemas.project import (
        ProjectCreate, ProjectResponse, ProjectUpdate,
    )
    from greenpledge.schemas.user import UserCreate, UserRecord


class Storage(Protocol):
    """Contract for all entity persistence — implemented by infrastructure."""

    # Users
    async def get_user(self, user_id: str) -> UserRecord | None: ...
    async def get_user_by_username(self, username: str) -> UserRecord | None: ...
    async def get_user_by_email(self, email: str) -> UserRecord | None: ...
    async def create_user(self, data: UserCreate) -> UserRecord: ...

    # Projects
    async def get_all_projects(self) -> list[ProjectResponse]: ...
    async def count_projects(self) -> int: ...
    async def get_project(self, project_id: str) -> ProjectResponse | None: ...
    async def create_project(self, data: ProjectCreate) -> ProjectResponse: ...
    async def create_projects(
        self, items: list[ProjectCreate],
    ) -> list[ProjectResponse]: ...
    async def update_project(
        self, project_id: str, data: ProjectUpdate,
    ) -> ProjectResponse | None: ...
    async def delete_project(self, project_id: str) -> bool: ...

    # Pledges
    async def get_all_pledges(self) -> list[PledgeResponse]: ...
    async def get_pledges_by_user(self, user_id: str) -> list[PledgeResponse]: ...
    async def get_pledges_by_project(
        self, project_id: str,
    ) -> list[PledgeResponse]: ...
    async def create_pledge(self, data: PledgeCreate) -> PledgeResponse: ...

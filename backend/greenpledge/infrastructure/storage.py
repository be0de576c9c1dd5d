"""DbStorage — SQLAlchemy implementation of the Storage protocol.

Invariants:
    - One DbStorage per request, bound to that request's AsyncSession
    - Every mutation commits its own transaction; an IntegrityError is rolled back
      and re-raised as the matching domain error
    - Returned values are schema entities, never live ORM rows
    - Ids that are not valid UUIDs are treated as absent, not as errors

Design Decisions:
    - Uniqueness and foreign keys pre-checked with SELECTs so callers get a specific
      error; the DB constraints still catch races between check and insert
    - delete_project uses a Core DELETE: no relationship loading in async context
    - Pledges block project deletion (ProjectHasPledgesError) because pledges are
      never deleted by any operation
"""

import logging
import uuid
from typing import Any

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from greenpledge.core.errors import (
    DuplicateUserError, ProjectHasPledgesError, ReferentialIntegrityError,
)
from greenpledge.models.pledge import Pledge as PledgeModel
from greenpledge.models.project import Project as ProjectModel
from greenpledge.models.user import User as UserModel
from greenpledge.schemas.pledge import PledgeCreate, PledgeResponse
from greenpledge.schemas.project import (
    ProjectCreate, ProjectResponse, ProjectUpdate,
)
from greenpledge.schemas.user import UserCreate, UserRecord

logger = logging.getLogger(__name__)


def parse_id(value: Any) -> uuid.UUID | None:
    """Coerce an opaque id to UUID; None when it cannot be one."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (ValueError, TypeError, AttributeError):
        return None


class DbStorage:
    """Storage backed by the relational store through one AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    # ─── Users ──────────────────────────────────────────────────

    async def get_user(self, user_id: str) -> UserRecord | None:
        uid = parse_id(user_id)
        if uid is None:
            return None
        return await self._find_user(UserModel.id == uid)

    async def get_user_by_username(self, username: str) -> UserRecord | None:
        return await self._find_user(UserModel.username == username)

    async def get_user_by_email(self, email: str) -> UserRecord | None:
        return await self._find_user(UserModel.email == email)

    async def create_user(self, data: UserCreate) -> UserRecord:
        if await self.get_user_by_username(data.username):
            raise DuplicateUserError("username")
        if await self.get_user_by_email(data.email):
            raise DuplicateUserError("email")

        user = UserModel(
            username=data.username,
            email=data.email,
            password_hash=data.password_hash,
        )
        self._db.add(user)
        try:
            await self._db.commit()
        except IntegrityError:
            await self._db.rollback()
            # Lost a race with a concurrent registration
            taken = await self.get_user_by_username(data.username)
            raise DuplicateUserError("username" if taken else "email")
        await self._db.refresh(user)
        logger.info("User created", extra={"user_id": str(user.id)})
        return UserRecord.model_validate(user)

    async def _find_user(self, clause) -> UserRecord | None:
        result = await self._db.execute(select(UserModel).where(clause))
        user = result.scalar_one_or_none()
        return UserRecord.model_validate(user) if user else None

    # ─── Projects ───────────────────────────────────────────────

    async def get_all_projects(self) -> list[ProjectResponse]:
        result = await self._db.execute(
            select(ProjectModel).order_by(ProjectModel.created_at),
        )
        return [ProjectResponse.model_validate(p) for p in result.scalars().all()]

    async def count_projects(self) -> int:
        return await self._db.scalar(
            select(func.count()).select_from(ProjectModel),
        )

    async def get_project(self, project_id: str) -> ProjectResponse | None:
        project = await self._get_project_row(project_id)
        return ProjectResponse.model_validate(project) if project else None

    async def create_project(self, data: ProjectCreate) -> ProjectResponse:
        project = ProjectModel(**data.model_dump())
        self._db.add(project)
        await self._db.commit()
        await self._db.refresh(project)
        logger.info("Project created", extra={"project_id": str(project.id)})
        return ProjectResponse.model_validate(project)

    async def create_projects(
        self, items: list[ProjectCreate],
    ) -> list[ProjectResponse]:
        """Insert every item in one transaction, or none of them."""
        projects = [ProjectModel(**item.model_dump()) for item in items]
        try:
            for project in projects:
                self._db.add(project)
                await self._db.flush()
            await self._db.commit()
        except Exception:
            await self._db.rollback()
            raise
        logger.info("Projects created", extra={"count": len(projects)})
        return [ProjectResponse.model_validate(p) for p in projects]

    async def update_project(
        self, project_id: str, data: ProjectUpdate,
    ) -> ProjectResponse | None:
        project = await self._get_project_row(project_id)
        if project is None:
            return None
        for key, value in data.to_changes().items():
            setattr(project, key, value)
        await self._db.commit()
        await self._db.refresh(project)
        logger.info("Project updated", extra={"project_id": str(project.id)})
        return ProjectResponse.model_validate(project)

    async def delete_project(self, project_id: str) -> bool:
        pid = parse_id(project_id)
        if pid is None or await self._get_project_row(pid) is None:
            return False

        pledge_count = await self._db.scalar(
            select(func.count())
            .select_from(PledgeModel)
            .where(PledgeModel.project_id == pid),
        )
        if pledge_count:
            raise ProjectHasPledgesError(str(pid))

        try:
            result = await self._db.execute(
                delete(ProjectModel).where(ProjectModel.id == pid),
            )
            await self._db.commit()
        except IntegrityError:
            await self._db.rollback()
            # A pledge arrived between the count and the delete
            raise ProjectHasPledgesError(str(pid))
        deleted = result.rowcount > 0
        if deleted:
            logger.info("Project deleted", extra={"project_id": str(pid)})
        return deleted

    async def _get_project_row(self, project_id: Any) -> ProjectModel | None:
        pid = parse_id(project_id)
        if pid is None:
            return None
        result = await self._db.execute(
            select(ProjectModel).where(ProjectModel.id == pid),
        )
        return result.scalar_one_or_none()

    # ─── Pledges ────────────────────────────────────────────────

    async def get_all_pledges(self) -> list[PledgeResponse]:
        return await self._find_pledges()

    async def get_pledges_by_user(self, user_id: str) -> list[PledgeResponse]:
        uid = parse_id(user_id)
        if uid is None:
            return []
        return await self._find_pledges(PledgeModel.user_id == uid)

    async def get_pledges_by_project(
        self, project_id: str,
    ) -> list[PledgeResponse]:
        pid = parse_id(project_id)
        if pid is None:
            return []
        return await self._find_pledges(PledgeModel.project_id == pid)

    async def create_pledge(self, data: PledgeCreate) -> PledgeResponse:
        if await self._get_project_row(data.project_id) is None:
            raise ReferentialIntegrityError("Project", str(data.project_id))
        if data.user_id is not None and await self.get_user(data.user_id) is None:
            raise ReferentialIntegrityError("User", str(data.user_id))

        pledge = PledgeModel(**data.model_dump())
        self._db.add(pledge)
        try:
            await self._db.commit()
        except IntegrityError:
            await self._db.rollback()
            # Project deleted between the check and the insert
            raise ReferentialIntegrityError("Project", str(data.project_id))
        await self._db.refresh(pledge)
        logger.info(
            "Pledge created",
            extra={"pledge_id": str(pledge.id), "project_id": str(pledge.project_id)},
        )
        return PledgeResponse.model_validate(pledge)

    async def _find_pledges(self, *clauses) -> list[PledgeResponse]:
        query = select(PledgeModel).order_by(PledgeModel.created_at)
        if clauses:
            query = query.where(*clauses)
        result = await self._db.execute(query)
        return [PledgeResponse.model_validate(p) for p in result.scalars().all()]

"""Project Routes — public catalog reads and admin create/update/delete.

Invariants:
    - Bodies validated by ProjectCreate / ProjectUpdate before reaching storage
    - Unknown or malformed ids → 404 (never 400 or 500)
    - PATCH merges; DELETE answers 204 with an empty body
    - Mutations pass through require_mutation_auth (enforced only when configured)
"""

from fastapi import APIRouter, Depends, Response, status

from greenpledge.api.deps import get_storage, require_mutation_auth
from greenpledge.core.errors import ResourceNotFoundError
from greenpledge.infrastructure.storage import DbStorage
from greenpledge.schemas.project import (
    ProjectCreate, ProjectResponse, ProjectUpdate,
)
from greenpledge.schemas.user import UserRecord

router = APIRouter(prefix="/api/projects", tags=["projects"])


@router.get("", response_model=list[ProjectResponse])
async def list_projects(storage: DbStorage = Depends(get_storage)):
    """All projects, oldest first."""
    return await storage.get_all_projects()


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: str, storage: DbStorage = Depends(get_storage),
):
    project = await storage.get_project(project_id)
    if project is None:
        raise ResourceNotFoundError("Project", project_id)
    return project


@router.post(
    "", response_model=ProjectResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_project(
    body: ProjectCreate,
    _caller: UserRecord | None = Depends(require_mutation_auth),
    storage: DbStorage = Depends(get_storage),
):
    return await storage.create_project(body)


@router.patch("/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: str,
    body: ProjectUpdate,
    _caller: UserRecord | None = Depends(require_mutation_auth),
    storage: DbStorage = Depends(get_storage),
):
    """Merge the sent fields into the stored project."""
    project = await storage.update_project(project_id, body)
    if project is None:
        raise ResourceNotFoundError("Project", project_id)
    return project


@router.delete(
    "/{project_id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_project(
    project_id: str,
    _caller: UserRecord | None = Depends(require_mutation_auth),
    storage: DbStorage = Depends(get_storage),
):
    if not await storage.delete_project(project_id):
        raise ResourceNotFoundError("Project", project_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

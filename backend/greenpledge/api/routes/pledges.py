"""Pledge Routes — filtered listing and creation.

Invariants:
    - ?userId= takes precedence over ?projectId=; neither → all pledges
    - A pledge for a missing project is a 400 (ReferentialIntegrityError), not a 404
"""

from fastapi import APIRouter, Depends, Query, status

from greenpledge.api.deps import get_storage
from greenpledge.infrastructure.storage import DbStorage
from greenpledge.schemas.pledge import PledgeCreate, PledgeResponse

router = APIRouter(prefix="/api/pledges", tags=["pledges"])


@router.get("", response_model=list[PledgeResponse])
async def list_pledges(
    user_id: str | None = Query(None, alias="userId"),
    project_id: str | None = Query(None, alias="projectId"),
    storage: DbStorage = Depends(get_storage),
):
    if user_id:
        return await storage.get_pledges_by_user(user_id)
    if project_id:
        return await storage.get_pledges_by_project(project_id)
    return await storage.get_all_pledges()


@router.post(
    "", response_model=PledgeResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_pledge(
    body: PledgeCreate, storage: DbStorage = Depends(get_storage),
):
    return await storage.create_pledge(body)

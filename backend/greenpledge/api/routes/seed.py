"""Seed Route — populate an empty catalog with demo projects."""

from fastapi import APIRouter, Depends

from greenpledge.api.deps import get_storage
from greenpledge.infrastructure.storage import DbStorage
from greenpledge.services.seeding import seed_projects

router = APIRouter(prefix="/api/seed", tags=["seed"])


@router.post("")
async def seed(storage: DbStorage = Depends(get_storage)):
    result = await seed_projects(storage)
    return result.to_response()

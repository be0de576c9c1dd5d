"""Catalog Seeding — fills an empty project catalog with the demo projects.

Invariants:
    - Runs only when the projects table is empty; a second call is a no-op
    - Each seed entry goes through ProjectCreate like any API payload
    - All entries are inserted in one transaction: a failure leaves the catalog
      empty, so a later seed can still run
"""

import logging
from dataclasses import dataclass

from greenpledge.core.repository_protocols import Storage
from greenpledge.core.seed_data import SEED_PROJECTS
from greenpledge.schemas.project import ProjectCreate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeedResult:
    seeded: bool
    count: int

    def to_response(self) -> dict:
        if not self.seeded:
            return {"message": "Database already seeded"}
        return {"message": "Database seeded successfully", "count": self.count}


async def seed_projects(storage: Storage) -> SeedResult:
    """Insert the demo projects unless any project already exists."""
    if await storage.count_projects() > 0:
        logger.info("Seed skipped: catalog already populated")
        return SeedResult(seeded=False, count=0)

    await storage.create_projects(
        [ProjectCreate.model_validate(entry) for entry in SEED_PROJECTS],
    )
    logger.info("Catalog seeded", extra={"count": len(SEED_PROJECTS)})
    return SeedResult(seeded=True, count=len(SEED_PROJECTS))

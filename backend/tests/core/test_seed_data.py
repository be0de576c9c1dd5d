"""Seed Data — every demo entry is a valid project payload.

Invariants:
    - Exactly six entries with distinct names
    - All entries pass ProjectCreate validation
"""

import pytest

from greenpledge.core.seed_data import SEED_PROJECTS
from greenpledge.schemas.project import ProjectCreate


def test_six_distinct_seed_projects():
    assert len(SEED_PROJECTS) == 6
    assert len({p["name"] for p in SEED_PROJECTS}) == 6


@pytest.mark.parametrize("entry", SEED_PROJECTS, ids=lambda p: p["name"])
def test_seed_entry_is_valid_project(entry):
    project = ProjectCreate.model_validate(entry)
    assert project.name == entry["name"]
    assert str(project.latitude) == entry["latitude"]


def test_one_seed_project_is_completed():
    statuses = [p["status"] for p in SEED_PROJECTS]
    assert statuses.count("completed") == 1

"""GreenPledgeClient — typed calls against the app, cache hits and invalidation.

Scenario:
    - repeated GETs are answered from the cache (no second request)
    - a mutation drops every cached key of its collection
    - errors raise ApiRequestError and leave the cache as it was
    - register/login set the identity; its token is sent as a bearer header
"""

from decimal import Decimal
from uuid import uuid4

import pytest
from httpx import ASGITransport

from greenpledge.client import api_client as client_module
from greenpledge.client.api_client import (
    ApiRequestError, GreenPledgeClient, estimate_trees,
)
from greenpledge.main import app
from greenpledge.schemas.project import ProjectCreate


class RecordingTransport(ASGITransport):
    """ASGITransport that remembers every request it forwards."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.requests = []

    async def handle_async_request(self, request):
        self.requests.append(request)
        return await super().handle_async_request(request)


@pytest.fixture
def transport(client):
    # `client` installs the test database overrides on the app
    return RecordingTransport(app=app)


@pytest.fixture
async def api(transport):
    async with GreenPledgeClient("http://test", transport=transport) as c:
        yield c


async def test_list_projects_served_from_cache(api, transport, project_payload):
    assert await api.list_projects() == []
    assert await api.list_projects() == []
    assert len(transport.requests) == 1
    assert "/api/projects" in api.cache


async def test_create_invalidates_project_collection(api, project_payload):
    await api.list_projects()

    created = await api.create_project(ProjectCreate.model_validate(project_payload))
    assert "/api/projects" not in api.cache

    projects = await api.list_projects()
    assert [p.id for p in projects] == [created.id]
    assert projects[0].latitude == Decimal("10.3009")


async def test_update_refreshes_cached_detail(api, project_payload):
    created = await api.create_project(project_payload)
    await api.get_project(str(created.id))

    updated = await api.update_project(str(created.id), {"status": "completed"})
    assert updated.status == "completed"
    assert f"/api/projects/{created.id}" not in api.cache
    assert (await api.get_project(str(created.id))).status == "completed"


async def test_delete_and_missing_project(api, project_payload):
    created = await api.create_project(project_payload)
    await api.delete_project(str(created.id))

    with pytest.raises(ApiRequestError) as exc:
        await api.get_project(str(created.id))
    assert exc.value.status_code == 404
    assert exc.value.code == "RESOURCE_NOT_FOUND"
    assert f"/api/projects/{created.id}" not in api.cache


async def test_failed_mutation_keeps_cache(api, transport):
    await api.list_projects()
    with pytest.raises(ApiRequestError) as exc:
        await api.create_project({"name": "x"})
    assert exc.value.status_code == 400
    assert "/api/projects" in api.cache

    # Sent exactly once: no retries
    posts = [r for r in transport.requests if r.method == "POST"]
    assert len(posts) == 1


async def test_pledge_defaults_trees_from_amount(api, project_payload):
    project = await api.create_project(project_payload)

    pledge = await api.create_pledge({"projectId": str(project.id), "amount": "52.00"})
    assert pledge.trees_count == Decimal("10")

    listed = await api.list_pledges(project_id=str(project.id))
    assert [p.id for p in listed] == [pledge.id]
    assert f"/api/pledges?projectId={project.id}" in api.cache

    await api.create_pledge({"projectId": str(project.id), "amount": "5"})
    assert f"/api/pledges?projectId={project.id}" not in api.cache


async def test_pledge_to_unknown_project(api):
    with pytest.raises(ApiRequestError) as exc:
        await api.create_pledge({"projectId": str(uuid4()), "amount": "5"})
    assert exc.value.code == "REFERENTIAL_INTEGRITY"


async def test_register_sets_identity_and_sends_token(api, transport):
    assert not api.is_authenticated

    user = await api.register("ranger", "ranger@greenpledge.org", "secret1")
    assert api.is_authenticated
    assert api.identity.user == user
    assert api.identity.token

    await api.list_projects()
    assert transport.requests[-1].headers["Authorization"] == (
        f"Bearer {api.identity.token}"
    )

    api.logout()
    assert api.identity is None


async def test_login_failure_leaves_identity_unset(api):
    await api.register("ranger", "ranger@greenpledge.org", "secret1")
    api.logout()

    with pytest.raises(ApiRequestError) as exc:
        await api.login("ranger", "wrong-password")
    assert exc.value.status_code == 401
    assert exc.value.message == "Invalid credentials"
    assert api.identity is None

    await api.login("ranger", "secret1")
    assert api.identity.user.username == "ranger"


async def test_seed_invalidates_projects(api):
    await api.list_projects()
    result = await api.seed()
    assert result["count"] == 6
    assert len(await api.list_projects()) == 6


def test_estimate_trees():
    assert estimate_trees(Decimal("52.00")) == Decimal("10")
    assert estimate_trees(Decimal("4.99")) == Decimal("0")
    assert client_module.TREE_UNIT_COST == Decimal("5")


async def test_raw_dict_payloads_accept_python_values(api, project_payload):
    project = await api.create_project({
        **project_payload,
        "latitude": Decimal("10.3009"),
        "longitude": Decimal("-84.8096"),
    })

    pledge = await api.create_pledge({
        "projectId": project.id, "amount": Decimal("10"),
    })
    assert pledge.amount == Decimal("10")
    assert pledge.trees_count == Decimal("2")

    updated = await api.update_project(str(project.id), {"area": Decimal("99.50")})
    assert updated.area == Decimal("99.50")

"""GreenPledge API Client — typed requests, path-keyed cache, explicit identity.

Invariants:
    - GETs are served from the cache when the path is cached, otherwise fetched once
    - Any create/update/delete invalidates the whole collection it touched
    - A failed request raises ApiRequestError and leaves the cache untouched
    - No automatic retries: every call is sent at most once
    - The current identity is a view derived from the last login/register; the
      server decides authorization from the token sent with each request

Design Decisions:
    - Parsed schema objects are cached, not raw JSON: callers always get typed data
    - Raw dict payloads are encoded the way pydantic encodes JSON: Decimal, UUID
      and datetime values become strings instead of breaking the request
    - estimate_trees mirrors the pledge form default (one tree per 5 currency units)
"""

import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

import httpx
from pydantic import BaseModel, TypeAdapter

from greenpledge.client.cache import QueryCache
from greenpledge.core.domain_types import ACCESS_TOKEN_HEADER
from greenpledge.schemas.pledge import PledgeCreate, PledgeResponse
from greenpledge.schemas.project import (
    ProjectCreate, ProjectResponse, ProjectUpdate,
)
from greenpledge.schemas.user import UserResponse

logger = logging.getLogger(__name__)

PROJECTS_PATH = "/api/projects"
PLEDGES_PATH = "/api/pledges"
TREE_UNIT_COST = Decimal("5")

_PROJECT_LIST = TypeAdapter(list[ProjectResponse])
_PLEDGE_LIST = TypeAdapter(list[PledgeResponse])
_JSON_OBJECT = TypeAdapter(dict[str, Any])


class ApiRequestError(Exception):
    """Non-2xx response from the API."""

    def __init__(self, status_code: int, code: str, message: str):
        super().__init__(f"{status_code} {code}: {message}")
        self.status_code = status_code
        self.code = code
        self.message = message

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ApiRequestError":
        code, message = "HTTP_ERROR", response.reason_phrase or "Request failed"
        try:
            error = response.json().get("error")
        except (ValueError, AttributeError):
            error = None
        if isinstance(error, dict):
            code = error.get("code", code)
            message = error.get("message", message)
        return cls(response.status_code, code, message)


@dataclass(frozen=True)
class Identity:
    """Who the client is currently acting as."""
    user: UserResponse
    token: str | None


def estimate_trees(amount: Decimal) -> Decimal:
    return Decimal(int(amount // TREE_UNIT_COST))


class GreenPledgeClient:
    """Async client for the GreenPledge REST API."""

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 10.0,
        cache: QueryCache | None = None,
    ):
        self._http = httpx.AsyncClient(
            base_url=base_url, transport=transport, timeout=timeout,
        )
        self.cache = cache or QueryCache()
        self._identity: Identity | None = None

    async def __aenter__(self) -> "GreenPledgeClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    # ─── Identity ───────────────────────────────────────────────

    @property
    def identity(self) -> Identity | None:
        return self._identity

    @property
    def is_authenticated(self) -> bool:
        return self._identity is not None

    async def register(
        self, username: str, email: str, password: str,
    ) -> UserResponse:
        response = await self._send("POST", "/api/auth/register", json={
            "username": username, "email": email, "password": password,
        })
        return self._adopt_identity(response)

    async def login(self, username: str, password: str) -> UserResponse:
        response = await self._send("POST", "/api/auth/login", json={
            "username": username, "password": password,
        })
        return self._adopt_identity(response)

    def logout(self) -> None:
        self._identity = None

    def _adopt_identity(self, response: httpx.Response) -> UserResponse:
        user = UserResponse.model_validate(response.json())
        self._identity = Identity(
            user=user, token=response.headers.get(ACCESS_TOKEN_HEADER),
        )
        return user

    # ─── Projects ───────────────────────────────────────────────

    async def list_projects(self) -> list[ProjectResponse]:
        return await self._query(PROJECTS_PATH, _PROJECT_LIST.validate_python)

    async def get_project(self, project_id: str) -> ProjectResponse:
        return await self._query(
            f"{PROJECTS_PATH}/{project_id}", ProjectResponse.model_validate,
        )

    async def create_project(
        self, data: ProjectCreate | dict[str, Any],
    ) -> ProjectResponse:
        response = await self._mutate(
            "POST", PROJECTS_PATH, PROJECTS_PATH, json=_payload(data),
        )
        return ProjectResponse.model_validate(response.json())

    async def update_project(
        self, project_id: str, changes: ProjectUpdate | dict[str, Any],
    ) -> ProjectResponse:
        response = await self._mutate(
            "PATCH", f"{PROJECTS_PATH}/{project_id}", PROJECTS_PATH,
            json=_payload(changes, partial=True),
        )
        return ProjectResponse.model_validate(response.json())

    async def delete_project(self, project_id: str) -> None:
        await self._mutate(
            "DELETE", f"{PROJECTS_PATH}/{project_id}", PROJECTS_PATH,
        )

    async def seed(self) -> dict[str, Any]:
        response = await self._mutate("POST", "/api/seed", PROJECTS_PATH)
        return response.json()

    # ─── Pledges ────────────────────────────────────────────────

    async def list_pledges(
        self, *, user_id: str | None = None, project_id: str | None = None,
    ) -> list[PledgeResponse]:
        if user_id:
            path = f"{PLEDGES_PATH}?userId={user_id}"
        elif project_id:
            path = f"{PLEDGES_PATH}?projectId={project_id}"
        else:
            path = PLEDGES_PATH
        return await self._query(path, _PLEDGE_LIST.validate_python)

    async def create_pledge(
        self, data: PledgeCreate | dict[str, Any],
    ) -> PledgeResponse:
        payload = _payload(data)
        if payload.get("treesCount") is None:
            trees = _estimated_trees(payload.get("amount"))
            if trees is not None:
                payload["treesCount"] = trees
        response = await self._mutate(
            "POST", PLEDGES_PATH, PLEDGES_PATH, json=payload,
        )
        return PledgeResponse.model_validate(response.json())

    # ─── Transport ──────────────────────────────────────────────

    async def _query(self, path: str, parse):
        if path in self.cache:
            logger.debug(f"Cache hit {path}")
            return self.cache.get(path)
        response = await self._send("GET", path)
        value = parse(response.json())
        self.cache.set(path, value)
        return value

    async def _mutate(
        self, method: str, path: str, collection: str, **kwargs,
    ) -> httpx.Response:
        response = await self._send(method, path, **kwargs)
        dropped = self.cache.invalidate(collection)
        logger.debug(f"Invalidated {len(dropped)} cached entries under {collection}")
        return response

    async def _send(self, method: str, path: str, **kwargs) -> httpx.Response:
        headers = {}
        if self._identity and self._identity.token:
            headers["Authorization"] = f"Bearer {self._identity.token}"
        response = await self._http.request(method, path, headers=headers, **kwargs)
        if response.is_error:
            error = ApiRequestError.from_response(response)
            logger.warning(
                f"{method} {path} failed: {error}",
                extra={"method": method, "path": path, "status_code": response.status_code},
            )
            raise error
        return response


def _payload(data: BaseModel | dict[str, Any], partial: bool = False) -> dict[str, Any]:
    if isinstance(data, BaseModel):
        if partial:
            return data.model_dump(mode="json", by_alias=True, exclude_unset=True)
        return data.model_dump(mode="json", by_alias=True, exclude_none=True)
    return _JSON_OBJECT.dump_python(data, mode="json")


def _estimated_trees(amount: Any) -> str | None:
    """Default treesCount for a raw amount; None when the amount is not numeric."""
    if amount is None:
        return None
    try:
        value = Decimal(str(amount))
    except (InvalidOperation, ValueError):
        return None
    if not value.is_finite() or value <= 0:
        return None
    return str(estimate_trees(value))

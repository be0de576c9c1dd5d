"""Route Dependencies — storage per request and optional bearer-token guard.

Invariants:
    - get_storage yields a DbStorage bound to the request's session
    - require_mutation_auth is a no-op unless settings.require_auth_for_mutations
    - When enforced, the token must decode AND resolve to an existing user
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from greenpledge.config import get_settings
from greenpledge.core.errors import AuthenticationRequiredError
from greenpledge.infrastructure.database import get_db
from greenpledge.infrastructure.security import decode_access_token
from greenpledge.infrastructure.storage import DbStorage
from greenpledge.schemas.user import UserRecord


async def get_storage(db: AsyncSession = Depends(get_db)) -> DbStorage:
    return DbStorage(db)


def _bearer_token(request: Request) -> str | None:
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def require_mutation_auth(
    request: Request, storage: DbStorage = Depends(get_storage),
) -> UserRecord | None:
    """Resolve the caller for mutating project routes."""
    if not get_settings().require_auth_for_mutations:
        return None
    token = _bearer_token(request)
    user_id = decode_access_token(token) if token else None
    user = await storage.get_user(user_id) if user_id else None
    if user is None:
        raise AuthenticationRequiredError()
    return user

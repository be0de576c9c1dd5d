"""Auth Routes — registration and login.

Invariants:
    - Response bodies are UserResponse: the password hash is never serialized
    - Successful register/login set the X-Access-Token header (bearer token)
    - Failed logins are 401 with one message for every cause
"""

from fastapi import APIRouter, Depends, Response, status

from greenpledge.api.deps import get_storage
from greenpledge.core.domain_types import ACCESS_TOKEN_HEADER
from greenpledge.infrastructure.security import create_access_token
from greenpledge.infrastructure.storage import DbStorage
from greenpledge.schemas.user import LoginRequest, RegisterRequest, UserResponse
from greenpledge.services.auth_service import authenticate, register_user

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post(
    "/register", response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    body: RegisterRequest,
    response: Response,
    storage: DbStorage = Depends(get_storage),
):
    user = await register_user(storage, body)
    response.headers[ACCESS_TOKEN_HEADER] = create_access_token(str(user.id))
    return user.to_public()


@router.post("/login", response_model=UserResponse)
async def login(
    body: LoginRequest,
    response: Response,
    storage: DbStorage = Depends(get_storage),
):
    user = await authenticate(storage, body)
    response.headers[ACCESS_TOKEN_HEADER] = create_access_token(str(user.id))
    return user.to_public()

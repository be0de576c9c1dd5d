"""Auth Service — registration and credential checks on top of Storage.

Invariants:
    - The password is hashed before create_user sees it
    - Unknown username and wrong password raise the same InvalidCredentialsError
    - Returned records still carry the hash; callers convert with to_public()
"""

import logging

from greenpledge.core.errors import InvalidCredentialsError
from greenpledge.core.repository_protocols import Storage
from greenpledge.infrastructure.security import (
    burn_verify_time, hash_password, verify_password,
)
from greenpledge.schemas.user import (
    LoginRequest, RegisterRequest, UserCreate, UserRecord,
)

logger = logging.getLogger(__name__)


async def register_user(storage: Storage, body: RegisterRequest) -> UserRecord:
    return await storage.create_user(UserCreate(
        username=body.username,
        email=str(body.email),
        password_hash=hash_password(body.password),
    ))


async def authenticate(storage: Storage, body: LoginRequest) -> UserRecord:
    user = await storage.get_user_by_username(body.username)
    if user is None:
        burn_verify_time()
        logger.info("Login rejected")
        raise InvalidCredentialsError()
    if not verify_password(body.password, user.password_hash):
        logger.info("Login rejected", extra={"user_id": str(user.id)})
        raise InvalidCredentialsError()
    return user

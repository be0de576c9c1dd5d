"""Password Hashing & Access Tokens — bcrypt via passlib, signed JWTs via python-jose.

Invariants:
    - Plaintext passwords are only ever passed to hash_password/verify_password
    - verify_password never raises for a malformed stored hash; it returns False
    - burn_verify_time costs one bcrypt verification so unknown-user logins take as
      long as wrong-password logins
    - Tokens carry only the user id (sub) and expiry

Design Decisions:
    - CryptContext built lazily from settings and cached: tests lower bcrypt_rounds
      through the environment without touching this module
"""

import logging
from datetime import datetime, timedelta, timezone
from functools import lru_cache

from jose import JWTError, jwt
from passlib.context import CryptContext

from greenpledge.config import get_settings

logger = logging.getLogger(__name__)


@lru_cache
def _password_context() -> CryptContext:
    settings = get_settings()
    return CryptContext(
        schemes=["bcrypt"],
        deprecated="auto",
        bcrypt__rounds=settings.bcrypt_rounds,
    )


def hash_password(password: str) -> str:
    """Generate a salted bcrypt hash."""
    return _password_context().hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against its stored hash."""
    try:
        return _password_context().verify(password, password_hash)
    except (ValueError, TypeError):
        logger.warning("Stored password hash could not be parsed")
        return False


def burn_verify_time() -> None:
    """Spend the same work as a real verification."""
    _password_context().dummy_verify()


def create_access_token(user_id: str) -> str:
    settings = get_settings()
    expire = datetime.now(timezone.utc) + timedelta(
        minutes=settings.auth_token_ttl_minutes,
    )
    return jwt.encode(
        {"sub": user_id, "exp": expire},
        settings.auth_secret_key,
        algorithm=settings.auth_token_algorithm,
    )


def decode_access_token(token: str) -> str | None:
    """Return the user id the token was issued for, or None if invalid/expired."""
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.auth_secret_key,
            algorithms=[settings.auth_token_algorithm],
        )
    except JWTError:
        return None
    sub = payload.get("sub")
    return sub if isinstance(sub, str) else None

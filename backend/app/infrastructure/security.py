"""Security — bcrypt password hashing and JWT access tokens.

Invariants:
    - Plain-text passwords never stored or logged
    - Tokens are HS256 JWTs carrying sub (user id), username and exp
    - Every token failure surfaces as AuthenticationError (401), never a library exception

Design Decisions:
    - bcrypt directly over passlib: one hashing scheme, no registry needed
    - Expiry enforced by PyJWT on decode; lifetime from settings
"""

import logging
from datetime import datetime, timedelta, timezone
from uuid import UUID

import bcrypt
import jwt

from app.config import get_settings
from app.core.domain_types import UserId
from app.core.errors import AuthenticationError

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    """Hash a password with bcrypt using the configured work factor."""
    salt = bcrypt.gensalt(rounds=get_settings().bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a stored bcrypt hash. False on malformed hash."""
    try:
        return bcrypt.checkpw(
            password.encode("utf-8"), password_hash.encode("utf-8"),
        )
    except ValueError:
        logger.warning("Stored password hash is malformed")
        return False


def create_access_token(
    user_id: UserId, username: str, expires_delta: timedelta | None = None,
) -> str:
    """Issue a signed access token for the given user."""
    settings = get_settings()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    payload = {
        "sub": str(user_id),
        "username": username,
        "exp": datetime.now(timezone.utc) + expires_delta,
    }
    return jwt.encode(
        payload, settings.secret_key, algorithm=settings.jwt_algorithm,
    )


def decode_access_token(token: str) -> UserId:
    """Validate a token and return the user id it was issued for."""
    settings = get_settings()
    try:
        payload = jwt.decode(
            token, settings.secret_key, algorithms=[settings.jwt_algorithm],
        )
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Token has expired")
    except jwt.InvalidTokenError:
        raise AuthenticationError("Token invalid")

    try:
        return UserId(UUID(payload["sub"]))
    except (KeyError, TypeError, ValueError):
        raise AuthenticationError("Token missing user id")

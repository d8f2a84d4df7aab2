"""Route Dependencies — bearer-token authentication for write routes.

Invariants:
    - Missing header, wrong scheme, empty token → AuthenticationError (401)
    - Valid token for a user that no longer exists → AuthenticationError (401)
    - Shares the request's DB session (FastAPI caches get_db per request)

Design Decisions:
    - HTTPBearer(auto_error=False): FastAPI's default would answer 403, we answer 401
      with the standard error envelope
"""

import logging

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import AuthenticationError
from app.infrastructure.database import get_db
from app.infrastructure.security import decode_access_token
from app.models.user import User

logger = logging.getLogger(__name__)

_bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> User:
    """Resolve the authenticated user from the Authorization header."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Token missing")

    user_id = decode_access_token(credentials.credentials)
    result = await db.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()
    if not user:
        logger.warning("Token for unknown user", extra={"user_id": str(user_id)})
        raise AuthenticationError("Token user no longer exists")
    return user

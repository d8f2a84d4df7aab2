"""Login — exchanges username/password for a bearer token.

Invariants:
    - Unknown username and wrong password are indistinguishable (both 401)
    - Token subject is the user id
    - bcrypt verification runs in the threadpool, never on the event loop
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import UserId
from app.core.errors import AuthenticationError
from app.infrastructure.database import get_db
from app.infrastructure.security import create_access_token, verify_password
from app.models.user import User
from app.schemas.user import LoginRequest, TokenResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/login", tags=["auth"])


@router.post("", response_model=TokenResponse)
async def login(body: LoginRequest, db: AsyncSession = Depends(get_db)):
    """Verify credentials and issue an access token."""
    result = await db.execute(
        select(User).where(User.username == body.username),
    )
    user = result.scalar_one_or_none()
    valid = user is not None and await run_in_threadpool(
        verify_password, body.password, user.password_hash,
    )
    if not valid:
        logger.warning("Failed login", extra={"username": body.username})
        raise AuthenticationError("Invalid username or password")

    token = create_access_token(UserId(user.id), user.username)
    return TokenResponse(token=token, username=user.username, name=user.name)

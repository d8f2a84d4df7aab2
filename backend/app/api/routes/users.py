"""Users — account registration and listing.

Invariants:
    - Usernames are unique (409 on duplicate); the pre-insert lookup is a fast path,
      the unique index is the authority (IntegrityError at commit → 409)
    - Passwords are stored only as bcrypt hashes, hashed off the event loop
    - Listing embeds each user's blogs
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.concurrency import run_in_threadpool
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import ConflictError
from app.infrastructure.database import get_db
from app.infrastructure.security import hash_password
from app.models.user import User
from app.schemas.user import UserCreate, UserResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/users", tags=["users"])


async def _username_taken(db: AsyncSession, username: str) -> bool:
    existing = await db.execute(
        select(User.id).where(User.username == username),
    )
    return existing.scalar_one_or_none() is not None


def _username_conflict(username: str) -> ConflictError:
    return ConflictError(f"Username '{username}' is already taken", "username")


@router.post(
    "", response_model=UserResponse, status_code=status.HTTP_201_CREATED,
)
async def create_user(body: UserCreate, db: AsyncSession = Depends(get_db)):
    """Register a new user."""
    if await _username_taken(db, body.username):
        raise _username_conflict(body.username)

    password_hash = await run_in_threadpool(hash_password, body.password)
    user = User(
        username=body.username, name=body.name,
        password_hash=password_hash, blogs=[],
    )
    db.add(user)
    try:
        await db.commit()
    except IntegrityError:
        # Concurrent registration won the unique index between lookup and insert
        await db.rollback()
        logger.warning("Username taken at commit", extra={"username": body.username})
        raise _username_conflict(body.username)
    await db.refresh(user)
    logger.info("User created", extra={"user_id": str(user.id)})
    return user


@router.get("", response_model=list[UserResponse])
async def list_users(db: AsyncSession = Depends(get_db)):
    """List users with their blogs."""
    result = await db.execute(select(User).order_by(User.created_at))
    return result.scalars().all()

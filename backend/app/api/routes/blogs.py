"""Blogs — CRUD over blog posts plus aggregate statistics.

Invariants:
    - Reads (list, detail, stats) and PUT are public; POST and DELETE require a bearer token
    - Malformed ids fail path validation (400) before any query runs
    - Only the owner may delete an owned blog; ownerless blogs are deletable by any user
    - List order is creation order (created_at, then id)

Design Decisions:
    - /stats declared before /{blog_id} so it is not parsed as an id
    - Stats computed by core/blog_stats over ORM rows: handler fetches, core computes
    - Path ids arrive as UUID (validated by FastAPI) and are wrapped as BlogId
      before reaching the lookup
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import get_current_user
from app.core.blog_stats import compute_blog_stats
from app.core.domain_types import BlogId
from app.core.errors import ErrorContext, PermissionDeniedError, ResourceNotFoundError
from app.infrastructure.database import get_db
from app.models.blog import Blog
from app.models.user import User
from app.schemas.blog import (
    BlogCreate, BlogResponse, BlogStatsResponse, BlogUpdate,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/blogs", tags=["blogs"])


async def get_blog_or_404(blog_id: BlogId, db: AsyncSession) -> Blog:
    """Get blog or raise 404. Exported for reuse by other routers."""
    result = await db.execute(select(Blog).where(Blog.id == blog_id))
    blog = result.scalar_one_or_none()
    if not blog:
        raise ResourceNotFoundError(
            "Blog", str(blog_id), ErrorContext(blog_id=str(blog_id)),
        )
    return blog


async def _all_blogs(db: AsyncSession) -> list[Blog]:
    result = await db.execute(
        select(Blog).order_by(Blog.created_at, Blog.id),
    )
    return list(result.scalars().all())


@router.get("", response_model=list[BlogResponse])
async def list_blogs(db: AsyncSession = Depends(get_db)):
    """List every blog in creation order."""
    return await _all_blogs(db)


@router.get("/stats", response_model=BlogStatsResponse)
async def blog_stats(db: AsyncSession = Depends(get_db)):
    """Total likes, favorite blog, most prolific and most liked author."""
    return compute_blog_stats(await _all_blogs(db))


@router.get("/{blog_id}", response_model=BlogResponse)
async def get_blog(blog_id: UUID, db: AsyncSession = Depends(get_db)):
    """Get one blog."""
    return await get_blog_or_404(BlogId(blog_id), db)


@router.post(
    "", response_model=BlogResponse, status_code=status.HTTP_201_CREATED,
)
async def create_blog(
    body: BlogCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Create a blog owned by the authenticated user."""
    blog = Blog(
        title=body.title, author=body.author, url=body.url,
        likes=body.likes, user=user,
    )
    db.add(blog)
    await db.commit()
    await db.refresh(blog)
    logger.info(
        "Blog created", extra={"blog_id": str(blog.id), "user_id": str(user.id)},
    )
    return blog


@router.put("/{blog_id}", response_model=BlogResponse)
async def update_blog(
    blog_id: UUID, body: BlogUpdate, db: AsyncSession = Depends(get_db),
):
    """Replace a blog's title, author, url and likes."""
    blog = await get_blog_or_404(BlogId(blog_id), db)
    blog.title = body.title
    blog.author = body.author
    blog.url = body.url
    blog.likes = body.likes
    await db.commit()
    await db.refresh(blog)
    logger.info("Blog updated", extra={"blog_id": str(blog.id)})
    return blog


@router.delete("/{blog_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_blog(
    blog_id: UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Delete a blog. Owner only."""
    blog = await get_blog_or_404(BlogId(blog_id), db)
    if blog.user_id is not None and blog.user_id != user.id:
        raise PermissionDeniedError(
            "delete another user's blog",
            ErrorContext(user_id=str(user.id), blog_id=str(blog_id)),
        )
    await db.delete(blog)
    await db.commit()
    logger.info(
        "Blog deleted", extra={"blog_id": str(blog_id), "user_id": str(user.id)},
    )

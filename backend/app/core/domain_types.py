"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - BlogId, UserId wrap UUIDs; lookups and token decoding take/return these,
      bare UUID only at the HTTP path boundary where FastAPI validates it
    - Aggregate results are plain dicts (TypedDict) so they serialize to JSON as-is

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - TypedDict over dataclass for results: route handlers return them unchanged
"""

from typing import NewType, TypedDict
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

BlogId = NewType("BlogId", UUID)
UserId = NewType("UserId", UUID)


# ─── Aggregate Results ───────────────────────────────────────────

class FavoriteBlog(TypedDict):
    """Projection of the most-liked post."""
    title: str
    author: str
    likes: int


class AuthorBlogCount(TypedDict):
    """Author with the highest number of posts."""
    author: str
    blogs: int


class AuthorLikes(TypedDict):
    """Author with the highest total likes."""
    author: str
    likes: int


class BlogStats(TypedDict):
    """Every aggregate over one collection of posts."""
    total_likes: int
    favorite_blog: FavoriteBlog | None
    most_blogs: AuthorBlogCount | None
    most_likes: AuthorLikes | None

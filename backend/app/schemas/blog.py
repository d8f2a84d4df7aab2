"""Blog Schemas — Pydantic models with field-level validation for blog routes.

Invariants:
    - BlogCreate.title / url / author: non-empty after stripping
    - likes: non-negative integer, defaults to 0 when omitted
    - BlogUpdate is a full replacement (PUT): same required fields as create

Design Decisions:
    - Extra fields ignored: clients may send back a full blog (id, user) on PUT
    - from_attributes on responses: handlers return ORM rows directly
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BlogCreate(BaseModel):
    """Blog creation — title, author and url required."""
    title: str = Field(min_length=1, max_length=500)
    author: str = Field(min_length=1, max_length=200)
    url: str = Field(min_length=1, max_length=2000)
    likes: int = Field(0, ge=0)

    @field_validator("title", "author", "url")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty or whitespace")
        return v


class BlogUpdate(BlogCreate):
    """Full blog replacement for PUT."""


class BlogOwner(BaseModel):
    """User summary embedded in blog responses."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    name: str | None = None


class BlogSummary(BaseModel):
    """Blog without owner — embedded in user responses."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    author: str
    url: str
    likes: int


class BlogResponse(BlogSummary):
    """Blog response — public-facing blog data with owner."""
    user: BlogOwner | None = None


class FavoriteBlogResponse(BaseModel):
    title: str
    author: str
    likes: int


class AuthorBlogCountResponse(BaseModel):
    author: str
    blogs: int


class AuthorLikesResponse(BaseModel):
    author: str
    likes: int


class BlogStatsResponse(BaseModel):
    """Aggregates over every stored blog."""
    total_likes: int
    favorite_blog: FavoriteBlogResponse | None = None
    most_blogs: AuthorBlogCountResponse | None = None
    most_likes: AuthorLikesResponse | None = None

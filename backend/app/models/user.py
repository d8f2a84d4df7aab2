"""User ORM — account that owns blog posts and authenticates writes.

Invariants:
    - username is unique and non-nullable
    - password_hash is a bcrypt hash, never the plain password

Design Decisions:
    - blogs relationship eager-loaded (selectin): GET /users embeds each user's posts
    - Deleting a user keeps their posts (FK set to NULL), no cascade delete
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from app.db.base import Base


class User(Base):
    """User entity — owner of blogs."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    username: Mapped[str] = mapped_column(
        String(100), nullable=False, unique=True, index=True,
    )
    name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    password_hash: Mapped[str] = mapped_column(String(100), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    blogs: Mapped[list["Blog"]] = relationship(
        "Blog", back_populates="user", lazy="selectin",
        order_by="Blog.created_at",
    )

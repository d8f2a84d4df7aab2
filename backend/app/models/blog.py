"""Blog ORM — persists one blog post.

Invariants:
    - id is UUID primary key (python-side default)
    - title, author, url are non-nullable text
    - likes is a non-negative integer, 0 when not supplied at creation
    - user_id is nullable: posts created before ownership existed have no owner

Design Decisions:
    - lazy="selectin" on user: responses embed the owner without async lazy loads
    - created_at drives list ordering
"""

import uuid
from typing import Optional
from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from app.db.base import Base


class Blog(Base):
    """Blog post entity."""
    __tablename__ = "blogs"
    __table_args__ = (
        CheckConstraint("likes >= 0", name="ck_blogs_likes_non_negative"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    author: Mapped[str] = mapped_column(String(200), nullable=False)
    url: Mapped[str] = mapped_column(Text, nullable=False)
    likes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    user_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    user: Mapped[Optional["User"]] = relationship(
        "User", back_populates="blogs", lazy="selectin",
    )

"""Domain Types — identity wrappers and aggregate result shapes."""

from uuid import uuid4

from app.core.domain_types import (
    AuthorBlogCount, AuthorLikes, BlogId, BlogStats, FavoriteBlog, UserId,
)


def test_identity_types_wrap_uuid():
    uid = uuid4()
    assert BlogId(uid) == uid
    assert UserId(uid) == uid


def test_result_types_are_plain_dicts():
    fav: FavoriteBlog = {"title": "A", "author": "X", "likes": 1}
    count: AuthorBlogCount = {"author": "X", "blogs": 2}
    likes: AuthorLikes = {"author": "X", "likes": 3}
    assert type(fav) is dict and type(count) is dict and type(likes) is dict


def test_blog_stats_declares_every_aggregate():
    assert set(BlogStats.__annotations__) == {
        "total_likes", "favorite_blog", "most_blogs", "most_likes",
    }

"""Blog and user schemas — boundary validation.

Invariants:
    - title, author, url required and non-blank; likes >= 0 defaulting to 0
    - Extra fields on PUT bodies are ignored
    - Username >= 3 chars after stripping, password >= 3 chars
"""

import pytest
from pydantic import ValidationError

from app.schemas.blog import BlogCreate, BlogUpdate
from app.schemas.user import UserCreate


def test_blog_create_defaults_likes_to_zero():
    blog = BlogCreate(title="T", author="A", url="http://x")
    assert blog.likes == 0


def test_blog_create_strips_whitespace():
    blog = BlogCreate(title="  T  ", author=" A ", url=" http://x ")
    assert (blog.title, blog.author, blog.url) == ("T", "A", "http://x")


@pytest.mark.parametrize("missing", ["title", "author", "url"])
def test_blog_create_requires_field(missing):
    data = {"title": "T", "author": "A", "url": "http://x"}
    del data[missing]
    with pytest.raises(ValidationError):
        BlogCreate(**data)


def test_blog_create_rejects_blank_title():
    with pytest.raises(ValidationError):
        BlogCreate(title="   ", author="A", url="http://x")


def test_blog_create_rejects_negative_likes():
    with pytest.raises(ValidationError):
        BlogCreate(title="T", author="A", url="http://x", likes=-1)


def test_blog_update_ignores_extra_fields():
    blog = BlogUpdate(
        id="5a422a851b54a676234d17f7", user={"id": "x"},
        title="T", author="A", url="http://x", likes=3,
    )
    assert blog.model_dump() == {
        "title": "T", "author": "A", "url": "http://x", "likes": 3,
    }


def test_blog_update_rejects_empty_body():
    with pytest.raises(ValidationError):
        BlogUpdate()


def test_user_create_rejects_short_password():
    with pytest.raises(ValidationError):
        UserCreate(username="root", password="pw")


def test_user_create_rejects_short_username_after_strip():
    with pytest.raises(ValidationError):
        UserCreate(username="  ab  ", password="sekret")


def test_user_create_name_is_optional():
    assert UserCreate(username="root", password="sekret").name is None


def test_user_create_rejects_password_over_72_bytes():
    # 40 characters, 80 UTF-8 bytes
    with pytest.raises(ValidationError, match="72 bytes"):
        UserCreate(username="root", password="é" * 40)


def test_user_create_accepts_password_of_exactly_72_bytes():
    user = UserCreate(username="root", password="é" * 36)
    assert len(user.password.encode("utf-8")) == 72

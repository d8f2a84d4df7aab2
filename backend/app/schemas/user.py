"""User & Login Schemas — account creation, login and token responses.

Invariants:
    - username: 3-100 chars, stripped
    - password: at least 3 chars and at most 72 UTF-8 bytes (bcrypt input limit),
      never echoed back
    - UserResponse embeds the user's blogs as summaries (no owner recursion)
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.schemas.blog import BlogSummary

BCRYPT_MAX_PASSWORD_BYTES = 72


class UserCreate(BaseModel):
    """User registration."""
    username: str = Field(min_length=3, max_length=100)
    name: str | None = Field(None, max_length=200)
    password: str = Field(min_length=3, max_length=BCRYPT_MAX_PASSWORD_BYTES)

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 3:
            raise ValueError("username must be at least 3 characters")
        return v

    @field_validator("password")
    @classmethod
    def check_password_bytes(cls, v: str) -> str:
        if len(v.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
            raise ValueError(
                f"password cannot exceed {BCRYPT_MAX_PASSWORD_BYTES} bytes",
            )
        return v


class UserResponse(BaseModel):
    """User response — public-facing user data with their blogs."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    name: str | None = None
    blogs: list[BlogSummary] = []


class LoginRequest(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class TokenResponse(BaseModel):
    """Login result — bearer token plus who it was issued to."""
    token: str
    username: str
    name: str | None = None

"""API test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test session factory
    - db_manager patched so the readiness probe sees the test engine
    - DB assertions open a fresh session (blogs_in_db), never reuse the request's

Design Decisions:
    - SQLite in-memory with StaticPool: one shared connection, so the schema
      created by the fixture is the one every session sees
    - Seed data mirrors the classic bloglist fixtures: one user "root"/"sekret"
      owning two blogs
"""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from app.db.base import Base
from app.infrastructure.database import get_db, DatabaseSessionManager
from app.infrastructure.security import hash_password
from app.models.blog import Blog
from app.models.user import User
from tests.api.blog_helpers import INITIAL_BLOGS, blogs_in_db
import app.infrastructure.database as db_module
from app.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def root_user(test_session_factory):
    """Insert the 'root' user (password 'sekret')."""
    async with test_session_factory() as session:
        user = User(
            username="root", name="Superuser",
            password_hash=hash_password("sekret"), blogs=[],
        )
        session.add(user)
        await session.commit()
        return user


@pytest.fixture
async def seed_blogs(test_session_factory, root_user):
    """Insert INITIAL_BLOGS owned by root, with strictly increasing created_at in the past."""
    start = datetime.now(timezone.utc) - timedelta(hours=1)
    async with test_session_factory() as session:
        for i, data in enumerate(INITIAL_BLOGS):
            session.add(Blog(
                **data, user_id=root_user.id,
                created_at=start + timedelta(seconds=i),
            ))
        await session.commit()
    return await blogs_in_db(test_session_factory)


@pytest.fixture
async def token(client, root_user):
    """Log in as root through the API and return the bearer token."""
    res = await client.post(
        "/api/v1/login", json={"username": "root", "password": "sekret"},
    )
    assert res.status_code == 200
    return res.json()["token"]


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


"""
Pytest fixtures for test database, client, and authentication.

Uses an in-memory SQLite database (aiosqlite + StaticPool so every session
shares one connection); tables are created and dropped around each test.
"""

from datetime import date, time
from typing import AsyncGenerator

import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.db.base import Base
from app.db.session import get_db
from app.core.security import create_user_token, hash_password
from app.models.user import User
from app.models.event import Event

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

test_engine = create_async_engine(
    TEST_DATABASE_URL,
    echo=False,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestSessionLocal = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


async def _create_user(db: AsyncSession, name: str, email: str, password: str) -> User:
    user = User(name=name, email=email, password_hash=hash_password(password))
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user


def _headers_for(user: User) -> dict:
    return {"Authorization": f"Bearer {create_user_token(user.id, user.email, user.name)}"}


@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create tables, yield session, then drop tables for isolation."""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with TestSessionLocal() as session:
        yield session

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client that overrides the DB dependency with the test session."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def test_user(db_session: AsyncSession) -> User:
    """The owner of `test_event`."""
    return await _create_user(db_session, "Alice", "alice@example.com", "alicepassword")


@pytest_asyncio.fixture
async def other_user(db_session: AsyncSession) -> User:
    """A second account that owns nothing."""
    return await _create_user(db_session, "Bob", "bob@example.com", "bobpassword")


@pytest_asyncio.fixture
async def auth_headers(test_user: User) -> dict:
    """Authorization headers with Bearer token for test_user."""
    return _headers_for(test_user)


@pytest_asyncio.fixture
async def other_headers(other_user: User) -> dict:
    """Authorization headers with Bearer token for other_user."""
    return _headers_for(other_user)


@pytest_asyncio.fixture
async def test_event(db_session: AsyncSession, test_user: User) -> Event:
    """An upcoming event created by test_user."""
    event = Event(
        title="Test Concert",
        description="A test event",
        date=date(2030, 6, 15),
        time=time(18, 30),
        location="Test Venue",
        image_url="https://images.example.com/concert.png",
        created_by=test_user.id,
    )
    db_session.add(event)
    await db_session.commit()
    await db_session.refresh(event)
    return event

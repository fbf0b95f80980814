"""
Shared pytest fixtures.

Every test gets its own in-memory SQLite database; the API's session
dependency is overridden to use it.
"""

import os

# Must be set before app.config is imported
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.db import get_db
from app.main import app
from app.models import Base, User
from app.schemas.ordering import OrderedItem, PersistResult
from app.services.auth import auth_service


# =============================================================================
# ORDERING HELPERS
# =============================================================================

def make_items(*ids: str) -> list[OrderedItem]:
    """Canonical list with positions matching argument order."""
    return [OrderedItem(id=item_id, position=index) for index, item_id in enumerate(ids)]


def ids_of(items) -> list[str]:
    return [item.id for item in items]


def positions_of(items) -> list[int]:
    return [item.position for item in items]


class RecordingStore:
    """Stand-in for the persist collaborator that records every call."""

    def __init__(self, fail: bool = False, raises: Exception | None = None):
        self.fail = fail
        self.raises = raises
        self.calls = []

    async def persist(self, collection_type, payload):
        self.calls.append((collection_type, payload))
        if self.raises is not None:
            raise self.raises
        if self.fail:
            return PersistResult.failure("Unauthorized to modify these items")
        return PersistResult.success(updated_count=len(payload))


# =============================================================================
# DATABASE FIXTURES
# =============================================================================

@pytest_asyncio.fixture
async def engine():
    """In-memory SQLite engine shared by all sessions of one test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_maker):
    async with session_maker() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_maker):
    """HTTP client talking to the app in-process."""

    async def override_get_db():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


# =============================================================================
# USER FIXTURES
# =============================================================================

async def _create_user(session_maker, email: str, is_active: bool = True) -> User:
    async with session_maker() as session:
        user = User(email=email, is_active=is_active)
        session.add(user)
        await session.commit()
        await session.refresh(user)
        return user


def bearer(user: User) -> dict[str, str]:
    token = auth_service.create_access_token(user.id, user.email)
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def user(session_maker) -> User:
    return await _create_user(session_maker, "creator@example.com")


@pytest_asyncio.fixture
async def other_user(session_maker) -> User:
    return await _create_user(session_maker, "someone-else@example.com")


@pytest_asyncio.fixture
async def inactive_user(session_maker) -> User:
    return await _create_user(session_maker, "inactive@example.com", is_active=False)


@pytest.fixture
def headers(user) -> dict[str, str]:
    return bearer(user)


@pytest.fixture
def other_headers(other_user) -> dict[str, str]:
    return bearer(other_user)

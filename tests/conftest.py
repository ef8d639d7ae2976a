"""Pytest configuration and shared fixtures."""

import os

# Must be set before the settings are first read
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

from datetime import datetime, timezone

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from domain.entities import Webinar
from infrastructure.database import Base
from infrastructure.database.repositories import InMemoryWebinarRepository
from infrastructure.generators import FixedDateGenerator, FixedIdGenerator


NOW = datetime(2026, 1, 15, 10, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    """Fixture for the frozen current instant used by tests."""
    return NOW


@pytest.fixture
def date_generator():
    """Fixture for a clock frozen at NOW."""
    return FixedDateGenerator(NOW)


@pytest.fixture
def id_generator():
    """Fixture for an id generator that always returns 'id-1'."""
    return FixedIdGenerator("id-1")


@pytest.fixture
def valid_webinar():
    """Fixture for a valid webinar organized by 'alice'."""
    return Webinar(
        id="webinar-id",
        organizer_id="alice",
        title="My first webinar",
        start_date=datetime(2026, 2, 1, 10, 0, tzinfo=timezone.utc),
        end_date=datetime(2026, 2, 1, 11, 0, tzinfo=timezone.utc),
        seats=100,
    )


@pytest.fixture
def webinar_repository(valid_webinar):
    """Fixture for an in-memory repository holding valid_webinar."""
    return InMemoryWebinarRepository([valid_webinar])


@pytest_asyncio.fixture
async def db_engine():
    """In-memory SQLite engine with all tables created."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_maker(db_engine):
    """Session factory bound to the test engine."""
    return async_sessionmaker(db_engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_maker):
    """Database session for one test."""
    async with session_maker() as session:
        yield session

"""Async SQLAlchemy engine, session factory and declarative base."""

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from infrastructure.config import get_settings, get_logger

logger = get_logger(__name__)


class Base(DeclarativeBase):
    """Declarative base for ORM models."""


def _engine_options(database_url: str) -> dict:
    settings = get_settings()
    options = {"echo": settings.database_echo}
    # SQLite uses a single-connection pool that rejects sizing arguments
    if not database_url.startswith("sqlite"):
        options["pool_size"] = settings.database_pool_size
        options["max_overflow"] = settings.database_max_overflow
        options["pool_pre_ping"] = True
    return options


engine = create_async_engine(
    get_settings().database_url,
    **_engine_options(get_settings().database_url),
)

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def init_db() -> None:
    """Create tables that do not exist yet."""
    from infrastructure.database import models  # noqa: F401  (registers tables)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ready")


async def close_db() -> None:
    """Dispose of the engine connection pool."""
    await engine.dispose()
    logger.info("Database connections closed")

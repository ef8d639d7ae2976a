"""Database infrastructure module."""

from .session import Base, engine, async_session_maker, init_db, close_db
from .models import WebinarModel

__all__ = [
    "Base",
    "engine",
    "async_session_maker",
    "init_db",
    "close_db",
    "WebinarModel",
]

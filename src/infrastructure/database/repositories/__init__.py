"""Repository implementations."""

from .sqlalchemy_webinar_repository import SQLAlchemyWebinarRepository
from .in_memory_webinar_repository import InMemoryWebinarRepository

__all__ = ["SQLAlchemyWebinarRepository", "InMemoryWebinarRepository"]

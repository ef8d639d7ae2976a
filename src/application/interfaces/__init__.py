"""Application interfaces - Port definitions for external services."""

from .id_generator import IIdGenerator
from .date_generator import IDateGenerator

__all__ = ["IIdGenerator", "IDateGenerator"]

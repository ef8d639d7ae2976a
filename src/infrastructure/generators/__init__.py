"""Id and date generator implementations."""

from .id_generators import UUIDIdGenerator, FixedIdGenerator
from .date_generators import RealDateGenerator, FixedDateGenerator

__all__ = [
    "UUIDIdGenerator",
    "FixedIdGenerator",
    "RealDateGenerator",
    "FixedDateGenerator",
]

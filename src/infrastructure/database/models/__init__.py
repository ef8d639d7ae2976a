"""SQLAlchemy ORM models."""

from .webinar_model import WebinarModel

__all__ = ["WebinarModel"]

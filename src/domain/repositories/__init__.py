"""Domain Repository Interfaces - Abstract definitions."""

from .webinar_repository import IWebinarRepository

__all__ = ["IWebinarRepository"]

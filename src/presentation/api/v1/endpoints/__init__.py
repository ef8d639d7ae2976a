"""API v1 endpoint routers."""

from . import health, webinars

__all__ = ["health", "webinars"]

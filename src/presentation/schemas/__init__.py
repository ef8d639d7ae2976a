"""Pydantic schemas for request/response validation."""

from .webinar_schemas import (
    OrganizeWebinarRequest,
    OrganizeWebinarResponse,
    ChangeSeatsRequest,
    ChangeSeatsResponse,
    ErrorResponse,
    HealthResponse,
)

__all__ = [
    "OrganizeWebinarRequest",
    "OrganizeWebinarResponse",
    "ChangeSeatsRequest",
    "ChangeSeatsResponse",
    "ErrorResponse",
    "HealthResponse",
]

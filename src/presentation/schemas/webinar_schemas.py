"""Webinar-related Pydantic schemas."""

from datetime import datetime
from typing import Any
from pydantic import BaseModel, ConfigDict, Field, field_validator


def reject_bool_seats(value: Any) -> Any:
    """Refuse JSON booleans, which lax int parsing would turn into 0 or 1."""
    if isinstance(value, bool):
        raise ValueError("seats must be a number")
    return value


class OrganizeWebinarRequest(BaseModel):
    """Request schema for organizing a webinar."""

    title: str = Field(..., description="Webinar title", max_length=255)
    seats: int = Field(..., description="Seat capacity")
    start_date: datetime = Field(..., alias="startDate", description="ISO8601 start")
    end_date: datetime = Field(..., alias="endDate", description="ISO8601 end")

    @field_validator("seats", mode="before")
    @classmethod
    def seats_not_bool(cls, value: Any) -> Any:
        return reject_bool_seats(value)

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "title": "My Webinar",
                    "seats": 100,
                    "startDate": "2027-06-01T10:00:00Z",
                    "endDate": "2027-06-01T12:00:00Z",
                }
            ]
        },
    )


class OrganizeWebinarResponse(BaseModel):
    """Response schema for an organized webinar."""

    id: str = Field(..., description="Identifier of the new webinar")


class ChangeSeatsRequest(BaseModel):
    """Request schema for changing seats. Numeric strings are accepted."""

    seats: int = Field(..., description="New seat capacity")

    @field_validator("seats", mode="before")
    @classmethod
    def seats_not_bool(cls, value: Any) -> Any:
        return reject_bool_seats(value)

    model_config = ConfigDict(
        json_schema_extra={"examples": [{"seats": "30"}]},
    )


class ChangeSeatsResponse(BaseModel):
    """Response schema for a seat change."""

    message: str = Field(default="Seats updated")


class ErrorResponse(BaseModel):
    """Error payload returned for every rejected request."""

    error: str = Field(..., description="Human readable error message")

    model_config = ConfigDict(
        json_schema_extra={"examples": [{"error": "Webinar not found"}]},
    )


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="API version")

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "status": "healthy",
                    "version": "1.0.0"
                }
            ]
        },
    )

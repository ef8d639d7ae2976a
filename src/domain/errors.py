"""Domain error codes for the webinars module."""

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum


class ErrorCode(str, Enum):
    """Domain error codes."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    WEBINAR_TOO_SOON = "WEBINAR_TOO_SOON"
    WEBINAR_NOT_FOUND = "WEBINAR_NOT_FOUND"
    WEBINAR_NOT_ORGANIZER = "WEBINAR_NOT_ORGANIZER"
    WEBINAR_ALREADY_EXISTS = "WEBINAR_ALREADY_EXISTS"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError):
    """Raised when a webinar violates one of its invariants."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.VALIDATION_ERROR, message=message)


def format_duration(duration: timedelta) -> str:
    """Render a lead time in the largest whole unit that fits exactly."""
    seconds = int(duration.total_seconds())
    if duration != timedelta(seconds=seconds):
        return str(duration)
    for unit, size in (("day", 86400), ("hour", 3600), ("minute", 60)):
        if seconds % size == 0:
            count = seconds // size
            return f"{count} {unit}" + ("" if count == 1 else "s")
    return f"{seconds} second" + ("" if seconds == 1 else "s")


class WebinarTooSoonError(DomainError):
    """Raised when a webinar starts before the minimum lead time."""

    def __init__(self, min_lead_time: timedelta = timedelta(days=3)) -> None:
        super().__init__(
            code=ErrorCode.WEBINAR_TOO_SOON,
            message=(
                "The webinar must be scheduled at least "
                f"{format_duration(min_lead_time)} in advance"
            ),
        )
        self.min_lead_time = min_lead_time


class WebinarNotFoundError(DomainError):
    """Raised when a webinar is not found."""

    def __init__(self, webinar_id: str) -> None:
        super().__init__(
            code=ErrorCode.WEBINAR_NOT_FOUND,
            message="Webinar not found",
        )
        self.webinar_id = webinar_id


class WebinarNotOrganizerError(DomainError):
    """Raised when someone other than the organizer modifies a webinar."""

    def __init__(self, webinar_id: str) -> None:
        super().__init__(
            code=ErrorCode.WEBINAR_NOT_ORGANIZER,
            message="User is not allowed to update this webinar",
        )
        self.webinar_id = webinar_id


class WebinarAlreadyExistsError(DomainError):
    """Raised by stores that detect a duplicate webinar id."""

    def __init__(self, webinar_id: str) -> None:
        super().__init__(
            code=ErrorCode.WEBINAR_ALREADY_EXISTS,
            message="Webinar already exists",
        )
        self.webinar_id = webinar_id

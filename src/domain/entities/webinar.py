"""Webinar entity representing a scheduled online event."""

from dataclasses import dataclass, asdict, fields
from datetime import datetime, timedelta, timezone
from typing import Any

from domain.errors import ValidationError


MIN_SEATS = 1
MAX_SEATS = 1000
DEFAULT_MIN_LEAD_TIME = timedelta(days=3)


def _as_utc(value: datetime) -> datetime:
    """Read naive timestamps as UTC and normalize aware ones to UTC."""
    if not isinstance(value, datetime):
        raise ValidationError("Webinar dates must be datetimes")
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass
class Webinar:
    """
    Entity representing a webinar owned by an organizer.

    Identity (id) and ownership (organizer_id) never change after creation.
    Only the seat count can be modified, through update().

    Attributes:
        id: Unique webinar identifier
        organizer_id: Identifier of the user who organized the webinar
        title: Webinar title
        start_date: When the webinar starts (UTC)
        end_date: When the webinar ends (UTC)
        seats: Number of available seats, between 1 and 1000
    """

    MUTABLE_FIELDS = frozenset({"seats"})

    id: str
    organizer_id: str
    title: str
    start_date: datetime
    end_date: datetime
    seats: int

    def __post_init__(self) -> None:
        """Validate webinar invariants."""
        self.start_date = _as_utc(self.start_date)
        self.end_date = _as_utc(self.end_date)
        self._validate_title(self.title)
        self._validate_seats(self.seats)

    def update(self, **changes: Any) -> None:
        """
        Apply a partial update of mutable fields.

        The resulting state is validated before anything is written, so the
        entity is left untouched when a change is rejected.

        Args:
            **changes: New values keyed by field name (currently only seats)

        Raises:
            ValidationError: If a field is not mutable or a value is invalid
        """
        unknown = set(changes) - self.MUTABLE_FIELDS
        if unknown:
            raise ValidationError(
                f"Cannot update webinar field(s): {', '.join(sorted(unknown))}"
            )

        if "seats" in changes:
            self._validate_seats(changes["seats"])

        for name, value in changes.items():
            setattr(self, name, value)

    def is_too_soon(
        self,
        now: datetime,
        lead_time: timedelta = DEFAULT_MIN_LEAD_TIME,
    ) -> bool:
        """Check whether the webinar starts before now + lead_time."""
        return self.start_date < _as_utc(now) + lead_time

    def is_organizer(self, user_id: str) -> bool:
        """Check if the given user organized this webinar."""
        return self.organizer_id == user_id

    @property
    def props(self) -> dict[str, Any]:
        """Snapshot of the current attributes."""
        return self.to_dict()

    def to_dict(self) -> dict[str, Any]:
        """Convert webinar to dictionary."""
        return asdict(self)

    def copy(self) -> "Webinar":
        """Return an independent copy of this webinar."""
        return Webinar(**{f.name: getattr(self, f.name) for f in fields(self)})

    @staticmethod
    def _validate_title(title: str) -> None:
        if not isinstance(title, str) or not title.strip():
            raise ValidationError("Webinar title cannot be empty")

    @staticmethod
    def _validate_seats(seats: int) -> None:
        if isinstance(seats, bool) or not isinstance(seats, int):
            raise ValidationError("Webinar seats must be an integer")
        if seats < MIN_SEATS:
            raise ValidationError("Webinar must have at least 1 seat")
        if seats > MAX_SEATS:
            raise ValidationError(f"Webinar must have at most {MAX_SEATS} seats")

    def __str__(self) -> str:
        return f"Webinar(id={self.id}, title={self.title}, seats={self.seats})"

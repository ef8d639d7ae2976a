"""Clock implementations."""

from datetime import datetime, timezone

from application.interfaces import IDateGenerator


class RealDateGenerator(IDateGenerator):
    """Reads the system clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedDateGenerator(IDateGenerator):
    """Returns a frozen instant. Meant for tests."""

    def __init__(self, date: datetime):
        if date.tzinfo is None:
            date = date.replace(tzinfo=timezone.utc)
        self.date = date

    def now(self) -> datetime:
        return self.date

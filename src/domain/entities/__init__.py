"""Domain Entities - Objects with identity."""

from .webinar import Webinar, MIN_SEATS, MAX_SEATS, DEFAULT_MIN_LEAD_TIME

__all__ = ["Webinar", "MIN_SEATS", "MAX_SEATS", "DEFAULT_MIN_LEAD_TIME"]

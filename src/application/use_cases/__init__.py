"""Application use cases."""

from .organize_webinar import OrganizeWebinarUseCase
from .change_seats import ChangeSeatsUseCase

__all__ = ["OrganizeWebinarUseCase", "ChangeSeatsUseCase"]

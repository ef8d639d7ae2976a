"""Webinar repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Optional

from domain.entities import Webinar


class IWebinarRepository(ABC):
    """
    Abstract repository interface for Webinar entity.

    This interface defines the contract for webinar persistence.
    Concrete implementations live in the infrastructure layer.
    Errors raised by the underlying store are never retried or wrapped.
    """

    @abstractmethod
    async def create(self, webinar: Webinar) -> None:
        """
        Persist a new webinar keyed by its id.

        Args:
            webinar: Webinar entity to create

        Raises:
            A persistence error if a webinar with the same id already exists
        """
        pass

    @abstractmethod
    async def find_by_id(self, webinar_id: str) -> Optional[Webinar]:
        """
        Retrieve a webinar by ID.

        Args:
            webinar_id: Webinar identifier

        Returns:
            Webinar if found, None otherwise
        """
        pass

    @abstractmethod
    async def update(self, webinar: Webinar) -> None:
        """
        Overwrite the stored state of an existing webinar.

        Args:
            webinar: Webinar entity with updated data

        Raises:
            WebinarNotFoundError: If the webinar does not exist
        """
        pass

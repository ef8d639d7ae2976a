"""Date generator interface for dependency inversion."""

from abc import ABC, abstractmethod
from datetime import datetime


class IDateGenerator(ABC):
    """
    Abstract interface for reading the current time.

    This keeps time-dependent business rules deterministic under test.
    """

    @abstractmethod
    def now(self) -> datetime:
        """
        Get the current instant.

        Returns:
            Timezone-aware current datetime
        """
        pass

"""Id generator interface for dependency inversion."""

from abc import ABC, abstractmethod


class IIdGenerator(ABC):
    """
    Abstract interface for identifier generation.

    Use cases receive an id generator instead of calling uuid directly,
    so tests can substitute a deterministic implementation.
    """

    @abstractmethod
    def generate(self) -> str:
        """
        Generate a fresh identifier.

        Returns:
            Identifier string
        """
        pass

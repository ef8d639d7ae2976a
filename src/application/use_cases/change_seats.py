"""Use Case for changing the seat count of a webinar."""

from domain.errors import DomainError, WebinarNotFoundError, WebinarNotOrganizerError
from domain.repositories import IWebinarRepository
from infrastructure.config import get_logger


class ChangeSeatsUseCase:
    """
    Change the number of seats of an existing webinar.

    Only the organizer may change seats. Lowering the count is allowed:
    there is no notion of booked attendees to protect.
    """

    def __init__(self, webinar_repository: IWebinarRepository):
        self.webinar_repo = webinar_repository
        self.logger = get_logger(self.__class__.__name__)

    async def execute(self, webinar_id: str, seats: int, organizer_id: str) -> None:
        """
        Apply a new seat count.

        Raises:
            WebinarNotFoundError: If no webinar has this id
            WebinarNotOrganizerError: If organizer_id does not own the webinar
            ValidationError: If seats is outside the allowed range
        """
        try:
            webinar = await self.webinar_repo.find_by_id(webinar_id)
            if webinar is None:
                raise WebinarNotFoundError(webinar_id)

            if not webinar.is_organizer(organizer_id):
                raise WebinarNotOrganizerError(webinar_id)

            webinar.update(seats=seats)
            # Read-modify-write without a version check: concurrent changes
            # on the same webinar are last-write-wins.
            await self.webinar_repo.update(webinar)
            self.logger.info(
                f"Webinar {webinar_id} seats changed to {seats}",
                extra={"webinar_id": webinar_id, "organizer_id": organizer_id},
            )

        except DomainError as e:
            self.logger.warning(f"Seat change refused for webinar {webinar_id}: {e}")
            raise

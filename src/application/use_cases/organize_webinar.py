"""Use Case for organizing a new webinar."""

from datetime import datetime, timedelta

from application.interfaces import IDateGenerator, IIdGenerator
from domain.entities import DEFAULT_MIN_LEAD_TIME, Webinar
from domain.errors import DomainError, WebinarTooSoonError
from domain.repositories import IWebinarRepository
from infrastructure.config import get_logger


class OrganizeWebinarUseCase:
    """Validate and persist a new webinar on behalf of an organizer."""

    def __init__(
        self,
        webinar_repository: IWebinarRepository,
        id_generator: IIdGenerator,
        date_generator: IDateGenerator,
        min_lead_time: timedelta = DEFAULT_MIN_LEAD_TIME,
    ):
        self.webinar_repo = webinar_repository
        self.id_generator = id_generator
        self.date_generator = date_generator
        self.min_lead_time = min_lead_time
        self.logger = get_logger(self.__class__.__name__)

    async def execute(
        self,
        title: str,
        start_date: datetime,
        end_date: datetime,
        seats: int,
        organizer_id: str,
    ) -> str:
        """
        Organize a webinar.

        Args:
            title: Webinar title
            start_date: Scheduled start
            end_date: Scheduled end
            seats: Seat capacity
            organizer_id: Identity of the requesting user

        Returns:
            Id of the created webinar

        Raises:
            ValidationError: If the webinar breaks an entity invariant
            WebinarTooSoonError: If it starts before the minimum lead time
        """
        try:
            webinar = Webinar(
                id=self.id_generator.generate(),
                organizer_id=organizer_id,
                title=title,
                start_date=start_date,
                end_date=end_date,
                seats=seats,
            )

            if webinar.is_too_soon(self.date_generator.now(), self.min_lead_time):
                raise WebinarTooSoonError(self.min_lead_time)

            await self.webinar_repo.create(webinar)
            self.logger.info(
                f"Webinar {webinar.id} organized by {organizer_id}",
                extra={"webinar_id": webinar.id, "organizer_id": organizer_id},
            )
            return webinar.id

        except DomainError as e:
            self.logger.warning(f"Rejected webinar from {organizer_id}: {e}")
            raise

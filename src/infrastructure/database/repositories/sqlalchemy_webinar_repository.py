"""SQLAlchemy implementation of webinar repository."""

from datetime import datetime, timezone
from typing import Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities import Webinar
from domain.errors import WebinarNotFoundError
from domain.repositories import IWebinarRepository
from infrastructure.database.models import WebinarModel


class SQLAlchemyWebinarRepository(IWebinarRepository):
    """Concrete implementation of IWebinarRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def create(self, webinar: Webinar) -> None:
        """Insert a new webinar row. A duplicate id fails with IntegrityError."""
        model = self._entity_to_model(webinar)
        self.session.add(model)
        await self.session.flush()

    async def find_by_id(self, webinar_id: str) -> Optional[Webinar]:
        """Retrieve a webinar by ID."""
        model = await self._get_model(webinar_id)

        if model is None:
            return None

        return self._model_to_entity(model)

    async def update(self, webinar: Webinar) -> None:
        """Overwrite the stored webinar with the entity state."""
        model = await self._get_model(webinar.id)

        if model is None:
            raise WebinarNotFoundError(webinar.id)

        self._update_model_from_entity(model, webinar)
        await self.session.flush()

    async def _get_model(self, webinar_id: str) -> Optional[WebinarModel]:
        stmt = select(WebinarModel).where(WebinarModel.id == webinar_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    def _entity_to_model(self, entity: Webinar) -> WebinarModel:
        """Convert domain entity to ORM model."""
        return WebinarModel(
            id=entity.id,
            organizer_id=entity.organizer_id,
            title=entity.title,
            start_date=entity.start_date,
            end_date=entity.end_date,
            seats=entity.seats,
        )

    def _update_model_from_entity(self, model: WebinarModel, entity: Webinar) -> None:
        """Update ORM model from domain entity. Identity columns stay as stored."""
        model.title = entity.title
        model.start_date = entity.start_date
        model.end_date = entity.end_date
        model.seats = entity.seats

    def _model_to_entity(self, model: WebinarModel) -> Webinar:
        """Convert ORM model to domain entity."""
        return Webinar(
            id=model.id,
            organizer_id=model.organizer_id,
            title=model.title,
            start_date=self._utc(model.start_date),
            end_date=self._utc(model.end_date),
            seats=model.seats,
        )

    @staticmethod
    def _utc(value: datetime) -> datetime:
        # Some backends (SQLite) hand back naive datetimes
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

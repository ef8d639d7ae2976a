"""FastAPI dependency injection setup."""

from typing import AsyncGenerator, Optional
from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.config import Settings, get_settings
from infrastructure.database import async_session_maker
from infrastructure.database.repositories import SQLAlchemyWebinarRepository
from infrastructure.generators import RealDateGenerator, UUIDIdGenerator
from application.interfaces import IDateGenerator, IIdGenerator
from application.use_cases import ChangeSeatsUseCase, OrganizeWebinarUseCase
from domain.repositories import IWebinarRepository


# Database session dependency
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Get database session dependency.

    Commits once the request finishes cleanly and rolls back when an
    error is thrown in at the yield.
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


# Repository dependencies
def get_webinar_repository(
    session: AsyncSession = Depends(get_db_session),
) -> IWebinarRepository:
    """Get webinar repository bound to the request session."""
    return SQLAlchemyWebinarRepository(session)


# Generator dependencies
def get_id_generator() -> IIdGenerator:
    """Get id generator dependency."""
    return UUIDIdGenerator()


def get_date_generator() -> IDateGenerator:
    """Get date generator dependency."""
    return RealDateGenerator()


# Caller identity
def get_current_organizer_id(
    x_user_id: Optional[str] = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> str:
    """
    Identify the requesting user.

    No authentication happens here: the X-User-Id header is trusted as-is
    and the configured default identity is used when it is missing.
    """
    return x_user_id or settings.default_organizer_id


# Use case dependencies
def get_organize_webinar_use_case(
    webinar_repository: IWebinarRepository = Depends(get_webinar_repository),
    id_generator: IIdGenerator = Depends(get_id_generator),
    date_generator: IDateGenerator = Depends(get_date_generator),
    settings: Settings = Depends(get_settings),
) -> OrganizeWebinarUseCase:
    """Get organize webinar use case dependency."""
    return OrganizeWebinarUseCase(
        webinar_repository=webinar_repository,
        id_generator=id_generator,
        date_generator=date_generator,
        min_lead_time=settings.min_lead_time,
    )


def get_change_seats_use_case(
    webinar_repository: IWebinarRepository = Depends(get_webinar_repository),
) -> ChangeSeatsUseCase:
    """Get change seats use case dependency."""
    return ChangeSeatsUseCase(webinar_repository=webinar_repository)

"""Webinar endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from application.use_cases import ChangeSeatsUseCase, OrganizeWebinarUseCase
from presentation.schemas import (
    ChangeSeatsRequest,
    ChangeSeatsResponse,
    ErrorResponse,
    OrganizeWebinarRequest,
    OrganizeWebinarResponse,
)
from presentation.api.v1.dependencies import (
    get_change_seats_use_case,
    get_current_organizer_id,
    get_db_session,
    get_organize_webinar_use_case,
)
from infrastructure.config import get_logger

router = APIRouter(prefix="/webinars", tags=["webinars"])
logger = get_logger(__name__)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=OrganizeWebinarResponse,
    responses={400: {"model": ErrorResponse}},
)
async def organize_webinar(
    request: OrganizeWebinarRequest,
    organizer_id: str = Depends(get_current_organizer_id),
    use_case: OrganizeWebinarUseCase = Depends(get_organize_webinar_use_case),
    session: AsyncSession = Depends(get_db_session),
) -> OrganizeWebinarResponse:
    """Organize a new webinar owned by the caller."""
    webinar_id = await use_case.execute(
        title=request.title,
        start_date=request.start_date,
        end_date=request.end_date,
        seats=request.seats,
        organizer_id=organizer_id,
    )
    await session.commit()

    return OrganizeWebinarResponse(id=webinar_id)


@router.post(
    "/{webinar_id}/seats",
    response_model=ChangeSeatsResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def change_seats(
    webinar_id: str,
    request: ChangeSeatsRequest,
    organizer_id: str = Depends(get_current_organizer_id),
    use_case: ChangeSeatsUseCase = Depends(get_change_seats_use_case),
    session: AsyncSession = Depends(get_db_session),
) -> ChangeSeatsResponse:
    """Change the seat count of a webinar organized by the caller."""
    logger.info(f"Seat change requested for webinar {webinar_id}")

    await use_case.execute(
        webinar_id=webinar_id,
        seats=request.seats,
        organizer_id=organizer_id,
    )
    await session.commit()

    return ChangeSeatsResponse(message="Seats updated")

"""Map domain and request errors to HTTP responses."""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from domain.errors import DomainError, ErrorCode
from infrastructure.config import get_logger

logger = get_logger(__name__)


ERROR_STATUS_CODES: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.WEBINAR_TOO_SOON: status.HTTP_400_BAD_REQUEST,
    ErrorCode.WEBINAR_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.WEBINAR_NOT_ORGANIZER: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.WEBINAR_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
}


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Render a domain error as {"error": message} with its status code."""
    status_code = ERROR_STATUS_CODES.get(exc.code, status.HTTP_400_BAD_REQUEST)
    logger.info(
        f"{request.method} {request.url.path} -> {status_code} ({exc.code.value})",
        extra={"path": request.url.path, "status_code": status_code},
    )
    return JSONResponse(status_code=status_code, content={"error": exc.message})


async def request_validation_error_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Render malformed request bodies as 400 instead of FastAPI's 422."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "Invalid request"

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": message},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error handlers to an application."""
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

"""
Exception handlers for the StreamerPulse API.
"""
import logging
from fastapi import Request, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from streamerpulse.core.config import settings
from streamerpulse.core.exceptions import (
    SiteException, ContentNotFound, EntryNotFound, DuplicateEntry,
    AlreadySpun, InvalidPeriod, InvalidContentType, Unauthorized
)

logger = logging.getLogger(__name__)


def create_error_response(status_code: int, detail: str, error_code: str, request: Request) -> JSONResponse:
    """Create a standardized error response."""
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": detail,
            "error_code": error_code,
            "request_id": getattr(request.state, 'request_id', None)
        }
    )


async def content_not_found_handler(request: Request, exc: ContentNotFound) -> JSONResponse:
    """Handle missing content exceptions."""
    return create_error_response(404, str(exc), "CONTENT_NOT_FOUND", request)


async def entry_not_found_handler(request: Request, exc: EntryNotFound) -> JSONResponse:
    """Handle missing giveaway entry exceptions."""
    return create_error_response(404, str(exc), "ENTRY_NOT_FOUND", request)


async def duplicate_entry_handler(request: Request, exc: DuplicateEntry) -> JSONResponse:
    """Handle duplicate giveaway entry exceptions."""
    return create_error_response(400, str(exc), "DUPLICATE_ENTRY", request)


async def already_spun_handler(request: Request, exc: AlreadySpun) -> JSONResponse:
    """Handle repeated spin exceptions."""
    return create_error_response(400, str(exc), "ALREADY_SPUN", request)


async def invalid_period_handler(request: Request, exc: InvalidPeriod) -> JSONResponse:
    """Handle invalid leaderboard period exceptions."""
    return create_error_response(400, str(exc), "INVALID_PERIOD", request)


async def invalid_content_type_handler(request: Request, exc: InvalidContentType) -> JSONResponse:
    """Handle unknown content type exceptions."""
    return create_error_response(400, str(exc), "INVALID_TYPE", request)


async def unauthorized_handler(request: Request, exc: Unauthorized) -> JSONResponse:
    """Handle missing or invalid admin token."""
    response = create_error_response(401, str(exc), "UNAUTHORIZED", request)
    response.headers["WWW-Authenticate"] = "Bearer"
    return response


async def site_exception_handler(request: Request, exc: SiteException) -> JSONResponse:
    """Handle generic site exceptions."""
    return create_error_response(400, str(exc), "SITE_ERROR", request)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle validation errors with better formatting."""
    errors = []
    for error in exc.errors():
        errors.append({
            "field": ".".join(str(x) for x in error["loc"][1:]),
            "message": error["msg"],
            "type": error["type"]
        })

    return JSONResponse(
        status_code=422,
        content={
            "detail": "Validation error",
            "errors": errors,
            "error_code": "VALIDATION_ERROR",
            "request_id": getattr(request.state, 'request_id', None)
        }
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle generic HTTP exceptions."""
    return create_error_response(exc.status_code, exc.detail, f"HTTP_{exc.status_code}", request)


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.error(f"Unexpected error: {exc}", exc_info=True)

    # Don't expose internal errors in production
    if settings.DEBUG:
        detail = str(exc)
    else:
        detail = "An unexpected error occurred"

    return create_error_response(500, detail, "INTERNAL_ERROR", request)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(ContentNotFound, content_not_found_handler)
    app.add_exception_handler(EntryNotFound, entry_not_found_handler)
    app.add_exception_handler(DuplicateEntry, duplicate_entry_handler)
    app.add_exception_handler(AlreadySpun, already_spun_handler)
    app.add_exception_handler(InvalidPeriod, invalid_period_handler)
    app.add_exception_handler(InvalidContentType, invalid_content_type_handler)
    app.add_exception_handler(Unauthorized, unauthorized_handler)
    app.add_exception_handler(SiteException, site_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

"""Error handling middleware."""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from vidingest.models.errors import (
    ConfigurationError,
    ErrorResponse,
    ValidationError,
    VidIngestError,
)

logger = logging.getLogger(__name__)


async def vidingest_error_handler(request: Request, exc: VidIngestError) -> JSONResponse:
    """Handle VidIngestError exceptions."""
    status_code = _get_status_code(exc)
    if status_code >= 500:
        logger.error(f"{type(exc).__name__} on {request.url.path}: {exc.message}")
    response = ErrorResponse.from_exception(
        exc, guidance=_get_guidance(exc), retry=_is_retryable(exc)
    )
    return JSONResponse(status_code=status_code, content=response.model_dump())


def _get_status_code(exc: VidIngestError) -> int:
    """Map error type to HTTP status code."""
    if isinstance(exc, ValidationError):
        return 400
    return 500


def _get_guidance(exc: VidIngestError) -> str:
    """Generate actionable guidance based on error type."""
    if isinstance(exc, ValidationError):
        return "Pick an audio or video file and check the request fields."
    if isinstance(exc, ConfigurationError):
        return "Check the VIDINGEST_* environment settings."
    return "Please try again or contact support."


def _is_retryable(exc: VidIngestError) -> bool:
    """Determine if the error is retryable."""
    return not isinstance(exc, (ValidationError, ConfigurationError))

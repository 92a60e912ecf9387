"""Error handling middleware."""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from abrladder.models.errors import (
    AbrLadderError,
    ErrorResponse,
    LadderValidationError,
    ProfileError,
)

logger = logging.getLogger(__name__)


async def abr_ladder_error_handler(request: Request, exc: AbrLadderError) -> JSONResponse:
    """Handle AbrLadderError exceptions."""
    details = dict(exc.details)
    if isinstance(exc, LadderValidationError):
        details["errors"] = exc.errors
    response = ErrorResponse(
        error_type=type(exc).__name__,
        component=exc.component,
        message=exc.message,
        details=details,
        actionable_guidance=_get_guidance(exc),
    )
    status_code = _get_status_code(exc)
    if status_code >= 500:
        logger.error("Request to %s failed: %s", request.url.path, exc.message)
    return JSONResponse(status_code=status_code, content=response.model_dump())


def _get_status_code(exc: AbrLadderError) -> int:
    """Map error type to HTTP status code."""
    if isinstance(exc, LadderValidationError):
        return 400
    elif isinstance(exc, ProfileError):
        return 422
    return 500


def _get_guidance(exc: AbrLadderError) -> str:
    """Generate actionable guidance based on error type."""
    if isinstance(exc, LadderValidationError):
        return "Check the video properties, parametric ladder and aspect ratio list."
    if isinstance(exc, ProfileError):
        return "Check the production master sources/variant and the ABR profile."
    return "Please try again or contact support."

"""Server error handling - sanitizes errors for client responses.

Prevents exposure of file paths, stack traces and configuration to HTTP
clients. Full details are logged server-side under an error reference.
"""

from __future__ import annotations

import logging
import uuid

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse

from wiseguy.core.errors import (
    ApplicationIdError,
    ConfigError,
    IntentError,
    RequestError,
    StateError,
)

logger = logging.getLogger(__name__)


# Error messages safe to expose to clients
SAFE_ERROR_MESSAGES = {
    "ConfigError": "Configuration error. Please contact support.",
    "RequestError": "Invalid request envelope.",
    "ApplicationIdError": "Request is not addressed to this skill.",
    "IntentError": "Unsupported intent.",
    "StateError": "Session state error. Please start a new conversation.",
}

DEFAULT_ERROR_MESSAGE = "An internal error occurred. Please try again later."


def create_error_reference() -> str:
    """Generate unique error reference for client/server correlation."""
    return f"ERR-{uuid.uuid4().hex[:8].upper()}"


def get_safe_error_message(exception: Exception) -> str:
    """Get client-safe error message for exception type."""
    return SAFE_ERROR_MESSAGES.get(type(exception).__name__, DEFAULT_ERROR_MESSAGE)


def get_http_status_for_exception(exception: Exception) -> int:
    """Map exception types to appropriate HTTP status codes."""
    # Client errors (4xx); ApplicationIdError before its RequestError base
    if isinstance(exception, ApplicationIdError):
        return 403
    if isinstance(exception, (RequestError, IntentError)):
        return 400

    # Server errors (5xx)
    if isinstance(exception, (ConfigError, StateError)):
        return 500

    return 500


def log_error_with_context(
    error_ref: str,
    exception: Exception,
    session_id: str | None = None,
    endpoint: str | None = None,
) -> None:
    """Log full error details server-side for debugging."""
    status = get_http_status_for_exception(exception)
    logger.log(
        logging.WARNING if status < 500 else logging.ERROR,
        f"[{error_ref}] Error in {endpoint or 'unknown'} "
        f"for session {session_id or 'unknown'}: {type(exception).__name__}: {exception}",
        exc_info=status >= 500,
        extra={
            "error_reference": error_ref,
            "session_id": session_id,
            "endpoint": endpoint,
            "exception_type": type(exception).__name__,
        },
    )


def create_error_response(
    exception: Exception,
    session_id: str | None = None,
    endpoint: str | None = None,
) -> HTTPException:
    """Create sanitized HTTPException for client response."""
    error_ref = create_error_reference()

    log_error_with_context(error_ref, exception, session_id, endpoint)

    return HTTPException(
        status_code=get_http_status_for_exception(exception),
        detail={
            "error": get_safe_error_message(exception),
            "reference": error_ref,
            "message": "If this problem persists, contact support with the reference code.",
        },
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Global exception handler for uncaught exceptions."""
    error_ref = create_error_reference()
    log_error_with_context(error_ref, exc, endpoint=request.url.path)

    return JSONResponse(
        status_code=500,
        content={
            "error": DEFAULT_ERROR_MESSAGE,
            "reference": error_ref,
            "message": "If this problem persists, contact support with the reference code.",
        },
    )

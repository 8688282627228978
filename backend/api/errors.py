"""
Centralized error handlers for FastAPI.

Renders the shared exception hierarchy as ErrorResponse bodies. Each
exception class carries its HTTP status; token failures (401) and role
failures (403) stay distinct so clients can tell "log in again" from
"not allowed".
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from shared.exceptions import YogaMasterError, AuthenticationError

from .models.errors import ErrorResponse

logger = logging.getLogger(__name__)


def status_for(exc: YogaMasterError) -> int:
    """Return the HTTP status for a domain error."""
    return exc.status_code


def register_error_handlers(app: FastAPI) -> None:
    """Register the domain error handler on the FastAPI application."""

    @app.exception_handler(YogaMasterError)
    async def handle_domain_error(_request: Request, exc: YogaMasterError) -> JSONResponse:
        """Render any domain error as an ErrorResponse."""
        status_code = status_for(exc)
        if status_code >= 500:
            logger.error(f"{exc.code}: {exc.message}")
        else:
            logger.info(f"{exc.code}: {exc.message}")

        headers = None
        if isinstance(exc, AuthenticationError):
            headers = {"WWW-Authenticate": "Bearer"}

        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(**exc.to_dict()).model_dump(),
            headers=headers,
        )

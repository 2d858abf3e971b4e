from __future__ import annotations

"""
Global exception handlers for the FastAPI application.

This module contains centralized handlers for custom application exceptions,
translating them into `{"detail": message}` JSON responses.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette import status
from structlog import get_logger

from agentdesk.core.exceptions import AgentDeskError, AuthenticationError, UpstreamError

__all__ = [
    "authentication_error_handler",
    "upstream_error_handler",
    "agentdesk_error_handler",
    "register_exception_handlers",
]

logger = get_logger(__name__)


async def authentication_error_handler(request: Request, exc: AuthenticationError) -> JSONResponse:
    """Handles `AuthenticationError`, returning a `401 Unauthorized`."""
    logger.warning("Authentication failure", error=exc.code, path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": exc.message},
    )


async def upstream_error_handler(request: Request, exc: UpstreamError) -> JSONResponse:
    """Handles `UpstreamError` and its subclasses.

    Timeouts answer `504`, unreachable backends `503`, and every other
    transport failure `502` with the failure's message as the detail.
    """
    logger.error(
        "Upstream failure",
        error=exc.code,
        status=exc.status_code,
        path=request.url.path,
        detail=exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def agentdesk_error_handler(request: Request, exc: AgentDeskError) -> JSONResponse:
    """Fallback for any other application error, returning a `500`."""
    logger.error("Unhandled application error", error=exc.code, path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": exc.message},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI application.

    Starlette resolves handlers along the exception's MRO, so the more
    specific classes take precedence over `AgentDeskError`.
    """
    app.add_exception_handler(AuthenticationError, authentication_error_handler)
    app.add_exception_handler(UpstreamError, upstream_error_handler)
    app.add_exception_handler(AgentDeskError, agentdesk_error_handler)

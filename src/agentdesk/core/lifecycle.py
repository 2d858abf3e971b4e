"""Application lifecycle management.

Opens the shared backend HTTP client on startup and closes it on shutdown.
"""

from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from agentdesk.core.config.settings import settings
from agentdesk.core.logging import logger


def create_lifespan_manager(transport: httpx.AsyncBaseTransport | None = None):
    """Create the application lifespan manager.

    Args:
        transport: Optional transport for the backend client, used to run the
            application against a fake backend.

    Returns:
        AsyncContextManager: The lifespan manager for the FastAPI application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        async with httpx.AsyncClient(transport=transport) as client:
            app.state.backend_client = client
            logger.info(
                "application_startup",
                env=settings.APP_ENV,
                version=settings.VERSION,
                backend=settings.API_BASE_URL,
            )
            yield
        logger.info("application_shutdown", env=settings.APP_ENV)

    return lifespan

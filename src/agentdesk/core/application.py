"""Application factory for creating and configuring the FastAPI application.

This module provides a factory function to create a properly configured
FastAPI application with middleware, exception handlers, and routers
registered.
"""

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from agentdesk.adapters.api.v1 import api_router
from agentdesk.core.config.settings import settings
from agentdesk.core.handlers import register_exception_handlers
from agentdesk.core.lifecycle import create_lifespan_manager


def create_application(transport: httpx.AsyncBaseTransport | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        transport: Optional transport for the backend client.

    Returns:
        FastAPI: The configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Forwarding API between the agent console and the logistics backend.",
        lifespan=create_lifespan_manager(transport),
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(api_router, prefix="/api")

    return app

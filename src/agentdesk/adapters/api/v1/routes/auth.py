"""Identity endpoints that need no session: refresh and registration."""

import httpx
from fastapi import APIRouter, Depends, Request

from agentdesk.adapters.api.v1.forwarding import forward_to_backend, get_backend_client
from agentdesk.core.config.settings import settings

router = APIRouter()


@router.post("/refresh")
async def refresh_token(request: Request, client: httpx.AsyncClient = Depends(get_backend_client)):
    return await forward_to_backend(
        request,
        client,
        settings.REFRESH_TOKEN_PATH,
        timeout=settings.REFRESH_TIMEOUT_SECONDS,
        authenticated=False,
    )


@router.post("/register")
async def register(request: Request, client: httpx.AsyncClient = Depends(get_backend_client)):
    return await forward_to_backend(
        request,
        client,
        settings.REGISTER_PATH,
        timeout=settings.HEAVY_TIMEOUT_SECONDS,
        authenticated=False,
    )

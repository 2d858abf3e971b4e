"""Agent profile and profile image."""

import httpx
from fastapi import APIRouter, Depends, Request

from agentdesk.adapters.api.v1.forwarding import forward_to_backend, get_backend_client
from agentdesk.core.config.settings import settings

router = APIRouter()


@router.api_route("/me", methods=["GET", "PATCH"])
async def me(request: Request, client: httpx.AsyncClient = Depends(get_backend_client)):
    return await forward_to_backend(
        request, client, settings.ME_PATH, timeout=settings.LIGHT_READ_TIMEOUT_SECONDS
    )


@router.api_route("/profile/image", methods=["GET", "POST", "PUT", "DELETE"])
async def profile_image(request: Request, client: httpx.AsyncClient = Depends(get_backend_client)):
    # Multipart uploads keep their boundary: the content type is forwarded verbatim.
    return await forward_to_backend(
        request, client, settings.PROFILE_IMAGE_PATH, timeout=settings.HEAVY_TIMEOUT_SECONDS
    )

import httpx
from fastapi import APIRouter, Depends, Request

from agentdesk.adapters.api.v1.forwarding import forward_to_backend, get_backend_client
from agentdesk.core.config.settings import settings

router = APIRouter()


@router.get("")
async def wallet(request: Request, client: httpx.AsyncClient = Depends(get_backend_client)):
    return await forward_to_backend(
        request, client, settings.WALLETS_PATH, timeout=settings.LIGHT_READ_TIMEOUT_SECONDS
    )

"""Agent orders."""

import httpx
from fastapi import APIRouter, Depends, Request

from agentdesk.adapters.api.v1.forwarding import forward_to_backend, get_backend_client
from agentdesk.core.config.settings import settings

router = APIRouter()


@router.api_route("", methods=["GET", "POST"])
async def orders(request: Request, client: httpx.AsyncClient = Depends(get_backend_client)):
    """List (with query filters and pagination passed through) or create orders."""
    return await forward_to_backend(
        request, client, settings.AGENT_ORDERS_PATH, timeout=settings.HEAVY_TIMEOUT_SECONDS
    )


@router.get("/{order_id}")
async def order_details(
    order_id: str, request: Request, client: httpx.AsyncClient = Depends(get_backend_client)
):
    return await forward_to_backend(
        request,
        client,
        f"{settings.ORDER_DETAILS_PATH.rstrip('/')}/{order_id}",
        timeout=settings.LIGHT_READ_TIMEOUT_SECONDS,
    )

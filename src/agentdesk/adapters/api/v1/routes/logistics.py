"""Delivery windows, pricing and reverse geocoding.

The business logic lives in the backend; these routes only forward.
"""

import httpx
from fastapi import APIRouter, Depends, Request

from agentdesk.adapters.api.v1.forwarding import forward_to_backend, get_backend_client
from agentdesk.core.config.settings import settings

router = APIRouter()


@router.get("/delivery-windows")
async def delivery_windows(request: Request, client: httpx.AsyncClient = Depends(get_backend_client)):
    return await forward_to_backend(
        request, client, settings.DELIVERY_WINDOWS_PATH, timeout=settings.HEAVY_TIMEOUT_SECONDS
    )


@router.post("/pricing/calculate")
async def calculate_pricing(request: Request, client: httpx.AsyncClient = Depends(get_backend_client)):
    return await forward_to_backend(
        request, client, settings.PRICING_CALCULATE_PATH, timeout=settings.HEAVY_TIMEOUT_SECONDS
    )


@router.post("/locations/reverse-geocode")
async def reverse_geocode(request: Request, client: httpx.AsyncClient = Depends(get_backend_client)):
    return await forward_to_backend(
        request, client, settings.REVERSE_GEOCODE_PATH, timeout=settings.HEAVY_TIMEOUT_SECONDS
    )

"""Request forwarding from the console API to the backend.

Route handlers are thin: they name a backend path and a timeout, and
`forward_to_backend` does the rest. The caller's bearer token is attached,
the method, query string and body bytes are passed through untouched, and
the backend's status, body and content type come back as they are. A 401
from the backend is forwarded as-is; refreshing is the client-side
gateway's job.
"""

from typing import Optional

import httpx
from fastapi import Request
from fastapi.responses import JSONResponse, Response
from structlog import get_logger

from agentdesk.core.config.settings import settings
from agentdesk.infrastructure.http.upstream import send_with_timeout

logger = get_logger(__name__)

_FORWARDED_HEADERS = ("content-type", "accept", "accept-language")


def extract_bearer_token(request: Request) -> str:
    """Return the bearer token of the incoming request, or an empty string."""
    parts = (request.headers.get("authorization") or "").strip().split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return ""
    return parts[1].strip()


def get_backend_client(request: Request) -> httpx.AsyncClient:
    """FastAPI dependency returning the client opened by the lifespan."""
    return request.app.state.backend_client


async def forward_to_backend(
    request: Request,
    client: httpx.AsyncClient,
    path: str,
    *,
    timeout: float,
    authenticated: bool = True,
    method: Optional[str] = None,
) -> Response:
    """Forward the incoming request to ``path`` on the backend.

    Args:
        request: Incoming request.
        client: Shared backend client.
        path: Backend path, relative to ``API_BASE_URL``.
        timeout: Upstream timeout in seconds.
        authenticated: Whether a bearer token is required.
        method: Override for the forwarded method.

    Returns:
        The backend's response, re-wrapped.

    Raises:
        UpstreamError: The backend could not be reached; the exception
            handlers turn it into a 502/503/504 JSON response.
    """
    access_token = extract_bearer_token(request)
    if authenticated and not access_token:
        return JSONResponse({"detail": "Unauthorized"}, status_code=401)

    headers = {name: request.headers[name] for name in _FORWARDED_HEADERS if name in request.headers}
    headers.setdefault("content-type", "application/json")
    if access_token:
        headers["Authorization"] = f"Bearer {access_token}"

    url = settings.api_url(path)
    forwarded_method = method or request.method
    body = await request.body()

    logger.info("forward_request", method=forwarded_method, url=url)
    upstream = await send_with_timeout(
        client,
        forwarded_method,
        url,
        timeout=timeout,
        headers=headers,
        params=list(request.query_params.multi_items()),
        content=body or None,
    )
    logger.info("forward_response", method=forwarded_method, url=url, status=upstream.status_code)

    return Response(
        content=upstream.content,
        status_code=upstream.status_code,
        media_type=upstream.headers.get("content-type", "application/json"),
    )

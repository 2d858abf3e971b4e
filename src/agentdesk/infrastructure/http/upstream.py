"""Upstream calls with a timeout and a small, stable failure taxonomy.

Failures that produce no HTTP response are mapped as follows:

- timeouts (connect, read, write, pool)            -> `UpstreamTimeoutError` (504)
- connection refused, host not resolvable          -> `UpstreamUnavailableError` (503)
- anything else raised by the transport            -> `UpstreamError` (502)

Every status code the backend does answer with, errors included, is returned
as a response and never raised.
"""

from typing import Any

import httpx
from structlog import get_logger

from agentdesk.core.exceptions import (
    UpstreamError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
)

logger = get_logger(__name__)


async def send_with_timeout(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    *,
    timeout: float,
    **kwargs: Any,
) -> httpx.Response:
    """Send one request to the backend.

    Args:
        client: Shared HTTP client.
        method: HTTP method.
        url: Absolute backend URL.
        timeout: Overall timeout in seconds applied to every phase.
        **kwargs: Passed to `httpx.AsyncClient.request` (headers, params,
            content, json...).

    Returns:
        The backend response, whatever its status.

    Raises:
        UpstreamTimeoutError: The backend did not answer in time.
        UpstreamUnavailableError: The backend could not be connected to.
        UpstreamError: Any other transport failure.
    """
    try:
        return await client.request(method, url, timeout=timeout, **kwargs)
    except httpx.TimeoutException as e:
        logger.warning("upstream_timeout", method=method, url=url, timeout=timeout, error=str(e))
        raise UpstreamTimeoutError() from e
    except httpx.ConnectError as e:
        logger.warning("upstream_unavailable", method=method, url=url, error=str(e))
        raise UpstreamUnavailableError() from e
    except httpx.HTTPError as e:
        logger.error("upstream_request_failed", method=method, url=url, error=str(e))
        raise UpstreamError(str(e) or "Upstream request failed") from e

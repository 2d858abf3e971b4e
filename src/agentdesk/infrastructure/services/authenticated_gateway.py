"""Authenticated request gateway.

Public entry point for calls to protected endpoints. The gateway:

1. sends the request with ``Authorization: Bearer <access token>``;
2. on a 401 whose body is the access-token-expired signal, asks the
   `RefreshCoordinator` for a new pair (joining any refresh already in
   flight), which commits the pair to the session sink;
3. re-sends the original request once with the new access token and returns
   that response, whatever its status.

Everything else (2xx, 403, other 401s, 5xx) is returned untouched, and
network errors propagate as the underlying `httpx` exception. When the
refresh fails, every waiting caller gets `SessionExpiredError`.
"""

from typing import Any, Mapping, Optional

import httpx
from structlog import get_logger

from agentdesk.core.exceptions import SessionExpiredError
from agentdesk.domain.interfaces.token_management import ISessionSink
from agentdesk.domain.services.auth.expiry import is_access_token_expired
from agentdesk.domain.services.auth.refresh_coordinator import RefreshCoordinator

logger = get_logger(__name__)


class AuthenticatedGateway:
    """Sends bearer-authenticated requests and recovers from access-token expiry.

    Attributes:
        client (httpx.AsyncClient): Client used for the original and retried calls.
        coordinator (RefreshCoordinator): Shared single-flight refresh coordinator.
        session_sink (Optional[ISessionSink]): Default sink for new token pairs.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        coordinator: RefreshCoordinator,
        session_sink: Optional[ISessionSink] = None,
    ):
        self.client = client
        self.coordinator = coordinator
        self.session_sink = session_sink

    async def request(
        self,
        method: str,
        url: str,
        *,
        access_token: str,
        refresh_token: str,
        session_sink: Optional[ISessionSink] = None,
        headers: Optional[Mapping[str, str]] = None,
        **options: Any,
    ) -> httpx.Response:
        """Send a request on behalf of an authenticated session.

        Args:
            method: HTTP method.
            url: Target URL.
            access_token: Current access token.
            refresh_token: Current refresh token, used only if the access
                token turns out to be expired.
            session_sink: Sink for a refreshed pair; defaults to the gateway's.
            headers: Caller headers. They are preserved; only `Authorization`
                is overwritten.
            **options: Passed to `httpx.AsyncClient.request` (params, json,
                content, timeout...). Bodies must be replayable since the
                request may be sent twice.

        Returns:
            The original response, or the retried one after a refresh.

        Raises:
            SessionExpiredError: The access token expired and could not be refreshed.
            httpx.HTTPError: Transport failure on the original or retried call.
        """
        response = await self._send(method, url, access_token, headers, options)
        if response.status_code != 401:
            return response

        if not is_access_token_expired(self._error_body(response)):
            logger.debug("unauthorized_not_expiry", method=method, url=url)
            return response

        logger.info("access_token_expired", method=method, url=url)
        sink = session_sink if session_sink is not None else self.session_sink
        try:
            tokens = await self.coordinator.refresh_once(refresh_token, sink)
        except Exception as e:
            logger.error("session_refresh_failed", method=method, url=url, error=str(e))
            raise SessionExpiredError() from e

        logger.info("retrying_with_refreshed_token", method=method, url=url)
        return await self._send(method, url, tokens.access, headers, options)

    async def _send(
        self,
        method: str,
        url: str,
        access_token: str,
        headers: Optional[Mapping[str, str]],
        options: Mapping[str, Any],
    ) -> httpx.Response:
        merged = {k: v for k, v in (headers or {}).items() if k.lower() != "authorization"}
        merged["Authorization"] = f"Bearer {access_token}"
        return await self.client.request(method, url, headers=merged, **options)

    @staticmethod
    def _error_body(response: httpx.Response) -> Any:
        """Decode a JSON error body; anything unreadable counts as no body."""
        if "application/json" not in response.headers.get("content-type", ""):
            return None
        try:
            return response.json()
        except (ValueError, httpx.ResponseNotRead):
            return None

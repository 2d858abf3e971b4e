"""HTTP client for the identity service's refresh-token exchange."""

from typing import Any, Optional

import httpx
from structlog import get_logger

from agentdesk.core.config.settings import settings
from agentdesk.core.exceptions import MalformedTokenResponseError, TokenRefreshError
from agentdesk.domain.interfaces.token_management import ITokenRefresher
from agentdesk.domain.value_objects.token_pair import TokenPair

logger = get_logger(__name__)


def _is_json(response: httpx.Response) -> bool:
    return "application/json" in response.headers.get("content-type", "")


class HttpTokenRefresher(ITokenRefresher):
    """Exchanges a refresh token over HTTP.

    Wire contract: ``POST {"refresh": <token>}`` answered by
    ``{"access": ..., "refresh": ...}``. Error bodies carry `message` or
    `detail`, which become the raised error's message.

    Attributes:
        client (httpx.AsyncClient): HTTP client used for the exchange.
        refresh_url (str): Absolute URL of the refresh endpoint.
        timeout (float): Timeout in seconds for the exchange.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        refresh_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.client = client
        self.refresh_url = refresh_url or settings.api_url(settings.REFRESH_TOKEN_PATH)
        self.timeout = timeout if timeout is not None else settings.REFRESH_TIMEOUT_SECONDS

    async def refresh(self, refresh_token: str) -> TokenPair:
        logger.debug("token_refresh_request", url=self.refresh_url)
        response = await self.client.post(
            self.refresh_url,
            json={"refresh": refresh_token},
            headers={"Content-Type": "application/json"},
            timeout=self.timeout,
        )
        logger.debug("token_refresh_response", status=response.status_code)

        if not response.is_success:
            raise TokenRefreshError(
                self._error_message(response), status_code=response.status_code
            )

        if not _is_json(response):
            logger.error("token_refresh_non_json_success", body=response.text[:500])
            raise MalformedTokenResponseError(
                "Server returned invalid response format. Expected JSON.",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError:
            raise MalformedTokenResponseError(
                "Server returned invalid response format. Expected JSON.",
                status_code=response.status_code,
            )

        try:
            return TokenPair.from_payload(payload)
        except ValueError:
            logger.error(
                "token_refresh_incomplete_body",
                has_access=bool(isinstance(payload, dict) and payload.get("access")),
                has_refresh=bool(isinstance(payload, dict) and payload.get("refresh")),
            )
            raise MalformedTokenResponseError(status_code=response.status_code)

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Pick the most useful message from a failed exchange."""
        if _is_json(response):
            try:
                body: Any = response.json()
            except ValueError:
                body = None
            if isinstance(body, dict):
                message = body.get("message") or body.get("detail")
                if isinstance(message, str) and message:
                    logger.warning("token_refresh_rejected", status=response.status_code, body=body)
                    return message
            return TokenRefreshError().message

        logger.warning(
            "token_refresh_non_json_error", status=response.status_code, body=response.text[:500]
        )
        return "Token refresh failed." if response.text else TokenRefreshError().message

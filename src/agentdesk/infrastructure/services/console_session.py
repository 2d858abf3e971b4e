"""Console session: the client-side holder of the token pair.

Wraps the gateway with the session's store so callers only name the request.
This is also the layer that turns a dead session into a logout: when the
gateway reports `SessionExpiredError`, the stored pair is dropped before the
error is re-raised, so the console falls back to the login screen regardless
of which endpoint noticed.
"""

from typing import Any, Iterable, Optional

import httpx
from structlog import get_logger

from agentdesk.core.config.settings import Settings, settings
from agentdesk.core.exceptions import NotAuthenticatedError, SessionExpiredError
from agentdesk.domain.interfaces.token_management import ISessionStore
from agentdesk.domain.services.auth.refresh_coordinator import RefreshCoordinator
from agentdesk.domain.value_objects.token_pair import TokenPair
from agentdesk.infrastructure.services.authenticated_gateway import AuthenticatedGateway
from agentdesk.infrastructure.services.identity_client import HttpTokenRefresher
from agentdesk.infrastructure.session.stores import FileSessionStore
from agentdesk.utils.response_parsing import parse_api_response

logger = get_logger(__name__)


class ConsoleSession:
    def __init__(self, gateway: AuthenticatedGateway, store: ISessionStore):
        self.gateway = gateway
        self.store = store

    async def start(self, tokens: TokenPair) -> None:
        """Install the pair issued by the identity exchange at login."""
        await self.store.update(tokens.access, tokens.refresh)
        logger.info("session_started", tokens=tokens.mask_for_logging())

    async def current_tokens(self) -> Optional[TokenPair]:
        return await self.store.load()

    async def is_authenticated(self) -> bool:
        return await self.store.load() is not None

    async def logout(self) -> None:
        await self.store.clear()
        logger.info("session_ended")

    async def request(self, method: str, url: str, **options: Any) -> httpx.Response:
        """Send an authenticated request with the session's current pair.

        Raises:
            NotAuthenticatedError: No pair is held.
            SessionExpiredError: The pair could not be refreshed; the session
                has been cleared.
        """
        tokens = await self.store.load()
        if tokens is None:
            raise NotAuthenticatedError()

        try:
            return await self.gateway.request(
                method,
                url,
                access_token=tokens.access,
                refresh_token=tokens.refresh,
                session_sink=self.store,
                **options,
            )
        except SessionExpiredError:
            await self.store.clear()
            logger.warning("session_terminated", method=method, url=url)
            raise

    async def fetch_json(
        self, method: str, url: str, numeric_fields: Iterable[str] = (), **options: Any
    ) -> Any:
        """`request`, then fail on non-2xx and return the normalised JSON body.

        Raises:
            httpx.HTTPStatusError: The final response was not successful.
        """
        response = await self.request(method, url, **options)
        response.raise_for_status()
        return parse_api_response(response.json(), numeric_fields)


def create_console_session(
    client: httpx.AsyncClient, app_settings: Optional[Settings] = None
) -> ConsoleSession:
    """Build a console session persisted to ``SESSION_FILE``.

    The refresher, coordinator and gateway share ``client``; the coordinator
    is created here so every request of this session joins the same refresh.
    """
    config = app_settings or settings
    refresher = HttpTokenRefresher(
        client,
        refresh_url=config.api_url(config.REFRESH_TOKEN_PATH),
        timeout=config.REFRESH_TIMEOUT_SECONDS,
    )
    store = FileSessionStore(config.SESSION_FILE)
    gateway = AuthenticatedGateway(client, RefreshCoordinator(refresher), store)
    logger.debug("console_session_created", session_file=str(config.SESSION_FILE))
    return ConsoleSession(gateway, store)

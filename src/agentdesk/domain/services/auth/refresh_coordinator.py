"""Single-flight refresh coordinator.

When several requests discover an expired access token at the same time,
exactly one refresh call must reach the identity service: some backends
invalidate a refresh token after its first use, and callers that refreshed
independently would end up holding pairs that are stale relative to the last
one written.

The coordinator keeps one pending ``asyncio.Task`` per instance. The slot is
written in the same tick in which the decision to refresh is made (there is
no ``await`` between the check and the write). This holds on a
single-threaded event loop only; a multi-threaded runtime
would need a lock around the check-and-set.
"""

import asyncio
from typing import Optional

from structlog import get_logger

from agentdesk.domain.interfaces.token_management import ISessionSink, ITokenRefresher
from agentdesk.domain.value_objects.token_pair import TokenPair

logger = get_logger(__name__)


def _consume_outcome(task: "asyncio.Task[TokenPair]") -> None:
    if not task.cancelled():
        task.exception()


class RefreshCoordinator:
    """Collapses concurrent refresh requests into one physical refresh.

    One instance is created per session (or per process) and injected into
    every gateway that serves that session.

    Attributes:
        refresher (ITokenRefresher): The identity collaborator's refresh call.
    """

    def __init__(self, refresher: ITokenRefresher):
        self.refresher = refresher
        self._pending: Optional["asyncio.Task[TokenPair]"] = None

    @property
    def is_refreshing(self) -> bool:
        """True while a refresh is in flight."""
        return self._pending is not None

    async def refresh_once(
        self, refresh_token: str, session_sink: Optional[ISessionSink] = None
    ) -> TokenPair:
        """Refresh the token pair, joining an in-flight refresh if there is one.

        Args:
            refresh_token: Refresh token to exchange. Ignored when joining a
                refresh that is already pending.
            session_sink: Receives the new pair exactly once per physical
                refresh, before any caller is released. Ignored when joining.

        Returns:
            The new `TokenPair`; every caller sharing a refresh gets the same one.

        Raises:
            Exception: Whatever the refresh (or the sink) raised, delivered to
                every caller that shared the attempt.
        """
        pending = self._pending
        if pending is None:
            pending = asyncio.create_task(self._run(refresh_token, session_sink))
            # Mark the outcome retrieved even if every waiter was cancelled.
            pending.add_done_callback(_consume_outcome)
            self._pending = pending
            logger.info("token_refresh_started")
        else:
            logger.debug("token_refresh_joined")

        # A cancelled waiter must not cancel the refresh other callers share.
        return await asyncio.shield(pending)

    async def _run(self, refresh_token: str, session_sink: Optional[ISessionSink]) -> TokenPair:
        try:
            tokens = await self.refresher.refresh(refresh_token)
            if session_sink is not None:
                await session_sink.update(tokens.access, tokens.refresh)
            logger.info("token_refresh_succeeded", tokens=tokens.mask_for_logging())
            return tokens
        except Exception as e:
            logger.warning("token_refresh_failed", error=str(e), error_type=type(e).__name__)
            raise
        finally:
            self._pending = None

"""Token maintenance interfaces.

The gateway depends on these abstractions only:

- ``ITokenRefresher``: the identity collaborator's refresh operation, one
  network call exchanging a refresh token for a new pair.
- ``ISessionSink``: where a freshly refreshed pair is committed so later
  requests (and restarts) use it.
- ``ISessionStore``: a sink that can also hand back and forget the pair it
  holds; used by the console session to start requests and force logout.
"""

from abc import ABC, abstractmethod
from typing import Optional

from agentdesk.domain.value_objects.token_pair import TokenPair


class ITokenRefresher(ABC):
    """Interface for the refresh-token exchange."""

    @abstractmethod
    async def refresh(self, refresh_token: str) -> TokenPair:
        """Exchanges a refresh token for a new token pair.

        Args:
            refresh_token: The refresh token currently held by the session.

        Returns:
            A complete new `TokenPair`.

        Raises:
            TokenRefreshError: If the identity service rejects the exchange or
                answers with an unusable body.
        """
        raise NotImplementedError


class ISessionSink(ABC):
    """Receives every new token pair produced by a refresh.

    Implementations must have committed the pair when `update` returns; the
    gateway awaits it before retrying the original request. An exception
    raised here fails the refresh attempt.
    """

    @abstractmethod
    async def update(self, access_token: str, refresh_token: str) -> None:
        raise NotImplementedError


class ISessionStore(ISessionSink):
    """Durable holder of the session's current token pair."""

    @abstractmethod
    async def load(self) -> Optional[TokenPair]:
        """Returns the stored pair, or ``None`` when no session is held."""
        raise NotImplementedError

    @abstractmethod
    async def clear(self) -> None:
        """Forgets the stored pair (logout)."""
        raise NotImplementedError

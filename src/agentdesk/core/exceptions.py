from __future__ import annotations

"""Centralized, structured exception hierarchy for agentdesk.

Each exception carries a machine-readable `code` for programmatic error
handling and a human-readable `message` for logging and user feedback.

The hierarchy separates three families:
- Authentication errors raised while maintaining a session's token pair.
- Upstream errors raised by the forwarding layer when the backend cannot be
  reached; they carry the HTTP status the layer answers with.
- The generic base class for everything else.
"""

from typing import Final

__all__: Final = [
    "AgentDeskError",
    "AuthenticationError",
    "NotAuthenticatedError",
    "TokenRefreshError",
    "MalformedTokenResponseError",
    "SessionExpiredError",
    "SESSION_EXPIRED_MARKER",
    "UpstreamError",
    "UpstreamTimeoutError",
    "UpstreamUnavailableError",
]

# Callers that only see a serialized error (e.g. a JSON body crossing a
# process boundary) detect a dead session by this substring.
SESSION_EXPIRED_MARKER: Final = "Token refresh failed"


class AgentDeskError(Exception):
    """Base exception class for all custom errors in the agentdesk application.

    Attributes:
        message (str): A human-readable error message, suitable for logging.
        code (str): A unique, machine-readable error code for identifying
                    the type of error programmatically.
    """

    message: str
    code: str = "generic_error"

    def __init__(self, message: str, code: str = "generic_error"):
        self.message = message
        self.code = code
        Exception.__init__(self, self.message)

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Auth-related errors
# ---------------------------------------------------------------------------


class AuthenticationError(AgentDeskError):
    """Raised for general authentication failures.

    Base for the session-maintenance errors below. Maps to a
    `401 Unauthorized` HTTP status code.
    """

    def __init__(self, message: str, code: str = "authentication_error"):
        super().__init__(message, code)


class NotAuthenticatedError(AuthenticationError):
    """Raised when a request is attempted without any session token pair."""

    def __init__(self, message: str = "Unauthorized", code: str = "not_authenticated"):
        super().__init__(message, code)


class TokenRefreshError(AuthenticationError):
    """Raised when the identity service refuses to exchange a refresh token.

    The message is the backend's own `message`/`detail` when it sent one.
    """

    def __init__(
        self,
        message: str = f"{SESSION_EXPIRED_MARKER}. Please login again.",
        code: str = "token_refresh_error",
        status_code: int | None = None,
    ):
        super().__init__(message, code)
        self.status_code = status_code


class MalformedTokenResponseError(TokenRefreshError):
    """Raised when a refresh succeeded on the wire but the body is unusable.

    Either the body is not JSON, or one of `access`/`refresh` is missing.
    A partial pair is never exposed.
    """

    def __init__(
        self,
        message: str = "Invalid token response from server.",
        code: str = "malformed_token_response",
        status_code: int | None = None,
    ):
        super().__init__(message, code, status_code)


class SessionExpiredError(AuthenticationError):
    """Raised when an expired access token could not be refreshed.

    Every caller waiting on the failed refresh receives this error. It means
    the session is no longer valid and the holder must log out, whichever
    endpoint triggered it. The message always contains
    ``SESSION_EXPIRED_MARKER``.
    """

    def __init__(
        self,
        message: str = f"{SESSION_EXPIRED_MARKER}. Please login again.",
        code: str = "session_expired",
    ):
        super().__init__(message, code)


# ---------------------------------------------------------------------------
# Upstream errors (forwarding layer)
# ---------------------------------------------------------------------------


class UpstreamError(AgentDeskError):
    """Raised when a forwarded request to the backend fails without a response.

    Maps to `502 Bad Gateway`; the message is the underlying failure's
    message so it can be passed through as `{"detail": message}`.
    """

    status_code: int = 502

    def __init__(self, message: str = "Upstream request failed", code: str = "upstream_error"):
        super().__init__(message, code)


class UpstreamTimeoutError(UpstreamError):
    """Raised when the backend did not answer within the route's timeout.

    Maps to `504 Gateway Timeout`.
    """

    status_code: int = 504

    def __init__(self, message: str = "ETIMEDOUT", code: str = "upstream_timeout"):
        super().__init__(message, code)


class UpstreamUnavailableError(UpstreamError):
    """Raised when the backend refused the connection or its host did not resolve.

    Maps to `503 Service Unavailable`.
    """

    status_code: int = 503

    def __init__(
        self, message: str = "Unable to connect to the server", code: str = "upstream_unavailable"
    ):
        super().__init__(message, code)

"""Expiry classifier.

Decides whether a failed response body means "the access token expired" as
opposed to any other 401/403 cause (bad credentials, revoked or expired
refresh token, malformed token). Only the former may trigger a refresh.
"""

from typing import Any

from agentdesk.domain.value_objects.expiry_signal import ExpirySignal


def is_access_token_expired(body: Any) -> bool:
    """Classify a decoded error body.

    Args:
        body: The parsed JSON body of a non-2xx response, or ``None`` when the
            body was absent or could not be decoded.

    Returns:
        True iff the body is a `token_not_valid` error with at least one
        access-token message reporting expiry. Never raises.
    """
    signal = ExpirySignal.parse(body)
    return signal is not None and signal.access_token_expired

"""Token pair value object.

The access/refresh credential held by a console session. A pair is created by
the identity exchange, superseded (never mutated) by every successful
refresh and discarded on logout or terminal refresh failure.
"""

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class TokenPair:
    """Immutable access/refresh token pair.

    Both fields must be non-empty strings. A refresh either yields a complete
    new pair or fails; there is no way to build a half-updated pair.
    """

    access: str
    refresh: str

    def __post_init__(self):
        """Validate both tokens after initialization."""
        if not isinstance(self.access, str) or not self.access:
            raise ValueError("Access token cannot be empty")
        if not isinstance(self.refresh, str) or not self.refresh:
            raise ValueError("Refresh token cannot be empty")

    @classmethod
    def from_payload(cls, payload: Any) -> "TokenPair":
        """Build a pair from a decoded `{"access": ..., "refresh": ...}` body.

        Raises:
            ValueError: If the payload is not a mapping or either token is
                missing or empty.
        """
        if not isinstance(payload, Mapping):
            raise ValueError("Token payload must be a JSON object")
        return cls(access=payload.get("access"), refresh=payload.get("refresh"))

    def mask_for_logging(self) -> dict:
        """Return a log-safe view of the pair."""
        return {"access": _mask(self.access), "refresh": _mask(self.refresh)}

    def __repr__(self) -> str:
        masked = self.mask_for_logging()
        return f"TokenPair(access={masked['access']!r}, refresh={masked['refresh']!r})"


def _mask(token: str) -> str:
    return token[:6] + "..." if len(token) > 6 else "***"

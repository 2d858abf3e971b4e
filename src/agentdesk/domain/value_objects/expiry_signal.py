"""Expiry signal value object.

Protected backend endpoints answer an expired access token with::

    {"code": "token_not_valid",
     "messages": [{"token_type": "access", "message": "Token is expired"}]}

`ExpirySignal` is the normalized form of that body. Parsing never raises: any
body that does not have the `token_not_valid` shape yields ``None``.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Mapping, Optional, Tuple


@dataclass(frozen=True)
class TokenMessage:
    """One entry of the `messages` list."""

    token_type: str
    message: str

    EXPIRED_MESSAGE: ClassVar[str] = "Token is expired"

    @property
    def reports_access_expiry(self) -> bool:
        return self.token_type == "access" and (
            self.message == self.EXPIRED_MESSAGE or "expired" in self.message.lower()
        )


@dataclass(frozen=True)
class ExpirySignal:
    """A `token_not_valid` error body reduced to the fields the gateway reads."""

    code: str
    messages: Tuple[TokenMessage, ...]

    TOKEN_NOT_VALID: ClassVar[str] = "token_not_valid"

    @classmethod
    def parse(cls, body: Any) -> Optional["ExpirySignal"]:
        """Normalize a decoded error body.

        Returns ``None`` for anything that is not a mapping with
        ``code == "token_not_valid"``. Malformed `messages` entries are
        dropped rather than rejected.
        """
        if not isinstance(body, Mapping) or body.get("code") != cls.TOKEN_NOT_VALID:
            return None

        raw_messages = body.get("messages")
        messages = []
        if isinstance(raw_messages, (list, tuple)):
            for entry in raw_messages:
                if not isinstance(entry, Mapping):
                    continue
                token_type = entry.get("token_type")
                message = entry.get("message")
                if isinstance(token_type, str) and isinstance(message, str):
                    messages.append(TokenMessage(token_type=token_type, message=message))
        return cls(code=cls.TOKEN_NOT_VALID, messages=tuple(messages))

    @property
    def access_token_expired(self) -> bool:
        return any(m.reports_access_expiry for m in self.messages)

from .expiry_signal import ExpirySignal, TokenMessage
from .token_pair import TokenPair

__all__ = ["ExpirySignal", "TokenMessage", "TokenPair"]

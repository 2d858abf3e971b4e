"""Token maintenance domain services."""

from .expiry import is_access_token_expired
from .refresh_coordinator import RefreshCoordinator

__all__ = ["RefreshCoordinator", "is_access_token_expired"]

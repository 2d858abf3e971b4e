"""Settings for the remote REST backend the console talks to.

Endpoint paths are relative to ``API_BASE_URL``. Timeouts are split into the
two classes the forwarding layer uses: light reads (profile, wallet, a single
order) and writes or heavier reads (listings, pricing, uploads).
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class BackendSettings(BaseSettings):
    """Backend location, endpoint paths and upstream timeouts."""

    API_BASE_URL: str = "http://localhost:8000"

    # Identity endpoints
    REFRESH_TOKEN_PATH: str = "/auth/refresh"
    REGISTER_PATH: str = "/auth/register"

    # Console resources
    ME_PATH: str = "/users/me"
    PROFILE_IMAGE_PATH: str = "/users/me/profile-image"
    AGENT_ORDERS_PATH: str = "/agent/orders"
    ORDER_DETAILS_PATH: str = "/orders"
    WALLETS_PATH: str = "/wallets"
    AGENT_OFFICES_PATH: str = "/agent-offices"
    DELIVERY_WINDOWS_PATH: str = "/delivery-windows"
    PRICING_CALCULATE_PATH: str = "/pricing/calculate"
    REVERSE_GEOCODE_PATH: str = "/locations/reverse-geocode"

    # Upstream timeouts (seconds)
    LIGHT_READ_TIMEOUT_SECONDS: float = Field(gt=0, default=30.0)
    HEAVY_TIMEOUT_SECONDS: float = Field(gt=0, default=60.0)
    REFRESH_TIMEOUT_SECONDS: float = Field(gt=0, default=60.0)

    # Durable session storage used by the client-side gateway
    SESSION_FILE: Path = Path("~/.agentdesk/session.json")

    @field_validator("SESSION_FILE", mode="after")
    @classmethod
    def expand_session_file(cls, v: Path) -> Path:
        return v.expanduser()

    def api_url(self, path: str) -> str:
        """Joins ``API_BASE_URL`` and ``path`` with exactly one slash between them."""
        clean_path = path if path.startswith("/") else f"/{path}"
        return f"{self.API_BASE_URL.rstrip('/')}{clean_path}"

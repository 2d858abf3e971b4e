from .authenticated_gateway import AuthenticatedGateway
from .console_session import ConsoleSession, create_console_session
from .identity_client import HttpTokenRefresher

__all__ = [
    "AuthenticatedGateway",
    "ConsoleSession",
    "HttpTokenRefresher",
    "create_console_session",
]

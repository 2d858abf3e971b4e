from .token_management import ISessionSink, ISessionStore, ITokenRefresher

__all__ = ["ISessionSink", "ISessionStore", "ITokenRefresher"]

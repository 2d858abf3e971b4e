from .stores import CallbackSessionSink, FileSessionStore, InMemorySessionStore

__all__ = ["CallbackSessionSink", "FileSessionStore", "InMemorySessionStore"]

"""Backing logic: content loading and session history."""

from .content_loader import JsonContentLoader
from .session_store import InMemorySessionStore, SessionStore, new_session_id

__all__ = [
    "InMemorySessionStore",
    "JsonContentLoader",
    "SessionStore",
    "new_session_id",
]

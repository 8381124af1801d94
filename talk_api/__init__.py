"""
Talk Starters API Server

Usage: uvicorn talk_api:app --reload --port 8000
"""

from .app import app, create_app
from .config import ServerConfig, get_config, reload_config
from .services import InMemorySessionStore, JsonContentLoader, SessionStore

__all__ = [
    "app",
    "create_app",
    "ServerConfig",
    "get_config",
    "reload_config",
    "InMemorySessionStore",
    "JsonContentLoader",
    "SessionStore",
]

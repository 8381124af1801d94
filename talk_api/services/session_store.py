"""
Session Store abstraction.

Holds each session's "seen" history: the ordered list of point keys already
served to that client. Implementations: in-memory (single process). The
read-modify-write of one session's history is serialized by a lock scoped to
that session id; different sessions never wait on each other.
"""

import threading
import uuid
from contextlib import contextmanager
from typing import ContextManager, Dict, Iterator, List, Protocol


def new_session_id() -> str:
    return uuid.uuid4().hex


class SessionStore(Protocol):
    """Protocol for per-session seen history."""

    def history(self, session_id: str) -> ContextManager[List[str]]:
        """
        Exclusive access to the session's history, created empty if absent.
        Changes made inside the block are committed when it exits cleanly.
        """
        ...

    def get_seen(self, session_id: str) -> List[str]:
        """Snapshot of the session's history (empty for unknown sessions)."""
        ...

    def discard(self, session_id: str) -> bool:
        """Forget a session. Return True if it existed."""
        ...


class InMemorySessionStore:
    """
    Session store kept in process memory.
    Lifetime of each entry is the lifetime of the process.
    """

    def __init__(self):
        self._seen: Dict[str, List[str]] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._guard = threading.Lock()

    def _lock_for(self, session_id: str) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(session_id)
            if lock is None:
                lock = self._locks[session_id] = threading.Lock()
            return lock

    @contextmanager
    def history(self, session_id: str) -> Iterator[List[str]]:
        with self._lock_for(session_id):
            working = list(self._seen.get(session_id, []))
            yield working
            self._seen[session_id] = working

    def get_seen(self, session_id: str) -> List[str]:
        with self._lock_for(session_id):
            return list(self._seen.get(session_id, []))

    def discard(self, session_id: str) -> bool:
        # the lock itself is kept: another request may already be waiting on it
        with self._lock_for(session_id):
            return self._seen.pop(session_id, None) is not None

    def __len__(self) -> int:
        return len(self._seen)

"""
auth/store.py -- Session repository: the set of currently valid tokens.

Pattern: Repository. SessionRepository is the interface the guard and the
login/logout flow depend on; InMemorySessionStore is the only implementation.
Routes reach the store through app.state, never through a module global, so a
shared-storage backend can replace it without touching the guard.

Concurrency:
  FastAPI runs sync handlers on a thread pool, so logins, logouts and checks
  hit the store from several threads at once. One threading.Lock serializes
  every operation; each of add/contains/remove/clear is atomic on its own and
  none of them blocks for longer than a set operation. No transaction spans
  more than one call.

Durability:
  None. The set lives in process memory and every session is dropped when the
  process restarts. A multi-instance deployment would need a shared backend
  with transactional access behind the same interface.

Entries are bare tokens. There is no metadata and no user binding -- the
system has exactly one logical user.

Layer rule: no imports from api/.
"""

from __future__ import annotations

import threading
from typing import Protocol


class SessionRepository(Protocol):
    """Interface for session token storage."""

    def add(self, token: str) -> None: ...

    def contains(self, token: str | None) -> bool: ...

    def remove(self, token: str | None) -> None: ...

    def clear(self) -> int: ...

    def __len__(self) -> int: ...


class InMemorySessionStore:
    """Process-scoped, thread-safe set of session tokens.

    Usage:
        store = InMemorySessionStore()
        store.add(token)
        store.contains(token)   # True
        store.remove(token)     # idempotent
    """

    def __init__(self) -> None:
        self._tokens: set[str] = set()
        self._lock = threading.Lock()

    def add(self, token: str) -> None:
        """Record a token. Adding a token twice is a no-op."""
        if not token:
            raise ValueError("Cannot store an empty session token.")
        with self._lock:
            self._tokens.add(token)

    def contains(self, token: str | None) -> bool:
        """Return True if the token belongs to a live session."""
        if not token:
            return False
        with self._lock:
            return token in self._tokens

    def remove(self, token: str | None) -> None:
        """Forget a token. Unknown or empty tokens are ignored."""
        if not token:
            return
        with self._lock:
            self._tokens.discard(token)

    def clear(self) -> int:
        """Drop every session. Returns the number of tokens removed."""
        with self._lock:
            count = len(self._tokens)
            self._tokens.clear()
        return count

    def __len__(self) -> int:
        with self._lock:
            return len(self._tokens)

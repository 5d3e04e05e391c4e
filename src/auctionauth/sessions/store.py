"""Session store port and its in-process implementation."""

from __future__ import annotations

import threading
from typing import Protocol

from auctionauth.sessions.models import SessionRecord, SessionState


class SessionStore(Protocol):
    """Backing map from token to session record.

    Implementations must make each call atomic per token.
    """

    def add(self, record: SessionRecord) -> None:
        """Store a newly issued session."""
        ...

    def get(self, token: str) -> SessionRecord | None:
        """Return the session for this token, or None."""
        ...

    def mark_revoked(self, token: str) -> bool:
        """Move the session to REVOKED. Returns True if it was active."""
        ...

    def remove(self, token: str) -> None:
        """Forget the session, if present."""
        ...

    def tokens(self) -> list[str]:
        """Return every token currently held."""
        ...


class InMemorySessionStore:
    """Thread-safe dictionary-backed session store."""

    def __init__(self) -> None:
        self._records: dict[str, SessionRecord] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def add(self, record: SessionRecord) -> None:
        with self._lock:
            if record.token in self._records:
                raise ValueError("Session token already issued")
            self._records[record.token] = record

    def get(self, token: str) -> SessionRecord | None:
        with self._lock:
            return self._records.get(token)

    def mark_revoked(self, token: str) -> bool:
        with self._lock:
            record = self._records.get(token)
            if record is None or record.state == SessionState.REVOKED:
                return False
            record.state = SessionState.REVOKED
            return True

    def remove(self, token: str) -> None:
        with self._lock:
            self._records.pop(token, None)

    def tokens(self) -> list[str]:
        with self._lock:
            return list(self._records)

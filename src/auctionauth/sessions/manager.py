"""SessionManager - issues, resolves and revokes session tokens."""

from __future__ import annotations

import itertools
import logging
import re
import secrets
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from auctionauth.logging import mask_token
from auctionauth.sessions.models import SessionRecord
from auctionauth.sessions.store import InMemorySessionStore

if TYPE_CHECKING:
    from collections.abc import Callable

    from auctionauth.sessions.store import SessionStore

logger = logging.getLogger(__name__)

TOKEN_BYTES = 32
MAX_TOKEN_LENGTH = 128
PURGE_EVERY = 256
_TOKEN_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


def _utc_now() -> datetime:
    return datetime.now(UTC)


class SessionManager:
    """Owns the token -> student ID mapping and its lifecycle.

    Each token moves from ACTIVE to REVOKED exactly once and never back.
    A token that was never issued, was revoked, or has expired resolves
    to None.
    """

    def __init__(
        self,
        store: SessionStore | None = None,
        ttl_seconds: int | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize the SessionManager.

        Args:
            store: Backing session store. Defaults to an in-memory store.
            ttl_seconds: Session lifetime; None means sessions never expire.
            clock: Source of the current UTC time.
        """
        if ttl_seconds is not None and ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive when set")
        self._store: SessionStore = store if store is not None else InMemorySessionStore()
        self._ttl = timedelta(seconds=ttl_seconds) if ttl_seconds is not None else None
        self._clock = clock
        self._issued = itertools.count(1)

    @property
    def store(self) -> SessionStore:
        """The backing session store."""
        return self._store

    @property
    def ttl_seconds(self) -> int | None:
        return int(self._ttl.total_seconds()) if self._ttl is not None else None

    def create(self, account_id: int) -> str:
        """Issue a new session for an authenticated student.

        Several sessions may be active for the same student.

        Args:
            account_id: The student ID to bind to the token.

        Returns:
            A fresh, unguessable session token.
        """
        if isinstance(account_id, bool) or not isinstance(account_id, int) or account_id <= 0:
            raise ValueError(f"Invalid account id: {account_id!r}")

        now = self._clock()
        record = SessionRecord(
            token=secrets.token_urlsafe(TOKEN_BYTES),
            account_id=account_id,
            created_at=now,
            expires_at=now + self._ttl if self._ttl is not None else None,
        )
        self._store.add(record)
        logger.info("Session %s created for account %s", mask_token(record.token), account_id)
        if next(self._issued) % PURGE_EVERY == 0:
            self.purge_inactive()
        return record.token

    def resolve(self, token: str | None) -> int | None:
        """Look up the student bound to a token.

        Args:
            token: The token presented by the client.

        Returns:
            The student ID if the session is active, otherwise None.
        """
        if not _is_well_formed(token):
            return None

        record = self._store.get(token)  # type: ignore[arg-type]
        if record is None or not record.is_active:
            return None

        if record.is_expired(self._clock()):
            if self._store.mark_revoked(record.token):
                logger.info("Session %s expired", mask_token(record.token))
            self._store.remove(record.token)
            return None

        return record.account_id

    def revoke(self, token: str | None) -> None:
        """Revoke a session (logout).

        The record is dropped from the store once revoked. Unknown, malformed
        and already revoked tokens are ignored.

        Args:
            token: The token to revoke.
        """
        if not _is_well_formed(token):
            return
        if self._store.mark_revoked(token):  # type: ignore[arg-type]
            logger.info("Session %s revoked", mask_token(token))
        self._store.remove(token)  # type: ignore[arg-type]

    def purge_inactive(self) -> int:
        """Drop revoked and expired sessions from the backing store.

        Also runs every PURGE_EVERY sessions created, which sweeps expired
        sessions that are never looked up again.

        Returns:
            Number of sessions removed.
        """
        now = self._clock()
        removed = 0
        for token in self._store.tokens():
            record = self._store.get(token)
            if record is None:
                continue
            if not record.is_active or record.is_expired(now):
                self._store.remove(token)
                removed += 1
        if removed:
            logger.debug("Purged %d inactive sessions", removed)
        return removed


def _is_well_formed(token: str | None) -> bool:
    return (
        isinstance(token, str)
        and 0 < len(token) <= MAX_TOKEN_LENGTH
        and _TOKEN_PATTERN.match(token) is not None
    )

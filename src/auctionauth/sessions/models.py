"""Data models for the sessions module."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime  # noqa: TC003 - used at runtime by dataclasses
from enum import StrEnum


class SessionState(StrEnum):
    """Session state enum. REVOKED is terminal."""

    ACTIVE = "active"
    REVOKED = "revoked"


@dataclass
class SessionRecord:
    """One authenticated browsing context.

    Attributes:
        token: Opaque token handed to the client.
        account_id: Student ID bound at creation; never changes.
        created_at: When the session was issued (UTC).
        expires_at: When the session stops resolving, or None for no expiry.
        state: ACTIVE until logout, revocation or expiry.
    """

    token: str
    account_id: int
    created_at: datetime
    expires_at: datetime | None = None
    state: SessionState = SessionState.ACTIVE

    @property
    def is_active(self) -> bool:
        return self.state == SessionState.ACTIVE

    def is_expired(self, now: datetime) -> bool:
        """Check whether the session has passed its expiry time."""
        return self.expires_at is not None and now >= self.expires_at

    def __repr__(self) -> str:
        return (
            f"<SessionRecord(token={self.token[:6]!r}..., account_id={self.account_id!r}, "
            f"state={self.state.value!r})>"
        )

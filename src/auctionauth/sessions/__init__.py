"""Sessions package - session token lifecycle."""

from auctionauth.sessions.manager import SessionManager
from auctionauth.sessions.models import SessionRecord, SessionState
from auctionauth.sessions.store import InMemorySessionStore, SessionStore

__all__ = [
    "InMemorySessionStore",
    "SessionManager",
    "SessionRecord",
    "SessionState",
    "SessionStore",
]

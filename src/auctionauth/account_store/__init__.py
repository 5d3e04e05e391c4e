"""Account Store - Persistent storage for student accounts."""

from auctionauth.account_store.exceptions import (
    AccountConflictError,
    AccountStoreError,
    StorageError,
)
from auctionauth.account_store.models import (
    DEFAULT_MAX_CREDITS,
    DEFAULT_MAX_POINTS,
    MAX_GRADE,
    MIN_GRADE,
    Account,
)
from auctionauth.account_store.store import AccountStore, SqlAccountStore

__all__ = [
    "DEFAULT_MAX_CREDITS",
    "DEFAULT_MAX_POINTS",
    "MAX_GRADE",
    "MIN_GRADE",
    "Account",
    "AccountConflictError",
    "AccountStore",
    "AccountStoreError",
    "SqlAccountStore",
    "StorageError",
]

"""AccountStore - persistence port for student accounts and its SQL adapter."""

from __future__ import annotations

import logging
import secrets
from contextlib import contextmanager
from typing import TYPE_CHECKING, Protocol

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from auctionauth.account_store.database import Database
from auctionauth.account_store.exceptions import AccountConflictError, StorageError
from auctionauth.account_store.models import Account

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

_DUPLICATE_KEY_MARKERS = ("UNIQUE constraint failed", "duplicate key")


class AccountStore(Protocol):
    """Interface the registry and the verifier depend on."""

    def exists_by_id(self, student_id: int) -> bool:
        """Return True iff an account with this ID is stored."""
        ...

    def insert(self, account: Account) -> Account:
        """Persist a new account, raising AccountConflictError on a duplicate ID."""
        ...

    def fetch_by_id(self, student_id: int) -> Account | None:
        """Return the account with this ID, or None."""
        ...

    def fetch_by_credentials(self, student_id: int, password: str) -> Account | None:
        """Return the account only when the ID exists and the password matches."""
        ...


class SqlAccountStore:
    """SQLAlchemy-backed implementation of `AccountStore`.

    Every operation runs in its own transaction. Duplicate detection relies
    on the primary key of the `students` table, not on a prior lookup.
    """

    def __init__(self, db_path: str = "auctionauth.db", timeout: float = 5.0) -> None:
        """Initialize Account Store with SQLite database.

        Creates database and tables if they don't exist.

        Args:
            db_path: Path to SQLite database file
            timeout: Seconds to wait on a locked database before giving up
        """
        self._db = Database(db_path, timeout=timeout)
        try:
            self._db.create_tables()
        except SQLAlchemyError as e:
            raise StorageError("Account storage is unavailable") from e

    @property
    def database(self) -> Database:
        """The underlying database manager."""
        return self._db

    def close(self) -> None:
        """Close the database connection."""
        self._db.close()

    @contextmanager
    def _unit_of_work(self, action: str) -> Iterator[Session]:
        """Run one store call in a transaction, translating driver errors."""
        try:
            with self._db.transaction() as session:
                yield session
        except SQLAlchemyError as e:
            logger.error("Account store %s failed: %s", action, type(e).__name__)
            raise StorageError(f"Account store {action} failed") from e

    def exists_by_id(self, student_id: int) -> bool:
        """Check whether an account exists.

        Args:
            student_id: The student's ID

        Returns:
            True if an account with this ID is stored

        Raises:
            StorageError: If the database cannot be queried
        """
        with self._unit_of_work("exists_by_id") as session:
            stmt = select(Account.student_id).where(Account.student_id == student_id)
            return session.execute(stmt).scalar_one_or_none() is not None

    def insert(self, account: Account) -> Account:
        """Insert a new account.

        Args:
            account: The account to persist

        Returns:
            The stored account, with server-side defaults loaded

        Raises:
            AccountConflictError: If an account with the same student_id exists
            StorageError: If the insert fails for any other reason
        """
        try:
            with self._db.transaction() as session:
                session.add(account)
                session.flush()
                session.refresh(account)
        except IntegrityError as e:
            if any(marker in str(e) for marker in _DUPLICATE_KEY_MARKERS):
                logger.info("Rejected duplicate account %s", account.student_id)
                raise AccountConflictError(account.student_id) from e
            logger.error("Account insert violated a constraint for %s", account.student_id)
            raise StorageError("Account store insert failed") from e
        except SQLAlchemyError as e:
            logger.error("Account store insert failed: %s", type(e).__name__)
            raise StorageError("Account store insert failed") from e

        logger.info("Stored account %s", account.student_id)
        return account

    def fetch_by_id(self, student_id: int) -> Account | None:
        """Get account by ID.

        Args:
            student_id: The student's ID

        Returns:
            The Account, or None if it doesn't exist

        Raises:
            StorageError: If the database cannot be queried
        """
        with self._unit_of_work("fetch_by_id") as session:
            return session.get(Account, student_id)

    def fetch_by_credentials(self, student_id: int, password: str) -> Account | None:
        """Get account by ID and password.

        The password is compared exactly, with no normalisation.

        Args:
            student_id: The student's ID
            password: The password as typed

        Returns:
            The Account if both match, otherwise None

        Raises:
            StorageError: If the database cannot be queried
        """
        if not password:
            return None

        account = self.fetch_by_id(student_id)
        if account is None:
            return None
        if not secrets.compare_digest(account.password.encode(), password.encode()):
            return None
        return account

    def delete_by_id(self, student_id: int) -> bool:
        """Delete an account. Only used to clean up test fixtures.

        Args:
            student_id: The student's ID

        Returns:
            True if a row was deleted
        """
        with self._unit_of_work("delete_by_id") as session:
            result = session.execute(delete(Account).where(Account.student_id == student_id))
            return bool(result.rowcount)

"""CredentialVerifier - checks a login attempt against stored accounts."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from auctionauth.auth.fields import is_blank, parse_positive_int

if TYPE_CHECKING:
    from auctionauth.account_store import Account, AccountStore

logger = logging.getLogger(__name__)


class CredentialVerifier:
    """Verifies student ID / password pairs.

    Wrong passwords and unknown IDs look the same to the caller: both
    return None.
    """

    def __init__(self, store: AccountStore) -> None:
        self._store = store

    def login(self, student_id: str | int | None, password: str | None) -> Account | None:
        """Authenticate a student.

        Args:
            student_id: The submitted student ID.
            password: The submitted password.

        Returns:
            The matching account, or None if the attempt is not valid.

        Raises:
            StorageError: If the store fails.
        """
        if is_blank(student_id) or not password:
            return None

        parsed_id = parse_positive_int(student_id)
        if parsed_id is None:
            logger.info("Login failed: malformed student_id")
            return None

        account = self._store.fetch_by_credentials(parsed_id, password)
        if account is None:
            logger.info("Login failed for student_id %s", parsed_id)
        else:
            logger.info("Login succeeded for student_id %s", parsed_id)
        return account

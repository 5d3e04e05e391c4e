"""AccountRegistry - validates sign-up input and creates accounts."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from auctionauth.account_store import (
    DEFAULT_MAX_CREDITS,
    DEFAULT_MAX_POINTS,
    MAX_GRADE,
    MIN_GRADE,
    Account,
    AccountConflictError,
)
from auctionauth.auth.exceptions import (
    InvalidIdError,
    InvalidYearError,
    MissingFieldError,
    PasswordMismatchError,
)
from auctionauth.auth.fields import is_blank, parse_positive_int

if TYPE_CHECKING:
    from auctionauth.account_store import AccountStore
    from auctionauth.auth.models import RegistrationForm

logger = logging.getLogger(__name__)


class AccountRegistry:
    """Creates student accounts.

    Validation happens entirely before the store is touched, so a rejected
    form never causes I/O. Duplicate IDs are detected by the store's insert,
    which is the only authority on uniqueness.
    """

    def __init__(
        self,
        store: AccountStore,
        max_credits: int = DEFAULT_MAX_CREDITS,
        max_points: int = DEFAULT_MAX_POINTS,
    ) -> None:
        """Initialize the AccountRegistry.

        Args:
            store: Account persistence port.
            max_credits: Credit limit assigned to every new account.
            max_points: Point limit assigned to every new account.
        """
        self._store = store
        self._max_credits = max_credits
        self._max_points = max_points

    def register(self, form: RegistrationForm) -> Account:
        """Validate a sign-up form and store the new account.

        Args:
            form: Raw registration input.

        Returns:
            The stored account, with policy limits applied.

        Raises:
            MissingFieldError: If any required field is missing or empty.
            PasswordMismatchError: If password and confirmation differ.
            InvalidYearError: If grade is not between 1 and 4.
            InvalidIdError: If student_id is not a positive number.
            AccountConflictError: If the student_id is already registered.
            StorageError: If the store fails.
        """
        account = self._build_account(form)
        try:
            stored = self._store.insert(account)
        except AccountConflictError:
            logger.info("Registration rejected: student_id %s already registered", account.student_id)
            raise

        logger.info("Registered account %s", stored.student_id)
        return stored

    def _build_account(self, form: RegistrationForm) -> Account:
        fields = (form.student_id, form.name, form.department, form.grade)
        passwords = (form.password, form.password_confirm)
        # passwords are taken as typed, so only an empty one counts as missing
        if any(is_blank(value) for value in fields) or any(not value for value in passwords):
            logger.info("Registration rejected: missing fields")
            raise MissingFieldError()

        if form.password != form.password_confirm:
            logger.info("Registration rejected: password mismatch")
            raise PasswordMismatchError()

        grade = parse_positive_int(form.grade, max_digits=1)
        if grade is None or not MIN_GRADE <= grade <= MAX_GRADE:
            logger.info("Registration rejected: invalid grade %r", form.grade)
            raise InvalidYearError()

        student_id = parse_positive_int(form.student_id)
        if student_id is None:
            logger.info("Registration rejected: invalid student_id %r", form.student_id)
            raise InvalidIdError()

        return Account(
            student_id=student_id,
            name=str(form.name).strip(),
            department=str(form.department).strip(),
            grade=grade,
            password=str(form.password),
            max_credits=self._max_credits,
            max_points=self._max_points,
        )

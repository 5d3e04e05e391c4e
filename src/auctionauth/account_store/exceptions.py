"""Custom exceptions for Account Store."""


class AccountStoreError(Exception):
    """Base exception for Account Store errors."""


class AccountConflictError(AccountStoreError):
    """Account with given student ID already exists."""

    def __init__(self, student_id: int) -> None:
        super().__init__(f"Account with student_id '{student_id}' already exists")
        self.student_id = student_id


class StorageError(AccountStoreError):
    """Persistence failed for a reason other than a duplicate key."""

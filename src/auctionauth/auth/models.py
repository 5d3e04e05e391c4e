"""Data models for the auth module."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class FailureReason(StrEnum):
    """Distinguishable reasons a caller is turned away."""

    MISSING_FIELD = "missing_field"
    PASSWORD_MISMATCH = "password_mismatch"
    INVALID_YEAR = "invalid_year"
    INVALID_ID = "invalid_id"
    ID_ALREADY_REGISTERED = "id_already_registered"
    INVALID_CREDENTIALS = "invalid_credentials"
    ACCESS_DENIED = "access_denied"
    STORAGE_FAILURE = "storage_failure"

    @property
    def message(self) -> str:
        """User-facing text for this reason."""
        return FAILURE_MESSAGES[self]


FAILURE_MESSAGES: dict[FailureReason, str] = {
    FailureReason.MISSING_FIELD: "missing fields",
    FailureReason.PASSWORD_MISMATCH: "passwords do not match",
    FailureReason.INVALID_YEAR: "invalid year",
    FailureReason.INVALID_ID: "invalid student id",
    FailureReason.ID_ALREADY_REGISTERED: "id already registered",
    FailureReason.INVALID_CREDENTIALS: "invalid credentials",
    FailureReason.ACCESS_DENIED: "access denied",
    FailureReason.STORAGE_FAILURE: "internal server error",
}


@dataclass
class RegistrationForm:
    """Raw sign-up input as submitted by the web layer.

    Values may arrive as text or already-typed ints; the registry
    validates and converts them.
    """

    student_id: str | int | None = None
    name: str | None = None
    department: str | None = None
    grade: str | int | None = None
    password: str | None = None
    password_confirm: str | None = None

    def __repr__(self) -> str:
        return (
            f"RegistrationForm(student_id={self.student_id!r}, name={self.name!r}, "
            f"department={self.department!r}, grade={self.grade!r})"
        )


@dataclass(frozen=True)
class Decision:
    """Outcome of an access check: allow with an identity, or deny."""

    account_id: int | None = None

    @classmethod
    def allow(cls, account_id: int) -> Decision:
        return cls(account_id=account_id)

    @classmethod
    def deny(cls) -> Decision:
        return cls(account_id=None)

    @property
    def allowed(self) -> bool:
        return self.account_id is not None

"""Exceptions for the auth module."""

from auctionauth.auth.models import FailureReason


class AuthError(Exception):
    """Base exception for auth errors."""

    reason: FailureReason

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.reason.message)


class ValidationError(AuthError):
    """Registration input is malformed. Never reaches storage."""


class MissingFieldError(ValidationError):
    """A required registration field is missing or empty."""

    reason = FailureReason.MISSING_FIELD


class PasswordMismatchError(ValidationError):
    """Password and confirmation differ."""

    reason = FailureReason.PASSWORD_MISMATCH


class InvalidYearError(ValidationError):
    """Grade is not a whole number between 1 and 4."""

    reason = FailureReason.INVALID_YEAR


class InvalidIdError(ValidationError):
    """Student ID is not a positive number."""

    reason = FailureReason.INVALID_ID


class InvalidCredentialsError(AuthError):
    """Login failed. Does not say whether the ID or the password was wrong."""

    reason = FailureReason.INVALID_CREDENTIALS


class AccessDeniedError(AuthError):
    """Raised by the web layer when a protected request is denied."""

    reason = FailureReason.ACCESS_DENIED

"""Auth package - registration, credential checks and access decisions."""

from auctionauth.auth.exceptions import (
    AccessDeniedError,
    AuthError,
    InvalidCredentialsError,
    InvalidIdError,
    InvalidYearError,
    MissingFieldError,
    PasswordMismatchError,
    ValidationError,
)
from auctionauth.auth.gate import AccessGate
from auctionauth.auth.models import Decision, FailureReason, RegistrationForm
from auctionauth.auth.registry import AccountRegistry
from auctionauth.auth.verifier import CredentialVerifier

__all__ = [
    "AccessDeniedError",
    "AccessGate",
    "AccountRegistry",
    "AuthError",
    "CredentialVerifier",
    "Decision",
    "FailureReason",
    "InvalidCredentialsError",
    "InvalidIdError",
    "InvalidYearError",
    "MissingFieldError",
    "PasswordMismatchError",
    "RegistrationForm",
    "ValidationError",
]

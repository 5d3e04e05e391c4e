"""REST API for auctionauth."""

from auctionauth.api.app import create_app, install_exception_handlers
from auctionauth.api.models import (
    AccountResponse,
    APIResponse,
    LoginRequest,
    LoginResponse,
    SignupRequest,
)

__all__ = [
    "APIResponse",
    "AccountResponse",
    "LoginRequest",
    "LoginResponse",
    "SignupRequest",
    "create_app",
    "install_exception_handlers",
]

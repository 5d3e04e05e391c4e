"""Pydantic models for REST API."""

from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Standard API response wrapper."""

    data: T | None = None
    error: str | None = None


# Auth request models
# Fields are optional so that empty submissions reach the registry's own
# validation and produce its messages instead of a generic 422.


class SignupRequest(BaseModel):
    """Request model for registering a student."""

    student_id: str | int | None = None
    name: str | None = None
    department: str | None = None
    grade: str | int | None = None
    password: str | None = None
    password_confirm: str | None = None


class LoginRequest(BaseModel):
    """Request model for logging in."""

    student_id: str | int | None = None
    password: str | None = None


# Account models


class AccountResponse(BaseModel):
    """Response model for an account. Never includes the password."""

    model_config = ConfigDict(from_attributes=True)

    student_id: int
    name: str
    department: str
    grade: int
    max_credits: int
    max_points: int
    created_at: datetime


def account_to_response(account: Any) -> AccountResponse:
    """Convert an Account model to AccountResponse."""
    return AccountResponse.model_validate(account)


class LoginResponse(BaseModel):
    """Response model for a successful login."""

    token: str
    account: AccountResponse


class MessageResponse(BaseModel):
    """Response model for actions that only report a message."""

    message: str

"""Shared pytest fixtures and configuration."""

from collections.abc import Callable, Iterator

import pytest

from auctionauth.account_store import SqlAccountStore
from auctionauth.auth import RegistrationForm

TEST_STUDENT_ID = 99999999
TEST_PASSWORD = "test1234"
TEST_NAME = "Test Student"
TEST_DEPARTMENT = "Computer Science"
TEST_GRADE = 3


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


# Shared fixtures


@pytest.fixture
def account_store() -> Iterator[SqlAccountStore]:
    """Create an in-memory AccountStore."""
    store = SqlAccountStore(":memory:")
    yield store
    store.close()


@pytest.fixture
def make_form() -> Callable[..., RegistrationForm]:
    """Factory for a valid registration form, with per-field overrides."""

    def _make(**overrides: object) -> RegistrationForm:
        fields: dict[str, object] = {
            "student_id": str(TEST_STUDENT_ID),
            "name": TEST_NAME,
            "department": TEST_DEPARTMENT,
            "grade": str(TEST_GRADE),
            "password": TEST_PASSWORD,
            "password_confirm": TEST_PASSWORD,
        }
        fields.update(overrides)
        return RegistrationForm(**fields)  # type: ignore[arg-type]

    return _make

"""Unit tests for CredentialVerifier."""

from collections.abc import Callable
from unittest.mock import MagicMock

import pytest

from auctionauth.account_store import SqlAccountStore, StorageError
from auctionauth.auth import AccountRegistry, CredentialVerifier, RegistrationForm


@pytest.fixture
def verifier(account_store: SqlAccountStore) -> CredentialVerifier:
    return CredentialVerifier(account_store)


@pytest.fixture
def registered(
    account_store: SqlAccountStore, make_form: Callable[..., RegistrationForm]
) -> None:
    """Register the default test student."""
    AccountRegistry(account_store).register(make_form())


@pytest.mark.unit
@pytest.mark.usefixtures("registered")
class TestLogin:
    """Tests for login against a registered student."""

    def test_login_success(self, verifier: CredentialVerifier) -> None:
        account = verifier.login(99999999, "test1234")

        assert account is not None
        assert account.student_id == 99999999
        assert account.name == "Test Student"
        assert account.department == "Computer Science"
        assert account.grade == 3
        assert account.max_credits == 18
        assert account.max_points == 90

    def test_login_accepts_form_text_id(self, verifier: CredentialVerifier) -> None:
        account = verifier.login("99999999", "test1234")

        assert account is not None
        assert account.student_id == 99999999

    def test_login_wrong_password(self, verifier: CredentialVerifier) -> None:
        assert verifier.login(99999999, "wrongpassword123") is None

    def test_login_unknown_id(self, verifier: CredentialVerifier) -> None:
        assert verifier.login(11111111, "test1234") is None

    def test_login_empty_password(self, verifier: CredentialVerifier) -> None:
        assert verifier.login(99999999, "") is None

    def test_login_missing_values(self, verifier: CredentialVerifier) -> None:
        assert verifier.login(None, "test1234") is None
        assert verifier.login(99999999, None) is None
        assert verifier.login("", "test1234") is None
        assert verifier.login("   ", "test1234") is None

    @pytest.mark.parametrize("student_id", ["abc", "-99999999", "99999999.0", "0", True])
    def test_login_malformed_id(self, verifier: CredentialVerifier, student_id: object) -> None:
        assert verifier.login(student_id, "test1234") is None  # type: ignore[arg-type]

    def test_wrong_password_and_unknown_id_are_indistinguishable(
        self, verifier: CredentialVerifier
    ) -> None:
        assert verifier.login(99999999, "nope") == verifier.login(11111111, "test1234")


@pytest.mark.unit
class TestLoginDelegation:
    """Tests for how login uses the store."""

    def test_blank_input_skips_store(self) -> None:
        store = MagicMock()
        verifier = CredentialVerifier(store)

        verifier.login("", "")
        verifier.login("abc", "test1234")

        store.fetch_by_credentials.assert_not_called()

    def test_returns_store_result_unchanged(self) -> None:
        store = MagicMock()
        sentinel = object()
        store.fetch_by_credentials.return_value = sentinel
        verifier = CredentialVerifier(store)

        assert verifier.login("42", "pw") is sentinel
        store.fetch_by_credentials.assert_called_once_with(42, "pw")

    def test_storage_error_propagates(self) -> None:
        store = MagicMock()
        store.fetch_by_credentials.side_effect = StorageError("Account store fetch_by_id failed")
        verifier = CredentialVerifier(store)

        with pytest.raises(StorageError):
            verifier.login(99999999, "test1234")

"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

from collections.abc import Generator  # noqa: TC003
from typing import Annotated

from fastapi import Depends, Request

from auctionauth.account_store import SqlAccountStore
from auctionauth.auth import (
    AccessDeniedError,
    AccessGate,
    AccountRegistry,
    CredentialVerifier,
)
from auctionauth.config import Settings
from auctionauth.sessions import SessionManager

# Global Settings instance (initialized on app startup)
_settings: Settings | None = None


def init_settings(settings: Settings) -> Settings:
    """Initialize the global Settings instance."""
    global _settings  # noqa: PLW0603
    _settings = settings
    return _settings


def close_settings() -> None:
    """Forget the global Settings instance."""
    global _settings  # noqa: PLW0603
    _settings = None


def get_settings() -> Settings:
    """Dependency that provides the Settings instance."""
    if _settings is None:
        raise RuntimeError("Settings not initialized. Call init_settings() first.")
    return _settings


SettingsDep = Annotated[Settings, Depends(get_settings)]

# Global AccountStore instance (initialized on app startup)
_account_store: SqlAccountStore | None = None


def init_account_store(
    db_path: str = "auctionauth.db", timeout: float = 5.0
) -> SqlAccountStore:
    """Initialize the global AccountStore instance."""
    global _account_store  # noqa: PLW0603
    _account_store = SqlAccountStore(db_path, timeout=timeout)
    return _account_store


def close_account_store() -> None:
    """Close the global AccountStore instance."""
    global _account_store  # noqa: PLW0603
    if _account_store is not None:
        _account_store.close()
        _account_store = None


def get_account_store() -> Generator[SqlAccountStore, None, None]:
    """Dependency that provides the AccountStore instance."""
    if _account_store is None:
        raise RuntimeError("AccountStore not initialized. Call init_account_store() first.")
    yield _account_store


AccountStoreDep = Annotated[SqlAccountStore, Depends(get_account_store)]

# Global SessionManager instance (initialized on app startup)
_session_manager: SessionManager | None = None


def init_session_manager(ttl_seconds: int | None = None) -> SessionManager:
    """Initialize the global SessionManager instance."""
    global _session_manager  # noqa: PLW0603
    _session_manager = SessionManager(ttl_seconds=ttl_seconds)
    return _session_manager


def close_session_manager() -> None:
    """Drop the global SessionManager; every issued token becomes unresolvable."""
    global _session_manager  # noqa: PLW0603
    _session_manager = None


def get_session_manager() -> Generator[SessionManager, None, None]:
    """Dependency that provides the SessionManager instance."""
    if _session_manager is None:
        raise RuntimeError("SessionManager not initialized. Call init_session_manager() first.")
    yield _session_manager


SessionManagerDep = Annotated[SessionManager, Depends(get_session_manager)]


# Services built per request on top of the shared instances


def get_registry(store: AccountStoreDep, settings: SettingsDep) -> AccountRegistry:
    """Dependency that provides an AccountRegistry."""
    return AccountRegistry(
        store,
        max_credits=settings.default_max_credits,
        max_points=settings.default_max_points,
    )


RegistryDep = Annotated[AccountRegistry, Depends(get_registry)]


def get_verifier(store: AccountStoreDep) -> CredentialVerifier:
    """Dependency that provides a CredentialVerifier."""
    return CredentialVerifier(store)


VerifierDep = Annotated[CredentialVerifier, Depends(get_verifier)]


def get_access_gate(sessions: SessionManagerDep) -> AccessGate:
    """Dependency that provides an AccessGate."""
    return AccessGate(sessions)


AccessGateDep = Annotated[AccessGate, Depends(get_access_gate)]


def get_session_token(
    request: Request, settings: SettingsDep, sessions: SessionManagerDep
) -> str | None:
    """Read the session token from the cookie or a Bearer header.

    The cookie wins when both are present, unless only the header token
    is a live session.
    """
    candidates: list[str] = []
    cookie = request.cookies.get(settings.session_cookie_name)
    if cookie:
        candidates.append(cookie)

    scheme, _, value = request.headers.get("Authorization", "").partition(" ")
    if scheme.lower() == "bearer" and value.strip():
        candidates.append(value.strip())

    for token in candidates:
        if sessions.resolve(token) is not None:
            return token
    return candidates[0] if candidates else None


SessionTokenDep = Annotated[str | None, Depends(get_session_token)]


def require_account(gate: AccessGateDep, token: SessionTokenDep) -> int:
    """Dependency guarding protected routes.

    Returns:
        The student ID bound to the request's session.

    Raises:
        AccessDeniedError: If the request carries no active session.
    """
    decision = gate.authorize(token)
    if decision.account_id is None:
        raise AccessDeniedError()
    return decision.account_id


CurrentAccountDep = Annotated[int, Depends(require_account)]

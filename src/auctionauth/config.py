"""Runtime settings for auctionauth, loaded from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

DEFAULT_DB_PATH = "auctionauth.db"
DEFAULT_STORE_TIMEOUT = 5.0
DEFAULT_MAX_CREDITS = 18
DEFAULT_MAX_POINTS = 90
DEFAULT_SESSION_COOKIE = "session_token"

ENV_PREFIX = "AUCTIONAUTH_"


class ConfigError(Exception):
    """Raised when configuration is invalid."""


@dataclass(frozen=True)
class Settings:
    """Settings shared by the store, the session manager and the web layer.

    Attributes:
        db_path: SQLite database file, or ":memory:".
        session_ttl_seconds: Session lifetime. None disables expiry.
        store_timeout_seconds: How long a store call waits on a locked database.
        default_max_credits: Credit limit assigned to new accounts.
        default_max_points: Point limit assigned to new accounts.
        session_cookie_name: Cookie carrying the session token.
    """

    db_path: str = DEFAULT_DB_PATH
    session_ttl_seconds: int | None = None
    store_timeout_seconds: float = DEFAULT_STORE_TIMEOUT
    default_max_credits: int = DEFAULT_MAX_CREDITS
    default_max_points: int = DEFAULT_MAX_POINTS
    session_cookie_name: str = DEFAULT_SESSION_COOKIE

    def __post_init__(self) -> None:
        if not self.db_path:
            raise ConfigError("db_path must not be empty")
        if self.session_ttl_seconds is not None and self.session_ttl_seconds <= 0:
            raise ConfigError("session_ttl_seconds must be positive when set")
        if self.store_timeout_seconds <= 0:
            raise ConfigError("store_timeout_seconds must be positive")
        if self.default_max_credits < 0 or self.default_max_points < 0:
            raise ConfigError("default limits must not be negative")
        if not self.session_cookie_name:
            raise ConfigError("session_cookie_name must not be empty")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from AUCTIONAUTH_* environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            Parsed settings; unset variables keep their defaults.

        Raises:
            ConfigError: If a variable cannot be parsed or is out of range.
        """
        env = os.environ if environ is None else environ

        return cls(
            db_path=env.get(f"{ENV_PREFIX}DB_PATH", DEFAULT_DB_PATH),
            session_ttl_seconds=_read(env, "SESSION_TTL", int, None),
            store_timeout_seconds=_read(env, "STORE_TIMEOUT", float, DEFAULT_STORE_TIMEOUT),
            default_max_credits=_read(env, "MAX_CREDITS", int, DEFAULT_MAX_CREDITS),
            default_max_points=_read(env, "MAX_POINTS", int, DEFAULT_MAX_POINTS),
            session_cookie_name=env.get(f"{ENV_PREFIX}SESSION_COOKIE", DEFAULT_SESSION_COOKIE),
        )


def _read(env: Mapping[str, str], name: str, kind: type, default: Any) -> Any:
    """Read and convert one AUCTIONAUTH_* variable, falling back to default when unset."""
    raw = env.get(f"{ENV_PREFIX}{name}", "").strip()
    if not raw:
        return default
    try:
        return kind(raw)
    except ValueError as e:
        raise ConfigError(f"{ENV_PREFIX}{name} must be a {kind.__name__}, got {raw!r}") from e

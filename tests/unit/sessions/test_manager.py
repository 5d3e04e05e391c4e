"""Unit tests for SessionManager."""

import threading
from datetime import UTC, datetime, timedelta

import pytest

from auctionauth.sessions import (
    InMemorySessionStore,
    SessionManager,
    SessionState,
)
from auctionauth.sessions.manager import PURGE_EVERY


class FakeClock:
    """Manually advanced clock."""

    def __init__(self) -> None:
        self.now = datetime(2026, 1, 1, 9, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: int) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def manager(store: InMemorySessionStore) -> SessionManager:
    return SessionManager(store=store)


@pytest.mark.unit
class TestCreate:
    """Tests for create."""

    def test_create_returns_resolvable_token(self, manager: SessionManager) -> None:
        token = manager.create(99999999)

        assert isinstance(token, str)
        assert len(token) >= 32
        assert manager.resolve(token) == 99999999

    def test_create_stores_active_record(
        self, manager: SessionManager, store: InMemorySessionStore
    ) -> None:
        token = manager.create(99999999)

        record = store.get(token)
        assert record is not None
        assert record.state == SessionState.ACTIVE
        assert record.account_id == 99999999
        assert record.expires_at is None

    def test_multiple_sessions_per_account(self, manager: SessionManager) -> None:
        """Same student can hold several sessions with distinct tokens."""
        first = manager.create(99999999)
        second = manager.create(99999999)

        assert first != second
        assert manager.resolve(first) == 99999999
        assert manager.resolve(second) == 99999999

    def test_tokens_are_unique(self, manager: SessionManager) -> None:
        tokens = {manager.create(1) for _ in range(200)}

        assert len(tokens) == 200

    @pytest.mark.parametrize("account_id", [0, -1, True, "99999999", None])
    def test_create_rejects_invalid_account_id(
        self, manager: SessionManager, account_id: object
    ) -> None:
        with pytest.raises(ValueError):
            manager.create(account_id)  # type: ignore[arg-type]


@pytest.mark.unit
class TestResolve:
    """Tests for resolve."""

    @pytest.mark.parametrize(
        "token",
        [None, "", "FAKE_SESSION_12345", "JSESSIONID=FAKE", "a" * 129, "tok en", 12345],
    )
    def test_unknown_or_malformed_token(self, manager: SessionManager, token: object) -> None:
        assert manager.resolve(token) is None  # type: ignore[arg-type]

    def test_sessions_are_independent(self, manager: SessionManager) -> None:
        alice = manager.create(1)
        bob = manager.create(2)

        manager.revoke(alice)

        assert manager.resolve(alice) is None
        assert manager.resolve(bob) == 2


@pytest.mark.unit
class TestRevoke:
    """Tests for revoke."""

    def test_revoke_makes_token_unresolvable(self, manager: SessionManager) -> None:
        token = manager.create(99999999)

        manager.revoke(token)

        assert manager.resolve(token) is None

    def test_revoke_is_idempotent(self, manager: SessionManager) -> None:
        token = manager.create(99999999)

        manager.revoke(token)
        manager.revoke(token)

        assert manager.resolve(token) is None

    def test_revoke_drops_record(
        self, manager: SessionManager, store: InMemorySessionStore
    ) -> None:
        """Revoked sessions do not accumulate in the store."""
        for _ in range(50):
            token = manager.create(99999999)
            manager.revoke(token)

        assert len(store) == 0

    def test_revoke_marks_record_revoked_before_dropping(
        self, manager: SessionManager, store: InMemorySessionStore
    ) -> None:
        """A caller still holding the record sees it revoked."""
        token = manager.create(99999999)
        record = store.get(token)

        manager.revoke(token)

        assert record is not None
        assert record.state == SessionState.REVOKED
        assert store.get(token) is None

    def test_revoke_unknown_token_is_noop(self, manager: SessionManager) -> None:
        manager.revoke("never-issued")
        manager.revoke(None)
        manager.revoke("")

    def test_revoke_only_affects_that_token(self, manager: SessionManager) -> None:
        first = manager.create(99999999)
        second = manager.create(99999999)

        manager.revoke(first)

        assert manager.resolve(second) == 99999999

    def test_revoked_session_stays_revoked(self, manager: SessionManager) -> None:
        token = manager.create(99999999)
        manager.revoke(token)

        for _ in range(3):
            assert manager.resolve(token) is None


@pytest.mark.unit
class TestExpiry:
    """Tests for the optional TTL."""

    def test_no_ttl_by_default(self) -> None:
        clock = FakeClock()
        manager = SessionManager(clock=clock)
        token = manager.create(1)

        clock.advance(365 * 24 * 3600)

        assert manager.ttl_seconds is None
        assert manager.resolve(token) == 1

    def test_session_valid_before_expiry(self) -> None:
        clock = FakeClock()
        manager = SessionManager(ttl_seconds=60, clock=clock)
        token = manager.create(1)

        clock.advance(59)

        assert manager.resolve(token) == 1

    def test_session_expires_after_ttl(self) -> None:
        clock = FakeClock()
        store = InMemorySessionStore()
        manager = SessionManager(store=store, ttl_seconds=60, clock=clock)
        token = manager.create(1)

        clock.advance(60)

        assert manager.resolve(token) is None
        assert store.get(token) is None

    def test_expired_session_does_not_come_back(self) -> None:
        clock = FakeClock()
        manager = SessionManager(ttl_seconds=60, clock=clock)
        token = manager.create(1)
        clock.advance(120)
        manager.resolve(token)

        clock.now -= timedelta(seconds=120)

        assert manager.resolve(token) is None

    @pytest.mark.parametrize("ttl", [0, -5])
    def test_invalid_ttl(self, ttl: int) -> None:
        with pytest.raises(ValueError):
            SessionManager(ttl_seconds=ttl)


@pytest.mark.unit
class TestPurgeInactive:
    """Tests for purge_inactive."""

    def test_purge_removes_revoked_and_expired(self) -> None:
        clock = FakeClock()
        store = InMemorySessionStore()
        manager = SessionManager(store=store, ttl_seconds=60, clock=clock)
        revoked = manager.create(1)
        manager.revoke(revoked)
        expired = manager.create(3)
        clock.advance(30)
        alive = manager.create(2)
        clock.advance(40)

        removed = manager.purge_inactive()

        assert removed == 1
        assert store.tokens() == [alive]
        assert manager.resolve(revoked) is None
        assert manager.resolve(expired) is None
        assert manager.resolve(alive) == 2

    def test_expired_sessions_swept_while_creating(self) -> None:
        """Expired sessions nobody looks up again are dropped eventually."""
        clock = FakeClock()
        store = InMemorySessionStore()
        manager = SessionManager(store=store, ttl_seconds=60, clock=clock)
        stale = [manager.create(1) for _ in range(10)]
        clock.advance(120)

        for _ in range(PURGE_EVERY - 10):
            manager.create(2)

        assert all(store.get(token) is None for token in stale)
        assert len(store) == PURGE_EVERY - 10

    def test_purge_with_nothing_inactive(self, manager: SessionManager) -> None:
        manager.create(1)

        assert manager.purge_inactive() == 0


@pytest.mark.unit
class TestConcurrency:
    """Concurrent use from request threads."""

    def test_concurrent_create_and_revoke(
        self, manager: SessionManager, store: InMemorySessionStore
    ) -> None:
        tokens: list[str] = []
        lock = threading.Lock()

        def login_logout(account_id: int) -> None:
            for _ in range(50):
                token = manager.create(account_id)
                assert manager.resolve(token) == account_id
                manager.revoke(token)
                with lock:
                    tokens.append(token)

        threads = [threading.Thread(target=login_logout, args=(i,)) for i in range(1, 9)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(set(tokens)) == 400
        assert len(store) == 0
        assert all(manager.resolve(token) is None for token in tokens)

"""AccessGate - turns a request's session token into an access decision."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from auctionauth.auth.models import Decision

if TYPE_CHECKING:
    from auctionauth.sessions import SessionManager

logger = logging.getLogger(__name__)


class AccessGate:
    """Read-only decision point in front of protected resources."""

    def __init__(self, sessions: SessionManager) -> None:
        self._sessions = sessions

    def authorize(self, token: str | None) -> Decision:
        """Decide whether a request may reach protected content.

        Args:
            token: Session token carried by the request, if any.

        Returns:
            Decision.allow(account_id) for an active session, else Decision.deny().
        """
        if not token:
            return Decision.deny()

        account_id = self._sessions.resolve(token)
        if account_id is None:
            logger.debug("Access denied for unresolvable session token")
            return Decision.deny()

        return Decision.allow(account_id)

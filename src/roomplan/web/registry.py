"""In-process registry of open editing sessions."""

import logging
import uuid

from roomplan.application.session import LayoutSession
from roomplan.web.exceptions import SessionNotFoundError

logger = logging.getLogger(__name__)


class SessionRegistry:
    """Holds LayoutSessions by id for the lifetime of the process.

    Each session is expected to be driven by a single client.
    """

    def __init__(self) -> None:
        self._sessions: dict[str, LayoutSession] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def add(self, session: LayoutSession) -> str:
        session_id = uuid.uuid4().hex
        self._sessions[session_id] = session
        logger.debug(f"Opened session {session_id}")
        return session_id

    def get(self, session_id: str) -> LayoutSession:
        """Look up a session.

        Raises:
            SessionNotFoundError: If the id is unknown.
        """
        try:
            return self._sessions[session_id]
        except KeyError:
            raise SessionNotFoundError(session_id) from None

    def remove(self, session_id: str) -> None:
        """Close a session.

        Raises:
            SessionNotFoundError: If the id is unknown.
        """
        if self._sessions.pop(session_id, None) is None:
            raise SessionNotFoundError(session_id)
        logger.debug(f"Closed session {session_id}")

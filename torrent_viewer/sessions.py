"""
Page sessions.

Each load of the torrent page gets its own PageSession holding a single
TorrentResource and ViewState. The page carries its session id and sends it
back with every list request, so two tabs never share a filter. Sessions
live in a bounded, in-memory registry. A page closes its session when it is
unloaded; sessions that are never closed are evicted least recently used
first. Closing a session discards any fetch it still had in flight.
"""

import secrets
from collections import OrderedDict
from typing import Optional

from .base_client import BaseTorrentGateway
from .config import Config
from .logger import logger
from .resource import TorrentResource
from .view_state import ViewState


class PageSession:
    def __init__(self, session_id: str, gateway: BaseTorrentGateway):
        self.session_id = session_id
        self.resource = TorrentResource(gateway)
        self.view = ViewState(self.resource)

    def close(self) -> None:
        self.resource.close()


class SessionRegistry:
    """In-memory page sessions, oldest evicted first once max_sessions is reached."""

    def __init__(self, max_sessions: int = Config.MAX_SESSIONS):
        self.max_sessions = max(1, max_sessions)
        self._sessions: "OrderedDict[str, PageSession]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions

    def create(self, gateway: BaseTorrentGateway) -> PageSession:
        while len(self._sessions) >= self.max_sessions:
            _, oldest = self._sessions.popitem(last=False)
            logger.debug(f"Evicting page session {oldest.session_id[:8]}")
            oldest.close()

        session = PageSession(secrets.token_urlsafe(32), gateway)
        self._sessions[session.session_id] = session
        logger.debug(f"Created page session {session.session_id[:8]} ({len(self._sessions)} active)")
        return session

    def get(self, session_id: Optional[str]) -> Optional[PageSession]:
        if not session_id:
            return None
        session = self._sessions.get(session_id)
        if session is not None:
            self._sessions.move_to_end(session_id)
        return session

    def discard(self, session_id: Optional[str]) -> None:
        session = self._sessions.pop(session_id, None) if session_id else None
        if session is not None:
            logger.debug(f"Closed page session {session_id[:8]}")
            session.close()

    def close_all(self) -> None:
        for session in self._sessions.values():
            session.close()
        self._sessions.clear()


# Global registry instance
_registry: Optional[SessionRegistry] = None


def get_registry() -> SessionRegistry:
    """Get the global session registry, creating it if needed."""
    global _registry
    if _registry is None:
        _registry = SessionRegistry()
    return _registry

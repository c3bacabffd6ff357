"""In-memory server-side session store"""
import logging
import secrets
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from app.config import SESSION_MAX_AGE_SECONDS, SESSION_PRUNE_INTERVAL_SECONDS

logger = logging.getLogger(__name__)


@dataclass
class SessionData:
    """Mutable per-browser session payload"""
    session_id: str
    values: Dict[str, Any] = field(default_factory=dict)
    expires_at: float = 0.0
    modified: bool = False

    def get(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.values[key] = value
        self.modified = True

    def pop(self, key: str, default: Any = None) -> Any:
        if key in self.values:
            self.modified = True
        return self.values.pop(key, default)

    def __contains__(self, key: str) -> bool:
        return key in self.values


class InMemorySessionStore:
    """
    Sessions keyed by an opaque id, kept only in process memory.

    Nothing survives a restart. Expired entries are dropped on access and by
    a prune pass that runs at most once per prune interval.
    """

    def __init__(
        self,
        max_age_seconds: int = SESSION_MAX_AGE_SECONDS,
        prune_interval_seconds: int = SESSION_PRUNE_INTERVAL_SECONDS,
    ):
        self._sessions: Dict[str, SessionData] = {}
        self._max_age = max_age_seconds
        self._prune_interval = prune_interval_seconds
        self._last_prune = time.time()

    def __len__(self) -> int:
        return len(self._sessions)

    def new(self) -> SessionData:
        """Create an unsaved session with a fresh random id"""
        return SessionData(session_id=secrets.token_urlsafe(32))

    def get(self, session_id: str) -> Optional[SessionData]:
        self._maybe_prune()
        session = self._sessions.get(session_id)
        if session is None:
            return None
        if session.expires_at <= time.time():
            del self._sessions[session_id]
            return None
        session.modified = False
        return session

    def save(self, session: SessionData) -> None:
        session.expires_at = time.time() + self._max_age
        session.modified = False
        self._sessions[session.session_id] = session

    def destroy(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)

    def _maybe_prune(self) -> None:
        now = time.time()
        if now - self._last_prune < self._prune_interval:
            return
        self._last_prune = now
        expired = [sid for sid, s in self._sessions.items() if s.expires_at <= now]
        for sid in expired:
            del self._sessions[sid]
        if expired:
            logger.info(f"Pruned {len(expired)} expired sessions")


_session_store: Optional[InMemorySessionStore] = None


def get_session_store() -> InMemorySessionStore:
    """Get or create the session store singleton"""
    global _session_store

    if _session_store is None:
        _session_store = InMemorySessionStore()

    return _session_store


def reset_session_store():
    """Reset the session store singleton (useful for testing)"""
    global _session_store
    _session_store = None

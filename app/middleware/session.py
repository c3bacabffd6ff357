"""
Server-side session middleware

Each browser gets an opaque session id in a signed cookie; the session
payload itself (e.g. the Spotify token) stays in the in-memory store.
A cookie is first issued once something has been written to the session,
then re-issued on every later request so its expiry rolls with the store's.
"""
import hashlib
import hmac
import logging
from typing import Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from app.config import (
    SESSION_COOKIE_NAME,
    SESSION_COOKIE_SECURE,
    SESSION_MAX_AGE_SECONDS,
    SESSION_SECRET,
)
from app.infra.session_store import InMemorySessionStore, SessionData, get_session_store

logger = logging.getLogger(__name__)


def sign_session_id(session_id: str, secret: str = SESSION_SECRET) -> str:
    signature = hmac.new(secret.encode(), session_id.encode(), hashlib.sha256).hexdigest()
    return f"{session_id}.{signature}"


def unsign_session_id(cookie_value: str, secret: str = SESSION_SECRET) -> Optional[str]:
    """Return the session id if the signature matches, None otherwise"""
    session_id, _, signature = cookie_value.rpartition(".")
    if not session_id or not signature:
        return None
    expected = sign_session_id(session_id, secret).rpartition(".")[2]
    if not hmac.compare_digest(expected, signature):
        logger.warning("Rejected session cookie with invalid signature")
        return None
    return session_id


class SessionMiddleware(BaseHTTPMiddleware):
    """Attach a SessionData to request.state.session and persist it after the response"""

    def __init__(self, app, store: Optional[InMemorySessionStore] = None):
        super().__init__(app)
        self._store = store

    @property
    def store(self) -> InMemorySessionStore:
        return self._store or get_session_store()

    async def dispatch(self, request: Request, call_next):
        store = self.store
        session: Optional[SessionData] = None

        cookie_value = request.cookies.get(SESSION_COOKIE_NAME)
        if cookie_value:
            session_id = unsign_session_id(cookie_value)
            if session_id:
                session = store.get(session_id)

        is_new = session is None
        if session is None:
            session = store.new()

        request.state.session = session
        response = await call_next(request)

        # rolling expiry: the cookie max-age is renewed whenever the store entry is
        # saved
        if session.modified or not is_new:
            store.save(session)
            response.set_cookie(
                SESSION_COOKIE_NAME,
                sign_session_id(session.session_id),
                max_age=SESSION_MAX_AGE_SECONDS,
                httponly=True,
                secure=SESSION_COOKIE_SECURE,
                samesite="lax",
            )
        return response


def get_session(request: Request) -> SessionData:
    """FastAPI dependency returning the current request's session"""
    return request.state.session

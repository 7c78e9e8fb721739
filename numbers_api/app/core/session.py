"""
Session access helpers.

Session data lives on the server in a ``SessionBackend``: a dictionary
of per‑session key/value maps keyed by an opaque session id.  The only
thing sent to the client is that id, carried in the signed cookie
managed by Starlette's ``SessionMiddleware``.  The cookie therefore
stays the same size however many numbers are stored, and replaying an
old cookie cannot bring back old data.

A session expires after ``idle_timeout`` seconds without a request.
Expired sessions are dropped lazily whenever the backend is accessed.

Services never touch the request directly; they receive a
``SessionStore`` exposing string ``get``/``set`` by key.
``get_session_store`` is the FastAPI dependency that builds one for the
current request, or returns ``None`` when no session support is
installed.
"""

import logging
import secrets
import threading
import time
from typing import Callable, Dict, Optional, Protocol, Tuple

from fastapi import Request

# Key under which the session id is kept in the signed cookie.
SESSION_ID_KEY = "sid"


class SessionStore(Protocol):
    """Minimal key/value interface consumed by the service layer."""

    def get_string(self, key: str) -> Optional[str]:
        ...

    def set_string(self, key: str, value: str) -> None:
        ...


class SessionBackend:
    """In‑process server‑side storage for all sessions, with idle expiry."""

    def __init__(self, idle_timeout: float, clock: Callable[[], float] = time.monotonic) -> None:
        self.idle_timeout = idle_timeout
        self._clock = clock
        self._sessions: Dict[str, Tuple[float, Dict[str, str]]] = {}
        self._lock = threading.Lock()

    def load(self, session_id: str) -> Dict[str, str]:
        """Return the data of ``session_id``, creating it when missing or expired.

        Every call counts as activity and restarts the idle timer.
        """
        now = self._clock()
        with self._lock:
            self._purge_expired(now)
            _, data = self._sessions.get(session_id, (now, {}))
            self._sessions[session_id] = (now, data)
            return data

    def discard(self, session_id: str) -> None:
        with self._lock:
            self._sessions.pop(session_id, None)

    def __len__(self) -> int:
        return len(self._sessions)

    def _purge_expired(self, now: float) -> None:
        expired = [sid for sid, (seen, _) in self._sessions.items() if now - seen > self.idle_timeout]
        for sid in expired:
            del self._sessions[sid]
        if expired:
            logging.getLogger(__name__).debug("Expired %d idle session(s)", len(expired))


class ServerSessionStore:
    """``SessionStore`` view over one session's data held by a backend."""

    def __init__(self, session_id: str, data: Dict[str, str]) -> None:
        self.session_id = session_id
        self._data = data

    def get_string(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set_string(self, key: str, value: str) -> None:
        self._data[key] = value


def new_session_id() -> str:
    return secrets.token_urlsafe(32)


def get_session_store(request: Request) -> Optional[SessionStore]:
    """Return the session store bound to ``request``.

    A new session id is issued when the cookie carries none (first
    visit, tampered or expired cookie).  ``request.session`` asserts when
    ``SessionMiddleware`` is not installed, so the scope is inspected
    first.
    """
    if "session" not in request.scope:
        return None
    backend = getattr(request.app.state, "session_backend", None)
    if backend is None:
        return None
    session_id = request.session.get(SESSION_ID_KEY)
    if not isinstance(session_id, str) or not session_id:
        session_id = new_session_id()
        request.session[SESSION_ID_KEY] = session_id
    return ServerSessionStore(session_id, backend.load(session_id))

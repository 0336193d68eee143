"""
In-memory session store shared across all routes.
Sessions live in a plain dict keyed by session_id; nothing touches disk.
Idle sessions are swept once they outlive the cookie that points at them.

Sync handlers run in the threadpool, so every read-modify-write of the
dict happens under _lock.
"""

import logging
import threading
import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

from models.session import Session

logger = logging.getLogger(__name__)

sessions: dict[str, Session] = {}
_lock = threading.Lock()


def create_session() -> Session:
    session = Session(session_id=f"todo_{uuid.uuid4().hex}")
    with _lock:
        sessions[session.session_id] = session
    logger.info("Created session %s", session.session_id)
    return session


def get_session(session_id: str, max_age: Optional[int] = None) -> Optional[Session]:
    """
    Returns the live session for session_id, or None.
    A session idle for longer than max_age seconds is dropped and treated as missing.
    """
    now = datetime.now(timezone.utc)
    with _lock:
        session = sessions.get(session_id)
        if session is None:
            return None

        if max_age is not None and now - session.last_seen_at > timedelta(seconds=max_age):
            sessions.pop(session_id, None)
            expired = True
        else:
            session.last_seen_at = now
            expired = False

    if expired:
        logger.info("Session %s expired", session_id)
        return None
    return session


def prune_expired(max_age: int) -> int:
    """Drops every session idle for longer than max_age seconds. Returns how many were removed."""
    cutoff = datetime.now(timezone.utc) - timedelta(seconds=max_age)
    with _lock:
        expired = [sid for sid, s in sessions.items() if s.last_seen_at < cutoff]
        for sid in expired:
            sessions.pop(sid, None)
    if expired:
        logger.info("Pruned %d expired sessions", len(expired))
    return len(expired)

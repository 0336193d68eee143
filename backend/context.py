"""
Per-request context.

The signed session cookie only carries a session_id; the lists themselves
stay in store.sessions. get_context() resolves (or creates) the Session for
the incoming request and hands it to the route as a RequestContext, which
every handler passes on explicitly to the list/todo operations.
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import Request

import config
import store
from models.session import Session


@dataclass
class RequestContext:
    request: Request
    session: Session

    def flash_success(self, message: str) -> None:
        self.session.success = message

    def flash_failure(self, message: str) -> None:
        self.session.failure = message

    def pop_flash(self) -> tuple[Optional[str], Optional[str]]:
        """Returns (success, failure) and clears both so each message renders once."""
        success, failure = self.session.success, self.session.failure
        self.session.success = None
        self.session.failure = None
        return success, failure


def get_context(request: Request) -> RequestContext:
    """FastAPI dependency: binds the request to its server-side session."""
    session_id = request.session.get("session_id")
    session = store.get_session(session_id, max_age=config.SESSION_MAX_AGE) if session_id else None

    if session is None:
        store.prune_expired(config.SESSION_MAX_AGE)
        session = store.create_session()
        request.session["session_id"] = session.session_id

    return RequestContext(request=request, session=session)

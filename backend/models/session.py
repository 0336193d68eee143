from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, Field

from models.todo import TodoList


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Session(BaseModel):
    session_id: str
    started_at: datetime = Field(default_factory=_utcnow)
    last_seen_at: datetime = Field(default_factory=_utcnow)
    lists: list[TodoList] = Field(default_factory=list)
    # Flash messages, shown once on the next rendered page
    success: Optional[str] = None
    failure: Optional[str] = None

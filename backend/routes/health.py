from fastapi import APIRouter

import store

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    """Liveness check with the number of live sessions."""
    return {"status": "ok", "service": "todo", "sessions": len(store.sessions)}

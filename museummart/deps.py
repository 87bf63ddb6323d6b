"""
Shared dependencies for routers.

The entity store is built once by ``create_app`` and kept on
``app.state``; routers reach it through these functions instead of a
module-level global, which lets tests hand in their own store.
"""

from fastapi import Header, HTTPException, Request

from .config import Settings, get_settings
from .storage import EntityStore


def get_store(request: Request) -> EntityStore:
    return request.app.state.store


def get_app_settings() -> Settings:
    return get_settings()


def get_session_id(x_session_id: str = Header(..., description="Opaque browsing-session id")) -> str:
    """Session id from the ``X-Session-Id`` header.

    A missing header is rejected by FastAPI; a blank one is rejected
    here. There is no shared fallback session.
    """
    session_id = x_session_id.strip()
    if not session_id:
        raise HTTPException(status_code=422, detail="Session id is required")
    return session_id

"""FastAPI dependency: the SessionManager attached to the running app."""

from __future__ import annotations

from fastapi import HTTPException, Request, status

from frontier.api.session_manager import SessionManager


def get_session_manager(request: Request) -> SessionManager:
    manager: SessionManager | None = getattr(request.app.state, "session_manager", None)
    if manager is None:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="No game session is running.")
    return manager

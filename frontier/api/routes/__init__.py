"""Versioned API route modules."""

from fastapi import APIRouter

from frontier.api.routes.commands import router as commands_router
from frontier.api.routes.config import router as config_router
from frontier.api.routes.players import router as players_router
from frontier.api.routes.round import router as round_router
from frontier.api.routes.state import router as state_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(players_router, tags=["Players"])
api_router.include_router(commands_router, tags=["Commands"])
api_router.include_router(round_router, tags=["Round"])
api_router.include_router(state_router, tags=["State"])
api_router.include_router(config_router, tags=["Config"])

__all__ = ["api_router"]

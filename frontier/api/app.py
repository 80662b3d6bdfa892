"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from frontier.api.routes import api_router
from frontier.api.session_manager import SessionManager
from frontier.config import GameConfig
from frontier.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(config: GameConfig | None = None, manager: SessionManager | None = None) -> FastAPI:
    """Build and return the fully-configured FastAPI application.

    A *manager* passed in is served as-is; otherwise one is created on startup.
    """
    if config is None:
        config = manager.config if manager is not None else GameConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(_config.log_level)
        if getattr(app.state, "session_manager", None) is None:
            app.state.session_manager = SessionManager(_config)
        logger.info("API server started — waiting for players (seed=%d).", _config.world_seed)
        yield
        logger.info("API server shutting down.")

    app = FastAPI(
        title="Frontier",
        description=(
            "Turn-based text-command world.\n\n"
            "## API Groups\n\n"
            "- **Players** — Join the roster before the first round\n"
            "- **Commands** — Submit action commands and talk/shout/whisper text\n"
            "- **Round** — Pending actions in execution order, manual resolution\n"
            "- **State** — Participants, game-over flag, round event feed\n"
            "- **Config** — Read-only game configuration\n"
        ),
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Players", "description": "Add participants to the roster."},
            {"name": "Commands", "description": "One line of text per request; replies come back as messages."},
            {"name": "Round", "description": "Readiness, ordered pending actions, and resolution."},
            {"name": "State", "description": "Participant positions, health and status; round events."},
            {"name": "Config", "description": "Read-only game configuration parameters."},
        ],
    )

    # CORS — allow any origin in dev
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)
    if manager is not None:
        app.state.session_manager = manager

    return app

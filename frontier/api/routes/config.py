"""GET /api/v1/config — expose game configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from frontier.api.dependencies import get_session_manager
from frontier.api.schemas import GameConfigResponse
from frontier.api.session_manager import SessionManager

router = APIRouter()


@router.get("/config", response_model=GameConfigResponse)
def get_config(manager: SessionManager = Depends(get_session_manager)) -> GameConfigResponse:
    cfg = manager.config
    return GameConfigResponse(
        world_seed=cfg.world_seed,
        map_rows=list(cfg.map_rows),
        max_players=cfg.max_players,
        inventory_slots=cfg.inventory_slots,
        starting_health=cfg.starting_health,
        starting_strength=cfg.starting_strength,
        starting_agility=cfg.starting_agility,
        starting_intelligence=cfg.starting_intelligence,
        meter_maximum=cfg.meter_maximum,
        starting_items=dict(cfg.starting_items),
        auto_resolve=cfg.auto_resolve,
    )

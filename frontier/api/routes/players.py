"""POST /api/v1/players — join the game before the first round."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from frontier.api.dependencies import get_session_manager
from frontier.api.schemas import PlayerCreateRequest, PlayerSchema
from frontier.api.session_manager import RosterError, SessionManager

router = APIRouter()


@router.post("/players", response_model=PlayerSchema, status_code=status.HTTP_201_CREATED)
def add_player(
    body: PlayerCreateRequest,
    manager: SessionManager = Depends(get_session_manager),
) -> PlayerSchema:
    try:
        character = manager.add_player(body.player_id, body.name)
    except RosterError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    return PlayerSchema.from_character(character)

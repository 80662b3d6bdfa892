"""POST /api/v1/commands — submit one line of text for a player."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from frontier.api.dependencies import get_session_manager
from frontier.api.schemas import CommandRequest, CommandResponse, MessageSchema, RoundResultSchema
from frontier.api.session_manager import SessionManager
from frontier.engine.game import UnknownPlayerError

router = APIRouter()


@router.post("/commands", response_model=CommandResponse)
def submit_command(
    body: CommandRequest,
    manager: SessionManager = Depends(get_session_manager),
) -> CommandResponse:
    try:
        result = manager.submit(body.player_id, body.text)
    except UnknownPlayerError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown player: {body.player_id}",
        ) from exc

    return CommandResponse(
        messages=[MessageSchema.from_message(m) for m in result.messages],
        round=RoundResultSchema.from_result(result.round) if result.round else None,
    )

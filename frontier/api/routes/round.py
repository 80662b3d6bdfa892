"""GET /api/v1/round and POST /api/v1/round/resolve."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from frontier.api.dependencies import get_session_manager
from frontier.api.schemas import PendingActionSchema, RoundResultSchema, RoundStatusResponse
from frontier.api.session_manager import RoundNotReadyError, SessionManager

router = APIRouter()


@router.get("/round", response_model=RoundStatusResponse)
def get_round(manager: SessionManager = Depends(get_session_manager)) -> RoundStatusResponse:
    turn, ready, pending = manager.round_status()
    return RoundStatusResponse(
        turn=turn,
        ready=ready,
        pending=[PendingActionSchema.from_action(a) for a in pending],
    )


@router.post("/round/resolve", response_model=RoundResultSchema)
def resolve_round(manager: SessionManager = Depends(get_session_manager)) -> RoundResultSchema:
    try:
        result = manager.resolve()
    except RoundNotReadyError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    return RoundResultSchema.from_result(result)

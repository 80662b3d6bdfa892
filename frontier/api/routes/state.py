"""GET /api/v1/state, POST /api/v1/state/reset and GET /api/v1/events."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from frontier.api.dependencies import get_session_manager
from frontier.api.schemas import EventSchema, EventsResponse, PlayerSchema, StateResponse
from frontier.api.session_manager import SessionManager

router = APIRouter()


def _state_response(manager: SessionManager) -> StateResponse:
    state = manager.state()
    return StateResponse(
        turn=state.turn,
        game_over=state.game_over,
        players=[PlayerSchema.from_character(c) for c in state.players],
    )


@router.get("/state", response_model=StateResponse)
def get_state(manager: SessionManager = Depends(get_session_manager)) -> StateResponse:
    return _state_response(manager)


@router.post("/state/reset", response_model=StateResponse)
def reset_state(manager: SessionManager = Depends(get_session_manager)) -> StateResponse:
    """Start a fresh game with the same configuration; the roster is emptied."""
    manager.reset()
    return _state_response(manager)


@router.get("/events", response_model=EventsResponse)
def get_events(
    since_turn: int = Query(0, ge=0, description="Only events from this turn onward"),
    manager: SessionManager = Depends(get_session_manager),
) -> EventsResponse:
    events = manager.event_log.since_turn(since_turn)
    return EventsResponse(
        events=[EventSchema(turn=e.turn, category=e.category, message=e.message) for e in events],
    )

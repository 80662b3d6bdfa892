"""Pydantic request/response models for the REST API."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from frontier.actions.base import Action
    from frontier.api.session_manager import RoundResult
    from frontier.core.messaging import Message
    from frontier.core.models import Character


# --- Requests ---

class PlayerCreateRequest(BaseModel):
    player_id: str = Field(..., min_length=1, max_length=64)
    name: str = Field(..., min_length=1, max_length=64)


class CommandRequest(BaseModel):
    player_id: str = Field(..., min_length=1)
    text: str = Field(..., description="Raw command or communication text, e.g. 'go north' or '/s hello'")


# --- Players ---

class ItemStackSchema(BaseModel):
    name: str
    amount: int


class PlayerSchema(BaseModel):
    id: str
    name: str
    row: int
    col: int
    health: int
    strength: int
    agility: int
    intelligence: int
    state: str
    allegiance: str
    inventory: list[ItemStackSchema] = []

    @classmethod
    def from_character(cls, c: Character) -> PlayerSchema:
        return cls(
            id=c.id,
            name=c.name,
            row=c.pos.row,
            col=c.pos.col,
            health=c.stats.health,
            strength=c.stats.strength,
            agility=c.stats.agility,
            intelligence=c.stats.intelligence,
            state=c.state.name,
            allegiance=c.allegiance.name,
            inventory=[ItemStackSchema(name=s.item.name, amount=s.amount) for s in c.inventory.stacks],
        )


# --- Messages & rounds ---

class MessageSchema(BaseModel):
    content: str
    recipients: list[str]
    kind: str
    sender: str | None = None

    @classmethod
    def from_message(cls, m: Message) -> MessageSchema:
        return cls(content=m.content, recipients=list(m.recipients), kind=m.kind.name, sender=m.sender)


class RoundResultSchema(BaseModel):
    turn: int
    log: list[str]
    messages: list[MessageSchema]
    faults: list[str] = []
    game_over: bool = False

    @classmethod
    def from_result(cls, r: RoundResult) -> RoundResultSchema:
        return cls(
            turn=r.turn,
            log=r.log,
            messages=[MessageSchema.from_message(m) for m in r.messages],
            faults=r.faults,
            game_over=r.game_over,
        )


class CommandResponse(BaseModel):
    messages: list[MessageSchema]
    round: RoundResultSchema | None = None


class PendingActionSchema(BaseModel):
    actor_id: str
    kind: str
    text: str
    initiative: int
    timestamp: int

    @classmethod
    def from_action(cls, a: Action) -> PendingActionSchema:
        return cls(
            actor_id=a.actor_id,
            kind=a.kind.name,
            text=a.text,
            initiative=a.initiative,
            timestamp=a.timestamp,
        )


class RoundStatusResponse(BaseModel):
    turn: int
    ready: bool
    pending: list[PendingActionSchema]


# --- State ---

class StateResponse(BaseModel):
    turn: int
    game_over: bool
    players: list[PlayerSchema]


class EventSchema(BaseModel):
    turn: int
    category: str
    message: str


class EventsResponse(BaseModel):
    events: list[EventSchema]


# --- Config ---

class GameConfigResponse(BaseModel):
    world_seed: int
    map_rows: list[str]
    max_players: int
    inventory_slots: int
    starting_health: int
    starting_strength: int
    starting_agility: int
    starting_intelligence: int
    meter_maximum: int
    starting_items: dict[str, int]
    auto_resolve: bool

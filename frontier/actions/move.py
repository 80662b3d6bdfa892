"""MoveComponent — one step north, south, east or west into a room."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from frontier.actions.base import (
    ActionComponent,
    ActionParseError,
    MoveAction,
    PerformOutcome,
    ValidationResult,
    require_actor,
)
from frontier.core.enums import ActionKind, Direction
from frontier.core.items import MAP_ITEM
from frontier.core.messaging import game_message
from frontier.core.models import DIRECTION_OFFSETS, Position

if TYPE_CHECKING:
    from frontier.core.models import Character
    from frontier.core.world_state import WorldState

logger = logging.getLogger(__name__)


class MoveComponent(ActionComponent[MoveAction]):
    """Stateless handler for MOVE commands."""

    kind = ActionKind.MOVE
    pattern = re.compile(r"^go (north|south|east|west)$", re.IGNORECASE)

    def parse(self, text: str, actor: Character, timestamp: int) -> MoveAction:
        word = self._match(text).group(1).upper()
        try:
            offset = DIRECTION_OFFSETS[Direction[word]]
        except KeyError:
            raise ActionParseError(f"Unknown direction: {word.lower()}") from None
        return MoveAction(
            actor_id=actor.id,
            timestamp=timestamp,
            initiative=actor.stats.agility,
            text=text,
            offset_row=offset.row,
            offset_col=offset.col,
        )

    @staticmethod
    def destination(action: MoveAction, actor: Character) -> Position:
        return actor.pos + Position(action.offset_row, action.offset_col)

    def validate(self, action: MoveAction, world: WorldState) -> ValidationResult:
        actor = require_actor(action, world)
        target = self.destination(action, actor)

        if not world.grid.in_bounds(target):
            logger.debug("%s blocked by map edge at %s", actor.name, target)
            return ValidationResult.reject("Out of bounds movement!")
        if not world.grid.cell_at(target).is_room:
            logger.debug("%s blocked by barrier at %s", actor.name, target)
            return ValidationResult.reject("Desired location is not a room!")
        return ValidationResult.ok()

    def perform(self, action: MoveAction, world: WorldState, outcome: PerformOutcome) -> PerformOutcome:
        actor = require_actor(action, world)
        old_pos = actor.pos
        new_pos = self.destination(action, actor)
        world.move_character(actor.id, new_pos)
        outcome.log.append(f"{actor.name} moved from {old_pos} to {new_pos}")

        room = world.grid.cell_at(new_pos)
        if room.is_exit and actor.player_controlled:
            actor.has_escaped = True
            outcome.log.append(f"{actor.name} escaped")

        if actor.player_controlled:
            outcome.messages.append(game_message("You moved!", actor.id))
            outcome.messages.append(game_message(world.describe_room(new_pos, viewer_id=actor.id), actor.id))
            if actor.inventory.has(MAP_ITEM):
                actor.reveal(new_pos)
            if actor.has_escaped:
                outcome.messages.append(game_message("You escaped!", actor.id))
        return outcome

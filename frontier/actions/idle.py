"""PassComponent and RestComponent — turns spent standing still."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from frontier.actions.base import (
    ActionComponent,
    PassAction,
    PerformOutcome,
    RestAction,
    ValidationResult,
    require_actor,
    require_room,
)
from frontier.core.enums import ActionKind
from frontier.core.messaging import game_message

if TYPE_CHECKING:
    from frontier.core.models import Character
    from frontier.core.world_state import WorldState

logger = logging.getLogger(__name__)


class PassComponent(ActionComponent[PassAction]):
    """Does nothing; participants get an acknowledgment."""

    kind = ActionKind.PASS
    pattern = re.compile(r"^pass$", re.IGNORECASE)

    def parse(self, text: str, actor: Character, timestamp: int) -> PassAction:
        self._match(text)
        return PassAction(actor_id=actor.id, timestamp=timestamp, initiative=actor.stats.agility, text=text)

    def validate(self, action: PassAction, world: WorldState) -> ValidationResult:
        return ValidationResult.ok()

    def perform(self, action: PassAction, world: WorldState, outcome: PerformOutcome) -> PerformOutcome:
        actor = require_actor(action, world)
        if actor.player_controlled:
            outcome.messages.append(game_message("You performed no action.", actor.id))
        return outcome


class RestComponent(ActionComponent[RestAction]):
    """Refills the exhaustion meter. Participants need a camp to rest."""

    kind = ActionKind.REST
    pattern = re.compile(r"^rest$", re.IGNORECASE)

    def parse(self, text: str, actor: Character, timestamp: int) -> RestAction:
        self._match(text)
        return RestAction(actor_id=actor.id, timestamp=timestamp, initiative=actor.stats.agility, text=text)

    def validate(self, action: RestAction, world: WorldState) -> ValidationResult:
        actor = require_actor(action, world)
        if not actor.player_controlled:
            return ValidationResult.ok()
        if not require_room(actor, world).has_camp:
            logger.debug("%s cannot rest outside a camp at %s", actor.name, actor.pos)
            return ValidationResult.reject("Cannot rest without camp setup!")
        return ValidationResult.ok()

    def perform(self, action: RestAction, world: WorldState, outcome: PerformOutcome) -> PerformOutcome:
        actor = require_actor(action, world)
        exhaustion = actor.effects.exhaustion
        was_exhausted = exhaustion.is_active
        exhaustion.current = exhaustion.maximum
        exhaustion.is_active = False
        outcome.log.append(f"{actor.name} rested")

        if actor.player_controlled:
            if was_exhausted:
                text = "You rested at the camp and no longer feel exhausted."
            else:
                text = "You rested at the camp."
            outcome.messages.append(game_message(text, actor.id))
        return outcome

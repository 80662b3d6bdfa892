"""IngestComponent — eat, drink or otherwise consume a held item."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from frontier.actions.base import (
    ActionComponent,
    ActionParseError,
    ContractViolation,
    IngestAction,
    PerformOutcome,
    ValidationResult,
    alternation,
    require_actor,
)
from frontier.core.enums import ActionKind, Domain
from frontier.core.items import ITEM_REGISTRY, ingestible_names, item_name_from_text
from frontier.core.messaging import game_message

if TYPE_CHECKING:
    from frontier.core.models import Character
    from frontier.core.world_state import WorldState
    from frontier.systems.rng import DeterministicRNG

logger = logging.getLogger(__name__)

INGEST_VERBS = ("eat", "consume", "ingest", "use", "drink", "quaff")


class IngestComponent(ActionComponent[IngestAction]):
    """Handler for INGEST commands.

    Addiction is an unweighted coin flip drawn from the deterministic RNG,
    keyed by the actor and the turn so a replayed game reproduces it.
    """

    kind = ActionKind.INGEST
    pattern = re.compile(
        rf"^({'|'.join(INGEST_VERBS)}) ({alternation(ingestible_names())})$",
        re.IGNORECASE,
    )

    def __init__(self, rng: DeterministicRNG) -> None:
        self._rng = rng

    def parse(self, text: str, actor: Character, timestamp: int) -> IngestAction:
        token = self._match(text).group(2)
        item_name = item_name_from_text(token)
        if item_name is None or item_name not in ingestible_names():
            raise ActionParseError(f"Attempted to ingest a non-ingestible: {token}")
        return IngestAction(
            actor_id=actor.id,
            timestamp=timestamp,
            initiative=actor.stats.agility,
            text=text,
            item_name=item_name,
        )

    def validate(self, action: IngestAction, world: WorldState) -> ValidationResult:
        actor = require_actor(action, world)
        if not actor.inventory.has(action.item_name):
            return ValidationResult.reject(f"Missing {action.item_name} in inventory!")
        return ValidationResult.ok()

    def perform(self, action: IngestAction, world: WorldState, outcome: PerformOutcome) -> PerformOutcome:
        actor = require_actor(action, world)
        profile = ITEM_REGISTRY[action.item_name].ingestible
        if profile is None:
            raise ContractViolation(f"Tried to ingest an item that is not ingestible: {action.item_name!r}")
        try:
            taken = actor.inventory.remove(action.item_name, 1)
        except ValueError as exc:
            raise ContractViolation(str(exc)) from exc

        actor.stats.apply_deltas(profile.stat_deltas)
        outcome.log.append(f"{actor.name} ingested {taken.item.name}")

        if not actor.player_controlled:
            return outcome

        effects = actor.effects
        if profile.cures_poisoning and effects.poison.is_active:
            effects.poison.is_active = False
            outcome.messages.append(game_message("You have been cured of poisoning!", actor.id))
            outcome.log.append(f"{actor.name} poison removed")

        if profile.is_poisoned:
            effects.poison.is_active = True
            outcome.messages.append(game_message("You have been poisoned!", actor.id))
            outcome.log.append(f"{actor.name} was poisoned")

        if profile.is_addictive and self._rng.coin_flip(Domain.INGEST, actor.id, world.turn_number):
            effects.addiction.is_active = True
            outcome.messages.append(game_message("You have become addicted!", actor.id))
            outcome.log.append(f"{actor.name} became addicted")

        if profile.gives_immortality:
            effects.immortality = True
            logger.info("%s became immortal", actor.name)

        effects.addiction.current = effects.addiction.relieved(profile.addiction_relief)
        effects.exhaustion.current = effects.exhaustion.relieved(profile.exhaustion_relief)
        effects.hunger.current = effects.hunger.relieved(profile.hunger_relief)

        outcome.messages.append(game_message(f"You consumed a {taken.item.name}.", actor.id))
        return outcome

"""TurnEngine — the authoritative round resolver.

Round cycle:
  1. Ordering — pending actions sorted by initiative, then submission time
  2. Execution — each action re-validated against the current world, then performed
  3. Cleanup & Advancement — pending slots cleared, turn number advanced
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from frontier.actions.base import ContractViolation, PerformOutcome
from frontier.core.messaging import game_message

if TYPE_CHECKING:
    from frontier.actions.base import Action
    from frontier.actions.registry import ActionRegistry
    from frontier.core.world_state import WorldState
    from frontier.engine.pending import PendingActions

logger = logging.getLogger(__name__)
diagnostics = logging.getLogger("frontier.diagnostics")

DIED_BEFORE_ACTING = "You died before you could perform your action!"


def execution_key(action: Action) -> tuple[int, int]:
    """Higher initiative first; earlier submission breaks ties."""
    return (-action.initiative, action.timestamp)


class TurnEngine:
    """Executes one round at a time against a single ``WorldState``.

    The world is only mutated here, inside ``resolve_round``, in one
    sequential pass.
    """

    __slots__ = ("_world", "_registry", "_pending", "_last_executed")

    def __init__(self, world: WorldState, registry: ActionRegistry, pending: PendingActions) -> None:
        self._world = world
        self._registry = registry
        self._pending = pending
        self._last_executed: list[Action] = []

    @property
    def world(self) -> WorldState:
        return self._world

    @property
    def last_executed(self) -> list[Action]:
        """Actions performed during the most recent round."""
        return self._last_executed

    # -- predicates --

    def is_round_ready(self) -> bool:
        """True when every playing participant has a pending action."""
        return all(self._pending.has(c.id) for c in self._world.playing_participants())

    def is_game_over(self) -> bool:
        participants = self._world.participants()
        return bool(participants) and not any(c.is_playing for c in participants)

    def ordered_pending_actions(self) -> list[Action]:
        # sorted() is stable, so equal keys keep slot order
        return sorted(self._pending.snapshot(), key=execution_key)

    # -- resolution --

    def resolve_round(self) -> PerformOutcome:
        world = self._world
        outcome = PerformOutcome()
        executed: list[Action] = []
        ordered = self.ordered_pending_actions()

        logger.info("Turn %d: resolving %d action(s)", world.turn_number, len(ordered))

        try:
            for action in ordered:
                if self._execute(action, outcome):
                    executed.append(action)
        finally:
            self._pending.clear()
            self._last_executed = executed
            world.turn_number += 1
        logger.info("Turn %d resolved: %d performed, %d fault(s)",
                    world.turn_number - 1, len(executed), len(outcome.faults))
        return outcome

    def _execute(self, action: Action, outcome: PerformOutcome) -> bool:
        world = self._world
        actor = world.get(action.actor_id)

        if actor is None:
            outcome.log.append(f"Skipped {action.kind.label} from missing actor {action.actor_id}")
            return False
        if actor.is_dead:
            if actor.player_controlled:
                outcome.messages.append(game_message(DIED_BEFORE_ACTING, actor.id))
            outcome.log.append(f"{actor.name} could not {action.kind.label.lower()}: dead")
            return False
        if not actor.is_playing:
            outcome.log.append(f"{actor.name} could not {action.kind.label.lower()}: no longer playing")
            return False

        component = self._registry.component_for(action.kind)
        alive_before = [c for c in world.characters.values() if not c.is_dead]

        try:
            result = component.validate(action, world)
            if not result.valid:
                if actor.player_controlled:
                    outcome.messages.append(
                        game_message(f"Your action could not be performed: {result.reason}", actor.id)
                    )
                outcome.log.append(f"{actor.name} skipped {action.kind.label.lower()}: {result.reason}")
                logger.debug("Re-validation rejected %r: %s", action, result.reason)
                return False
            component.perform(action, world, outcome)
        except ContractViolation as exc:
            diagnostics.exception("Contract violation while resolving %r", action)
            outcome.faults.append(str(exc))
            outcome.log.append(f"{actor.name} skipped {action.kind.label.lower()}: internal error")
            return False
        finally:
            for character in alive_before:
                if character.is_dead:
                    outcome.log.append(f"{character.name} died")

        return True

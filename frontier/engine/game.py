"""Game — the surface a host drives: submit text, check readiness, resolve."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from frontier.actions.registry import default_registry
from frontier.engine.command_router import CommandRouter
from frontier.engine.communication import CommunicationHandler
from frontier.engine.pending import PendingActions
from frontier.engine.turn_engine import TurnEngine
from frontier.systems.rng import DeterministicRNG

if TYPE_CHECKING:
    from frontier.actions.base import Action, PerformOutcome
    from frontier.actions.registry import ActionRegistry
    from frontier.core.messaging import Message
    from frontier.core.world_state import WorldState

logger = logging.getLogger(__name__)


class UnknownPlayerError(LookupError):
    """Text arrived for a player id that is not in the roster."""


class Game:
    """Wires the registry, router, pending slots and turn engine around one world."""

    __slots__ = ("_world", "_rng", "_registry", "_pending", "_router", "_engine")

    def __init__(
        self,
        world: WorldState,
        registry: ActionRegistry | None = None,
        rng: DeterministicRNG | None = None,
    ) -> None:
        self._world = world
        self._rng = rng or DeterministicRNG(world.seed)
        self._registry = registry or default_registry(self._rng)
        self._pending = PendingActions()
        self._router = CommandRouter(self._registry, self._pending, CommunicationHandler())
        self._engine = TurnEngine(world, self._registry, self._pending)

    @property
    def world(self) -> WorldState:
        return self._world

    @property
    def registry(self) -> ActionRegistry:
        return self._registry

    @property
    def pending(self) -> PendingActions:
        return self._pending

    @property
    def turn_engine(self) -> TurnEngine:
        return self._engine

    def submit_text(self, player_id: str, text: str, timestamp: int) -> list[Message]:
        """Route one inbound message; returns the replies it produced."""
        sender = self._world.get(player_id)
        if sender is None or not sender.player_controlled:
            raise UnknownPlayerError(player_id)
        return self._router.route(sender, text, timestamp, self._world)

    def queue_action(self, action: Action) -> Action | None:
        """Install an action for a host-driven actor, bypassing text parsing."""
        if self._world.get(action.actor_id) is None:
            raise UnknownPlayerError(action.actor_id)
        return self._pending.set(action)

    def is_round_ready(self) -> bool:
        return self._engine.is_round_ready()

    def ordered_pending_actions(self) -> list[Action]:
        return self._engine.ordered_pending_actions()

    def resolve_round(self) -> PerformOutcome:
        return self._engine.resolve_round()

    def is_game_over(self) -> bool:
        return self._engine.is_game_over()

"""CommandRouter — classifies inbound text and answers the sender.

Rules are tried in order:
  1. action commands (registry patterns, in declaration order)
  2. communication directives (``/t``, ``/s``, ``/w`` ...)
  3. anything else is rejected as unrecognized

The router never touches world state; the only thing it writes is the
sender's pending-action slot.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from frontier.actions.base import ActionParseError
from frontier.core.messaging import game_message
from frontier.engine.communication import CommunicationHandler, is_communication

if TYPE_CHECKING:
    from frontier.actions.base import ActionComponent
    from frontier.actions.registry import ActionRegistry
    from frontier.core.messaging import Message
    from frontier.core.models import Character
    from frontier.core.world_state import WorldState
    from frontier.engine.pending import PendingActions

logger = logging.getLogger(__name__)

CONFIRMATION_PREFIX = "Next action:"
REJECTION_PREFIX = "Invalid action:"
UNRECOGNIZED_PREFIX = "Unrecognized command or communication:"


class CommandRouter:
    """Turns one participant's text into replies (and maybe a pending action)."""

    __slots__ = ("_registry", "_pending", "_communication")

    def __init__(
        self,
        registry: ActionRegistry,
        pending: PendingActions,
        communication: CommunicationHandler | None = None,
    ) -> None:
        self._registry = registry
        self._pending = pending
        self._communication = communication or CommunicationHandler()

    def route(self, sender: Character, text: str, timestamp: int, world: WorldState) -> list[Message]:
        text = text.strip()

        component = self._registry.component_for_text(text)
        if component is not None:
            return [self._handle_action(component, sender, text, timestamp, world)]

        if is_communication(text):
            return self._communication.handle(sender, text, world)

        logger.debug("Unrecognized text from %s: %r", sender.name, text)
        return [game_message(f"{UNRECOGNIZED_PREFIX} {text}", sender.id)]

    def _handle_action(
        self,
        component: ActionComponent,
        sender: Character,
        text: str,
        timestamp: int,
        world: WorldState,
    ) -> Message:
        if not world.is_playing(sender):
            return game_message(f"{REJECTION_PREFIX} You are no longer playing!", sender.id)

        try:
            action = component.parse(text, sender, timestamp)
        except ActionParseError as exc:
            logger.debug("Parse failure for %s: %s", sender.name, exc)
            return game_message(f"{REJECTION_PREFIX} {exc}", sender.id)

        result = component.validate(action, world)
        if not result.valid:
            logger.debug("Rejected %r: %s", action, result.reason)
            return game_message(f"{REJECTION_PREFIX} {result.reason}", sender.id)

        replaced = self._pending.set(action)
        if replaced is not None:
            logger.debug("%s replaced pending %r", sender.name, replaced)
        return game_message(f"{CONFIRMATION_PREFIX} {action.kind.label} ({text})", sender.id)

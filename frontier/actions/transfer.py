"""PickupComponent and DropComponent — moving stacks between room and actor."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from frontier.actions.base import (
    ActionComponent,
    ActionParseError,
    ContractViolation,
    DropAction,
    PerformOutcome,
    PickupAction,
    ValidationResult,
    alternation,
    parse_amount,
    require_actor,
    require_room,
)
from frontier.core.enums import ActionKind
from frontier.core.items import (
    ITEM_REGISTRY,
    ItemStack,
    count_in,
    drain_stacks,
    find_stack,
    item_name_from_text,
    item_names,
    merge_stacks,
)
from frontier.core.messaging import game_message

if TYPE_CHECKING:
    from frontier.core.grid import Cell
    from frontier.core.models import Character
    from frontier.core.world_state import WorldState

logger = logging.getLogger(__name__)


def _resolve_item(token: str, text: str) -> str:
    name = item_name_from_text(token)
    if name is None:
        raise ActionParseError(f"Item name not found: {text!r}")
    return name


def _room_listing(cell: Cell) -> str:
    return "[" + ", ".join(repr(s) for s in cell.items) + "]"


class PickupComponent(ActionComponent[PickupAction]):
    """Room inventory → actor inventory."""

    kind = ActionKind.PICKUP
    pattern = re.compile(
        rf"^(pick up|get|grab)(\s+(\d+))?\s+({alternation(item_names())})$",
        re.IGNORECASE,
    )

    def parse(self, text: str, actor: Character, timestamp: int) -> PickupAction:
        m = self._match(text)
        return PickupAction(
            actor_id=actor.id,
            timestamp=timestamp,
            initiative=actor.stats.agility,
            text=text,
            item_name=_resolve_item(m.group(4), text),
            amount=parse_amount(m.group(3), text),
        )

    def validate(self, action: PickupAction, world: WorldState) -> ValidationResult:
        actor = require_actor(action, world)
        cell = require_room(actor, world)
        name = action.item_name

        available = count_in(cell.items, name)
        if available == 0:
            return ValidationResult.reject(f"{name} is not in the room!")

        if action.amount is not None:
            if action.amount < 1:
                return ValidationResult.reject("Transaction amount must be positive!")
            if action.amount > available:
                return ValidationResult.reject(f"There is only {available} {name}(s) in the room!")
        amount = action.amount if action.amount is not None else find_stack(cell.items, name).amount

        held = actor.inventory.get(name)
        if held is not None:
            if held.is_full:
                return ValidationResult.reject(f"Your current stack of {name} is full!")
            if held.amount + amount > held.max_amount:
                return ValidationResult.reject(f"You can only hold {held.max_amount} {name}(s)!")
            return ValidationResult.ok()

        if actor.inventory.is_full:
            return ValidationResult.reject("Your inventory is full!")
        max_stack = ITEM_REGISTRY[name].max_stack
        if amount > max_stack:
            return ValidationResult.reject(f"You can only hold {max_stack} {name}(s)!")
        return ValidationResult.ok()

    def perform(self, action: PickupAction, world: WorldState, outcome: PerformOutcome) -> PerformOutcome:
        actor = require_actor(action, world)
        room = require_room(actor, world)
        name = action.item_name

        # Re-read the room: earlier actions this round may have changed it.
        first = find_stack(room.items, name)
        amount = action.amount if action.amount is not None else (first.amount if first else 0)
        if amount < 1 or amount > count_in(room.items, name):
            raise ContractViolation(f"Room {room.pos} no longer holds {amount} {name}")
        template = ITEM_REGISTRY[name]
        room.items = drain_stacks(room.items, name, amount)

        actor.inventory.add(ItemStack(template, amount, template.max_stack))

        outcome.log.append(f"After pickup: room {room.pos} has items: {_room_listing(room)}")
        if actor.player_controlled:
            outcome.messages.append(game_message(f"You picked up {amount} {name}(s).", actor.id))
        return outcome


class DropComponent(ActionComponent[DropAction]):
    """Actor inventory → room inventory."""

    kind = ActionKind.DROP
    pattern = re.compile(
        rf"^drop(\s+(\d+))?\s+({alternation(item_names())})$",
        re.IGNORECASE,
    )

    def parse(self, text: str, actor: Character, timestamp: int) -> DropAction:
        m = self._match(text)
        return DropAction(
            actor_id=actor.id,
            timestamp=timestamp,
            initiative=actor.stats.agility,
            text=text,
            item_name=_resolve_item(m.group(3), text),
            amount=parse_amount(m.group(2), text),
        )

    def validate(self, action: DropAction, world: WorldState) -> ValidationResult:
        actor = require_actor(action, world)
        require_room(actor, world)
        name = action.item_name

        if not actor.inventory.has(name):
            return ValidationResult.reject(f"You do not have any {name} to drop!")
        if action.amount is not None:
            held = actor.inventory.count(name)
            if action.amount < 1:
                return ValidationResult.reject("Drop count must be positive!")
            if action.amount > held:
                return ValidationResult.reject(f"You cannot drop more than {held} {name}!")
        return ValidationResult.ok()

    def perform(self, action: DropAction, world: WorldState, outcome: PerformOutcome) -> PerformOutcome:
        actor = require_actor(action, world)
        room = require_room(actor, world)
        name = action.item_name

        held = actor.inventory.get(name)
        amount = action.amount if action.amount is not None else (held.amount if held else 0)
        try:
            dropped = actor.inventory.remove(name, amount)
        except ValueError as exc:
            raise ContractViolation(str(exc)) from exc
        room.items.append(dropped)
        room.items = merge_stacks(room.items)

        logger.debug("%s dropped %d %s at %s", actor.name, amount, name, room.pos)
        outcome.log.append(f"After drop: room {room.pos} has items: {_room_listing(room)}")
        if actor.player_controlled:
            outcome.messages.append(game_message(f"You dropped {amount} {name}(s).", actor.id))
        return outcome

"""AttackComponent — validates and resolves attacks between participants.

Targets are addressed by a fragment of their name and must be the single
playing participant matching it. Attacks travel along a row or column:
the target has to be within the weapon's range with no barrier between.

Ranged weapons land ``floor(times * accuracy / 100)`` strikes and spend
one round of ammunition per requested strike. Melee weapons always land
every strike but wear the attacker down (strength and agility).
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from frontier.actions.base import (
    ActionComponent,
    ActionParseError,
    AttackAction,
    ContractViolation,
    PerformOutcome,
    ValidationResult,
    alternation,
    require_actor,
)
from frontier.core.enums import ActionKind
from frontier.core.items import ITEM_REGISTRY, UNARMED_WEAPON, attack_weapon_names, item_name_from_text
from frontier.core.messaging import game_message

if TYPE_CHECKING:
    from frontier.core.items import WeaponProfile
    from frontier.core.models import Character
    from frontier.core.world_state import WorldState

logger = logging.getLogger(__name__)


def resolve_target(world: WorldState, fragment: str) -> tuple[Character | None, str | None]:
    """Find the unique playing participant addressed by *fragment*.

    An exact (case-insensitive) name wins over partial matches.
    Returns ``(target, None)`` or ``(None, reason)``.
    """
    candidates = world.find_playing_by_approximate_name(fragment)
    if not candidates:
        return None, f"No player with name '{fragment}'!"
    if len(candidates) == 1:
        return candidates[0], None
    exact = [c for c in candidates if c.name.lower() == fragment.lower()]
    if len(exact) == 1:
        return exact[0], None
    return None, f"Name '{fragment}' matches more than one player!"


def landed_strikes(weapon: WeaponProfile, times: int) -> int:
    accuracy = weapon.accuracy if weapon.is_ranged else 100
    return times * accuracy // 100


class AttackComponent(ActionComponent[AttackAction]):
    """Stateless handler for ATTACK commands."""

    kind = ActionKind.ATTACK
    pattern = re.compile(
        rf"^attack (\w+) ({alternation(attack_weapon_names())}) (\d+)$",
        re.IGNORECASE,
    )

    def parse(self, text: str, actor: Character, timestamp: int) -> AttackAction:
        m = self._match(text)
        target_name, weapon_token, times_token = m.group(1), m.group(2), m.group(3)

        weapon_name = item_name_from_text(weapon_token)
        if weapon_name is None or ITEM_REGISTRY[weapon_name].weapon is None:
            raise ActionParseError(f"Attempted to attack with a non-weapon: {weapon_token}")
        try:
            times = int(times_token, 10)
        except ValueError:
            raise ActionParseError(f"Could not parse number of attacks: {times_token}") from None

        return AttackAction(
            actor_id=actor.id,
            timestamp=timestamp,
            initiative=actor.stats.agility,
            text=text,
            target_name=target_name,
            weapon_name=weapon_name,
            times=times,
        )

    @staticmethod
    def _weapon(action: AttackAction) -> WeaponProfile:
        template = ITEM_REGISTRY.get(action.weapon_name)
        if template is None or template.weapon is None:
            raise ContractViolation(f"{action.weapon_name!r} is not an attack weapon")
        return template.weapon

    def validate(self, action: AttackAction, world: WorldState) -> ValidationResult:
        actor = require_actor(action, world)
        inventory = actor.inventory

        if action.weapon_name != UNARMED_WEAPON and not inventory.has(action.weapon_name):
            return ValidationResult.reject(f"Missing {action.weapon_name} in inventory!")
        if action.times <= 0:
            return ValidationResult.reject(f"Bad number of times attacking ({action.times})!")

        weapon = self._weapon(action)
        target, reason = resolve_target(world, action.target_name)
        if target is None:
            return ValidationResult.reject(reason)

        if world.grid.cardinal_distance(actor.pos, target.pos) > weapon.range:
            logger.debug("%s attack on %s failed: out of range", actor.name, target.name)
            return ValidationResult.reject(f"{target.name} is out of {action.weapon_name}'s attack range!")
        if not actor.pos.shares_line(target.pos):
            return ValidationResult.reject("You can only shoot in straight lines!")
        if not world.grid.line_is_clear(actor.pos, target.pos):
            return ValidationResult.reject("Your shot is obstructed by a barrier!")

        if weapon.is_ranged:
            held = inventory.count(weapon.ammunition)
            if held == 0:
                return ValidationResult.reject(f"You don't have {weapon.ammunition}s for your {action.weapon_name}!")
            if held < action.times:
                return ValidationResult.reject(
                    f"You cannot shoot {action.times} time(s) because you only have {held} bullet(s)!"
                )
        return ValidationResult.ok()

    def perform(self, action: AttackAction, world: WorldState, outcome: PerformOutcome) -> PerformOutcome:
        attacker = require_actor(action, world)
        weapon = self._weapon(action)
        target, reason = resolve_target(world, action.target_name)
        if target is None:
            raise ContractViolation(f"Expected attack target to exist: {reason}")

        strikes = landed_strikes(weapon, action.times)
        damage = strikes * weapon.damage
        target.stats.health = max(0, target.stats.health - damage)

        outcome.log.append(
            f"{attacker.name} attacked {target.name} with {action.weapon_name} "
            f"{strikes} time(s) for {damage} damage [health: {target.stats.health}]"
        )
        logger.info("%s hits %s for %d damage", attacker.name, target.name, damage)

        if attacker.player_controlled:
            outcome.messages.append(game_message(
                f"You attacked {target.name} {strikes} time(s) for a total of {damage} damage!", attacker.id,
            ))
        outcome.messages.append(game_message(f"{attacker.name} attacked you for {damage} damage!", target.id))

        if target.is_dead:
            if attacker.player_controlled:
                outcome.messages.append(game_message(f"You killed {target.name}!", attacker.id))
            outcome.messages.append(game_message(f"You were killed by {attacker.name}", target.id))

        if weapon.is_ranged:
            try:
                attacker.inventory.remove(weapon.ammunition, action.times)
            except ValueError as exc:
                raise ContractViolation(str(exc)) from exc
        else:
            attacker.stats.apply_deltas({"strength": -strikes, "agility": -action.times})
        return outcome

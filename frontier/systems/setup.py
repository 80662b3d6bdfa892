"""World construction — grid from config rows, starting room items, participants."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

from frontier.core.enums import Allegiance, Domain
from frontier.core.grid import Grid
from frontier.core.items import Inventory, create_stack, merge_stacks
from frontier.core.maps import DEFAULT_ROOM_ITEMS
from frontier.core.models import Character, Effects, Meter, Position, Stats
from frontier.core.world_state import WorldState

if TYPE_CHECKING:
    from frontier.config import GameConfig
    from frontier.systems.rng import DeterministicRNG

logger = logging.getLogger(__name__)

_FACTIONS = (Allegiance.EASTERN, Allegiance.WESTERN)


def build_world(
    config: GameConfig,
    room_items: dict[tuple[int, int], tuple[tuple[str, int], ...]] | None = None,
) -> WorldState:
    """Parse the configured map and stock its rooms."""
    grid = Grid.from_rows(config.map_rows)
    items = DEFAULT_ROOM_ITEMS if room_items is None else room_items

    for (row, col), contents in items.items():
        pos = Position(row, col)
        if not grid.in_bounds(pos) or not grid.is_room(pos):
            logger.warning("Skipping items for %s: not a room on this map", pos)
            continue
        cell = grid.cell_at(pos)
        cell.items = merge_stacks(cell.items + [create_stack(name, amount) for name, amount in contents])

    world = WorldState(config.world_seed, grid)
    logger.info("World built: %dx%d grid, start %s, seed %d",
                grid.height, grid.width, grid.start, config.world_seed)
    return world


def _fresh_meter(config: GameConfig) -> Meter:
    return Meter(config.meter_maximum, config.meter_maximum)


def spawn_character(
    world: WorldState,
    config: GameConfig,
    rng: DeterministicRNG,
    character_id: str,
    name: str,
    *,
    player_controlled: bool = True,
    allegiance: Allegiance | None = None,
) -> Character:
    """Create a character at the start room with the configured loadout."""
    if allegiance is None:
        allegiance = rng.pick_one(Domain.SPAWN, character_id, world.turn_number, _FACTIONS)

    inventory = Inventory(max_slots=config.inventory_slots)
    for item_name, amount in config.starting_items:
        inventory.add(create_stack(item_name, amount))

    character = Character(
        id=character_id,
        name=name,
        pos=world.grid.start,
        inventory=inventory,
        stats=Stats(
            health=config.starting_health,
            strength=config.starting_strength,
            agility=config.starting_agility,
            intelligence=config.starting_intelligence,
        ),
        effects=Effects(
            poison=_fresh_meter(config),
            addiction=_fresh_meter(config),
            exhaustion=_fresh_meter(config),
            hunger=_fresh_meter(config),
        ),
        allegiance=allegiance,
        player_controlled=player_controlled,
    )
    world.add_character(character)
    logger.info("Spawned %s (%s) at %s, allegiance %s",
                name, character_id, character.pos, allegiance.name)
    return character


def spawn_players(
    world: WorldState,
    config: GameConfig,
    rng: DeterministicRNG,
    players: Iterable[tuple[str, str]],
) -> list[Character]:
    """Spawn every ``(id, name)`` pair, refusing more than ``max_players``."""
    players = list(players)
    if len(players) > config.max_players:
        raise ValueError(f"At most {config.max_players} players allowed, got {len(players)}")
    return [spawn_character(world, config, rng, pid, name) for pid, name in players]

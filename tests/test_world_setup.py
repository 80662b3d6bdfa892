"""Tests for world construction: map parsing, room stocking, spawning."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from frontier.config import GameConfig
from frontier.core.enums import Allegiance, PlayerState
from frontier.core.grid import Grid
from frontier.core.maps import DEFAULT_ROOM_ITEMS
from frontier.core.models import Position
from frontier.systems.rng import DeterministicRNG
from frontier.systems.setup import build_world, spawn_character, spawn_players


class TestGrid:

    def test_from_rows_marks_cells(self):
        grid = Grid.from_rows(["#S.", "#CE"])
        assert grid.start == Position(0, 1)
        assert grid.is_barrier(Position(0, 0))
        assert grid.cell_at(Position(1, 1)).has_camp
        assert grid.cell_at(Position(1, 2)).is_exit

    def test_unknown_character_rejected(self):
        with pytest.raises(ValueError):
            Grid.from_rows(["S?"])

    def test_ragged_rows_rejected(self):
        with pytest.raises(ValueError):
            Grid.from_rows(["S..", "."])

    def test_out_of_bounds_counts_as_barrier(self):
        grid = Grid.from_rows(["S."])
        assert grid.is_barrier(Position(-1, 0))
        assert not grid.is_room(Position(0, 5))
        with pytest.raises(IndexError):
            grid.cell_at(Position(3, 3))

    def test_positions_between(self):
        assert Grid.positions_between(Position(1, 1), Position(1, 4)) == [Position(1, 2), Position(1, 3)]
        assert Grid.positions_between(Position(4, 2), Position(1, 2)) == [Position(2, 2), Position(3, 2)]
        assert Grid.positions_between(Position(0, 0), Position(1, 1)) == []


class TestBuildWorld:

    def test_default_rooms_are_stocked(self):
        world = build_world(GameConfig())
        for (row, col), contents in DEFAULT_ROOM_ITEMS.items():
            cell = world.grid.cell_at(Position(row, col))
            for name, amount in contents:
                assert sum(s.amount for s in cell.items if s.item.name == name) == amount

    def test_seed_and_turn(self):
        world = build_world(GameConfig(world_seed=9))
        assert world.seed == 9
        assert world.turn_number == 0

    def test_items_for_barriers_are_skipped(self):
        world = build_world(GameConfig(map_rows=("S#",)), room_items={(0, 1): (("Apple", 1),)})
        assert world.grid.cell_at(Position(0, 1)).items == []


class TestSpawn:

    def test_spawn_uses_config_loadout(self):
        config = GameConfig(starting_health=80, starting_agility=12)
        world = build_world(config)
        alice = spawn_character(world, config, DeterministicRNG(1), "p1", "Alice")

        assert alice.pos == world.grid.start
        assert alice.stats.health == 80
        assert alice.stats.agility == 12
        assert alice.inventory.count("Bullet") == 6
        assert alice.inventory.has("Revolver")
        assert alice.inventory.max_slots == config.inventory_slots
        assert alice.state == PlayerState.PLAYING
        assert world.get("p1") is alice

    def test_allegiance_is_seeded(self):
        config = GameConfig()
        picks = []
        for _ in range(2):
            world = build_world(config)
            picks.append(spawn_character(world, config, DeterministicRNG(3), "p1", "Alice").allegiance)
        assert picks[0] == picks[1]
        assert picks[0] in (Allegiance.EASTERN, Allegiance.WESTERN)

    def test_duplicate_id_rejected(self):
        config = GameConfig()
        world = build_world(config)
        rng = DeterministicRNG(1)
        spawn_character(world, config, rng, "p1", "Alice")
        with pytest.raises(ValueError):
            spawn_character(world, config, rng, "p1", "Again")

    def test_player_cap(self):
        config = GameConfig(max_players=1)
        world = build_world(config)
        with pytest.raises(ValueError):
            spawn_players(world, config, DeterministicRNG(1), [("p1", "Alice"), ("p2", "Bob")])

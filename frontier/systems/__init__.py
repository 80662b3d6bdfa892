"""Supporting systems: deterministic randomness and world setup."""

from frontier.systems.rng import DeterministicRNG
from frontier.systems.setup import build_world, spawn_character, spawn_players

__all__ = ["DeterministicRNG", "build_world", "spawn_character", "spawn_players"]

"""Game configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass

from frontier.core.maps import DEFAULT_MAP


@dataclass(frozen=True)
class GameConfig:
    """Immutable configuration for one game session."""

    # World
    world_seed: int = 42
    map_rows: tuple[str, ...] = DEFAULT_MAP
    max_players: int = 8

    # Characters
    inventory_slots: int = 8
    starting_health: int = 100
    starting_strength: int = 10
    starting_agility: int = 10
    starting_intelligence: int = 10
    meter_maximum: int = 10
    starting_items: tuple[tuple[str, int], ...] = (("Knife", 1), ("Revolver", 1), ("Bullet", 6))

    # Session driver
    auto_resolve: bool = True              # resolve as soon as every playing participant has acted
    event_log_limit: int = 1000

    # Logging
    log_level: str = "INFO"
    replay_file: str = "replay.json"

"""Core data models: Position, Stats, Meter, Effects, Character."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Mapping

from frontier.core.enums import Allegiance, Direction, PlayerState

if TYPE_CHECKING:
    from frontier.core.items import Inventory


@dataclass(frozen=True, slots=True)
class Position:
    """Immutable (row, col) grid coordinate. Row grows southwards."""

    row: int = 0
    col: int = 0

    def __add__(self, other: Position) -> Position:
        return Position(self.row + other.row, self.col + other.col)

    def cardinal_distance(self, other: Position) -> int:
        return abs(self.row - other.row) + abs(self.col - other.col)

    def shares_line(self, other: Position) -> bool:
        return self.row == other.row or self.col == other.col

    def __repr__(self) -> str:
        return f"({self.row}, {self.col})"


DIRECTION_OFFSETS: dict[Direction, Position] = {
    Direction.NORTH: Position(-1, 0),
    Direction.EAST: Position(0, 1),
    Direction.SOUTH: Position(1, 0),
    Direction.WEST: Position(0, -1),
}


@dataclass(slots=True)
class Stats:
    """Mutable character statistics."""

    health: int = 100
    strength: int = 10
    agility: int = 10
    intelligence: int = 10

    def apply_deltas(self, deltas: Mapping[str, int]) -> None:
        """Add each delta to the named stat, flooring the result at zero."""
        for name, delta in deltas.items():
            if name not in self.__slots__:
                raise KeyError(f"Unknown stat: {name}")
            setattr(self, name, max(0, getattr(self, name) + delta))

    def copy(self) -> Stats:
        return Stats(
            health=self.health,
            strength=self.strength,
            agility=self.agility,
            intelligence=self.intelligence,
        )


@dataclass(slots=True)
class Meter:
    """Bounded current/maximum tracker with an activity flag."""

    current: int
    maximum: int
    is_active: bool = False

    def relieved(self, amount: int) -> int:
        """Current value after *amount* of relief, capped at the maximum."""
        return max(0, min(self.maximum, self.current + amount))

    def copy(self) -> Meter:
        return Meter(self.current, self.maximum, self.is_active)


@dataclass(slots=True)
class Effects:
    poison: Meter = field(default_factory=lambda: Meter(10, 10))
    addiction: Meter = field(default_factory=lambda: Meter(10, 10))
    exhaustion: Meter = field(default_factory=lambda: Meter(10, 10))
    hunger: Meter = field(default_factory=lambda: Meter(10, 10))
    immortality: bool = False

    def copy(self) -> Effects:
        return Effects(
            poison=self.poison.copy(),
            addiction=self.addiction.copy(),
            exhaustion=self.exhaustion.copy(),
            hunger=self.hunger.copy(),
            immortality=self.immortality,
        )


@dataclass(slots=True)
class Character:
    """Any actor able to hold a pending action.

    ``player_controlled`` is the capability flag separating participants
    (who receive messages under their ``id``) from host-driven actors.
    """

    id: str
    name: str
    pos: Position
    inventory: Inventory
    stats: Stats = field(default_factory=Stats)
    effects: Effects = field(default_factory=Effects)
    allegiance: Allegiance = Allegiance.NONE
    player_controlled: bool = True
    has_escaped: bool = False
    revealed: set[Position] = field(default_factory=set)

    @property
    def is_dead(self) -> bool:
        return self.stats.health <= 0

    @property
    def state(self) -> PlayerState:
        if self.is_dead:
            return PlayerState.DEAD
        if self.has_escaped:
            return PlayerState.ESCAPED
        return PlayerState.PLAYING

    @property
    def is_playing(self) -> bool:
        return self.state == PlayerState.PLAYING

    def reveal(self, pos: Position) -> None:
        self.revealed.add(pos)

    def copy(self) -> Character:
        """Deep copy for snapshots."""
        return Character(
            id=self.id,
            name=self.name,
            pos=self.pos,
            inventory=self.inventory.copy(),
            stats=self.stats.copy(),
            effects=self.effects.copy(),
            allegiance=self.allegiance,
            player_controlled=self.player_controlled,
            has_escaped=self.has_escaped,
            revealed=set(self.revealed),
        )

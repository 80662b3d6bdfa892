"""Grid / map system."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from frontier.core.enums import CellKind
from frontier.core.items import ItemStack
from frontier.core.models import Position

# ASCII legend used by Grid.from_rows
BARRIER_CHAR = "#"
ROOM_CHAR = "."
CAMP_CHAR = "C"
START_CHAR = "S"
EXIT_CHAR = "E"


@dataclass(slots=True)
class Cell:
    """One map cell. Only rooms can hold characters and items."""

    row: int
    col: int
    kind: CellKind = CellKind.ROOM
    has_camp: bool = False
    is_exit: bool = False
    items: list[ItemStack] = field(default_factory=list)

    @property
    def pos(self) -> Position:
        return Position(self.row, self.col)

    @property
    def is_room(self) -> bool:
        return self.kind == CellKind.ROOM

    @property
    def is_barrier(self) -> bool:
        return self.kind == CellKind.BARRIER


class Grid:
    """2D cell grid backed by a flat list."""

    __slots__ = ("height", "width", "_cells", "start")

    def __init__(self, height: int, width: int, default: CellKind = CellKind.ROOM) -> None:
        self.height = height
        self.width = width
        self._cells: list[Cell] = [
            Cell(r, c, kind=default) for r in range(height) for c in range(width)
        ]
        self.start = Position(0, 0)

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> Grid:
        """Build a grid from ASCII rows (``#`` barrier, ``.`` room,
        ``C`` camp, ``S`` start room, ``E`` exit room)."""
        rows = list(rows)
        if not rows:
            raise ValueError("Map needs at least one row")
        width = len(rows[0])
        if any(len(r) != width for r in rows):
            raise ValueError("Map rows must all have the same width")

        grid = cls(len(rows), width)
        for r, line in enumerate(rows):
            for c, ch in enumerate(line):
                cell = grid._cells[grid._idx(r, c)]
                if ch == BARRIER_CHAR:
                    cell.kind = CellKind.BARRIER
                elif ch == CAMP_CHAR:
                    cell.has_camp = True
                elif ch == EXIT_CHAR:
                    cell.is_exit = True
                elif ch == START_CHAR:
                    grid.start = Position(r, c)
                elif ch != ROOM_CHAR:
                    raise ValueError(f"Unknown map character {ch!r} at ({r}, {c})")
        return grid

    # -- access --

    def _idx(self, row: int, col: int) -> int:
        return row * self.width + col

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.row < self.height and 0 <= pos.col < self.width

    def cell_at(self, pos: Position) -> Cell:
        if not self.in_bounds(pos):
            raise IndexError(f"Position {pos} is outside the map")
        return self._cells[self._idx(pos.row, pos.col)]

    def is_room(self, pos: Position) -> bool:
        return self.in_bounds(pos) and self.cell_at(pos).is_room

    def is_barrier(self, pos: Position) -> bool:
        return not self.in_bounds(pos) or self.cell_at(pos).is_barrier

    # -- geometry --

    @staticmethod
    def cardinal_distance(a: Position, b: Position) -> int:
        return a.cardinal_distance(b)

    @staticmethod
    def positions_between(a: Position, b: Position) -> list[Position]:
        """Positions strictly between *a* and *b* on a shared row or column.

        Returns an empty list when the two do not share a line.
        """
        if a.row == b.row:
            lo, hi = sorted((a.col, b.col))
            return [Position(a.row, c) for c in range(lo + 1, hi)]
        if a.col == b.col:
            lo, hi = sorted((a.row, b.row))
            return [Position(r, a.col) for r in range(lo + 1, hi)]
        return []

    def line_is_clear(self, a: Position, b: Position) -> bool:
        return not any(self.is_barrier(p) for p in self.positions_between(a, b))

"""Thread-safe ring buffer for round events exposed via the API."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RoundEvent:
    """A single log line from a resolved round."""

    turn: int
    category: str
    message: str


def categorize(line: str) -> str:
    """Coarse category for a round log line."""
    if line.endswith(" died"):
        return "death"
    if line.endswith(" escaped"):
        return "escape"
    if " skipped " in line or line.startswith("Skipped ") or " could not " in line:
        return "skip"
    if line.startswith(("After pickup", "After drop")):
        return "item"
    return "action"


class EventLog:
    """Bounded event log. Writers append; readers snapshot a slice.

    Oldest events fall off once ``limit`` is reached.
    """

    __slots__ = ("_buffer", "_lock")

    def __init__(self, limit: int = 1000) -> None:
        self._buffer: deque[RoundEvent] = deque(maxlen=limit)
        self._lock = threading.Lock()

    def append_many(self, events: list[RoundEvent]) -> None:
        with self._lock:
            self._buffer.extend(events)

    def since_turn(self, turn: int) -> list[RoundEvent]:
        """Return all events with turn >= *turn*."""
        with self._lock:
            return [e for e in self._buffer if e.turn >= turn]

    def latest(self, count: int = 50) -> list[RoundEvent]:
        with self._lock:
            items = list(self._buffer)
        return items[-count:]

    def clear(self) -> None:
        with self._lock:
            self._buffer.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffer)

"""Thread-safe pending-action slots connecting the router to the TurnEngine."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from frontier.actions.base import Action


class PendingActions:
    """One slot per actor, holding at most one Action until the next round.

    The router may fill slots from several threads while commands arrive;
    the TurnEngine reads them all and clears them once per round.
    """

    __slots__ = ("_slots", "_lock")

    def __init__(self) -> None:
        self._slots: dict[str, Action] = {}
        self._lock = threading.Lock()

    def set(self, action: Action) -> Action | None:
        """Install *action* in its actor's slot; returns the action it replaced."""
        with self._lock:
            previous = self._slots.get(action.actor_id)
            self._slots[action.actor_id] = action
            return previous

    def get(self, actor_id: str) -> Action | None:
        with self._lock:
            return self._slots.get(actor_id)

    def has(self, actor_id: str) -> bool:
        with self._lock:
            return actor_id in self._slots

    def snapshot(self) -> list[Action]:
        """All pending actions in slot-creation order."""
        with self._lock:
            return list(self._slots.values())

    def clear(self) -> None:
        with self._lock:
            self._slots.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._slots)

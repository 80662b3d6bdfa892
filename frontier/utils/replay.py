"""Replay serialization — records round-by-round results for later inspection."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from frontier.actions.base import Action, PerformOutcome
    from frontier.core.world_state import WorldState

logger = logging.getLogger(__name__)


class ReplayRecorder:
    """Accumulates round results and flushes them to a JSON replay file."""

    __slots__ = ("_path", "_rounds", "_seed")

    def __init__(self, path: str | Path, seed: int) -> None:
        self._path = Path(path)
        self._seed = seed
        self._rounds: list[dict[str, Any]] = []

    @property
    def rounds(self) -> list[dict[str, Any]]:
        return self._rounds

    def record_round(
        self,
        turn: int,
        executed: list[Action],
        outcome: PerformOutcome,
        world: WorldState,
    ) -> None:
        participants = [
            {
                "id": c.id,
                "name": c.name,
                "pos": [c.pos.row, c.pos.col],
                "health": c.stats.health,
                "state": c.state.name,
            }
            for c in world.participants()
        ]
        actions_log = [
            {
                "actor": a.actor_id,
                "kind": a.kind.name,
                "text": a.text,
                "initiative": a.initiative,
                "timestamp": a.timestamp,
            }
            for a in executed
        ]

        self._rounds.append(
            {
                "turn": turn,
                "actions": actions_log,
                "log": list(outcome.log),
                "faults": list(outcome.faults),
                "participants": participants,
            }
        )

    def flush(self) -> None:
        """Write accumulated data to disk."""
        replay = {
            "version": "1.0",
            "seed": self._seed,
            "total_rounds": len(self._rounds),
            "rounds": self._rounds,
        }
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(replay, indent=2), encoding="utf-8")
        logger.info("Replay saved to %s (%d rounds)", self._path, len(self._rounds))

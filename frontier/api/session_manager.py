"""SessionManager — owns one Game and serializes every access to it.

Command submissions and round resolution all run behind a single lock,
so a round is always resolved in one uninterrupted sequential pass and
no submission can observe a half-resolved world.
"""

from __future__ import annotations

import itertools
import logging
import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from frontier.engine.game import Game
from frontier.systems.rng import DeterministicRNG
from frontier.systems.setup import build_world, spawn_character
from frontier.utils.event_log import EventLog, RoundEvent, categorize

if TYPE_CHECKING:
    from frontier.actions.base import Action
    from frontier.config import GameConfig
    from frontier.core.messaging import Message
    from frontier.core.models import Character
    from frontier.utils.replay import ReplayRecorder

logger = logging.getLogger(__name__)


class RoundNotReadyError(RuntimeError):
    """Resolution was requested while some playing participant has not acted."""


class RosterError(ValueError):
    """A participant could not be added."""


@dataclass(slots=True)
class RoundResult:
    turn: int
    log: list[str] = field(default_factory=list)
    messages: list[Message] = field(default_factory=list)
    faults: list[str] = field(default_factory=list)
    game_over: bool = False


@dataclass(slots=True)
class CommandResult:
    messages: list[Message]
    round: RoundResult | None = None


@dataclass(slots=True)
class SessionState:
    """Point-in-time copy of the roster, safe to read outside the lock."""

    turn: int
    game_over: bool
    players: list[Character]


class SessionManager:
    """Drives a single game session for the API and the headless CLI."""

    def __init__(self, config: GameConfig, recorder: ReplayRecorder | None = None) -> None:
        self.config = config
        self._recorder = recorder
        self._lock = threading.Lock()
        self._event_log = EventLog(config.event_log_limit)
        self._build()

    def _build(self) -> None:
        self._rng = DeterministicRNG(self.config.world_seed)
        self._world = build_world(self.config)
        self._game = Game(self._world, rng=self._rng)
        self._clock = itertools.count()

    # -- properties --

    @property
    def event_log(self) -> EventLog:
        return self._event_log

    @property
    def game(self) -> Game:
        return self._game

    # -- roster --

    def add_player(self, player_id: str, name: str) -> Character:
        with self._lock:
            world = self._world
            if world.turn_number > 0:
                raise RosterError("Players can only join before the first round")
            if world.get(player_id) is not None:
                raise RosterError(f"Player id {player_id!r} is already taken")
            if len(world.participants()) >= self.config.max_players:
                raise RosterError(f"The game is full ({self.config.max_players} players)")
            character = spawn_character(world, self.config, self._rng, player_id, name)
            return character.copy()

    # -- commands and rounds --

    def submit(self, player_id: str, text: str) -> CommandResult:
        """Route *text*; auto-resolves the round if that made it ready."""
        with self._lock:
            timestamp = next(self._clock)
            messages = self._game.submit_text(player_id, text, timestamp)
            result = CommandResult(messages=messages)
            if self.config.auto_resolve and self._round_can_resolve():
                result.round = self._resolve_locked()
            return result

    def resolve(self) -> RoundResult:
        with self._lock:
            if not self._round_can_resolve():
                raise RoundNotReadyError("Not every playing participant has a pending action")
            return self._resolve_locked()

    def round_status(self) -> tuple[int, bool, list[Action]]:
        with self._lock:
            return (
                self._world.turn_number,
                self._game.is_round_ready(),
                self._game.ordered_pending_actions(),
            )

    def state(self) -> SessionState:
        with self._lock:
            return SessionState(
                turn=self._world.turn_number,
                game_over=self._game.is_game_over(),
                players=[c.copy() for c in self._world.participants()],
            )

    def reset(self) -> None:
        with self._lock:
            self._event_log.clear()
            self._build()
        logger.info("Session reset.")

    # -- internals --

    def _round_can_resolve(self) -> bool:
        # an empty roster is vacuously ready, but there is nothing to resolve
        return bool(self._world.playing_participants()) and self._game.is_round_ready()

    def _resolve_locked(self) -> RoundResult:
        turn = self._world.turn_number
        outcome = self._game.resolve_round()
        executed = self._game.turn_engine.last_executed

        self._event_log.append_many([
            RoundEvent(turn=turn, category=categorize(line), message=line)
            for line in outcome.log
        ])
        if self._recorder is not None:
            self._recorder.record_round(turn, executed, outcome, self._world)

        game_over = self._game.is_game_over()
        if game_over:
            logger.info("Game over after turn %d", turn)
        return RoundResult(
            turn=turn,
            log=list(outcome.log),
            messages=list(outcome.messages),
            faults=list(outcome.faults),
            game_over=game_over,
        )

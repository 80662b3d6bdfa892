"""Action variants, results, and the component contract."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar, Generic, TypeVar

from frontier.core.enums import ActionKind

if TYPE_CHECKING:
    from frontier.core.grid import Cell
    from frontier.core.messaging import Message
    from frontier.core.models import Character
    from frontier.core.world_state import WorldState


class ActionParseError(ValueError):
    """Command text could not be turned into a typed action."""


class ContractViolation(RuntimeError):
    """An invariant the caller guarantees was broken (not a player error)."""


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True, kw_only=True)
class Action:
    """A parsed intent waiting in a pending slot.

    ``actor_id`` refers to the actor; the action never owns it.
    ``initiative`` is the actor's agility at parse time and, together
    with ``timestamp``, fixes the execution order within a round.
    """

    kind: ClassVar[ActionKind]

    actor_id: str
    timestamp: int
    initiative: int = 0
    text: str = ""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(actor={self.actor_id}, t={self.timestamp}, text={self.text!r})"


@dataclass(frozen=True, slots=True, kw_only=True)
class MoveAction(Action):
    kind: ClassVar[ActionKind] = ActionKind.MOVE

    # relative offsets, each in {-1, 0, 1}
    offset_row: int = 0
    offset_col: int = 0

    def __post_init__(self) -> None:
        if {self.offset_row, self.offset_col} - {-1, 0, 1}:
            raise ValueError(f"Move offsets must be -1, 0 or 1: ({self.offset_row}, {self.offset_col})")
        if abs(self.offset_row) + abs(self.offset_col) != 1:
            raise ValueError("Move must change exactly one axis")


@dataclass(frozen=True, slots=True, kw_only=True)
class PassAction(Action):
    kind: ClassVar[ActionKind] = ActionKind.PASS


@dataclass(frozen=True, slots=True, kw_only=True)
class RestAction(Action):
    kind: ClassVar[ActionKind] = ActionKind.REST


@dataclass(frozen=True, slots=True, kw_only=True)
class IngestAction(Action):
    kind: ClassVar[ActionKind] = ActionKind.INGEST

    item_name: str


@dataclass(frozen=True, slots=True, kw_only=True)
class AttackAction(Action):
    kind: ClassVar[ActionKind] = ActionKind.ATTACK

    target_name: str
    weapon_name: str
    times: int


@dataclass(frozen=True, slots=True, kw_only=True)
class ItemTransaction(Action):
    """Pickup or Drop. ``amount`` of None means the whole available stack."""

    kind: ClassVar[ActionKind]

    item_name: str
    amount: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class PickupAction(ItemTransaction):
    kind: ClassVar[ActionKind] = ActionKind.PICKUP


@dataclass(frozen=True, slots=True, kw_only=True)
class DropAction(ItemTransaction):
    kind: ClassVar[ActionKind] = ActionKind.DROP


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ValidationResult:
    valid: bool
    reason: str | None = None

    @classmethod
    def ok(cls) -> ValidationResult:
        return cls(True)

    @classmethod
    def reject(cls, reason: str) -> ValidationResult:
        return cls(False, reason)

    def __bool__(self) -> bool:
        return self.valid


@dataclass(slots=True)
class PerformOutcome:
    """Log lines and messages accumulated over one round.

    Components append to the instance they are handed; nothing replaces it.
    """

    log: list[str] = field(default_factory=list)
    messages: list[Message] = field(default_factory=list)
    faults: list[str] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Component contract
# ---------------------------------------------------------------------------

A = TypeVar("A", bound=Action)


class ActionComponent(ABC, Generic[A]):
    """Parse / validate / perform bundle for one action kind.

    Components are stateless with respect to the world: they receive the
    ``WorldState`` on every call and keep no reference to it.
    """

    kind: ClassVar[ActionKind]
    pattern: ClassVar[re.Pattern[str]]

    def matches(self, text: str) -> bool:
        return self.pattern.match(text.strip()) is not None

    def _match(self, text: str) -> re.Match[str]:
        m = self.pattern.match(text.strip())
        if m is None:
            raise ActionParseError(f"Unable to parse {self.kind.label} action: {text!r}")
        return m

    @abstractmethod
    def parse(self, text: str, actor: Character, timestamp: int) -> A:
        """Rebuild a typed action from text known to match ``pattern``."""

    @abstractmethod
    def validate(self, action: A, world: WorldState) -> ValidationResult:
        """Read-only precondition check."""

    @abstractmethod
    def perform(self, action: A, world: WorldState, outcome: PerformOutcome) -> PerformOutcome:
        """Apply a validated action and append its output to *outcome*."""


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def require_actor(action: Action, world: WorldState) -> Character:
    actor = world.get(action.actor_id)
    if actor is None:
        raise ContractViolation(f"Actor {action.actor_id!r} of {action!r} is not in the world")
    return actor


def require_room(actor: Character, world: WorldState) -> Cell:
    if not world.grid.is_room(actor.pos):
        raise ContractViolation(f"{actor.name} is not in a room at {actor.pos}")
    return world.grid.cell_at(actor.pos)


def parse_amount(raw: str | None, text: str) -> int | None:
    """Parse an optional digit group, failing loudly instead of coercing."""
    if raw is None:
        return None
    try:
        return int(raw, 10)
    except ValueError:
        raise ActionParseError(f"Could not parse count in {text!r}") from None


def alternation(names: list[str]) -> str:
    """Regex alternation, longest names first so prefixes cannot shadow them."""
    return "|".join(re.escape(n) for n in sorted(names, key=len, reverse=True))

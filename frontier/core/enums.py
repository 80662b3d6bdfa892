"""Enumerations used throughout the engine."""

from __future__ import annotations

from enum import IntEnum, unique


@unique
class ActionKind(IntEnum):
    """The closed set of intents a character can queue for a round."""

    MOVE = 0
    PASS = 1
    REST = 2
    INGEST = 3
    ATTACK = 4
    PICKUP = 5
    DROP = 6

    @property
    def label(self) -> str:
        return self.name.capitalize()


@unique
class CellKind(IntEnum):
    """Map cell classification."""

    ROOM = 0
    BARRIER = 1


@unique
class MessageKind(IntEnum):
    """Outbound message channels."""

    GAME = 0
    TALK = 1
    SHOUT = 2
    WHISPER = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()


@unique
class PlayerState(IntEnum):
    """In-game status of a participant."""

    PLAYING = 0
    DEAD = 1
    ESCAPED = 2


@unique
class Allegiance(IntEnum):
    """Faction tag; participants of one allegiance understand each other."""

    NONE = 0
    EASTERN = 1
    WESTERN = 2


@unique
class Direction(IntEnum):
    """Cardinal movement directions."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3


@unique
class Domain(IntEnum):
    """RNG domains for deterministic randomness isolation."""

    INGEST = 0
    SPAWN = 1

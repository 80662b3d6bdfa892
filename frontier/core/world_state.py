"""Mutable authoritative world state — only mutated by the TurnEngine."""

from __future__ import annotations

from frontier.core.enums import Direction
from frontier.core.grid import Grid
from frontier.core.models import DIRECTION_OFFSETS, Character, Position


def is_approximate_substring(fragment: str, name: str) -> bool:
    """Case-insensitive substring match used to address characters by name."""
    fragment = fragment.strip().lower()
    return bool(fragment) and fragment in name.lower()


class WorldState:
    """The single source of truth for a running game."""

    __slots__ = ("seed", "grid", "characters", "turn_number")

    def __init__(self, seed: int, grid: Grid) -> None:
        self.seed: int = seed
        self.grid: Grid = grid
        self.characters: dict[str, Character] = {}
        self.turn_number: int = 0

    # -- roster --

    def add_character(self, character: Character) -> None:
        if character.id in self.characters:
            raise ValueError(f"Duplicate character id: {character.id}")
        if not self.grid.is_room(character.pos):
            raise ValueError(f"{character.name} cannot be placed outside a room at {character.pos}")
        self.characters[character.id] = character

    def get(self, character_id: str) -> Character | None:
        return self.characters.get(character_id)

    def participants(self) -> list[Character]:
        return [c for c in self.characters.values() if c.player_controlled]

    def playing_participants(self) -> list[Character]:
        return [c for c in self.participants() if c.is_playing]

    @staticmethod
    def is_playing(character: Character) -> bool:
        return character.player_controlled and character.is_playing

    def find_playing_by_approximate_name(
        self,
        fragment: str,
        exclude: str | None = None,
    ) -> list[Character]:
        """Every playing participant whose name contains *fragment*."""
        return [
            c for c in self.playing_participants()
            if c.id != exclude and is_approximate_substring(fragment, c.name)
        ]

    def characters_at(self, pos: Position) -> list[Character]:
        return [c for c in self.characters.values() if c.pos == pos and not c.is_dead]

    # -- mutation --

    def move_character(self, character_id: str, new_pos: Position) -> None:
        character = self.characters.get(character_id)
        if character is None:
            return
        character.pos = new_pos

    # -- description --

    def describe_room(self, pos: Position, viewer_id: str | None = None) -> str:
        cell = self.grid.cell_at(pos)
        parts = ["You are in a room with a camp." if cell.has_camp else "You are in a room."]
        if cell.is_exit:
            parts.append("A way out of the territory is here.")
        if cell.items:
            listing = ", ".join(f"{s.amount} {s.item.name}(s)" for s in cell.items)
            parts.append(f"You see: {listing}.")
        others = [c.name for c in self.characters_at(pos) if c.id != viewer_id]
        if others:
            parts.append(f"Also here: {', '.join(others)}.")
        exits = [
            d.name.lower() for d in Direction
            if self.grid.is_room(pos + DIRECTION_OFFSETS[d])
        ]
        parts.append(f"Exits: {', '.join(exits)}." if exits else "There are no exits.")
        return " ".join(parts)

"""Core data models and world representation."""

from frontier.core.enums import ActionKind, Allegiance, CellKind, Direction, Domain, MessageKind, PlayerState
from frontier.core.models import Character, Effects, Meter, Position, Stats
from frontier.core.grid import Cell, Grid
from frontier.core.items import Inventory, ItemStack, ItemTemplate
from frontier.core.messaging import Message
from frontier.core.world_state import WorldState

__all__ = [
    "ActionKind",
    "Allegiance",
    "Cell",
    "CellKind",
    "Character",
    "Direction",
    "Domain",
    "Effects",
    "Grid",
    "Inventory",
    "ItemStack",
    "ItemTemplate",
    "Message",
    "MessageKind",
    "Meter",
    "PlayerState",
    "Position",
    "Stats",
    "WorldState",
]

"""Engine: command routing, pending actions, and round resolution."""

from frontier.engine.command_router import CommandRouter
from frontier.engine.communication import CommunicationHandler
from frontier.engine.game import Game, UnknownPlayerError
from frontier.engine.pending import PendingActions
from frontier.engine.turn_engine import TurnEngine

__all__ = [
    "CommandRouter",
    "CommunicationHandler",
    "Game",
    "PendingActions",
    "TurnEngine",
    "UnknownPlayerError",
]

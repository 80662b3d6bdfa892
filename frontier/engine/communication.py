"""Talk / shout / whisper directives.

    /t <name> <text>    talk to one participant in the same room
    /s <text>           shout to every other playing participant
    /w <name> <text>    whisper to one participant anywhere

Participants of a different allegiance hear a garbled rendition.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from frontier.core.enums import Allegiance, MessageKind
from frontier.core.messaging import build_message, game_message

if TYPE_CHECKING:
    from frontier.core.messaging import Message
    from frontier.core.models import Character
    from frontier.core.world_state import WorldState

logger = logging.getLogger(__name__)

DIRECTIVE_PREFIX = "/"

DIRECTIVES: dict[str, MessageKind] = {
    "t": MessageKind.TALK,
    "talk": MessageKind.TALK,
    "s": MessageKind.SHOUT,
    "shout": MessageKind.SHOUT,
    "w": MessageKind.WHISPER,
    "whisper": MessageKind.WHISPER,
}


def is_communication(text: str) -> bool:
    return text.strip().startswith(DIRECTIVE_PREFIX)


def understands(speaker: Character, listener: Character) -> bool:
    if Allegiance.NONE in (speaker.allegiance, listener.allegiance):
        return True
    return speaker.allegiance == listener.allegiance


def garble(text: str) -> str:
    return "".join("~" if ch.isalnum() else ch for ch in text)


def _pick_one(candidates: list[Character], fragment: str) -> Character | None:
    if len(candidates) == 1:
        return candidates[0]
    exact = [c for c in candidates if c.name.lower() == fragment.lower()]
    return exact[0] if len(exact) == 1 else None


class CommunicationHandler:
    """Routes a directive's body to its recipients as Messages."""

    __slots__ = ()

    def handle(self, sender: Character, text: str, world: WorldState) -> list[Message]:
        directive, _, rest = text.strip()[len(DIRECTIVE_PREFIX):].partition(" ")
        kind = DIRECTIVES.get(directive.lower())
        if kind is None:
            return [game_message(f"Unknown communication: {DIRECTIVE_PREFIX}{directive}", sender.id)]
        if not world.is_playing(sender):
            return [game_message("You can no longer communicate!", sender.id)]

        rest = rest.strip()
        if kind == MessageKind.SHOUT:
            if not rest:
                return [game_message("Shout what?", sender.id)]
            recipients = [c for c in world.playing_participants() if c.id != sender.id]
            return self._deliver(sender, recipients, rest, kind)

        name, _, body = rest.partition(" ")
        body = body.strip()
        verb = kind.label.lower()
        if not name:
            return [game_message(f"{kind.label} to whom?", sender.id)]
        if not body:
            return [game_message(f"What do you want to {verb}?", sender.id)]

        candidates = world.find_playing_by_approximate_name(name, exclude=sender.id)
        if kind == MessageKind.TALK:
            candidates = [c for c in candidates if c.pos == sender.pos]
        if not candidates:
            if kind == MessageKind.TALK:
                return [game_message(f"No one named '{name}' is here to talk to!", sender.id)]
            return [game_message(f"No player with name '{name}'!", sender.id)]

        recipient = _pick_one(candidates, name)
        if recipient is None:
            return [game_message(f"Name '{name}' matches more than one player!", sender.id)]
        return self._deliver(sender, [recipient], body, kind)

    @staticmethod
    def _deliver(
        sender: Character,
        recipients: list[Character],
        body: str,
        kind: MessageKind,
    ) -> list[Message]:
        if not recipients:
            return [game_message(f"No one hears your {kind.label.lower()}.", sender.id)]

        clear = [r.id for r in recipients if understands(sender, r)]
        foreign = [r.id for r in recipients if not understands(sender, r)]
        messages: list[Message] = []
        if clear:
            messages.append(build_message(body, clear, kind, sender=sender.id))
        if foreign:
            messages.append(build_message(garble(body), foreign, kind, sender=sender.id))
        logger.debug("%s %s to %d recipient(s)", sender.name, kind.label.lower(), len(recipients))
        return messages

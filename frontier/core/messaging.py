"""Outbound messages produced by the router and by action components."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from frontier.core.enums import MessageKind


@dataclass(frozen=True, slots=True)
class Message:
    """Text addressed to one or more participants (by character id)."""

    content: str
    recipients: tuple[str, ...]
    kind: MessageKind = MessageKind.GAME
    sender: str | None = None       # character id; None for game notices

    def __repr__(self) -> str:
        return f"Message({self.kind.label} -> {list(self.recipients)}: {self.content!r})"


def build_message(
    content: str,
    recipients: Iterable[str],
    kind: MessageKind,
    sender: str | None = None,
) -> Message:
    return Message(content=content, recipients=tuple(recipients), kind=kind, sender=sender)


def game_message(content: str, *recipients: str) -> Message:
    return Message(content=content, recipients=recipients, kind=MessageKind.GAME)

"""ActionRegistry — text → component resolution in declared order."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from frontier.actions.combat import AttackComponent
from frontier.actions.idle import PassComponent, RestComponent
from frontier.actions.ingest import IngestComponent
from frontier.actions.move import MoveComponent
from frontier.actions.transfer import DropComponent, PickupComponent
from frontier.core.enums import ActionKind

if TYPE_CHECKING:
    from frontier.actions.base import Action, ActionComponent
    from frontier.core.models import Character
    from frontier.systems.rng import DeterministicRNG


class ActionRegistry:
    """Ordered set of components, exactly one per ``ActionKind``.

    Text is tested against each component's pattern in declaration order
    and the first match wins; the order is the documented tie-break for
    any patterns that might overlap.
    """

    __slots__ = ("_components", "_by_kind")

    def __init__(self, components: Iterable[ActionComponent]) -> None:
        self._components: tuple[ActionComponent, ...] = tuple(components)
        self._by_kind: dict[ActionKind, ActionComponent] = {}
        for component in self._components:
            if component.kind in self._by_kind:
                raise ValueError(f"Duplicate component for {component.kind.name}")
            self._by_kind[component.kind] = component

        missing = [k.name for k in ActionKind if k not in self._by_kind]
        if missing:
            raise ValueError(f"No component registered for: {', '.join(missing)}")

    @property
    def components(self) -> tuple[ActionComponent, ...]:
        return self._components

    def component_for_text(self, text: str) -> ActionComponent | None:
        for component in self._components:
            if component.matches(text):
                return component
        return None

    def is_action(self, text: str) -> bool:
        return self.component_for_text(text) is not None

    def component_for(self, kind: ActionKind) -> ActionComponent:
        return self._by_kind[kind]

    def parse(self, text: str, actor: Character, timestamp: int) -> Action | None:
        """Parse *text* with the first matching component, or None if nothing matches.

        Raises ``ActionParseError`` if the matching component rejects the text.
        """
        component = self.component_for_text(text)
        if component is None:
            return None
        return component.parse(text.strip(), actor, timestamp)


def default_registry(rng: DeterministicRNG) -> ActionRegistry:
    """The standard registry: Move, Pass, Rest, Ingest, Attack, Pickup, Drop."""
    return ActionRegistry([
        MoveComponent(),
        PassComponent(),
        RestComponent(),
        IngestComponent(rng),
        AttackComponent(),
        PickupComponent(),
        DropComponent(),
    ])

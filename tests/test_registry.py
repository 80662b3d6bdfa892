"""Tests for the ActionRegistry and component parsing.

Covers:
- Exactly one component per action kind, verified at construction
- First-match text classification in declaration order
- Parsed actions carry actor, timestamp, initiative and original text
- Parse failures surface as ActionParseError
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from frontier.actions.base import ActionParseError, AttackAction, MoveAction, PickupAction
from frontier.actions.combat import AttackComponent
from frontier.actions.idle import PassComponent, RestComponent
from frontier.actions.ingest import IngestComponent
from frontier.actions.move import MoveComponent
from frontier.actions.registry import ActionRegistry, default_registry
from frontier.actions.transfer import DropComponent, PickupComponent
from frontier.core.enums import ActionKind
from frontier.core.items import Inventory
from frontier.core.models import Character, Position, Stats
from frontier.systems.rng import DeterministicRNG


def _make_character(cid: str = "p1", name: str = "Alice", agility: int = 7) -> Character:
    return Character(
        id=cid,
        name=name,
        pos=Position(1, 1),
        inventory=Inventory(),
        stats=Stats(agility=agility),
    )


def _registry() -> ActionRegistry:
    return default_registry(DeterministicRNG(42))


class TestRegistryConstruction:

    def test_default_registry_covers_every_kind(self):
        reg = _registry()
        assert {c.kind for c in reg.components} == set(ActionKind)

    def test_declaration_order_is_preserved(self):
        reg = _registry()
        assert [c.kind for c in reg.components] == [
            ActionKind.MOVE, ActionKind.PASS, ActionKind.REST, ActionKind.INGEST,
            ActionKind.ATTACK, ActionKind.PICKUP, ActionKind.DROP,
        ]

    def test_duplicate_kind_rejected(self):
        with pytest.raises(ValueError, match="Duplicate"):
            ActionRegistry([
                MoveComponent(), MoveComponent(), PassComponent(), RestComponent(),
                IngestComponent(DeterministicRNG(1)), AttackComponent(),
                PickupComponent(), DropComponent(),
            ])

    def test_missing_kind_rejected(self):
        with pytest.raises(ValueError, match="DROP"):
            ActionRegistry([
                MoveComponent(), PassComponent(), RestComponent(),
                IngestComponent(DeterministicRNG(1)), AttackComponent(), PickupComponent(),
            ])

    def test_component_for_kind(self):
        reg = _registry()
        assert isinstance(reg.component_for(ActionKind.ATTACK), AttackComponent)


class TestTextClassification:

    @pytest.mark.parametrize("text,kind", [
        ("go north", ActionKind.MOVE),
        ("GO West", ActionKind.MOVE),
        ("pass", ActionKind.PASS),
        ("rest", ActionKind.REST),
        ("eat Apple", ActionKind.INGEST),
        ("drink whiskey", ActionKind.INGEST),
        ("attack Bob Knife 2", ActionKind.ATTACK),
        ("pick up 2 Apple", ActionKind.PICKUP),
        ("grab Bullet", ActionKind.PICKUP),
        ("drop 3 Bullet", ActionKind.DROP),
        ("drop Map", ActionKind.DROP),
        ("  pass  ", ActionKind.PASS),
    ])
    def test_matches_expected_component(self, text, kind):
        component = _registry().component_for_text(text)
        assert component is not None
        assert component.kind == kind

    @pytest.mark.parametrize("text", [
        "foobarbaz", "go up", "/s hello", "eat Knife", "attack Bob Spoon 1", "", "passing",
    ])
    def test_non_actions_match_nothing(self, text):
        reg = _registry()
        assert reg.component_for_text(text) is None
        assert not reg.is_action(text)

    def test_parse_returns_none_for_unmatched_text(self):
        assert _registry().parse("foobarbaz", _make_character(), 0) is None


class TestParsing:

    def test_move_offsets_are_unit_steps(self):
        reg = _registry()
        actor = _make_character()
        offsets = {
            word: reg.parse(f"go {word}", actor, 0)
            for word in ("north", "south", "east", "west")
        }
        assert (offsets["north"].offset_row, offsets["north"].offset_col) == (-1, 0)
        assert (offsets["south"].offset_row, offsets["south"].offset_col) == (1, 0)
        assert (offsets["east"].offset_row, offsets["east"].offset_col) == (0, 1)
        assert (offsets["west"].offset_row, offsets["west"].offset_col) == (0, -1)

    def test_initiative_is_agility_at_parse_time(self):
        actor = _make_character(agility=13)
        action = _registry().parse("pass", actor, 5)
        actor.stats.agility = 1
        assert action.initiative == 13
        assert action.timestamp == 5
        assert action.actor_id == "p1"
        assert action.text == "pass"

    def test_attack_fields(self):
        action = _registry().parse("attack bob knife 3", _make_character(), 0)
        assert isinstance(action, AttackAction)
        assert action.target_name == "bob"
        assert action.weapon_name == "Knife"
        assert action.times == 3

    def test_pickup_without_count_means_whole_stack(self):
        action = _registry().parse("get apple", _make_character(), 0)
        assert isinstance(action, PickupAction)
        assert action.item_name == "Apple"
        assert action.amount is None

    def test_pickup_with_count(self):
        action = _registry().parse("pick up 4 Bullet", _make_character(), 0)
        assert action.amount == 4

    def test_component_parse_of_foreign_text_raises(self):
        with pytest.raises(ActionParseError):
            MoveComponent().parse("pass", _make_character(), 0)

    def test_move_action_rejects_diagonal_offsets(self):
        with pytest.raises(ValueError):
            MoveAction(actor_id="p1", timestamp=0, offset_row=1, offset_col=1)
        with pytest.raises(ValueError):
            MoveAction(actor_id="p1", timestamp=0, offset_row=0, offset_col=0)

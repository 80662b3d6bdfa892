"""Tests for Move, Pass and Rest — positions, barriers, camps, exits."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from tests.helpers.arena import Arena, texts_for
from frontier.core.enums import PlayerState
from frontier.core.models import Position


class TestMove:

    def test_valid_move_adds_offset(self):
        arena = Arena()
        arena.add_player("p1", "Alice", pos=(1, 1))
        replies = arena.submit("p1", "go east")
        assert texts_for(replies, "p1") == ["Next action: Move (go east)"]

        outcome = arena.resolve()
        assert arena.char("p1").pos == Position(1, 2)
        assert "You moved!" in texts_for(outcome.messages, "p1")
        assert "Alice moved from (1, 1) to (1, 2)" in outcome.log

    def test_every_direction(self):
        arena = Arena()
        arena.add_player("p1", "Alice", pos=(2, 4))
        for text, expected in [
            ("go north", (1, 4)),
            ("go south", (2, 4)),
            ("go west", (2, 3)),
            ("go east", (2, 4)),
        ]:
            arena.submit("p1", text)
            arena.resolve()
            assert arena.char("p1").pos == Position(*expected), text

    def test_barrier_rejected_and_pending_unchanged(self):
        arena = Arena()
        arena.add_player("p1", "Alice", pos=(1, 1))
        replies = arena.submit("p1", "go north")
        assert texts_for(replies, "p1") == ["Invalid action: Desired location is not a room!"]
        assert not arena.game.pending.has("p1")

    def test_out_of_bounds_rejected(self):
        arena = Arena(rows=("S.",))
        arena.add_player("p1", "Alice")
        replies = arena.submit("p1", "go north")
        assert texts_for(replies, "p1") == ["Invalid action: Out of bounds movement!"]

    def test_rejection_keeps_earlier_pending_action(self):
        arena = Arena()
        arena.add_player("p1", "Alice", pos=(1, 1))
        arena.submit("p1", "go east")
        arena.submit("p1", "go north")
        pending = arena.game.pending.get("p1")
        assert pending is not None
        assert pending.text == "go east"

    def test_resubmission_replaces_pending_action(self):
        arena = Arena()
        arena.add_player("p1", "Alice", pos=(1, 1))
        arena.submit("p1", "go east")
        arena.submit("p1", "go south")
        arena.resolve()
        assert arena.char("p1").pos == Position(2, 1)

    def test_moving_into_exit_escapes(self):
        arena = Arena()
        arena.add_player("p1", "Alice", pos=(3, 5))
        arena.submit("p1", "go east")
        outcome = arena.resolve()
        alice = arena.char("p1")
        assert alice.has_escaped
        assert alice.state == PlayerState.ESCAPED
        assert "You escaped!" in texts_for(outcome.messages, "p1")
        assert "Alice escaped" in outcome.log

    def test_map_holder_reveals_visited_rooms(self):
        arena = Arena()
        arena.add_player("p1", "Alice", pos=(1, 1), items=[("Map", 1)])
        arena.submit("p1", "go east")
        arena.resolve()
        assert Position(1, 2) in arena.char("p1").revealed

    def test_room_description_follows_move(self):
        arena = Arena()
        arena.add_player("p1", "Alice", pos=(1, 1))
        arena.put_items((1, 2), ("Apple", 2))
        arena.submit("p1", "go east")
        outcome = arena.resolve()
        description = texts_for(outcome.messages, "p1")[1]
        assert "2 Apple(s)" in description


class TestPass:

    def test_pass_changes_nothing(self):
        arena = Arena()
        alice = arena.add_player("p1", "Alice", pos=(1, 3), items=[("Knife", 1), ("Bullet", 4)])
        stats_before = alice.stats.copy()
        inventory_before = [(s.item.name, s.amount) for s in alice.inventory.stacks]

        replies = arena.submit("p1", "pass")
        assert texts_for(replies, "p1") == ["Next action: Pass (pass)"]
        outcome = arena.resolve()

        assert alice.pos == Position(1, 3)
        assert alice.stats == stats_before
        assert [(s.item.name, s.amount) for s in alice.inventory.stacks] == inventory_before
        assert texts_for(outcome.messages, "p1") == ["You performed no action."]


class TestRest:

    def test_rest_requires_camp(self):
        arena = Arena()
        arena.add_player("p1", "Alice", pos=(1, 1))
        replies = arena.submit("p1", "rest")
        assert texts_for(replies, "p1") == ["Invalid action: Cannot rest without camp setup!"]

    def test_rest_at_camp_clears_exhaustion(self):
        arena = Arena()
        alice = arena.add_player("p1", "Alice", pos=(2, 5))
        alice.effects.exhaustion.current = 2
        alice.effects.exhaustion.is_active = True

        arena.submit("p1", "rest")
        outcome = arena.resolve()

        assert alice.effects.exhaustion.current == alice.effects.exhaustion.maximum
        assert not alice.effects.exhaustion.is_active
        assert texts_for(outcome.messages, "p1") == [
            "You rested at the camp and no longer feel exhausted."
        ]
        assert "Alice rested" in outcome.log

    def test_rest_when_not_exhausted(self):
        arena = Arena()
        arena.add_player("p1", "Alice", pos=(2, 5))
        arena.submit("p1", "rest")
        outcome = arena.resolve()
        assert texts_for(outcome.messages, "p1") == ["You rested at the camp."]

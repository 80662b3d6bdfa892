"""Tests for Pickup and Drop — room/inventory bookkeeping and capacity rules."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from tests.helpers.arena import Arena, texts_for


class TestPickup:

    def test_pickup_then_drop_restores_room(self):
        arena = Arena()
        arena.add_player("p1", "Alice", pos=(1, 1))
        arena.put_items((1, 1), ("Apple", 3))

        replies = arena.submit("p1", "pick up 2 Apple")
        assert texts_for(replies, "p1") == ["Next action: Pickup (pick up 2 Apple)"]
        outcome = arena.resolve()
        assert arena.room_count((1, 1), "Apple") == 1
        assert arena.char("p1").inventory.count("Apple") == 2
        assert "You picked up 2 Apple(s)." in texts_for(outcome.messages, "p1")
        assert "After pickup: room (1, 1) has items: [1 Apple]" in outcome.log

        arena.submit("p1", "drop 2 Apple")
        outcome = arena.resolve()
        assert arena.room_count((1, 1), "Apple") == 3
        assert not arena.char("p1").inventory.has("Apple")
        assert "You dropped 2 Apple(s)." in texts_for(outcome.messages, "p1")

    def test_pickup_without_count_takes_everything(self):
        arena = Arena()
        arena.add_player("p1", "Alice", pos=(1, 1))
        arena.put_items((1, 1), ("Apple", 3), ("Bullet", 5))
        arena.submit("p1", "get Apple")
        arena.resolve()
        assert arena.room_count((1, 1), "Apple") == 0
        assert arena.room_count((1, 1), "Bullet") == 5
        assert arena.char("p1").inventory.count("Apple") == 3

    def test_pickup_merges_into_held_stack(self):
        arena = Arena()
        alice = arena.add_player("p1", "Alice", pos=(1, 1), items=[("Bullet", 6)])
        arena.put_items((1, 1), ("Bullet", 10))
        arena.submit("p1", "grab 4 Bullet")
        arena.resolve()
        assert alice.inventory.count("Bullet") == 10
        assert alice.inventory.used_slots == 1

    def test_item_not_in_room(self):
        arena = Arena()
        arena.add_player("p1", "Alice", pos=(1, 1))
        replies = arena.submit("p1", "get Bullet")
        assert texts_for(replies, "p1") == ["Invalid action: Bullet is not in the room!"]

    def test_more_than_available(self):
        arena = Arena()
        arena.add_player("p1", "Alice", pos=(1, 1))
        arena.put_items((1, 1), ("Apple", 3))
        replies = arena.submit("p1", "pick up 5 Apple")
        assert texts_for(replies, "p1") == ["Invalid action: There is only 3 Apple(s) in the room!"]

    def test_zero_amount(self):
        arena = Arena()
        arena.add_player("p1", "Alice", pos=(1, 1))
        arena.put_items((1, 1), ("Apple", 3))
        replies = arena.submit("p1", "pick up 0 Apple")
        assert texts_for(replies, "p1") == ["Invalid action: Transaction amount must be positive!"]

    def test_inventory_full(self):
        arena = Arena(inventory_slots=1)
        arena.add_player("p1", "Alice", pos=(1, 1), items=[("Knife", 1)])
        arena.put_items((1, 1), ("Apple", 3))
        replies = arena.submit("p1", "get Apple")
        assert texts_for(replies, "p1") == ["Invalid action: Your inventory is full!"]

    def test_held_stack_full(self):
        arena = Arena()
        arena.add_player("p1", "Alice", pos=(1, 1), items=[("Map", 1)])
        arena.put_items((1, 1), ("Map", 1))
        replies = arena.submit("p1", "get Map")
        assert texts_for(replies, "p1") == ["Invalid action: Your current stack of Map is full!"]

    def test_held_stack_would_overflow(self):
        arena = Arena()
        arena.add_player("p1", "Alice", pos=(1, 1), items=[("Apple", 9)])
        arena.put_items((1, 1), ("Apple", 3))
        replies = arena.submit("p1", "get Apple")
        assert texts_for(replies, "p1") == ["Invalid action: You can only hold 10 Apple(s)!"]

    def test_new_stack_cannot_exceed_max_stack(self):
        arena = Arena()
        arena.add_player("p1", "Alice", pos=(1, 1))
        arena.put_items((1, 1), ("Bullet", 50), ("Bullet", 10))
        assert arena.room_count((1, 1), "Bullet") == 60
        replies = arena.submit("p1", "get 60 Bullet")
        assert texts_for(replies, "p1") == ["Invalid action: You can only hold 50 Bullet(s)!"]

    def test_pickup_without_count_takes_first_stack(self):
        arena = Arena()
        arena.add_player("p1", "Alice", pos=(1, 1))
        arena.put_items((1, 1), ("Apple", 15))
        assert [s.amount for s in arena.room((1, 1)).items] == [10, 5]

        replies = arena.submit("p1", "pick up Apple")
        assert texts_for(replies, "p1") == ["Next action: Pickup (pick up Apple)"]
        outcome = arena.resolve()

        assert arena.char("p1").inventory.count("Apple") == 10
        assert arena.room_count((1, 1), "Apple") == 5
        assert "You picked up 10 Apple(s)." in texts_for(outcome.messages, "p1")

    def test_pickup_contested_in_same_round(self):
        arena = Arena()
        arena.add_player("p1", "Alice", pos=(1, 1), agility=20)
        arena.add_player("p2", "Bob", pos=(1, 1), agility=5)
        arena.put_items((1, 1), ("Apple", 3))

        arena.submit("p2", "get Apple")
        arena.submit("p1", "get Apple")
        outcome = arena.resolve()

        assert arena.char("p1").inventory.count("Apple") == 3
        assert not arena.char("p2").inventory.has("Apple")
        assert "Your action could not be performed: Apple is not in the room!" in texts_for(
            outcome.messages, "p2"
        )
        assert outcome.faults == []


class TestDrop:

    def test_drop_whole_stack(self):
        arena = Arena()
        arena.add_player("p1", "Alice", pos=(1, 2), items=[("Bullet", 6)])
        replies = arena.submit("p1", "drop Bullet")
        assert texts_for(replies, "p1") == ["Next action: Drop (drop Bullet)"]
        outcome = arena.resolve()
        assert arena.room_count((1, 2), "Bullet") == 6
        assert not arena.char("p1").inventory.has("Bullet")
        assert "After drop: room (1, 2) has items: [6 Bullet]" in outcome.log

    def test_drop_without_count_drops_first_stack(self):
        arena = Arena(inventory_slots=4)
        alice = arena.add_player("p1", "Alice", pos=(1, 2), items=[("Bullet", 60)])
        assert [s.amount for s in alice.inventory.stacks] == [50, 10]
        arena.submit("p1", "drop Bullet")
        outcome = arena.resolve()
        assert arena.room_count((1, 2), "Bullet") == 50
        assert alice.inventory.count("Bullet") == 10
        assert "You dropped 50 Bullet(s)." in texts_for(outcome.messages, "p1")

    def test_drop_merges_with_room_stack(self):
        arena = Arena()
        arena.add_player("p1", "Alice", pos=(1, 1), items=[("Apple", 2)])
        arena.put_items((1, 1), ("Apple", 3))
        arena.submit("p1", "drop 2 Apple")
        arena.resolve()
        assert arena.room_count((1, 1), "Apple") == 5
        assert len(arena.room((1, 1)).items) == 1

    def test_drop_item_not_held(self):
        arena = Arena()
        arena.add_player("p1", "Alice", pos=(1, 1))
        replies = arena.submit("p1", "drop Knife")
        assert texts_for(replies, "p1") == ["Invalid action: You do not have any Knife to drop!"]

    def test_drop_more_than_held(self):
        arena = Arena()
        arena.add_player("p1", "Alice", pos=(1, 1), items=[("Bullet", 6)])
        replies = arena.submit("p1", "drop 7 Bullet")
        assert texts_for(replies, "p1") == ["Invalid action: You cannot drop more than 6 Bullet!"]

    def test_drop_zero(self):
        arena = Arena()
        arena.add_player("p1", "Alice", pos=(1, 1), items=[("Bullet", 6)])
        replies = arena.submit("p1", "drop 0 Bullet")
        assert texts_for(replies, "p1") == ["Invalid action: Drop count must be positive!"]

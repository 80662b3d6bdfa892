"""Item definitions, stacks, and inventories."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


# ---------------------------------------------------------------------------
# Item templates
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class WeaponProfile:
    """Attack characteristics. Weapons with ``ammunition`` are ranged."""

    damage: int
    range: int = 0
    accuracy: int = 100          # percent of requested strikes that land
    ammunition: str | None = None

    @property
    def is_ranged(self) -> bool:
        return self.ammunition is not None


@dataclass(frozen=True, slots=True)
class IngestibleProfile:
    """What happens to a character that ingests the item."""

    stat_deltas: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))
    cures_poisoning: bool = False
    is_poisoned: bool = False
    is_addictive: bool = False
    gives_immortality: bool = False
    addiction_relief: int = 0
    exhaustion_relief: int = 0
    hunger_relief: int = 0


@dataclass(frozen=True, slots=True)
class ItemTemplate:
    """Immutable blueprint for an item, referenced by ``name``."""

    name: str
    max_stack: int = 1
    weapon: WeaponProfile | None = None
    ingestible: IngestibleProfile | None = None


# ---------------------------------------------------------------------------
# Item registry
# ---------------------------------------------------------------------------

ITEM_REGISTRY: dict[str, ItemTemplate] = {}

UNARMED_WEAPON = "Fist"
MAP_ITEM = "Map"


def _reg(t: ItemTemplate) -> ItemTemplate:
    ITEM_REGISTRY[t.name] = t
    return t


def _deltas(**kwargs: int) -> Mapping[str, int]:
    return MappingProxyType(kwargs)


# ---- Weapons ----
_reg(ItemTemplate("Fist", weapon=WeaponProfile(damage=1)))
_reg(ItemTemplate("Knife", weapon=WeaponProfile(damage=3)))
_reg(ItemTemplate("Axe", weapon=WeaponProfile(damage=5)))
_reg(ItemTemplate("Revolver", weapon=WeaponProfile(damage=10, range=3, accuracy=50, ammunition="Bullet")))
_reg(ItemTemplate("Rifle", weapon=WeaponProfile(damage=15, range=6, accuracy=75, ammunition="Bullet")))

# ---- Ingestibles ----
_reg(ItemTemplate("Apple", max_stack=10, ingestible=IngestibleProfile(
    stat_deltas=_deltas(health=2), hunger_relief=3)))
_reg(ItemTemplate("Jerky", max_stack=10, ingestible=IngestibleProfile(
    stat_deltas=_deltas(health=1, strength=1), hunger_relief=5)))
_reg(ItemTemplate("Coffee", max_stack=5, ingestible=IngestibleProfile(
    stat_deltas=_deltas(agility=1), exhaustion_relief=4)))
_reg(ItemTemplate("Whiskey", max_stack=5, ingestible=IngestibleProfile(
    stat_deltas=_deltas(health=5, agility=-2), is_addictive=True, addiction_relief=5, exhaustion_relief=2)))
_reg(ItemTemplate("Antidote", max_stack=3, ingestible=IngestibleProfile(cures_poisoning=True)))
_reg(ItemTemplate("Mushroom", max_stack=10, ingestible=IngestibleProfile(
    stat_deltas=_deltas(health=-10), is_poisoned=True, hunger_relief=1)))
_reg(ItemTemplate("Elixir", max_stack=1, ingestible=IngestibleProfile(
    stat_deltas=_deltas(health=25), gives_immortality=True)))

# ---- Miscellaneous ----
_reg(ItemTemplate("Bullet", max_stack=50))
_reg(ItemTemplate("Gold", max_stack=100))
_reg(ItemTemplate(MAP_ITEM))


def attack_weapon_names() -> list[str]:
    return [t.name for t in ITEM_REGISTRY.values() if t.weapon is not None]


def ingestible_names() -> list[str]:
    return [t.name for t in ITEM_REGISTRY.values() if t.ingestible is not None]


def item_names() -> list[str]:
    return list(ITEM_REGISTRY)


def item_name_from_text(token: str) -> str | None:
    """Resolve a free-text token to a registered item name (case-insensitive)."""
    lowered = token.strip().lower()
    for name in ITEM_REGISTRY:
        if name.lower() == lowered:
            return name
    return None


# ---------------------------------------------------------------------------
# Stacks
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class ItemStack:
    """A quantity of one item kind, up to ``max_amount``."""

    item: ItemTemplate
    amount: int
    max_amount: int

    @property
    def is_full(self) -> bool:
        return self.amount >= self.max_amount

    @property
    def is_empty(self) -> bool:
        return self.amount <= 0

    def copy(self) -> ItemStack:
        return ItemStack(self.item, self.amount, self.max_amount)

    def __repr__(self) -> str:
        return f"{self.amount} {self.item.name}"


def create_stack(name: str, amount: int, max_amount: int | None = None) -> ItemStack:
    template = ITEM_REGISTRY[name]
    return ItemStack(template, amount, max_amount if max_amount is not None else template.max_stack)


def find_stack(stacks: list[ItemStack], name: str) -> ItemStack | None:
    for stack in stacks:
        if stack.item.name == name:
            return stack
    return None


def remove_empty_stacks(stacks: list[ItemStack]) -> list[ItemStack]:
    return [s for s in stacks if not s.is_empty]


def drain_stacks(stacks: list[ItemStack], name: str, amount: int) -> list[ItemStack]:
    """Take *amount* of *name* from *stacks* (first stacks first), in place.

    Returns the stacks with emptied ones removed. The caller checks that
    enough is available.
    """
    remaining = amount
    for stack in stacks:
        if remaining == 0:
            break
        if stack.item.name != name:
            continue
        taken = min(stack.amount, remaining)
        stack.amount -= taken
        remaining -= taken
    return remove_empty_stacks(stacks)


def count_in(stacks: list[ItemStack], name: str) -> int:
    return sum(s.amount for s in stacks if s.item.name == name)


def merge_stacks(stacks: list[ItemStack]) -> list[ItemStack]:
    """Combine stacks of the same item, filling earlier stacks first.

    Stack order follows first appearance; amounts beyond a stack's
    capacity spill into a fresh stack placed after it.
    """
    totals: dict[str, int] = {}
    capacity: dict[str, int] = {}
    templates: dict[str, ItemTemplate] = {}
    for stack in stacks:
        name = stack.item.name
        totals[name] = totals.get(name, 0) + stack.amount
        capacity.setdefault(name, stack.max_amount)
        templates.setdefault(name, stack.item)

    merged: list[ItemStack] = []
    for name, total in totals.items():
        max_amount = max(capacity[name], 1)
        while total > 0:
            chunk = min(total, max_amount)
            merged.append(ItemStack(templates[name], chunk, max_amount))
            total -= chunk
    return merged


# ---------------------------------------------------------------------------
# Inventory
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Inventory:
    """Mutable stack container with a slot limit."""

    stacks: list[ItemStack] = field(default_factory=list)
    max_slots: int = 8

    @property
    def used_slots(self) -> int:
        return len(self.stacks)

    @property
    def is_full(self) -> bool:
        return self.used_slots >= self.max_slots

    def has(self, name: str) -> bool:
        return find_stack(self.stacks, name) is not None

    def get(self, name: str) -> ItemStack | None:
        return find_stack(self.stacks, name)

    def count(self, name: str) -> int:
        return count_in(self.stacks, name)

    def add(self, stack: ItemStack) -> None:
        """Add *stack* and merge it into any compatible stack."""
        self.stacks.append(stack)
        self.stacks = merge_stacks(self.stacks)

    def remove(self, name: str, amount: int) -> ItemStack:
        """Take *amount* of *name* out of the inventory, first stacks first.

        Raises ``ValueError`` if not enough is held.
        """
        first = self.get(name)
        if first is None:
            raise ValueError(f"No {name} in inventory")
        held = self.count(name)
        if amount > held:
            raise ValueError(f"Cannot remove {amount} {name}; only {held} held")

        self.stacks = drain_stacks(self.stacks, name, amount)
        return ItemStack(first.item, amount, first.max_amount)

    def copy(self) -> Inventory:
        return Inventory(stacks=[s.copy() for s in self.stacks], max_slots=self.max_slots)

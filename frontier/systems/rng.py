"""Domain-separated deterministic RNG using xxhash.

A round's random outcomes depend only on the world seed, the domain,
the acting character and the turn number, never on submission timing:

    RNG_Value = Hash(WorldSeed, Domain, Hash(ActorId), Turn, Salt)
"""

from __future__ import annotations

import struct
from typing import Sequence, TypeVar

import xxhash

from frontier.core.enums import Domain

T = TypeVar("T")


class DeterministicRNG:
    """Stateless pseudo-random number generator.

    Each call is a pure function of its arguments, so concurrent
    callers cannot perturb each other.
    """

    __slots__ = ("_seed",)

    _MAX_UINT64 = (1 << 64) - 1

    def __init__(self, seed: int) -> None:
        self._seed = seed

    @property
    def seed(self) -> int:
        return self._seed

    def _hash(self, domain: Domain, actor_id: str, turn: int, salt: int) -> int:
        actor_key = xxhash.xxh64_intdigest(actor_id.encode("utf-8"))
        payload = struct.pack("<qiQqi", self._seed, domain.value, actor_key, turn, salt)
        return xxhash.xxh64(payload).intdigest()

    def next_float(self, domain: Domain, actor_id: str, turn: int, salt: int = 0) -> float:
        """Return a deterministic float in [0.0, 1.0)."""
        return self._hash(domain, actor_id, turn, salt) / (self._MAX_UINT64 + 1)

    def next_int(self, domain: Domain, actor_id: str, turn: int, low: int, high: int, salt: int = 0) -> int:
        """Return a deterministic integer in [low, high] inclusive."""
        f = self.next_float(domain, actor_id, turn, salt)
        return low + int(f * (high - low + 1))

    def coin_flip(self, domain: Domain, actor_id: str, turn: int, salt: int = 0) -> bool:
        """Unweighted True/False."""
        return self.next_float(domain, actor_id, turn, salt) < 0.5

    def pick_one(self, domain: Domain, actor_id: str, turn: int, options: Sequence[T], salt: int = 0) -> T:
        if not options:
            raise ValueError("Cannot pick from an empty sequence")
        return options[self.next_int(domain, actor_id, turn, 0, len(options) - 1, salt)]

"""Injectable randomness for shuffling and random color picks."""

import random
from typing import MutableSequence, Optional, Protocol, TypeVar

T = TypeVar("T")

_MASK64 = (1 << 64) - 1


class RandomSource(Protocol):
    """Randomness the engine needs. Pass one in to make games reproducible."""

    def shuffle(self, items: MutableSequence[T]) -> None:
        """Permute items in place, uniformly at random."""
        ...

    def randrange(self, n: int) -> int:
        """Return a uniform integer in [0, n)."""
        ...


class SeededRandom:
    """RandomSource backed by random.Random."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def shuffle(self, items: MutableSequence[T]) -> None:
        self._rng.shuffle(items)

    def randrange(self, n: int) -> int:
        return self._rng.randrange(n)


class XorShift64:
    """Small xorshift64 generator that gives identical sequences on every platform.

    Ranges use rejection sampling so there is no modulo bias.
    """

    def __init__(self, seed: int):
        seed &= _MASK64
        if seed == 0:
            raise ValueError("XorShift64 seed must be nonzero")
        self._state = seed

    def next_u64(self) -> int:
        x = self._state
        x ^= (x << 12) & _MASK64
        x ^= x >> 25
        x ^= (x << 27) & _MASK64
        self._state = x
        return x

    def randrange(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"randrange needs a positive bound, got {n}")
        limit = (_MASK64 + 1) - ((_MASK64 + 1) % n)
        x = self.next_u64()
        while x >= limit:
            x = self.next_u64()
        return x % n

    def shuffle(self, items: MutableSequence[T]) -> None:
        # Fisher-Yates
        for i in range(len(items) - 1, 0, -1):
            j = self.randrange(i + 1)
            items[i], items[j] = items[j], items[i]

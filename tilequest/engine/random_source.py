"""Player-scoped random source."""

import random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


class RandomSource:
    """Seedable wrapper around random.Random used by every stochastic roll."""

    def __init__(self, seed: Optional[int] = None) -> None:
        """
        Initialize random source.

        Args:
            seed: Optional seed; the same seed reproduces the same rolls
        """
        self._random = random.Random(seed)

    def randint(self, lo: int, hi: int) -> int:
        """Return a uniform integer N such that lo <= N <= hi."""
        return self._random.randint(lo, hi)

    def below(self, n: int) -> int:
        """Return a uniform integer in [0, n)."""
        if n <= 0:
            raise ValueError(f"Upper bound must be positive, got {n}")
        return self._random.randrange(n)

    def is_success(self, percent: int) -> bool:
        """Return True with the given percentage chance."""
        return self.below(100) < percent

    def choice(self, seq: Sequence[T]) -> T:
        """Return a random element from a non-empty sequence."""
        if not seq:
            raise ValueError("Cannot choose from an empty sequence")
        return seq[self.below(len(seq))]

from __future__ import annotations

"""Uniform random selection over a record set.

The random source is injected so tests can use a seeded ``random.Random``
or a scripted sequence instead of the process-wide generator.
"""

import math
import random
from typing import Callable, Optional, Sequence, TypeVar

__all__ = ["RandomSelector"]

T = TypeVar("T")


class RandomSelector:
    """Pick one element per draw, every element equally likely.

    Parameters
    ----------
    rng : Callable[[], float]
        Returns a float in ``[0, 1)``. Defaults to :func:`random.random`.
    """

    def __init__(self, rng: Optional[Callable[[], float]] = None) -> None:
        self._rng: Callable[[], float] = rng or random.random

    def pick_index(self, size: int) -> int:
        """Return an index in ``[0, size)``."""
        if size <= 0:
            raise ValueError("cannot pick from an empty set")
        index = int(math.floor(self._rng() * size))
        return min(max(index, 0), size - 1)

    def choose(self, items: Sequence[T]) -> Optional[T]:
        """Return one element of ``items``, or None when it is empty."""
        if not items:
            return None
        return items[self.pick_index(len(items))]

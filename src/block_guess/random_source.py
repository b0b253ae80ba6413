"""Seedable randomness boundary for shape generation."""

from __future__ import annotations

import random
from typing import MutableSequence, Protocol, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Subset of :class:`random.Random` the generator relies on."""

    def randint(self, a: int, b: int) -> int:
        """Return a uniformly random integer in ``[a, b]``."""

    def randrange(self, stop: int) -> int:
        """Return a uniformly random integer in ``[0, stop)``."""

    def shuffle(self, x: MutableSequence[T]) -> None:
        """Shuffle ``x`` in place."""


def make_rng(seed: int | None = None) -> random.Random:
    """Build a private RNG; a ``None`` seed draws from system entropy."""
    return random.Random(seed)

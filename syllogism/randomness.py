"""
Injectable source of randomness.

Every shuffle and random pick in quiz generation goes through a
RandomSource so tests can substitute a deterministic one.
"""
import random
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")


class RandomSource:
    """Shuffle and pick helpers over a private random.Random."""

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        """
        Args:
            seed: Seed for a fresh generator (ignored if rng is given)
            rng: Existing generator to draw from
        """
        self.rng = rng if rng is not None else random.Random(seed)

    def shuffle(self, items: Sequence[T]) -> List[T]:
        """Return a shuffled copy; the input is left untouched."""
        shuffled = list(items)
        self.rng.shuffle(shuffled)
        return shuffled

    def choice(self, items: Sequence[T]) -> T:
        """Pick one element uniformly at random."""
        if not items:
            raise IndexError("Cannot choose from an empty sequence")
        return items[self.rng.randrange(len(items))]

"""Deterministic random sources for exact-order assertions."""
from syllogism.randomness import RandomSource


class IdentitySource(RandomSource):
    """Shuffle keeps order, choice takes the first element."""

    def shuffle(self, items):
        return list(items)

    def choice(self, items):
        return items[0]


class ReversingSource(RandomSource):
    """Shuffle reverses, choice takes the last element."""

    def shuffle(self, items):
        return list(reversed(items))

    def choice(self, items):
        return items[-1]

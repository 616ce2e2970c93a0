"""Utility helper functions."""
import random
from typing import List, Optional, TypeVar

T = TypeVar("T")

# Shared generator for callers that do not pass their own
_default_rng = random.Random()


def resolve_rng(rng: Optional[random.Random] = None) -> random.Random:
    """Return rng, or the shared module generator when rng is None."""
    return rng if rng is not None else _default_rng


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Create a generator, seeded when a seed is given."""
    return random.Random(seed) if seed is not None else random.Random()


def fisher_yates_shuffle(items: List[T], rng: Optional[random.Random] = None) -> List[T]:
    """
    Shuffle a list in place, walking from the last index to the first.

    Args:
        items: List to permute.
        rng: Random source.

    Returns:
        The same list, for chaining.
    """
    rng = resolve_rng(rng)
    for i in range(len(items) - 1, 0, -1):
        j = rng.randint(0, i)
        items[i], items[j] = items[j], items[i]
    return items

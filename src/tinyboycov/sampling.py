import random
from typing import List, Optional, TypeVar

T = TypeVar("T")


def random_sample(
    items: List[T], n: int, rng: Optional[random.Random] = None
) -> List[T]:
    """
    Reduce ``items`` in place to at most ``n`` uniformly chosen elements.

    Every element survives with equal probability. Elements not selected
    are discarded. Returns ``items`` itself.
    """
    if n < 0:
        raise ValueError(f"sample size must not be negative, got {n}")
    if n >= len(items):
        return items

    (rng or random).shuffle(items)
    del items[n:]
    return items

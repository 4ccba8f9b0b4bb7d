# plot_device/shuffle.py
import random
from typing import MutableSequence, Optional, TypeVar

T = TypeVar("T")


def shuffle(items: MutableSequence[T], rng: Optional[random.Random] = None) -> MutableSequence[T]:
    """Fisher-Yates shuffle of ``items`` in place. Returns ``items``."""
    randbelow = (rng or random).randrange
    for i in range(len(items) - 1, 0, -1):
        j = randbelow(i + 1)
        items[i], items[j] = items[j], items[i]
    return items

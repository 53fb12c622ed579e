"""Random sampling for dice rolls.

Dice never reach for the process-wide ``random`` module. A roll draws from
an injected sampler, or from a generator owned by the calling thread.
"""

import random
import threading
from collections.abc import Sequence
from typing import Protocol, TypeVar

from polydie.config import get_settings

T = TypeVar("T")

_local = threading.local()


class Sampler(Protocol):
    """Source of uniform draws. ``random.Random`` satisfies this."""

    def randint(self, a: int, b: int) -> int:
        """Return a uniform integer N with a <= N <= b."""
        ...

    def choice(self, seq: Sequence[T]) -> T:
        """Return a uniformly chosen element of a non-empty sequence."""
        ...


def seeded_sampler(seed: int) -> random.Random:
    """Create an independent, reproducible sampler.

    Examples:
        >>> seeded_sampler(7).randint(1, 20) == seeded_sampler(7).randint(1, 20)
        True
    """
    return random.Random(seed)


def get_sampler() -> random.Random:
    """Get the calling thread's default sampler.

    Created lazily. Seeded from ``Settings.dice_seed`` when it is set,
    otherwise from OS entropy.
    """
    sampler = getattr(_local, "sampler", None)
    if sampler is None:
        seed = get_settings().dice_seed
        sampler = random.Random(seed) if seed is not None else random.Random()
        _local.sampler = sampler
    return sampler


def reset_sampler() -> None:
    """Discard the calling thread's default sampler."""
    _local.sampler = None

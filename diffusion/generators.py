"""Random draws for initial load and activity intervals."""

import random
from typing import Callable, Tuple
from balance_types import InvalidRange

Generator = Callable[[], int]


def check_range(bounds: Tuple[int, int], name: str = "range"):
    """Reject a range whose minimum is above its maximum."""
    low, high = bounds
    if low > high:
        raise InvalidRange(f"{name}: min {low} is greater than max {high}")


def uniform_generator(rng: random.Random, low: int, high: int) -> Generator:
    """Return a callable drawing uniformly from [low, high] inclusive."""
    check_range((low, high))

    def draw() -> int:
        return rng.randint(low, high)

    return draw


def fixed_generator(value: int) -> Generator:
    """Return a callable that always produces the same value."""

    def draw() -> int:
        return value

    return draw

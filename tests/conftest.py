"""Shared fixtures for ring diffusion tests."""

import random
from typing import List, Optional

import pytest
from balance_types import Node
from ring import Ring


def make_ring(loads: List[int], times: Optional[List[int]] = None) -> Ring:
    """Ring with exact loads and activity times, wired like build_ring."""
    k = len(loads)
    if times is None:
        times = [100 * (i + 1) for i in range(k)]
    nodes = [
        Node(i, load, time, left=(i - 1) % k, right=(i + 1) % k)
        for i, (load, time) in enumerate(zip(loads, times))
    ]
    return Ring(nodes)


@pytest.fixture
def ring_factory():
    return make_ring


@pytest.fixture
def rng() -> random.Random:
    return random.Random(20240613)

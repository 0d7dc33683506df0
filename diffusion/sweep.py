"""Sweep the ring size over a fixed list of topologies."""

from typing import Iterable, Iterator
from balance_config import SimulationConfig
from trials import RUNS, TrialSummary, run_trials

RING_SIZES = [5, 10, 15, 20, 25, 30, 40, 50] + list(range(100, 1001, 50))


def run_sweep(
    base_config: SimulationConfig,
    sizes: Iterable[int] = RING_SIZES,
    runs: int = RUNS,
) -> Iterator[TrialSummary]:
    """Yield one averaged summary per ring size."""
    for k in sizes:
        yield run_trials(base_config.with_k(k), runs)

"""Repeated runs of one configuration with averaged statistics."""

from dataclasses import dataclass
from typing import List
from balance_config import SimulationConfig
from balance_types import RunResult
from load_balancer import run_simulation

RUNS = 5


@dataclass
class TrialSummary:
    """Integer averages over a batch of runs, as the original report prints them."""

    k: int
    runs: int
    balance_fraction: float
    avg_time: int
    avg_iterations: int
    avg_load: int
    avg_balanced_load: int
    avg_unbalanced_nodes: int
    avg_unbalanced_load: int
    converged_runs: int
    timed_out_runs: int

    def csv_row(self) -> str:
        return (
            f"{self.balance_fraction:f}, {self.k}, {self.avg_time}, {self.k}, "
            f"{self.avg_iterations}, {self.avg_load}, {self.avg_balanced_load}, "
            f"{self.avg_unbalanced_nodes}, {self.avg_unbalanced_load}"
        )


CSV_HEADER = (
    "balance_fraction, k, avg_time, k, avg_iterations, avg_load, "
    "avg_balanced_load, avg_unbalanced_nodes, avg_unbalanced_load"
)


def summarize(config: SimulationConfig, results: List[RunResult]) -> TrialSummary:
    """Average a batch of results."""
    if not results:
        raise ValueError("cannot summarize zero runs")
    runs = len(results)
    converged = sum(1 for r in results if r.converged)
    return TrialSummary(
        k=config.k,
        runs=runs,
        balance_fraction=config.balance_fraction,
        avg_time=sum(r.current_time for r in results) // runs,
        avg_iterations=sum(r.iterations for r in results) // runs,
        avg_load=sum(r.initial_load for r in results) // runs,
        avg_balanced_load=sum(r.balanced_load for r in results) // runs,
        avg_unbalanced_nodes=sum(r.unbalanced_nodes for r in results) // runs,
        avg_unbalanced_load=sum(r.unbalanced_load for r in results) // runs,
        converged_runs=converged,
        timed_out_runs=runs - converged,
    )


def run_batch(config: SimulationConfig, runs: int = RUNS) -> List[RunResult]:
    """Run the configuration several times, each with its own ring and clock."""
    if runs <= 0:
        raise ValueError(f"runs must be positive, got {runs}")

    results = []
    for i in range(runs):
        # Distinct but reproducible seeds when the batch is seeded
        seed = None if config.seed is None else config.seed + i
        results.append(run_simulation(config.with_seed(seed)))
    return results


def run_trials(config: SimulationConfig, runs: int = RUNS) -> TrialSummary:
    """Average a batch of runs."""
    return summarize(config, run_batch(config, runs))

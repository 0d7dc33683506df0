"""Tolerance policies deciding what counts as a steady state.

A run is judged with two numbers computed once from the initial load:

- ``balanced_load``: the largest load difference between ring neighbors that
  still counts as balanced.
- ``max_unsteady_nodes``: how many nodes may stay out of tolerance while the
  system is still declared converged.

The first one comes from a policy function ``(total_load, k, fraction) -> int``
so that stricter or looser variants are a matter of choosing a function and a
fraction.
"""

from typing import Callable
from balance_types import Tolerances

TolerancePolicy = Callable[[int, int, float], int]

SAFETY_FACTOR = 10


def _check(total_load: int, k: int, fraction: float):
    if k <= 0:
        raise ValueError(f"k must be positive, got {k}")
    if total_load < 0:
        raise ValueError(f"total load must not be negative, got {total_load}")
    if fraction < 0:
        raise ValueError(f"fraction must not be negative, got {fraction}")


def total_load_policy(total_load: int, k: int, fraction: float) -> int:
    """Fraction of the total load, shrunk when looser than the average load."""
    _check(total_load, k, fraction)
    balanced_load = int(total_load * fraction)
    if balanced_load > total_load // k:
        balanced_load = balanced_load // SAFETY_FACTOR
    return max(balanced_load, 1)


def average_load_policy(total_load: int, k: int, fraction: float) -> int:
    """Fraction of the average per-node load."""
    _check(total_load, k, fraction)
    return max(int((total_load // k) * fraction), 1)


def max_unsteady_nodes(k: int, unsteady_fraction: float) -> int:
    """Number of nodes allowed out of tolerance, at least one."""
    if k <= 0:
        raise ValueError(f"k must be positive, got {k}")
    if unsteady_fraction < 0:
        raise ValueError(f"fraction must not be negative, got {unsteady_fraction}")
    return max(int(k * unsteady_fraction), 1)


def compute_tolerances(
    total_load: int,
    k: int,
    balance_fraction: float,
    unsteady_fraction: float,
    policy: TolerancePolicy = total_load_policy,
) -> Tolerances:
    """Derive both steady-state parameters for a run."""
    return Tolerances(
        balanced_load=policy(total_load, k, balance_fraction),
        max_unsteady_nodes=max_unsteady_nodes(k, unsteady_fraction),
    )


POLICIES = {
    "total": total_load_policy,
    "average": average_load_policy,
}

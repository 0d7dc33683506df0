"""Data types for ring diffusion load balancing."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple


class BalanceError(Exception):
    """Base class for load balancing configuration errors."""


class InvalidTopology(BalanceError):
    """Ring cannot be built with the requested number of nodes."""


class InvalidRange(BalanceError):
    """A generation range has its minimum above its maximum."""


class InvalidConfig(BalanceError):
    """A configuration value is outside what a run can use."""


class RunOutcome(Enum):
    """States of a simulation run."""

    RUNNING = "running"
    CONVERGED = "converged"
    TIMED_OUT = "timed_out"


class ConvergenceCheck(Enum):
    """When the simulation loop asks the global observer for a verdict."""

    EVERY_STEP = "every_step"
    IDLE_STEP = "idle_step"  # only after a step that moved no load


@dataclass
class Node:
    """A processing node on the ring."""

    position: int
    load: int
    next_activity_time: int
    left: int = -1  # index of left neighbor in the ring arena
    right: int = -1  # index of right neighbor in the ring arena

    def __str__(self):
        return f"Node({self.position}, load={self.load})"


@dataclass
class Tolerances:
    """Steady-state policy for one run."""

    balanced_load: int
    max_unsteady_nodes: int


@dataclass
class ConvergenceReport:
    """Result of one global scan of the ring."""

    converged: bool
    unbalanced_nodes: int
    unbalanced_load: int


@dataclass
class RunResult:
    """What a finished run reports back."""

    outcome: RunOutcome
    current_time: int
    iterations: int
    initial_load: int
    final_load: int
    balanced_load: int
    max_unsteady_nodes: int
    unbalanced_nodes: int = 0
    unbalanced_load: int = 0
    initial_snapshot: List[Tuple[int, int]] = field(default_factory=list)
    final_snapshot: List[Tuple[int, int]] = field(default_factory=list)

    @property
    def converged(self) -> bool:
        return self.outcome == RunOutcome.CONVERGED

    def __str__(self):
        return (
            f"RunResult({self.outcome.value}, time={self.current_time}, "
            f"iterations={self.iterations}, load={self.final_load})"
        )

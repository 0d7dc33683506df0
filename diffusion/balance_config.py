"""Configuration for one load balancing run."""

from dataclasses import dataclass, replace
from typing import Optional, Tuple
from balance_types import ConvergenceCheck, InvalidConfig, InvalidTopology
from generators import check_range
from tolerance import TolerancePolicy, total_load_policy

L_MIN, L_MAX = 10, 1000  # load units given to a loaded node
D_MIN, D_MAX = 100, 1000  # time between two activities of a node
BALANCED_LOAD_THRESHOLD = 0.0001
STEADY_STATE_THRESHOLD = 0.02
MAX_CYCLES = 1_000_000


@dataclass
class SimulationConfig:
    """Inputs of a simulation run."""

    k: int
    load_range: Tuple[int, int] = (L_MIN, L_MAX)
    activity_range: Tuple[int, int] = (D_MIN, D_MAX)
    balance_fraction: float = BALANCED_LOAD_THRESHOLD
    unsteady_fraction: float = STEADY_STATE_THRESHOLD
    horizon: int = MAX_CYCLES
    seed: Optional[int] = None
    tolerance_policy: TolerancePolicy = total_load_policy
    convergence_check: ConvergenceCheck = ConvergenceCheck.EVERY_STEP

    # Force tolerance values instead of deriving them from the load
    balanced_load_override: Optional[int] = None
    max_unsteady_override: Optional[int] = None

    verbose: bool = False

    def validate(self):
        """Reject configurations that cannot produce a valid run."""
        if self.k <= 0:
            raise InvalidTopology(f"k should be > 0, got {self.k}")
        check_range(self.load_range, "load range")
        check_range(self.activity_range, "activity range")
        if self.activity_range[0] <= 0:
            raise InvalidConfig("activity intervals must be positive")
        if self.load_range[0] < 0:
            raise InvalidConfig("load units must not be negative")
        if self.horizon < 0:
            raise InvalidConfig(f"horizon must not be negative, got {self.horizon}")

    def with_k(self, k: int) -> "SimulationConfig":
        return replace(self, k=k)

    def with_seed(self, seed: Optional[int]) -> "SimulationConfig":
        return replace(self, seed=seed)

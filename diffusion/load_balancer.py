"""Simulation loop driving diffusion load balancing on a ring."""

import random
from asimpy import Environment, Process
from typing import Optional
from activity_scheduler import next_to_act, reschedule
from balance_config import SimulationConfig
from balance_types import (
    ConvergenceCheck,
    ConvergenceReport,
    RunOutcome,
    RunResult,
    Tolerances,
)
from convergence import check_convergence
from diffusion_step import diffuse
from generators import Generator, uniform_generator
from ring import Ring, build_ring
from tolerance import compute_tolerances


class LoadBalancer(Process):
    """Activates nodes in timer order until the ring is balanced or time runs out."""

    def init(
        self,
        ring: Ring,
        tolerances: Tolerances,
        timer_generator: Generator,
        horizon: int,
        convergence_check: ConvergenceCheck = ConvergenceCheck.EVERY_STEP,
        verbose: bool = False,
    ):
        self.ring = ring
        self.tolerances = tolerances
        self.timer_generator = timer_generator
        self.horizon = horizon
        self.convergence_check = convergence_check
        self.verbose = verbose

        self.outcome = RunOutcome.RUNNING
        self.active = ring.start
        self.iterations = 0
        self.units_moved = 0
        self.last_report: Optional[ConvergenceReport] = None
        self.current_time = 0

    async def run(self):
        """Main loop: act, reschedule, check, pick the next node."""
        while self.outcome == RunOutcome.RUNNING:
            if self.current_time >= self.horizon:
                self.outcome = RunOutcome.TIMED_OUT
                self.trace(
                    f"Timed out after {self.iterations} activities, "
                    f"{self.units_moved} units moved (horizon {self.horizon})"
                )
                break

            node = self.ring[self.active]

            # The clock only moves forward, even if the start node was
            # scheduled later than the node chosen after it.
            delay = max(node.next_activity_time - self.current_time, 0)
            if delay > 0:
                await self.timeout(delay)
                self.current_time += delay

            moved = self.activate(self.active)
            reschedule(node, self.timer_generator)

            if self.should_check(moved):
                self.last_report = check_convergence(
                    self.ring,
                    self.tolerances.balanced_load,
                    self.tolerances.max_unsteady_nodes,
                )
                if self.last_report.converged:
                    self.outcome = RunOutcome.CONVERGED
                    self.trace(
                        f"Converged after {self.iterations} activities, "
                        f"{self.units_moved} units moved "
                        f"({self.last_report.unbalanced_nodes} unbalanced nodes)"
                    )
                    break

            self.active = next_to_act(self.ring, self.active)

    def trace(self, message: str):
        if self.verbose:
            print(f"[{self.current_time:.1f}] {message}")

    def activate(self, index: int) -> int:
        """Run one diffusion step on a node and count it."""
        self.iterations += 1
        moved = diffuse(self.ring, index)
        self.units_moved += moved

        if moved:
            self.trace(
                f"Node {self.ring[index].position}: "
                f"Shifted {moved} units (load now {self.ring[index].load})"
            )

        return moved

    def should_check(self, moved: int) -> bool:
        """Whether this step is followed by a global scan."""
        if self.convergence_check == ConvergenceCheck.IDLE_STEP:
            return moved == 0
        return True

    def final_report(self) -> ConvergenceReport:
        """Scan at termination, reusing the converging scan if there was one."""
        if self.outcome == RunOutcome.CONVERGED and self.last_report is not None:
            return self.last_report
        return check_convergence(
            self.ring,
            self.tolerances.balanced_load,
            self.tolerances.max_unsteady_nodes,
        )


def resolve_tolerances(config: SimulationConfig, ring: Ring) -> Tolerances:
    """Tolerances for a run, with any forced values from the configuration."""
    tolerances = compute_tolerances(
        ring.initial_load,
        ring.k,
        config.balance_fraction,
        config.unsteady_fraction,
        config.tolerance_policy,
    )
    if config.balanced_load_override is not None:
        tolerances.balanced_load = config.balanced_load_override
    if config.max_unsteady_override is not None:
        tolerances.max_unsteady_nodes = config.max_unsteady_override
    return tolerances


def simulate_ring(
    ring: Ring, config: SimulationConfig, timer_generator: Generator
) -> RunResult:
    """Balance an already built ring in a fresh environment."""
    env = Environment()
    tolerances = resolve_tolerances(config, ring)
    initial_snapshot = ring.snapshot()

    balancer = LoadBalancer(
        env,
        ring,
        tolerances,
        timer_generator,
        config.horizon,
        config.convergence_check,
        config.verbose,
    )

    # The balancer stops itself at convergence or at the horizon
    env.run()
    if balancer.outcome == RunOutcome.RUNNING:
        raise RuntimeError("simulation stopped before reaching a terminal state")

    report = balancer.final_report()
    return RunResult(
        outcome=balancer.outcome,
        current_time=balancer.current_time,
        iterations=balancer.iterations,
        initial_load=ring.initial_load,
        final_load=ring.total_load(),
        balanced_load=tolerances.balanced_load,
        max_unsteady_nodes=tolerances.max_unsteady_nodes,
        unbalanced_nodes=report.unbalanced_nodes,
        unbalanced_load=report.unbalanced_load,
        initial_snapshot=initial_snapshot,
        final_snapshot=ring.snapshot(),
    )


def run_simulation(config: SimulationConfig) -> RunResult:
    """Build a ring from the configuration and balance it."""
    config.validate()

    rng = random.Random(config.seed)
    load_generator = uniform_generator(rng, *config.load_range)
    timer_generator = uniform_generator(rng, *config.activity_range)

    ring = build_ring(config.k, load_generator, timer_generator)
    return simulate_ring(ring, config, timer_generator)

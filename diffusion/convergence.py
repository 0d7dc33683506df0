"""Global observer deciding whether the ring has reached a steady state."""

from ring import Ring
from balance_types import ConvergenceReport


def check_convergence(
    ring: Ring, balanced_load: int, max_unsteady_nodes: int
) -> ConvergenceReport:
    """Scan every node once and count those out of tolerance.

    A node is unbalanced when its load differs from either neighbor's by
    more than balanced_load. Every such difference also goes into the
    unbalanced load sum, so a pair of unbalanced neighbors is counted from
    both sides.
    """
    unbalanced_nodes = 0
    unbalanced_load = 0

    for node in ring.walk():
        unbalanced = False
        for neighbor in (ring[node.left], ring[node.right]):
            difference = abs(node.load - neighbor.load)
            if difference > balanced_load:
                unbalanced_load += difference
                unbalanced = True
        if unbalanced:
            unbalanced_nodes += 1

    return ConvergenceReport(
        converged=unbalanced_nodes <= max_unsteady_nodes,
        unbalanced_nodes=unbalanced_nodes,
        unbalanced_load=unbalanced_load,
    )


def is_converged(ring: Ring, balanced_load: int, max_unsteady_nodes: int) -> bool:
    """True when few enough nodes are out of tolerance."""
    return check_convergence(ring, balanced_load, max_unsteady_nodes).converged

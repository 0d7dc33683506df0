"""Event-driven choice of which node acts next."""

from ring import Ring
from balance_types import Node
from generators import Generator


def next_to_act(ring: Ring, current: int) -> int:
    """Index of the node with the earliest activity time after current.

    The scan starts at current's right neighbor and goes once around the
    ring, so ties go to the first node met in ring order.
    """
    if ring.k == 1:
        return current

    best = ring[current].right
    index = ring[best].right
    while index != current:
        if ring[index].next_activity_time < ring[best].next_activity_time:
            best = index
        index = ring[index].right
    return best


def reschedule(node: Node, timer_generator: Generator) -> int:
    """Push the node's next activity further into the future."""
    interval = timer_generator()
    if interval <= 0:
        raise ValueError(f"activity interval must be positive, got {interval}")
    node.next_activity_time += interval
    return node.next_activity_time

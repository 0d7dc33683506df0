"""Local three-point diffusion of surplus load."""

from typing import List
from ring import Ring
from balance_types import Node


def participants(ring: Ring, index: int) -> List[int]:
    """Indices of the node and its distinct neighbors, left before right."""
    node = ring[index]
    result = [index]
    for neighbor in (node.left, node.right):
        if neighbor not in result:
            result.append(neighbor)
    return result


def local_average(ring: Ring, index: int) -> int:
    """Integer average load over the node and its neighbors."""
    members = participants(ring, index)
    return sum(ring[i].load for i in members) // len(members)


def shift_load(node: Node, neighbor: Node, average: int) -> int:
    """Move as much surplus as the neighbor can take without passing the average."""
    if neighbor.load >= average:
        return 0
    surplus = node.load - average
    capacity = average - neighbor.load
    amount = min(surplus, capacity)
    if amount <= 0:
        return 0
    neighbor.load += amount
    node.load -= amount
    return amount


def diffuse(ring: Ring, index: int) -> int:
    """Push the node's load above the local average to its neighbors.

    Returns the number of load units moved (0 if the node was not above
    the average).
    """
    node = ring[index]
    average = local_average(ring, index)

    if node.load <= average:
        return 0

    moved = 0
    for neighbor in participants(ring, index)[1:]:
        moved += shift_load(node, ring[neighbor], average)
    return moved

"""Ring of processing nodes."""

from typing import Iterator, List, Optional, Tuple
from balance_types import InvalidTopology, Node
from generators import Generator


class Ring:
    """Closed ring of nodes stored in an arena indexed by position."""

    def __init__(self, nodes: List[Node]):
        self.nodes = nodes
        self.start = 0
        self.initial_load = sum(node.load for node in nodes)

    @property
    def k(self) -> int:
        return len(self.nodes)

    def __len__(self):
        return len(self.nodes)

    def __getitem__(self, index: int) -> Node:
        return self.nodes[index]

    def left_of(self, index: int) -> Node:
        return self.nodes[self.nodes[index].left]

    def right_of(self, index: int) -> Node:
        return self.nodes[self.nodes[index].right]

    def walk(self, start: Optional[int] = None) -> Iterator[Node]:
        """Yield every node once, following right links from start."""
        index = self.start if start is None else start
        for _ in range(len(self.nodes)):
            yield self.nodes[index]
            index = self.nodes[index].right

    def total_load(self) -> int:
        return sum(node.load for node in self.nodes)

    def snapshot(self) -> List[Tuple[int, int]]:
        """(position, load) for every node in ring order from the start."""
        return [(node.position, node.load) for node in self.walk()]

    def __str__(self):
        return f"Ring(k={self.k}, load={self.total_load()})"


def build_ring(k: int, load_generator: Generator, timer_generator: Generator) -> Ring:
    """Create k nodes, give every third one load, and close the ring."""
    if k <= 0:
        raise InvalidTopology(f"k should be > 0, got {k}")

    nodes = []
    for position in range(k):
        # Skewed start: only positions divisible by 3 carry load
        load = load_generator() if position % 3 == 0 else 0
        nodes.append(Node(position, load, timer_generator()))

    for node in nodes:
        node.left = (node.position - 1) % k
        node.right = (node.position + 1) % k

    return Ring(nodes)

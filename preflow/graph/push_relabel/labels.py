from typing import List, Optional, Sequence

from .residual import Edge


class LabelTracker:
    """
    Distance labels, excess and per-label occupancy for one flow computation.

    Labels live in [0, n]; a label of n means the vertex cannot reach the
    target in the residual graph. `count[k]` is the number of vertices holding
    label k, so the counts always sum to n.
    """

    def __init__(self, num_vertices: int, labels: Optional[Sequence[int]] = None,
                 excess: Optional[Sequence] = None):
        n = num_vertices
        self.n = n
        self.label: List[int] = list(labels) if labels is not None else [0] * n
        self.excess: List = list(excess) if excess is not None else [0] * n
        self.count: List[int] = [0] * (n + 1)
        for value in self.label:
            self.count[value] += 1

    def set_label(self, v: int, value: int) -> None:
        # Decrement before the move, increment after
        self.count[self.label[v]] -= 1
        self.label[v] = value
        self.count[value] += 1

    def is_sole_occupant(self, v: int) -> bool:
        return self.count[self.label[v]] == 1

    def is_admissible(self, edge: Edge) -> bool:
        return edge.residual() > 0 and self.label[edge.tail] == self.label[edge.head] + 1

    def relabel(self, v: int, arcs: Sequence[Edge]) -> int:
        """Set label[v] to 1 + the lowest neighbour label over residual arcs, capped at n. Self-loops are ignored."""
        new_label = self.n
        for e in arcs:
            if e.residual() > 0 and e.head != v:
                new_label = min(new_label, self.label[e.head] + 1)
        self.set_label(v, new_label)
        return new_label

    def gap(self, k: int) -> List[int]:
        """Raise every vertex with k <= label < n to n. Returns the moved vertices."""
        moved = []
        for v in range(self.n):
            if k <= self.label[v] < self.n:
                self.set_label(v, self.n)
                moved.append(v)
        return moved

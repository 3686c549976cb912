from typing import Iterator, List, Set


class Edge:
    """Residual arc. Every caller-added edge owns a forward arc and a reverse arc."""

    __slots__ = ('tail', 'head', 'capacity', 'flow', 'index', 'forward')

    def __init__(self, tail: int, head: int, capacity, flow, index: int, forward: bool):
        self.tail = tail
        self.head = head
        self.capacity = capacity
        self.flow = flow
        # Position of the paired arc in the head's adjacency list
        self.index = index
        self.forward = forward

    def residual(self):
        """Spare capacity left on this arc."""
        return self.capacity - self.flow

    def __repr__(self) -> str:
        return (f"Edge({self.tail}->{self.head}, capacity={self.capacity}, "
                f"flow={self.flow}, forward={self.forward})")


class ResidualGraph:
    """Adjacency-list storage of residual arcs over vertex ids 0..n-1."""

    def __init__(self, num_vertices: int):
        if num_vertices < 0:
            raise ValueError(f"Number of vertices must be non-negative, got {num_vertices}")
        self.n = num_vertices
        self.adj: List[List[Edge]] = [[] for _ in range(num_vertices)]
        self._forward: List[Edge] = []

    def check_vertex(self, v: int) -> None:
        if not 0 <= v < self.n:
            raise ValueError(f"Vertex {v} out of range [0, {self.n})")

    def add_edge(self, tail: int, head: int, capacity) -> Edge:
        """
        Add a directed edge as a forward/reverse residual pair.

        Args:
            tail: Vertex the edge leaves
            head: Vertex the edge enters
            capacity: Non-negative capacity

        Returns:
            The forward arc
        """
        self.check_vertex(tail)
        self.check_vertex(head)
        if capacity < 0:
            raise ValueError(f"Capacity must be non-negative, got {capacity} on {tail}->{head}")

        # For a self-loop the reverse arc lands one slot after the forward arc
        mirror_index = len(self.adj[head]) + (1 if tail == head else 0)
        forward = Edge(tail, head, capacity, 0, mirror_index, True)
        self.adj[tail].append(forward)
        reverse = Edge(head, tail, 0, 0, len(self.adj[tail]) - 1, False)
        self.adj[head].append(reverse)

        self._forward.append(forward)
        return forward

    def mirror(self, edge: Edge) -> Edge:
        return self.adj[edge.head][edge.index]

    def push(self, edge: Edge, amount) -> None:
        """Move `amount` units along `edge`, updating both arcs of the pair."""
        edge.flow += amount
        self.adj[edge.head][edge.index].flow -= amount

    def reset(self) -> None:
        """Zero the flow on every arc, keeping capacities."""
        for arcs in self.adj:
            for e in arcs:
                e.flow = 0

    def edges(self) -> Iterator[Edge]:
        """Forward arcs in insertion order."""
        return iter(self._forward)

    def num_edges(self) -> int:
        return len(self._forward)

    def reachable(self, source: int) -> Set[int]:
        """Vertices reachable from source through arcs with spare capacity."""
        self.check_vertex(source)
        visited = {source}
        stack = [source]
        while stack:
            u = stack.pop()
            for e in self.adj[u]:
                if e.head not in visited and e.residual() > 0:
                    visited.add(e.head)
                    stack.append(e.head)
        return visited

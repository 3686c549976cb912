from typing import Dict, Iterator, List, Optional, Set, Tuple
from collections import deque
import logging

from .discharge import DischargeEngine
from .labels import LabelTracker
from .residual import Edge, ResidualGraph
from .scheduler import ActiveVertexScheduler

# Configure logging for the module
logger = logging.getLogger(__name__)


class MaxFlowNetwork:
    """
    Highest-label push-relabel maximum flow with the gap heuristic.

    Running time is O(V^2 sqrt(E)). Build the network with add_edge(), then
    call get_max_flow(source, sink). Flows are left on the arcs so callers can
    inspect them (edges(), flow_dict()) or ask for a minimum cut.
    """

    def __init__(self, num_vertices: int):
        self.graph = ResidualGraph(num_vertices)
        self.stats: Dict[str, int] = {}
        self._solved_for: Optional[Tuple[int, int]] = None
        # Pair the flow currently on the arcs belongs to; survives add_edge
        self._flow_pair: Optional[Tuple[int, int]] = None
        self.logger = logging.getLogger(__name__)

    @property
    def num_vertices(self) -> int:
        return self.graph.n

    @property
    def num_edges(self) -> int:
        return self.graph.num_edges()

    def add_edge(self, tail: int, head: int, capacity) -> Edge:
        """Register a directed edge with the given capacity. Returns its forward arc."""
        edge = self.graph.add_edge(tail, head, capacity)
        self._solved_for = None
        return edge

    def get_max_flow(self, source: int, sink: int):
        """
        Compute the maximum flow from source to sink.

        Args:
            source: Source vertex id
            sink: Sink vertex id

        Returns:
            Net flow into the sink once the computation has finished
        """
        self.graph.check_vertex(source)
        self.graph.check_vertex(sink)
        if source == sink:
            self.logger.debug(f"Source and sink are both {source}, nothing to push")
            return 0

        if self._flow_pair not in (None, (source, sink)):
            self.logger.debug(f"Clearing flow left by {self._flow_pair} before solving {source}->{sink}")
            self.graph.reset()

        labels = self._push_to_sink(source, sink)
        self._return_excess(source, sink, labels)

        self._solved_for = (source, sink)
        self._flow_pair = (source, sink)
        flow_value = self.net_inflow(sink)
        self.logger.debug(
            f"Max flow {source}->{sink}: {flow_value} "
            f"(pushes={self.stats['pushes']}, relabels={self.stats['relabels']}, gaps={self.stats['gaps']})"
        )
        return flow_value

    def _push_to_sink(self, source: int, sink: int) -> LabelTracker:
        """Saturate the source's arcs and discharge until no vertex can send more toward the sink."""
        n = self.graph.n
        labels = LabelTracker(n)
        labels.set_label(source, n)
        scheduler = ActiveVertexScheduler(labels)
        scheduler.exclude(source)
        scheduler.exclude(sink)

        for e in self.graph.adj[source]:
            amount = e.residual()
            if e.head != source and amount > 0:
                self.graph.push(e, amount)
                labels.excess[source] -= amount
                labels.excess[e.head] += amount
                scheduler.enqueue(e.head)

        self.stats = dict(DischargeEngine(self.graph, labels, scheduler).run())
        self.stats['returned_vertices'] = 0
        return labels

    def _return_excess(self, source: int, sink: int, labels: LabelTracker) -> None:
        """Send excess stranded behind a gap back to the source, turning the preflow into a flow."""
        n = self.graph.n
        stranded = [v for v in range(n) if v not in (source, sink) and labels.excess[v] > 0]
        if not stranded:
            return

        self.logger.debug(f"Returning excess of {len(stranded)} vertices to the source")
        back = LabelTracker(n, self._distances_to(source, blocked=sink), labels.excess)
        scheduler = ActiveVertexScheduler(back)
        scheduler.exclude(source)
        scheduler.exclude(sink)
        for v in stranded:
            scheduler.enqueue(v)

        for key, value in DischargeEngine(self.graph, back, scheduler).run().items():
            self.stats[key] += value
        self.stats['returned_vertices'] = len(stranded)

        remaining = [v for v in stranded if back.excess[v] > 0]
        if remaining:
            self.logger.warning(f"Excess left on vertices {remaining} after returning flow to the source")

    def _distances_to(self, target: int, blocked: int) -> List[int]:
        """Residual BFS distances to target, n where unreachable. `blocked` is never entered."""
        n = self.graph.n
        dist = [n] * n
        dist[target] = 0
        queue = deque([target])
        while queue:
            x = queue.popleft()
            for e in self.graph.adj[x]:
                y = e.head
                # y can send to x when the mirror arc y->x has spare capacity
                if dist[y] == n and y != blocked and self.graph.mirror(e).residual() > 0:
                    dist[y] = dist[x] + 1
                    queue.append(y)
        return dist

    def get_min_cut(self, source: int, sink: int) -> Tuple[float, List[Edge]]:
        """
        Minimum source/sink cut by residual reachability.

        Solves the network first unless the last computation was for the same
        pair and no edge has been added since.

        Returns:
            Tuple of (cut capacity, forward arcs crossing from the source side)
        """
        self.graph.check_vertex(source)
        self.graph.check_vertex(sink)
        if source == sink:
            return 0, []
        if self._solved_for != (source, sink):
            self.get_max_flow(source, sink)

        reachable = self.graph.reachable(source)
        cut_edges = [
            e for e in self.graph.edges()
            if e.capacity > 0 and e.tail in reachable and e.head not in reachable
        ]
        return sum(e.capacity for e in cut_edges), cut_edges

    def residual_reachable(self, source: int) -> Set[int]:
        return self.graph.reachable(source)

    def net_inflow(self, v: int):
        """Flow entering v minus flow leaving it."""
        return -sum(e.flow for e in self.graph.adj[v])

    def edges(self) -> Iterator[Edge]:
        return self.graph.edges()

    def mirror(self, edge: Edge) -> Edge:
        return self.graph.mirror(edge)

    def flow_dict(self) -> Dict[int, Dict[int, float]]:
        """Positive flows as {u: {v: flow}}, parallel edges summed, self-loops skipped."""
        flows: Dict[int, Dict[int, float]] = {}
        for e in self.graph.edges():
            if e.tail != e.head and e.flow > 0:
                targets = flows.setdefault(e.tail, {})
                targets[e.head] = targets.get(e.head, 0) + e.flow
        return flows

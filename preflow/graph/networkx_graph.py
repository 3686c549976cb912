import networkx as nx
from networkx.algorithms.flow import preflow_push
import time
from typing import List, Tuple, Dict, Any, Optional, Iterator, Set

from .base import BaseGraph
import logging

# Configure logging for the module
logger = logging.getLogger(__name__)


class NetworkXGraph(BaseGraph):
    def __init__(self, edges: List[Tuple[str, str]], capacities: List[float]):
        self.g_nx = self._create_graph(edges, capacities)
        self.logger = logging.getLogger(__name__)

    def _create_graph(self, edges: List[Tuple[str, str]], capacities: List[float]) -> nx.DiGraph:
        """Create NetworkX graph with edge properties."""
        g = nx.DiGraph()

        # DiGraph keeps one edge per pair, so parallel capacities are summed
        for (u, v), capacity in zip(edges, capacities):
            if g.has_edge(u, v):
                g[u][v]['capacity'] += capacity
            else:
                g.add_edge(u, v, capacity=capacity)

        return g

    def compute_flow(self, source: str, sink: str) -> Tuple[float, Dict[str, Dict[str, float]]]:
        """Compute maximum flow between source and sink nodes."""
        self._check_terminals(source, sink)
        if source == sink:
            return 0, {}

        # Early exit if sink has no incoming edges
        if self.g_nx.in_degree(sink) == 0:
            self.logger.info("Sink has no incoming edges. No flow is possible.")
            return 0, {}

        start = time.time()
        flow_value, flow_dict = nx.maximum_flow(self.g_nx, source, sink, flow_func=preflow_push)
        self.logger.info(f"Solver Time: {time.time() - start:.6f}s")

        # Remove zero flows
        flow_dict = {
            u: {v: f for v, f in flows.items() if f > 0}
            for u, flows in flow_dict.items()
        }
        flow_dict = {u: flows for u, flows in flow_dict.items() if flows}
        return flow_value, flow_dict

    def minimum_cut(self, source: str, sink: str) -> Tuple[float, List[Tuple[str, str, float]]]:
        self._check_terminals(source, sink)
        if source == sink:
            return 0, []

        cut_value, (reachable, non_reachable) = nx.minimum_cut(
            self.g_nx, source, sink, flow_func=preflow_push
        )
        cut_edges = [
            (u, v, data['capacity'])
            for u in reachable
            for v, data in self.g_nx[u].items()
            if v in non_reachable and data['capacity'] > 0
        ]
        return cut_value, cut_edges

    # Required BaseGraph interface methods
    def num_vertices(self) -> int:
        return self.g_nx.number_of_nodes()

    def num_edges(self) -> int:
        return self.g_nx.number_of_edges()

    def get_vertices(self) -> Set[str]:
        return set(self.g_nx.nodes())

    def get_edges(self) -> List[Tuple[str, str, Dict[str, Any]]]:
        return [(u, v, d) for u, v, d in self.g_nx.edges(data=True)]

    def in_degree(self, vertex_id: str) -> int:
        return self.g_nx.in_degree(vertex_id)

    def out_degree(self, vertex_id: str) -> int:
        return self.g_nx.out_degree(vertex_id)

    def degree(self, vertex_id: str) -> int:
        return self.g_nx.degree(vertex_id)

    def predecessors(self, vertex_id: str) -> Iterator[str]:
        return self.g_nx.predecessors(vertex_id)

    def successors(self, vertex_id: str) -> Iterator[str]:
        return self.g_nx.successors(vertex_id)

    def has_vertex(self, vertex_id: str) -> bool:
        return vertex_id in self.g_nx

    def has_edge(self, u: str, v: str) -> bool:
        return self.g_nx.has_edge(u, v)

    def get_edge_data(self, u: str, v: str) -> Dict[str, Any]:
        return self.g_nx.get_edge_data(u, v) or {}

    def get_edge_capacity(self, u: str, v: str) -> Optional[float]:
        if self.has_edge(u, v):
            return self.g_nx[u][v].get('capacity')
        return None

from ortools.graph.python import max_flow
import time
from typing import List, Tuple, Dict, Any, Optional, Iterator, Set
from collections import defaultdict

from .base import BaseGraph
import logging

# Configure logging for the module
logger = logging.getLogger(__name__)


class ORToolsGraph(BaseGraph):
    def __init__(self, edges: List[Tuple[str, str]], capacities: List[float]):
        """
        Initialize OR-Tools graph implementation.

        Args:
            edges: List of (source, target) node pairs
            capacities: List of edge capacities, all integral
        """
        self.logger = logging.getLogger(__name__)
        # Create mappings and data structures
        self._initialize_data_structures(edges, capacities)

        self.solver = None
        self._solved_pair: Optional[Tuple[str, str]] = None

    def _initialize_data_structures(self, edges: List[Tuple[str, str]], capacities: List[float]):
        """Initialize internal data structures."""
        # Create node index mappings
        unique_nodes = set()
        for u, v in edges:
            unique_nodes.add(u)
            unique_nodes.add(v)
        self.node_to_index = {node: idx for idx, node in enumerate(sorted(unique_nodes))}
        self.index_to_node = {idx: node for node, idx in self.node_to_index.items()}

        # Store edge data
        self.edges = []
        self.edge_data = {}  # (u, v) -> {capacity}
        self.outgoing_edges = defaultdict(list)  # node -> [neighbor]
        self.incoming_edges = defaultdict(list)  # node -> [neighbor]

        for (u, v), capacity in zip(edges, capacities):
            if float(capacity) != int(capacity):
                raise ValueError(f"OR-Tools requires integral capacities, got {capacity} on {u}->{v}")
            capacity = int(capacity)
            self.edges.append((u, v, capacity))
            if (u, v) not in self.edge_data:
                self.edge_data[(u, v)] = {'capacity': 0}
                self.outgoing_edges[u].append(v)
                self.incoming_edges[v].append(u)
            self.edge_data[(u, v)]['capacity'] += capacity

        # Nodes the solver knows about; self-loops are never handed to it
        self.arc_nodes = {node for u, v, _ in self.edges if u != v for node in (u, v)}

    def _initialize_solver(self) -> max_flow.SimpleMaxFlow:
        """Create an OR-Tools solver loaded with every edge except self-loops."""
        solver = max_flow.SimpleMaxFlow()
        for u, v, capacity in self.edges:
            if u != v:
                solver.add_arc_with_capacity(self.node_to_index[u], self.node_to_index[v], capacity)
        return solver

    def _solve(self, source: str, sink: str) -> max_flow.SimpleMaxFlow:
        self._check_terminals(source, sink)
        if self.solver is not None and self._solved_pair == (source, sink):
            return self.solver

        solver = self._initialize_solver()
        start_time = time.time()
        status = solver.solve(self.node_to_index[source], self.node_to_index[sink])
        self.logger.info(f"Solver Time: {time.time() - start_time:.6f}s")

        if status != solver.OPTIMAL:
            raise RuntimeError(f"OR-Tools solver failed to find optimal solution (status {status})")

        self.solver = solver
        self._solved_pair = (source, sink)
        return solver

    def compute_flow(self, source: str, sink: str) -> Tuple[int, Dict[str, Dict[str, int]]]:
        """
        Compute maximum flow between source and sink nodes using OR-Tools.
        """
        self._check_terminals(source, sink)
        if source == sink or source not in self.arc_nodes or sink not in self.arc_nodes:
            self.logger.info("Source or sink has no usable edges. No flow is possible.")
            return 0, {}

        solver = self._solve(source, sink)
        return self._build_flow_dict(solver)

    def _build_flow_dict(self, solver: max_flow.SimpleMaxFlow) -> Tuple[int, Dict[str, Dict[str, int]]]:
        """Build flow dictionary from solver results."""
        flow_value = int(solver.optimal_flow())

        flow_dict = {}
        for i in range(solver.num_arcs()):
            flow = int(solver.flow(i))
            if flow > 0:
                u = self.index_to_node[solver.tail(i)]
                v = self.index_to_node[solver.head(i)]
                flow_dict.setdefault(u, {})
                flow_dict[u][v] = flow_dict[u].get(v, 0) + flow

        return flow_value, flow_dict

    def minimum_cut(self, source: str, sink: str) -> Tuple[int, List[Tuple[str, str, int]]]:
        self._check_terminals(source, sink)
        if source == sink or source not in self.arc_nodes or sink not in self.arc_nodes:
            return 0, []

        solver = self._solve(source, sink)
        source_side = {self.index_to_node[int(idx)] for idx in solver.get_source_side_min_cut()}
        cut_edges = []
        for (u, v), data in self.edge_data.items():
            if data['capacity'] > 0 and u in source_side and v not in source_side:
                cut_edges.append((u, v, data['capacity']))
        return sum(capacity for _, _, capacity in cut_edges), cut_edges

    # BaseGraph interface implementation
    def num_vertices(self) -> int:
        return len(self.node_to_index)

    def num_edges(self) -> int:
        return len(self.edge_data)

    def get_vertices(self) -> Set[str]:
        return set(self.node_to_index.keys())

    def get_edges(self) -> List[Tuple[str, str, Dict[str, Any]]]:
        return [(u, v, data) for (u, v), data in self.edge_data.items()]

    def in_degree(self, vertex_id: str) -> int:
        return len(self.incoming_edges[vertex_id])

    def out_degree(self, vertex_id: str) -> int:
        return len(self.outgoing_edges[vertex_id])

    def predecessors(self, vertex_id: str) -> Iterator[str]:
        return iter(self.incoming_edges[vertex_id])

    def successors(self, vertex_id: str) -> Iterator[str]:
        return iter(self.outgoing_edges[vertex_id])

    def has_vertex(self, vertex_id: str) -> bool:
        return vertex_id in self.node_to_index

    def has_edge(self, u: str, v: str) -> bool:
        return (u, v) in self.edge_data

    def get_edge_data(self, u: str, v: str) -> Dict[str, Any]:
        return self.edge_data.get((u, v), {})

    def get_edge_capacity(self, u: str, v: str) -> Optional[int]:
        edge_data = self.edge_data.get((u, v))
        return edge_data['capacity'] if edge_data else None

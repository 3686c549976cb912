from abc import abstractmethod
from typing import Set, Dict, Any, Optional, Iterator, List, Tuple

GRAPH_TYPES = ('push_relabel', 'networkx', 'ortools')


class BaseGraph:
    """Abstract base class defining the interface for all graph implementations."""

    @abstractmethod
    def num_vertices(self) -> int:
        """Return the total number of vertices in the graph."""
        pass

    @abstractmethod
    def num_edges(self) -> int:
        """Return the total number of edges in the graph."""
        pass

    @abstractmethod
    def has_vertex(self, vertex_id: str) -> bool:
        """Check if a vertex exists in the graph."""
        pass

    @abstractmethod
    def has_edge(self, u: str, v: str) -> bool:
        """Check if an edge exists between two vertices."""
        pass

    @abstractmethod
    def get_edge_data(self, u: str, v: str) -> Dict[str, Any]:
        """Get edge attributes."""
        pass

    @abstractmethod
    def get_vertices(self) -> Set[str]:
        """Return set of all vertex IDs."""
        pass

    @abstractmethod
    def get_edges(self) -> List[Tuple[str, str, Dict[str, Any]]]:
        """Return list of all edges with their data."""
        pass

    @abstractmethod
    def in_degree(self, vertex_id: str) -> int:
        """Return number of incoming edges for a vertex."""
        pass

    @abstractmethod
    def out_degree(self, vertex_id: str) -> int:
        """Return number of outgoing edges for a vertex."""
        pass

    @abstractmethod
    def predecessors(self, vertex_id: str) -> Iterator[str]:
        """Return iterator over predecessor vertices."""
        pass

    @abstractmethod
    def successors(self, vertex_id: str) -> Iterator[str]:
        """Return iterator over successor vertices."""
        pass

    @abstractmethod
    def get_edge_capacity(self, u: str, v: str) -> Optional[float]:
        """Get capacity of edge between u and v."""
        pass

    @abstractmethod
    def compute_flow(self, source: str, sink: str) -> Tuple[float, Dict[str, Dict[str, float]]]:
        """Compute maximum flow between source and sink nodes."""
        pass

    @abstractmethod
    def minimum_cut(self, source: str, sink: str) -> Tuple[float, List[Tuple[str, str, float]]]:
        """
        Compute a minimum cut separating source from sink.

        Returns:
            Tuple of (cut capacity, [(u, v, capacity)] for edges leaving the source side)
        """
        pass

    def degree(self, vertex_id: str) -> int:
        """Return total degree (in + out) for a vertex."""
        return self.in_degree(vertex_id) + self.out_degree(vertex_id)

    def flow_decomposition(self, flow_dict: Dict[str, Dict[str, float]], source: str, sink: str,
                           requested_flow: Optional[float] = None) -> Tuple[List[Tuple[List[str], float]],
                                                                          Dict[Tuple[str, str], float]]:
        """Decompose flow into paths."""
        from .flow.decomposition import decompose_flow
        return decompose_flow(flow_dict, source, sink, requested_flow)

    def _check_terminals(self, source: str, sink: str) -> None:
        if not self.has_vertex(source) or not self.has_vertex(sink):
            raise ValueError(f"Source node '{source}' or sink node '{sink}' not in graph.")


class GraphCreator:
    @staticmethod
    def create_graph(graph_type: str, edges: List[Tuple[str, str]], capacities: List[float]) -> BaseGraph:
        """Factory method to create appropriate graph implementation."""
        if graph_type == 'push_relabel':
            from .push_relabel_graph import PushRelabelGraph
            return PushRelabelGraph(edges, capacities)
        elif graph_type == 'networkx':
            from .networkx_graph import NetworkXGraph
            return NetworkXGraph(edges, capacities)
        elif graph_type == 'ortools':
            from .ortools_graph import ORToolsGraph
            return ORToolsGraph(edges, capacities)
        else:
            raise ValueError(f"Unsupported graph type: {graph_type}")

from typing import List, Tuple, Dict, Optional, Hashable
import logging

from ..base import BaseGraph
from .utils import calculate_flow_metrics, verify_capacity_constraints, verify_flow_conservation

# Configure logging for the module
logger = logging.getLogger(__name__)

Path = Tuple[List[Hashable], float]
Cut = Tuple[float, List[Tuple[Hashable, Hashable, float]]]


class NetworkFlowAnalysis:
    """Handle flow analysis for all graph implementations."""

    def __init__(self, graph: BaseGraph):
        self.graph = graph
        self.logger = logging.getLogger(__name__)

    def analyze_flow(self, source: str, sink: str, requested_flow: Optional[float] = None
                     ) -> Tuple[float, List[Path], Dict[Tuple[str, str], float], Cut]:
        """
        Analyze flow between source and sink nodes.

        Args:
            source: Source node ID
            sink: Sink node ID
            requested_flow: Stop path decomposition after this much flow (optional)

        Returns:
            Tuple containing:
            - Flow value
            - Flow paths as (path, amount)
            - Edge flows carried by those paths
            - Minimum cut as (capacity, [(u, v, capacity)])
        """
        self.logger.info(f"Computing flow from {source} to {sink} with {self.graph.__class__.__name__}")
        flow_value, flow_dict = self.graph.compute_flow(source, sink)
        self.logger.info(f"Raw flow computation returned: {flow_value}")

        sink_flows = sum(flows.get(sink, 0) for flows in flow_dict.values())
        self.logger.debug(f"Total sink flow from dictionary: {sink_flows}")

        if not verify_flow_conservation(flow_dict, source, sink):
            self.logger.warning(f"Flow from {source} to {sink} violates conservation")
        if not verify_capacity_constraints(flow_dict, self.graph.get_edges()):
            self.logger.warning(f"Flow from {source} to {sink} exceeds edge capacities")

        paths, edge_flows = self.graph.flow_decomposition(flow_dict, source, sink, requested_flow)

        cut = self.graph.minimum_cut(source, sink)
        if cut[0] != flow_value:
            self.logger.warning(f"Cut capacity {cut[0]} differs from flow value {flow_value}")

        return flow_value, paths, edge_flows, cut

    def flow_metrics(self, paths: List[Path], edge_flows: Dict[Tuple[str, str], float]) -> Dict[str, float]:
        """Summary statistics of a decomposed flow."""
        return calculate_flow_metrics(paths, edge_flows)

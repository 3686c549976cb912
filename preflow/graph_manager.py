import pandas as pd
from typing import Dict, Iterable, List, Optional, Tuple, Union
import logging
import random

from .data_ingestion import DataIngestion
from .graph import GraphCreator, GRAPH_TYPES, NetworkFlowAnalysis

# Configure logging for the module
logger = logging.getLogger(__name__)


class GraphManager:
    def __init__(self, data_source: Union[str, pd.DataFrame], graph_type: str = 'push_relabel'):
        """
        Initialize the GraphManager from a CSV edge list or a DataFrame.

        Args:
            data_source: Either:
                - str: path to a CSV file with from/to/capacity columns
                - pd.DataFrame: the same columns already loaded
            graph_type: Graph backend ('push_relabel', 'networkx' or 'ortools')
        """
        self.logger = logging.getLogger(__name__)
        self.graph_type = graph_type
        self.data_ingestion = self._initialize_data_ingestion(data_source)

        self.graph = GraphCreator.create_graph(
            graph_type,
            self.data_ingestion.edges,
            self.data_ingestion.capacities
        )

        self.flow_analysis = NetworkFlowAnalysis(self.graph)

    def _initialize_data_ingestion(self, data_source) -> DataIngestion:
        """
        Initialize the data ingestion based on the data source type.
        """
        if isinstance(data_source, pd.DataFrame):
            return DataIngestion(data_source)

        elif isinstance(data_source, str):
            try:
                df_edges = pd.read_csv(data_source)
            except Exception as e:
                raise ValueError(f"Error reading CSV file: {str(e)}")
            return DataIngestion(df_edges)

        else:
            raise ValueError("data_source must be a CSV path or a DataFrame")

    def _resolve(self, source: str, sink: str) -> Tuple[str, str]:
        source_id = self.data_ingestion.get_id_for_label(source)
        sink_id = self.data_ingestion.get_id_for_label(sink)

        if source_id is None or sink_id is None:
            raise ValueError(f"Source '{source}' or sink '{sink}' not found in the graph.")

        return source_id, sink_id

    def analyze_flow(self, source: str, sink: str, requested_flow: Optional[float] = None):
        """
        Analyze flow between two labelled vertices.

        Returns:
            Tuple of (flow value, [(label path, amount)], {(label, label): flow},
            (cut capacity, [(label, label, capacity)]))
        """
        source_id, sink_id = self._resolve(source, sink)
        flow_value, paths, edge_flows, (cut_value, cut_edges) = self.flow_analysis.analyze_flow(
            source_id, sink_id, requested_flow
        )

        label = self.data_ingestion.get_label_for_id
        labelled_paths = [([label(node) for node in path], amount) for path, amount in paths]
        labelled_edge_flows = {(label(u), label(v)): flow for (u, v), flow in edge_flows.items()}
        labelled_cut = [(label(u), label(v), capacity) for u, v, capacity in cut_edges]

        return flow_value, labelled_paths, labelled_edge_flows, (cut_value, labelled_cut)

    def compare_backends(self, source: str, sink: str,
                         graph_types: Optional[Iterable[str]] = None) -> Dict[str, float]:
        """Compute the max flow value with several backends on the same edges. Backends that reject the data are skipped."""
        source_id, sink_id = self._resolve(source, sink)
        results = {}
        for graph_type in graph_types or GRAPH_TYPES:
            try:
                graph = GraphCreator.create_graph(
                    graph_type,
                    self.data_ingestion.edges,
                    self.data_ingestion.capacities
                )
            except ValueError as e:
                self.logger.warning(f"Skipping {graph_type}: {str(e)}")
                continue
            results[graph_type], _ = graph.compute_flow(source_id, sink_id)
            self.logger.info(f"{graph_type}: flow {results[graph_type]}")

        if len(set(results.values())) > 1:
            self.logger.warning(f"Backends disagree on flow {source}->{sink}: {results}")
        return results

    def get_node_info(self) -> str:
        """Get information about nodes in the graph."""
        nodes: List[str] = sorted(self.graph.get_vertices(), key=int)

        sample_nodes = random.sample(nodes, min(5, len(nodes)))
        sample_info = []
        for node in sample_nodes:
            label = self.data_ingestion.get_label_for_id(node)
            sample_info.append(
                f"Node ID: {node}, Label: {label}, "
                f"in: {self.graph.in_degree(node)}, out: {self.graph.out_degree(node)}"
            )
        return (
            f"Total nodes: {len(nodes)}\nTotal edges: {self.graph.num_edges()}\n"
            f"Sample nodes:\n" + "\n".join(sample_info)
        )

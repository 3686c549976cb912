from typing import Dict, List, Optional, Tuple
import argparse
import logging
import os
import time
from datetime import datetime

from .config import configure_logging, load_settings
from .graph import GRAPH_TYPES
from .graph_manager import GraphManager

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None, settings: Optional[Dict[str, str]] = None) -> argparse.Namespace:
    settings = settings or {}
    parser = argparse.ArgumentParser(
        prog='preflow',
        description='Maximum flow and minimum cut analysis of a capacitated edge list.'
    )
    parser.add_argument('edges', help='CSV file with from, to and capacity columns')
    parser.add_argument('--source', required=True, help='Label of the source vertex')
    parser.add_argument('--sink', required=True, help='Label of the sink vertex')
    parser.add_argument('--graph-type', choices=GRAPH_TYPES,
                        default=settings.get('graph_type', 'push_relabel'),
                        help='Graph backend used for the computation')
    parser.add_argument('--requested-flow', type=float, default=None,
                        help='Limit the path decomposition to this much flow')
    parser.add_argument('--compare', action='store_true',
                        help='Also compute the flow value with every backend')
    parser.add_argument('--output-dir', default=settings.get('output_dir', 'output'),
                        help='Directory for the results file')
    return parser.parse_args(argv)


def write_results(flow_value: float, execution_time: float, paths: List[Tuple[List[str], float]],
                  cut: Tuple[float, List[Tuple[str, str, float]]], source: str, sink: str,
                  output_dir: str, metrics: Optional[Dict[str, float]] = None) -> str:
    """Write analysis results to file."""
    os.makedirs(output_dir, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    filename = f"{output_dir}/flow_results_{timestamp}.txt"
    cut_value, cut_edges = cut

    with open(filename, 'w') as f:
        f.write("Flow Computation Results\n")
        f.write("=" * 50 + "\n\n")

        f.write(f"Source: {source}\n")
        f.write(f"Sink: {sink}\n")
        f.write(f"Total Flow: {flow_value:,}\n")
        f.write(f"Computation Time: {execution_time:.6f}s\n")
        f.write(f"Number of Distinct Paths: {len(paths)}\n")
        f.write(f"Minimum Cut Capacity: {cut_value:,}\n\n")

        f.write("Flow Paths:\n")
        f.write("-" * 50 + "\n")
        for path, amount in paths:
            f.write(f"{' -> '.join(path)}: {amount:,}\n")

        f.write("\nMinimum Cut Edges:\n")
        f.write("-" * 50 + "\n")
        for u, v, capacity in cut_edges:
            f.write(f"{u} -> {v}: {capacity:,}\n")

        if metrics:
            f.write("\nFlow Metrics:\n")
            f.write("-" * 50 + "\n")
            for name, value in metrics.items():
                f.write(f"{name}: {value:,}\n")

    return filename


def run_analysis(graph_manager: GraphManager, source: str, sink: str, output_dir: str,
                 requested_flow: Optional[float] = None) -> str:
    """Run flow analysis with given parameters."""
    start_time = time.time()
    flow_value, paths, edge_flows, cut = graph_manager.analyze_flow(source, sink, requested_flow)
    execution_time = time.time() - start_time
    metrics = graph_manager.flow_analysis.flow_metrics(paths, edge_flows)

    print(f"\nBackend: {graph_manager.graph_type}")
    print(f"Execution time: {execution_time:.4f} seconds")
    print(f"Flow value: {flow_value:,}")
    print(f"Minimum cut: {cut[0]:,} over {len(cut[1])} edges")
    print(f"Paths: {metrics['num_paths']}, edges used: {metrics['unique_edges']}")

    filename = write_results(flow_value, execution_time, paths, cut, source, sink, output_dir, metrics)
    print(f"\nResults written to {filename}")
    return filename


def main(argv: Optional[List[str]] = None) -> int:
    try:
        settings = load_settings()
        configure_logging(settings['log_level'])
        args = parse_args(argv, settings)

        logger.info(f"Loading {args.edges} with the {args.graph_type} backend")
        graph_manager = GraphManager(args.edges, args.graph_type)
        logger.info(graph_manager.get_node_info())

        run_analysis(graph_manager, args.source, args.sink, args.output_dir, args.requested_flow)

        if args.compare:
            print("\nBackend comparison:")
            for graph_type, value in graph_manager.compare_backends(args.source, args.sink).items():
                print(f"  {graph_type}: {value:,}")

    except Exception as e:
        logger.error(f"Error during analysis: {str(e)}", exc_info=True)
        return 1

    return 0


if __name__ == "__main__":
    exit(main())

from typing import Dict, List, Tuple, Hashable, Iterable
from collections import defaultdict

Node = Hashable
FlowDict = Dict[Node, Dict[Node, float]]


def find_flow_path(flow_dict: FlowDict, source: Node, sink: Node) -> List[Node]:
    """Find a path with positive flow using iterative DFS."""
    visited = {source}
    path = [source]
    stack = [(source, iter(flow_dict.get(source, {}).items()))]

    while stack:
        current, edges = stack[-1]
        try:
            next_node, flow = next(edges)
            if flow > 0 and next_node not in visited:
                if next_node == sink:
                    path.append(next_node)
                    return path
                visited.add(next_node)
                path.append(next_node)
                stack.append((next_node, iter(flow_dict.get(next_node, {}).items())))
        except StopIteration:
            stack.pop()
            if path:
                path.pop()

    return []


def update_residual_graph(residual_flow: FlowDict, path: List[Node], path_flow: float) -> None:
    """Remove path_flow from every edge of path, dropping edges that run dry."""
    for u, v in zip(path[:-1], path[1:]):
        residual_flow[u][v] -= path_flow
        if residual_flow[u][v] <= 0:
            del residual_flow[u][v]
        if not residual_flow[u]:
            del residual_flow[u]


def net_flows(flow_dict: FlowDict) -> Dict[Node, float]:
    """Inflow minus outflow for every node mentioned in flow_dict."""
    balance = defaultdict(int)
    for u, flows in flow_dict.items():
        for v, flow in flows.items():
            balance[u] -= flow
            balance[v] += flow
    return dict(balance)


def verify_flow_conservation(flow_dict: FlowDict, source: Node, sink: Node,
                             tolerance: float = 1e-9) -> bool:
    """Verify flow conservation at intermediate nodes."""
    for node, balance in net_flows(flow_dict).items():
        if node not in (source, sink) and abs(balance) > tolerance:
            return False
    return True


def verify_capacity_constraints(flow_dict: FlowDict, edges: Iterable[Tuple[Node, Node, dict]],
                                tolerance: float = 1e-9) -> bool:
    """Verify 0 <= flow <= capacity on every edge."""
    capacities = {(u, v): data['capacity'] for u, v, data in edges}
    for u, flows in flow_dict.items():
        for v, flow in flows.items():
            capacity = capacities.get((u, v))
            if capacity is None or flow < -tolerance or flow > capacity + tolerance:
                return False
    return True


def calculate_flow_metrics(paths: List[Tuple[List[Node], float]],
                           edge_flows: Dict[Tuple[Node, Node], float]) -> Dict[str, float]:
    """Calculate flow metrics."""
    if not paths:
        return {
            'total_flow': 0,
            'num_paths': 0,
            'average_path_flow': 0,
            'max_path_flow': 0,
            'min_path_flow': 0,
            'unique_edges': 0,
            'average_edge_flow': 0,
        }

    flows = [flow for _, flow in paths]
    total_flow = sum(flows)

    metrics = {
        'total_flow': total_flow,
        'num_paths': len(paths),
        'average_path_flow': total_flow / len(paths),
        'max_path_flow': max(flows),
        'min_path_flow': min(flows),
        'unique_edges': len(edge_flows),
        'average_edge_flow': total_flow / len(edge_flows) if edge_flows else 0,
    }

    # Add path length statistics
    path_lengths = [len(path) for path, _ in paths]
    metrics.update({
        'average_path_length': sum(path_lengths) / len(path_lengths),
        'max_path_length': max(path_lengths),
        'min_path_length': min(path_lengths),
    })

    return metrics

from typing import Dict, List, Tuple, Optional
from .utils import FlowDict, Node, find_flow_path, update_residual_graph


def decompose_flow(flow_dict: FlowDict, source: Node, sink: Node,
                   requested_flow: Optional[float] = None) -> Tuple[List[Tuple[List[Node], float]],
                                                                    Dict[Tuple[Node, Node], float]]:
    """
    Decompose a flow into source-to-sink paths.

    Flow circulating on cycles that never reaches the sink is left out.

    Args:
        flow_dict: Flows as {u: {v: flow}}
        source: Source node
        sink: Sink node
        requested_flow: Stop once this much flow has been assigned to paths (optional)

    Returns:
        Tuple of ([(path, amount)], {(u, v): flow carried by the returned paths})
    """
    paths = []
    edge_flows = {}
    current_flow = 0
    if source == sink:
        return paths, edge_flows

    # Build residual flow graph
    residual_flow = {u: {v: f for v, f in flows.items() if f > 0} for u, flows in flow_dict.items()}

    while True:
        # Find a path from source to sink with positive flow
        path = find_flow_path(residual_flow, source, sink)
        if not path:
            break

        # Calculate path flow
        path_flow = min(residual_flow[u][v] for u, v in zip(path[:-1], path[1:]))

        # Apply flow limit if requested
        if requested_flow is not None:
            remaining_flow = requested_flow - current_flow
            if remaining_flow <= 0:
                break
            path_flow = min(path_flow, remaining_flow)

        # Update flows
        for u, v in zip(path[:-1], path[1:]):
            edge_flows[(u, v)] = edge_flows.get((u, v), 0) + path_flow

        # Update residual graph
        update_residual_graph(residual_flow, path, path_flow)

        paths.append((path, path_flow))
        current_flow += path_flow

        if requested_flow is not None and current_flow >= requested_flow:
            break

    return paths, edge_flows


__all__ = ['decompose_flow']

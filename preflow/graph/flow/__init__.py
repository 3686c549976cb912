from .analysis import NetworkFlowAnalysis
from .decomposition import decompose_flow
from .utils import (
    find_flow_path,
    update_residual_graph,
    net_flows,
    verify_flow_conservation,
    verify_capacity_constraints,
    calculate_flow_metrics
)

__all__ = [
    'NetworkFlowAnalysis',
    'decompose_flow',
    'find_flow_path',
    'update_residual_graph',
    'net_flows',
    'verify_flow_conservation',
    'verify_capacity_constraints',
    'calculate_flow_metrics',
]

from .base import BaseGraph, GraphCreator, GRAPH_TYPES
from .push_relabel import MaxFlowNetwork
from .push_relabel_graph import PushRelabelGraph
from .networkx_graph import NetworkXGraph
from .ortools_graph import ORToolsGraph
from .flow.analysis import NetworkFlowAnalysis

__all__ = [
    'BaseGraph',
    'GraphCreator',
    'GRAPH_TYPES',
    'MaxFlowNetwork',
    'PushRelabelGraph',
    'NetworkXGraph',
    'ORToolsGraph',
    'NetworkFlowAnalysis'
]

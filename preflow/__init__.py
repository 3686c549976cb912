from .graph_manager import GraphManager
from .data_ingestion import DataIngestion
from .graph import MaxFlowNetwork, GraphCreator, NetworkFlowAnalysis

__all__ = [
    'GraphManager',
    'DataIngestion',
    'MaxFlowNetwork',
    'GraphCreator',
    'NetworkFlowAnalysis'
]

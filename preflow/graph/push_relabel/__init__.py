from .residual import Edge, ResidualGraph
from .labels import LabelTracker
from .scheduler import ActiveVertexScheduler
from .discharge import DischargeEngine
from .network import MaxFlowNetwork

__all__ = [
    'Edge',
    'ResidualGraph',
    'LabelTracker',
    'ActiveVertexScheduler',
    'DischargeEngine',
    'MaxFlowNetwork',
]

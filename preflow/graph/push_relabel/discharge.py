from typing import Dict
import logging

from .labels import LabelTracker
from .residual import Edge, ResidualGraph
from .scheduler import ActiveVertexScheduler

# Configure logging for the module
logger = logging.getLogger(__name__)


class DischargeEngine:
    """Push, relabel and gap logic applied to the highest-label active vertex until none is left."""

    def __init__(self, graph: ResidualGraph, labels: LabelTracker, scheduler: ActiveVertexScheduler):
        self.graph = graph
        self.labels = labels
        self.scheduler = scheduler
        self.stats: Dict[str, int] = {'pushes': 0, 'relabels': 0, 'gaps': 0, 'discharges': 0}
        self.logger = logging.getLogger(__name__)

    def push(self, edge: Edge):
        """Push as much excess as the arc allows if it is admissible. Returns the amount moved."""
        excess = self.labels.excess
        amount = min(excess[edge.tail], edge.residual())
        if amount <= 0 or not self.labels.is_admissible(edge):
            return 0

        self.graph.push(edge, amount)
        excess[edge.tail] -= amount
        excess[edge.head] += amount
        self.scheduler.enqueue(edge.head)
        self.stats['pushes'] += 1
        return amount

    def discharge(self, v: int) -> None:
        excess = self.labels.excess
        arcs = self.graph.adj[v]
        for e in arcs:
            if excess[v] <= 0:
                break
            self.push(e)

        if excess[v] > 0:
            if self.labels.is_sole_occupant(v):
                k = self.labels.label[v]
                moved = self.labels.gap(k)
                self.stats['gaps'] += 1
                self.logger.debug(f"Gap at label {k} lifted {len(moved)} vertices")
                for w in moved:
                    self.scheduler.enqueue(w)
            else:
                self.labels.relabel(v, arcs)
                self.stats['relabels'] += 1
                self.scheduler.enqueue(v)

    def run(self) -> Dict[str, int]:
        """Discharge active vertices highest label first until the buckets are empty."""
        while True:
            v = self.scheduler.pop_highest()
            if v is None:
                break
            self.stats['discharges'] += 1
            self.discharge(v)
        return self.stats

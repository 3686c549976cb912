from typing import List, Optional

from .labels import LabelTracker


class ActiveVertexScheduler:
    """Buckets of active vertices keyed by label, served highest label first."""

    def __init__(self, labels: LabelTracker):
        self.labels = labels
        self.buckets: List[List[int]] = [[] for _ in range(labels.n)]
        self.active: List[bool] = [False] * labels.n
        self.top = -1

    def exclude(self, v: int) -> None:
        """Keep v out of the buckets for the whole computation."""
        self.active[v] = True

    def enqueue(self, v: int) -> bool:
        label = self.labels.label[v]
        if self.active[v] or self.labels.excess[v] <= 0 or label >= self.labels.n:
            return False
        self.active[v] = True
        self.buckets[label].append(v)
        if label > self.top:
            self.top = label
        return True

    def pop_highest(self) -> Optional[int]:
        """Pop a vertex from the highest non-empty bucket, or None when all are empty."""
        while self.top >= 0:
            bucket = self.buckets[self.top]
            if bucket:
                v = bucket.pop()
                self.active[v] = False
                return v
            self.top -= 1
        return None

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self.buckets)

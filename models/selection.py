"""
Capacity-limited stores of edge candidates.

Two ranking policies share one interface (add / finalize / count / get):

- MagnitudeRankedSelection keeps the `max_edges` strongest candidates
  (ties go to the earliest position) and exposes them by position.
- RecencyBoundedSelection keeps the `max_edges` most recent insertions
  in insertion order.

Reads are only valid after finalize(); writes only before it.
"""

import heapq
from collections import deque
from typing import Iterator, List

from errors import ConfigurationError, SelectionStateError
from models.edge_candidate import EdgeCandidate
from utils.color_distance import RankingPolicy


class BoundedSelection:

    def __init__(self, max_edges: int):
        if max_edges < 0:
            raise ConfigurationError(f"max_edges must be >= 0, got {max_edges}")
        self.max_edges = max_edges
        self._frozen = None

    # ------------------------------------------------------------
    # Policy hooks
    # ------------------------------------------------------------
    def _insert(self, candidate: EdgeCandidate):
        raise NotImplementedError

    def _retained(self) -> List[EdgeCandidate]:
        raise NotImplementedError

    # ------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------
    @property
    def finalized(self) -> bool:
        return self._frozen is not None

    def add(self, candidate: EdgeCandidate):
        if self.finalized:
            raise SelectionStateError("cannot add to a finalized selection")
        self._insert(candidate)

    def finalize(self):
        """Freeze the retained candidates. Calling it again is a no-op."""
        if self._frozen is None:
            self._frozen = tuple(self._retained())

    def count(self) -> int:
        self._require_finalized()
        return len(self._frozen)

    def get(self, i: int) -> EdgeCandidate:
        self._require_finalized()
        return self._frozen[i]

    def _require_finalized(self):
        if self._frozen is None:
            raise SelectionStateError("selection must be finalized before reading")

    def __len__(self):
        return self.count()

    def __iter__(self) -> Iterator[EdgeCandidate]:
        self._require_finalized()
        return iter(self._frozen)


class MagnitudeRankedSelection(BoundedSelection):
    """
    Min-heap keyed on (strength, -position, -seq): the root is always the
    weakest candidate, and among equals the latest position.
    """

    def __init__(self, max_edges: int):
        super().__init__(max_edges)
        self._heap = []
        self._seq = 0

    def _insert(self, candidate):
        if self.max_edges == 0:
            return
        self._seq += 1
        entry = (candidate.strength, -candidate.position, -self._seq, candidate)
        if len(self._heap) < self.max_edges:
            heapq.heappush(self._heap, entry)
        else:
            heapq.heappushpop(self._heap, entry)

    def _retained(self):
        return sorted((entry[3] for entry in self._heap), key=lambda c: c.position)


class RecencyBoundedSelection(BoundedSelection):
    """Fixed-capacity FIFO: overflow evicts the oldest candidate."""

    def __init__(self, max_edges: int):
        super().__init__(max_edges)
        self._items = deque(maxlen=max_edges)

    def _insert(self, candidate):
        self._items.append(candidate)

    def _retained(self):
        return list(self._items)


def make_selection(policy: RankingPolicy, max_edges: int) -> BoundedSelection:
    """
    Build the selection matching a distance function's ranking policy.
    """
    if policy is RankingPolicy.MAGNITUDE:
        return MagnitudeRankedSelection(max_edges)
    return RecencyBoundedSelection(max_edges)

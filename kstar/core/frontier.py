"""Open lists of known but unexamined nodes.

Both implementations keep at most one live entry per value. Inserting a
value that is already present only takes effect when the new entry is
strictly cheaper, in which case it replaces the old one (and its parent
link). Among entries with equal cost the one inserted earliest is taken
first.
"""

from __future__ import annotations

import heapq
import itertools
from abc import ABC, abstractmethod
from typing import Dict, Generic, List, Optional

from .node import Node, V
from .scored_node import ScoredNode


class BaseFrontier(ABC, Generic[V]):
    """Common interface for open-list implementations."""

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity

    @abstractmethod
    def insert_if_better(self, candidate: ScoredNode[V]) -> bool:
        """Add ``candidate`` unless an equal or cheaper entry exists.

        Returns ``True`` when the frontier changed.
        """
        raise NotImplementedError

    @abstractmethod
    def take_best(self) -> Optional[Node[V]]:
        """Remove and return the cheapest node, or ``None`` if empty."""
        raise NotImplementedError

    @abstractmethod
    def get(self, value: V) -> Optional[ScoredNode[V]]:
        """Return the live entry for ``value`` if there is one."""
        raise NotImplementedError

    @abstractmethod
    def __len__(self) -> int:
        raise NotImplementedError

    def __bool__(self) -> bool:
        return len(self) > 0

    def __contains__(self, value: object) -> bool:
        return self.get(value) is not None  # type: ignore[arg-type]


class Frontier(BaseFrontier[V]):
    """Binary heap with a value index.

    Replaced entries stay in the heap marked as dead and are discarded when
    they surface, so both operations run in logarithmic time.
    """

    _DEAD = None

    def __init__(self, capacity: int = 0) -> None:
        super().__init__(capacity)
        # Heap items are ``[cost_distance, sequence, scored_node]``.
        self._heap: List[list] = []
        self._entries: Dict[V, list] = {}
        self._sequence = itertools.count()

    def insert_if_better(self, candidate: ScoredNode[V]) -> bool:
        value = candidate.value
        existing = self._entries.get(value)
        if existing is not None:
            if existing[2].cost_distance <= candidate.cost_distance:
                return False
            existing[2] = self._DEAD
        entry = [candidate.cost_distance, next(self._sequence), candidate]
        self._entries[value] = entry
        heapq.heappush(self._heap, entry)
        return True

    def take_best(self) -> Optional[Node[V]]:
        while self._heap:
            _, _, scored = heapq.heappop(self._heap)
            if scored is self._DEAD:
                continue
            del self._entries[scored.value]
            return scored.node
        return None

    def get(self, value: V) -> Optional[ScoredNode[V]]:
        entry = self._entries.get(value)
        return None if entry is None else entry[2]

    def __len__(self) -> int:
        return len(self._entries)


class ScanFrontier(BaseFrontier[V]):
    """Plain list searched linearly on every operation.

    Fine for small graphs and handy as a reference when checking
    :class:`Frontier`.
    """

    def __init__(self, capacity: int = 0) -> None:
        super().__init__(capacity)
        self._nodes: List[ScoredNode[V]] = []

    def _index_of(self, value: V) -> int:
        for i, scored in enumerate(self._nodes):
            if scored.value == value:
                return i
        return -1

    def insert_if_better(self, candidate: ScoredNode[V]) -> bool:
        index = self._index_of(candidate.value)
        if index >= 0:
            if self._nodes[index].cost_distance <= candidate.cost_distance:
                return False
            del self._nodes[index]
        self._nodes.append(candidate)
        return True

    def take_best(self) -> Optional[Node[V]]:
        if not self._nodes:
            return None
        best = min(range(len(self._nodes)), key=lambda i: self._nodes[i].cost_distance)
        return self._nodes.pop(best).node

    def get(self, value: V) -> Optional[ScoredNode[V]]:
        index = self._index_of(value)
        return None if index < 0 else self._nodes[index]

    def __len__(self) -> int:
        return len(self._nodes)


FRONTIER_KINDS = {
    "heap": Frontier,
    "scan": ScanFrontier,
}


def make_frontier(kind: str = "heap", capacity: int = 0) -> BaseFrontier:
    """Return an empty frontier of the named ``kind``."""

    try:
        cls = FRONTIER_KINDS[kind]
    except KeyError:
        raise ValueError(f"Unknown frontier kind: {kind}") from None
    return cls(capacity)


__all__ = [
    "BaseFrontier",
    "Frontier",
    "ScanFrontier",
    "FRONTIER_KINDS",
    "make_frontier",
]

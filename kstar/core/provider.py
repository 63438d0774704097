"""Interface for objects that describe the graph being searched."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Iterable

from .node import Node, V


class NodeProvider(ABC, Generic[V]):
    """Supply adjacency and distance estimates for a graph of ``V`` values.

    Implementations must be deterministic: the same node always yields the
    same neighbours. A provider without internal state can be shared by any
    number of search sessions.
    """

    @abstractmethod
    def get_adjacent_nodes(self, node: Node[V]) -> Iterable[Node[V]]:
        """Return a new node for every value adjacent to ``node``.

        Each result should be built with ``Node.from_parent(node, value,
        step_cost)`` so its distance from the start includes the step.
        """
        raise NotImplementedError

    @abstractmethod
    def get_min_distance_to_target(self, value: V, target_value: V) -> float:
        """Estimate the remaining distance assuming no obstructions.

        The estimate must never exceed the real cost under the provider's
        movement rules, must be non-negative and must be ``0`` when
        ``value == target_value``.
        """
        raise NotImplementedError

    @abstractmethod
    def get_node_count(self) -> int:
        """Return the total number of nodes (a sizing hint only)."""
        raise NotImplementedError


__all__ = ["NodeProvider"]

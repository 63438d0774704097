"""Nodes paired with their A* cost distance."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic

from .node import Node, V


@dataclass(frozen=True, slots=True)
class ScoredNode(Generic[V]):
    """A node with its total estimated cost through to the target.

    ``cost_distance`` is the distance travelled from the start plus the
    heuristic distance to the target. Build instances with :meth:`for_start`
    or :meth:`for_node` so the two terms always add up.
    """

    node: Node[V]
    cost_distance: float

    @classmethod
    def for_start(cls, value: V, min_distance_to_target: float) -> ScoredNode[V]:
        """Wrap ``value`` in a fresh start node."""

        return cls(Node(value), float(min_distance_to_target))

    @classmethod
    def for_node(cls, node: Node[V], min_distance_to_target: float) -> ScoredNode[V]:
        """Score an existing ``node`` that is ``min_distance_to_target`` from the goal."""

        return cls(node, min_distance_to_target + node.distance_from_start)

    @property
    def value(self) -> V:
        return self.node.value


__all__ = ["ScoredNode"]

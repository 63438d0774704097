"""Node provider backed by an explicit weighted adjacency mapping."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from ..core.node import Node, V
from ..core.provider import NodeProvider


Heuristic = Callable[[V, V], float]


class GraphProvider(NodeProvider[V]):
    """Serve neighbours from ``edges``, a mapping of value to ``{neighbour: cost}``.

    Without a ``heuristic`` every estimate is ``0`` and the search behaves
    like Dijkstra's algorithm.
    """

    def __init__(
        self,
        edges: Mapping[V, Mapping[V, float]],
        heuristic: Optional[Heuristic] = None,
        undirected: bool = False,
    ) -> None:
        self._edges: Dict[V, Dict[V, float]] = {}
        for source, targets in edges.items():
            for dest, cost in targets.items():
                self.add_edge(source, dest, cost, undirected=undirected)
            self._edges.setdefault(source, {})
        self._heuristic = heuristic

    @classmethod
    def from_edge_list(
        cls,
        edges: Iterable[Tuple[V, V, float]],
        heuristic: Optional[Heuristic] = None,
        undirected: bool = False,
    ) -> GraphProvider[V]:
        """Build a provider from ``(source, dest, cost)`` triples."""

        provider: GraphProvider[V] = cls({}, heuristic=heuristic)
        for source, dest, cost in edges:
            provider.add_edge(source, dest, cost, undirected=undirected)
        return provider

    def add_edge(self, source: V, dest: V, cost: float, undirected: bool = False) -> None:
        if cost < 0:
            raise ValueError(f"negative edge cost {cost!r} from {source!r} to {dest!r}")
        self._edges.setdefault(source, {})[dest] = float(cost)
        self._edges.setdefault(dest, {})
        if undirected:
            self._edges[dest][source] = float(cost)

    def neighbours(self, value: V) -> Dict[V, float]:
        return dict(self._edges.get(value, {}))

    # ------------------------------------------------------------------
    # NodeProvider
    # ------------------------------------------------------------------
    def get_adjacent_nodes(self, node: Node[V]) -> List[Node[V]]:
        return [
            Node.from_parent(node, dest, cost)
            for dest, cost in self._edges.get(node.value, {}).items()
        ]

    def get_min_distance_to_target(self, value: V, target_value: V) -> float:
        if self._heuristic is None:
            return 0.0
        return self._heuristic(value, target_value)

    def get_node_count(self) -> int:
        return len(self._edges)


__all__ = ["GraphProvider", "Heuristic"]

"""Incremental A* search over a :class:`NodeProvider` graph."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, FrozenSet, Generic, Optional, Set, Tuple

from ..config import CONFIG
from ..errors import ProviderContractError, SessionStateError
from .frontier import BaseFrontier, make_frontier
from .node import Node, V
from .provider import NodeProvider
from .scored_node import ScoredNode

logger = logging.getLogger(__name__)


class SearchState(Enum):
    """Lifecycle of a search session."""

    RUNNING = "running"
    COMPLETE_WITH_PATH = "complete_with_path"
    COMPLETE_NO_PATH = "complete_no_path"


class Pathfinder(Generic[V]):
    """Find the cheapest path from ``start`` to ``target``.

    The search advances only when asked to. Call :meth:`process_nodes` once
    per frame to spread the work over time, or :meth:`process_all_nodes` to
    finish in one go. A target that cannot be reached is not an error: the
    session ends in ``COMPLETE_NO_PATH`` with an empty :attr:`path`.

    Parameters
    ----------
    provider:
        Supplies neighbours and distance estimates.
    start, target:
        Hashable graph values.
    frontier:
        Open-list implementation, ``"heap"`` or ``"scan"``. Defaults to the
        configured ``search.frontier``.
    validate:
        Check every provider result and raise
        :class:`~kstar.errors.ProviderContractError` on bad data. Defaults to
        the configured ``search.validate_provider``.
    """

    def __init__(
        self,
        provider: NodeProvider[V],
        start: V,
        target: V,
        *,
        frontier: Optional[str] = None,
        validate: Optional[bool] = None,
    ) -> None:
        self._provider = provider
        self._start = start
        self._target = target
        self._validate = CONFIG.search.validate_provider if validate is None else validate

        capacity = max(int(provider.get_node_count()), 0)
        self._frontier: BaseFrontier[V] = make_frontier(
            frontier or CONFIG.search.frontier, capacity
        )
        self._examined: Set[V] = set()

        self._state = SearchState.RUNNING
        self._path: Tuple[V, ...] = ()
        self._final_node: Optional[Node[V]] = None
        self._examined_node_count = 0
        self._stepping = False

        self._frontier.insert_if_better(
            ScoredNode.for_start(start, self._distance_to_target(start))
        )
        logger.debug(
            "Search %r -> %r created (capacity hint %d)", start, target, capacity
        )

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------
    @property
    def start(self) -> V:
        return self._start

    @property
    def target(self) -> V:
        return self._target

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def is_complete(self) -> bool:
        return self._state is not SearchState.RUNNING

    @property
    def is_complete_and_path_exists(self) -> bool:
        return self._state is SearchState.COMPLETE_WITH_PATH

    @property
    def path(self) -> Tuple[V, ...]:
        """Values from start to target, empty unless a path was found."""

        return self._path

    @property
    def path_cost(self) -> Optional[float]:
        """Total distance along :attr:`path`, ``None`` unless a path was found."""

        if self._final_node is None:
            return None
        return self._final_node.distance_from_start

    @property
    def examined_node_count(self) -> int:
        return self._examined_node_count

    @property
    def frontier_size(self) -> int:
        return len(self._frontier)

    @property
    def examined_values(self) -> FrozenSet[V]:
        return frozenset(self._examined)

    # ------------------------------------------------------------------
    # Driving the search
    # ------------------------------------------------------------------
    def process_nodes(self, number_of_nodes: Optional[int] = None) -> bool:
        """Examine up to ``number_of_nodes`` nodes.

        ``number_of_nodes`` defaults to the configured
        ``search.nodes_per_step``. Returns ``True`` once the search is
        complete. Calling this on a complete session does nothing.
        """

        if number_of_nodes is None:
            number_of_nodes = CONFIG.search.nodes_per_step
        if number_of_nodes < 0:
            raise ValueError("number_of_nodes must be non-negative")
        for _ in range(number_of_nodes):
            if self.process_best_node():
                break
        return self.is_complete

    def process_all_nodes(self) -> bool:
        """Run the search until a path is found or ruled out."""

        while not self.process_best_node():
            pass
        return True

    def process_best_node(self) -> bool:
        """Examine the cheapest known node. Returns ``True`` when complete."""

        if self.is_complete:
            return True
        if self._stepping:
            raise SessionStateError("search session stepped re-entrantly")
        self._stepping = True
        try:
            return self._step()
        finally:
            self._stepping = False

    def _step(self) -> bool:
        examined_node = self._frontier.take_best()
        if examined_node is None:
            self._finish(SearchState.COMPLETE_NO_PATH)
            return True

        self._examined_node_count += 1

        if examined_node.value == self._target:
            self._final_node = examined_node
            self._path = tuple(examined_node.path_values())
            self._finish(SearchState.COMPLETE_WITH_PATH)
            return True

        self._examined.add(examined_node.value)

        for adjacent in self._provider.get_adjacent_nodes(examined_node):
            if self._validate:
                self._check_adjacent(examined_node, adjacent)
            if adjacent.value in self._examined:
                continue
            scored = ScoredNode.for_node(adjacent, self._distance_to_target(adjacent.value))
            if self._frontier.insert_if_better(scored):
                logger.debug(
                    "Queued %r at cost %.3f via %r",
                    adjacent.value,
                    scored.cost_distance,
                    examined_node.value,
                )
        return False

    def _finish(self, state: SearchState) -> None:
        self._state = state
        logger.info(
            "Search %r -> %r finished: %s after examining %d nodes",
            self._start,
            self._target,
            state.value,
            self._examined_node_count,
        )

    # ------------------------------------------------------------------
    # Provider checks
    # ------------------------------------------------------------------
    def _distance_to_target(self, value: V) -> float:
        distance = self._provider.get_min_distance_to_target(value, self._target)
        if self._validate:
            if distance < 0:
                raise ProviderContractError(
                    f"negative distance estimate {distance!r} for {value!r}"
                )
            if value == self._target and distance != 0:
                raise ProviderContractError(
                    f"non-zero distance estimate {distance!r} at the target"
                )
        return distance

    @staticmethod
    def _check_adjacent(parent: Node[V], adjacent: Any) -> None:
        if not isinstance(adjacent, Node):
            raise ProviderContractError(f"adjacent entry {adjacent!r} is not a Node")
        if adjacent.parent is not parent:
            raise ProviderContractError(
                f"adjacent node {adjacent.value!r} was not built from {parent.value!r}"
            )


def find_path(
    provider: NodeProvider[V], start: V, target: V, **kwargs: Any
) -> Tuple[V, ...]:
    """Return the cheapest path from ``start`` to ``target`` or ``()``."""

    pathfinder = Pathfinder(provider, start, target, **kwargs)
    pathfinder.process_all_nodes()
    return pathfinder.path


__all__ = ["SearchState", "Pathfinder", "find_path"]

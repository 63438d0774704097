"""Grid-based node provider."""

from __future__ import annotations

import math
from typing import Iterable, List, Set, Tuple

from ..core.node import Node
from ..core.provider import NodeProvider


Coord = Tuple[int, int]

_CARDINAL: Tuple[Coord, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
_DIAGONAL: Tuple[Coord, ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
_SQRT2 = math.sqrt(2.0)


def manhattan(a: Coord, b: Coord) -> float:
    """Return estimated distance between two points.

    This uses Manhattan distance which works well for a 4-neighbour grid.
    """

    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def octile(a: Coord, b: Coord) -> float:
    """Return the exact obstacle-free distance on an 8-neighbour grid."""

    dx = abs(a[0] - b[0])
    dy = abs(a[1] - b[1])
    return max(dx, dy) + (_SQRT2 - 1.0) * min(dx, dy)


class GridProvider(NodeProvider[Coord]):
    """Rectangular grid of ``(x, y)`` cells with optional obstacles.

    Cardinal moves cost ``1``. With ``diagonal=True`` the four diagonal
    moves are allowed too at a cost of ``sqrt(2)``.
    """

    def __init__(
        self,
        width: int,
        height: int,
        obstacles: Iterable[Coord] = (),
        diagonal: bool = False,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("grid dimensions must be positive")
        self.width = width
        self.height = height
        self.diagonal = diagonal
        self.obstacles: Set[Coord] = set()
        self.set_obstacles(obstacles)

    # ------------------------------------------------------------------
    # Obstacles
    # ------------------------------------------------------------------
    def set_obstacles(self, coords: Iterable[Coord]) -> None:
        """Replace the obstacle set with ``coords``."""

        self.obstacles = {tuple(c) for c in coords}  # type: ignore[misc]

    def clear_obstacles(self) -> None:
        """Remove all obstacles."""

        self.obstacles.clear()

    def in_bounds(self, pos: Coord) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def is_blocked(self, pos: Coord) -> bool:
        """Return ``True`` if ``pos`` is outside the grid or an obstacle."""

        return not self.in_bounds(pos) or pos in self.obstacles

    def _steps(self) -> List[Tuple[Coord, float]]:
        steps = [(d, 1.0) for d in _CARDINAL]
        if self.diagonal:
            steps.extend((d, _SQRT2) for d in _DIAGONAL)
        return steps

    # ------------------------------------------------------------------
    # NodeProvider
    # ------------------------------------------------------------------
    def get_adjacent_nodes(self, node: Node[Coord]) -> List[Node[Coord]]:
        x, y = node.value
        adjacent = []
        for (dx, dy), cost in self._steps():
            pos = (x + dx, y + dy)
            if self.is_blocked(pos):
                continue
            adjacent.append(Node.from_parent(node, pos, cost))
        return adjacent

    def get_min_distance_to_target(self, value: Coord, target_value: Coord) -> float:
        if self.diagonal:
            return octile(value, target_value)
        return manhattan(value, target_value)

    def get_node_count(self) -> int:
        return self.width * self.height - len(self.obstacles)


__all__ = ["Coord", "GridProvider", "manhattan", "octile"]

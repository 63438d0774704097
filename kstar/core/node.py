"""Search nodes and path reconstruction."""

from __future__ import annotations

from dataclasses import InitVar, dataclass, field
from typing import Generic, Hashable, Iterator, List, Optional, TypeVar

from ..errors import ProviderContractError


V = TypeVar("V", bound=Hashable)


@dataclass(frozen=True, eq=False, slots=True)
class Node(Generic[V]):
    """A graph value plus the route through which it was discovered.

    ``value`` may be anything with unique meaning and a stable hash (a
    coordinate pair, a tile, a city name, ...). ``distance_from_start`` is
    derived from the parent and the step cost and cannot be passed in.

    Nodes compare by identity. Two nodes describing the same graph state are
    told apart from duplicates by their ``value`` only.
    """

    value: V
    parent: Optional[Node[V]] = field(default=None, repr=False)
    step_cost: InitVar[float] = 0.0
    distance_from_start: float = field(init=False)

    def __post_init__(self, step_cost: float) -> None:
        if self.parent is None:
            if step_cost:
                raise ProviderContractError("start node cannot have a step cost")
            distance = 0.0
        else:
            if step_cost < 0:
                raise ProviderContractError(
                    f"negative step cost {step_cost!r} to {self.value!r}"
                )
            distance = self.parent.distance_from_start + float(step_cost)
        object.__setattr__(self, "distance_from_start", distance)

    @classmethod
    def from_parent(cls, parent: Node[V], value: V, step_cost: float) -> Node[V]:
        """Return a node for ``value`` reached from ``parent`` at ``step_cost``."""

        return cls(value, parent, step_cost)

    # ------------------------------------------------------------------
    # Parent chain
    # ------------------------------------------------------------------
    @property
    def is_start(self) -> bool:
        return self.parent is None

    @property
    def depth(self) -> int:
        """Number of parent links between this node and the start."""

        return sum(1 for _ in self.iter_chain()) - 1

    def iter_chain(self) -> Iterator[Node[V]]:
        """Yield this node, its parent, and so on back to the start node."""

        current: Optional[Node[V]] = self
        while current is not None:
            yield current
            current = current.parent

    def path_values(self) -> List[V]:
        """Return the values from the start node to this node, in order."""

        path = [n.value for n in self.iter_chain()]
        path.reverse()
        return path


__all__ = ["Node"]

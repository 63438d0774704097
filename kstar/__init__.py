"""Generic incremental A* pathfinding."""

from .core import (
    Frontier,
    Node,
    NodeProvider,
    Pathfinder,
    ScanFrontier,
    ScoredNode,
    SearchState,
    find_path,
)
from .errors import PathfindingError, ProviderContractError, SessionStateError

__all__ = [
    "Frontier",
    "Node",
    "NodeProvider",
    "Pathfinder",
    "ScanFrontier",
    "ScoredNode",
    "SearchState",
    "find_path",
    "PathfindingError",
    "ProviderContractError",
    "SessionStateError",
]

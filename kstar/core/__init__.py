"""core package."""

from .frontier import BaseFrontier, Frontier, ScanFrontier, make_frontier
from .node import Node
from .pathfinder import Pathfinder, SearchState, find_path
from .provider import NodeProvider
from .scored_node import ScoredNode

__all__ = [
    "BaseFrontier",
    "Frontier",
    "ScanFrontier",
    "make_frontier",
    "Node",
    "Pathfinder",
    "SearchState",
    "find_path",
    "NodeProvider",
    "ScoredNode",
]

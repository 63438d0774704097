# tests/conftest.py
import logging
from typing import Dict, List

import pytest

from kstar.core.node import Node
from kstar.core.provider import NodeProvider
from kstar.providers.graph import GraphProvider


LINE = "ABCD"


def _hops(value: str, target: str) -> float:
    return float(abs(LINE.index(value) - LINE.index(target)))


class RecordingProvider(NodeProvider[str]):
    """Wrap a provider and remember which values were expanded."""

    def __init__(self, inner: NodeProvider[str]):
        self.inner = inner
        self.expanded: List[str] = []
        self.produced: Dict[str, List[str]] = {}

    def get_adjacent_nodes(self, node: Node[str]) -> List[Node[str]]:
        self.expanded.append(node.value)
        adjacent = list(self.inner.get_adjacent_nodes(node))
        self.produced[node.value] = [n.value for n in adjacent]
        return adjacent

    def get_min_distance_to_target(self, value: str, target_value: str) -> float:
        return self.inner.get_min_distance_to_target(value, target_value)

    def get_node_count(self) -> int:
        return self.inner.get_node_count()


@pytest.fixture
def line_graph() -> GraphProvider[str]:
    """Undirected A-B-C-D with unit costs and remaining-hops heuristic."""

    return GraphProvider.from_edge_list(
        [("A", "B", 1), ("B", "C", 1), ("C", "D", 1)],
        heuristic=_hops,
        undirected=True,
    )


@pytest.fixture
def recording_line_graph(line_graph) -> RecordingProvider:
    return RecordingProvider(line_graph)


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)

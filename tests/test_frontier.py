import random

import pytest

from kstar.core.frontier import Frontier, ScanFrontier, make_frontier
from kstar.core.node import Node
from kstar.core.scored_node import ScoredNode


@pytest.fixture(params=["heap", "scan"])
def frontier(request):
    return make_frontier(request.param, capacity=16)


def _scored(value, distance, heuristic=0.0, parent=None):
    parent = parent or Node("root")
    return ScoredNode.for_node(Node.from_parent(parent, value, distance), heuristic)


def test_make_frontier_kinds():
    assert isinstance(make_frontier("heap"), Frontier)
    assert isinstance(make_frontier("scan"), ScanFrontier)
    with pytest.raises(ValueError):
        make_frontier("fibonacci")


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        Frontier(capacity=-1)


def test_empty_frontier(frontier):
    assert len(frontier) == 0
    assert not frontier
    assert frontier.take_best() is None


def test_insert_new_value(frontier):
    assert frontier.insert_if_better(_scored("A", 2.0))
    assert len(frontier) == 1
    assert "A" in frontier
    assert "B" not in frontier


def test_worse_or_equal_duplicate_ignored(frontier):
    original = _scored("A", 2.0)
    frontier.insert_if_better(original)

    assert not frontier.insert_if_better(_scored("A", 3.0))
    assert not frontier.insert_if_better(_scored("A", 2.0))
    assert len(frontier) == 1
    assert frontier.get("A") is original


def test_cheaper_duplicate_replaces_entry_and_parent(frontier):
    old_parent = Node("X")
    new_parent = Node("Y")
    frontier.insert_if_better(_scored("A", 5.0, parent=old_parent))

    better = _scored("A", 1.0, parent=new_parent)
    assert frontier.insert_if_better(better)
    assert len(frontier) == 1

    node = frontier.take_best()
    assert node is better.node
    assert node.parent is new_parent
    assert frontier.take_best() is None


def test_take_best_returns_minimum_cost(frontier):
    for value, cost in [("A", 4.0), ("B", 1.0), ("C", 3.0), ("D", 2.0)]:
        frontier.insert_if_better(_scored(value, cost))

    order = [frontier.take_best().value for _ in range(4)]
    assert order == ["B", "D", "C", "A"]
    assert frontier.take_best() is None


def test_cost_includes_heuristic(frontier):
    frontier.insert_if_better(_scored("near", 1.0, heuristic=5.0))
    frontier.insert_if_better(_scored("far", 3.0, heuristic=1.0))
    assert frontier.take_best().value == "far"


def test_ties_taken_in_insertion_order(frontier):
    for value in ["A", "B", "C"]:
        frontier.insert_if_better(_scored(value, 1.0))
    assert [frontier.take_best().value for _ in range(3)] == ["A", "B", "C"]


def test_replaced_entry_queues_behind_equal_costs(frontier):
    frontier.insert_if_better(_scored("A", 5.0))
    frontier.insert_if_better(_scored("B", 1.0))
    frontier.insert_if_better(_scored("A", 1.0))
    assert [frontier.take_best().value for _ in range(2)] == ["B", "A"]


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_one_entry_per_value_after_random_inserts(frontier, seed):
    rng = random.Random(seed)
    best = {}
    for _ in range(300):
        value = rng.randrange(25)
        cost = float(rng.randrange(50))
        frontier.insert_if_better(_scored(value, cost))
        best[value] = min(cost, best.get(value, float("inf")))
        assert len(frontier) == len(best)

    taken = []
    while frontier:
        node = frontier.take_best()
        taken.append((node.distance_from_start, node.value))

    assert sorted(v for _, v in taken) == sorted(best)
    assert [c for c, _ in taken] == sorted(c for c, _ in taken)
    assert {v: c for c, v in taken} == best

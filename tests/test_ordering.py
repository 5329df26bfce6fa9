"""Tests for topological ordering and cycle detection."""

import pytest

from skyroute.domain.errors import CycleError
from skyroute.graph import WeightedGraph, has_cycle, is_acyclic, topological_order


def _graph(*edges, nodes=()):
    graph = WeightedGraph()
    for node in nodes:
        graph.add_node(node)
    for u, v in edges:
        graph.add_edge(u, v, 1.0)
    return graph


def _assert_valid_order(graph, order):
    position = {node: i for i, node in enumerate(order)}
    assert set(order) == graph.nodes()
    for edge in graph.edges():
        assert position[edge.origin] < position[edge.destination]


ACYCLIC = [
    _graph(),
    _graph(nodes=["lonely"]),
    _graph(("A", "B"), ("B", "C"), ("A", "C")),
    _graph(("A", "B"), ("C", "D"), nodes=["E"]),
    _graph(("A", "B"), ("A", "B")),
]

CYCLIC = [
    _graph(("A", "A")),
    _graph(("A", "B"), ("B", "A")),
    _graph(("A", "B"), ("B", "C"), ("C", "A")),
    _graph(("X", "Y"), ("A", "B"), ("B", "C"), ("C", "B")),
]


@pytest.mark.parametrize("graph", ACYCLIC)
def test_acyclic_graphs_have_an_order(graph):
    order = topological_order(graph)

    _assert_valid_order(graph, order)
    assert is_acyclic(graph)
    assert not has_cycle(graph)


@pytest.mark.parametrize("graph", CYCLIC)
def test_cyclic_graphs_are_rejected(graph):
    with pytest.raises(CycleError):
        topological_order(graph)
    assert not is_acyclic(graph)
    assert has_cycle(graph)


def test_cycle_error_lists_unordered_nodes():
    graph = _graph(("S", "A"), ("A", "B"), ("B", "A"), ("B", "T"))

    with pytest.raises(CycleError) as exc_info:
        topological_order(graph)

    assert set(exc_info.value.remaining) == {"A", "B", "T"}


def test_order_is_deterministic():
    graph = _graph(("A", "C"), ("B", "C"), ("C", "D"))
    assert topological_order(graph) == ["A", "B", "C", "D"]
    assert topological_order(graph) == topological_order(graph)


def test_has_cycle_handles_deep_chains():
    graph = WeightedGraph()
    for i in range(5000):
        graph.add_edge(i, i + 1, 1.0)

    assert not has_cycle(graph)

    graph.add_edge(5000, 0, 1.0)
    assert has_cycle(graph)


def test_has_cycle_ignores_cross_edges_between_finished_branches():
    # D is reached twice but never while on the active path
    graph = _graph(("A", "B"), ("A", "C"), ("B", "D"), ("C", "D"))
    assert not has_cycle(graph)


def test_ordering_does_not_mutate_graph():
    graph = _graph(("A", "B"), ("B", "C"))
    topological_order(graph)
    has_cycle(graph)
    assert graph.edge_count == 2
    assert graph.nodes() == {"A", "B", "C"}

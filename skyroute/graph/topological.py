"""Topological ordering using Kahn's algorithm."""

from collections import deque
from typing import Deque, Dict, Hashable, List

from ..domain.errors import CycleError
from .weighted_graph import WeightedGraph


def topological_order(graph: WeightedGraph) -> List[Hashable]:
    """Return the nodes of ``graph`` in a topological order.

    Nodes that become ready at the same time are emitted in graph
    insertion order, so the result is deterministic for a given graph.

    Raises
    ------
    CycleError
        If the graph contains a directed cycle.
    """
    nodes = graph.ordered_nodes()
    in_degree: Dict[Hashable, int] = {node: 0 for node in nodes}
    for edge in graph.edges():
        in_degree[edge.destination] += 1

    queue: Deque[Hashable] = deque(node for node in nodes if in_degree[node] == 0)
    order: List[Hashable] = []

    while queue:
        u = queue.popleft()
        order.append(u)
        for edge in graph.out_edges(u):
            v = edge.destination
            in_degree[v] -= 1
            if in_degree[v] == 0:
                queue.append(v)

    if len(order) < len(nodes):
        remaining = tuple(node for node in nodes if in_degree[node] > 0)
        raise CycleError(
            "Graph contains a cycle, topological ordering not possible",
            remaining=remaining,
        )

    return order


def is_acyclic(graph: WeightedGraph) -> bool:
    try:
        topological_order(graph)
    except CycleError:
        return False
    return True

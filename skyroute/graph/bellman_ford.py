"""Shortest paths with the Bellman-Ford algorithm.

Unlike Dijkstra, Bellman-Ford tolerates negative edge weights and
reports negative-weight cycles reachable from the source instead of
returning a meaningless answer.
"""

from typing import Dict, Hashable, List, Optional

from ..domain.errors import NegativeCycleError, UnknownNodeError
from ..domain.models import ShortestPathResult
from .weighted_graph import WeightedGraph


def bellman_ford_distances(graph: WeightedGraph, source: Hashable) -> ShortestPathResult:
    """Compute shortest distances from ``source`` to every node.

    Runs at most ``|V| - 1`` relaxation passes over all edges and stops
    early once a pass changes nothing. A final pass checks that no edge
    can still be relaxed.

    Raises
    ------
    UnknownNodeError
        If ``source`` is not a node of ``graph``.
    NegativeCycleError
        If a negative-weight cycle is reachable from ``source``.
    """
    if source not in graph:
        raise UnknownNodeError(f"Source not in graph: {source!r}", node=source)

    nodes = graph.ordered_nodes()
    distance: Dict[Hashable, float] = {node: float("inf") for node in nodes}
    predecessor: Dict[Hashable, Optional[Hashable]] = {node: None for node in nodes}
    distance[source] = 0.0

    for _ in range(len(nodes) - 1):
        updated = False
        for edge in graph.edges():
            d_u = distance[edge.origin]
            if d_u == float("inf"):
                continue
            new_distance = d_u + edge.weight
            if new_distance < distance[edge.destination]:
                distance[edge.destination] = new_distance
                predecessor[edge.destination] = edge.origin
                updated = True
        if not updated:
            break

    for edge in graph.edges():
        d_u = distance[edge.origin]
        if d_u != float("inf") and d_u + edge.weight < distance[edge.destination]:
            raise NegativeCycleError(
                "Graph contains a negative-weight cycle reachable from the source",
                source=source,
            )

    return ShortestPathResult(source=source, distance=distance, predecessor=predecessor)


def bellman_ford(
    graph: WeightedGraph, source: Hashable, destination: Hashable
) -> Optional[List[Hashable]]:
    """Find the shortest path from ``source`` to ``destination``.

    Returns
    -------
    list or None
        The nodes from ``source`` to ``destination`` inclusive, or
        ``None`` if ``destination`` is unreachable.

    Raises
    ------
    UnknownNodeError
        If either endpoint is not a node of ``graph``.
    NegativeCycleError
        If a negative-weight cycle is reachable from ``source``.
    """
    if destination not in graph:
        raise UnknownNodeError(
            f"Destination not in graph: {destination!r}", node=destination
        )

    result = bellman_ford_distances(graph, source)
    if not result.is_reachable(destination):
        return None
    return result.path_to(destination)


def bellman_ford_distance(
    graph: WeightedGraph, source: Hashable, destination: Hashable
) -> float:
    """Total weight of the Bellman-Ford path, or ``inf`` if unreachable.

    The total is re-summed from the graph along the returned path. Where
    parallel edges exist the lightest one is counted, as relaxation
    would have picked it.
    """
    path = bellman_ford(graph, source, destination)
    if path is None:
        return float("inf")

    total = 0.0
    for u, v in zip(path, path[1:]):
        weights = graph.parallel_weights(u, v)
        if not weights:
            return float("inf")
        total += min(weights)
    return total

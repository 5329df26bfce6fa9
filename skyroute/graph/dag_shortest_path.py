"""Single-source shortest paths on a directed acyclic graph.

Nodes are processed in topological order, so every predecessor of a
node is settled before the node itself and each edge is relaxed exactly
once. Negative weights are allowed.
"""

from typing import Dict, Hashable, List, Mapping, Optional

from ..domain.errors import UnknownNodeError
from ..domain.models import ShortestPathResult
from .topological import topological_order
from .weighted_graph import WeightedGraph


def dag_shortest_path(graph: WeightedGraph, source: Hashable) -> ShortestPathResult:
    """Compute shortest distances from ``source`` to every node.

    Parameters
    ----------
    graph:
        An acyclic WeightedGraph. It is not modified.
    source:
        Node to measure distances from.

    Returns
    -------
    ShortestPathResult
        Distances (``inf`` when unreachable) and predecessors (``None``
        for the source and unreached nodes).

    Raises
    ------
    UnknownNodeError
        If ``source`` is not a node of ``graph``.
    CycleError
        If ``graph`` is not acyclic.
    """
    if source not in graph:
        raise UnknownNodeError(f"Source not in graph: {source!r}", node=source)

    order = topological_order(graph)

    distance: Dict[Hashable, float] = {node: float("inf") for node in order}
    predecessor: Dict[Hashable, Optional[Hashable]] = {node: None for node in order}
    distance[source] = 0.0

    for u in order:
        d_u = distance[u]
        if d_u == float("inf"):
            continue
        for edge in graph.out_edges(u):
            new_distance = d_u + edge.weight
            if new_distance < distance[edge.destination]:
                distance[edge.destination] = new_distance
                predecessor[edge.destination] = u

    return ShortestPathResult(source=source, distance=distance, predecessor=predecessor)


def get_path(
    destination: Hashable, predecessors: Mapping[Hashable, Optional[Hashable]]
) -> List[Hashable]:
    """Walk predecessor links back from ``destination`` and reverse them.

    An unreached destination comes back as ``[destination]``; check the
    distance to tell that apart from a real path.
    """
    path: List[Hashable] = []
    current: Optional[Hashable] = destination
    while current is not None:
        path.append(current)
        current = predecessors.get(current)
    path.reverse()
    return path

"""Generic weighted graph backed by adjacency lists.

This module defines the WeightedGraph type used by the generic
shortest-path and ordering algorithms. Nodes are any hashable value;
parallel edges between the same pair are kept independently.
"""

from typing import Dict, Hashable, Iterator, List, Optional, Set

from ..domain.models import Edge


class WeightedGraph:
    """Adjacency-list graph with numeric edge weights.

    Parameters
    ----------
    directed:
        When ``False`` every added edge is mirrored, and removing an
        edge removes its mirror too.
    """

    def __init__(self, directed: bool = True) -> None:
        self.directed = directed
        self._adjacency: Dict[Hashable, List[Edge]] = {}

    def add_node(self, node: Hashable) -> None:
        if node not in self._adjacency:
            self._adjacency[node] = []

    def add_edge(self, origin: Hashable, destination: Hashable, weight: float) -> None:
        """Add ``origin -> destination``, creating both nodes if missing."""
        self.add_node(origin)
        self.add_node(destination)
        self._adjacency[origin].append(Edge(origin, destination, weight))
        if not self.directed:
            self._adjacency[destination].append(Edge(destination, origin, weight))

    def remove_edge(self, origin: Hashable, destination: Hashable) -> None:
        """Remove every ``origin -> destination`` edge (and mirrors if undirected)."""
        self._drop_edges(origin, destination)
        if not self.directed:
            self._drop_edges(destination, origin)

    def _drop_edges(self, origin: Hashable, destination: Hashable) -> None:
        edges = self._adjacency.get(origin)
        if edges is not None:
            edges[:] = [e for e in edges if e.destination != destination]

    def remove_node(self, node: Hashable) -> None:
        """Remove ``node`` and every edge pointing to it."""
        self._adjacency.pop(node, None)
        for edges in self._adjacency.values():
            edges[:] = [e for e in edges if e.destination != node]

    def neighbors(self, node: Hashable) -> Dict[Hashable, float]:
        """Return ``neighbor -> weight`` for the outgoing edges of ``node``.

        Unknown nodes yield an empty mapping. When parallel edges exist
        the last one added wins; use ``parallel_weights`` to see them all.
        """
        return {e.destination: e.weight for e in self._adjacency.get(node, [])}

    def weight(self, origin: Hashable, destination: Hashable) -> Optional[float]:
        """Weight of the direct edge, or ``None`` when there is none."""
        weights = self.parallel_weights(origin, destination)
        return weights[-1] if weights else None

    def parallel_weights(self, origin: Hashable, destination: Hashable) -> List[float]:
        """All weights of ``origin -> destination`` edges in insertion order."""
        return [
            e.weight
            for e in self._adjacency.get(origin, [])
            if e.destination == destination
        ]

    def out_edges(self, node: Hashable) -> List[Edge]:
        return list(self._adjacency.get(node, []))

    def edges(self) -> Iterator[Edge]:
        for edges in self._adjacency.values():
            yield from edges

    def nodes(self) -> Set[Hashable]:
        return set(self._adjacency)

    def ordered_nodes(self) -> List[Hashable]:
        """Nodes in insertion order, for deterministic traversals."""
        return list(self._adjacency)

    @property
    def edge_count(self) -> int:
        return sum(len(edges) for edges in self._adjacency.values())

    def __contains__(self, node: object) -> bool:
        return node in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"WeightedGraph({kind}, nodes={len(self)}, edges={self.edge_count})"

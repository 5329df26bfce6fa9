"""Path solver adapters for generic weighted graphs.

These adapters wrap the algorithms in ``skyroute.graph`` and add:
- Domain model output (PathResult)
- Strict (raising) and safe (empty result) entry points
- Logging
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Hashable

from ...domain.errors import NoRouteFoundError, UnknownNodeError
from ...domain.models import PathResult, ShortestPathResult
from ...graph.bellman_ford import bellman_ford_distances
from ...graph.cycles import has_cycle
from ...graph.dag_shortest_path import dag_shortest_path
from ...graph.weighted_graph import WeightedGraph


@dataclass
class _SingleSourcePathSolver(ABC):
    """Shared single-pair logic on top of a single-source algorithm."""

    algorithm = ""
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @abstractmethod
    def shortest_paths(self, graph: WeightedGraph, source: Hashable) -> ShortestPathResult:
        """Single-source distances and predecessors from ``source``."""

    def solve(
        self, graph: WeightedGraph, source: Hashable, destination: Hashable
    ) -> PathResult:
        """Find the shortest path between two nodes.

        Raises:
            UnknownNodeError: If source or destination is not in the graph.
            NoRouteFoundError: If destination is unreachable.
            CycleError: DAG solver only, if the graph has a cycle.
            NegativeCycleError: Bellman-Ford only, if a negative cycle is
                reachable from the source.
        """
        self._logger.debug(
            "Solving path",
            extra={
                "algorithm": self.algorithm,
                "source": repr(source),
                "destination": repr(destination),
            },
        )

        if destination not in graph:
            raise UnknownNodeError(
                f"Destination not in graph: {destination!r}", node=destination
            )

        result = self.shortest_paths(graph, source)
        if not result.is_reachable(destination):
            self._logger.warning(
                "No path found",
                extra={"source": repr(source), "destination": repr(destination)},
            )
            raise NoRouteFoundError(
                f"No path from {source} to {destination}",
                departure=str(source),
                arrival=str(destination),
            )

        path = PathResult(
            path=tuple(result.path_to(destination)),
            total_weight=result.distance_to(destination),
            algorithm=self.algorithm,
        )
        self._logger.info(
            "Path found",
            extra={
                "algorithm": self.algorithm,
                "hops": path.num_hops,
                "total_weight": path.total_weight,
            },
        )
        return path

    def solve_safe(
        self, graph: WeightedGraph, source: Hashable, destination: Hashable
    ) -> PathResult:
        """Like solve(), but returns an empty PathResult when there is no path.

        Unknown endpoints also give an empty result. Cycle errors still
        propagate: they mean the algorithm cannot run at all.
        """
        try:
            return self.solve(graph, source, destination)
        except (UnknownNodeError, NoRouteFoundError):
            return PathResult(path=(), total_weight=float("inf"), algorithm=self.algorithm)


@dataclass
class DAGPathSolver(_SingleSourcePathSolver):
    """Shortest paths by relaxing edges in topological order.

    Only valid on acyclic graphs; negative weights are fine.
    """

    algorithm = "dag"

    def shortest_paths(self, graph: WeightedGraph, source: Hashable) -> ShortestPathResult:
        return dag_shortest_path(graph, source)


@dataclass
class BellmanFordPathSolver(_SingleSourcePathSolver):
    """Shortest paths with Bellman-Ford; handles cycles and negative weights."""

    algorithm = "bellman_ford"

    def shortest_paths(self, graph: WeightedGraph, source: Hashable) -> ShortestPathResult:
        return bellman_ford_distances(graph, source)


@dataclass
class AutoPathSolver(_SingleSourcePathSolver):
    """Picks the DAG solver for acyclic graphs and Bellman-Ford otherwise."""

    algorithm = "auto"

    def shortest_paths(self, graph: WeightedGraph, source: Hashable) -> ShortestPathResult:
        if has_cycle(graph):
            self._logger.debug("Graph has a cycle, using Bellman-Ford")
            return bellman_ford_distances(graph, source)
        return dag_shortest_path(graph, source)

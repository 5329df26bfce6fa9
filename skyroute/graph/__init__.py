"""Graph-related utilities for generic weighted networks.

This subpackage contains the adjacency-list graph and the ordering and
shortest-path algorithms that run on top of it.
"""

from .bellman_ford import bellman_ford, bellman_ford_distance, bellman_ford_distances
from .cycles import has_cycle
from .dag_shortest_path import dag_shortest_path, get_path
from .topological import is_acyclic, topological_order
from .weighted_graph import WeightedGraph

__all__ = [
    "WeightedGraph",
    "topological_order",
    "is_acyclic",
    "has_cycle",
    "dag_shortest_path",
    "get_path",
    "bellman_ford",
    "bellman_ford_distance",
    "bellman_ford_distances",
]

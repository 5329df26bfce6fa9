"""Directed cycle detection with a three-colour depth-first search.

Cheaper than building a topological order when only a yes/no answer
is needed. The search uses an explicit stack, so deep graphs do not
hit the interpreter recursion limit.
"""

from typing import Dict, Hashable, Iterator, List, Tuple

from .weighted_graph import WeightedGraph

WHITE, GREY, BLACK = 0, 1, 2


def has_cycle(graph: WeightedGraph) -> bool:
    """Return True if ``graph`` contains a directed cycle.

    A self-loop counts as a cycle of length one. Every node is used as a
    DFS root unless an earlier search already reached it.
    """
    colour: Dict[Hashable, int] = {node: WHITE for node in graph.ordered_nodes()}

    for root in graph.ordered_nodes():
        if colour[root] != WHITE:
            continue

        colour[root] = GREY
        stack: List[Tuple[Hashable, Iterator[Hashable]]] = [
            (root, _successors(graph, root))
        ]
        while stack:
            node, successors = stack[-1]
            for neighbor in successors:
                state = colour[neighbor]
                if state == GREY:
                    # back-edge into the active path
                    return True
                if state == WHITE:
                    colour[neighbor] = GREY
                    stack.append((neighbor, _successors(graph, neighbor)))
                    break
            else:
                colour[node] = BLACK
                stack.pop()

    return False


def _successors(graph: WeightedGraph, node: Hashable) -> Iterator[Hashable]:
    return iter([edge.destination for edge in graph.out_edges(node)])

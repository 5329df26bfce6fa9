"""Graph adapters - Implementations of the PathSolverPort.

Available implementations:
- DAGPathSolver: Topological-order relaxation (acyclic graphs only)
- BellmanFordPathSolver: Negative weights, negative-cycle detection
- AutoPathSolver: DAG solver when possible, Bellman-Ford otherwise
"""

from .path_solvers import AutoPathSolver, BellmanFordPathSolver, DAGPathSolver

__all__ = ["DAGPathSolver", "BellmanFordPathSolver", "AutoPathSolver"]

"""Package exposing search strategy implementations."""

from enum import Enum

import constants
from .astar import run_astar
from .bfs import run_bfs
from .dfs import run_dfs
from .dijkstra import run_dijkstra
from .gbfs import run_gbfs
from .trace import NodeState, SearchResult, Step


class Algorithm(str, Enum):
    BFS = "bfs"
    DFS = "dfs"
    DIJKSTRA = "dijkstra"
    ASTAR = "astar"
    GREEDY = "greedy"


ALGORITHMS = {
    Algorithm.BFS: run_bfs,
    Algorithm.DFS: run_dfs,
    Algorithm.DIJKSTRA: run_dijkstra,
    Algorithm.ASTAR: run_astar,
    Algorithm.GREEDY: run_gbfs,
}

# Display name, whether node heuristics are read, whether edge weights matter
ALGORITHM_INFO = {
    Algorithm.BFS: {"name": "Breadth-First Search", "requires_heuristic": False, "requires_weights": False},
    Algorithm.DFS: {"name": "Depth-First Search", "requires_heuristic": False, "requires_weights": False},
    Algorithm.DIJKSTRA: {"name": "Dijkstra's Algorithm", "requires_heuristic": False, "requires_weights": True},
    Algorithm.ASTAR: {"name": "A* Search", "requires_heuristic": True, "requires_weights": True},
    Algorithm.GREEDY: {"name": "Greedy Best-First Search", "requires_heuristic": True, "requires_weights": False},
}


def parse_algorithm(name):
    """Resolve an Algorithm from a tag ("astar") or a command line method code ("AS").

    Raises:
        ValueError: the name matches no algorithm.
    """
    if isinstance(name, Algorithm):
        return name
    key = str(name).strip()
    alias = constants.METHOD_ALIASES.get(key.upper())
    try:
        return Algorithm(alias or key.lower())
    except ValueError:
        raise ValueError(f"Unknown method: {name}") from None


def run_algorithm(algorithm, graph, start, goal):
    """Run the named strategy on (graph, start, goal) and return its SearchResult."""
    return ALGORITHMS[parse_algorithm(algorithm)](graph, start, goal)


__all__ = [
    "Algorithm", "ALGORITHMS", "ALGORITHM_INFO", "NodeState", "SearchResult", "Step",
    "parse_algorithm", "run_algorithm",
    "run_astar", "run_bfs", "run_dfs", "run_dijkstra", "run_gbfs",
]

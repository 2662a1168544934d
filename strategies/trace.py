"""
Trace types shared by every search strategy.

A search appends one Step per expansion and exactly one terminal Step
(current_node is None) when it stops. Steps are snapshots: every mutable
map or set is copied when the Step is created, so later expansions can never
alter an earlier frame.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)


class NodeState(str, Enum):
    UNEXPLORED = "unexplored"
    FRONTIER = "frontier"
    VISITED = "visited"
    CURRENT = "current"
    PATH = "path"
    BEST_PATH = "best_path"


def _frozen_map(mapping):
    if mapping is None:
        return None
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class Step:
    """
    One frame of a search trace.

    Attributes:
        current_node: node being expanded; None only on the terminal step
        frontier: nodes discovered but not yet expanded (unordered)
        visited: nodes expanded so far
        path: final path, empty on every step but the terminal one
        best_path: Dijkstra only, shortest start -> goal chain known so far
        best_cost: cost of best_path
        distances: read-only copy of best-known cost from start
        parents: read-only copy of the parent pointers
        message: human-readable description of the step
    """

    current_node: Optional[str]
    frontier: FrozenSet[str] = frozenset()
    visited: FrozenSet[str] = frozenset()
    path: Tuple[str, ...] = ()
    best_path: Optional[Tuple[str, ...]] = None
    best_cost: Optional[float] = None
    distances: Optional[Mapping[str, float]] = None
    parents: Optional[Mapping[str, Optional[str]]] = None
    message: str = ""

    # distances and parents are mapping proxies, so steps compare by value but are unhashable
    __hash__ = None

    @property
    def is_terminal(self) -> bool:
        return self.current_node is None

    def node_states(self, node_ids: Iterable[str]) -> Dict[str, NodeState]:
        """Classify every node for rendering this frame."""
        path = set(self.path)
        best = set(self.best_path or ())
        states = {}
        for node_id in node_ids:
            if node_id == self.current_node:
                states[node_id] = NodeState.CURRENT
            elif node_id in path:
                states[node_id] = NodeState.PATH
            elif node_id in best:
                states[node_id] = NodeState.BEST_PATH
            elif node_id in self.frontier:
                states[node_id] = NodeState.FRONTIER
            elif node_id in self.visited:
                states[node_id] = NodeState.VISITED
            else:
                states[node_id] = NodeState.UNEXPLORED
        return states


@dataclass
class SearchResult:
    """Everything one search invocation hands back to its caller."""

    algorithm: str
    steps: List[Step] = field(default_factory=list)
    final_path: List[str] = field(default_factory=list)
    total_cost: float = 0
    nodes_expanded: int = 0

    @property
    def found(self) -> bool:
        return bool(self.final_path)

    @property
    def terminal_step(self) -> Optional[Step]:
        if self.steps and self.steps[-1].is_terminal:
            return self.steps[-1]
        return None

    @property
    def expansion_steps(self) -> List[Step]:
        return [step for step in self.steps if not step.is_terminal]


class TraceRecorder:
    """Collects the Steps of a single search and builds its SearchResult."""

    def __init__(self, algorithm, start, goal):
        self.algorithm = algorithm
        self.start = start
        self.goal = goal
        self.steps: List[Step] = []

    def expand(self, current, frontier, visited, message, distances=None,
               parents=None, best_path=None, best_cost=None):
        step = Step(
            current_node=current,
            frontier=frozenset(frontier),
            visited=frozenset(visited),
            path=(),
            best_path=tuple(best_path) if best_path else None,
            best_cost=best_cost if best_path else None,
            distances=_frozen_map(distances),
            parents=_frozen_map(parents),
            message=message,
        )
        self.steps.append(step)
        return step

    def finish(self, path, cost, visited, nodes_expanded, distances=None, parents=None):
        """Append the terminal step and return the finished result."""
        path = list(path)
        cost = cost if path else 0
        if path:
            message = f"Path found from {self.start} to {self.goal} with cost {cost}"
        else:
            message = f"No path exists from {self.start} to {self.goal}"

        self.steps.append(Step(
            current_node=None,
            frontier=frozenset(),
            visited=frozenset(visited),
            path=tuple(path),
            distances=_frozen_map(distances),
            parents=_frozen_map(parents),
            message=message,
        ))
        logger.debug("%s: %s (%d expanded)", self.algorithm, message, nodes_expanded)
        return SearchResult(
            algorithm=self.algorithm,
            steps=self.steps,
            final_path=path,
            total_cost=cost,
            nodes_expanded=nodes_expanded,
        )

    def empty(self):
        """Result for a search whose start or goal is not in the graph."""
        logger.debug("%s: %s or %s not in graph", self.algorithm, self.start, self.goal)
        return SearchResult(algorithm=self.algorithm)

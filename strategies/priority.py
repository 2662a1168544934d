"""Min-priority selector shared by Dijkstra, A* and greedy best-first search."""

import heapq
import itertools
from typing import Callable, Dict, Hashable, List, Optional

# Heap entry layout: [priority, insertion rank, push id, node id, secondary, live]
_PRIORITY, _RANK, _PUSH, _NODE, _SECONDARY, _LIVE = range(6)


class PrioritySelector:
    """
    Binary heap keyed on priority with lazy deletion.

    Selection order is the only contract: `extract_min` always returns the
    live entry with the smallest priority, and equal priorities come out in
    insertion order. `update_priority` keeps an entry's original insertion
    rank, so re-prioritising a node never moves it behind later arrivals
    with the same priority.

    Args:
        priority_of: optional function giving a node's priority, used when
            `insert` is called without one (greedy search plugs in the
            node heuristic here).
    """

    def __init__(self, priority_of: Optional[Callable[[Hashable], float]] = None):
        self._priority_of = priority_of
        self._heap: List[list] = []
        self._entries: Dict[Hashable, list] = {}
        self._ranks = itertools.count()
        self._pushes = itertools.count()

    def insert(self, node_id, priority=None, secondary=None):
        """Add a node that is not already present.

        Raises:
            ValueError: the node is already in the selector, or no priority
                was given and there is no `priority_of` function.
        """
        if node_id in self._entries:
            raise ValueError(f"{node_id!r} is already queued; use update_priority")
        if priority is None:
            if self._priority_of is None:
                raise ValueError("priority is required without a priority_of function")
            priority = self._priority_of(node_id)
        self._push(node_id, priority, next(self._ranks), secondary)

    def extract_min(self):
        """Remove and return the node with the smallest priority, or None if empty."""
        while self._heap:
            entry = heapq.heappop(self._heap)
            if entry[_LIVE]:
                del self._entries[entry[_NODE]]
                return entry[_NODE]
        return None

    def update_priority(self, node_id, priority, secondary=None):
        entry = self._entries.get(node_id)
        if entry is None:
            return
        entry[_LIVE] = False  # skipped by extract_min
        self._push(node_id, priority, entry[_RANK], secondary)

    def contains(self, node_id):
        return node_id in self._entries

    def priority(self, node_id):
        entry = self._entries.get(node_id)
        return entry[_PRIORITY] if entry else None

    def secondary(self, node_id):
        entry = self._entries.get(node_id)
        return entry[_SECONDARY] if entry else None

    def is_empty(self):
        return not self._entries

    def snapshot(self):
        """Frozen set of the node ids currently pending."""
        return frozenset(self._entries)

    def _push(self, node_id, priority, rank, secondary):
        entry = [priority, rank, next(self._pushes), node_id, secondary, True]
        self._entries[node_id] = entry
        heapq.heappush(self._heap, entry)

    def __contains__(self, node_id):
        return self.contains(node_id)

    def __len__(self):
        return len(self._entries)

from collections import deque

from strategies.common import reconstruct_path
from strategies.trace import TraceRecorder


def run_bfs(graph, start, goal):
    """Breadth-First Search; edge weights are ignored and the reported cost is the hop count."""
    start, goal = str(start), str(goal)
    trace = TraceRecorder("bfs", start, goal)
    if not graph.has_node(start) or not graph.has_node(goal):
        return trace.empty()

    q = deque([start])
    parents = {start: None}  # doubles as the "ever enqueued" set
    visited = set()
    nodes_expanded = 0
    found = False

    while q:
        node = q.popleft()
        if node in visited:
            continue
        visited.add(node)
        nodes_expanded += 1

        trace.expand(node, q, visited, f"Exploring node {node}", parents=parents)

        if node == goal:
            found = True
            break

        for to_id, _ in graph.neighbors(node):
            if to_id not in parents:
                parents[to_id] = node
                q.append(to_id)

    path = reconstruct_path(parents, start, goal) if found else []
    return trace.finish(path, len(path) - 1, visited, nodes_expanded, parents=parents)

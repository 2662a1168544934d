from strategies.common import reconstruct_path
from strategies.trace import TraceRecorder


def run_dfs(graph, start, goal):
    """Depth-First Search: returns a SearchResult whose cost is the hop count of the path found.

    Neighbours are pushed in adjacency order, so the last one listed is
    expanded first. A node is pushed at most once and keeps the parent that
    discovered it.
    """
    start, goal = str(start), str(goal)
    trace = TraceRecorder("dfs", start, goal)
    if not graph.has_node(start) or not graph.has_node(goal):
        return trace.empty()

    stack = [start]
    parents = {start: None}
    visited = set()
    nodes_expanded = 0
    found = False

    while stack:
        node = stack.pop()
        if node in visited:
            continue
        visited.add(node)
        nodes_expanded += 1

        trace.expand(node, stack, visited, f"Exploring node {node}", parents=parents)

        if node == goal:
            found = True
            break

        for to_id, _ in graph.neighbors(node):
            if to_id not in parents:
                parents[to_id] = node
                stack.append(to_id)

    path = reconstruct_path(parents, start, goal) if found else []
    return trace.finish(path, len(path) - 1, visited, nodes_expanded, parents=parents)

from strategies.common import reconstruct_path
from strategies.priority import PrioritySelector
from strategies.trace import TraceRecorder


def run_gbfs(graph, start, goal):
    """Greedy Best-First Search ordered by each node's heuristic alone.

    A node keeps the parent that first discovered it; later rediscoveries do
    not re-parent it. No running cost is kept: the reported cost is summed
    along the final path afterwards, taking the first matching edge in
    adjacency order.
    """
    start, goal = str(start), str(goal)
    trace = TraceRecorder("greedy", start, goal)
    if not graph.has_node(start) or not graph.has_node(goal):
        return trace.empty()

    parents = {start: None}
    visited = set()
    frontier = PrioritySelector(priority_of=graph.heuristic)
    frontier.insert(start)
    nodes_expanded = 0
    found = False

    while not frontier.is_empty():
        node = frontier.extract_min()
        if node in visited:
            continue
        visited.add(node)
        nodes_expanded += 1

        trace.expand(
            node, frontier.snapshot(), visited,
            f"Exploring node {node} with heuristic {graph.heuristic(node):.2f}",
            parents=parents,
        )

        if node == goal:
            found = True
            break

        for to_id, _ in graph.neighbors(node):
            if to_id in visited:
                continue
            if to_id not in parents:
                parents[to_id] = node
            if to_id not in frontier:
                frontier.insert(to_id)

    path = reconstruct_path(parents, start, goal) if found else []
    cost = graph.path_cost(path) if path else 0
    return trace.finish(path, cost, visited, nodes_expanded, parents=parents)

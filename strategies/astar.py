from strategies.common import reconstruct_path
from strategies.priority import PrioritySelector
from strategies.trace import TraceRecorder


def run_astar(graph, start, goal):
    """
    Performs A* search to find the shortest path from start to goal.

    Nodes are ordered by f = g + h, where h is the node's own heuristic
    (0 when it has none, which makes this behave like Dijkstra). The path is
    optimal only if the heuristics never overestimate the remaining cost.
    Args:
        graph: util.Graph with non-negative edge weights
        start: start node id
        goal: goal node id
    Returns:
        SearchResult; an empty one with no steps when goal or start is unknown.
    """
    start, goal = str(start), str(goal)
    trace = TraceRecorder("astar", start, goal)
    if not graph.has_node(goal) or not graph.has_node(start):
        return trace.empty()

    g_score = {node_id: float('inf') for node_id in graph.nodes}
    f_score = {node_id: float('inf') for node_id in graph.nodes}
    g_score[start] = 0
    f_score[start] = graph.heuristic(start)
    parents = {start: None}
    closed = set()
    frontier = PrioritySelector()
    frontier.insert(start, f_score[start], 0)
    nodes_expanded = 0
    found = False

    while not frontier.is_empty():
        node = frontier.extract_min()
        if node in closed:
            continue
        closed.add(node)
        nodes_expanded += 1

        trace.expand(
            node, frontier.snapshot(), closed,
            f"Exploring node {node} with g={g_score[node]:.2f}, f={f_score[node]:.2f}",
            distances=g_score, parents=parents,
        )

        if node == goal:
            found = True
            break

        for to_id, cost in graph.neighbors(node):
            if to_id in closed:
                continue
            tentative_g = g_score[node] + cost
            if tentative_g < g_score.get(to_id, float('inf')):
                g_score[to_id] = tentative_g
                f_score[to_id] = tentative_g + graph.heuristic(to_id)
                parents[to_id] = node
                if to_id in frontier:
                    frontier.update_priority(to_id, f_score[to_id], tentative_g)
                else:
                    frontier.insert(to_id, f_score[to_id], tentative_g)

    path = reconstruct_path(parents, start, goal) if found else []
    return trace.finish(path, g_score[goal], closed, nodes_expanded,
                        distances=g_score, parents=parents)

from strategies.common import reconstruct_path
from strategies.priority import PrioritySelector
from strategies.trace import TraceRecorder


def run_dijkstra(graph, start, goal):
    """
    Dijkstra's algorithm - uninformed shortest path search.
    Args:
        graph: util.Graph with non-negative edge weights
        start: start node id
        goal: goal node id
    Returns:
        SearchResult. Every expansion step also carries the best start -> goal
        path that the current parent pointers already describe, when one exists.
    """
    start, goal = str(start), str(goal)
    trace = TraceRecorder("dijkstra", start, goal)
    if not graph.has_node(start) or not graph.has_node(goal):
        return trace.empty()

    distances = {node_id: float('inf') for node_id in graph.nodes}
    distances[start] = 0
    parents = {start: None}
    visited = set()
    frontier = PrioritySelector()
    frontier.insert(start, 0)
    nodes_expanded = 0
    found = False

    while not frontier.is_empty():
        node = frontier.extract_min()
        if node in visited:
            continue
        visited.add(node)
        nodes_expanded += 1

        # Best path so far: only a complete chain back to start counts
        best_path, best_cost = None, None
        if distances[goal] != float('inf'):
            chain = reconstruct_path(parents, start, goal)
            if len(chain) > 1:
                best_path, best_cost = chain, distances[goal]

        trace.expand(
            node, frontier.snapshot(), visited,
            f"Exploring node {node} with distance {distances[node]}",
            distances=distances, parents=parents,
            best_path=best_path, best_cost=best_cost,
        )

        if node == goal:
            found = True
            break

        cost = distances[node]
        for neighbor, edge_cost in graph.neighbors(node):
            if neighbor in visited:
                continue
            new_cost = cost + edge_cost
            # Only relax if we found a better path
            if new_cost < distances.get(neighbor, float('inf')):
                distances[neighbor] = new_cost
                parents[neighbor] = node
                if neighbor in frontier:
                    frontier.update_priority(neighbor, new_cost)
                else:
                    frontier.insert(neighbor, new_cost)

    path = reconstruct_path(parents, start, goal) if found else []
    return trace.finish(path, distances[goal], visited, nodes_expanded,
                        distances=distances, parents=parents)

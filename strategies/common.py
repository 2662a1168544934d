import math


def euclidean(a, b):
    """Euclidean distance between coordinate tuples a and b."""
    (x1, y1), (x2, y2) = a, b
    return math.hypot(x1 - x2, y1 - y2)


def reconstruct_path(parents, start, goal):
    """Reconstructs the start -> goal path (list of node ids) from a parents map.

    The walk follows parents back from `goal` until it reaches a node whose
    parent is None. An empty list is returned when `goal` was never reached,
    when the chain loops, or when it ends anywhere other than `start`.
    """
    if goal not in parents:
        return []

    path = [goal]
    current = goal
    while parents.get(current) is not None:
        current = parents[current]
        path.append(current)
        if len(path) > len(parents):
            return []  # cycle in the parent chain
    if current != start:
        return []
    path.reverse()
    return path

"""Sample graphs for trying out and comparing the search strategies."""

import numpy as np

import constants
from strategies.common import euclidean
from util import Graph, Node


def grid_node_id(row, col):
    """Grid ids look like "A3-7": a letter per block of 26 rows, row % 26, then the column."""
    return f"{chr(65 + row // 26)}{row % 26}-{col}"


def generate_grid_graph(rows=constants.GRID_ROWS, cols=constants.GRID_COLS,
                        spacing=constants.GRID_SPACING, offset=constants.GRID_OFFSET,
                        seed=None, diagonal_probability=constants.GRID_DIAGONAL_PROBABILITY,
                        heuristics=True):
    """Build a grid graph with random integer weights.

    Every cell is joined to its right and bottom neighbours, and each of the
    two downward diagonals is added with `diagonal_probability`. All
    connections are bidirectional.

    Args:
        rows, cols: grid size
        spacing: distance between neighbouring node positions
        offset: (x, y) position of the top-left node
        seed: seed for numpy's random generator, for reproducible graphs
        diagonal_probability: chance of each diagonal edge
        heuristics: point every node's heuristic at the bottom-right goal

    Returns:
        Graph with origin at the top-left node and goal at the bottom-right.
    """
    rng = np.random.default_rng(seed)
    low, high = constants.GRID_WEIGHT_RANGE
    diag_low, diag_high = constants.GRID_DIAGONAL_WEIGHT_RANGE
    graph = Graph()

    for row in range(rows):
        for col in range(cols):
            node_id = grid_node_id(row, col)
            x = offset[0] + col * spacing
            y = offset[1] + row * spacing
            graph.add_node(Node(node_id, x, y, label=node_id))

    for row in range(rows):
        for col in range(cols):
            current = grid_node_id(row, col)
            if col < cols - 1:
                weight = int(rng.integers(low, high + 1))
                graph.add_edge(current, grid_node_id(row, col + 1), weight, bidirectional=True)
            if row < rows - 1:
                weight = int(rng.integers(low, high + 1))
                graph.add_edge(current, grid_node_id(row + 1, col), weight, bidirectional=True)
            if row < rows - 1 and col < cols - 1 and rng.random() < diagonal_probability:
                weight = int(rng.integers(diag_low, diag_high + 1))
                graph.add_edge(current, grid_node_id(row + 1, col + 1), weight, bidirectional=True)
            if row < rows - 1 and col > 0 and rng.random() < diagonal_probability:
                weight = int(rng.integers(diag_low, diag_high + 1))
                graph.add_edge(current, grid_node_id(row + 1, col - 1), weight, bidirectional=True)

    graph.origin = grid_node_id(0, 0)
    graph.goal = grid_node_id(rows - 1, cols - 1)
    if heuristics:
        assign_heuristics(graph, graph.goal)
    return graph


def calculate_heuristic(node, goal, scale=constants.HEURISTIC_SCALE):
    """Straight-line distance from node to goal divided by scale."""
    return euclidean(node.position, goal.position) / scale


def assign_heuristics(graph, goal_id, scale=constants.HEURISTIC_SCALE):
    """Set every node's heuristic to its scaled straight-line distance to goal_id.

    Raises:
        KeyError: goal_id is not a node of the graph.
    """
    goal = graph.node(goal_id)
    if goal is None:
        raise KeyError(goal_id)
    for node in graph.nodes.values():
        node.heuristic = calculate_heuristic(node, goal, scale)
    return graph

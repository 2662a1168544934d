"""Shared graphs for the test suite."""

import pytest

from generator import generate_grid_graph
from util import Graph, Node


def make_graph(nodes, edges, bidirectional=True):
    graph = Graph()
    for node_id in nodes:
        graph.add_node(Node(node_id))
    for from_id, to_id, weight in edges:
        graph.add_edge(from_id, to_id, weight, bidirectional=bidirectional)
    return graph


@pytest.fixture
def diamond():
    """A-B (1), A-C (4), B-D (1), C-D (1), all bidirectional."""
    return make_graph("ABCD", [("A", "B", 1), ("A", "C", 4), ("B", "D", 1), ("C", "D", 1)])


@pytest.fixture
def disconnected():
    """Two components: A-B-C and X-Y."""
    return make_graph("ABCXY", [("A", "B", 1), ("B", "C", 2), ("X", "Y", 1)])


@pytest.fixture
def weighted_detour():
    """Fewest hops is S-G (10); cheapest is S-A-B-G (3)."""
    return make_graph("SABG", [("S", "G", 10), ("S", "A", 1), ("A", "B", 1), ("B", "G", 1)],
                      bidirectional=False)


@pytest.fixture
def grid():
    return generate_grid_graph(rows=6, cols=6, seed=7)

"""Tests for the sample grid graph and heuristic assignment."""

import math

import pytest

from generator import assign_heuristics, calculate_heuristic, generate_grid_graph, grid_node_id
from util import Node


def test_grid_node_ids():
    assert grid_node_id(0, 0) == "A0-0"
    assert grid_node_id(3, 7) == "A3-7"
    assert grid_node_id(27, 2) == "B1-2"


class TestGenerateGridGraph:
    """Shape, weights and reproducibility."""

    def test_nodes_and_positions(self):
        graph = generate_grid_graph(rows=3, cols=4, spacing=10, offset=(5, 5), seed=1)
        assert len(graph) == 12
        assert graph.get_coordinates("A2-3") == (35.0, 25.0)
        assert (graph.origin, graph.goal) == ("A0-0", "A2-3")

    def test_straight_edges_always_present(self):
        graph = generate_grid_graph(rows=3, cols=3, seed=2, diagonal_probability=0)
        # 2 * rows * (cols - 1) straight links, each stored in both directions
        assert len(graph.edges) == 2 * 12
        for edge in graph.edges.values():
            assert 1 <= edge.weight <= 9
            assert graph.edges[f"{edge.target}-{edge.source}"].weight == edge.weight

    def test_diagonals_when_certain(self):
        graph = generate_grid_graph(rows=3, cols=3, seed=2, diagonal_probability=1)
        assert "A0-0-A1-1" in graph.edges
        assert "A0-1-A1-0" in graph.edges
        assert 2 <= graph.edges["A0-0-A1-1"].weight <= 10

    def test_same_seed_same_graph(self):
        first = generate_grid_graph(rows=5, cols=5, seed=42)
        second = generate_grid_graph(rows=5, cols=5, seed=42)
        assert first.adjacency == second.adjacency


class TestHeuristics:
    """Scaled straight-line distance to the goal."""

    def test_calculate_heuristic(self):
        assert calculate_heuristic(Node("a", 0, 0), Node("b", 30, 40), scale=50) == pytest.approx(1.0)

    def test_assign_heuristics(self):
        graph = generate_grid_graph(rows=2, cols=2, spacing=60, offset=(0, 0), seed=0)
        assign_heuristics(graph, "A1-1")
        assert graph.heuristic("A1-1") == 0
        assert graph.heuristic("A0-0") == pytest.approx(math.hypot(60, 60) / 50)

    def test_fresh_grid_points_at_its_goal(self):
        graph = generate_grid_graph(rows=2, cols=2, spacing=60, offset=(0, 0), seed=0)
        assert graph.heuristic(graph.goal) == 0
        assert graph.heuristic("A0-0") == pytest.approx(math.hypot(60, 60) / 50)

    def test_heuristics_can_be_skipped(self):
        graph = generate_grid_graph(rows=2, cols=2, seed=0, heuristics=False)
        assert all(node.heuristic is None for node in graph.nodes.values())
        assert graph.heuristic("A0-0") == 0

    def test_unknown_goal(self):
        graph = generate_grid_graph(rows=2, cols=2, seed=0)
        with pytest.raises(KeyError):
            assign_heuristics(graph, "Z9-9")

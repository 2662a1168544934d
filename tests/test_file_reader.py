"""Tests for the sectioned config reader and problem loading."""

import pytest

from file_reader import build_graph, load_problem, parse_config_file, split_csv_allow_commas

CONFIG = """\
# sample map
[NODES]
A, 0, 0, Depot (north, gate 2), 2
B, 1, 0, Bridge
C, 1, 1, Crossing, 1
D, 2, 1, Dock, 0

[EDGES]
e1, A, B, 1, true
e2, A, C, 4, true
e3, B, D, 1.5
e4, C, D, 1
e5, C, Q, 1

[META]
START, A
GOAL, D
"""

PLAIN = """\
Nodes:
1: (0,0)
2: (1,0)
3: (2,0)
Edges:
(1,2): 1
(2,3): 1
Origin:
1
Destinations:
3
"""


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "map.txt"
    path.write_text(CONFIG)
    return path


class TestSplitCsv:
    """Commas inside parentheses stay in their field."""

    def test_parenthesised_commas(self):
        assert split_csv_allow_commas("A, 0, 0, Depot (north, gate 2)", 4) == [
            "A", "0", "0", "Depot (north, gate 2)"]

    def test_too_few_fields(self):
        with pytest.raises(ValueError):
            split_csv_allow_commas("A, 0", 3)


class TestParseConfigFile:
    """Reading [NODES], [EDGES] and [META] into DataFrames."""

    def test_frames(self, config_path):
        nodes_df, edges_df, start, goal = parse_config_file(config_path)
        assert list(nodes_df.index) == ["A", "B", "C", "D"]
        assert nodes_df.loc["A", "label"] == "Depot (north, gate 2)"
        assert nodes_df.loc["C", "heuristic"] == 1
        assert list(edges_df['id']) == ["e1", "e2", "e3", "e4", "e5"]
        assert edges_df['bidirectional'].tolist() == [True, True, False, False, False]
        assert (start, goal) == ("A", "D")

    def test_build_graph(self, config_path, caplog):
        nodes_df, edges_df, _, _ = parse_config_file(config_path)
        graph = build_graph(nodes_df, edges_df)

        assert graph.node("B").label == "Bridge"
        assert graph.heuristic("A") == 2
        assert graph.heuristic("B") == 0
        assert graph.neighbors("A") == (("B", 1), ("C", 4))
        assert graph.neighbors("B") == (("A", 1), ("D", 1.5))
        assert "e1" in graph.edges and "B-A" in graph.edges
        # e5 points at an unknown node
        assert "e5" not in graph.edges
        assert "Skipping edge e5" in caplog.text


class TestLoadProblem:
    """Format detection."""

    def test_sectioned_format(self, config_path):
        graph = load_problem(config_path)
        assert (graph.origin, graph.goal) == ("A", "D")
        assert len(graph) == 4

    def test_plain_format(self, tmp_path):
        path = tmp_path / "plain.txt"
        path.write_text(PLAIN)
        graph = load_problem(path)
        assert (graph.origin, graph.goal) == ("1", "3")
        assert graph.neighbors("2") == (("3", 1),)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_problem(tmp_path / "missing.txt")

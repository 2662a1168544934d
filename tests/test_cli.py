"""End-to-end tests for the search.py and multi_search.py entry points."""

import pytest

import multi_search
import search

PROBLEM = """\
Nodes:
A: (0,0)
B: (1,0)
C: (0,1)
D: (1,1)
Z: (9,9)
Edges:
(A,B): 1
(A,C): 4
(B,D): 1
(C,D): 1
Origin:
A
Destinations:
D
"""


@pytest.fixture(autouse=True)
def no_log_config(monkeypatch):
    monkeypatch.setattr(search.logging, "basicConfig", lambda **kwargs: None)


@pytest.fixture
def problem(tmp_path):
    path = tmp_path / "diamond.txt"
    path.write_text(PROBLEM)
    return str(path)


class TestSearchCli:
    """Running one method on a problem file."""

    def test_found(self, problem, capsys):
        assert search.cli([problem, "CUS1"]) == 0
        out = capsys.readouterr().out
        assert "Method: Dijkstra's Algorithm" in out
        assert "Goal node reached:D" in out
        assert "Number of Nodes expanded:3" in out
        assert "A -> B -> D" in out
        assert "Total path cost:2" in out

    def test_not_found(self, problem, capsys):
        assert search.cli([problem, "BFS", "--goal", "Z"]) == 0
        out = capsys.readouterr().out
        assert "None 4" in out
        assert "No path exists from A to Z" in out

    def test_goal_not_in_graph(self, problem, capsys):
        assert search.cli([problem, "AS", "--goal", "nowhere"]) == 0
        assert "nowhere is not in the graph" in capsys.readouterr().out

    def test_start_not_in_graph(self, problem, capsys):
        assert search.cli([problem, "BFS", "--start", "nowhere"]) == 0
        out = capsys.readouterr().out
        assert "nowhere is not in the graph" in out
        assert "D is not in the graph" not in out

    def test_trace_lines(self, problem, capsys):
        search.cli([problem, "BFS", "--trace"])
        out = capsys.readouterr().out
        assert "[   0] current=A frontier={} visited=1 | Exploring node A" in out
        assert "current=- frontier={} visited=4 | Path found from A to D with cost 2" in out

    def test_metrics_stdout(self, problem, capsys):
        search.cli([problem, "GBFS", "--metrics-stdout"])
        out = capsys.readouterr().out
        assert "Metrics: method=greedy nodes_expanded=4" in out
        assert "peak_py_mem=" in out

    def test_metrics_stderr(self, problem, capsys):
        search.cli([problem, "DFS", "-m"])
        captured = capsys.readouterr()
        assert "Metrics: method=dfs" in captured.err
        assert "Metrics:" not in captured.out

    def test_unknown_method(self, problem, capsys):
        assert search.cli([problem, "BEAM"]) == 1
        assert "Unknown method: BEAM" in capsys.readouterr().out

    def test_missing_file(self, tmp_path, capsys):
        assert search.cli([str(tmp_path / "nope.txt"), "BFS"]) == 1
        assert "cannot read" in capsys.readouterr().out

    def test_undecodable_file(self, tmp_path, capsys):
        path = tmp_path / "binary.txt"
        path.write_bytes(PROBLEM.encode() + b"\xff\xfe bad\n")
        assert search.cli([str(path), "BFS"]) == 1
        assert "cannot read" in capsys.readouterr().out


class TestMultiSearchCli:
    """Comparing every method on a problem file."""

    def test_table(self, problem, capsys):
        assert multi_search.cli([problem]) == 0
        out = capsys.readouterr().out
        for tag in ("bfs", "dfs", "dijkstra", "astar", "greedy"):
            assert tag in out
        assert "A -> B -> D" in out

    def test_threaded(self, problem, capsys):
        assert multi_search.cli([problem, "--workers", "5"]) == 0
        assert "Dijkstra's Algorithm" in capsys.readouterr().out

    def test_missing_endpoints(self, tmp_path, capsys):
        path = tmp_path / "bare.txt"
        path.write_text("Nodes:\nA: (0,0)\n")
        assert multi_search.cli([str(path)]) == 1
        assert "pass --start and --goal" in capsys.readouterr().out

    def test_undecodable_file(self, tmp_path, capsys):
        path = tmp_path / "binary.txt"
        path.write_bytes(PROBLEM.encode() + b"\xff\xfe bad\n")
        assert multi_search.cli([str(path)]) == 1
        assert "cannot read" in capsys.readouterr().out

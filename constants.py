"""Tunable defaults shared by the readers, generator and command line tools."""

# ============================
# Heuristics
# ============================
# Euclidean distance is divided by this to get a node's heuristic
HEURISTIC_SCALE = 50

# ============================
# Sample grid graph
# ============================
GRID_ROWS = 15
GRID_COLS = 15
GRID_SPACING = 60
GRID_OFFSET = (50, 50)
GRID_DIAGONAL_PROBABILITY = 0.3
GRID_WEIGHT_RANGE = (1, 9)            # inclusive, straight edges
GRID_DIAGONAL_WEIGHT_RANGE = (2, 10)  # inclusive, diagonal edges

# ============================
# Command line
# ============================
# Method codes accepted on the command line, mapped to algorithm tags
METHOD_ALIASES = {
    "BFS": "bfs",
    "DFS": "dfs",
    "GBFS": "greedy",
    "GREEDY": "greedy",
    "AS": "astar",
    "ASTAR": "astar",
    "CUS1": "dijkstra",
    "DIJKSTRA": "dijkstra",
}

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

NO_PATH_LABEL = "No Path Found"

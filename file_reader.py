import logging

import pandas as pd

from util import Graph, GraphReader, Node

logger = logging.getLogger(__name__)

NODE_COLUMNS = ['id', 'x', 'y', 'label', 'heuristic']
EDGE_COLUMNS = ['id', 'from', 'to', 'weight', 'bidirectional']


def split_csv_allow_commas(line, min_fields):
    parts = []
    buf = []
    depth = 0
    for ch in line:
        if ch == '(':
            depth += 1
            buf.append(ch)
        elif ch == ')':
            depth = max(depth - 1, 0)
            buf.append(ch)
        elif ch == ',':
            if depth == 0:
                parts.append("".join(buf).strip())
                buf = []
            else:
                buf.append(ch)
        else:
            buf.append(ch)
    if buf:
        parts.append("".join(buf).strip())
    if len(parts) < min_fields:
        raise ValueError(f"Line '{line}' parsed into too few fields: {parts}")
    return parts


def _truthy(text):
    return text.strip().lower() in ("1", "true", "yes", "y", "both")


def parse_config_file(path):
    """Parses a sectioned graph config file

    Args:
        path (string): Filepath to the configuration txt file

    Returns:
        nodes_df: Pandas DataFrame of nodes (index: node id, columns: id, x, y, label, heuristic)
        edges_df: Pandas DataFrame of edges (columns: id, from, to, weight, bidirectional)
        start: start node id from [META] or None
        goal: goal node id from [META] or None
    """
    section = None
    nodes = {}
    edges = []
    start = None
    goal = None

    def is_header(line):
        return line.startswith("[") and line.endswith("]")

    def ignore(line):
        return (not line.strip()) or line.strip().startswith("#")

    with open(path, "r", encoding="utf-8") as f:
        for raw in f:
            line = raw.strip()
            if ignore(line):
                continue
            if is_header(line):
                section = line.upper()
                continue

            try:
                if section == "[NODES]":
                    p = split_csv_allow_commas(line, 3)
                    nid = p[0]
                    nodes[nid] = {
                        "id": nid,
                        "x": float(p[1]),
                        "y": float(p[2]),
                        "label": p[3] if len(p) > 3 and p[3] else nid,
                        "heuristic": float(p[4]) if len(p) > 4 and p[4] else None,
                    }

                elif section == "[EDGES]":
                    p = split_csv_allow_commas(line, 4)
                    edges.append({
                        "id": p[0],
                        "from": p[1],
                        "to": p[2],
                        "weight": float(p[3]),
                        "bidirectional": _truthy(p[4]) if len(p) > 4 else False,
                    })

                elif section == "[META]":
                    p = [x.strip() for x in line.split(",")]
                    key = p[0].upper()
                    if key == "START":
                        start = p[1]
                    elif key == "GOAL":
                        goal = p[1]
                        if len(p) > 2:
                            logger.warning("Only one goal is searched; ignoring %s", ", ".join(p[2:]))
                    else:
                        logger.warning("Unknown [META] key %s", p[0])
            except (ValueError, IndexError) as e:
                logger.warning("Skipping line %r in %s: %s", line, section, e)

    # Convert nodes and edges to pandas DataFrames
    nodes_df = pd.DataFrame(list(nodes.values()), columns=NODE_COLUMNS)
    nodes_df = nodes_df.set_index('id', drop=False)
    nodes_df.index.name = None
    edges_df = pd.DataFrame(edges, columns=EDGE_COLUMNS)
    return nodes_df, edges_df, start, goal


def build_graph(nodes_df, edges_df):
    """Build a Graph from the DataFrames returned by parse_config_file.

    Edges that reference unknown nodes or repeat an id are logged and skipped.
    """
    graph = Graph()
    for _, row in nodes_df.iterrows():
        heuristic = row['heuristic']
        graph.add_node(Node(
            row['id'], row['x'], row['y'],
            label=row['label'],
            heuristic=None if pd.isna(heuristic) else heuristic,
        ))

    for _, row in edges_df.iterrows():
        weight = float(row['weight'])
        if weight.is_integer():
            weight = int(weight)
        try:
            graph.add_edge(row['from'], row['to'], weight,
                           edge_id=row['id'], bidirectional=bool(row['bidirectional']))
        except ValueError as e:
            logger.warning("Skipping edge %s: %s", row['id'], e)
    return graph


def _first_content_line(path):
    with open(path, "r", encoding="utf-8") as f:
        for raw in f:
            line = raw.strip()
            if line and not line.startswith("#"):
                return line
    return ""


def load_problem(path):
    """Load a problem file in either the plain or the sectioned ([NODES]) format.

    Returns:
        Graph with origin and goal set from the file when present.
    """
    if _first_content_line(path).startswith("["):
        nodes_df, edges_df, start, goal = parse_config_file(path)
        graph = build_graph(nodes_df, edges_df)
        graph.origin, graph.goal = start, goal
        return graph
    return GraphReader(path).read_problem()

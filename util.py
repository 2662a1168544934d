import logging

logger = logging.getLogger(__name__)


class GraphError(ValueError):
    """Raised when a graph would break its node/edge/adjacency invariants."""


class Node:
    """Represents a node in the 2D graph."""
    def __init__(self, node_id, x=0, y=0, label=None, heuristic=None):
        self.id = str(node_id)
        self.x = float(x)
        self.y = float(y)
        self.label = label if label is not None else self.id
        self.heuristic = None if heuristic is None else float(heuristic)

    @property
    def position(self):
        return (self.x, self.y)

    def __repr__(self):
        return f"Node {self.id}: ({self.x:g},{self.y:g})"


class Edge:
    """A directed, weighted edge."""
    def __init__(self, edge_id, source, target, weight):
        self.id = str(edge_id)
        self.source = str(source)
        self.target = str(target)
        self.weight = weight

    def __repr__(self):
        return f"Edge {self.id}: {self.source} -> {self.target} ({self.weight})"


class Graph:
    """Represents the complete directed graph.

    Searches only read from it through `node`, `neighbors`, `has_node` and
    `heuristic`; the `add_*` methods are for whoever builds the graph.
    """
    def __init__(self):
        self.nodes = {}           # {node_id: Node}
        self.edges = {}           # {edge_id: Edge}
        self.adjacency = {}       # {from_node_id: [(to_node_id, cost), ...]}
        self.origin = None        # Origin node ID from the problem file
        self.goal = None          # Goal node ID from the problem file

    def add_node(self, node):
        """Adds a Node object to the graph."""
        self.nodes[node.id] = node
        # Initialize adjacency list for the new node
        if node.id not in self.adjacency:
            self.adjacency[node.id] = []
        return node

    def add_edge(self, from_id, to_id, cost=1, edge_id=None, bidirectional=False):
        """Adds a directed edge and its cost.

        Args:
            from_id: source node id
            to_id: target node id
            cost: non-negative weight
            edge_id: defaults to "<from>-<to>"
            bidirectional: also add the reverse edge "<to>-<from>" with the same cost

        Returns:
            The Edge (or the forward Edge when bidirectional).

        Raises:
            GraphError: unknown endpoint, negative cost or duplicate edge id.
        """
        from_id, to_id = str(from_id), str(to_id)
        for endpoint in (from_id, to_id):
            if endpoint not in self.nodes:
                raise GraphError(f"Edge {from_id}->{to_id} references unknown node {endpoint}")
        if cost < 0:
            raise GraphError(f"Edge {from_id}->{to_id} has negative weight {cost}")

        edge_id = str(edge_id) if edge_id is not None else f"{from_id}-{to_id}"
        reverse_id = f"{to_id}-{from_id}"
        if edge_id in self.edges:
            raise GraphError(f"Duplicate edge id {edge_id}")
        if bidirectional and (reverse_id in self.edges or reverse_id == edge_id):
            raise GraphError(f"Duplicate edge id {reverse_id}")

        edge = Edge(edge_id, from_id, to_id, cost)
        self.edges[edge_id] = edge
        self.adjacency[from_id].append((to_id, cost))

        if bidirectional:
            self.edges[reverse_id] = Edge(reverse_id, to_id, from_id, cost)
            self.adjacency[to_id].append((from_id, cost))
        return edge

    def node(self, node_id):
        return self.nodes.get(str(node_id))

    def has_node(self, node_id):
        return str(node_id) in self.nodes

    def neighbors(self, node_id):
        """Outgoing (neighbor_id, cost) pairs in insertion order; empty for unknown nodes."""
        return tuple(self.adjacency.get(str(node_id), ()))

    def heuristic(self, node_id):
        """Heuristic estimate for a node, 0 when it has none."""
        node = self.nodes.get(str(node_id))
        if node is None or node.heuristic is None:
            return 0
        return node.heuristic

    def get_coordinates(self, node_id):
        """Returns the (x, y) coordinates of a node."""
        node = self.nodes.get(str(node_id))
        return node.position if node else None

    def path_cost(self, path):
        """Calculate total cost of edges in the given path."""
        total = 0
        for i in range(len(path) - 1):
            from_node = path[i]
            to_node = path[i + 1]
            # First matching edge in adjacency order wins for parallel edges
            edge_cost = None
            for neighbor, cost in self.adjacency.get(from_node, []):
                if neighbor == to_node:
                    edge_cost = cost
                    break
            if edge_cost is None:
                return None  # Edge not found
            total += edge_cost
        return total

    def __len__(self):
        return len(self.nodes)

    def __repr__(self):
        return f"Graph({len(self.nodes)} nodes, {len(self.edges)} edges)"


def _number(text):
    value = float(text)
    return int(value) if value.is_integer() else value


class GraphReader:
    """Handles parsing the plain-text problem file."""

    def __init__(self, filename):
        self.filename = filename
        self.graph = Graph()

    def read_problem(self):
        """Reads the file and populates the Graph object.

        Raises:
            FileNotFoundError: the problem file does not exist.
        """
        with open(self.filename, 'r', encoding='utf-8') as f:
            lines = [line.strip() for line in f if line.strip()]  # Read and clean lines

        current_section = None
        heuristics = {}
        goals = []

        for line in lines:
            # Determining which section of the file its currently reading
            if line.startswith("Nodes:"):
                current_section = "NODES"
                continue
            elif line.startswith("Edges:"):
                current_section = "EDGES"
                continue
            elif line.startswith("Heuristics:"):
                current_section = "HEURISTICS"
                continue
            elif line.startswith("Origin:"):
                current_section = "ORIGIN"
                continue
            elif line.startswith("Destinations:"):
                current_section = "DESTINATIONS"
                continue

            # Parse the lines base on the current section
            if current_section == "NODES":
                # Example: 1: (4,1)
                try:
                    parts = line.split(':')
                    node_id = parts[0].strip()
                    coords_str = parts[1].strip().strip('()')
                    x, y = map(_number, coords_str.split(','))
                    self.graph.add_node(Node(node_id, x, y))
                except (ValueError, IndexError) as e:
                    logger.warning("Skipping node line %r: %s", line, e)

            elif current_section == "EDGES":
                # Example: (2,1): 4
                try:
                    parts = line.split(':')
                    cost = _number(parts[1].strip())

                    # Extract (2,1)
                    nodes_str = parts[0].strip().strip('()')
                    from_id, to_id = (n.strip() for n in nodes_str.split(','))

                    self.graph.add_edge(from_id, to_id, cost)
                except (ValueError, IndexError) as e:
                    logger.warning("Skipping edge line %r: %s", line, e)

            elif current_section == "HEURISTICS":
                # Example: 1: 3.5
                try:
                    node_id, value = line.split(':')
                    heuristics[node_id.strip()] = float(value)
                except ValueError as e:
                    logger.warning("Skipping heuristic line %r: %s", line, e)

            elif current_section == "ORIGIN":
                self.graph.origin = line.strip()

            elif current_section == "DESTINATIONS":
                # Example: 5; 4
                goals.extend(d.strip() for d in line.split(';') if d.strip())

        for node_id, value in heuristics.items():
            node = self.graph.node(node_id)
            if node is None:
                logger.warning("Heuristic given for unknown node %s", node_id)
                continue
            node.heuristic = value

        if goals:
            if len(goals) > 1:
                logger.warning("Only one destination is searched; using %s and ignoring %s",
                               goals[0], ", ".join(goals[1:]))
            self.graph.goal = goals[0]

        logger.debug("Read %r from %s", self.graph, self.filename)
        return self.graph


def FormatBytes(n_bytes: int) -> str:
    """Convert number of bytes to human-readable in KB/MB with 2 decimals.

    Args:
        n_bytes (int): Number of bytes.

    Returns:
        str: Human-readable string representation.
    """
    if n_bytes < 1024:
        return f"{n_bytes} B"
    kb = n_bytes / 1024.0
    if kb < 1024:
        return f"{kb:.2f} KB"
    mb = kb / 1024.0
    if mb < 1024:
        return f"{mb:.2f} MB"
    gb = mb / 1024.0
    return f"{gb:.2f} GB"

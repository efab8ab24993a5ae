import math

import networkx as nx

from cityroute.errors import GraphConfigError
from cityroute.log import get_logger

logger = get_logger(__name__)

UNREACHABLE = math.inf


def build_sample_graph():
    """
    Creates a small undirected weighted graph for demonstration.
    The shortest route from A to D is A-B-C-D (16), not A-C-D (21).
    """
    G = nx.Graph()

    # (node1, node2, weight)
    edges = [
        ("A", "B", 10),
        ("B", "C", 5),
        ("A", "C", 20),
        ("C", "D", 1),
    ]

    for u, v, w in edges:
        G.add_edge(u, v, weight=w)

    return G


def dijkstra(G, start, end):
    """
    Shortest route between two distinct nodes of a weighted undirected graph.

    Every node starts unsettled; each round settles the unsettled node with
    the smallest tentative distance, taking the first one in graph node
    order on ties, and stops early once only unreachable nodes remain.

    Args:
        G: networkx graph whose edges carry a non-negative 'weight'
        start: source node
        end: target node, distinct from start

    Returns:
        (path, distance): path is the list of nodes from start to end and
        distance its total weight, or ([], UNREACHABLE) when end cannot be
        reached from start.

    Raises:
        GraphConfigError: start or end missing from G, start == end,
        or a negative edge weight.
    """
    for name, node in (("start", start), ("end", end)):
        if node not in G:
            raise GraphConfigError(f"{name} node {node!r} is not in the graph")
    if start == end:
        raise GraphConfigError(f"start and end must differ, both are {start!r}")

    distances = {}
    previous = {}
    unsettled = {}
    for node in G.nodes():
        distances[node] = UNREACHABLE
        previous[node] = None
        unsettled[node] = True

    distances[start] = 0

    while unsettled:
        current = None
        for node in unsettled:
            if current is None or distances[node] < distances[current]:
                current = node

        if distances[current] == UNREACHABLE:
            break

        for neighbor, data in G[current].items():
            weight = data.get('weight', 1)
            if weight < 0:
                raise GraphConfigError(
                    f"negative weight {weight} on edge {current!r}-{neighbor!r}"
                )
            new_dist = distances[current] + weight
            if new_dist < distances[neighbor]:
                distances[neighbor] = new_dist
                previous[neighbor] = current

        del unsettled[current]

    path = []
    node = end
    while node is not None:
        path.append(node)
        node = previous[node]
    path.reverse()

    if path[0] != start:
        logger.debug("no path between %r and %r", start, end)
        return [], UNREACHABLE
    return path, distances[end]


def run_dijkstra(G, source, target):
    """
    Runs Dijkstra's shortest path algorithm between two nodes.
    """
    path, cost = dijkstra(G, source, target)
    logger.debug("route %r -> %r: %s (cost %s)", source, target, path, cost)
    return path, cost


def path_legs(G, path):
    """Split a path into (u, v, weight) legs, in travel order."""
    legs = []
    for u, v in zip(path[:-1], path[1:]):
        data = G.get_edge_data(u, v)
        if data is None:
            raise GraphConfigError(f"path step {u!r} -> {v!r} is not an edge of the graph")
        legs.append((u, v, data.get('weight', 1)))
    return legs


def path_weight(G, path):
    """Total weight of a path; UNREACHABLE for an empty path."""
    if not path:
        return UNREACHABLE
    return sum(w for _, _, w in path_legs(G, path))


if __name__ == "__main__":
    print("Running Dijkstra on the sample graph...")
    G = build_sample_graph()
    path, cost = run_dijkstra(G, "A", "D")
    print(f"Shortest path from A to D: {path} (total cost = {cost})")

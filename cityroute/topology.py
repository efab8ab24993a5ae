"""
Random city graph builder for cityroute
- Creates a simple undirected graph over a fixed list of city names
- Attaches an integer 'weight' (distance in km) to every edge
- Exposes functions to:
    * create the graph (bounded rejection sampling)
    * pick two distinct endpoints for a route query
    * build the city-by-city distance table
    * summarise the graph
Usage:
    from cityroute.topology import create_random_city_graph, choose_endpoints
    G = create_random_city_graph(["Paris", "Lyon", "Nice"], num_edges=2, seed=42)
    start, end = choose_endpoints(list(G.nodes()), seed=42)
"""

import itertools
import random
from collections import Counter

import networkx as nx
import numpy as np

from cityroute.errors import EdgeCountError, GraphConfigError
from cityroute.log import get_logger

logger = get_logger(__name__)

# --- Default constants (tweakable) ---
DEFAULT_NUM_EDGES = 30
DEFAULT_WEIGHT_RANGE = (10, 100)   # km, both ends inclusive
ATTEMPTS_PER_EDGE = 20             # rejection samples allowed per requested edge
MIN_ATTEMPTS = 100


def max_edge_count(n):
    """Number of edges in the complete simple graph on n nodes."""
    return n * (n - 1) // 2


def _validate_cities(cities):
    cities = list(cities)
    if len(cities) < 2:
        raise GraphConfigError(f"need at least 2 city names, got {len(cities)}")
    for name in cities:
        if not isinstance(name, str) or not name:
            raise GraphConfigError(f"city names must be non-empty strings, got {name!r}")
    duplicates = sorted(name for name, count in Counter(cities).items() if count > 1)
    if duplicates:
        raise GraphConfigError(f"duplicate city names: {', '.join(duplicates)}")
    return cities


def _validate_weight_range(weight_range):
    try:
        w_min, w_max = weight_range
    except (TypeError, ValueError):
        raise GraphConfigError(f"weight_range must be a (min, max) pair, got {weight_range!r}")
    for w in (w_min, w_max):
        if isinstance(w, bool) or not isinstance(w, int) or w <= 0:
            raise GraphConfigError(f"edge weights must be positive integers, got {w!r}")
    if w_min > w_max:
        raise GraphConfigError(f"weight_range min {w_min} exceeds max {w_max}")
    return w_min, w_max


def create_random_city_graph(
    cities,
    num_edges=DEFAULT_NUM_EDGES,
    weight_range=DEFAULT_WEIGHT_RANGE,
    seed=None,
    rng=None,
    max_attempts=None,
):
    """
    Create a random weighted undirected graph over the given cities.
    Parameters:
      - cities: sequence of distinct city names (at least 2)
      - num_edges: exact number of edges to place, 0 <= num_edges <= N(N-1)/2
      - weight_range: (min, max) inclusive range of integer edge weights
      - seed: seed for a private random.Random (ignored when rng is given)
      - rng: random.Random instance to draw from
      - max_attempts: rejection samples allowed before falling back to
        sampling the remaining edges from the explicit list of non-edges
    Returns:
      - frozen networkx.Graph; node order follows `cities`, every edge has
        an int 'weight' attribute
    Raises:
      - GraphConfigError on invalid names or weights
      - EdgeCountError when num_edges exceeds the simple-graph maximum
    The graph may be disconnected and may contain isolated cities.
    """
    cities = _validate_cities(cities)
    w_min, w_max = _validate_weight_range(weight_range)

    limit = max_edge_count(len(cities))
    if isinstance(num_edges, bool) or not isinstance(num_edges, int) or num_edges < 0:
        raise GraphConfigError(f"num_edges must be a non-negative integer, got {num_edges!r}")
    if num_edges > limit:
        raise EdgeCountError(num_edges, limit)

    if rng is None:
        rng = random.Random(seed)
    if max_attempts is None:
        max_attempts = ATTEMPTS_PER_EDGE * num_edges + MIN_ATTEMPTS

    G = nx.Graph()
    G.add_nodes_from(cities)

    attempts = 0
    while G.number_of_edges() < num_edges and attempts < max_attempts:
        attempts += 1
        city1 = rng.choice(cities)
        city2 = rng.choice(cities)
        if city1 != city2 and not G.has_edge(city1, city2):
            G.add_edge(city1, city2, weight=rng.randint(w_min, w_max))

    remaining = num_edges - G.number_of_edges()
    if remaining:
        # dense request: draw the rest from what is still free
        logger.debug(
            "rejection sampling stopped after %d attempts, sampling %d of the remaining non-edges",
            attempts,
            remaining,
        )
        free = [(u, v) for u, v in itertools.combinations(cities, 2) if not G.has_edge(u, v)]
        for u, v in rng.sample(free, remaining):
            G.add_edge(u, v, weight=rng.randint(w_min, w_max))

    G.graph['weight_range'] = (w_min, w_max)
    G.graph['requested_edges'] = num_edges
    logger.debug("created city graph with %d nodes and %d edges", G.number_of_nodes(), G.number_of_edges())
    return nx.freeze(G)


# ----------------------
# Utilities: endpoints, tables, summary
# ----------------------

def choose_endpoints(nodes, seed=None, rng=None):
    """
    Pick two distinct nodes for a route query.
    Returns (start, end).
    """
    nodes = list(nodes)
    if len(nodes) < 2:
        raise GraphConfigError(f"need at least 2 nodes to choose endpoints, got {len(nodes)}")
    if rng is None:
        rng = random.Random(seed)
    start, end = rng.sample(nodes, 2)
    return start, end


def canonical_edges(G):
    """
    List every undirected edge once as (u, v, weight) with u < v,
    sorted by endpoint names.
    """
    edges = set()
    for u, v, w in G.edges(data='weight'):
        if v < u:
            u, v = v, u
        edges.add((u, v, w))
    return sorted(edges)


def distance_table(G, cities=None):
    """
    Build the square table of direct distances.
    Row i / column j holds the weight of the edge between cities[i] and
    cities[j], or None when the two cities are not directly connected.
    """
    if cities is None:
        cities = list(G.nodes())
    rows = []
    for c1 in cities:
        row = []
        for c2 in cities:
            data = G.get_edge_data(c1, c2) if c1 in G and c2 in G else None
            row.append(data['weight'] if data else None)
        rows.append(row)
    return rows


def graph_summary(G):
    n = G.number_of_nodes()
    m = G.number_of_edges()
    degs = np.array([d for _, d in G.degree()], dtype=float)
    weights = np.array([w for _, _, w in G.edges(data='weight')], dtype=float)
    return {
        'nodes': n,
        'edges': m,
        'avg_degree': float(degs.mean()) if degs.size else 0.0,
        'avg_weight': float(weights.mean()) if weights.size else 0.0,
        'isolated': sorted(nx.isolates(G)),
        'components': nx.number_connected_components(G) if n else 0,
    }

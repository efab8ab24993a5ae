import base64
import random

from cityroute.dijkstra import UNREACHABLE, dijkstra, path_legs
from cityroute.layout import circular_layout
from cityroute.log import get_logger
from cityroute.topology import choose_endpoints, create_random_city_graph, graph_summary
from cityroute.visualize import render_route_png

logger = get_logger(__name__)


def plan_random_route(cities, config):
    """
    Run one route query end to end:
    generate graph -> pick endpoints -> Dijkstra -> circular layout -> PNG.

    Every call builds its own graph and random source, nothing is shared
    between calls. With config['seed'] set the whole result is reproducible.

    Returns a dict with keys:
      graph, cities, start, end, path, distance, legs, positions,
      image_png, summary
    """
    cities = list(cities)
    rng = random.Random(config.get("seed"))
    canvas = config["canvas"]

    G = create_random_city_graph(
        cities,
        num_edges=config["num_edges"],
        weight_range=(config["weight_min"], config["weight_max"]),
        rng=rng,
    )
    start, end = choose_endpoints(cities, rng=rng)
    logger.info("routing %s -> %s over %d cities and %d roads",
                start, end, G.number_of_nodes(), G.number_of_edges())

    path, distance = dijkstra(G, start, end)
    if path:
        logger.info("shortest route %s (%s km)", " -> ".join(path), distance)
    else:
        logger.info("no route between %s and %s", start, end)

    positions = circular_layout(
        cities,
        width=canvas["width"],
        height=canvas["height"],
        radius=canvas.get("radius"),
    )
    image_png = render_route_png(G, positions, path=path,
                                 width=canvas["width"], height=canvas["height"])

    return {
        "graph": G,
        "cities": cities,
        "start": start,
        "end": end,
        "path": path,
        "distance": distance,
        "legs": path_legs(G, path),
        "positions": positions,
        "image_png": image_png,
        "summary": graph_summary(G),
    }


def format_route_details(result):
    """Human-readable route lines, one leg per line plus the total."""
    if not result["path"] or result["distance"] == UNREACHABLE:
        return ["No path found."]
    lines = ["Shortest route :"]
    for u, v, w in result["legs"]:
        lines.append(f"{u} → {v} : {w} km")
    lines.append(f"Total distance: {result['distance']} km")
    return lines


def image_data_uri(png_bytes):
    return "data:image/png;base64," + base64.b64encode(png_bytes).decode("ascii")

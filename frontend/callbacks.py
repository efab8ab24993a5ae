import copy

from dash import Input, Output, State

from cityroute.config import validate_config
from cityroute.errors import CityRouteError
from cityroute.log import get_logger
from cityroute.planner import format_route_details, image_data_uri, plan_random_route
from cityroute.topology import distance_table

from .layout import (
    create_distance_table,
    create_graph_image,
    create_kpi_card,
    create_network_figure,
    create_empty_figure,
    create_route_details,
    PATH_COLOR,
)

logger = get_logger(__name__)


def _whole_number(value):
    # number inputs may send 3.0 for 3
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def build_route_view(config, cities, num_edges=None, seed=None):
    """
    Run one route query and build every component the page shows.
    num_edges / seed override the config values when given.
    Returns a dict keyed by the output it fills.
    """
    config = copy.deepcopy(config)
    if num_edges is not None:
        config["num_edges"] = _whole_number(num_edges)
    if seed is not None:
        config["seed"] = _whole_number(seed)
    validate_config(config)

    result = plan_random_route(cities, config)
    summary = result["summary"]
    found = bool(result["path"])

    return {
        "status": f"Status: {summary['nodes']} cities, {summary['edges']} roads",
        "title": f"Path between {result['start']} & {result['end']}",
        "details": create_route_details(format_route_details(result)),
        "table": create_distance_table(result["cities"], distance_table(result["graph"], result["cities"])),
        "image": create_graph_image(image_data_uri(result["image_png"])),
        "figure": create_network_figure(result["graph"], result["positions"], result["path"]),
        "kpi_distance": create_kpi_card("Distance (km)", str(result["distance"]) if found else "unreachable", PATH_COLOR),
        "kpi_hops": create_kpi_card("Hops", str(len(result["path"]) - 1) if found else "N/A"),
        "kpi_roads": create_kpi_card("Roads / Components", f"{summary['edges']} / {summary['components']}"),
    }


def build_error_view(message):
    return {
        "status": f"Status: Error - {message}",
        "title": "Path",
        "details": create_route_details([message]),
        "table": None,
        "image": None,
        "figure": create_empty_figure("City Network"),
        "kpi_distance": create_kpi_card("Distance (km)", "N/A"),
        "kpi_hops": create_kpi_card("Hops", "N/A"),
        "kpi_roads": create_kpi_card("Roads / Components", "N/A"),
    }


VIEW_OUTPUTS = [
    ("status", Output("route-status", "children")),
    ("title", Output("route-title", "children")),
    ("details", Output("route-details", "children")),
    ("table", Output("distance-table", "children")),
    ("image", Output("graph-image", "children")),
    ("figure", Output("graph-network", "figure")),
    ("kpi_distance", Output("kpi-distance", "children")),
    ("kpi_hops", Output("kpi-hops", "children")),
    ("kpi_roads", Output("kpi-roads", "children")),
]


def register_callbacks(app, config, cities):

    @app.callback(
        [output for _, output in VIEW_OUTPUTS],
        [Input("btn-new-route", "n_clicks")],
        [State("input-edges", "value"),
         State("input-seed", "value")],
    )
    def new_route(n_clicks, num_edges, seed):
        try:
            view = build_route_view(config, cities, num_edges=num_edges, seed=seed)
        except CityRouteError as e:
            logger.warning("route query rejected: %s", e)
            view = build_error_view(str(e))
        return [view[key] for key, _ in VIEW_OUTPUTS]

"""
Tests for the Dash front end: page components built from a route query.
"""

import dash
import dash_bootstrap_components as dbc
from dash import html

from cityroute.config import load_config
from cityroute.errors import GraphConfigError
from cityroute.topology import create_random_city_graph
from cityroute.layout import circular_layout
from frontend.callbacks import VIEW_OUTPUTS, build_error_view, build_route_view, register_callbacks
from frontend.layout import build_layout, create_distance_table, create_network_figure

CITIES = ["Paris", "Lyon", "Marseille", "Toulouse", "Nice"]


def small_config():
    config = load_config()
    config["num_edges"] = 4
    config["canvas"] = {"width": 500, "height": 400, "radius": None}
    return config


def test_build_layout():
    layout = build_layout(num_edges=12, seed=3)
    assert isinstance(layout, html.Div)


def test_route_view_components():
    view = build_route_view(small_config(), CITIES, seed=11)
    assert set(view) == {key for key, _ in VIEW_OUTPUTS}
    assert view["title"].startswith("Path between ")
    assert view["status"] == "Status: 5 cities, 4 roads"
    assert view["image"].src.startswith("data:image/png;base64,")
    assert isinstance(view["table"], dbc.Table)

    again = build_route_view(small_config(), CITIES, seed=11)
    assert view["title"] == again["title"]


def test_route_view_overrides_edge_count():
    view = build_route_view(small_config(), CITIES, num_edges=10, seed=2)
    assert view["status"] == "Status: 5 cities, 10 roads"
    # complete graph, so a route always exists
    details = [line.children for line in view["details"].children]
    assert details[-1].startswith("Total distance: ")


def test_distance_table_marks_missing_roads():
    rows = [[None, 7, None], [7, None, None], [None, None, None]]
    table = create_distance_table(["A", "B", "C"], rows)
    body = table.children[1]
    cells = [td.children for td in body.children[0].children[1:]]
    assert cells == ["-", "7", "-"]


def test_network_figure_traces():
    G = create_random_city_graph(CITIES, num_edges=6, seed=5)
    pos = circular_layout(CITIES, width=500, height=400)
    fig = create_network_figure(G, pos, path=[])
    # one trace per road, one for weight labels, one for cities
    assert len(fig.data) == G.number_of_edges() + 2
    assert list(fig.data[-1].text) == CITIES


def test_error_view():
    view = build_error_view("cannot place 99 edges")
    assert view["status"] == "Status: Error - cannot place 99 edges"
    assert view["table"] is None


def test_register_callbacks():
    app = dash.Dash(__name__)
    app.layout = build_layout()
    register_callbacks(app, small_config(), CITIES)
    assert any("route-status.children" in key for key in app.callback_map)


def test_route_view_rejects_bad_overrides():
    for overrides in ({"num_edges": 2.7}, {"num_edges": -1}, {"seed": -5}, {"seed": 1.5}):
        try:
            build_route_view(small_config(), CITIES, **overrides)
        except GraphConfigError:
            continue
        raise AssertionError(f"{overrides} was accepted")

    # whole numbers sent as floats by the number input are fine
    view = build_route_view(small_config(), CITIES, num_edges=3.0, seed=4.0)
    assert view["status"] == "Status: 5 cities, 3 roads"

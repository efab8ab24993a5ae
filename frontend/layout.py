import dash_bootstrap_components as dbc
from dash import dcc, html
import plotly.graph_objects as go

from cityroute.topology import canonical_edges
from cityroute.visualize import path_edge_set

# --- Colors ---
PLOT_BG_COLOR = '#FFFFFF'
PLOT_FONT_COLOR = '#1E1E1E'
PATH_COLOR = '#FF0000'
EDGE_COLOR = '#969696'
NODE_COLOR = '#1E1E1E'
ACCENT_COLOR = '#0000A0'
# ------------------------------------------------

# --- Plot & Card Creation Functions ---

def create_network_figure(G=None, pos=None, path=None):
    """Interactive Plotly version of the route diagram, same circular positions."""
    if G is None or pos is None:
        return create_empty_figure("City Network")

    highlighted = path_edge_set(path or [])

    edge_traces = []
    label_x, label_y, label_text = [], [], []
    for u, v, w in canonical_edges(G):
        x0, y0 = pos[u]
        x1, y1 = pos[v]
        on_path = (u, v) in highlighted
        edge_traces.append(go.Scatter(
            x=[x0, x1], y=[y0, y1],
            line=dict(width=4 if on_path else 1.5, color=PATH_COLOR if on_path else EDGE_COLOR),
            hoverinfo='text',
            text=f"{u} - {v}: {w} km",
            mode='lines',
            showlegend=False,
        ))
        label_x.append((x0 + x1) / 2)
        label_y.append((y0 + y1) / 2)
        label_text.append(str(w))

    label_trace = go.Scatter(
        x=label_x, y=label_y, mode='text', text=label_text,
        textfont=dict(size=10, color=PLOT_FONT_COLOR), hoverinfo='skip', showlegend=False,
    )

    nodes = list(G.nodes())
    node_trace = go.Scatter(
        x=[pos[n][0] for n in nodes],
        y=[pos[n][1] for n in nodes],
        mode='markers+text',
        text=nodes,
        textposition='middle right',
        hovertext=[f"<b>{n}</b><br>Roads: {G.degree(n)}" for n in nodes],
        hoverinfo='text',
        marker=dict(color=NODE_COLOR, size=12),
        showlegend=False,
    )

    fig = go.Figure(
        data=edge_traces + [label_trace, node_trace],
        layout=go.Layout(
            title='City Network',
            hovermode='closest',
            margin=dict(b=0, l=0, r=0, t=40),
            xaxis=dict(showgrid=False, zeroline=False, showticklabels=False),
            # canvas y grows downwards, like the PNG
            yaxis=dict(showgrid=False, zeroline=False, showticklabels=False,
                       autorange='reversed', scaleanchor='x'),
            plot_bgcolor=PLOT_BG_COLOR,
            paper_bgcolor=PLOT_BG_COLOR,
            font_color=PLOT_FONT_COLOR,
        )
    )
    return fig


def create_empty_figure(title):
    """Creates a blank figure with a title."""
    return go.Figure(
        layout=go.Layout(
            title=title,
            xaxis=dict(visible=False),
            yaxis=dict(visible=False),
            paper_bgcolor=PLOT_BG_COLOR,
            plot_bgcolor=PLOT_BG_COLOR,
            font_color=PLOT_FONT_COLOR
        )
    )


def create_kpi_card(title, value, color=ACCENT_COLOR):
    """Creates a single KPI stat card."""
    return html.Div(
        [
            html.P(title, className="card-title"),
            html.H3(value, className="card-text", style={'color': color}),
        ],
        className="kpi-card"
    )


def create_route_details(lines):
    """One paragraph per route detail line."""
    return html.Div([html.Div(line) for line in lines], className="route-details")


def create_distance_table(cities, rows):
    """City-by-city table of direct distances, '-' where there is no road."""
    header = html.Thead(html.Tr([html.Th("City")] + [html.Th(c) for c in cities]))
    body = html.Tbody([
        html.Tr([html.Th(c1)] + [html.Td("-" if d is None else str(d)) for d in row])
        for c1, row in zip(cities, rows)
    ])
    return dbc.Table([header, body], bordered=True, size="sm", className="distance-table")


def create_graph_image(src):
    """The rendered PNG, embedded as a data URI."""
    return html.Img(src=src, alt="Graph", style={'maxWidth': '100%'})

# --- Layout Building Functions ---

def build_navbar():
    """Builds the top navigation bar."""
    return dbc.Navbar(
        dbc.Container([
            html.Div([
                html.Span("City Route"),
                html.Span(" // Shortest Path Finder", className="navbar-brand-accent")
            ], className="navbar-brand"),
        ], fluid=True),
        className="mb-4",
    )


def build_control_panel(num_edges=30, seed=None):
    """Builds the query controls."""
    return dbc.Card(
        dbc.CardBody([
            dbc.Row([
                dbc.Col(html.H5("Graph Parameters"), width=12),
                dbc.Col([
                    dbc.Label("Number of Roads:"),
                    dbc.Input(id="input-edges", type="number", value=num_edges, min=0, step=1),
                ], width=4),
                dbc.Col([
                    dbc.Label("Random Seed (for reproducibility):"),
                    dbc.Input(id="input-seed", type="number", value=seed, min=0, step=1),
                    html.Small("Leave empty for a new graph every time", style={'fontStyle': 'italic'}),
                ], width=4),
                dbc.Col(
                    dbc.Button("New route", id="btn-new-route", color="primary", n_clicks=0, className="mt-4"),
                    width=4,
                ),
            ]),
        ]),
    )


def build_layout(num_edges=30, seed=None):
    """Builds the main app layout."""
    return html.Div([
        build_navbar(),

        dbc.Container([
            dbc.Row([
                dbc.Col([
                    html.H1("Shortest route", style={'fontWeight': '700'}),
                    html.Div("Status: Idle", id="route-status", className="mt-2 mb-3",
                             style={'fontFamily': 'monospace'}),
                ], width=12),
            ]),

            build_control_panel(num_edges=num_edges, seed=seed),

            dbc.Row([
                dbc.Col(create_kpi_card("Distance (km)", "N/A"), id="kpi-distance", width=4),
                dbc.Col(create_kpi_card("Hops", "N/A"), id="kpi-hops", width=4),
                dbc.Col(create_kpi_card("Roads / Components", "N/A"), id="kpi-roads", width=4),
            ], className="mt-4"),

            dbc.Row([
                dbc.Col(dbc.Card(dbc.CardBody([
                    html.H2("Path", id="route-title"),
                    html.Div(id="route-details"),
                ])), width=12),
            ], className="mt-3"),

            dbc.Row([
                dbc.Col(dbc.Card(dbc.CardBody([
                    html.H2("Table of distances"),
                    html.Div(id="distance-table"),
                ])), width=12),
            ], className="mt-3"),

            dbc.Row([
                dbc.Col(dbc.Card(dbc.CardBody([
                    html.H2("Network graph"),
                    html.Div(id="graph-image"),
                ])), width=7),
                dbc.Col(dbc.Card(dbc.CardBody(
                    dcc.Graph(id="graph-network", figure=create_empty_figure("City Network"),
                              style={"height": "60vh"})
                )), width=5),
            ], className="mt-3"),

        ], fluid=True, style={'padding': '0 2rem 2rem 2rem'})
    ])

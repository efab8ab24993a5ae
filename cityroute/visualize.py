"""
Route diagram renderer.
Draws the city graph on a fixed pixel canvas with matplotlib:
- every undirected edge once, as a line labelled with its weight
- the edges of the highlighted route in red, all other edges in gray
- every city as a black dot with its name next to it
and encodes the result as PNG bytes.
"""

import io

from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from cityroute.errors import GraphConfigError
from cityroute.layout import DEFAULT_CANVAS_HEIGHT, DEFAULT_CANVAS_WIDTH
from cityroute.log import get_logger
from cityroute.topology import canonical_edges

logger = get_logger(__name__)

# --- Colors & styles ---
BACKGROUND_COLOR = '#FFFFFF'
NODE_COLOR = '#1E1E1E'
LABEL_COLOR = '#1E1E1E'
EDGE_COLOR = '#969696'
PATH_COLOR = '#FF0000'
EDGE_WIDTH = 1.0
PATH_WIDTH = 3.0
NODE_SIZE = 12       # marker diameter in px
DEFAULT_DPI = 100


def path_edge_set(path):
    """Canonical (u, v) pairs, u < v, for the consecutive steps of a path."""
    edges = set()
    for u, v in zip(path[:-1], path[1:]):
        edges.add((u, v) if u < v else (v, u))
    return edges


def _px_to_points(px, dpi):
    return px * 72.0 / dpi


def draw_route_graph(ax, G, pos, path=None, width=DEFAULT_CANVAS_WIDTH,
                     height=DEFAULT_CANVAS_HEIGHT, dpi=DEFAULT_DPI):
    """
    Draw G onto a matplotlib Axes spanning a width x height pixel canvas.

    Args:
        ax: target Axes
        G: weighted undirected graph
        pos: dict node -> (x, y) in canvas pixels (y grows downwards)
        path: optional route to highlight, as a list of nodes

    Returns:
        dict mapping each canonical edge (u, v), u < v, to its Line2D
    """
    missing = [node for node in G.nodes() if node not in pos]
    if missing:
        raise GraphConfigError(f"no position for nodes: {', '.join(map(str, missing))}")

    path = list(path or [])
    highlighted = path_edge_set(path)
    for u, v in highlighted:
        if not G.has_edge(u, v):
            raise GraphConfigError(f"highlighted path uses missing edge {u!r}-{v!r}")

    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_aspect('equal')
    ax.axis('off')

    lines = {}
    for u, v, w in canonical_edges(G):
        (x1, y1), (x2, y2) = pos[u], pos[v]
        on_path = (u, v) in highlighted
        line, = ax.plot(
            [x1, x2], [y1, y2],
            color=PATH_COLOR if on_path else EDGE_COLOR,
            linewidth=PATH_WIDTH if on_path else EDGE_WIDTH,
            solid_capstyle='round',
            zorder=2 if on_path else 1,
        )
        lines[(u, v)] = line

        mx, my = (x1 + x2) / 2, (y1 + y2) / 2
        ax.text(
            mx, my, str(w),
            ha='center', va='center', fontsize=8, color=LABEL_COLOR, zorder=3,
            bbox=dict(boxstyle='square,pad=0.2', facecolor=BACKGROUND_COLOR, edgecolor='none'),
        )

    nodes = list(G.nodes())
    if nodes:
        xs = [pos[n][0] for n in nodes]
        ys = [pos[n][1] for n in nodes]
        marker_pt = _px_to_points(NODE_SIZE, dpi)
        ax.scatter(xs, ys, s=marker_pt ** 2, c=NODE_COLOR, zorder=4)
        for node, x, y in zip(nodes, xs, ys):
            ax.text(x + 10, y - 7, str(node), ha='left', va='top',
                    fontsize=11, color=LABEL_COLOR, zorder=5)

    return lines


def render_route_png(G, pos, path=None, width=DEFAULT_CANVAS_WIDTH,
                     height=DEFAULT_CANVAS_HEIGHT, dpi=DEFAULT_DPI):
    """
    Render the graph with the route highlighted and return PNG bytes.
    Uses a standalone Figure with an Agg canvas, so nothing is registered
    with pyplot and concurrent renders do not share state.
    """
    fig = Figure(figsize=(width / dpi, height / dpi), dpi=dpi, facecolor=BACKGROUND_COLOR)
    FigureCanvasAgg(fig)
    ax = fig.add_axes([0, 0, 1, 1])
    draw_route_graph(ax, G, pos, path=path, width=width, height=height, dpi=dpi)

    buf = io.BytesIO()
    fig.savefig(buf, format='png', dpi=dpi, facecolor=BACKGROUND_COLOR)
    data = buf.getvalue()
    logger.debug("rendered %dx%d route diagram (%d bytes)", width, height, len(data))
    return data

"""Circular node placement for the route diagram."""

import numpy as np

from cityroute.errors import GraphConfigError

DEFAULT_CANVAS_WIDTH = 1000
DEFAULT_CANVAS_HEIGHT = 800
DEFAULT_MARGIN = 80   # px between the circle and the nearest canvas edge


def default_radius(width, height):
    return min(width, height) / 2 - DEFAULT_MARGIN


def circular_layout(nodes, width=DEFAULT_CANVAS_WIDTH, height=DEFAULT_CANVAS_HEIGHT, radius=None):
    """
    Place nodes evenly on a circle centred in the canvas.

    Node i of N sits at angle 2*pi*i/N, starting at angle 0 (to the right of
    the centre) and following the order of `nodes`. Coordinates are canvas
    pixels with y growing downwards, so increasing angles run clockwise on
    screen.

    Args:
        nodes: ordered sequence of distinct node names
        width, height: canvas size in pixels
        radius: circle radius; defaults to min(width, height) / 2 - 80

    Returns:
        dict mapping node -> (x, y)
    """
    nodes = list(nodes)
    if width <= 0 or height <= 0:
        raise GraphConfigError(f"canvas must have a positive size, got {width}x{height}")
    if radius is None:
        radius = default_radius(width, height)
    if radius <= 0:
        raise GraphConfigError(f"layout radius must be positive, got {radius}")
    if len(set(nodes)) != len(nodes):
        raise GraphConfigError("layout nodes must be distinct")
    if not nodes:
        return {}

    cx, cy = width / 2, height / 2
    angles = 2 * np.pi * np.arange(len(nodes)) / len(nodes)
    xs = cx + np.cos(angles) * radius
    ys = cy + np.sin(angles) * radius
    return {node: (float(x), float(y)) for node, x, y in zip(nodes, xs, ys)}

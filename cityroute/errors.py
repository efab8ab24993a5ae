"""Exceptions raised by cityroute.

A query whose endpoints lie in different components is not an error:
the solver returns an empty path with an unreachable distance instead.
"""


class CityRouteError(Exception):
    """Base class for all cityroute errors."""


class GraphConfigError(CityRouteError, ValueError):
    """Invalid caller input: node names, edge count, weights, endpoints, canvas."""


class EdgeCountError(GraphConfigError):
    """The requested edge count cannot be satisfied by a simple graph."""

    def __init__(self, requested, maximum):
        self.requested = requested
        self.maximum = maximum
        super().__init__(
            f"cannot place {requested} edges: a simple graph on these nodes "
            f"has at most {maximum}"
        )


class ConfigFileError(CityRouteError):
    """A configuration or city list file is missing, unreadable or malformed."""

"""City route finder: random weighted city graphs, Dijkstra routes and PNG diagrams."""

__version__ = "0.1.0"

"""Bellman-Ford shortest paths and travelling-salesman circuits on graphs of single-character vertices."""

__version__ = "0.1.0"
__all__ = ["graph", "bellman", "tsm", "cli"]
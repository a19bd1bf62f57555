"""Algorithms and data structures: modular arithmetic, number theory, range trees, flows, graphs, strings and geometry."""

__version__ = "0.1.0"
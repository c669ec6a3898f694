"""Synthetic directed-graph generation with depth, cycle, and label constraints."""

__version__ = "0.1.0"

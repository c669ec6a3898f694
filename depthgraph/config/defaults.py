"""Anchor configuration: single source of truth for default generator parameters."""

from depthgraph.config.generation import GeneratorConfig, GraphConfig

# Five vertices, a three-vertex chain, no extra edges, seed 42.
# Generates "5\n2\n0 1\n1 2\n" regardless of the seed.
DEFAULT_CONFIG = GeneratorConfig(graph=GraphConfig(), seed=42)

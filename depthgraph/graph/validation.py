"""Post-generation checks for the guarantees the generator makes.

These only confirm properties that hold by construction (edge count,
chain, orientation); they are not general graph algorithms.
"""

import logging

import numpy as np

from depthgraph.config.generation import GraphConfig
from depthgraph.graph.types import Graph

log = logging.getLogger(__name__)


def validate_graph(graph: Graph, config: GraphConfig) -> list[str]:
    """Validate a generated graph against its configuration.

    Checks (cheapest first):
    1. Vertex and edge counts
    2. No self-loops
    3. Chain edges present
    4. Orientation: all edges forward when acyclic, at least one edge
       backward inside the chain when cycles were requested

    Args:
        graph: Generated graph.
        config: Structural constraints it was generated from.

    Returns:
        List of error strings (empty = valid graph).
    """
    errors: list[str] = []

    if graph.vertex_count != config.num_vertices:
        errors.append(
            f"Vertex count {graph.vertex_count} != {config.num_vertices}"
        )
    if graph.edge_count != config.expected_edges:
        errors.append(
            f"Edge count {graph.edge_count} != {config.expected_edges}"
        )

    edges = list(graph.edges())
    if len(edges) != graph.edge_count:
        errors.append(
            f"Stored edges ({len(edges)}) disagree with edge_count "
            f"({graph.edge_count})"
        )

    self_loops = [src for src, dst in edges if src == dst]
    if self_loops:
        errors.append(f"Self-loops detected at vertices {self_loops}")

    missing = [
        (i - 1, i)
        for i in range(1, config.min_graph_depth)
        if not graph.has_edge(i - 1, i)
    ]
    if missing:
        errors.append(f"Chain edges missing: {missing}")

    if config.has_cycles:
        depth = config.min_graph_depth
        if not any(dst < src < depth for src, dst in edges):
            errors.append(
                f"No back edge within the first {depth} vertices"
            )
    else:
        backward = [(src, dst) for src, dst in edges if src >= dst]
        if backward:
            errors.append(f"Non-forward edges in acyclic graph: {backward}")

    log.debug("validate_graph: %d errors", len(errors))
    return errors


def validate_labels(labels: np.ndarray, n: int) -> list[str]:
    """Check that ``labels`` is a permutation of ``range(n)``."""
    if labels.shape != (n,):
        return [f"Label array shape {labels.shape} != ({n},)"]
    if not np.array_equal(np.sort(labels), np.arange(n)):
        return ["Labels are not a permutation of the vertex range"]
    return []

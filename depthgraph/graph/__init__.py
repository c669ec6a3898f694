"""Constrained directed graph generation and edge-list output."""

from depthgraph.graph.edgelist import (
    format_edge_list,
    load_edge_list,
    save_edge_list,
    write_edge_list,
)
from depthgraph.graph.generator import (
    EdgeSampler,
    GraphGenerationError,
    build_chain,
    generate_graph,
    max_edges,
)
from depthgraph.graph.labels import output_labels
from depthgraph.graph.types import (
    DuplicateEdgeError,
    GeneratedGraph,
    GenerationState,
    Graph,
)
from depthgraph.graph.validation import validate_graph, validate_labels

__all__ = [
    "DuplicateEdgeError",
    "EdgeSampler",
    "GeneratedGraph",
    "GenerationState",
    "Graph",
    "GraphGenerationError",
    "build_chain",
    "format_edge_list",
    "generate_graph",
    "load_edge_list",
    "max_edges",
    "output_labels",
    "save_edge_list",
    "validate_graph",
    "validate_labels",
    "write_edge_list",
]

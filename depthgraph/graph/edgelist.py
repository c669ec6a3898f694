"""Plain-text edge-list serialization.

Format::

    <num_vertices>
    <num_edges>
    <from> <to>
    ...

Edge lines follow internal row-major order; only the printed labels are
permuted.
"""

import io
import logging
from pathlib import Path
from typing import TextIO

import numpy as np

from depthgraph.graph.types import Graph

log = logging.getLogger(__name__)


def write_edge_list(graph: Graph, labels: np.ndarray, sink: TextIO) -> None:
    """Write ``graph`` to a text sink using ``labels`` for vertex names."""
    sink.write(f"{graph.vertex_count}\n")
    sink.write(f"{graph.edge_count}\n")
    for src, dst in graph.edges():
        sink.write(f"{labels[src]} {labels[dst]}\n")


def format_edge_list(graph: Graph, labels: np.ndarray) -> str:
    """Render the edge list as a string."""
    buf = io.StringIO()
    write_edge_list(graph, labels, buf)
    return buf.getvalue()


def save_edge_list(graph: Graph, labels: np.ndarray, path: Path) -> Path:
    """Write the edge list to ``path``, truncating any existing file."""
    path = Path(path)
    with open(path, "w") as f:
        write_edge_list(graph, labels, f)
    log.info("Edge list written to %s", path)
    return path


def load_edge_list(source: TextIO | str | Path) -> tuple[int, list[tuple[int, int]]]:
    """Parse an edge list back into ``(num_vertices, edges)``.

    Args:
        source: Open text stream, or a path to read.

    Returns:
        Vertex count and the labeled edges in file order.

    Raises:
        ValueError: If the header is missing, a line is malformed, a label
            is out of range, or the edge count disagrees with the body.
    """
    if isinstance(source, (str, Path)):
        text = Path(source).read_text()
    else:
        text = source.read()

    lines = [line for line in text.splitlines() if line.strip()]
    if len(lines) < 2:
        raise ValueError("Edge list must start with vertex and edge counts")

    try:
        n = int(lines[0])
        m = int(lines[1])
    except ValueError as e:
        raise ValueError(f"Invalid edge list header: {e}") from e

    edges: list[tuple[int, int]] = []
    for lineno, line in enumerate(lines[2:], start=3):
        parts = line.split()
        if len(parts) != 2:
            raise ValueError(f"Line {lineno}: expected 2 fields, got {line!r}")
        try:
            src, dst = int(parts[0]), int(parts[1])
        except ValueError as e:
            raise ValueError(f"Line {lineno}: {e}") from e
        if not (0 <= src < n and 0 <= dst < n):
            raise ValueError(
                f"Line {lineno}: edge ({src}, {dst}) outside [0, {n})"
            )
        edges.append((src, dst))

    if len(edges) != m:
        raise ValueError(f"Header declares {m} edges but found {len(edges)}")
    return n, edges

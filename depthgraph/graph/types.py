"""Graph data structures for constrained graph generation and output."""

import enum
from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np
import scipy.sparse


class DuplicateEdgeError(ValueError):
    """Raised when an edge that already exists is added again."""


class GenerationState(enum.Enum):
    """States of the per-edge rejection sampler."""

    SAMPLE = "sample"
    ACCEPT = "accept"
    REJECT = "reject"
    TERMINAL = "terminal"
    FATAL = "fatal"


class Graph:
    """Dense boolean adjacency store over a fixed number of vertices.

    Edge ``(from, to)`` is stored at flat index ``from + to * vertex_count``,
    i.e. ``matrix[to, from]`` in the C-ordered 2-D array. The store is
    append-only: edges are never removed, and ``edge_count`` always equals
    the number of True entries.

    Self-loops are not rejected here; callers must not insert them.
    """

    def __init__(self, vertex_count: int) -> None:
        if vertex_count <= 0:
            raise ValueError(
                f"vertex_count must be positive, got {vertex_count}"
            )
        self._vertex_count = vertex_count
        self._edge_count = 0
        self._matrix = np.zeros((vertex_count, vertex_count), dtype=bool)

    @property
    def vertex_count(self) -> int:
        return self._vertex_count

    @property
    def edge_count(self) -> int:
        return self._edge_count

    @property
    def adjacency(self) -> np.ndarray:
        """Read-only flat view of the matrix, indexed by ``from + to * n``."""
        view = self._matrix.reshape(-1)
        view.flags.writeable = False
        return view

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < self._vertex_count:
            raise IndexError(
                f"vertex {vertex} out of range [0, {self._vertex_count})"
            )

    def add_edge(self, src: int, dst: int) -> None:
        """Insert the directed edge ``src -> dst``.

        Raises:
            IndexError: If either endpoint is outside the vertex range.
            DuplicateEdgeError: If the edge is already present.
        """
        self._check_vertex(src)
        self._check_vertex(dst)
        if self._matrix[dst, src]:
            raise DuplicateEdgeError(f"edge ({src}, {dst}) already exists")
        self._matrix[dst, src] = True
        self._edge_count += 1

    def has_edge(self, src: int, dst: int) -> bool:
        self._check_vertex(src)
        self._check_vertex(dst)
        return bool(self._matrix[dst, src])

    def edges(self) -> Iterator[tuple[int, int]]:
        """Yield edges in row-major order: ascending source, then target."""
        # matrix.T is indexed [from, to]; argwhere scans it row-major.
        for src, dst in np.argwhere(self._matrix.T):
            yield int(src), int(dst)

    def to_sparse(self) -> scipy.sparse.csr_matrix:
        """Return the adjacency as a CSR matrix with rows=source, cols=target."""
        return scipy.sparse.csr_matrix(self._matrix.T.astype(np.int8))

    def __repr__(self) -> str:
        return (
            f"Graph(vertex_count={self._vertex_count}, "
            f"edge_count={self._edge_count})"
        )


@dataclass(frozen=True)
class GeneratedGraph:
    """Immutable result of one generation run.

    Uses frozen=True but omits slots=True since numpy objects don't
    interact well with __slots__.
    """

    graph: Graph
    labels: np.ndarray  # int array of length n, internal index -> output label
    seed: int | None  # seed that produced this graph (None if an rng was injected)
    attempts: int  # total sampling attempts, accepted and rejected

    @property
    def n(self) -> int:
        return self.graph.vertex_count

    def labeled_edges(self) -> list[tuple[int, int]]:
        """Edges in output order with labels substituted."""
        return [
            (int(self.labels[src]), int(self.labels[dst]))
            for src, dst in self.graph.edges()
        ]

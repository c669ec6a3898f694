"""Constrained directed graph generator with bounded-retry rejection sampling.

Generation runs in three phases on a single seeded random stream:

1. Seed a chain ``0 -> 1 -> ... -> min_graph_depth - 1`` deterministically.
2. Add ``additional_edges`` distinct edges by rejection sampling, either
   acyclic (every edge points from a lower to a higher index) or cyclic
   (the first extra edge is forced to close a cycle on the chain).
3. Draw the output label permutation.

Draw order per sampling attempt, all via ``rng.integers(low, high)``:

- ``head = integers(0, n)``
- cyclic, first extra edge: ``head %= depth``; ``tail = integers(0, depth)``
- cyclic, later edges: ``tail = integers(0, n)``
- acyclic: no second draw if ``head == 0``; else ``tail = integers(0, head)``

The candidate edge is ``(tail, head)``. After all edges, and only when
shuffling, ``rng.permutation(n)`` supplies the labels.
"""

import logging

import numpy as np

from depthgraph.config.generation import GeneratorConfig, GraphConfig
from depthgraph.graph.labels import output_labels
from depthgraph.graph.types import GeneratedGraph, GenerationState, Graph
from depthgraph.graph.validation import validate_graph, validate_labels
from depthgraph.reproducibility.seed import make_rng, resolve_seed

log = logging.getLogger(__name__)


class GraphGenerationError(Exception):
    """Raised when sampling gives up or the generated graph fails its checks."""

    def __init__(
        self, message: str, edge_index: int = -1, retries: int = 0
    ) -> None:
        super().__init__(message)
        self.edge_index = edge_index
        self.retries = retries


def max_edges(config: GraphConfig) -> int:
    """Upper bound on distinct edges the requested policy can hold."""
    n = config.num_vertices
    if config.has_cycles:
        return n * (n - 1)
    return n * (n - 1) // 2


def build_chain(graph: Graph, min_graph_depth: int) -> None:
    """Add edges ``(i - 1, i)`` for ``i`` in ``1 .. min_graph_depth - 1``."""
    for i in range(1, min_graph_depth):
        graph.add_edge(i - 1, i)


class EdgeSampler:
    """Per-edge rejection sampler with an explicit retry state machine.

    Each call to :meth:`step` performs one SAMPLE and moves to ACCEPT
    (edge inserted, retry counter reset), REJECT (counter incremented), or
    FATAL once the counter exceeds ``max_retries``. :meth:`run` drives
    steps until the requested number of edges is placed (TERMINAL).
    """

    def __init__(
        self,
        graph: Graph,
        rng: np.random.Generator,
        has_cycles: bool,
        min_graph_depth: int,
        max_retries: int,
    ) -> None:
        self.graph = graph
        self.rng = rng
        self.has_cycles = has_cycles
        self.min_graph_depth = min_graph_depth
        self.max_retries = max_retries
        self.state = GenerationState.SAMPLE
        self.retries = 0
        self.attempts = 0
        self.placed = 0

    def draw(self) -> tuple[int, int] | None:
        """Draw one candidate ``(tail, head)`` edge, or None for a dead draw."""
        n = self.graph.vertex_count
        head = int(self.rng.integers(0, n))

        if self.has_cycles:
            if self.placed == 0:
                head %= self.min_graph_depth
                tail = int(self.rng.integers(0, self.min_graph_depth))
            else:
                tail = int(self.rng.integers(0, n))
            return tail, head

        # Acyclic: nothing can precede vertex 0.
        if head == 0:
            return None
        tail = int(self.rng.integers(0, head))
        return tail, head

    def _acceptable(self, tail: int, head: int) -> bool:
        if tail == head or self.graph.has_edge(tail, head):
            return False
        if self.has_cycles and self.placed == 0:
            # The forced edge must point back along the chain to close a cycle.
            return tail > head
        return True

    def step(self) -> GenerationState:
        """Run one sampling attempt and return the resulting state."""
        if self.state in (GenerationState.TERMINAL, GenerationState.FATAL):
            return self.state

        self.state = GenerationState.SAMPLE
        self.attempts += 1
        candidate = self.draw()

        if candidate is not None and self._acceptable(*candidate):
            self.graph.add_edge(*candidate)
            self.placed += 1
            self.retries = 0
            self.state = GenerationState.ACCEPT
            return self.state

        self.retries += 1
        log.debug(
            "Rejected candidate %s for edge %d (retry %d)",
            candidate,
            self.placed,
            self.retries,
        )
        if self.max_retries >= 2 and self.retries == self.max_retries // 2:
            log.warning(
                "Edge %d: %d consecutive rejections, parameters may be "
                "infeasible",
                self.placed,
                self.retries,
            )
        if self.retries > self.max_retries:
            self.state = GenerationState.FATAL
        else:
            self.state = GenerationState.REJECT
        return self.state

    def run(self, count: int) -> None:
        """Place ``count`` additional edges.

        Raises:
            GraphGenerationError: If the retry bound is exceeded.
        """
        target = self.placed + count
        while self.placed < target:
            if self.step() is GenerationState.FATAL:
                raise GraphGenerationError(
                    f"Too many iterations trying to generate edge "
                    f"{self.placed}: {self.retries} consecutive rejections. "
                    f"Is a graph with these parameters possible?",
                    edge_index=self.placed,
                    retries=self.retries,
                )
        self.state = GenerationState.TERMINAL


def generate_graph(
    config: GeneratorConfig, rng: np.random.Generator | None = None
) -> GeneratedGraph:
    """Generate a directed graph satisfying the configured constraints.

    Args:
        config: Generator configuration (structure, seed, retry bound).
        rng: Optional random stream. When omitted, one is created from
            ``config.seed``, or from the wall clock if that is None.

    Returns:
        GeneratedGraph holding the graph, output labels, and provenance.

    Raises:
        GraphGenerationError: If sampling exhausts its retries, or the
            result fails the post-generation checks.
    """
    gc = config.graph
    seed = config.seed
    if rng is None:
        seed = resolve_seed(seed)
        rng = make_rng(seed)

    capacity = max_edges(gc)
    if gc.expected_edges > capacity:
        log.warning(
            "Requested %d edges but at most %d fit (n=%d, has_cycles=%s)",
            gc.expected_edges,
            capacity,
            gc.num_vertices,
            gc.has_cycles,
        )

    graph = Graph(gc.num_vertices)
    build_chain(graph, gc.min_graph_depth)
    log.info(
        "Seeded chain of depth %d (%d edges)",
        gc.min_graph_depth,
        graph.edge_count,
    )

    sampler = EdgeSampler(
        graph,
        rng,
        has_cycles=gc.has_cycles,
        min_graph_depth=gc.min_graph_depth,
        max_retries=config.max_retries,
    )
    sampler.run(gc.additional_edges)

    labels = output_labels(gc.num_vertices, gc.shuffle, rng)

    errors = validate_graph(graph, gc) + validate_labels(
        labels, gc.num_vertices
    )
    if errors:
        raise GraphGenerationError(
            f"Generated graph failed checks: {'; '.join(errors)}"
        )

    log.info(
        "Graph generated (n=%d, edges=%d, attempts=%d, seed=%s)",
        graph.vertex_count,
        graph.edge_count,
        sampler.attempts,
        seed,
    )
    return GeneratedGraph(
        graph=graph, labels=labels, seed=seed, attempts=sampler.attempts
    )

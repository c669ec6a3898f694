"""Generator configuration dataclasses: all frozen and slotted for immutability."""

from dataclasses import dataclass, field

MAX_RETRIES = 256  # consecutive rejected samples tolerated before giving up


@dataclass(frozen=True, slots=True)
class GraphConfig:
    """Structural constraints for the generated graph.

    Validation runs in __post_init__ so an invalid request is rejected
    before any graph is allocated or any output file is opened.
    """

    num_vertices: int = 5
    min_graph_depth: int = 3  # vertices on the seeded chain 0 -> 1 -> ...
    additional_edges: int = 0  # edges sampled on top of the chain
    has_cycles: bool = False
    shuffle: bool = False

    def __post_init__(self) -> None:
        for name in ("num_vertices", "min_graph_depth", "additional_edges"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")
        if self.num_vertices < 1:
            raise ValueError(
                f"num_vertices must be positive, got {self.num_vertices}"
            )
        if self.min_graph_depth > self.num_vertices:
            raise ValueError(
                f"min_graph_depth ({self.min_graph_depth}) must be "
                f"<= num_vertices ({self.num_vertices})"
            )
        if self.has_cycles and self.additional_edges < 1:
            raise ValueError(
                f"has_cycles requires additional_edges >= 1, "
                f"got {self.additional_edges}"
            )
        if self.has_cycles and self.min_graph_depth < 2:
            raise ValueError(
                f"has_cycles requires min_graph_depth >= 2, "
                f"got {self.min_graph_depth}"
            )

    @property
    def expected_edges(self) -> int:
        """Edge count of a successfully generated graph."""
        return max(self.min_graph_depth - 1, 0) + self.additional_edges


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Top-level generator configuration.

    ``seed=None`` means the seed is derived from the wall clock at run time;
    pass an explicit seed for reproducible output.
    """

    graph: GraphConfig = field(default_factory=GraphConfig)
    seed: int | None = None
    max_retries: int = MAX_RETRIES
    description: str = ""

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            raise ValueError(
                f"max_retries must be non-negative, got {self.max_retries}"
            )
        if self.seed is not None and self.seed < 0:
            raise ValueError(f"seed must be non-negative, got {self.seed}")

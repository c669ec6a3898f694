"""Reproducibility infrastructure: seed resolution and the shared random stream."""

from depthgraph.reproducibility.seed import (
    make_rng,
    resolve_seed,
    verify_seed_determinism,
)

__all__ = [
    "make_rng",
    "resolve_seed",
    "verify_seed_determinism",
]

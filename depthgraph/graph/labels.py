"""Output label assignment: identity or a uniformly random permutation."""

import numpy as np


def output_labels(
    n: int, shuffle: bool, rng: np.random.Generator
) -> np.ndarray:
    """Map internal vertex indices to the labels printed on output.

    Labels are display-only; they never change the stored adjacency, so
    the chain and cycle guarantees hold under any permutation. Shuffling
    hides the index order that would otherwise reveal a topological sort.

    Args:
        n: Number of vertices.
        shuffle: Whether to permute the labels.
        rng: Random stream; consumed only when shuffling.

    Returns:
        Int array of length n where ``labels[i]`` is vertex i's label.
    """
    if shuffle:
        return rng.permutation(n)
    return np.arange(n)

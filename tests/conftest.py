"""Shared fixtures for graph generation tests."""

import pytest


class ScriptedRng:
    """Stand-in for numpy's Generator that replays a fixed list of draws.

    Each ``integers(low, high)`` call pops the next value and checks it lies
    in the requested half-open range, so tests can pin both the values and
    the number of draws the sampler makes.
    """

    def __init__(self, values: list[int]) -> None:
        self.values = list(values)
        self.calls: list[tuple[int, int]] = []

    def integers(self, low: int, high: int) -> int:
        if not self.values:
            raise AssertionError("ScriptedRng ran out of values")
        value = self.values.pop(0)
        assert low <= value < high, f"{value} not in [{low}, {high})"
        self.calls.append((low, high))
        return value


@pytest.fixture
def scripted_rng():
    """Factory for ScriptedRng instances."""
    return ScriptedRng

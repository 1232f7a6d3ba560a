"""Pytest configuration and shared fixtures."""

import attrs
import pytest

from weighted_rand import NumpyRandomSource, PythonRandomSource

NUM_DRAWS = 100_000


@attrs.define
class FixedSource:
    """Source returning the same draws every time."""

    index: int
    unit: float

    def gen_index(self, n: int) -> int:
        assert 0 <= self.index < n
        return self.index

    def gen_unit(self) -> float:
        return self.unit


@pytest.fixture
def python_source():
    """Seeded random.Random backed source."""
    return PythonRandomSource.seeded(20240101)


@pytest.fixture
def numpy_source():
    """Seeded numpy Generator backed source."""
    return NumpyRandomSource.seeded(20240101)


def frequencies(idxs: list[int], n: int) -> list[float]:
    counts = [0] * n
    for i in idxs:
        counts[i] += 1
    return [c / len(idxs) for c in counts]


def tolerance(p: float, draws: int = NUM_DRAWS) -> float:
    """Five standard errors of a frequency estimate."""
    return 5 * (p * (1 - p) / draws) ** 0.5 + 1e-12

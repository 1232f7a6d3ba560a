"""Sources of uniform randomness used for sampling."""

from __future__ import annotations

import random
from enum import Enum
from functools import cache
from typing import Protocol

import attrs
import numpy as np


class RandomSource(Protocol):
    """Anything that can produce independent uniform draws."""

    def gen_index(self, n: int) -> int:
        """Uniform integer in [0, n)."""
        ...

    def gen_unit(self) -> float:
        """Uniform real in [0, 1)."""
        ...


@attrs.define
class PythonRandomSource:
    """Source backed by random.Random."""

    rng: random.Random = attrs.field(factory=random.Random)

    @classmethod
    def seeded(cls, seed: int) -> PythonRandomSource:
        return cls(random.Random(seed))

    def gen_index(self, n: int) -> int:
        return self.rng.randrange(n)

    def gen_unit(self) -> float:
        return self.rng.random()


@attrs.define
class NumpyRandomSource:
    """Source backed by a numpy Generator."""

    generator: np.random.Generator = attrs.field(factory=np.random.default_rng)

    @classmethod
    def seeded(cls, seed: int) -> NumpyRandomSource:
        return cls(np.random.default_rng(seed))

    def gen_index(self, n: int) -> int:
        return int(self.generator.integers(n))

    def gen_unit(self) -> float:
        return float(self.generator.random())


class SourceKind(Enum):
    PYTHON = "python"
    NUMPY = "numpy"


@cache
def default_source() -> PythonRandomSource:
    """Process wide source used when the caller doesn't supply one."""
    return PythonRandomSource()


def make_source(
    seed: int | None = None, kind: SourceKind = SourceKind.PYTHON
) -> RandomSource:
    match kind:
        case SourceKind.PYTHON:
            if seed is None:
                return PythonRandomSource()
            return PythonRandomSource.seeded(seed)
        case SourceKind.NUMPY:
            if seed is None:
                return NumpyRandomSource()
            return NumpyRandomSource.seeded(seed)

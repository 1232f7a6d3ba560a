"""Walker alias table."""

from __future__ import annotations

from typing import Self

import numpy as np
from pydantic import BaseModel, ConfigDict, model_validator

from .errors import EmptyInputError
from .random_source import RandomSource, default_source


class AliasTable(BaseModel):
    """
    Table of thresholds and aliases.

    A draw picks a slot i uniformly and a real u uniformly from [0, 1).
    If u < threshold[i] the draw returns i, otherwise it returns alias[i].
    """

    model_config = ConfigDict(frozen=True)

    threshold: tuple[float, ...]
    alias: tuple[int, ...]

    @model_validator(mode="after")
    def check_structure(self) -> Self:
        n = len(self.threshold)
        if n == 0:
            raise EmptyInputError("an alias table needs at least one slot")
        if len(self.alias) != n:
            raise ValueError(
                f"threshold has {n} slots but alias has {len(self.alias)}"
            )

        for i, (t, a) in enumerate(zip(self.threshold, self.alias)):
            if not 0.0 <= t <= 1.0:
                raise ValueError(f"threshold[{i}] = {t!r} is outside [0, 1]")
            if not 0 <= a < n:
                raise ValueError(f"alias[{i}] = {a!r} is outside [0, {n})")

        return self

    def __len__(self) -> int:
        return len(self.threshold)

    def sample(self, source: RandomSource | None = None) -> int:
        """Draw one index."""
        if source is None:
            source = default_source()

        i = source.gen_index(len(self.threshold))
        u = source.gen_unit()

        if u < self.threshold[i]:
            return i
        return self.alias[i]

    def sample_many(self, k: int, source: RandomSource | None = None) -> list[int]:
        if source is None:
            source = default_source()
        return [self.sample(source) for _ in range(k)]

    def sample_array(
        self, k: int, generator: np.random.Generator | None = None
    ) -> np.ndarray:
        """Draw k indices at once using numpy."""
        if generator is None:
            generator = np.random.default_rng()

        threshold = np.asarray(self.threshold, dtype=np.float64)
        alias = np.asarray(self.alias, dtype=np.int64)

        i = generator.integers(len(threshold), size=k)
        u = generator.random(size=k)
        return np.where(u < threshold[i], i, alias[i])

    def probabilities(self) -> list[float]:
        """Exact probability of drawing each index."""
        n = len(self.threshold)

        mass = list(self.threshold)
        for t, a in zip(self.threshold, self.alias):
            mass[a] += 1.0 - t

        return [m / n for m in mass]

    def to_json(self) -> str:
        return self.model_dump_json()

    @classmethod
    def from_json(cls, data: str | bytes) -> AliasTable:
        return cls.model_validate_json(data)

"""Walker / Vose alias table construction."""

from __future__ import annotations

import logging
from collections import deque
from typing import Iterable, Sequence

import numpy as np

from .errors import EmptyInputError
from .normalize import (
    normalize_weights,
    normalize_int_weights,
    normalize_float_weights,
)
from .table import AliasTable

logger = logging.getLogger(__name__)

# Normalized weights this close to 1 are treated as exactly 1.
# Weights are normalized to a mean of 1, so this is a relative tolerance.
DRIFT_EPSILON = 1e-9


def snap(p: float) -> float:
    if abs(p - 1.0) <= DRIFT_EPSILON:
        return 1.0
    return p


def build_alias_arrays(weights: Sequence[float]) -> tuple[list[float], list[int]]:
    """
    Compute the threshold and alias arrays.

    :param weights: normalized weights, non-negative and summing to len(weights).
    :return: threshold and alias arrays, both of length len(weights).
    """
    n = len(weights)
    if n == 0:
        raise EmptyInputError()

    probs = [snap(float(w)) for w in weights]
    threshold: list[float] = [1.0] * n  # probability table
    alias: list[int] = list(range(n))  # alias table
    small: deque[int] = deque()  # queue for p < 1
    large: deque[int] = deque()  # queue for p >= 1

    for i, p in enumerate(probs):
        if p < 1.0:
            small.append(i)
        else:
            large.append(i)

    logger.debug(
        "Building alias table: n=%d, small=%d, large=%d", n, len(small), len(large)
    )

    while small and large:
        s = small.popleft()
        l = large.popleft()

        threshold[s] = probs[s]
        alias[s] = l
        probs[l] = snap(probs[l] - (1.0 - probs[s]))

        if probs[l] < 1.0:
            small.append(l)
        else:
            large.append(l)

    # Whatever is left has (up to rounding) weight 1 and keeps its own slot
    for i in (*small, *large):
        threshold[i] = 1.0
        alias[i] = i

    return threshold, alias


class AliasTableBuilder:
    """Builder of AliasTable from normalized weights."""

    def __init__(self, weights: Sequence[float]):
        if len(weights) == 0:
            raise EmptyInputError()
        self.weights = list(weights)

    @classmethod
    def from_weights(
        cls, weights: Iterable[int] | Iterable[float] | np.ndarray
    ) -> AliasTableBuilder:
        return cls(normalize_weights(weights))

    @classmethod
    def from_int_weights(cls, weights: Sequence[int]) -> AliasTableBuilder:
        return cls(normalize_int_weights(weights))

    @classmethod
    def from_float_weights(cls, weights: Sequence[float]) -> AliasTableBuilder:
        return cls(normalize_float_weights(weights))

    def build(self) -> AliasTable:
        threshold, alias = build_alias_arrays(self.weights)
        return AliasTable(threshold=tuple(threshold), alias=tuple(alias))


def build_table(weights: Iterable[int] | Iterable[float] | np.ndarray) -> AliasTable:
    """Normalize the weights and build the alias table."""
    return AliasTableBuilder.from_weights(weights).build()

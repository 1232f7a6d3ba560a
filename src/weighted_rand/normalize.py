"""Weight normalization.

Raw weights are rescaled so that they sum to the number of weights,
the form the alias table construction works on.
Integer weights are first divided by their greatest common divisor.
If every weight is zero, every index gets weight 1,
and the resulting table samples uniformly.
"""

from __future__ import annotations

import math
import numbers
import logging
import operator
from typing import Any, Iterable, Sequence

import numpy as np
from typeguard import CollectionCheckStrategy, TypeCheckError, check_type

from .errors import EmptyInputError, InvalidWeightError

logger = logging.getLogger(__name__)


def gcd_of_weights(weights: Sequence[int]) -> int:
    """GCD of all weights, ignoring zeros; 1 if all weights are zero."""
    divisor = math.gcd(*weights)
    if divisor == 0:
        return 1
    return divisor


def uniform_weights(n: int) -> list[float]:
    logger.info("All %d weights are zero; falling back to uniform weights.", n)
    return [1.0] * n


def check_int_weights(weights: Sequence[int]) -> None:
    if len(weights) == 0:
        raise EmptyInputError()

    for i, w in enumerate(weights):
        if w < 0:
            raise InvalidWeightError(f"weight at index {i} is negative ({w!r})", i)


def check_float_weights(weights: Sequence[float]) -> None:
    if len(weights) == 0:
        raise EmptyInputError()

    for i, w in enumerate(weights):
        if not math.isfinite(w):
            raise InvalidWeightError(f"weight at index {i} is not finite ({w!r})", i)
        if w < 0:
            raise InvalidWeightError(f"weight at index {i} is negative ({w!r})", i)


def to_ints(weights: Sequence[int]) -> list[int]:
    ints = []
    for i, w in enumerate(weights):
        try:
            ints.append(operator.index(w))
        except TypeError:
            raise InvalidWeightError(
                f"weight at index {i} is not an integer ({w!r})", i
            )
    return ints


def to_floats(weights: Sequence[float]) -> list[float]:
    floats = []
    for i, w in enumerate(weights):
        try:
            floats.append(float(w))
        except OverflowError:
            raise InvalidWeightError(f"weight at index {i} is too large ({w!r})", i)
    return floats


def normalize_int_weights(weights: Sequence[int]) -> list[float]:
    """Normalize integer weights so that they sum to len(weights)."""
    weights = to_ints(weights)
    check_int_weights(weights)

    n = len(weights)
    divisor = gcd_of_weights(weights)
    reduced = [w // divisor for w in weights]

    total = sum(reduced)
    if total == 0:
        return uniform_weights(n)

    # int / int is correctly rounded, even past the float range
    return [r * n / total for r in reduced]


def normalize_float_weights(weights: Sequence[float]) -> list[float]:
    """Normalize floating point weights so that they sum to len(weights)."""
    weights = to_floats(weights)
    check_float_weights(weights)

    n = len(weights)
    peak = max(weights)
    if peak == 0.0:
        return uniform_weights(n)

    # Scale by the peak first so the sum can't overflow
    scaled = [w / peak for w in weights]
    total = math.fsum(scaled)
    return [s * n / total for s in scaled]


def is_sequence_of(weights: Any, kind: type) -> bool:
    try:
        check_type(
            weights,
            Sequence[kind],
            collection_check_strategy=CollectionCheckStrategy.ALL_ITEMS,
        )
        return True
    except TypeCheckError:
        return False


def normalize_weights(
    weights: Iterable[int] | Iterable[float] | np.ndarray,
) -> list[float]:
    """
    Normalize weights of either numeric kind.

    Integral inputs (Python and numpy integers, bools, integer and boolean
    numpy arrays) take the integer path; other real inputs (floats, numpy
    floats, fractions) take the floating point path.

    :param weights: non-negative weights, one per index.
    :return: normalized weights summing to len(weights).
    """
    if isinstance(weights, np.ndarray):
        if weights.ndim != 1:
            raise InvalidWeightError(
                f"weights must be one dimensional, got shape {weights.shape}"
            )
        match weights.dtype.kind:
            case "b" | "i" | "u":
                return normalize_int_weights(weights.tolist())
            case "f":
                return normalize_float_weights(weights.tolist())
            case _:
                raise InvalidWeightError(f"unsupported weight dtype {weights.dtype}")

    weights = list(weights)
    if is_sequence_of(weights, numbers.Integral):
        return normalize_int_weights(weights)
    if is_sequence_of(weights, numbers.Real):
        return normalize_float_weights(weights)

    raise InvalidWeightError("weights must be all integers or all real numbers")

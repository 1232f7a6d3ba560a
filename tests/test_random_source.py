"""Tests for random sources."""

import random

import numpy as np
import pytest

from weighted_rand import (
    NumpyRandomSource,
    PythonRandomSource,
    SourceKind,
    default_source,
    make_source,
)


@pytest.mark.parametrize("source", [PythonRandomSource(), NumpyRandomSource()])
def test_ranges(source):
    for _ in range(1000):
        assert 0 <= source.gen_index(7) < 7
        assert 0.0 <= source.gen_unit() < 1.0


def test_index_types():
    assert isinstance(NumpyRandomSource().gen_index(3), int)
    assert isinstance(NumpyRandomSource().gen_unit(), float)


@pytest.mark.parametrize("kind", list(SourceKind))
def test_seeded_sources_are_reproducible(kind):
    first = make_source(42, kind)
    second = make_source(42, kind)
    assert [first.gen_index(100) for _ in range(20)] == [
        second.gen_index(100) for _ in range(20)
    ]
    assert first.gen_unit() == second.gen_unit()


def test_make_source_kinds():
    assert isinstance(make_source(), PythonRandomSource)
    assert isinstance(make_source(kind=SourceKind.NUMPY), NumpyRandomSource)


def test_wraps_given_generators():
    rng = random.Random(3)
    assert PythonRandomSource(rng).rng is rng

    generator = np.random.default_rng(3)
    assert NumpyRandomSource(generator).generator is generator


def test_default_source_is_shared():
    assert default_source() is default_source()

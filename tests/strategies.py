"""Hypothesis strategies for weights."""

from hypothesis import strategies as st

int_weights = st.lists(
    st.integers(min_value=0, max_value=10_000), min_size=1, max_size=60
)

float_weights = st.lists(
    st.floats(min_value=0.0, max_value=1e6, allow_nan=False, allow_infinity=False),
    min_size=1,
    max_size=60,
)

# Mostly zeros, to exercise the uniform fallback and zero slots
sparse_int_weights = st.lists(
    st.sampled_from([0, 0, 0, 1, 3]), min_size=1, max_size=30
)

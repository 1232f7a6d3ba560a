"""Weighted random sampling using Walker's alias method."""

from .errors import (
    RichException,
    WeightedRandError,
    EmptyInputError,
    InvalidWeightError,
    CodegenError,
)
from .normalize import (
    gcd_of_weights,
    normalize_weights,
    normalize_int_weights,
    normalize_float_weights,
)
from .random_source import (
    RandomSource,
    PythonRandomSource,
    NumpyRandomSource,
    SourceKind,
    default_source,
    make_source,
)
from .table import AliasTable
from .builder import AliasTableBuilder, build_alias_arrays, build_table
from .codegen import table_to_cpp

__all__ = [
    "RichException",
    "WeightedRandError",
    "EmptyInputError",
    "InvalidWeightError",
    "CodegenError",
    "gcd_of_weights",
    "normalize_weights",
    "normalize_int_weights",
    "normalize_float_weights",
    "RandomSource",
    "PythonRandomSource",
    "NumpyRandomSource",
    "SourceKind",
    "default_source",
    "make_source",
    "AliasTable",
    "AliasTableBuilder",
    "build_alias_arrays",
    "build_table",
    "table_to_cpp",
]

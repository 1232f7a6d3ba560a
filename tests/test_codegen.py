"""Tests for C++ code generation."""

import pytest

from weighted_rand import AliasTable, CodegenError, build_table, table_to_cpp
from weighted_rand.codegen import smallest_uint_type


def test_table_to_cpp():
    code = table_to_cpp(build_table([2, 1, 7, 0]), "fruit")

    assert "constexpr std::size_t fruit_size = 4;" in code
    assert "constexpr double fruit_threshold[4] = {" in code
    assert "constexpr std::uint8_t fruit_alias[4] = {" in code
    assert "    0.8,\n" in code
    assert "    2,\n" in code
    assert "namespace" not in code


def test_includes_headers():
    code = table_to_cpp(build_table([1, 2]), "t")
    assert "#include <cstddef>" in code
    assert "#include <cstdint>" in code


def test_namespace():
    code = table_to_cpp(build_table([1]), "t", namespace="tables")
    assert "namespace tables {" in code
    assert "} // namespace tables" in code


def test_wide_alias_type():
    table = AliasTable(threshold=(1.0,) * 300, alias=tuple(range(300)))
    assert "std::uint16_t t_alias[300]" in table_to_cpp(table, "t")


@pytest.mark.parametrize("name", ["", "1abc", "a-b", "a b"])
def test_invalid_name(name):
    with pytest.raises(CodegenError):
        table_to_cpp(build_table([1, 2]), name)


def test_invalid_namespace():
    with pytest.raises(CodegenError):
        table_to_cpp(build_table([1, 2]), "t", namespace="a::b")


@pytest.mark.parametrize(
    "max_val, expected",
    [(0, "u8"), (255, "u8"), (256, "u16"), (2**32 - 1, "u32"), (2**32, "u64"), (2**64, None)],
)
def test_smallest_uint_type(max_val, expected):
    assert smallest_uint_type(max_val) == expected

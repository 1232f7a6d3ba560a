"""Codegen of alias tables as C++ arrays."""

from __future__ import annotations

import re

import jinja2

from .errors import CodegenError
from .table import AliasTable

TEMPLATE_LOADER = jinja2.PackageLoader(
    package_name="weighted_rand", package_path="templates"
)

ENVIRONMENT = jinja2.Environment(
    loader=TEMPLATE_LOADER,
    undefined=jinja2.StrictUndefined,
    trim_blocks=True,
    lstrip_blocks=True,
)

IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

# fmt: off
UINT_TYPE_TO_CTYPE = {
    "u8":  "uint8_t",
    "u16": "uint16_t",
    "u32": "uint32_t",
    "u64": "uint64_t",
}
# fmt: on


def render(template: str, **kwargs) -> str:
    return ENVIRONMENT.get_template(f"{template}.jinja2").render(**kwargs)


def smallest_uint_type(max_val: int) -> str | None:
    if max_val < 2**8:
        return "u8"
    elif max_val < 2**16:
        return "u16"
    elif max_val < 2**32:
        return "u32"
    elif max_val < 2**64:
        return "u64"
    else:
        return None


def table_to_cpp(table: AliasTable, name: str, namespace: str = "") -> str:
    """
    Render the table as C++ constexpr arrays.

    :param table: table to render.
    :param name: prefix of the generated identifiers.
    :param namespace: optional enclosing namespace.
    :return: C++ source text.
    """
    if IDENTIFIER_RE.fullmatch(name) is None:
        raise CodegenError(f"{name!r} is not a valid identifier")
    if namespace and IDENTIFIER_RE.fullmatch(namespace) is None:
        raise CodegenError(f"{namespace!r} is not a valid namespace")

    uint_type = smallest_uint_type(len(table) - 1)
    if uint_type is None:
        raise CodegenError(f"table with {len(table)} slots is too large")

    return render(
        "alias_table_cpp",
        name=name,
        namespace=namespace,
        size=len(table),
        threshold=[repr(t) for t in table.threshold],
        alias=[str(a) for a in table.alias],
        alias_type=UINT_TYPE_TO_CTYPE[uint_type],
    )

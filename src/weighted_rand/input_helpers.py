"""Helper utilities for reading weights and tables."""

from __future__ import annotations

from pathlib import Path

import polars as pl
import rich

from .errors import InvalidWeightError
from .table import AliasTable
from .builder import build_table


def parse_weights(values: tuple[str, ...] | list[str]) -> list[int] | list[float]:
    """Parse weights given as text; integers if every value is one."""
    try:
        return [int(v) for v in values]
    except ValueError:
        pass

    weights = []
    for i, v in enumerate(values):
        try:
            weights.append(float(v))
        except ValueError:
            raise InvalidWeightError(f"weight at index {i} is not a number ({v!r})", i)
    return weights


def read_table(file: Path, columns: list[str]) -> pl.DataFrame:
    if file.suffix == ".csv":
        return pl.read_csv(file, columns=columns)
    elif file.suffix == ".parquet":
        return pl.read_parquet(file, columns=columns)
    else:
        rich.print("[red]Unknown filetype for weights file[/red]")
        raise SystemExit(1)


def read_weights(file: Path, column: str) -> list[int] | list[float]:
    series = read_table(file, [column])[column]

    if series.null_count() > 0:
        raise InvalidWeightError(f"column {column} in {file.name} has null values")

    if series.dtype.is_integer():
        return [int(w) for w in series.to_list()]
    elif series.dtype.is_float():
        return [float(w) for w in series.to_list()]
    else:
        raise InvalidWeightError(
            f"column {column} in {file.name} has non numeric type {series.dtype}"
        )


def load_table(
    weights: tuple[str, ...],
    weights_file: Path | None,
    column: str,
    table_file: Path | None = None,
) -> AliasTable:
    if table_file is not None:
        return AliasTable.from_json(table_file.read_text())

    if weights_file is not None:
        return build_table(read_weights(weights_file, column))

    return build_table(parse_weights(weights))

"""Command line interface."""

import logging
from pathlib import Path

import click
import numpy as np
import rich
import rich.markup
from rich.table import Table
from pydantic import ValidationError
from platformdirs import user_log_dir

from .errors import RichException
from .table import AliasTable
from .random_source import SourceKind, make_source
from .input_helpers import load_table
from .codegen import table_to_cpp
from .click_helpers import (
    weights_argument,
    weights_file_option,
    column_option,
    existing_table_file_option,
    table_file_option,
    num_samples_option,
    seed_option,
    source_option,
)


def setup_logging(verbose: bool, log_file: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO

    if log_file:
        log_dir = user_log_dir(appname="weighted-rand", version="0.1")
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        log_file_path = log_dir / "weighted-rand.log"
        logging.basicConfig(filename=str(log_file_path), filemode="a", level=level)
    else:
        logging.basicConfig(level=level)


def print_validation_error(e: ValidationError):
    rich.print("[red]Invalid alias table[/red]")
    for error in e.errors():
        loc = ".".join(str(x) for x in error["loc"])
        expl = rich.markup.escape(error["msg"])
        rich.print(f"[yellow]{loc}[/yellow]: {expl}")


def counts_table(table: AliasTable, counts: np.ndarray) -> Table:
    total = int(counts.sum())
    out = Table("index", "count", "frequency", "probability")
    for i, (count, prob) in enumerate(zip(counts.tolist(), table.probabilities())):
        freq = count / total if total else 0.0
        out.add_row(str(i), str(count), f"{freq:.6f}", f"{prob:.6f}")
    return out


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log debug messages.")
@click.option("--log-file", is_flag=True, help="Append the log to the user log dir.")
def cli(verbose: bool, log_file: bool):
    """Weighted random sampling using Walker's alias method."""
    setup_logging(verbose, log_file)


@cli.command()
@weights_argument
@weights_file_option
@column_option
@table_file_option
def build(
    weights: tuple[str, ...], weights_file: Path | None, column: str, output_file: Path
):
    """Build an alias table and save it as JSON."""
    try:
        table = load_table(weights, weights_file, column)
        output_file.write_text(table.to_json())
        rich.print(f"[green]Alias table with {len(table)} slots saved.[/green]")
    except RichException as e:
        e.rich_print()
        raise SystemExit(1)


@cli.command()
@weights_argument
@weights_file_option
@column_option
@existing_table_file_option
@num_samples_option
@seed_option
@source_option
def sample(
    weights: tuple[str, ...],
    weights_file: Path | None,
    column: str,
    table_file: Path | None,
    num_samples: int,
    seed: int | None,
    source_kind: str,
):
    """Draw indices and show their frequencies."""
    try:
        table = load_table(weights, weights_file, column, table_file)
        source = make_source(seed, SourceKind(source_kind))
        idxs = table.sample_many(num_samples, source)
        counts = np.bincount(np.asarray(idxs, dtype=np.int64), minlength=len(table))
        rich.print(counts_table(table, counts))
    except RichException as e:
        e.rich_print()
        raise SystemExit(1)
    except ValidationError as e:
        print_validation_error(e)
        raise SystemExit(1)


@cli.command()
@weights_argument
@weights_file_option
@column_option
@existing_table_file_option
def probs(
    weights: tuple[str, ...],
    weights_file: Path | None,
    column: str,
    table_file: Path | None,
):
    """Print the exact probability of each index."""
    try:
        table = load_table(weights, weights_file, column, table_file)
        for i, p in enumerate(table.probabilities()):
            print(f"{i}\t{p:.9f}")
    except RichException as e:
        e.rich_print()
        raise SystemExit(1)
    except ValidationError as e:
        print_validation_error(e)
        raise SystemExit(1)


@cli.command()
@weights_argument
@weights_file_option
@column_option
@existing_table_file_option
@click.option(
    "--name",
    default="alias_table",
    show_default=True,
    help="Prefix of the generated identifiers.",
)
@click.option("--namespace", default="", help="Enclosing C++ namespace.")
def codegen(
    weights: tuple[str, ...],
    weights_file: Path | None,
    column: str,
    table_file: Path | None,
    name: str,
    namespace: str,
):
    """Print the alias table as C++ arrays."""
    try:
        table = load_table(weights, weights_file, column, table_file)
        print(table_to_cpp(table, name, namespace), end="")
    except RichException as e:
        e.rich_print()
        raise SystemExit(1)
    except ValidationError as e:
        print_validation_error(e)
        raise SystemExit(1)

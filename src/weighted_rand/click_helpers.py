"""Click helpers."""

from pathlib import Path

import click

from .random_source import SourceKind

ExistingFile = click.Path(exists=True, dir_okay=False, path_type=Path)
File = click.Path(dir_okay=False, path_type=Path)

weights_argument = click.argument("weights", nargs=-1)

weights_file_option = click.option(
    "-f",
    "--weights-file",
    type=ExistingFile,
    default=None,
    help="CSV or parquet file containing the weights.",
)

column_option = click.option(
    "-c",
    "--column",
    default="weight",
    show_default=True,
    help="Column of the weights file holding the weights.",
)

existing_table_file_option = click.option(
    "-t",
    "--table-file",
    type=ExistingFile,
    default=None,
    help="Alias table file created by the build command.",
)

table_file_option = click.option(
    "-o",
    "--output-file",
    type=File,
    default="table.json",
    show_default=True,
    help="Alias table output file.",
)

num_samples_option = click.option(
    "-n",
    "--num-samples",
    type=click.IntRange(min=0),
    default=100_000,
    show_default=True,
    help="Number of indices to draw.",
)

seed_option = click.option(
    "--seed",
    type=int,
    default=None,
    help="Seed of the random source. (default: unseeded)",
)

source_option = click.option(
    "--source",
    "source_kind",
    type=click.Choice([k.value for k in SourceKind]),
    default=SourceKind.PYTHON.value,
    show_default=True,
    help="Random number generator to sample with.",
)

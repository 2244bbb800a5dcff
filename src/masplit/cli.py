"""
Command line interface for extracting and splitting delimited matrices.
"""

import logging
import sys

import click

from masplit import __version__
from masplit.constants import (
    DEFAULT_ALT_NUMBER,
    DEFAULT_DELIMITER,
    DEFAULT_FIELD,
    DEFAULT_NAME,
    H5_SUFFIXES,
)
from masplit.data import H5Writer, read_tsv, write_tsv
from masplit.exceptions import UserError
from masplit.extract import extract_field
from masplit.split import SplitConfig, split_matrix, split_options

log = logging.getLogger(__name__)


def setup_logging():
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(message)s", "%H:%M:%S"))
    root_logger.addHandler(handler)


@click.group()
@click.version_option(__version__)
def masplit_command():
    setup_logging()


@masplit_command.command(help="Extract a FORMAT field from a vcf file into a tsv matrix")
@click.option(
    "--vcf", "vcf_file", required=True, type=click.Path(exists=True), help="path to the vcf file"
)
@click.option(
    "--field",
    default=DEFAULT_FIELD,
    show_default=True,
    help="name of the FORMAT field to extract",
)
@click.option(
    "--delimiter",
    default=DEFAULT_DELIMITER,
    show_default=True,
    help="string used to join multiple values of a field",
)
@click.option(
    "--alt-number",
    default=DEFAULT_ALT_NUMBER,
    show_default=True,
    type=click.IntRange(min=1),
    help="maximum number of alternate alleles read for each variant",
)
@click.option(
    "--output", "output_file", required=True, type=click.Path(), help="name of the output file"
)
def extract(vcf_file, field, delimiter, alt_number, output_file):
    try:
        matrix = extract_field(vcf_file, field, delimiter=delimiter, alt_number=alt_number)
    except UserError as err:
        click.echo(str(err), err=True)
        sys.exit(1)

    write_tsv(matrix, output_file)
    log.info("Done")


@masplit_command.command(
    help="\n".join(
        [
            "Split a tsv matrix of delimited strings into a numeric matrix",
            "",
            "Each cell is reduced to the number of values (--count) or to",
            "the value at the given record, after optional sorting.",
            "Output is written to a hdf5 file when it ends with .h5/.hdf5,",
            "otherwise to a tsv file.",
        ]
    )
)
@click.option(
    "--input",
    "input_file",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="path to the input tsv file",
)
@click.option(
    "--output", "output_file", required=True, type=click.Path(), help="name of the output file"
)
@click.option(
    "--name",
    default=DEFAULT_NAME,
    show_default=True,
    help="name of the matrix in the hdf5 output",
)
@split_options
def split(input_file, output_file, name, delimiter, count, record, sort, decreasing):
    config = SplitConfig(count=count, record=record, sort=sort, decreasing=decreasing)
    try:
        matrix = read_tsv(input_file)
        log.info(f"Splitting {matrix} with {config}")
        result = split_matrix(matrix, delimiter, config)
    except UserError as err:
        click.echo(str(err), err=True)
        sys.exit(1)

    log.info(str(result))
    result.matrix.name = name
    if output_file.lower().endswith(H5_SUFFIXES):
        with H5Writer(output_file, mode="w") as writer:
            writer.write(result.matrix)
    else:
        write_tsv(result.matrix, output_file)

    log.info("Done")


if __name__ == "__main__":
    masplit_command()

"""Command-line interface for tabledump."""

from __future__ import annotations

import logging
import sys

import click

from .exceptions import TableDumpError
from .manifest import load_csv, load_manifest
from .table import Table

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(package_name="tabledump")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Render tabular data as fixed-width text."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@cli.command()
@click.option(
    "--file",
    "-f",
    "file_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Table document (YAML) or CSV file.",
)
@click.option(
    "--format",
    "input_format",
    type=click.Choice(["yaml", "csv"]),
    default=None,
    help="Input format (default: guessed from the file extension)",
)
@click.option("--caption", help="Caption centred above the table")
@click.option(
    "--indent",
    type=click.IntRange(min=0),
    default=None,
    help="Indent every bordered line by this many spaces",
)
@click.option(
    "--separators/--no-separators",
    default=None,
    help="Draw box-drawing borders (default: from the document, else enabled)",
)
@click.option(
    "--auto-suppress",
    type=click.IntRange(min=0),
    default=None,
    help="Blank out repeated values in this many leading columns",
)
@click.option(
    "--auto-lines/--no-auto-lines",
    default=None,
    help="Draw a separator before each new auto-suppress group",
)
@click.option(
    "--header/--no-header",
    default=True,
    help="Treat the first CSV record as column headers (CSV input only)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    help="Output file (default: stdout)",
)
@click.option(
    "--append",
    is_flag=True,
    help="Append to the output file instead of overwriting it",
)
@click.option(
    "--prefix",
    default=None,
    help="Text written before the table when appending to an existing file",
)
def render(
    file_path: str,
    input_format: str | None,
    caption: str | None,
    indent: int | None,
    separators: bool | None,
    auto_suppress: int | None,
    auto_lines: bool | None,
    header: bool,
    output: str | None,
    append: bool,
    prefix: str | None,
) -> None:
    """Render a table document or CSV file."""
    try:
        table = _load_table(file_path, input_format, header)
        if caption is not None:
            table.set_top_caption(caption)
        if indent is not None:
            table.set_indent(indent)
        if separators is not None:
            table.set_use_separators(separators)
        if auto_suppress is not None:
            table.set_auto_suppress(auto_suppress)
        if auto_lines is not None:
            table.set_add_line_when_auto_suppressing(auto_lines)

        if output is None:
            click.echo(table.render(), nl=False)
        elif append:
            table.append_to(output, prefix=_unescape(prefix))
            click.echo(f"✓ Table appended to: {output}")
        else:
            table.write_to(output)
            click.echo(f"✓ Table written to: {output}")

    except TableDumpError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)


@cli.command("csv")
@click.option(
    "--file",
    "-f",
    "file_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Table document (YAML).",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    help="Output file (default: stdout)",
)
def csv_cmd(file_path: str, output: str | None) -> None:
    """Export a table document as comma-separated values."""
    try:
        table = load_manifest(file_path).to_table()
        if output is None:
            click.echo(table.to_csv(), nl=False)
        else:
            table.write_csv_to(output)
            click.echo(f"✓ CSV written to: {output}")

    except TableDumpError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)


def _load_table(file_path: str, input_format: str | None, header: bool) -> Table:
    if input_format is None:
        input_format = "csv" if file_path.lower().endswith(".csv") else "yaml"
    logger.debug("Loading %s as %s", file_path, input_format)
    if input_format == "csv":
        return load_csv(file_path, header=header)
    return load_manifest(file_path).to_table()


def _unescape(text: str | None) -> str | None:
    # Allow "\n" on the command line for separating appended tables
    if text is None:
        return None
    return text.replace("\\n", "\n")


if __name__ == "__main__":
    cli()

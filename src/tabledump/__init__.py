"""
tabledump: plain-text tables for logs, terminals and text editors.

Lays out rows of arbitrary values as a fixed-width grid drawn with
Unicode box-drawing characters (or spaces), with:
- Per-column alignment and multi-line cells
- Spanning rows that split the table into blocks, each under its own header
- Blank rows and explicit separators
- Auto-suppression of repeated leading-column values for grouped listings
- Side-by-side and stacked composition of tables

Example:
    from tabledump import Alignment, Table

    table = Table("Populations")
    table.set_headers("City", Alignment.RIGHT, "Population")
    table.row("London", 8615246)
    table.row("Paris", 2249975)
    print(table)
"""

from importlib.metadata import PackageNotFoundError, version

from .alignment import Alignment
from .exceptions import (
    ExportError,
    ManifestError,
    TableDumpError,
    ValidationError,
)
from .export import append_to, to_csv, write_csv_to, write_to
from .manifest import TableManifest, load_csv, load_manifest
from .options import TableOptions
from .rows import EntriesRow, LineRow, Row, SkipRow, SpanRow
from .table import Table

try:
    __version__ = version("tabledump")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

__all__ = [
    # Version
    "__version__",
    # Main classes
    "Table",
    "TableOptions",
    "Alignment",
    # Rows
    "Row",
    "EntriesRow",
    "SpanRow",
    "SkipRow",
    "LineRow",
    # Export
    "write_to",
    "append_to",
    "to_csv",
    "write_csv_to",
    # Documents
    "TableManifest",
    "load_manifest",
    "load_csv",
    # Exceptions
    "TableDumpError",
    "ValidationError",
    "ExportError",
    "ManifestError",
]

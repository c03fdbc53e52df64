"""
File and CSV export for rendered tables.

Write failures are raised as ExportError with the underlying OSError
chained, never printed and discarded.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from .exceptions import ExportError
from .rows import EntriesRow, cell_text, expand

if TYPE_CHECKING:
    from .table import Table

logger = logging.getLogger(__name__)


def write_to(table: Table, path: str | Path) -> None:
    """
    Write the rendered table to ``path``.

    The file is overwritten if it exists; missing parent directories are
    created.

    Raises:
        ExportError: If the file cannot be written
    """
    _write(Path(path), table.render(), mode="w")


def append_to(table: Table, path: str | Path, prefix: str | None = None) -> None:
    """
    Append the rendered table to ``path``, creating the file if needed.

    Args:
        table: The table to render
        path: Destination file
        prefix: Text written before the table, but only when the file
            already existed (e.g., blank lines separating it from earlier
            content)

    Raises:
        ExportError: If the file cannot be written
    """
    path = Path(path)
    content = table.render()
    if prefix is not None and path.exists():
        content = prefix + content
    _write(path, content, mode="a")


def to_csv(table: Table) -> str:
    """
    Convert the table's headers and entries rows to comma-separated values.

    Header values are quoted. Each physical line of an entries row (cells
    split on newlines) becomes one output line. Span, blank and line rows
    are left out.
    """
    lines: list[str] = []
    headers = table.headers
    if headers:
        lines.append(",".join(f'"{cell_text(h)}"' for h in headers))
    for row in table.rows:
        if isinstance(row, EntriesRow):
            lines.extend(",".join(line) for line in expand(row.cells))
    return "".join(line + "\n" for line in lines)


def write_csv_to(table: Table, path: str | Path) -> None:
    """
    Write the table as CSV to ``path``, overwriting it if it exists.

    Raises:
        ExportError: If the file cannot be written
    """
    _write(Path(path), to_csv(table), mode="w")


def _write(path: Path, content: str, mode: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, mode, encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        raise ExportError(str(path), e) from e
    logger.debug("Wrote %d characters to %s (mode=%s)", len(content), path, mode)
    logger.info("Wrote table to %s", path)

"""
Table builder.

A Table accumulates a caption, headers, per-column alignments, rows and
layout options, and renders them as fixed-width text:

    table = Table("Meals")
    table.set_headers("", "Monday", "Tuesday")
    table.row("Breakfast", "cereal", "eggs")
    table.row("Lunch", "sandwich", "salad")
    print(table)

Rows need not have the same number of cells; short rows are padded with
empty cells when rendered. Cell values may be any object and are
converted with ``str()`` on every render, so tables can be nested by
using one table as a cell of another.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path
from typing import Any, TypeVar

from . import export
from .alignment import Alignment
from .layout import column_widths, segment
from .options import TableOptions, validate_count
from .renderer import TableRenderer
from .rows import EntriesRow, LineRow, Row, SkipRow, SpanRow, to_strings

T = TypeVar("T")


class Table:
    """A plain-text table for monospace display."""

    def __init__(self, caption: str | None = None) -> None:
        """
        Create an empty table.

        Args:
            caption: Text centred above the table (may contain newlines)
        """
        self._caption: str | None = caption
        self._headers: list[Any] = []
        self._alignments: list[Alignment | None] = []
        self._rows: list[Row] = []
        self._options = TableOptions()

    @classmethod
    def horizontal(cls, *items: Any) -> Table:
        """
        Create a one-row table without separators.

        Passing rendered tables (or tables) places them side by side.
        """
        table = cls()
        table.set_use_separators(False)
        table.row(*items)
        return table

    @classmethod
    def vertical(cls, *items: Any) -> Table:
        """Create a one-column table without separators, one item per row."""
        table = cls()
        table.set_use_separators(False)
        for item in items:
            table.row(item)
        return table

    # ------------------------------------------------------------------
    # Caption and headers
    # ------------------------------------------------------------------

    @property
    def caption(self) -> str | None:
        return self._caption

    def set_top_caption(self, caption: str | None) -> None:
        self._caption = caption

    @property
    def headers(self) -> list[Any]:
        return list(self._headers)

    def set_headers(self, *items: Any) -> None:
        """
        Replace the column headers.

        Alignment values may be interleaved with the headers: an
        Alignment applies to the next header's column and to every later
        column until another Alignment is given. Existing alignments of
        columns not covered by a marker are kept.

            table.set_headers("City", Alignment.RIGHT, "Population", "Area")
        """
        self._headers.clear()
        self._add_headers(items)

    def append_headers(self, *items: Any) -> None:
        """Add headers after the existing ones; alignment markers are accepted."""
        self._add_headers(items)

    def _add_headers(self, items: Iterable[Any]) -> None:
        marker: Alignment | None = None
        for item in items:
            if isinstance(item, Alignment):
                marker = item
                continue
            column = len(self._headers)
            self._headers.append(item)
            if marker is not None:
                self._set_alignment(column, marker)

    # ------------------------------------------------------------------
    # Alignments
    # ------------------------------------------------------------------

    @property
    def alignments(self) -> list[Alignment | None]:
        return list(self._alignments)

    def set_alignments(self, *alignments: Alignment | str) -> None:
        """Set column alignments; columns without one use Alignment.DEFAULT."""
        self._alignments = [Alignment.parse(a) for a in alignments]

    def append_alignments(self, *alignments: Alignment | str) -> None:
        self._alignments.extend(Alignment.parse(a) for a in alignments)

    def alignment(self, column: int) -> Alignment:
        """The alignment of ``column``, falling back to Alignment.DEFAULT."""
        if 0 <= column < len(self._alignments):
            alignment = self._alignments[column]
            if alignment is not None:
                return alignment
        return Alignment.DEFAULT

    def _set_alignment(self, column: int, alignment: Alignment) -> None:
        while column >= len(self._alignments):
            self._alignments.append(None)
        self._alignments[column] = alignment

    # ------------------------------------------------------------------
    # Rows
    # ------------------------------------------------------------------

    @property
    def rows(self) -> list[Row]:
        return list(self._rows)

    def row(self, *cells: Any) -> None:
        """Add a row with one cell per column."""
        self._rows.append(EntriesRow(list(cells)))

    def row_from(self, values: Iterable[Any]) -> None:
        """
        Add the elements of ``values`` as one row.

        Values are converted to text immediately; ``None`` is kept visible
        as ``"null"`` (whereas :meth:`row` shows ``None`` as an empty cell).
        """
        self._rows.append(EntriesRow(to_strings(values)))

    def append(self, *cells: Any) -> None:
        """Append cells to the last row, starting a new row if the last one is not an entries row."""
        if self._rows and isinstance(self._rows[-1], EntriesRow):
            self._rows[-1].append(*cells)
        else:
            self._rows.append(EntriesRow(list(cells)))

    def populate(self, items: Iterable[T], row_maker: Callable[[T], Sequence[Any]]) -> None:
        """Add one row per item; ``row_maker`` returns the row's cells."""
        for item in items:
            self.row(*row_maker(item))

    def add_span(self, *cells: Any) -> None:
        """
        Add a row whose cells are concatenated across the full table width.

        Span rows ignore (and do not affect) the columns. Each one starts a
        new block, and the header is repeated at the start of every block.
        """
        self._rows.append(SpanRow(list(cells)))

    def add_blank(self, count: int = 1) -> None:
        """Add ``count`` empty bordered lines."""
        validate_count("count", count)
        self._rows.append(SkipRow(count))

    def add_line(self) -> None:
        """Add a horizontal separator between the surrounding rows."""
        self._rows.append(LineRow())

    def clear(self) -> None:
        """Remove the caption, headers, alignments and rows, and reset the options."""
        self._caption = None
        self._headers.clear()
        self._alignments.clear()
        self._rows.clear()
        self._options = TableOptions()

    def is_empty(self) -> bool:
        """True if the table has no rows of any kind."""
        return not self._rows

    def number_of_columns(self) -> int:
        return len(column_widths(self._headers, segment(self._rows), self._rows))

    # ------------------------------------------------------------------
    # Options
    # ------------------------------------------------------------------

    @property
    def options(self) -> TableOptions:
        return self._options

    def configure(self, options: TableOptions) -> None:
        self._options = options

    @property
    def indent(self) -> int:
        return self._options.indent

    def set_indent(self, indent: int) -> None:
        """Indent every bordered line by ``indent`` spaces (span rows are not indented)."""
        self._options = dataclasses.replace(self._options, indent=indent)

    @property
    def use_separators(self) -> bool:
        return self._options.use_separators

    def set_use_separators(self, use_separators: bool) -> None:
        """Draw box-drawing borders (True) or separate columns with spaces (False)."""
        self._options = dataclasses.replace(self._options, use_separators=use_separators)

    @property
    def auto_suppress(self) -> int:
        return self._options.auto_suppress

    def set_auto_suppress(self, n_columns: int) -> None:
        """Blank out values in the first ``n_columns`` columns that repeat the previous row."""
        self._options = dataclasses.replace(self._options, auto_suppress=n_columns)

    @property
    def add_line_when_auto_suppressing(self) -> bool:
        return self._options.add_line_when_auto_suppressing

    def set_add_line_when_auto_suppressing(self, add_line: bool) -> None:
        """Draw a separator before a row that suppresses nothing (a new group)."""
        self._options = dataclasses.replace(
            self._options, add_line_when_auto_suppressing=add_line
        )

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def render(self) -> str:
        return TableRenderer(self).render()

    def __str__(self) -> str:
        return self.render()

    def to_csv(self) -> str:
        return export.to_csv(self)

    def write_to(self, path: str | Path) -> None:
        export.write_to(self, path)

    def append_to(self, path: str | Path, prefix: str | None = None) -> None:
        export.append_to(self, path, prefix)

    def write_csv_to(self, path: str | Path) -> None:
        export.write_csv_to(self, path)

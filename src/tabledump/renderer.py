"""
Table renderer.

Walks the table block by block. Each block prints its leading span row
(if any), the table-wide header, its rows, and a closing bottom rule.
Entries rows go through auto-suppression: leading columns that repeat
the previous row's values are left blank.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from .alignment import Alignment
from .layout import Block, column_widths, segment
from .lines import TableLines
from .rows import CellMatrix, EntriesRow, LineRow, Row, SkipRow, SpanRow, expand

if TYPE_CHECKING:
    from .table import Table

logger = logging.getLogger(__name__)


def suppressed_count(previous: Sequence[str], line: Sequence[str], columns: int) -> int:
    """
    Count the leading columns of ``line`` that repeat ``previous``.

    Only a prefix is suppressed: counting stops at the first column that
    differs, even if later columns happen to match again.

    Args:
        previous: Values last shown in each column
        line: One physical line of an entries row
        columns: How many leading columns may be suppressed

    Returns:
        Number of leading columns to leave blank
    """
    count = 0
    for c in range(min(len(line), columns)):
        shown = previous[c] if c < len(previous) else ""
        if shown != line[c]:
            break
        count += 1
    return count


def remember(
    previous: Sequence[str], line: Sequence[str], suppressed: int, n_columns: int
) -> list[str]:
    """
    Return the previous-values cache after showing ``line``.

    Suppressed columns keep their cached values; every other column takes
    the line's value, or the empty string beyond the end of the line.
    """
    updated = list(previous)
    for c in range(suppressed, n_columns):
        while c >= len(updated):
            updated.append("")
        updated[c] = line[c] if c < len(line) else ""
    return updated


class TableRenderer:
    """Render a Table as fixed-width text.

    Rendering reads the table's current state and never modifies it.
    All transient state lives inside a single :meth:`render` call.
    """

    def __init__(self, table: Table) -> None:
        self._table = table
        options = table.options
        self._lines = TableLines(indent=options.indent, use_separators=options.use_separators)
        self._auto_suppress = options.auto_suppress
        self._add_line = options.add_line_when_auto_suppressing

    def render(self) -> str:
        rows = self._table.rows
        headers = self._table.headers
        blocks = segment(rows)
        widths = column_widths(headers, blocks, rows)
        logger.debug("Rendering %d row(s) in %d block(s), widths=%s", len(rows), len(blocks), widths)

        out: list[str] = []
        self._render_caption(out, widths)
        for block in blocks:
            self._render_block(out, widths, block)
        return "".join(out)

    def _render_caption(self, out: list[str], widths: list[int]) -> None:
        caption = self._table.caption
        if caption is None:
            return
        total_width = sum(w + 3 for w in widths) - 2
        indentation = self._lines.indentation()
        for text in caption.rstrip("\n").split("\n"):
            out.append(f"{indentation}{Alignment.CENTRE.format(total_width, text)}\n")

    def _render_block(self, out: list[str], widths: list[int], block: Block) -> None:
        previous: list[str] = []
        first = 0
        if block.span is not None:
            out.append(block.span.text() + "\n")
            first = 1
        self._render_header(out, widths)
        last = len(block) - 1
        for r in range(first, len(block)):
            previous = self._render_row(
                out,
                widths,
                block.rows[r],
                block.matrices[r],
                previous,
                is_first=r == first,
                is_last=r == last,
            )
        out.append(self._lines.bottom_line(widths))

    def _render_header(self, out: list[str], widths: list[int]) -> None:
        out.append(self._lines.top_line(widths))
        headers = self._table.headers
        if not headers:
            return
        centred = [Alignment.CENTRE] * len(widths)
        for line in expand(headers):
            out.append(self._format_line(widths, _pad(line, len(widths)), centred))
        out.append(self._lines.line(widths))

    def _render_row(
        self,
        out: list[str],
        widths: list[int],
        row: Row,
        matrix: CellMatrix | None,
        previous: list[str],
        is_first: bool,
        is_last: bool,
    ) -> list[str]:
        match row:
            case SkipRow(count=count):
                out.extend(self._lines.empty_line(widths) for _ in range(count))
            case LineRow():
                if not is_first and not is_last:
                    out.append(self._lines.visible_line(widths))
            case SpanRow():
                out.append(row.text() + "\n")
            case EntriesRow(cells=cells):
                for line in matrix if matrix is not None else expand(cells):
                    previous = self._render_entries(out, widths, line, previous, is_first)
        return previous

    def _render_entries(
        self,
        out: list[str],
        widths: list[int],
        line: list[str],
        previous: list[str],
        is_first: bool,
    ) -> list[str]:
        suppressed = suppressed_count(previous, line, self._auto_suppress)
        if suppressed == 0 and self._auto_suppress > 0 and not is_first and self._add_line:
            out.append(self._lines.visible_line(widths))

        cells = _pad(line, len(widths))
        for c in range(suppressed):
            cells[c] = ""
        alignments = [self._table.alignment(c) for c in range(len(widths))]
        out.append(self._format_line(widths, cells, alignments))
        return remember(previous, line, suppressed, len(widths))

    def _format_line(
        self, widths: list[int], cells: list[str], alignments: list[Alignment]
    ) -> str:
        bar = self._lines.vertical
        text = f" {bar} ".join(
            alignment.format(width, cell)
            for width, cell, alignment in zip(widths, cells, alignments)
        )
        return f"{self._lines.indentation()}{bar}{text}{bar}\n"


def _pad(line: Sequence[str], n_columns: int) -> list[str]:
    return list(line) + [""] * (n_columns - len(line))

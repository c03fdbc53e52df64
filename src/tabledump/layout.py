"""Block segmentation and column width computation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from .rows import CellMatrix, EntriesRow, Row, SpanRow, expand, matrix_widths, merge_widths


@dataclass
class Block:
    """
    A run of rows rendered under one copy of the header.

    A block begins at the start of the table or at a span row, which is
    then the block's first row. The cell matrix of every entries row and
    the block's own column widths are computed once, up front.

    Attributes:
        rows: The block's rows, in order
        matrices: Expanded matrix per row (None for non-entries rows)
        widths: Widest text per column over the block's entries rows
    """

    rows: list[Row]
    matrices: list[CellMatrix | None] = field(init=False)
    widths: list[int] = field(init=False)

    def __post_init__(self) -> None:
        self.matrices = [
            expand(row.cells) if isinstance(row, EntriesRow) else None for row in self.rows
        ]
        self.widths = []
        for matrix in self.matrices:
            if matrix is not None:
                merge_widths(self.widths, matrix_widths(matrix))

    @property
    def span(self) -> SpanRow | None:
        """The span row that opened this block, if any."""
        first = self.rows[0] if self.rows else None
        return first if isinstance(first, SpanRow) else None

    def __len__(self) -> int:
        return len(self.rows)


def segment(rows: Sequence[Row]) -> list[Block]:
    """Split rows into blocks, starting a new block at every span row."""
    groups: list[list[Row]] = []
    for row in rows:
        if not groups or isinstance(row, SpanRow):
            groups.append([])
        groups[-1].append(row)
    return [Block(group) for group in groups]


def column_widths(
    headers: Sequence[Any],
    blocks: Sequence[Block],
    rows: Sequence[Row] = (),
) -> list[int]:
    """
    Compute the rendered width of every column.

    Each width is the longest text in that column over every physical
    line of the headers and of all entries rows. Span, blank and line
    rows never affect widths.

    Args:
        headers: Header cell values
        blocks: The table's blocks
        rows: All rows of the table; entries rows among them are measured
            again so the result does not depend on how blocks were built

    Returns:
        One width per column; the length is the table's column count
    """
    widths = matrix_widths(expand(headers))
    for block in blocks:
        merge_widths(widths, block.widths)
    for row in rows:
        if isinstance(row, EntriesRow):
            merge_widths(widths, matrix_widths(expand(row.cells)))
    return widths

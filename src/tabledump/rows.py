"""
Row model and cell matrix expansion.

A table is an ordered list of rows, each one of four kinds:

- EntriesRow: one value per column
- SpanRow: values concatenated into a single line that ignores columns
- SkipRow: one or more blank bordered lines
- LineRow: an explicit horizontal separator

Cell values are arbitrary objects; they are converted with ``str()`` each
time the table is rendered.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

NULL_TEXT = "null"

CellMatrix = list[list[str]]


@dataclass
class EntriesRow:
    """A row of cells, one per logical column. Short rows are padded when rendered."""

    cells: list[Any] = field(default_factory=list)

    def append(self, *cells: Any) -> None:
        self.cells.extend(cells)

    def __len__(self) -> int:
        return len(self.cells)


@dataclass
class SpanRow:
    """A full-width line of concatenated text. Starts a new block."""

    cells: list[Any] = field(default_factory=list)

    def text(self) -> str:
        return "".join(cell_text(cell) for cell in self.cells)


@dataclass(frozen=True)
class SkipRow:
    """Blank bordered lines."""

    count: int = 1


@dataclass(frozen=True)
class LineRow:
    """An explicit separator, dropped when it would touch the block's own border."""


Row = EntriesRow | SpanRow | SkipRow | LineRow


def cell_text(value: Any) -> str:
    """Display text of a cell; ``None`` is shown as empty."""
    if value is None:
        return ""
    return str(value)


def to_strings(values: Iterable[Any]) -> list[str]:
    """
    Bulk-convert explicit values to text.

    Unlike :func:`cell_text`, ``None`` becomes the literal ``"null"`` so a
    missing value stays visible in the row.
    """
    return [NULL_TEXT if value is None else str(value) for value in values]


def expand(cells: Sequence[Any]) -> CellMatrix:
    """
    Expand one logical row into its physical lines.

    Each cell is split on newlines; ``matrix[line][column]`` is the text of
    ``column`` on physical ``line``. Lines are padded with empty strings up
    to the last column that has text on them.

    Args:
        cells: The row's cell values

    Returns:
        The cell matrix (empty for a row with no cells)
    """
    matrix: CellMatrix = []
    for column, cell in enumerate(cells):
        for line, part in enumerate(cell_text(cell).split("\n")):
            while line >= len(matrix):
                matrix.append([])
            row = matrix[line]
            while column >= len(row):
                row.append("")
            row[column] = part
    return matrix


def matrix_widths(matrix: CellMatrix) -> list[int]:
    """Widest text per column across every physical line of a matrix."""
    widths: list[int] = []
    for line in matrix:
        merge_widths(widths, [len(text) for text in line])
    return widths


def merge_widths(widths: list[int], new_widths: Sequence[int]) -> list[int]:
    """Raise ``widths`` in place to the elementwise max with ``new_widths``."""
    for i, width in enumerate(new_widths):
        if i >= len(widths):
            widths.append(0)
        widths[i] = max(widths[i], width)
    return widths

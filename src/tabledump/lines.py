"""
Line-drawing glyphs.

Builds the horizontal rules and blank rows that frame a table. When
separators are disabled every glyph degrades to a single space, so the
renderer lays out boxed and space-separated tables with the same code.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .alignment import spaces

VERTICAL = "│"
HORIZONTAL = "─"
TOP_LEFT = "┌"
TOP_MIDDLE = "┬"
TOP_RIGHT = "┐"
LEFT_MIDDLE = "├"
CROSS = "┼"
RIGHT_MIDDLE = "┤"
BOTTOM_LEFT = "└"
BOTTOM_MIDDLE = "┴"
BOTTOM_RIGHT = "┘"


@dataclass(frozen=True)
class TableLines:
    """Glyphs and rule builders for one rendering configuration."""

    indent: int = 0
    use_separators: bool = True

    def glyph(self, char: str) -> str:
        return char if self.use_separators else " "

    @property
    def vertical(self) -> str:
        return self.glyph(VERTICAL)

    @property
    def horizontal(self) -> str:
        return self.glyph(HORIZONTAL)

    def indentation(self) -> str:
        return spaces(self.indent)

    def horizontal_run(self, n: int) -> str:
        """A run of ``n`` horizontal glyphs (empty for negative ``n``)."""
        return self.horizontal * max(n, 0)

    def top_line(self, widths: Sequence[int]) -> str:
        return self._rule(widths, TOP_LEFT, self._join(TOP_MIDDLE), TOP_RIGHT)

    def line(self, widths: Sequence[int]) -> str:
        """Rule between the header and the body."""
        return self._rule(widths, LEFT_MIDDLE, self._join(CROSS), RIGHT_MIDDLE)

    def visible_line(self, widths: Sequence[int]) -> str:
        """
        Separator drawn for explicit lines and new auto-suppress groups.

        The column crossings always use real line glyphs, so the
        separator stays visible in space-separated tables.
        """
        return self._rule(widths, LEFT_MIDDLE, HORIZONTAL + CROSS + HORIZONTAL, RIGHT_MIDDLE)

    def bottom_line(self, widths: Sequence[int]) -> str:
        return self._rule(widths, BOTTOM_LEFT, self._join(BOTTOM_MIDDLE), BOTTOM_RIGHT)

    def empty_line(self, widths: Sequence[int]) -> str:
        """A bordered row of spaces, used for blank rows."""
        bar = self.vertical
        cells = f" {bar} ".join(spaces(w) for w in widths)
        return f"{self.indentation()}{bar}{cells}{bar}\n"

    def _join(self, middle: str) -> str:
        return self.horizontal + self.glyph(middle) + self.horizontal

    def _rule(self, widths: Sequence[int], left: str, join: str, right: str) -> str:
        runs = join.join(self.horizontal_run(w) for w in widths)
        return f"{self.indentation()}{self.glyph(left)}{runs}{self.glyph(right)}\n"

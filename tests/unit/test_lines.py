"""Tests for line-drawing glyphs."""

from tabledump.lines import TableLines
from tests.fixtures.tables import bottom, middle, top


class TestBoxedLines:
    """Rules and blank rows with separators enabled."""

    def test_top_line(self):
        """Top rule uses corners and down-tees."""
        assert TableLines().top_line([2, 3]) == top([2, 3]) + "\n"

    def test_line(self):
        """Header separator uses side tees and crosses."""
        assert TableLines().line([1, 1, 1]) == middle([1, 1, 1]) + "\n"

    def test_bottom_line(self):
        """Bottom rule uses corners and up-tees."""
        assert TableLines().bottom_line([4]) == bottom([4]) + "\n"

    def test_visible_line_matches_line(self):
        """With separators on, the visible line equals the header separator."""
        lines = TableLines()
        assert lines.visible_line([3, 2]) == lines.line([3, 2])

    def test_empty_line(self):
        """Blank row frames spaces with vertical bars."""
        assert TableLines().empty_line([2, 3]) == "│   │    │\n"

    def test_indentation(self):
        """Every rule is prefixed with the indentation."""
        lines = TableLines(indent=2)
        assert lines.indentation() == "  "
        assert lines.top_line([1]) == "  ┌─┐\n"
        assert lines.empty_line([1]) == "  │ │\n"

    def test_no_columns(self):
        """A table without columns still gets its corners."""
        assert TableLines().top_line([]) == "┌┐\n"

    def test_negative_width_clamps(self):
        """Negative widths produce empty runs instead of failing."""
        assert TableLines().horizontal_run(-4) == ""
        assert TableLines().empty_line([-1]) == "││\n"


class TestSpaceSeparatedLines:
    """Rules and blank rows with separators disabled."""

    def test_glyphs_degrade_to_spaces(self):
        """Every glyph becomes a single space."""
        lines = TableLines(use_separators=False)
        assert lines.vertical == " "
        assert lines.horizontal == " "
        assert lines.top_line([2, 1]) == " " * 8 + "\n"
        assert lines.line([2, 1]) == " " * 8 + "\n"
        assert lines.bottom_line([2, 1]) == " " * 8 + "\n"
        assert lines.empty_line([2, 1]) == " " * 8 + "\n"

    def test_visible_line_keeps_crossings(self):
        """Explicit separators stay visible between columns."""
        lines = TableLines(use_separators=False)
        assert lines.visible_line([1, 2]) == "  ─┼─   \n"

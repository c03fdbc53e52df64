"""Column alignment policy."""

from __future__ import annotations

from enum import Enum

from .exceptions import ValidationError


def spaces(n: int) -> str:
    """Return a string of ``n`` spaces (empty for negative ``n``)."""
    if n < 0:
        return ""
    return " " * n


class Alignment(Enum):
    """How the text in a column is padded to the column width."""

    LEFT = "left"
    RIGHT = "right"
    CENTRE = "centre"
    DEFAULT = "default"

    def format(self, width: int, value: str) -> str:
        """
        Pad ``value`` to ``width`` characters.

        Values that are already at least ``width`` long are returned
        unchanged; nothing is ever truncated. Centred values put the odd
        extra space on the right.

        Args:
            width: Target width
            value: Text to pad

        Returns:
            The padded text, ``max(width, len(value))`` characters long
        """
        n_spaces = width - len(value)
        if n_spaces <= 0:
            return value
        if self is Alignment.RIGHT:
            return spaces(n_spaces) + value
        if self is Alignment.CENTRE:
            left = n_spaces // 2
            return spaces(left) + value + spaces(n_spaces - left)
        return value + spaces(n_spaces)

    @classmethod
    def parse(cls, value: Alignment | str) -> Alignment:
        """
        Convert a name or shorthand into an Alignment.

        Accepts ``left``/``l``, ``right``/``r``, ``centre``/``center``/``c``
        and ``default``/``d`` in any case.

        Raises:
            ValidationError: If the name is not recognised
        """
        if isinstance(value, Alignment):
            return value
        if isinstance(value, str):
            alignment = _ALIASES.get(value.strip().lower())
            if alignment is not None:
                return alignment
        raise ValidationError("alignment", value, "expected left, right, centre or default")


_ALIASES = {
    "left": Alignment.LEFT,
    "l": Alignment.LEFT,
    "right": Alignment.RIGHT,
    "r": Alignment.RIGHT,
    "centre": Alignment.CENTRE,
    "center": Alignment.CENTRE,
    "c": Alignment.CENTRE,
    "default": Alignment.DEFAULT,
    "d": Alignment.DEFAULT,
}

"""Table configuration."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from .exceptions import ValidationError


@dataclass(frozen=True)
class TableOptions:
    """
    Layout settings for a table.

    Attributes:
        indent: Spaces prefixed to every bordered line (span rows are not indented)
        use_separators: Draw box-drawing borders; otherwise columns are space-separated
        auto_suppress: Number of leading columns whose repeated values are hidden
        add_line_when_auto_suppressing: Draw a separator before a row that
            suppresses nothing (the start of a new group)
    """

    indent: int = 0
    use_separators: bool = True
    auto_suppress: int = 0
    add_line_when_auto_suppressing: bool = True

    def __post_init__(self) -> None:
        validate_count("indent", self.indent)
        validate_count("auto_suppress", self.auto_suppress)
        validate_flag("use_separators", self.use_separators)
        validate_flag("add_line_when_auto_suppressing", self.add_line_when_auto_suppressing)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TableOptions:
        """
        Deserialize from dictionary.

        Missing keys take their defaults.

        Raises:
            ValidationError: On unknown keys or invalid values
        """
        unknown = sorted(set(data) - set(cls.__dataclass_fields__))
        if unknown:
            raise ValidationError("options", unknown, "unknown option names")
        return cls(**data)


def validate_count(field: str, value: Any) -> None:
    # bool is an int subclass; True is not a count
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(field, value, "must be an integer")
    if value < 0:
        raise ValidationError(field, value, "must be >= 0")


def validate_flag(field: str, value: Any) -> None:
    if not isinstance(value, bool):
        raise ValidationError(field, value, "must be true or false")

"""Exceptions for tabledump."""

from typing import Any

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class TableDumpError(Exception):
    """
    Base exception for all tabledump errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause.
    """

    pass


# ---------------------------------------------------------------------------
# Builder Exceptions
# ---------------------------------------------------------------------------


class ValidationError(TableDumpError):
    """
    Raised when a table is configured with an invalid value.

    Rendering itself never fails; bad configuration is rejected here,
    at the builder boundary, instead of producing a corrupted layout.

    Attributes:
        field: Name of the rejected setting (e.g., "indent")
        value: The rejected value
        reason: Why the value was rejected
    """

    def __init__(self, field: str, value: Any, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field}: {value!r} ({reason})")


# ---------------------------------------------------------------------------
# Export Exceptions
# ---------------------------------------------------------------------------


class ExportError(TableDumpError):
    """
    Raised when a rendered table cannot be written to disk.

    Attributes:
        path: The file that was being written
        cause: The underlying OS error
    """

    def __init__(self, path: str, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write table to {path}: {cause}")


class ManifestError(TableDumpError):
    """Raised when a YAML table document is malformed."""

    def __init__(self, reason: str, source: str | None = None) -> None:
        self.reason = reason
        self.source = source
        msg = f"Invalid table document: {reason}"
        if source:
            msg += f" [{source}]"
        super().__init__(msg)

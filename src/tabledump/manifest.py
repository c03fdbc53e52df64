"""YAML table documents: parsing, validation and conversion to Table."""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .alignment import Alignment
from .exceptions import ManifestError
from .options import TableOptions, validate_count
from .table import Table

logger = logging.getLogger(__name__)

ROW_KINDS = ("entries", "span", "blank", "line")
TOP_LEVEL_KEYS = {"caption", "headers", "alignments", "options", "rows"}


@dataclass(frozen=True)
class RowDecl:
    """One row of a table document.

    YAML forms:
        - [a, b, c]          entries row
        - {entries: [a, b]}  entries row
        - {span: text}       span row (text or list of values)
        - blank              one blank row
        - {blank: 3}         three blank rows
        - line               explicit separator
    """

    kind: str
    cells: tuple[Any, ...] = ()
    count: int = 1

    @classmethod
    def from_value(cls, value: Any) -> RowDecl:
        if isinstance(value, list):
            return cls(kind="entries", cells=tuple(value))
        if value in ("line", "blank"):
            return cls(kind=value)
        if not isinstance(value, dict) or len(value) != 1:
            raise ManifestError(f"cannot interpret row {value!r}")

        ((kind, body),) = value.items()
        if kind == "entries":
            if not isinstance(body, list):
                raise ManifestError(f"entries must be a list, got {body!r}")
            return cls(kind="entries", cells=tuple(body))
        if kind == "span":
            cells = tuple(body) if isinstance(body, list) else (body,)
            return cls(kind="span", cells=cells)
        if kind == "blank":
            count = 1 if body is None else body
            validate_count("count", count)
            return cls(kind="blank", count=count)
        if kind == "line":
            return cls(kind="line")
        raise ManifestError(f"unknown row kind {kind!r} (expected one of {', '.join(ROW_KINDS)})")

    def to_value(self) -> Any:
        if self.kind == "entries":
            return list(self.cells)
        if self.kind == "span":
            return {"span": list(self.cells)}
        if self.kind == "blank":
            return {"blank": self.count}
        return "line"

    def apply(self, table: Table) -> None:
        if self.kind == "entries":
            table.row(*self.cells)
        elif self.kind == "span":
            table.add_span(*self.cells)
        elif self.kind == "blank":
            table.add_blank(self.count)
        else:
            table.add_line()


@dataclass(frozen=True)
class TableManifest:
    """A complete table document."""

    caption: str | None = None
    headers: tuple[Any, ...] = ()
    alignments: tuple[Alignment, ...] = ()
    options: TableOptions = field(default_factory=TableOptions)
    rows: tuple[RowDecl, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TableManifest:
        """
        Build a manifest from parsed YAML.

        Raises:
            ManifestError: If the document structure is wrong
            ValidationError: If an option or alignment value is invalid
        """
        unknown = sorted(set(data) - TOP_LEVEL_KEYS)
        if unknown:
            raise ManifestError(f"unknown keys: {', '.join(unknown)}")

        caption = data.get("caption")
        if caption is not None:
            caption = str(caption)

        headers = data.get("headers") or []
        if not isinstance(headers, list):
            raise ManifestError("headers must be a list")

        alignments = data.get("alignments") or []
        if not isinstance(alignments, list):
            raise ManifestError("alignments must be a list")

        options = data.get("options") or {}
        if not isinstance(options, dict):
            raise ManifestError("options must be a mapping")

        rows = data.get("rows") or []
        if not isinstance(rows, list):
            raise ManifestError("rows must be a list")

        return cls(
            caption=caption,
            headers=tuple(_parse_header(h) for h in headers),
            alignments=tuple(Alignment.parse(a) for a in alignments),
            options=TableOptions.from_dict(options),
            rows=tuple(RowDecl.from_value(r) for r in rows),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.caption is not None:
            result["caption"] = self.caption
        if self.headers:
            result["headers"] = [
                {"align": h.value} if isinstance(h, Alignment) else h for h in self.headers
            ]
        if self.alignments:
            result["alignments"] = [a.value for a in self.alignments]
        result["options"] = self.options.to_dict()
        result["rows"] = [r.to_value() for r in self.rows]
        return result

    def to_table(self) -> Table:
        """
        Build a Table.

        Explicit alignments override header markers column by column;
        columns past the end of ``alignments`` keep their marker alignment.
        """
        table = Table(self.caption)
        table.configure(self.options)
        table.set_headers(*self.headers)
        if self.alignments:
            merged = table.alignments
            for column, alignment in enumerate(self.alignments):
                if column < len(merged):
                    merged[column] = alignment
                else:
                    merged.append(alignment)
            table.set_alignments(*(a or Alignment.DEFAULT for a in merged))
        for row in self.rows:
            row.apply(table)
        return table


def _parse_header(value: Any) -> Any:
    if isinstance(value, dict):
        if set(value) != {"align"}:
            raise ManifestError(f"header markers take a single 'align' key, got {value!r}")
        return Alignment.parse(value["align"])
    return value


def load_manifest(path: str | Path) -> TableManifest:
    """
    Load a table document from a YAML file.

    Raises:
        ManifestError: If the file is not UTF-8, not valid YAML or not a mapping
    """
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except UnicodeDecodeError as e:
            raise ManifestError(f"file is not valid UTF-8: {e}", source=str(path)) from e
        except yaml.YAMLError as e:
            raise ManifestError(f"YAML parse error: {e}", source=str(path)) from e
    if not isinstance(data, dict):
        raise ManifestError("YAML file must contain a mapping", source=str(path))
    manifest = TableManifest.from_dict(data)
    logger.debug("Loaded table document %s with %d row(s)", path, len(manifest.rows))
    return manifest


def load_csv(path: str | Path, header: bool = True) -> Table:
    """
    Build a Table from a CSV file.

    Args:
        path: CSV file to read
        header: Treat the first record as the column headers

    Raises:
        ManifestError: If the file is not UTF-8 or not valid CSV
    """
    table = Table()
    with open(path, newline="", encoding="utf-8") as f:
        try:
            records = list(csv.reader(f))
        except UnicodeDecodeError as e:
            raise ManifestError(f"file is not valid UTF-8: {e}", source=str(path)) from e
        except csv.Error as e:
            raise ManifestError(f"CSV parse error: {e}", source=str(path)) from e
    if header and records:
        table.set_headers(*records[0])
        records = records[1:]
    for record in records:
        table.row(*record)
    logger.debug("Loaded %d CSV record(s) from %s", len(records), path)
    return table

"""Render discovered installs as table, JSON, CSV, YAML or a count."""

from __future__ import annotations

import csv
import json
import sys
from typing import Any, Dict, Iterable, List, Optional, Sequence, TextIO

import yaml
from rich.console import Console
from rich.table import Table

from .errors import E_INVALID_FIELD, E_INVALID_FORMAT, FormatError
from .finder import FindRecord

__all__ = ["FIELDS", "FORMATS", "display_items", "select_fields"]

FIELDS = ("version_path", "version", "depth")
FORMATS = ("table", "json", "csv", "yaml", "count")


def select_fields(fields: str | Sequence[str] | None) -> List[str]:
    """Validate a field list given as ``"a,b"`` or a sequence of names."""
    if fields is None:
        return list(FIELDS)
    if isinstance(fields, str):
        names = [name.strip() for name in fields.split(",") if name.strip()]
    else:
        names = list(fields)
    unknown = [name for name in names if name not in FIELDS]
    if unknown or not names:
        raise FormatError(
            code=E_INVALID_FIELD,
            message=f"Invalid field(s): {', '.join(unknown) or '<empty>'}. "
            f"Available fields: {', '.join(FIELDS)}",
            context={"fields": names},
        )
    return names


def _rows(records: Iterable[FindRecord], fields: Sequence[str]) -> List[Dict[str, Any]]:
    rows = []
    for record in records:
        data = record.as_dict()
        rows.append({name: data[name] for name in fields})
    return rows


def display_items(
    records: Iterable[FindRecord],
    *,
    format: str = "table",
    fields: str | Sequence[str] | None = None,
    field: Optional[str] = None,
    console: Console | None = None,
    stream: TextIO | None = None,
) -> None:
    if format not in FORMATS:
        raise FormatError(
            code=E_INVALID_FORMAT,
            message=f"Invalid format: {format}. Available formats: {', '.join(FORMATS)}",
            context={"format": format},
        )
    out = stream or sys.stdout
    items = list(records)

    if format == "count":
        out.write(f"{len(items)}\n")
        return

    if field is not None:
        (name,) = select_fields([field])
        for row in _rows(items, [name]):
            out.write(f"{row[name]}\n")
        return

    names = select_fields(fields)
    rows = _rows(items, names)

    if format == "json":
        out.write(json.dumps(rows) + "\n")
    elif format == "csv":
        writer = csv.DictWriter(out, fieldnames=names, lineterminator="\n")
        writer.writeheader()
        writer.writerows(rows)
    elif format == "yaml":
        out.write(yaml.safe_dump(rows, default_flow_style=False, sort_keys=False))
    else:
        if not rows:
            return
        table = Table(show_lines=False)
        for name in names:
            table.add_column(name, overflow="fold")
        for row in rows:
            table.add_row(*(str(row[name]) for name in names))
        (console or Console(file=out)).print(table)

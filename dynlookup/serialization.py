"""Serialization — pydantic records, JSON and CSV import/export.

Property order is preserved in every format.  Loaded objects start
unmodified.  Host references are written as-is when JSON-compatible and
as their ``str()`` otherwise.
"""

from __future__ import annotations

import csv
import io
import json
import logging
from pathlib import Path
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from dynlookup.models.lookup_table import LookupTable
from dynlookup.models.property import Property, PropertyKind

logger = logging.getLogger(__name__)

CSV_FIELDS = ["name", "display_name", "kind", "value", "display_value", "description"]
_REQUIRED_CSV_FIELDS = {"name", "kind", "value"}


class PropertyRecord(BaseModel):
    """Plain-data form of a :class:`Property`."""

    model_config = ConfigDict(use_enum_values=True, validate_default=True)

    name: str = ""
    display_name: str = ""
    description: str = ""
    value: Any = ""
    display_value: Any = ""
    kind: PropertyKind = PropertyKind.INPUT


class LookupTableRecord(BaseModel):
    """Plain-data form of a :class:`LookupTable`."""

    action_name: str = ""
    description: str = ""
    parameter_ref: Any = None
    action_ref: Any = None
    selection: list[Any] = Field(default_factory=list)
    properties: list[PropertyRecord] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

def property_to_record(prop: Property) -> PropertyRecord:
    return PropertyRecord(
        name=prop.name,
        display_name=prop.display_name,
        description=prop.description,
        value=prop.value,
        display_value=prop.display_value,
        kind=prop.kind,
    )


def property_from_record(record: PropertyRecord) -> Property:
    return Property(
        name=record.name,
        display_name=record.display_name,
        kind=record.kind,
        description=record.description,
        value=record.value,
        display_value=record.display_value,
    )


def to_record(table: LookupTable) -> LookupTableRecord:
    """Snapshot *table* as a record."""
    return LookupTableRecord(
        action_name=table.action_name,
        description=table.description,
        parameter_ref=table.parameter_ref,
        action_ref=table.action_ref,
        selection=list(table.selection or []),
        properties=[property_to_record(p) for p in table.properties or []],
    )


def from_record(record: LookupTableRecord) -> LookupTable:
    """Rebuild a clean table from *record*."""
    return LookupTable(
        action_name=record.action_name,
        description=record.description,
        parameter_ref=record.parameter_ref,
        action_ref=record.action_ref,
        selection=record.selection,
        properties=[property_from_record(r) for r in record.properties],
    )


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------

def to_json(table: LookupTable, indent: int | None = 2) -> str:
    return json.dumps(to_record(table).model_dump(), indent=indent, default=str)


def from_json(text: str) -> LookupTable:
    """Parse JSON produced by :func:`to_json`.

    Raises ``ValueError`` for malformed or empty input.
    """
    if not text or not text.strip():
        raise ValueError("Cannot load a lookup table from empty JSON")
    try:
        record = LookupTableRecord.model_validate(json.loads(text))
    except (json.JSONDecodeError, ValidationError) as exc:
        raise ValueError(f"Invalid lookup table JSON: {exc}") from exc
    table = from_record(record)
    logger.debug("Loaded %r from JSON", table)
    return table


def save_json(table: LookupTable, path: str | Path) -> Path:
    p = Path(path)
    p.write_text(to_json(table), encoding="utf-8")
    logger.info("Saved lookup table %r to %s", table.action_name, p)
    return p


def load_json(path: str | Path) -> LookupTable:
    p = Path(path)
    if not p.is_file():
        raise FileNotFoundError(f"Lookup table file not found: {p}")
    return from_json(p.read_text(encoding="utf-8"))


# ---------------------------------------------------------------------------
# CSV
# ---------------------------------------------------------------------------

def properties_to_csv(properties: Iterable[Property]) -> str:
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=CSV_FIELDS, lineterminator="\n")
    writer.writeheader()
    for prop in properties:
        row = property_to_record(prop).model_dump()
        writer.writerow({k: "" if row[k] is None else row[k] for k in CSV_FIELDS})
    return buf.getvalue()


def export_properties_csv(table: LookupTable, path: str | Path) -> Path:
    """Write the table's properties, one row each, in table order."""
    p = Path(path)
    p.write_text(properties_to_csv(table.properties or []), encoding="utf-8")
    logger.info("Exported %d properties to %s", table.property_count(), p)
    return p


def properties_from_csv(text: str) -> list[Property]:
    """Parse CSV text into clean properties.

    Rows with an unknown kind are skipped with a warning.  A header
    lacking ``name``, ``kind`` or ``value`` raises ``ValueError``.
    """
    reader = csv.DictReader(io.StringIO(text))
    missing = _REQUIRED_CSV_FIELDS - set(reader.fieldnames or [])
    if missing:
        raise ValueError(f"CSV is missing required columns: {', '.join(sorted(missing))}")

    properties: list[Property] = []
    for line_no, row in enumerate(reader, start=2):
        try:
            kind = PropertyKind.coerce(row.get("kind") or "")
        except ValueError:
            logger.warning("Skipping CSV line %d: unknown kind %r", line_no, row.get("kind"))
            continue
        properties.append(Property(
            name=row.get("name") or "",
            display_name=row.get("display_name") or "",
            kind=kind,
            description=row.get("description") or "",
            value=row.get("value") or "",
            display_value=row.get("display_value") or "",
        ))
    return properties


def import_properties_csv(path: str | Path) -> list[Property]:
    p = Path(path)
    if not p.is_file():
        raise FileNotFoundError(f"CSV file not found: {p}")
    properties = properties_from_csv(p.read_text(encoding="utf-8"))
    logger.info("Imported %d properties from %s", len(properties), p)
    return properties

"""Structured-document (JSON) decoder.

Input is a JSON array of flat objects.  JSON objects carry no ordering that
can be relied on across records, so the column order is manufactured: the
union of all keys, sorted by code point, behind a synthetic "#" index column.
"""

import json
import logging
import math
from typing import IO, Any

from tablify.content import Content
from tablify.decoders.streams import read_text
from tablify.errors import DecodeError

logger = logging.getLogger(__name__)

INDEX_COLUMN = "#"

# Cell text for a record that lacks a key present in some other record
ABSENT = "<absent>"


def _reject_constant(name: str) -> None:
    raise ValueError(f"non-standard JSON constant {name!r}")


def _finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"number {text!r} is out of range")
    return value


def _load_records(text: str) -> list[dict[str, Any]]:
    """Parse the text as a JSON array of objects."""
    try:
        value = json.loads(text, parse_constant=_reject_constant, parse_float=_finite_float)
    except ValueError as exc:  # JSONDecodeError is a ValueError subclass
        raise DecodeError(str(exc)) from exc

    if not isinstance(value, list):
        raise DecodeError(f"expected a JSON array of objects, got {type(value).__name__}")
    for i, record in enumerate(value):
        if not isinstance(record, dict):
            raise DecodeError(f"element {i} is {type(record).__name__}, expected an object")
    return value


def collect_header(records: list[dict[str, Any]]) -> list[str]:
    """Return "#" followed by the sorted, deduplicated union of all record keys.

    A record key named "#" would collide with the index column and is rejected.
    """
    keys: set[str] = set()
    for record in records:
        keys.update(record)
    if INDEX_COLUMN in keys:
        raise DecodeError(f"record key {INDEX_COLUMN!r} collides with the row index column")
    return [INDEX_COLUMN] + sorted(keys)


def stringify(value: Any) -> str:
    """Render any decoded JSON value as text.

    Strings pass through unquoted; null, booleans and numbers use their JSON
    spelling; arrays and objects become compact JSON text.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    return json.dumps(value)


def decode_json(stream: IO) -> Content:
    """Decode a JSON array of objects into Content.

    Every row has exactly len(header) cells: the 1-based record index, then one
    cell per header column, with ABSENT where the record lacks the key.
    """
    records = _load_records(read_text(stream))
    header = collect_header(records)

    rows: list[list[str]] = []
    for i, record in enumerate(records, start=1):
        row = [str(i)]
        for key in header[1:]:
            row.append(stringify(record[key]) if key in record else ABSENT)
        rows.append(row)

    logger.debug("Decoded JSON: %d records, %d columns", len(rows), len(header))
    return Content(header=header, rows=rows)

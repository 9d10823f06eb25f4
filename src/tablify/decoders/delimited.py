"""Delimited-text (CSV) decoder.

The first record is the header; every following record is a row, verbatim.
Cells are already text so no stringification happens here.
"""

import csv
import io
import logging
from typing import IO

from tablify.content import Content
from tablify.decoders.streams import read_text
from tablify.errors import DecodeError

logger = logging.getLogger(__name__)


def _records(text: str) -> list[list[str]]:
    """Parse every non-blank CSV record, raising DecodeError on the first lexical error."""
    reader = csv.reader(io.StringIO(text, newline=""), strict=True)
    try:
        # csv yields [] for a blank line; those carry no record
        return [record for record in reader if record]
    except csv.Error as exc:
        raise DecodeError(f"line {reader.line_num}: {exc}") from exc


def decode_csv(stream: IO) -> Content:
    """Decode a CSV stream into Content.

    Raises DecodeError if the stream holds no header record or if any record
    breaks the CSV quoting rules.  Row widths are not checked against the
    header.
    """
    records = _records(read_text(stream))
    if not records:
        raise DecodeError("no header record: input is empty")

    header, rows = records[0], records[1:]
    logger.debug("Decoded CSV: %d columns, %d rows", len(header), len(rows))
    return Content(header=header, rows=rows)

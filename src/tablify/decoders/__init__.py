"""Decoders that normalise an input format into Content.

Submodules:
  streams    -- whole-stream reading shared by both decoders
  delimited  -- CSV decoder
  document   -- JSON decoder, header union and value stringification
"""

from enum import Enum
from typing import IO

from tablify.content import Content
from tablify.decoders.delimited import decode_csv
from tablify.decoders.document import decode_json


class InputFormat(str, Enum):
    """Input encodings understood by tablify."""

    CSV = "csv"
    JSON = "json"


_DECODERS = {
    InputFormat.CSV: decode_csv,
    InputFormat.JSON: decode_json,
}


def decode(fmt: InputFormat | str, stream: IO) -> Content:
    """Decode the stream with the decoder for fmt (an InputFormat or its value)."""
    return _DECODERS[InputFormat(fmt)](stream)

"""Render CSV or JSON input as a boxed table, optionally copying TSV to the clipboard.

Submodules:
  errors        -- TablifyError, DecodeError, ClipboardError
  content       -- Content model shared by both decoders
  decoders      -- CSV and JSON decoders plus InputFormat dispatch
  presentation  -- table rendering, TSV serialisation, clipboard write
  pipeline      -- format_table() entry point
  config        -- environment driven settings
  cli           -- command line interface
"""

from tablify.content import Content
from tablify.decoders import InputFormat, decode
from tablify.errors import ClipboardError, DecodeError, TablifyError
from tablify.pipeline import format_table

__all__ = [
    "ClipboardError",
    "Content",
    "DecodeError",
    "InputFormat",
    "TablifyError",
    "decode",
    "format_table",
]

"""Decode-render-copy entry point used by the CLI and by library callers."""

import logging
from typing import IO

from tablify.content import Content
from tablify.decoders import InputFormat, decode
from tablify.presentation import copy_to_clipboard, render_table

logger = logging.getLogger(__name__)


def format_table(
    decoder: InputFormat | str,
    input_stream: IO,
    output_stream: IO[str],
    copy: bool = False,
    tablefmt: str | None = None,
) -> Content:
    """Decode input_stream, write it as a table to output_stream, optionally copy TSV.

    A DecodeError propagates before anything is written.  A ClipboardError
    propagates after the table has been rendered.  Returns the decoded Content.
    """
    content = decode(decoder, input_stream)
    logger.info("Decoded %s input: %d columns, %d rows", InputFormat(decoder).value, content.width, content.row_count)

    render_table(content, output_stream, tablefmt)
    if copy:
        copy_to_clipboard(content, output_stream)
    return content

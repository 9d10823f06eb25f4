"""Table rendering, TSV serialisation and the clipboard copy.

These are the output side of the pipeline: they read a Content value and never
modify it.
"""

import logging
from typing import IO

import pyperclip
from tabulate import tabulate

from tablify import config
from tablify.content import Content
from tablify.errors import ClipboardError

logger = logging.getLogger(__name__)


# ─── Table Rendering ─────────────────────────────────────────────────────────


def _padded(content: Content) -> tuple[list[str], list[list[str]]]:
    """Pad header and rows with empty cells to a common width, for display only."""
    width = max([len(content.header)] + [len(row) for row in content.rows])
    header = content.header + [""] * (width - len(content.header))
    rows = [row + [""] * (width - len(row)) for row in content.rows]
    return header, rows


def render_table(content: Content, output: IO[str], tablefmt: str | None = None) -> None:
    """Write a row-count banner and the boxed table to the output stream.

    Cells are written verbatim; tabulate's number parsing is disabled so that
    "007" stays "007".  Rows of a different width than the header (possible
    with CSV input) are padded with blanks on screen.
    """
    header, rows = _padded(content)
    if any(len(row) != len(content.header) for row in content.rows):
        logger.warning("Some rows do not have %d cells; padding them for display", len(content.header))

    table = tabulate(rows, headers=header, tablefmt=tablefmt or config.TABLE_FORMAT, disable_numparse=True)
    output.write(f"\nTABLE RESULT (Rows: {content.row_count})\n")
    output.write(table + "\n")


# ─── TSV & Clipboard ─────────────────────────────────────────────────────────


def to_tsv(content: Content) -> str:
    """Serialise Content as tab-separated text.

    Every cell is followed by a tab and every line (header first, then each row)
    ends with a newline.  Cells containing tabs or newlines are not escaped.
    """
    lines = ["".join(cell + "\t" for cell in content.header) + "\n"]
    for row in content.rows:
        lines.append("".join(cell + "\t" for cell in row) + "\n")
    return "".join(lines)


def copy_to_clipboard(content: Content, output: IO[str]) -> None:
    """Put the TSV rendering of content on the system clipboard.

    Raises ClipboardError if no clipboard mechanism is available or the write fails.
    """
    output.write("\nTSV RESULT\n")
    tsv = to_tsv(content)
    try:
        pyperclip.copy(tsv)
    except pyperclip.PyperclipException as exc:
        raise ClipboardError(str(exc)) from exc

    logger.info("Copied %d characters of TSV to the clipboard", len(tsv))
    output.write("TSV copied to the clipboard. You can now paste it into a spreadsheet.\n")

"""Stream helpers shared by the decoders.

Input is fully materialised: the whole stream is read once and handed to the
parser as a single string.  The stream itself is left open for the caller.
"""

from typing import IO

from tablify.errors import DecodeError


def read_text(stream: IO) -> str:
    """Read a byte or text stream to the end and return it as str.

    Bytes are decoded as UTF-8; a leading byte-order mark is dropped.
    """
    data = stream.read()
    if isinstance(data, str):
        return data.removeprefix("\ufeff")
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise DecodeError(str(exc)) from exc

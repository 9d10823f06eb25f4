"""Exception types raised by tablify."""


class TablifyError(Exception):
    """Base class for every error raised by this package."""


class DecodeError(TablifyError):
    """Input could not be parsed into Content.

    The underlying csv/json/unicode error is always chained as ``__cause__``.
    """


class ClipboardError(TablifyError):
    """Writing the TSV rendering to the system clipboard failed."""

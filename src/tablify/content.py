"""Pydantic model for the intermediate tabular representation.

Both decoders produce a Content value, and presentation consumes it.  The
model is frozen so a decoded value cannot be mutated after construction.
"""

from pydantic import BaseModel, ConfigDict


class Content(BaseModel):
    """An ordered header row plus ordered rows of string cells.

    Rows are expected to have exactly len(header) cells.  The JSON decoder
    guarantees this; rows decoded from CSV are stored as the reader produced
    them, so a ragged row is representable and is passed on uninterpreted.
    """

    model_config = ConfigDict(frozen=True)

    header: list[str]
    rows: list[list[str]]

    @property
    def width(self) -> int:
        """Number of header columns."""
        return len(self.header)

    @property
    def row_count(self) -> int:
        return len(self.rows)

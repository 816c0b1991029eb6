"""Pydantic models for the canonical table representation.

``TableModel`` is the single in-memory form every input format is parsed into
and every output format is generated from.  ``Snapshot`` is its immutable
counterpart stored by the undo/redo history, and ``ColumnStats`` is the
result type of the column analyzer.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from tablekit.classifiers import sanitize_cell


class Alignment(str, Enum):
    """Per-column text justification."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class OutputFormat(str, Enum):
    """Serialization targets supported by the generators."""

    MARKDOWN = "markdown"
    JSON = "json"
    HTML = "html"


def fit_row(cells: list[str], width: int) -> list[str]:
    """Pad with empty strings or truncate on the right so the row has exactly *width* cells."""
    if len(cells) >= width:
        return list(cells[:width])
    return list(cells) + [""] * (width - len(cells))


class Snapshot(BaseModel):
    """Immutable copy of a table taken by the history manager."""

    model_config = ConfigDict(frozen=True)

    headers: tuple[str, ...] = ()
    rows: tuple[tuple[str, ...], ...] = ()
    alignments: tuple[Alignment, ...] = ()


class TableModel(BaseModel):
    """Canonical table: column headers, per-column alignments and data rows.

    Construction sanitizes every cell and guarantees the shape invariants:
    one alignment per header, and every row exactly ``len(headers)`` cells wide
    (short rows are padded, long rows truncated).  A model without headers is
    the explicit empty state.
    """

    headers: list[str] = Field(default_factory=list)
    alignments: list[Alignment] = Field(default_factory=list)
    rows: list[list[str]] = Field(default_factory=list)

    @field_validator("headers", mode="after")
    @classmethod
    def sanitize_headers(cls, headers: list[str]) -> list[str]:
        return [sanitize_cell(h) for h in headers]

    @field_validator("rows", mode="after")
    @classmethod
    def sanitize_rows(cls, rows: list[list[str]]) -> list[list[str]]:
        return [[sanitize_cell(c) for c in row] for row in rows]

    @model_validator(mode="after")
    def validate_shape(self) -> "TableModel":
        """Ensure alignments match headers and every row is header-width."""
        if len(self.alignments) != len(self.headers):
            raise ValueError(f"Got {len(self.alignments)} alignments for {len(self.headers)} headers")
        if not self.headers and self.rows:
            raise ValueError(f"Got {len(self.rows)} rows but no headers")
        self.normalize_rows()
        return self

    # ── Shape ────────────────────────────────────────────────────────────

    @property
    def column_count(self) -> int:
        return len(self.headers)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def is_empty(self) -> bool:
        return not self.headers and not self.rows

    def is_valid(self) -> bool:
        """True when the model has columns and one alignment per column."""
        return len(self.headers) > 0 and len(self.alignments) == len(self.headers)

    def normalize_rows(self) -> None:
        """Pad or truncate every row in place to the current header count."""
        width = len(self.headers)
        self.rows = [fit_row(row, width) for row in self.rows]

    # ── Snapshots ────────────────────────────────────────────────────────

    def snapshot(self) -> Snapshot:
        return Snapshot(
            headers=tuple(self.headers),
            rows=tuple(tuple(row) for row in self.rows),
            alignments=tuple(self.alignments),
        )

    def restore(self, snapshot: Snapshot) -> None:
        """Replace this model's contents with fresh lists copied out of *snapshot*."""
        self.headers = list(snapshot.headers)
        self.rows = [list(row) for row in snapshot.rows]
        self.alignments = list(snapshot.alignments)

    @classmethod
    def from_snapshot(cls, snapshot: Snapshot) -> "TableModel":
        model = cls()
        model.restore(snapshot)
        return model


class ColumnStats(BaseModel):
    """Summary statistics for a single column."""

    column_name: str
    total_cells: int
    unique_values: int
    empty_cells: int
    most_common: str

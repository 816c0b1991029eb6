"""Editing session: one live TableModel, its undo/redo history and an output format.

Every mutation validates its arguments first, so a rejected call changes
neither the model nor the history.  A successful mutation records the state
before the change (unless history already holds it) and the state after it,
which makes each edit individually undoable.  Hosting applications that edit
several tables create one ``TableEditor`` per table.
"""

import logging
import unicodedata

from tablekit.analysis import analyze, get_column_stats
from tablekit.classifiers import sanitize_cell
from tablekit.config import DEFAULT_OUTPUT_FORMAT
from tablekit.errors import (
    CannotRemoveLastColumnError,
    InsufficientRowsError,
    InvalidIndexError,
    NoColumnsDefinedError,
    NoRowsToRemoveError,
)
from tablekit.history import HistoryManager
from tablekit.patterns import DIGIT_RUN_RE, NEW_COLUMN_HEADER
from tablekit.pipeline import parse, serialize
from tablekit.schema import Alignment, ColumnStats, OutputFormat, Snapshot, TableModel

logger = logging.getLogger(__name__)


def _move(items: list, src: int, dst: int) -> None:
    items.insert(dst, items.pop(src))


def _check_index(index: int, size: int, what: str) -> None:
    if not 0 <= index < size:
        raise InvalidIndexError(f"Invalid {what} index {index} (have {size})")


def natural_sort_key(value: str) -> tuple:
    """Accent-folded, case-folded, numeric-aware key ('Item 2' < 'Item 10', 'Émile' ~ 'emile'); blank values sort last."""
    decomposed = unicodedata.normalize("NFKD", value.strip())
    text = "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()
    if not text:
        return (1,)
    parts = DIGIT_RUN_RE.split(text)
    return (0, [int(part) if i % 2 else part for i, part in enumerate(parts)])


class TableEditor:
    """Structural and cell-level edits on a live table, with undo/redo."""

    def __init__(
        self,
        model: TableModel | None = None,
        history: HistoryManager | None = None,
        output_format: OutputFormat | str = DEFAULT_OUTPUT_FORMAT,
    ):
        self.model = model if model is not None else TableModel()
        self.history = history if history is not None else HistoryManager()
        self.output_format = OutputFormat(output_format)

    # ── History plumbing ─────────────────────────────────────────────────

    def _begin(self) -> None:
        """Record the pre-mutation state unless the history cursor already points at it."""
        if self.history.current != self.model.snapshot():
            self.history.save_to_history(self.model)

    def _commit(self, action: str) -> None:
        self.model.normalize_rows()
        self.history.save_to_history(self.model)
        logger.debug("%s -> %d columns, %d rows", action, self.model.column_count, self.model.row_count)

    def undo(self) -> bool:
        return self.history.undo(self.model)

    def redo(self) -> bool:
        return self.history.redo(self.model)

    # ── Whole-table operations ───────────────────────────────────────────

    def is_empty(self) -> bool:
        return self.model.is_empty()

    def is_valid(self) -> bool:
        return self.model.is_valid()

    def load(self, model: TableModel) -> None:
        """Replace the live table with a copy of *model* (undoable)."""
        self._begin()
        self.model.restore(model.snapshot())
        self._commit("load")

    def load_text(self, text: str) -> None:
        """Parse *text* and load the result.  A parse failure leaves the session untouched."""
        self.load(parse(text))

    def clear(self) -> None:
        """Reset to the empty table and forget all history."""
        self.model.restore(Snapshot())
        self.history.clear()
        logger.debug("Cleared table and history")

    # ── Columns ──────────────────────────────────────────────────────────

    def add_column(self) -> None:
        self._begin()
        self.model.headers.append(NEW_COLUMN_HEADER)
        self.model.alignments.append(Alignment.LEFT)
        for row in self.model.rows:
            row.append("")
        self._commit("add_column")

    def remove_column(self, index: int | None = None) -> None:
        """Remove the column at *index* (default: the last one).  A table keeps at least one column."""
        count = self.model.column_count
        if count <= 1:
            raise CannotRemoveLastColumnError("Cannot remove the last column")
        if index is None:
            index = count - 1
        _check_index(index, count, "column")

        self._begin()
        del self.model.headers[index]
        del self.model.alignments[index]
        for row in self.model.rows:
            del row[index]
        self._commit("remove_column")

    def reorder_columns(self, src: int, dst: int) -> None:
        """Move column *src* to position *dst* in headers, alignments and every row."""
        count = self.model.column_count
        _check_index(src, count, "column")
        _check_index(dst, count, "column")
        if src == dst:
            return

        self._begin()
        _move(self.model.headers, src, dst)
        _move(self.model.alignments, src, dst)
        for row in self.model.rows:
            _move(row, src, dst)
        self._commit("reorder_columns")

    def set_header(self, index: int, value: str) -> None:
        _check_index(index, self.model.column_count, "column")
        self._begin()
        self.model.headers[index] = sanitize_cell(value)
        self._commit("set_header")

    def set_alignment(self, index: int, alignment: Alignment | str) -> None:
        _check_index(index, self.model.column_count, "column")
        alignment = Alignment(alignment)
        self._begin()
        self.model.alignments[index] = alignment
        self._commit("set_alignment")

    # ── Rows ─────────────────────────────────────────────────────────────

    def add_row(self) -> None:
        if self.model.column_count == 0:
            raise NoColumnsDefinedError("Please add headers first")
        self._begin()
        self.model.rows.append([""] * self.model.column_count)
        self._commit("add_row")

    def remove_row(self, index: int | None = None) -> None:
        """Remove the row at *index* (default: the last one)."""
        count = self.model.row_count
        if count == 0:
            raise NoRowsToRemoveError("No rows to remove")
        if index is None:
            index = count - 1
        _check_index(index, count, "row")

        self._begin()
        del self.model.rows[index]
        self._commit("remove_row")

    def reorder_rows(self, src: int, dst: int) -> None:
        count = self.model.row_count
        _check_index(src, count, "row")
        _check_index(dst, count, "row")
        if src == dst:
            return

        self._begin()
        _move(self.model.rows, src, dst)
        self._commit("reorder_rows")

    def sort_rows(self) -> None:
        """Stable-sort rows by their first cell (see natural_sort_key)."""
        if self.model.row_count < 2:
            raise InsufficientRowsError("Need at least 2 rows to sort")
        self._begin()
        self.model.rows.sort(key=lambda row: natural_sort_key(row[0]))
        self._commit("sort_rows")

    def duplicate_row(self, index: int) -> None:
        _check_index(index, self.model.row_count, "row")
        self._begin()
        self.model.rows.insert(index + 1, list(self.model.rows[index]))
        self._commit("duplicate_row")

    def insert_row_after(self, index: int) -> None:
        _check_index(index, self.model.row_count, "row")
        self._begin()
        self.model.rows.insert(index + 1, [""] * self.model.column_count)
        self._commit("insert_row_after")

    def set_cell(self, row: int, col: int, value: str) -> None:
        _check_index(row, self.model.row_count, "row")
        _check_index(col, self.model.column_count, "column")
        self._begin()
        self.model.rows[row][col] = sanitize_cell(value)
        self._commit("set_cell")

    # ── Output ───────────────────────────────────────────────────────────

    def set_format(self, fmt: OutputFormat | str) -> None:
        """Select the output format; raises ValueError for an unknown name."""
        self.output_format = OutputFormat(fmt)

    def render(self) -> str:
        return serialize(self.model, self.output_format)

    def analyze(self) -> str:
        return analyze(self.model)

    def column_stats(self, index: int) -> ColumnStats | None:
        return get_column_stats(self.model, index)

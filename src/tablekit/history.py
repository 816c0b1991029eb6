"""Bounded, linear undo/redo history of table snapshots.

The manager keeps a list of immutable ``Snapshot`` objects and a cursor
pointing at the current entry (-1 while empty).  Saving after an undo
discards the redo branch; once the list exceeds ``limit`` entries the oldest
one is dropped.  Restores always copy out of the snapshot, so the live model
never aliases history storage.
"""

import logging

from tablekit.config import HISTORY_LIMIT
from tablekit.schema import Snapshot, TableModel

logger = logging.getLogger(__name__)


class HistoryManager:
    """Snapshot-based undo/redo for a single TableModel."""

    def __init__(self, limit: int = HISTORY_LIMIT):
        if limit < 1:
            raise ValueError(f"History limit must be at least 1, got {limit}")
        self.limit = limit
        self.entries: list[Snapshot] = []
        self.index = -1

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def current(self) -> Snapshot | None:
        return self.entries[self.index] if self.index >= 0 else None

    def save_to_history(self, model: TableModel) -> None:
        """Push a snapshot of *model*, dropping any redo branch and the oldest entry past the limit."""
        del self.entries[self.index + 1 :]
        self.entries.append(model.snapshot())
        self.index += 1
        if len(self.entries) > self.limit:
            self.entries.pop(0)
            self.index -= 1
        logger.debug("History saved: %d entries, cursor at %d", len(self.entries), self.index)

    def can_undo(self) -> bool:
        return self.index > 0

    def can_redo(self) -> bool:
        return self.index < len(self.entries) - 1

    def undo(self, model: TableModel) -> bool:
        """Step the cursor back and restore *model* from that entry.  Returns False if nothing to undo."""
        if not self.can_undo():
            return False
        self.index -= 1
        model.restore(self.entries[self.index])
        logger.debug("Undo: cursor at %d", self.index)
        return True

    def redo(self, model: TableModel) -> bool:
        """Step the cursor forward and restore *model* from that entry.  Returns False if nothing to redo."""
        if not self.can_redo():
            return False
        self.index += 1
        model.restore(self.entries[self.index])
        logger.debug("Redo: cursor at %d", self.index)
        return True

    def clear(self) -> None:
        self.entries = []
        self.index = -1

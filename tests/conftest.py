"""Shared test configuration and fixtures."""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from tablekit.editor import TableEditor
from tablekit.history import HistoryManager
from tablekit.schema import Alignment, TableModel

# Load .env from project root for all tests
root = Path(__file__).parent.parent.resolve()
load_dotenv(root / ".env")


def make_model(headers: list[str], rows: list[list[str]], alignments: list[Alignment] | None = None) -> TableModel:
    """Build a TableModel, defaulting every column to LEFT alignment."""
    if alignments is None:
        alignments = [Alignment.LEFT] * len(headers)
    return TableModel(headers=headers, alignments=alignments, rows=rows)


@pytest.fixture
def tasks_model() -> TableModel:
    return make_model(["Name", "Done", "Notes"], [["Task1", "yes", "first"], ["Task2", "no", ""], ["Task3", "1", "x"]])


@pytest.fixture
def editor(tasks_model: TableModel) -> TableEditor:
    """A session with the tasks table loaded (so history already holds one snapshot)."""
    session = TableEditor(history=HistoryManager(limit=50), output_format="markdown")
    session.load(tasks_model)
    return session

"""Convert tables between Markdown, HTML and row-keyed JSON, with an editable model.

Submodules:
  patterns     -- compiled regex patterns and constant tuples
  classifiers  -- checkbox-like value normalization and cell sanitization
  schema       -- TableModel / Snapshot / ColumnStats Pydantic models and enums
  errors       -- exception hierarchy for parse and edit failures
  detection    -- Markdown / HTML format sniffing
  parsing      -- Markdown and HTML parsing strategies
  history      -- bounded snapshot-based undo/redo
  editor       -- editing session: structural mutations on a live model
  formatting   -- Markdown, JSON and HTML generators
  analysis     -- read-only aggregate statistics
  pipeline     -- parse() / serialize() / convert() entry points
  config       -- environment-driven settings
  cli          -- command-line front end
"""

from tablekit.editor import TableEditor
from tablekit.pipeline import convert, parse, serialize
from tablekit.schema import Alignment, OutputFormat, TableModel

__all__ = ["Alignment", "OutputFormat", "TableEditor", "TableModel", "convert", "parse", "serialize"]

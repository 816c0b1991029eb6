"""Format sniffing for raw table input.

Decides whether a block of text holds an HTML table, a Markdown pipe table,
or neither.  HTML wins when both could match, since an HTML table may well
contain pipe characters and dashed lines inside its cells.
"""

import logging

from tablekit.errors import EmptyInputError, FormatNotRecognizedError
from tablekit.patterns import HTML_TABLE_RE, SEPARATOR_ROW_RE
from tablekit.schema import OutputFormat

logger = logging.getLogger(__name__)


def non_blank_lines(text: str) -> list[str]:
    """Split *text* into stripped lines, dropping blank ones."""
    return [line.strip() for line in text.split("\n") if line.strip()]


def is_html_table(text: str) -> bool:
    """Return True if the text contains a <table>...</table> span (case-insensitive)."""
    return bool(HTML_TABLE_RE.search(text))


def is_separator_row(line: str) -> bool:
    """Return True for a Markdown separator row such as '|:---|---:|'."""
    return bool(SEPARATOR_ROW_RE.search(line))


def is_markdown_table(text: str) -> bool:
    """Heuristic: some line has a pipe AND some line looks like a separator row.

    Pipes alone are not enough -- a sentence with a literal '|' is prose.
    """
    lines = non_blank_lines(text)
    has_pipes = any("|" in line for line in lines)
    has_separator = any(is_separator_row(line) for line in lines)
    return has_pipes and has_separator


def detect_format(text: str) -> OutputFormat:
    """Return OutputFormat.HTML or OutputFormat.MARKDOWN for parseable input.

    Raises EmptyInputError for blank input and FormatNotRecognizedError when
    the text looks like neither kind of table.
    """
    raw = (text or "").strip()
    if not raw:
        raise EmptyInputError("Please enter a markdown or HTML table")

    if is_html_table(raw):
        logger.debug("Detected HTML table (%d chars)", len(raw))
        return OutputFormat.HTML
    if is_markdown_table(raw):
        logger.debug("Detected Markdown table (%d lines)", len(non_blank_lines(raw)))
        return OutputFormat.MARKDOWN

    raise FormatNotRecognizedError("Input does not appear to be a valid HTML or Markdown table")

"""Markdown and HTML parsing strategies.

Both strategies produce the same canonical ``TableModel`` and share the same
row-shape rules: data rows are padded or truncated to the header count (this
never fails), every cell is trimmed and HTML-escaped before it enters the
model, and checkbox-like data cells outside the first (row-key) column are
normalized to ✅ / ❌ (one-letter y / n cells are left as written).  HTML cell
text has its whitespace collapsed, so a cell never spans lines.
"""

import logging

from bs4 import BeautifulSoup, Tag

from tablekit.classifiers import normalize_row, sanitize_cell
from tablekit.detection import non_blank_lines
from tablekit.errors import (
    ColumnCountMismatchError,
    HtmlParseError,
    MalformedTableError,
    NoHeaderRowError,
    NoHeadersFoundError,
    NoTableFoundError,
)
from tablekit.patterns import CENTER_CLASSES, RIGHT_CLASSES, TEXT_ALIGN_STYLE_RE
from tablekit.schema import Alignment, TableModel, fit_row

logger = logging.getLogger(__name__)

_ALIGN_KEYWORDS = {"center": Alignment.CENTER, "right": Alignment.RIGHT}


def clean_row(cells: list) -> list[str]:
    """Trim and escape every cell, then checkbox-normalize all but the row key."""
    return normalize_row([sanitize_cell(cell) for cell in cells])


# ─── Markdown ────────────────────────────────────────────────────────────────


def split_row(line: str) -> list[str]:
    """Split a pipe-delimited line into trimmed cells.

    Outer pipes do not produce cells ('| a | b |' -> ['a', 'b']), but an
    interior empty cell is kept ('| a | | b |' -> ['a', '', 'b']).
    Backslash-escaped pipes are not supported; cell text carries pipes as ``&#124;``.
    """
    parts = [part.strip() for part in line.split("|")]
    if parts and parts[0] == "":
        parts.pop(0)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def alignment_from_separator(cell: str) -> Alignment:
    """':---:' -> CENTER, '---:' -> RIGHT, anything else -> LEFT."""
    token = cell.strip()
    if token.startswith(":") and token.endswith(":"):
        return Alignment.CENTER
    if token.endswith(":"):
        return Alignment.RIGHT
    return Alignment.LEFT


def parse_markdown(text: str) -> TableModel:
    """Parse a Markdown pipe table (header line, separator line, data lines)."""
    lines = non_blank_lines(text)
    if len(lines) < 2:
        raise MalformedTableError("Markdown table must have at least a header and separator row")

    headers = split_row(lines[0])
    separator = split_row(lines[1])
    if len(headers) != len(separator):
        raise ColumnCountMismatchError(
            f"Header and separator row must have the same number of columns ({len(headers)} != {len(separator)})"
        )
    if not headers:
        raise MalformedTableError("Markdown table header row has no cells")

    width = len(headers)
    rows = [fit_row(clean_row(split_row(line)), width) for line in lines[2:]]

    logger.info("Parsed Markdown table: %d columns, %d rows", width, len(rows))
    return TableModel(
        headers=[sanitize_cell(h) for h in headers],
        alignments=[alignment_from_separator(cell) for cell in separator],
        rows=rows,
    )


# ─── HTML ────────────────────────────────────────────────────────────────────


def _find_header_row(table: Tag, all_rows: list[Tag]) -> Tag | None:
    """Prefer thead > tr, else the first row holding a <th>, else the first row."""
    thead = table.find("thead")
    if thead is not None:
        head_row = thead.find("tr")
        if head_row is not None:
            return head_row
    for tr in all_rows:
        if tr.find("th") is not None:
            return tr
    return all_rows[0] if all_rows else None


def cell_alignment(cell: Tag) -> Alignment:
    """Infer alignment from class name, then inline text-align style, then the align attribute."""
    classes = cell.get("class") or []
    if any(name in classes for name in CENTER_CLASSES):
        return Alignment.CENTER
    if any(name in classes for name in RIGHT_CLASSES):
        return Alignment.RIGHT

    match = TEXT_ALIGN_STYLE_RE.search(cell.get("style") or "")
    if match and match.group(1).lower() in _ALIGN_KEYWORDS:
        return _ALIGN_KEYWORDS[match.group(1).lower()]

    return _ALIGN_KEYWORDS.get((cell.get("align") or "").strip().lower(), Alignment.LEFT)


def cell_text(cell: Tag) -> str:
    """Text content of a cell with runs of whitespace (including newlines) collapsed to one space."""
    return " ".join(cell.get_text().split())


def _colspan(cell: Tag) -> int:
    try:
        span = int(cell.get("colspan") or 1)
    except ValueError:
        span = 1
    return max(span, 1)


def expand_row(tr: Tag, width: int) -> list[str]:
    """Read a <tr> into cells, flattening colspan=N into the text plus N-1 empty cells."""
    cells: list[str] = []
    for cell in tr.find_all(["td", "th"], recursive=False):
        cells.append(cell_text(cell))
        # Anything past the header width is truncated anyway
        cells.extend([""] * (min(_colspan(cell), width) - 1))
    return fit_row(clean_row(cells), width)


def _parse_html(text: str) -> TableModel:
    soup = BeautifulSoup(text, "html.parser")
    table = soup.find("table")
    if table is None:
        raise NoTableFoundError("No table element found in HTML input")

    all_rows = table.find_all("tr")
    head_row = _find_header_row(table, all_rows)
    if head_row is None:
        raise NoHeaderRowError("No header row found in HTML table")

    header_cells = head_row.find_all(["th", "td"], recursive=False)
    if not header_cells:
        raise NoHeadersFoundError("No headers found in HTML table")
    headers = [sanitize_cell(cell_text(cell)) for cell in header_cells]
    alignments = [cell_alignment(cell) for cell in header_cells]

    # Data rows: the tbody if there is one, else every row after the header row
    tbody = table.find("tbody")
    if tbody is not None:
        body_rows = [tr for tr in tbody.find_all("tr") if tr is not head_row]
    else:
        head_idx = next(i for i, tr in enumerate(all_rows) if tr is head_row)
        body_rows = all_rows[head_idx + 1 :]

    width = len(headers)
    rows = [expand_row(tr, width) for tr in body_rows]

    logger.info("Parsed HTML table: %d columns, %d rows", width, len(rows))
    return TableModel(headers=headers, alignments=alignments, rows=rows)


def parse_html(text: str) -> TableModel:
    """Parse the first <table> in an HTML fragment.

    Every failure surfaces as HtmlParseError (or one of its subclasses); an
    unexpected error during traversal is wrapped with the inner message.
    """
    try:
        return _parse_html(text)
    except HtmlParseError:
        raise
    except Exception as exc:  # pylint: disable=broad-exception-caught
        logger.error("HTML table traversal failed: %s", exc)
        raise HtmlParseError(str(exc), cause=exc) from exc

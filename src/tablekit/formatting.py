"""Markdown, JSON and HTML generators for the canonical table model.

Each generator renders a valid model deterministically and returns a defined
empty output ("" or "{}") for an empty or invalid model instead of raising.
``GENERATORS`` maps every ``OutputFormat`` to its generator.
"""

import json
from collections.abc import Callable

from tablekit.classifiers import escape_html, normalize_check_value, normalize_row
from tablekit.config import JSON_INDENT
from tablekit.schema import Alignment, OutputFormat, TableModel

# Separator token written for each alignment
MD_ALIGN = {
    Alignment.CENTER: ":---:",
    Alignment.RIGHT: "---:",
    Alignment.LEFT: ":---",
}


# ─── Markdown ────────────────────────────────────────────────────────────────


def _md_line(cells: list[str]) -> str:
    return "| " + " | ".join(cells) + " |"


def generate_markdown(model: TableModel) -> str:
    """Render a pipe table; checkbox-like cells after the key column are re-normalized to ✅ / ❌."""
    if not model.is_valid():
        return ""

    lines = [
        _md_line(model.headers),
        _md_line([MD_ALIGN[a] for a in model.alignments]),
    ]
    for row in model.rows:
        lines.append(_md_line(normalize_row(row)))
    return "\n".join(lines)


# ─── JSON ────────────────────────────────────────────────────────────────────


def table_to_dict(model: TableModel) -> dict[str, dict[str, str]]:
    """Key each row by its first cell, mapping the remaining headers to normalized values.

    Rows with a blank first cell are skipped; duplicate keys keep the last row.
    """
    result: dict[str, dict[str, str]] = {}
    if not model.is_valid():
        return result
    for row in model.rows:
        key = row[0].strip()
        if not key:
            continue
        result[key] = {model.headers[i]: normalize_check_value(row[i]) for i in range(1, len(model.headers))}
    return result


def generate_json(model: TableModel, indent: int = JSON_INDENT) -> str:
    """Render the row-keyed object as JSON text ("{}" for an empty model)."""
    if not model.is_valid():
        return "{}"
    return json.dumps(table_to_dict(model), indent=indent or None, ensure_ascii=False)


# ─── HTML ────────────────────────────────────────────────────────────────────


def _align_class(alignment: Alignment) -> str:
    return "" if alignment == Alignment.LEFT else f' class="text-{alignment.value}"'


def generate_html(model: TableModel) -> str:
    """Render <table><thead>...</thead><tbody>...</tbody></table> with class-based alignment."""
    if not model.is_valid():
        return ""

    # Model text is escaped at parse time; escape_html is idempotent, so this only
    # guards cells written into the lists directly.
    head = "".join(
        f"<th{_align_class(model.alignments[i])}>{escape_html(h)}</th>" for i, h in enumerate(model.headers)
    )
    body = "".join(
        "<tr>"
        + "".join(f"<td{_align_class(model.alignments[i])}>{escape_html(cell)}</td>" for i, cell in enumerate(row))
        + "</tr>"
        for row in model.rows
    )
    return f"<table><thead><tr>{head}</tr></thead><tbody>{body}</tbody></table>"


GENERATORS: dict[OutputFormat, Callable[[TableModel], str]] = {
    OutputFormat.MARKDOWN: generate_markdown,
    OutputFormat.JSON: generate_json,
    OutputFormat.HTML: generate_html,
}

if set(GENERATORS) != set(OutputFormat):
    raise RuntimeError(f"Missing generators for {set(OutputFormat) - set(GENERATORS)}")

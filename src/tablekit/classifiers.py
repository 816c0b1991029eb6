"""Cell value classification and sanitization helpers.

Each predicate takes a cell value and returns True/False to classify it as a
checked (yes-like) or unchecked (no-like) token.  ``normalize_check_value``
rewrites such tokens to the canonical ✅ / ❌ markers and leaves every other
value untouched.
"""

from tablekit.patterns import (
    BARE_AMPERSAND_RE,
    CHECKED_MARK,
    CHECKED_SYMBOLS,
    CHECKED_TOKENS,
    LETTER_TOKENS,
    UNCHECKED_MARK,
    UNCHECKED_SYMBOLS,
    UNCHECKED_TOKENS,
)


def _as_text(value: object) -> str:
    """Stringify *value*, mapping None to the empty string."""
    return "" if value is None else str(value)


def is_checked(value: object) -> bool:
    """Return True if the value reads as yes/true/1/y or a check-mark symbol."""
    stripped = _as_text(value).strip()
    return stripped.lower() in CHECKED_TOKENS or stripped in CHECKED_SYMBOLS


def is_unchecked(value: object) -> bool:
    """Return True if the value reads as no/false/0/n or a cross-mark symbol."""
    stripped = _as_text(value).strip()
    return stripped.lower() in UNCHECKED_TOKENS or stripped in UNCHECKED_SYMBOLS


def normalize_check_value(value: object) -> str:
    """Map checkbox-like values to ✅ / ❌; return anything else unchanged (as text)."""
    if is_checked(value):
        return CHECKED_MARK
    if is_unchecked(value):
        return UNCHECKED_MARK
    return _as_text(value)


def to_cell(value: object) -> str:
    """Coerce a raw value into trimmed cell text."""
    return _as_text(value).strip()


def escape_html(value: object) -> str:
    """Escape markup characters in cell text.

    Pipes become ``&#124;`` so a cell can never split a Markdown row.

    Idempotent: existing character references such as ``&amp;`` or ``&#39;``
    are kept as-is, so escaping already-escaped text is a no-op.  The flip
    side is that literal text typed as ``&lt;`` cannot be told apart from an
    escaped ``<`` and renders as ``<`` in HTML output.
    """
    text = BARE_AMPERSAND_RE.sub("&amp;", _as_text(value))
    text = text.replace("<", "&lt;").replace(">", "&gt;").replace('"', "&quot;").replace("'", "&#39;")
    return text.replace("|", "&#124;")


def sanitize_cell(value: object) -> str:
    """Trim and escape a cell before it enters the table model."""
    return escape_html(to_cell(value))


def normalize_table_value(value: object) -> str:
    """Like normalize_check_value, but one-letter y / n cells are kept as written."""
    if _as_text(value).strip().lower() in LETTER_TOKENS:
        return _as_text(value)
    return normalize_check_value(value)


def normalize_row(cells: list[str]) -> list[str]:
    """Normalize checkbox-like values in every cell except the first (the row key)."""
    return cells[:1] + [normalize_table_value(cell) for cell in cells[1:]]

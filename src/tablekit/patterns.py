"""Compiled regex patterns and constant tuples for table detection and parsing.

Used by classifiers.py, detection.py and parsing.py.
"""

import re

# ─── Format Detection Patterns ────────────────────────────────────────────────

# A complete <table ...> ... </table> span anywhere in the input
HTML_TABLE_RE = re.compile(r"<table\b[\s\S]*?>[\s\S]*?</table>", re.IGNORECASE)

# A Markdown separator cell such as "---", ":---", "---:" or ":---:".
# At least three hyphens are required so prose like "a - b | c" is not a table.
SEPARATOR_ROW_RE = re.compile(r"(^|\|)\s*:?-{3,}:?\s*(\||$)")


# ─── HTML Alignment Patterns ──────────────────────────────────────────────────

# Inline style declaration, e.g. style="color: red; text-align: center"
TEXT_ALIGN_STYLE_RE = re.compile(r"text-align\s*:\s*([a-z]+)", re.IGNORECASE)

# Class names recognised as alignment hints, checked in order
CENTER_CLASSES = ("text-center", "center")
RIGHT_CLASSES = ("text-right", "right")


# ─── Sanitization Patterns ────────────────────────────────────────────────────

# Ampersand that does not already start a character reference (&amp; &#39; &#x27;)
BARE_AMPERSAND_RE = re.compile(r"&(?!(?:[a-zA-Z][a-zA-Z0-9]*|#\d+|#[xX][0-9a-fA-F]+);)")


# ─── Sorting Patterns ─────────────────────────────────────────────────────────

# Splits "Item 10b" into ["item ", "10", "b"] for numeric-aware comparison
DIGIT_RUN_RE = re.compile(r"(\d+)")


# ─── Checkbox-Like Values ─────────────────────────────────────────────────────

# Compared after strip() + lower()
CHECKED_TOKENS = ("yes", "true", "1", "y")
UNCHECKED_TOKENS = ("no", "false", "0", "n")

# Compared after strip() only
CHECKED_SYMBOLS = ("✅", "✔️", "✔", "✓")
UNCHECKED_SYMBOLS = ("❌", "✖️", "✖", "✗", "×")

# One-letter tokens: classified as checked/unchecked, never rewritten in table text
LETTER_TOKENS = ("y", "n")

# Canonical markers written back by every generator
CHECKED_MARK = "✅"
UNCHECKED_MARK = "❌"


# ─── Model Defaults ───────────────────────────────────────────────────────────

NEW_COLUMN_HEADER = "New Column"

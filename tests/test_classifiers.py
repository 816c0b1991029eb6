"""Unit tests for checkbox-like value normalization and cell sanitization."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest

from tablekit.classifiers import (
    escape_html,
    is_checked,
    is_unchecked,
    normalize_check_value,
    normalize_row,
    normalize_table_value,
    sanitize_cell,
    to_cell,
)
from tablekit.patterns import CHECKED_SYMBOLS, CHECKED_TOKENS, UNCHECKED_SYMBOLS, UNCHECKED_TOKENS

ALL_VALUES = CHECKED_TOKENS + UNCHECKED_TOKENS + CHECKED_SYMBOLS + UNCHECKED_SYMBOLS

# ===========================================================================
# is_checked / is_unchecked
# ===========================================================================


class TestIsChecked:

    @pytest.mark.parametrize("value", ["yes", "YES", " Yes ", "true", "TRUE", "1", "y", "Y", "✅", "✔️", "✔", "✓"])
    def test_truthy_values(self, value):
        assert is_checked(value) is True

    @pytest.mark.parametrize("value", ["", "yess", "ok", "2", "no", "❌", "checked"])
    def test_other_values(self, value):
        assert is_checked(value) is False

    def test_none_is_not_checked(self):
        assert is_checked(None) is False

    def test_integer_one_is_coerced(self):
        assert is_checked(1) is True


class TestIsUnchecked:

    @pytest.mark.parametrize("value", ["no", "NO", " No ", "false", "False", "0", "n", "N", "❌", "✖️", "✖", "✗", "×"])
    def test_falsy_values(self, value):
        assert is_unchecked(value) is True

    @pytest.mark.parametrize("value", ["", "none", "nope", "yes", "✅"])
    def test_other_values(self, value):
        assert is_unchecked(value) is False

    def test_integer_zero_is_coerced(self):
        assert is_unchecked(0) is True


class TestDisjointness:
    """No value may be both checked and unchecked."""

    @pytest.mark.parametrize("value", ALL_VALUES)
    def test_never_both(self, value):
        assert not (is_checked(value) and is_unchecked(value))

    @pytest.mark.parametrize("value", ALL_VALUES)
    def test_never_both_uppercased(self, value):
        assert not (is_checked(value.upper()) and is_unchecked(value.upper()))

    def test_token_sets_do_not_overlap(self):
        assert not set(CHECKED_TOKENS) & set(UNCHECKED_TOKENS)
        assert not set(CHECKED_SYMBOLS) & set(UNCHECKED_SYMBOLS)


# ===========================================================================
# normalize_check_value
# ===========================================================================


class TestNormalizeCheckValue:

    def test_checked_maps_to_check_mark(self):
        assert normalize_check_value("Yes") == "✅"

    def test_unchecked_maps_to_cross_mark(self):
        assert normalize_check_value("false") == "❌"

    def test_other_values_returned_verbatim(self):
        assert normalize_check_value("  Maybe ") == "  Maybe "

    def test_none_becomes_empty(self):
        assert normalize_check_value(None) == ""

    @pytest.mark.parametrize("value", ["yes", "no", "✔", "×", "text", ""])
    def test_idempotent(self, value):
        once = normalize_check_value(value)
        assert normalize_check_value(once) == once


class TestNormalizeTableValue:

    @pytest.mark.parametrize("value", ["y", "Y", "n", "N", " y "])
    def test_one_letter_cells_kept_as_written(self, value):
        assert normalize_table_value(value) == value

    def test_one_letter_cells_still_classified(self):
        assert is_checked("y")
        assert is_unchecked("N")

    @pytest.mark.parametrize("value, expected", [("yes", "✅"), ("0", "❌"), ("✔", "✅"), ("maybe", "maybe")])
    def test_other_values_normalized(self, value, expected):
        assert normalize_table_value(value) == expected

    def test_row_key_and_letters_untouched(self):
        assert normalize_row(["1", "y", "true", "n", "no"]) == ["1", "y", "✅", "n", "❌"]


# ===========================================================================
# Sanitization
# ===========================================================================


class TestSanitization:

    def test_to_cell_trims(self):
        assert to_cell("  a b  ") == "a b"

    def test_to_cell_none(self):
        assert to_cell(None) == ""

    def test_escape_markup(self):
        assert escape_html('<b class="x">Tom\'s</b>') == "&lt;b class=&quot;x&quot;&gt;Tom&#39;s&lt;/b&gt;"

    def test_escape_bare_ampersand(self):
        assert escape_html("A & B") == "A &amp; B"

    def test_escape_is_idempotent(self):
        once = escape_html("<a href='x'>A & B</a>")
        assert escape_html(once) == once

    def test_existing_entities_kept(self):
        assert escape_html("&amp; &#39; &#x27; &nbsp;") == "&amp; &#39; &#x27; &nbsp;"

    def test_sanitize_trims_then_escapes(self):
        assert sanitize_cell("  <i>  ") == "&lt;i&gt;"

    def test_pipe_is_encoded(self):
        assert escape_html("a|b") == "a&#124;b"

    def test_pipe_encoding_is_idempotent(self):
        once = escape_html("x | y & z")
        assert once == "x &#124; y &amp; z"
        assert escape_html(once) == once

    def test_literal_entity_text_is_kept(self):
        # Already-escaped text is indistinguishable from a literal "&lt;"
        assert escape_html("&lt;") == "&lt;"

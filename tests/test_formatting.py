"""Unit tests for the Markdown, JSON and HTML generators."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import json

from conftest import make_model
from tablekit.formatting import GENERATORS, generate_html, generate_json, generate_markdown, table_to_dict
from tablekit.schema import Alignment, OutputFormat, TableModel


class TestGeneratorRegistry:

    def test_every_format_has_a_generator(self):
        assert set(GENERATORS) == set(OutputFormat)

    def test_empty_model_outputs(self):
        empty = TableModel()
        assert GENERATORS[OutputFormat.MARKDOWN](empty) == ""
        assert GENERATORS[OutputFormat.JSON](empty) == "{}"
        assert GENERATORS[OutputFormat.HTML](empty) == ""


# ===========================================================================
# Markdown
# ===========================================================================


class TestGenerateMarkdown:

    def test_alignment_tokens(self):
        model = make_model(["L", "C", "R"], [], [Alignment.LEFT, Alignment.CENTER, Alignment.RIGHT])
        assert generate_markdown(model) == "| L | C | R |\n| :--- | :---: | ---: |"

    def test_rows_and_normalization(self):
        model = make_model(["Name", "Done"], [["Task1", "yes"], ["Task2", "✗"], ["Task3", "later"]])
        assert generate_markdown(model) == (
            "| Name | Done |\n| :--- | :--- |\n| Task1 | ✅ |\n| Task2 | ❌ |\n| Task3 | later |"
        )

    def test_key_column_left_alone(self):
        model = make_model(["Id", "Flag"], [["1", "0"]])
        assert generate_markdown(model).splitlines()[-1] == "| 1 | ❌ |"

    def test_one_letter_cells_kept(self):
        model = make_model(["Who", "Ok", "Done"], [["a", "y", "true"], ["b", "N", "n"]])
        assert generate_markdown(model).splitlines()[2:] == ["| a | y | ✅ |", "| b | N | n |"]

    def test_pipes_cannot_split_cells(self):
        model = make_model(["A|B", "C"], [["x|y", "z"]])
        lines = generate_markdown(model).splitlines()
        assert lines[0] == "| A&#124;B | C |"
        assert lines[2] == "| x&#124;y | z |"

    def test_generation_is_idempotent(self):
        model = make_model(["Name", "Done"], [["a", "yes"]])
        once = generate_markdown(model)
        model.rows[0][1] = "✅"
        assert generate_markdown(model) == once

    def test_empty_cells(self):
        model = make_model(["A", "B", "C"], [["x", "", "z"]])
        assert generate_markdown(model).splitlines()[-1] == "| x |  | z |"


# ===========================================================================
# JSON
# ===========================================================================


class TestGenerateJson:

    def test_scenario(self):
        model = make_model(["Name", "Done"], [["Task1", "yes"], ["Task2", "no"]])
        assert json.loads(generate_json(model)) == {"Task1": {"Done": "✅"}, "Task2": {"Done": "❌"}}

    def test_one_letter_cells_become_marks(self):
        model = make_model(["Who", "Ok"], [["a", "y"], ["b", "n"]])
        assert table_to_dict(model) == {"a": {"Ok": "✅"}, "b": {"Ok": "❌"}}

    def test_other_values_verbatim(self):
        model = make_model(["Name", "Note"], [["a", "maybe"]])
        assert table_to_dict(model) == {"a": {"Note": "maybe"}}

    def test_blank_keys_skipped(self):
        model = make_model(["Name", "Done"], [["", "yes"], ["   ", "no"], ["k", "1"]])
        assert table_to_dict(model) == {"k": {"Done": "✅"}}

    def test_last_write_wins(self):
        model = make_model(["Name", "Done"], [["dup", "yes"], ["dup", "no"]])
        assert table_to_dict(model) == {"dup": {"Done": "❌"}}

    def test_single_column_gives_empty_objects(self):
        model = make_model(["Name"], [["a"], ["b"]])
        assert table_to_dict(model) == {"a": {}, "b": {}}

    def test_unicode_not_escaped(self):
        model = make_model(["Name", "Done"], [["a", "yes"]])
        assert "✅" in generate_json(model)

    def test_indent(self):
        model = make_model(["Name", "Done"], [["a", "yes"]])
        assert generate_json(model, indent=0) == '{"a": {"Done": "✅"}}'
        assert generate_json(model, indent=2).startswith('{\n  "a"')

    def test_headers_without_rows(self):
        assert generate_json(make_model(["Name", "Done"], [])) == "{}"


# ===========================================================================
# HTML
# ===========================================================================


class TestGenerateHtml:

    def test_structure(self):
        model = make_model(["A", "B"], [["1", "2"]])
        assert generate_html(model) == (
            "<table><thead><tr><th>A</th><th>B</th></tr></thead>"
            "<tbody><tr><td>1</td><td>2</td></tr></tbody></table>"
        )

    def test_alignment_classes(self):
        model = make_model(["A", "B", "C"], [["1", "2", "3"]], [Alignment.LEFT, Alignment.CENTER, Alignment.RIGHT])
        html = generate_html(model)
        assert '<th class="text-center">B</th>' in html
        assert '<td class="text-right">3</td>' in html
        assert "<th>A</th>" in html
        assert "style=" not in html

    def test_no_markup_injection(self):
        model = make_model(["A"], [["<script>alert(1)</script>"]])
        html = generate_html(model)
        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_no_double_escaping(self):
        model = make_model(["A & B"], [["x &amp; y"]])
        html = generate_html(model)
        assert "<th>A &amp; B</th>" in html
        assert "<td>x &amp; y</td>" in html

    def test_direct_list_writes_still_escaped(self):
        model = make_model(["A"], [["ok"]])
        model.rows[0][0] = "<b>"
        assert "<td>&lt;b&gt;</td>" in generate_html(model)

    def test_no_rows(self):
        assert generate_html(make_model(["A"], [])).endswith("<tbody></tbody></table>")

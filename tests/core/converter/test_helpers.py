import pytest

from docx_markdown.core.converter.helpers import (
    escape_pipes,
    get_heading_level,
    render_cell_text,
    render_runs,
    wrap_segment,
)
from docx_markdown.core.models import ParagraphBlock, TableCell, TextRun
from tests.builders import para


class TestGetHeadingLevel:
    """Heading style ids map to their numeric level."""

    @pytest.mark.parametrize("style_id, level", [
        ("Heading1", 1),
        ("Heading2", 2),
        ("Heading9", 9),
        ("Heading12", 12),
        ("Heading01", 1),
    ])
    def test_numeric_suffix(self, style_id, level):
        assert get_heading_level(style_id) == level

    @pytest.mark.parametrize("style_id", [
        None,
        "",
        "Heading",
        "HeadingX",
        "Heading1a",
        "Heading0",
        "Heading-1",
        "heading1",
        "Heading1_0",
        "Heading 2",
        "Heading+2",
        "Heading\u0662",
        "Title",
        "ChecklistItem",
    ])
    def test_not_a_heading(self, style_id):
        assert get_heading_level(style_id) is None


class TestInlineRuns:
    """Emphasis is applied per run and per text segment."""

    def test_four_flag_combinations(self):
        assert wrap_segment("Note", bold=True, italic=True) == "***Note***"
        assert wrap_segment("Note", bold=True, italic=False) == "**Note**"
        assert wrap_segment("Note", bold=False, italic=True) == "*Note*"
        assert wrap_segment("Note", bold=False, italic=False) == "Note"

    def test_bold_italic_run(self):
        paragraph = para(TextRun(segments=("Note",), bold=True, italic=True))
        assert render_runs(paragraph) == "***Note***"

    def test_mixed_runs_concatenate_without_separator(self):
        paragraph = para(
            "Plain ",
            TextRun(segments=("strong",), bold=True),
            " and ",
            TextRun(segments=("soft",), italic=True),
        )
        assert render_runs(paragraph) == "Plain **strong** and *soft*"

    def test_each_segment_wrapped_separately(self):
        paragraph = para(TextRun(segments=("a", "b"), bold=True))
        assert render_runs(paragraph) == "**a****b**"

    def test_no_runs_gives_empty_text(self):
        assert render_runs(ParagraphBlock()) == ""

    def test_markdown_characters_pass_through(self):
        assert render_runs(para("# not a heading * | -")) == "# not a heading * | -"


class TestCellText:
    def test_pipes_escaped(self):
        assert escape_pipes("2|3") == "2\\|3"
        assert escape_pipes("a||b") == "a\\|\\|b"

    def test_paragraphs_joined_and_trimmed(self):
        cell = TableCell(paragraphs=(para("  one"), para("two  ")))
        assert render_cell_text(cell) == "onetwo"

    def test_escaped_cell_does_not_split_on_naive_pipe_split(self):
        cell = TableCell(paragraphs=(para("x|y"),))
        line = "| " + render_cell_text(cell) + " | "
        columns = [c for c in line.replace("\\|", "\0").split("|") if c.strip()]
        assert len(columns) == 1

    def test_empty_cell(self):
        assert render_cell_text(TableCell()) == ""

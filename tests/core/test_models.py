import pytest

from docx_markdown.core.models import (
    DEFAULT_CHECKLIST_STYLE_ID,
    ConversionOptions,
    DocumentTree,
    MarkdownContext,
    TextRun,
)


class TestConversionOptions:
    def test_defaults(self):
        options = ConversionOptions()
        assert options.checklist_style_id == DEFAULT_CHECKLIST_STYLE_ID == "ChecklistItem"
        assert options.include_metadata is True
        assert options.inline_section_breaks is False

    def test_from_empty_config(self):
        assert ConversionOptions.from_config({}) == ConversionOptions()
        assert ConversionOptions.from_config(None) == ConversionOptions()

    def test_from_config(self):
        options = ConversionOptions.from_config({
            "checklist_style_id": "Todo",
            "include_metadata": False,
            "inline_section_breaks": True,
            "unrelated": "ignored",
        })
        assert options == ConversionOptions("Todo", False, True)

    def test_overrides_win_over_config(self):
        options = ConversionOptions.from_config(
            {"checklist_style_id": "Todo", "include_metadata": False},
            checklist_style_id="Task",
            include_metadata=None,
        )
        assert options.checklist_style_id == "Task"
        assert options.include_metadata is False

    def test_values_coerced(self):
        options = ConversionOptions.from_config({"checklist_style_id": 42, "include_metadata": 0})
        assert options.checklist_style_id == "42"
        assert options.include_metadata is False

    @pytest.mark.parametrize("raw, expected", [
        ("false", False),
        ("False", False),
        ("no", False),
        ("off", False),
        ("0", False),
        ("true", True),
        ("Yes", True),
        (" on ", True),
    ])
    def test_quoted_yaml_flags(self, raw, expected):
        options = ConversionOptions.from_config({"include_metadata": raw, "inline_section_breaks": raw})
        assert options.include_metadata is expected
        assert options.inline_section_breaks is expected

    def test_unrecognised_flag_string_rejected(self):
        with pytest.raises(ValueError, match="include_metadata"):
            ConversionOptions.from_config({"include_metadata": "maybe"})

    def test_frozen(self):
        with pytest.raises(AttributeError):
            ConversionOptions().include_metadata = False  # type: ignore[misc]


def test_run_text_joins_segments():
    assert TextRun(segments=("a", "b")).text == "ab"


def test_markdown_context_defaults():
    context = MarkdownContext()
    assert context.markdown == ""
    assert context.document == DocumentTree()
    assert context.source_path is None

from __future__ import annotations

"""Shared data structures used across the docx-markdown core.

The body model is a read-only view of a Word document: a tagged variant of
paragraph, table, section break and "other" nodes.  It is intentionally
free of python-docx / I/O code so that renderers can be exercised with plain
objects (unit-tests, CLI, other front-ends).
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, Tuple, Union

__all__ = [
    "TextRun",
    "ParagraphBlock",
    "TableCell",
    "TableRow",
    "TableBlock",
    "SectionBreak",
    "OtherBlock",
    "BodyNode",
    "DocumentMetadata",
    "DocumentTree",
    "ConversionOptions",
    "MarkdownContext",
    "DEFAULT_CHECKLIST_STYLE_ID",
]

# Style id of the Word paragraph style used for checklist items.
DEFAULT_CHECKLIST_STYLE_ID = "ChecklistItem"


@dataclass(frozen=True)
class TextRun:
    """Contiguous span of text sharing the same bold/italic flags.

    ``segments`` holds the run's individual text elements in order; emphasis
    is applied to each segment separately.
    """

    segments: Tuple[str, ...] = ()
    bold: bool = False
    italic: bool = False

    @property
    def text(self) -> str:
        return "".join(self.segments)


@dataclass(frozen=True)
class ParagraphBlock:
    runs: Tuple[TextRun, ...] = ()
    style_id: Optional[str] = None
    has_numbering: bool = False


@dataclass(frozen=True)
class TableCell:
    paragraphs: Tuple[ParagraphBlock, ...] = ()


@dataclass(frozen=True)
class TableRow:
    cells: Tuple[TableCell, ...] = ()


@dataclass(frozen=True)
class TableBlock:
    """Row/column grid.  The first row is always rendered as the header."""

    rows: Tuple[TableRow, ...] = ()


@dataclass(frozen=True)
class SectionBreak:
    """Boundary between two layout sections."""


@dataclass(frozen=True)
class OtherBlock:
    """Body element without a Markdown counterpart (bookmarks, SDTs, ...)."""

    tag: str = ""


BodyNode = Union[ParagraphBlock, TableBlock, SectionBreak, OtherBlock]


@dataclass(frozen=True)
class DocumentMetadata:
    """Package-level core properties."""

    title: Optional[str] = None
    subject: Optional[str] = None
    author: Optional[str] = None
    created: Optional[datetime] = None


@dataclass(frozen=True)
class DocumentTree:
    """Ordered body nodes plus optional document metadata."""

    body: Tuple[BodyNode, ...] = ()
    metadata: Optional[DocumentMetadata] = None


@dataclass(frozen=True)
class ConversionOptions:
    """Knobs for a single conversion pass.

    Attributes
    ----------
    checklist_style_id
        Paragraph style id rendered as ``- [ ]`` checklist items.
    include_metadata
        Append the ``## Document Metadata`` block when metadata is present.
    inline_section_breaks
        Treat paragraph-level ``w:sectPr`` markers as section breaks too
        (by default only the body-level one is seen).
    """

    checklist_style_id: str = DEFAULT_CHECKLIST_STYLE_ID
    include_metadata: bool = True
    inline_section_breaks: bool = False

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]] = None, **overrides: Any) -> "ConversionOptions":
        """Build options from a ``markdown`` config section.

        Keyword *overrides* whose value is ``None`` are ignored so that unset
        CLI flags fall back to the configured value.
        """
        values: Dict[str, Any] = {}
        for key in ("checklist_style_id", "include_metadata", "inline_section_breaks"):
            if config and config.get(key) is not None:
                values[key] = config[key]
            if overrides.get(key) is not None:
                values[key] = overrides[key]

        if "checklist_style_id" in values:
            values["checklist_style_id"] = str(values["checklist_style_id"])
        for flag in ("include_metadata", "inline_section_breaks"):
            if flag in values:
                values[flag] = _as_bool(flag, values[flag])
        return cls(**values)


_TRUE_STRINGS = {"true", "yes", "on", "1"}
_FALSE_STRINGS = {"false", "no", "off", "0", ""}


def _as_bool(name: str, value: Any) -> bool:
    """Coerce a config flag; quoted YAML strings such as ``"false"`` count too."""
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
        raise ValueError(f"Invalid boolean for {name}: {value!r}")
    return bool(value)


@dataclass
class MarkdownContext:
    """In-memory result of converting one document.

    Attributes
    ----------
    markdown
        Rendered Markdown text.
    document
        The document tree the text was rendered from.
    source_path
        Path of the DOCX file, when the tree came from disk.
    """

    markdown: str = ""
    document: DocumentTree = field(default_factory=DocumentTree)
    source_path: Optional[str] = None

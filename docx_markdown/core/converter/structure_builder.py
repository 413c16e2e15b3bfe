from __future__ import annotations

"""Single-pass rendering of a document tree into Markdown.

Each ``render_*`` function appends fragments to a caller-owned list; the
walker joins them once at the end.  No renderer reads what another has
written, so document order is the only coupling between them.
"""

import logging
from typing import Dict, List, Optional, Sequence

from docx_markdown.core.models import (
    BodyNode,
    ConversionOptions,
    DocumentMetadata,
    DocumentTree,
    OtherBlock,
    ParagraphBlock,
    SectionBreak,
    TableBlock,
)

from .helpers import get_heading_level, render_cells, render_runs

logger = logging.getLogger(__name__)

__all__ = [
    "render_paragraph",
    "render_table",
    "render_section_break",
    "render_metadata",
    "render_body",
    "render_document",
    "METADATA_HEADER",
    "CREATED_FORMAT",
]

CHECKLIST_PREFIX = "- [ ] "
LIST_ITEM_PREFIX = "- "
TABLE_SEPARATOR_CELL = "--- | "
SECTION_RULE = "\n---\n\n"

METADATA_HEADER = "## Document Metadata"
CREATED_FORMAT = "%Y-%m-%d %H:%M:%S"


# ---------------------------------------------------------------------------
# Paragraphs
# ---------------------------------------------------------------------------

def render_paragraph(
    paragraph: ParagraphBlock,
    out: List[str],
    options: Optional[ConversionOptions] = None,
) -> None:
    """Append the Markdown line(s) for *paragraph* to *out*.

    Rules are tried in order and the first match wins:

    1. ``Heading<N>`` style  -> ``#`` * N heading
    2. checklist style       -> ``- [ ] text`` (dropped when blank)
    3. numbering present     -> ``- text``
    4. anything else         -> text plus two blank lines (dropped when blank)
    """
    options = options or ConversionOptions()
    style_id = paragraph.style_id

    level = get_heading_level(style_id)
    if level is not None:
        out.append(f"{'#' * level} {render_runs(paragraph)}\n")
        return

    if style_id == options.checklist_style_id:
        item_text = render_runs(paragraph).strip()
        if item_text:
            # No blank line: consecutive items stay a tight list.
            out.append(f"{CHECKLIST_PREFIX}{item_text}\n")
        return

    if paragraph.has_numbering:
        out.append(f"{LIST_ITEM_PREFIX}{render_runs(paragraph)}\n")
        return

    text = render_runs(paragraph)
    if text.strip():
        out.append(f"{text}\n\n\n")


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

def render_table(table: TableBlock, out: List[str]) -> None:
    """Append a pipe table; the first row is the header.

    Rows are emitted with whatever cells they have.  Short or long rows are
    neither padded nor truncated.
    """
    if not table.rows:
        return

    header, *body_rows = table.rows
    column_count = len(header.cells)

    out.append(render_cells(header.cells) + "\n")
    out.append("| " + TABLE_SEPARATOR_CELL * column_count + "\n")

    for row in body_rows:
        if len(row.cells) != column_count:
            logger.debug("Table row has %d cells, header has %d", len(row.cells), column_count)
        out.append(render_cells(row.cells) + "\n")

    out.append("\n")


# ---------------------------------------------------------------------------
# Section breaks and metadata
# ---------------------------------------------------------------------------

def render_section_break(out: List[str]) -> None:
    out.append(SECTION_RULE)


def render_metadata(metadata: Optional[DocumentMetadata], out: List[str]) -> None:
    """Append the ``## Document Metadata`` block.

    Nothing is written when *metadata* is ``None``.  Otherwise the header and
    the trailing blank line are always written, with one ``**Label**: value``
    line per non-empty field in between.
    """
    if metadata is None:
        return

    out.append(f"{METADATA_HEADER}\n")
    for label, value in (
        ("Title", metadata.title),
        ("Subject", metadata.subject),
        ("Author", metadata.author),
    ):
        if value:
            out.append(f"**{label}**: {value}\n")
    if metadata.created is not None:
        out.append(f"**Created**: {metadata.created.strftime(CREATED_FORMAT)}\n")
    out.append("\n")


# ---------------------------------------------------------------------------
# Structure walker
# ---------------------------------------------------------------------------

def render_body(
    nodes: Sequence[BodyNode],
    out: List[str],
    options: Optional[ConversionOptions] = None,
) -> Dict[str, int]:
    """Dispatch every body node to its renderer, in document order.

    Returns per-kind node counts for logging.
    """
    options = options or ConversionOptions()
    counts = {"paragraphs": 0, "tables": 0, "section_breaks": 0, "skipped": 0}

    for node in nodes:
        if isinstance(node, ParagraphBlock):
            render_paragraph(node, out, options)
            counts["paragraphs"] += 1
        elif isinstance(node, TableBlock):
            render_table(node, out)
            counts["tables"] += 1
        elif isinstance(node, SectionBreak):
            render_section_break(out)
            counts["section_breaks"] += 1
        elif isinstance(node, OtherBlock):
            logger.debug("Skipping body element: %s", node.tag or "<unknown>")
            counts["skipped"] += 1
        else:
            logger.debug("Skipping unsupported node type: %s", type(node).__name__)
            counts["skipped"] += 1

    return counts


def render_document(tree: DocumentTree, options: Optional[ConversionOptions] = None) -> str:
    """Render *tree* to Markdown: the body first, then the metadata block."""
    options = options or ConversionOptions()
    out: List[str] = []

    counts = render_body(tree.body, out, options)
    logger.debug(
        "Rendered body: paragraphs=%s tables=%s section_breaks=%s skipped=%s",
        counts["paragraphs"], counts["tables"], counts["section_breaks"], counts["skipped"],
    )

    if options.include_metadata:
        render_metadata(tree.metadata, out)

    return "".join(out)

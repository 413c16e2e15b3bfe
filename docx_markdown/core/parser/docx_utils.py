from __future__ import annotations

"""Low-level DOCX utilities shared by the converter.

Translates a python-docx ``Document`` into the read-only body model in
``docx_markdown.core.models``.  Only direct children are read at every level
(body, paragraph, table, row, cell); nothing is recursed into.
"""

from typing import Generator, List, Optional
import logging

from docx.document import Document as _Document  # type: ignore
from docx.opc.constants import RELATIONSHIP_TYPE as RT  # type: ignore
from docx.oxml.ns import qn  # type: ignore
from docx.oxml.section import CT_SectPr  # type: ignore
from docx.oxml.table import CT_Tbl  # type: ignore
from docx.oxml.text.paragraph import CT_P  # type: ignore
from docx.table import Table, _Cell  # type: ignore
from docx.text.paragraph import Paragraph  # type: ignore
from docx.text.run import Run  # type: ignore
from lxml import etree as ET  # type: ignore

from docx_markdown.core.models import (
    BodyNode,
    ConversionOptions,
    DocumentMetadata,
    DocumentTree,
    OtherBlock,
    ParagraphBlock,
    SectionBreak,
    TableBlock,
    TableCell,
    TableRow,
    TextRun,
)

logger = logging.getLogger(__name__)

__all__ = [
    "iter_body_nodes",
    "read_paragraph",
    "read_table",
    "read_document_metadata",
    "build_document_tree",
]


# ---------------------------------------------------------------------------
# iter_body_nodes – flat traversal of w:body
# ---------------------------------------------------------------------------

def iter_body_nodes(
    doc: _Document, options: Optional[ConversionOptions] = None
) -> Generator[BodyNode, None, None]:
    """Yield body nodes in document order.

    ``w:p`` becomes a paragraph, ``w:tbl`` a table and the body-level
    ``w:sectPr`` a section break.  Every other element is yielded as an
    :class:`OtherBlock`; comments and processing instructions are dropped.
    """
    options = options or ConversionOptions()
    body = doc.element.body

    for child in body.iterchildren():
        if isinstance(child, CT_P):
            paragraph = Paragraph(child, doc)
            yield read_paragraph(paragraph)
            if options.inline_section_breaks and _has_paragraph_section(child):
                yield SectionBreak()
        elif isinstance(child, CT_Tbl):
            yield read_table(Table(child, doc))
        elif isinstance(child, CT_SectPr):
            yield SectionBreak()
        elif isinstance(child.tag, str):
            yield OtherBlock(tag=ET.QName(child).localname)


def _has_paragraph_section(p: CT_P) -> bool:
    p_pr = p.pPr
    return p_pr is not None and p_pr.sectPr is not None


# ---------------------------------------------------------------------------
# Paragraphs and runs
# ---------------------------------------------------------------------------

def _read_run(run: Run) -> TextRun:
    segments = tuple(t.text or "" for t in run.element.iterchildren(qn("w:t")))
    return TextRun(segments=segments, bold=bool(run.bold), italic=bool(run.italic))


def read_paragraph(paragraph: Paragraph) -> ParagraphBlock:
    """Return the model for *paragraph*.

    The style id is the explicit ``w:pStyle`` value only; default and
    inherited styles are not resolved.  Runs nested in hyperlinks or content
    controls are not part of ``paragraph.runs`` and are therefore skipped.
    """
    p = paragraph._p  # type: ignore[attr-defined]
    p_pr = p.pPr
    has_numbering = False
    if p_pr is not None and p_pr.numPr is not None:
        has_numbering = p_pr.numPr.numId is not None

    return ParagraphBlock(
        runs=tuple(_read_run(run) for run in paragraph.runs),
        style_id=p.style,
        has_numbering=has_numbering,
    )


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

def read_table(table: Table) -> TableBlock:
    """Return the model for *table* without expanding merged cells.

    ``Table.rows[i].cells`` repeats a cell once per grid column it spans;
    the raw ``w:tr``/``w:tc`` children are used instead so every cell
    appears once.
    """
    rows: List[TableRow] = []
    for tr in table._tbl.tr_lst:  # type: ignore[attr-defined]
        cells: List[TableCell] = []
        for tc in tr.tc_lst:
            cell = _Cell(tc, table)
            cells.append(TableCell(paragraphs=tuple(read_paragraph(p) for p in cell.paragraphs)))
        rows.append(TableRow(cells=tuple(cells)))
    return TableBlock(rows=tuple(rows))


# ---------------------------------------------------------------------------
# Core properties
# ---------------------------------------------------------------------------

def read_document_metadata(doc: _Document) -> Optional[DocumentMetadata]:
    """Return core properties, or ``None`` when the package has none.

    ``Document.core_properties`` silently creates a default part when the
    package lacks one, so the relationship is checked first.
    """
    package = doc.part.package
    try:
        package.part_related_by(RT.CORE_PROPERTIES)
    except KeyError:
        logger.debug("Package has no core properties part")
        return None

    props = doc.core_properties
    return DocumentMetadata(
        title=props.title or None,
        subject=props.subject or None,
        author=props.author or None,
        created=props.created,
    )


def build_document_tree(doc: _Document, options: Optional[ConversionOptions] = None) -> DocumentTree:
    """Read the whole document body and its metadata into a :class:`DocumentTree`."""
    body = tuple(iter_body_nodes(doc, options))
    logger.debug("Read %d body nodes", len(body))
    return DocumentTree(body=body, metadata=read_document_metadata(doc))

"""Model and DOCX builders shared by the test modules."""

from datetime import datetime

from docx import Document
from docx.enum.style import WD_STYLE_TYPE

from docx_markdown.core.models import ParagraphBlock, TableCell, TableRow, TextRun


def para(*runs, style_id=None, has_numbering=False):
    """Build a ParagraphBlock from strings or TextRun objects."""
    built = tuple(TextRun(segments=(r,)) if isinstance(r, str) else r for r in runs)
    return ParagraphBlock(runs=built, style_id=style_id, has_numbering=has_numbering)


def row(*texts):
    """Build a TableRow with one single-paragraph cell per text."""
    return TableRow(cells=tuple(TableCell(paragraphs=(para(t),)) for t in texts))


def add_numbering(paragraph, num_id=1):
    """Attach a ``w:numPr/w:numId`` to a python-docx paragraph."""
    num_pr = paragraph._p.get_or_add_pPr().get_or_add_numPr()
    num_pr.get_or_add_numId().val = num_id
    return paragraph


def build_sample_document():
    """A document exercising every block kind plus core properties."""
    doc = Document()
    doc.styles.add_style("ChecklistItem", WD_STYLE_TYPE.PARAGRAPH)

    doc.add_heading("Overview", level=2)
    p = doc.add_paragraph("Hello ")
    p.add_run("world").bold = True
    doc.add_paragraph("  Buy milk  ", style="ChecklistItem")
    add_numbering(doc.add_paragraph("First"))

    table = doc.add_table(rows=2, cols=2)
    table.cell(0, 0).text = "A"
    table.cell(0, 1).text = "B"
    table.cell(1, 0).text = "1"
    table.cell(1, 1).text = "2|3"

    props = doc.core_properties
    props.title = "Report"
    props.subject = ""
    props.author = "Jane"
    props.created = datetime(2024, 3, 1, 9, 30, 15)
    return doc


SAMPLE_MARKDOWN = (
    "## Overview\n"
    "Hello **world**\n\n\n"
    "- [ ] Buy milk\n"
    "- First\n"
    "| A | B | \n"
    "| --- | --- | \n"
    "| 1 | 2\\|3 | \n"
    "\n"
    "\n---\n\n"
    "## Document Metadata\n"
    "**Title**: Report\n"
    "**Author**: Jane\n"
    "**Created**: 2024-03-01 09:30:15\n"
    "\n"
)

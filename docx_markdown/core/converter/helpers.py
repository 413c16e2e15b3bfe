from __future__ import annotations

"""Helper utilities for DOCX to Markdown conversion.

Small, side-effect-free functions used by the renderers for heading
detection, inline emphasis and table cell text.
"""

from typing import Iterable, Optional

from docx_markdown.core.models import ParagraphBlock, TableCell, TextRun

__all__ = [
    "HEADING_STYLE_PREFIX",
    "get_heading_level",
    "wrap_segment",
    "render_runs",
    "escape_pipes",
    "render_cell_text",
    "render_cells",
]

# ---------------------------------------------------------------------------
# Style detection
# ---------------------------------------------------------------------------

# Word style ids for built-in headings are "Heading1" .. "Heading9".
HEADING_STYLE_PREFIX = "Heading"

BOLD_ITALIC_MARKER = "***"
BOLD_MARKER = "**"
ITALIC_MARKER = "*"

PIPE = "|"
ESCAPED_PIPE = "\\|"


def get_heading_level(style_id: Optional[str]) -> Optional[int]:
    """Return the heading level encoded in *style_id*, or ``None``.

    ``"Heading2"`` gives 2.  Anything after the prefix that is not a positive
    ASCII integer (``"HeadingX"``, ``"Heading0"``, ``"Heading1_0"``) is not a
    heading.
    """
    if not style_id or not style_id.startswith(HEADING_STYLE_PREFIX):
        return None
    suffix = style_id[len(HEADING_STYLE_PREFIX):]
    # int() alone would also take "1_0", " 2" and non-ASCII digits.
    if not (suffix.isascii() and suffix.isdigit()):
        return None
    level = int(suffix)
    if level < 1:
        return None
    return level


# ---------------------------------------------------------------------------
# Inline runs
# ---------------------------------------------------------------------------

def wrap_segment(text: str, bold: bool, italic: bool) -> str:
    """Wrap *text* in the emphasis markers matching the run flags."""
    if bold and italic:
        return f"{BOLD_ITALIC_MARKER}{text}{BOLD_ITALIC_MARKER}"
    if bold:
        return f"{BOLD_MARKER}{text}{BOLD_MARKER}"
    if italic:
        return f"{ITALIC_MARKER}{text}{ITALIC_MARKER}"
    return text


def _render_run(run: TextRun) -> str:
    return "".join(wrap_segment(segment, run.bold, run.italic) for segment in run.segments)


def render_runs(paragraph: ParagraphBlock) -> str:
    """Concatenate the paragraph's runs into one Markdown string.

    Formatting is evaluated per run, so one paragraph can mix emphasised and
    plain text.  Every text segment of a run is wrapped on its own.
    """
    return "".join(_render_run(run) for run in paragraph.runs)


# ---------------------------------------------------------------------------
# Table cells
# ---------------------------------------------------------------------------

def escape_pipes(text: str) -> str:
    """Escape the column delimiter; other Markdown characters pass through."""
    return text.replace(PIPE, ESCAPED_PIPE)


def render_cell_text(cell: TableCell) -> str:
    """Return the cell's paragraphs joined, pipe-escaped and trimmed."""
    text = "".join(render_runs(paragraph) for paragraph in cell.paragraphs)
    return escape_pipes(text).strip()


def render_cells(cells: Iterable[TableCell]) -> str:
    """Render one table row as ``| a | b | `` (without line terminator)."""
    return "| " + "".join(f"{render_cell_text(cell)} | " for cell in cells)

from __future__ import annotations

"""DOCX to Markdown conversion logic.

Key modules:
- docx_to_markdown: main conversion entry point
- structure_builder: single-pass structure walker and block renderers
- helpers: heading detection, inline emphasis and table cell text
"""

import logging
from pathlib import Path

from docx_markdown.core.exceptions import OutputWriteError
from docx_markdown.core.models import MarkdownContext

from .docx_to_markdown import convert_docx_to_markdown, load_docx
from .structure_builder import (
    render_body,
    render_document,
    render_metadata,
    render_paragraph,
    render_section_break,
    render_table,
)
from .helpers import render_runs

__all__ = [
    "convert_docx_to_markdown",
    "load_docx",
    "render_body",
    "render_document",
    "render_metadata",
    "render_paragraph",
    "render_runs",
    "render_section_break",
    "render_table",
    "save_markdown",
]

logger = logging.getLogger(__name__)


def save_markdown(context: MarkdownContext, output_path: str | Path) -> Path:
    """Write ``context.markdown`` to *output_path* as UTF-8.

    Missing parent directories are created.  Returns the resolved path.
    """
    path = Path(output_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        # newline="" keeps "\n" on every platform.
        with open(path, "w", encoding="utf-8", newline="") as fh:
            fh.write(context.markdown)
    except OSError as exc:
        raise OutputWriteError(f"Cannot write Markdown file: {exc}", str(path), exc) from exc

    logger.info("Markdown saved to %s", path)
    return path.resolve()

from __future__ import annotations

"""DOCX → Markdown conversion implementation.

Loads a Word document with python-docx, reads it into the body model and
renders the model with :func:`render_document`.
"""

import logging
import zipfile
from pathlib import Path
from typing import Optional

from docx import Document  # type: ignore
from docx.opc.exceptions import PackageNotFoundError  # type: ignore
from lxml import etree as ET  # type: ignore

from docx_markdown.core.exceptions import DocumentLoadError
from docx_markdown.core.models import ConversionOptions, MarkdownContext
from docx_markdown.core.parser import build_document_tree

from .structure_builder import render_document

logger = logging.getLogger(__name__)

__all__ = ["load_docx", "convert_docx_to_markdown"]

# Failures python-docx surfaces for damaged or non-Word packages.
_LOAD_ERRORS = (PackageNotFoundError, zipfile.BadZipFile, KeyError, ValueError, ET.XMLSyntaxError)


def load_docx(file_path: str | Path):
    """Open *file_path* with python-docx, wrapping package errors."""
    try:
        return Document(str(file_path))
    except _LOAD_ERRORS as exc:
        raise DocumentLoadError(f"Cannot read DOCX package: {exc}", str(file_path), exc) from exc


def convert_docx_to_markdown(
    file_path: str | Path, options: Optional[ConversionOptions] = None
) -> MarkdownContext:
    """Convert a DOCX file into an in-memory :class:`MarkdownContext`."""
    options = options or ConversionOptions()
    logger.info("Starting DOCX->Markdown conversion: %s", file_path)

    logger.info("Loading DOCX file...")
    doc = load_docx(file_path)

    logger.info("Reading document structure...")
    tree = build_document_tree(doc, options)

    logger.info("Rendering Markdown...")
    markdown = render_document(tree, options)

    logger.info("Conversion finished (%d characters).", len(markdown))
    return MarkdownContext(markdown=markdown, document=tree, source_path=str(file_path))

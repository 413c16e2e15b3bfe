"""Top-level package for docx-markdown.

Front-ends (CLI, scripts) should only depend on the public API exposed here
rather than importing internal modules directly.
"""

from .core.models import ConversionOptions, DocumentTree, MarkdownContext  # re-export for convenience
from .core.converter import convert_docx_to_markdown, render_document

__version__ = "1.0.0"

__all__: list[str] = [
    "ConversionOptions",
    "DocumentTree",
    "MarkdownContext",
    "convert_docx_to_markdown",
    "render_document",
]

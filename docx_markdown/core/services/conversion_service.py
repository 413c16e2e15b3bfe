from __future__ import annotations

"""High-level conversion service for DOCX to Markdown transformation.

Entry-point for any front-end (CLI, scripts, API) that needs to turn a Word
document into Markdown.  Validates paths, resolves options from
configuration and delegates to the core converter.
"""

import logging
from pathlib import Path
from typing import List, Optional

from docx_markdown.config import ConfigManager
from docx_markdown.core.converter import convert_docx_to_markdown, save_markdown
from docx_markdown.core.exceptions import UnsupportedFormatError
from docx_markdown.core.models import ConversionOptions, MarkdownContext

logger = logging.getLogger(__name__)

__all__ = ["ConversionService"]


class ConversionService:
    """Business-logic façade with no CLI or console dependencies."""

    SUPPORTED_EXTENSIONS = (".docx",)
    OUTPUT_SUFFIX = ".md"

    def __init__(self, options: Optional[ConversionOptions] = None) -> None:
        # Options are resolved once; later config changes need a new service.
        self.options = options or ConversionOptions.from_config(ConfigManager().get_markdown_config())
        self.logger = logger

    # ---------------------------------------------------------------------
    # PUBLIC API
    # ---------------------------------------------------------------------
    def convert(self, file_path: str | Path) -> MarkdownContext:
        """Convert a DOCX file to an in-memory MarkdownContext.

        Raises:
            FileNotFoundError: If *file_path* does not exist
            ValueError: If *file_path* is not a regular file
            UnsupportedFormatError: If the extension is not supported
            DocumentLoadError: If the package cannot be read
        """
        file_path = Path(file_path)
        self.logger.debug("Converting document -> Markdown: %s", file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"Input file not found: {file_path}")

        if not file_path.is_file():
            raise ValueError(f"Path is not a file: {file_path}")

        if not self.can_handle(file_path):
            raise UnsupportedFormatError(str(file_path), self.get_supported_extensions())

        return convert_docx_to_markdown(file_path, self.options)

    def save(self, context: MarkdownContext, output_path: str | Path) -> Path:
        """Write the converted Markdown to *output_path*."""
        return save_markdown(context, output_path)

    def convert_file(self, input_path: str | Path, output_path: str | Path | None = None) -> Path:
        """Convert *input_path* and write the result next to it or to *output_path*.

        Returns the path of the written Markdown file.
        """
        input_path = Path(input_path)
        target = Path(output_path) if output_path is not None else self.default_output_path(input_path)
        context = self.convert(input_path)
        return self.save(context, target)

    def can_handle(self, file_path: str | Path) -> bool:
        return Path(file_path).suffix.lower() in self.SUPPORTED_EXTENSIONS

    def get_supported_extensions(self) -> List[str]:
        return list(self.SUPPORTED_EXTENSIONS)

    def default_output_path(self, input_path: str | Path) -> Path:
        return Path(input_path).with_suffix(self.OUTPUT_SUFFIX)

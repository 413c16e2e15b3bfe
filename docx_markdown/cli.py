"""Command-line entry point: ``docx-markdown INPUT.docx [OUTPUT.md]``."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from docx_markdown import __version__
from docx_markdown.config import ConfigManager
from docx_markdown.core.exceptions import ConversionError
from docx_markdown.core.models import ConversionOptions
from docx_markdown.core.services import ConversionService
from docx_markdown.logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docx-markdown",
        description="Convert a Word (.docx) document into Markdown",
    )
    parser.add_argument("input", help="Path to the input .docx file")
    parser.add_argument("output", nargs="?", help="Path of the Markdown file (default: INPUT with .md suffix)")
    parser.add_argument(
        "--no-metadata",
        dest="include_metadata",
        action="store_false",
        default=None,
        help="Do not append the document metadata block",
    )
    parser.add_argument("--checklist-style", dest="checklist_style_id", help="Style id rendered as checklist items")
    parser.add_argument(
        "--inline-section-breaks",
        action="store_true",
        default=None,
        help="Also treat section breaks stored in paragraph properties as rules",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the converter and return the process exit code."""
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else None)

    try:
        options = ConversionOptions.from_config(
            ConfigManager().get_markdown_config(),
            checklist_style_id=args.checklist_style_id,
            include_metadata=args.include_metadata,
            inline_section_breaks=args.inline_section_breaks,
        )
        output_path = ConversionService(options).convert_file(args.input, args.output)
    except (ConversionError, OSError, ValueError) as exc:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error during conversion: {exc}", file=sys.stderr)
        return 1

    print(f"Conversion complete: {output_path}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())

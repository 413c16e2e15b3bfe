from __future__ import annotations

"""Conversion exception classes.

Raised by the loading and writing layers around the renderers.  The
renderers themselves never raise on a well-formed document tree.
"""

from typing import Optional


class ConversionError(Exception):
    """Base exception for all conversion errors."""

    def __init__(self, message: str, file_path: Optional[str] = None,
                 cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.file_path = file_path
        self.cause = cause

    def __str__(self) -> str:
        if self.file_path:
            return f"[{self.file_path}] {super().__str__()}"
        return super().__str__()


class UnsupportedFormatError(ConversionError):
    """Raised when the input file is not a format the converter reads."""

    def __init__(self, file_path: str, supported_extensions: Optional[list[str]] = None) -> None:
        self.supported_extensions = supported_extensions or []
        formats_str = ", ".join(self.supported_extensions) or "none"
        super().__init__(f"Unsupported file type. Supported formats: {formats_str}", file_path)


class DocumentLoadError(ConversionError):
    """Raised when the DOCX package cannot be opened or parsed."""


class OutputWriteError(ConversionError):
    """Raised when the Markdown output cannot be written."""


__all__ = [
    "ConversionError",
    "UnsupportedFormatError",
    "DocumentLoadError",
    "OutputWriteError",
]

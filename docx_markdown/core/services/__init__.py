from __future__ import annotations

"""High-level orchestration services."""

from .conversion_service import ConversionService  # noqa: F401

__all__: list[str] = [
    "ConversionService",
]

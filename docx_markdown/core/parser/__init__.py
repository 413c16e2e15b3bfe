from __future__ import annotations

"""Word-processing parser helpers.

Provides the DOCX traversal that feeds the Markdown renderers.
"""

from .docx_utils import (  # noqa: F401
    build_document_tree,
    iter_body_nodes,
    read_document_metadata,
    read_paragraph,
    read_table,
)

__all__: list[str] = [
    "build_document_tree",
    "iter_body_nodes",
    "read_document_metadata",
    "read_paragraph",
    "read_table",
]

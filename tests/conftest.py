"""Test configuration and fixtures for docx-markdown.

Renderer tests build model objects directly; reader, service and CLI tests
build small real .docx files with python-docx.
"""

import logging
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from docx_markdown.config import ConfigManager
from tests.builders import build_sample_document

# Configure test logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point user overrides at an empty temp dir and reload config per test."""
    config_dir = tmp_path / "user_config"
    config_dir.mkdir()
    monkeypatch.setenv("DOCX_MARKDOWN_CONFIG_DIR", str(config_dir))
    monkeypatch.delenv("DOCX_MARKDOWN_LOG_DIR", raising=False)
    monkeypatch.delenv("DOCX_MARKDOWN_DEBUG_MODULES", raising=False)
    ConfigManager.reset()
    yield config_dir
    ConfigManager.reset()


@pytest.fixture
def sample_document():
    return build_sample_document()


@pytest.fixture
def sample_docx(tmp_path, sample_document):
    """The sample document saved to disk."""
    path = tmp_path / "sample.docx"
    sample_document.save(str(path))
    return path

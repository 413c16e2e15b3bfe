from __future__ import annotations

"""Central logging configuration for docx-markdown.

Import and call :func:`setup_logging` at application start-up.
"""

import copy
import logging
import logging.config
import os
from typing import Any, Dict, Optional

from docx_markdown.config import ConfigManager

__all__ = ["setup_logging"]

_PACKAGE_LOGGER = "docx_markdown"


def setup_logging(level: Optional[int] = None) -> None:
    """Configure logging from the packaged/user ``logging.yml``.

    *level*, when given, overrides the level of the ``docx_markdown`` logger
    and its console handler (the CLI passes DEBUG for ``-v``).
    """
    log_dir = os.environ.get("DOCX_MARKDOWN_LOG_DIR")

    logging_config = copy.deepcopy(ConfigManager().get_logging_config())
    if logging_config and isinstance(logging_config, dict) and logging_config.get("version"):
        try:
            logging.config.dictConfig(_prepare_config(logging_config, log_dir))
            logging.getLogger(__name__).debug("Logging initialised from config files")
        except (ValueError, TypeError, AttributeError, ImportError) as exc:
            _setup_minimal_logging()
            logging.getLogger(__name__).error("Invalid logging config, using fallback: %s", exc)
    else:
        _setup_minimal_logging()
        logging.getLogger(__name__).warning("No logging config found, using fallback")

    if level is not None:
        package_logger = logging.getLogger(_PACKAGE_LOGGER)
        package_logger.setLevel(level)
        for handler in package_logger.handlers:
            if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
                handler.setLevel(level)

    _apply_debug_overrides()


def _prepare_config(config: Dict[str, Any], log_dir: Optional[str]) -> Dict[str, Any]:
    """Point the file handler at *log_dir*, or drop it when no dir is set."""
    handlers = config.get("handlers", {})
    if "file" not in handlers:
        return config

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        filename = os.path.basename(handlers["file"].get("filename") or "docx_markdown.log")
        handlers["file"]["filename"] = os.path.join(log_dir, filename)
        package_cfg = config.setdefault("loggers", {}).setdefault(_PACKAGE_LOGGER, {})
        package_handlers = package_cfg.setdefault("handlers", [])
        if "file" not in package_handlers:
            package_handlers.append("file")
    else:
        handlers.pop("file")
        for logger_cfg in list(config.get("loggers", {}).values()) + [config.get("root", {})]:
            if "file" in logger_cfg.get("handlers", []):
                logger_cfg["handlers"] = [h for h in logger_cfg["handlers"] if h != "file"]
    return config


def _setup_minimal_logging() -> None:
    """Set up console-only logging when the config is unavailable."""
    minimal_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "simple": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "simple",
                "level": "WARNING",
            },
        },
        "root": {
            "level": "WARNING",
            "handlers": ["console"],
        },
    }
    logging.config.dictConfig(minimal_config)


def _apply_debug_overrides() -> None:
    """Apply environment-driven module-specific debug overrides.

    ``DOCX_MARKDOWN_DEBUG_MODULES=comma,separated,logger,names`` sets DEBUG on
    each listed logger and gives it a DEBUG stream handler if none exists.
    """
    extra_modules = os.environ.get("DOCX_MARKDOWN_DEBUG_MODULES", "").strip()
    targets = [m.strip() for m in extra_modules.split(",") if m.strip()]
    for name in targets:
        logger = logging.getLogger(name)
        logger.setLevel(logging.DEBUG)
        has_debug_handler = any(h.level <= logging.DEBUG for h in logger.handlers)
        if not has_debug_handler:
            h = logging.StreamHandler()
            h.setLevel(logging.DEBUG)
            h.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
            logger.addHandler(h)
        logger.info("Debug override active for logger '%s'", name)

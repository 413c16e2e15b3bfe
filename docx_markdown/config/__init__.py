"""Packaged YAML configuration and the :class:`ConfigManager` that reads it.

Defaults live next to this module; users override them with files of the
same name in their config directory.
"""

from .manager import ConfigManager, get_user_config_dir

__all__ = [
    "ConfigManager",
    "get_user_config_dir",
]

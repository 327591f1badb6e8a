"""Configuration files (YAML) and helpers.

`ConfigManager` reads the default files from this folder and merges them
with user overrides; `ViewSettings` turns the view section into typed values.
"""

from .manager import ConfigManager
from .settings import ViewSettings

__all__ = [
    "ConfigManager",
    "ViewSettings",
]

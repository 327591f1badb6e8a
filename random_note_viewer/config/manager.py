from __future__ import annotations

"""Configuration loading and access helpers.

Loads the YAML files packaged with *random_note_viewer* and merges them
with user overrides.

On Windows: ``%LOCALAPPDATA%\\RandomNoteViewer\\config\\*.yml``
On Unix: ``~/.random_note_viewer/*.yml``

``RANDOM_NOTE_CONFIG_DIR`` replaces the user directory on every platform.
"""

import importlib.resources as pkg_resources
import logging
import os
from pathlib import Path
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)

__all__ = ["ConfigManager"]


def _get_user_config_dir() -> Path:
    """Get the user configuration directory."""
    override = os.environ.get("RANDOM_NOTE_CONFIG_DIR", "").strip()
    if override:
        return Path(override).expanduser()
    if os.name == 'nt':  # Windows
        local_appdata = os.environ.get('LOCALAPPDATA')
        if local_appdata:
            return Path(local_appdata) / "RandomNoteViewer" / "config"
        return Path.home() / "AppData" / "Local" / "RandomNoteViewer" / "config"
    return Path.home() / ".random_note_viewer"


def _read_packaged(filename: str) -> str:
    return pkg_resources.files(__package__).joinpath(filename).read_text(encoding="utf-8")


def _ensure_user_configs_exist(user_config_dir: Path, default_filenames: Dict[str, str]) -> None:
    """Copy default config files to the user directory if they don't exist."""
    try:
        user_config_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error("Could not create user config directory %s: %s", user_config_dir, e)
        return

    for filename in default_filenames.values():
        user_config_path = user_config_dir / filename
        if user_config_path.exists():
            continue
        try:
            user_config_path.write_text(_read_packaged(filename), encoding='utf-8')
            logger.info("Created user config: %s", user_config_path)
        except (FileNotFoundError, OSError) as e:
            logger.warning("Could not copy default config %s: %s", filename, e)


class _Singleton(type):
    _instance: "ConfigManager" | None = None

    def __call__(cls, *args, **kwargs):  # type: ignore[no-self-use]
        if cls._instance is None:
            cls._instance = super().__call__(*args, **kwargs)
        return cls._instance


class ConfigManager(metaclass=_Singleton):
    """Lazy-loads and exposes configuration sections as dictionaries."""

    _DEFAULT_FILENAMES = {
        "logging": "logging.yml",
        "view": "view.yml",
    }

    def __init__(self) -> None:
        self._data: Dict[str, Dict[str, Any]] = {}
        self._ensure_loaded()

    @classmethod
    def reset(cls) -> None:
        """Drop the shared instance so the next call reloads from disk."""
        cls._instance = None

    # ------------------------------------------------------------------
    # Public helpers
    # ------------------------------------------------------------------
    def get_logging_config(self) -> Dict[str, Any]:
        return self._data.get("logging", {})

    def get_view_config(self) -> Dict[str, Any]:
        return self._data.get("view", {})

    # ------------------------------------------------------------------
    # Internal loading logic
    # ------------------------------------------------------------------
    def _ensure_loaded(self) -> None:
        if self._data:
            return  # already loaded

        startup_summary = []

        user_config_dir = _get_user_config_dir()
        _ensure_user_configs_exist(user_config_dir, self._DEFAULT_FILENAMES)

        for key, filename in self._DEFAULT_FILENAMES.items():
            merged_cfg: Dict[str, Any] = {}
            status = "missing"

            # 1. load packaged default
            try:
                packaged_data = yaml.safe_load(_read_packaged(filename)) or {}
                merged_cfg.update(packaged_data)
                status = "loaded"
            except (FileNotFoundError, OSError):
                logger.error("Missing packaged config for %s (%s)", key, filename)
            except yaml.YAMLError as exc:
                logger.error("Invalid packaged config for %s (%s): %s", key, filename, exc)
                status = "invalid"

            # 2. load user overrides
            user_path = user_config_dir / filename
            if user_path.exists():
                try:
                    user_data = yaml.safe_load(user_path.read_text(encoding="utf-8")) or {}
                    if isinstance(user_data, dict):
                        merged_cfg.update(user_data)
                        if status == "loaded":
                            status = "loaded+overrides"
                    else:
                        logger.error("User config %s is not a mapping; ignored", user_path)
                except (OSError, yaml.YAMLError) as exc:
                    logger.error("Could not parse user config %s: %s", user_path, exc)

            self._data[key] = merged_cfg
            startup_summary.append(f"{key}: {status}")

        logger.info("Config startup: %s", " | ".join(startup_summary))

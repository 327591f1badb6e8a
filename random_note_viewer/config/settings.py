from __future__ import annotations

"""Typed view settings built from the ``view`` configuration section."""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

from random_note_viewer.core.exceptions import ConfigError
from random_note_viewer.core.services.markdown_renderer import DEFAULT_EXTENSIONS
from random_note_viewer.core.services.vault_query import DEFAULT_EXCLUDE_DIRS, QueryFilter

__all__ = ["ViewSettings"]


def _str_tuple(value: Any, key: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
    if value is None:
        return default
    if isinstance(value, str):
        return tuple(v.strip() for v in value.split(",") if v.strip())
    if isinstance(value, (list, tuple)):
        return tuple(str(v) for v in value)
    raise ConfigError(f"'{key}' must be a list of strings, got {type(value).__name__}")


def _non_negative_int(value: Any, key: str, default: int) -> int:
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        raise ConfigError(f"'{key}' must be an integer")
    try:
        number = int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"'{key}' must be an integer, got {value!r}", cause=exc) from exc
    if number < 0:
        raise ConfigError(f"'{key}' must not be negative")
    return number


@dataclass
class ViewSettings:
    """Normalised ``view.yml`` values.

    Attributes
    ----------
    vault_dir : str
        Empty when the vault must come from the command line or environment.
    pattern, exclude_dirs, query_filter
        Passed to :class:`~random_note_viewer.core.services.VaultQuery`.
    refresh_interval_ms : int
        Rescan period; 0 disables polling.
    encoding : str
        Note file encoding.
    markdown_extensions : tuple of str
        Python-Markdown extensions.
    window_size : (int, int)
    """

    vault_dir: str = ""
    pattern: str = "**/*.md"
    exclude_dirs: Tuple[str, ...] = DEFAULT_EXCLUDE_DIRS
    query_filter: QueryFilter = field(default_factory=QueryFilter)
    refresh_interval_ms: int = 5000
    encoding: str = "utf-8"
    markdown_extensions: Tuple[str, ...] = DEFAULT_EXTENSIONS
    window_size: Tuple[int, int] = (720, 820)

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "ViewSettings":
        """Build settings from a config mapping; missing keys keep defaults.

        Raises:
            ConfigError: a value has the wrong type.
        """
        data = dict(data or {})
        defaults = cls()

        filter_cfg = data.get("filter") or {}
        if not isinstance(filter_cfg, Mapping):
            raise ConfigError("'filter' must be a mapping")
        properties = filter_cfg.get("properties") or {}
        if not isinstance(properties, Mapping):
            raise ConfigError("'filter.properties' must be a mapping")
        tag = filter_cfg.get("tag") or None

        window = data.get("window") or {}
        if not isinstance(window, Mapping):
            raise ConfigError("'window' must be a mapping")

        pattern = data.get("pattern") or defaults.pattern
        if not isinstance(pattern, str):
            raise ConfigError("'pattern' must be a string")

        return cls(
            vault_dir=str(data.get("vault_dir") or ""),
            pattern=pattern,
            exclude_dirs=_str_tuple(data.get("exclude_dirs"), "exclude_dirs", defaults.exclude_dirs),
            query_filter=QueryFilter(tag=str(tag) if tag else None, properties=dict(properties)),
            refresh_interval_ms=_non_negative_int(
                data.get("refresh_interval_ms"), "refresh_interval_ms", defaults.refresh_interval_ms
            ),
            encoding=str(data.get("encoding") or defaults.encoding),
            markdown_extensions=_str_tuple(
                data.get("markdown_extensions"), "markdown_extensions", defaults.markdown_extensions
            ),
            window_size=(
                _non_negative_int(window.get("width"), "window.width", defaults.window_size[0]),
                _non_negative_int(window.get("height"), "window.height", defaults.window_size[1]),
            ),
        )

    def with_overrides(self, **overrides: Any) -> "ViewSettings":
        """Return a copy with non-None keyword values replaced."""
        values: Dict[str, Any] = {k: v for k, v in overrides.items() if v is not None}
        return type(self)(**{**self.__dict__, **values})

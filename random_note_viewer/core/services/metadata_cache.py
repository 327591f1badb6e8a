from __future__ import annotations

"""Frontmatter parsing and a per-note metadata cache.

Notes may start with a YAML block delimited by ``---`` lines. The cache
parses it once per file modification time and answers lookups
synchronously; a note without a usable block simply has no metadata.
"""

import logging
import re
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Optional, Tuple

import yaml

from random_note_viewer.core.models import NoteRecord

logger = logging.getLogger(__name__)

__all__ = ["MetadataCache", "split_frontmatter", "parse_frontmatter"]

# YAML frontmatter block at the very start of the file
_FRONTMATTER_RE = re.compile(
    r"\A---[ \t]*\r?\n(.*?)(?:\r?\n)?^---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL | re.MULTILINE,
)


def split_frontmatter(text: str) -> Tuple[Optional[str], str]:
    """Return ``(raw_yaml, body)``; ``raw_yaml`` is None without a block."""
    if not text:
        return None, text or ""
    if text.startswith("\ufeff"):
        text = text[1:]
    match = _FRONTMATTER_RE.match(text)
    if not match:
        return None, text
    return match.group(1), text[match.end():]


def parse_frontmatter(text: str, source: str = "") -> Optional[Dict[str, Any]]:
    """Parse the frontmatter of ``text`` into a mapping.

    Returns None when there is no block, the block is not a mapping, or the
    YAML is invalid (logged as a warning with ``source``).
    """
    raw, _body = split_frontmatter(text)
    if raw is None:
        return None
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        logger.warning("Invalid frontmatter in %s: %s", source or "<text>", exc)
        return None
    if not isinstance(data, dict):
        return None
    return data


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8", errors="replace")


class MetadataCache:
    """Caches parsed frontmatter per note path and modification time.

    Parameters
    ----------
    reader : Callable[[Path], str]
        Reads a note's text. Defaults to a UTF-8 read with replacement.
    """

    def __init__(self, reader: Optional[Callable[[Path], str]] = None) -> None:
        self._reader = reader or _read_text
        self._entries: Dict[str, Tuple[float, Optional[Dict[str, Any]]]] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def get_metadata(self, record: NoteRecord) -> Optional[Dict[str, Any]]:
        """Return the note's frontmatter, or None when it has none.

        An empty mapping counts as absent.
        """
        key = str(record.path)
        entry = self._entries.get(key)
        if entry is None or entry[0] != record.mtime:
            return self.update(record)
        return entry[1]

    def update(self, record: NoteRecord) -> Optional[Dict[str, Any]]:
        """(Re)parse the note's frontmatter and store it."""
        key = str(record.path)
        entry = self._entries.get(key)
        if entry is not None and entry[0] == record.mtime:
            return entry[1]
        try:
            text = self._reader(record.path)
        except OSError as exc:
            logger.warning("Could not read metadata for %s: %s", record.relative_path, exc)
            self._entries.pop(key, None)
            return None
        data = parse_frontmatter(text, source=record.relative_path) or None
        self._entries[key] = (record.mtime, data)
        return data

    def prune(self, records: Iterable[NoteRecord]) -> None:
        """Forget every note not in ``records``."""
        keep = {str(r.path) for r in records}
        for key in [k for k in self._entries if k not in keep]:
            del self._entries[key]

    def clear(self) -> None:
        self._entries.clear()

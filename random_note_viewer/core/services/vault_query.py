from __future__ import annotations

"""Record set provider: the notes of a vault folder that match a query.

The query scans the vault, applies an optional frontmatter filter and pushes
the complete, ordered record set to its subscribers whenever the result
changes. Subscribers never poll; the host calls :meth:`VaultQuery.refresh`
on its own schedule.
"""

import fnmatch
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from random_note_viewer.core.interfaces import DataSubscriber
from random_note_viewer.core.models import NoteRecord
from random_note_viewer.core.services.metadata_cache import MetadataCache

logger = logging.getLogger(__name__)

__all__ = ["QueryFilter", "VaultQuery", "DEFAULT_EXCLUDE_DIRS"]

DEFAULT_EXCLUDE_DIRS: Tuple[str, ...] = (".obsidian", ".trash", ".git", "node_modules")


def _normalise_tag(tag: Any) -> str:
    return str(tag).strip().lstrip("#").lower()


def _tags_of(metadata: Mapping[str, Any]) -> List[str]:
    raw = metadata.get("tags", metadata.get("tag"))
    if raw is None:
        return []
    if isinstance(raw, str):
        items: Iterable[Any] = raw.replace(",", " ").split()
    elif isinstance(raw, (list, tuple)):
        items = raw
    else:
        items = [raw]
    return [t for t in (_normalise_tag(i) for i in items) if t]


@dataclass
class QueryFilter:
    """Frontmatter conditions a note must meet to be part of the record set.

    Attributes
    ----------
    tag : str, optional
        Required tag; compared case-insensitively, leading ``#`` ignored.
    properties : dict
        Required ``key: value`` pairs, compared as strings. A list value
        matches when any element matches.
    """

    tag: Optional[str] = None
    properties: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.tag and not self.properties

    def matches(self, metadata: Optional[Mapping[str, Any]]) -> bool:
        if self.is_empty:
            return True
        if not metadata:
            return False
        if self.tag and _normalise_tag(self.tag) not in _tags_of(metadata):
            return False
        for key, expected in self.properties.items():
            if key not in metadata:
                return False
            actual = metadata[key]
            values = actual if isinstance(actual, (list, tuple)) else [actual]
            if str(expected) not in {str(v) for v in values}:
                return False
        return True


class VaultQuery:
    """Scans a vault folder and pushes matching notes to subscribers.

    Parameters
    ----------
    vault_root : Path or str
        Folder to scan.
    pattern : str
        Glob applied to vault-relative POSIX paths. ``**/`` also matches
        notes at the vault root.
    exclude_dirs : Sequence[str]
        Folder names skipped at any depth. Hidden folders are always skipped.
    query_filter : QueryFilter, optional
        Frontmatter filter; None keeps every note.
    metadata_cache : MetadataCache, optional
        Shared cache used for filtering; one is created when omitted.
    """

    def __init__(
        self,
        vault_root: Path | str,
        *,
        pattern: str = "**/*.md",
        exclude_dirs: Sequence[str] = DEFAULT_EXCLUDE_DIRS,
        query_filter: Optional[QueryFilter] = None,
        metadata_cache: Optional[MetadataCache] = None,
    ) -> None:
        self.vault_root = Path(vault_root).expanduser().resolve()
        self.pattern = pattern or "**/*.md"
        self.exclude_dirs = set(exclude_dirs or ())
        self.query_filter = query_filter or QueryFilter()
        self.metadata_cache = metadata_cache if metadata_cache is not None else MetadataCache()
        self._subscribers: List[DataSubscriber] = []
        self._records: List[NoteRecord] = []
        self._signature: Optional[Tuple[Tuple[str, float], ...]] = None

    # ------------------------------------------------------------------
    # Subscription
    # ------------------------------------------------------------------
    def subscribe(self, subscriber: DataSubscriber) -> None:
        if subscriber not in self._subscribers:
            self._subscribers.append(subscriber)

    def unsubscribe(self, subscriber: DataSubscriber) -> None:
        try:
            self._subscribers.remove(subscriber)
        except ValueError:
            pass

    @property
    def records(self) -> List[NoteRecord]:
        return list(self._records)

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------
    def _matches_pattern(self, rel_path: str) -> bool:
        # "**/" may also match zero folders
        candidates = {self.pattern, self.pattern.replace("/**/", "/")}
        if self.pattern.startswith("**/"):
            candidates.add(self.pattern[3:])
        return any(fnmatch.fnmatch(rel_path, p) for p in candidates)

    def scan(self) -> List[NoteRecord]:
        """Return the current matching notes, sorted by relative path."""
        root = self.vault_root
        if not root.is_dir():
            logger.warning("Vault folder not found: %s", root)
            return []

        found: List[NoteRecord] = []
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames[:] = sorted(
                d for d in dirnames if not d.startswith(".") and d not in self.exclude_dirs
            )
            for fname in filenames:
                path = Path(dirpath) / fname
                rel = path.relative_to(root).as_posix()
                if not self._matches_pattern(rel):
                    continue
                try:
                    mtime = path.stat().st_mtime
                except OSError as exc:
                    logger.debug("Skipping %s: %s", rel, exc)
                    continue
                record = NoteRecord(path=path, vault_root=root, mtime=mtime)
                if not self.query_filter.is_empty:
                    if not self.query_filter.matches(self.metadata_cache.get_metadata(record)):
                        continue
                found.append(record)

        found.sort(key=lambda r: r.relative_path)
        return found

    def refresh(self, force: bool = False) -> bool:
        """Rescan and push the record set if it changed.

        Returns True when subscribers were notified.
        """
        records = self.scan()
        signature = tuple((r.relative_path, r.mtime) for r in records)
        if not force and signature == self._signature:
            return False
        self._signature = signature
        self._records = records
        self.metadata_cache.prune(records)
        logger.info("Vault query: %d note(s) in %s", len(records), self.vault_root)
        self._notify(records)
        return True

    def _notify(self, records: List[NoteRecord]) -> None:
        for subscriber in list(self._subscribers):
            try:
                subscriber.on_data_updated(list(records))
            except Exception as exc:
                logger.error("Subscriber %r failed on data update: %s", subscriber, exc, exc_info=True)

    # ------------------------------------------------------------------
    # Link resolution
    # ------------------------------------------------------------------
    def resolve(self, target: str) -> Optional[NoteRecord]:
        """Find the note a link target refers to.

        Tries the vault-relative path (with and without ``.md``), then the
        note's basename, case-insensitively.
        """
        if not target:
            return None
        cleaned = target.split("#", 1)[0].strip().replace("\\", "/").lstrip("/")
        if not cleaned:
            return None
        records = self._records
        by_path = {r.relative_path: r for r in records}
        for candidate in (cleaned, f"{cleaned}.md"):
            if candidate in by_path:
                return by_path[candidate]

        lowered = cleaned.lower()
        for r in records:
            if r.relative_path.lower() in (lowered, f"{lowered}.md"):
                return r
        stem = Path(cleaned).name.lower()
        if stem.endswith(".md"):
            stem = stem[:-3]
        for r in records:
            if r.basename.lower() == stem:
                return r
        return None

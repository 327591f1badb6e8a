from __future__ import annotations

"""Opening notes and URLs outside the viewer."""

import logging
import webbrowser
from typing import Callable, Optional

from random_note_viewer.core.services.vault_query import VaultQuery

logger = logging.getLogger(__name__)

__all__ = ["NoteNavigator"]

_EXTERNAL_PREFIXES = ("http://", "https://", "mailto:")


class NoteNavigator:
    """Resolves link targets against the vault and hands them to the system.

    Parameters
    ----------
    query : VaultQuery
        Used to resolve internal targets to note files.
    opener : Callable[[str], object]
        Opens a URL; defaults to :func:`webbrowser.open`.
    """

    def __init__(self, query: VaultQuery, opener: Optional[Callable[[str], object]] = None) -> None:
        self._query = query
        self._opener = opener or webbrowser.open

    def open(self, target: str, source_path: Optional[str] = None) -> None:
        """Open ``target`` (a URL, a vault path or a note name). Never raises."""
        if not target:
            return
        if target.startswith(_EXTERNAL_PREFIXES):
            self._launch(target)
            return
        record = self._query.resolve(target)
        if record is None:
            logger.warning("Unresolved link '%s' (from %s)", target, source_path or "?")
            return
        self._launch(record.path.as_uri())

    def _launch(self, url: str) -> None:
        try:
            self._opener(url)
        except Exception as exc:
            logger.error("Could not open %s: %s", url, exc)

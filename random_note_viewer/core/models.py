from __future__ import annotations

"""Shared data structures used across the Random Note Viewer core.

Intentionally free of UI / I/O code so the contained objects can be reused
in any context (unit-tests, CLI, GUI, etc.).
"""

from dataclasses import dataclass
from pathlib import Path

__all__ = ["NoteRecord"]


@dataclass(frozen=True)
class NoteRecord:
    """One candidate note exposed by the vault query.

    Attributes
    ----------
    path
        Absolute path of the note file.
    vault_root
        Folder the query scanned; ``relative_path`` is computed against it.
    mtime
        Modification time captured at scan time. Used by the metadata cache
        and by the query to detect changes between refreshes.
    """

    path: Path
    vault_root: Path
    mtime: float = 0.0

    @property
    def basename(self) -> str:
        """Display name: the file name without its extension."""
        return self.path.stem

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def extension(self) -> str:
        return self.path.suffix.lstrip(".").lower()

    @property
    def relative_path(self) -> str:
        """Vault-relative POSIX path, the stable identifier of the note."""
        try:
            return self.path.relative_to(self.vault_root).as_posix()
        except ValueError:
            return self.path.as_posix()

from __future__ import annotations

"""Read access to note files."""

import logging

from random_note_viewer.core.exceptions import NoteReadError
from random_note_viewer.core.models import NoteRecord

logger = logging.getLogger(__name__)

__all__ = ["VaultStorage"]


class VaultStorage:
    """Reads note text from disk.

    Safe to call from a worker thread: it touches no shared state.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def read(self, record: NoteRecord) -> str:
        """Return the full text of ``record``.

        Raises:
            NoteReadError: the file is missing, unreadable or not valid
                text in the configured encoding.
        """
        try:
            return record.path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise NoteReadError(
                f"Could not read note: {exc}", path=record.relative_path, cause=exc
            ) from exc

from __future__ import annotations

"""Exception classes for Random Note Viewer.

Services wrap low-level failures (file system, parser, renderer) into these
types so that the view controller can handle them in one place and log a
message naming the affected note.
"""

from typing import Optional

__all__ = ["ViewerError", "NoteReadError", "NoteRenderError", "ConfigError"]


class ViewerError(Exception):
    """Base exception for all viewer errors."""

    def __init__(self, message: str, path: Optional[str] = None,
                 cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.path = path
        self.cause = cause

    def __str__(self) -> str:
        if self.path:
            return f"[{self.path}] {super().__str__()}"
        return super().__str__()


class NoteReadError(ViewerError):
    """Raised when a note's content cannot be read (missing, locked, undecodable)."""
    pass


class NoteRenderError(ViewerError):
    """Raised when a note's body cannot be converted or displayed."""
    pass


class ConfigError(ViewerError):
    """Raised when a configuration value has the wrong type or shape."""
    pass

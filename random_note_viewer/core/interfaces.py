from __future__ import annotations

"""Capability interfaces between the view and its collaborators.

The view does not inherit from a host framework. It is composed against
two narrow capabilities (receiving record-set updates and owning nested
disposable scopes) plus the collaborator contracts it calls into.
"""

from typing import Any, Callable, Mapping, Optional, Protocol, Sequence, TYPE_CHECKING, runtime_checkable

if TYPE_CHECKING:
    from .models import NoteRecord
    from .render_scope import RenderScope

__all__ = [
    "DataSubscriber",
    "ChildScopeOwner",
    "NoteStorage",
    "MetadataSource",
    "ContentRenderer",
    "Navigator",
    "ThreadRunner",
]


# work_fn runs off the UI thread; done_fn receives its result back on the UI thread
ThreadRunner = Callable[[Callable[[], Any], Callable[[Any], None]], None]


@runtime_checkable
class DataSubscriber(Protocol):
    """Receives the complete record set every time the query result changes.

    The set is replaced wholesale on each call; subscribers must not keep
    references to records from a previous delivery.
    """

    def on_data_updated(self, records: Sequence["NoteRecord"]) -> None:
        ...


@runtime_checkable
class ChildScopeOwner(Protocol):
    """Owns nested disposable scopes and releases them with itself."""

    def add_child(self, scope: "RenderScope") -> "RenderScope":
        ...

    def remove_child(self, scope: "RenderScope") -> None:
        ...


@runtime_checkable
class NoteStorage(Protocol):
    """Reads the raw text of a note.

    Raises:
        NoteReadError: the note is missing, locked or cannot be decoded.
    """

    def read(self, record: "NoteRecord") -> str:
        ...


@runtime_checkable
class MetadataSource(Protocol):
    """Synchronous, read-only access to a note's parsed frontmatter."""

    def get_metadata(self, record: "NoteRecord") -> Optional[Mapping[str, Any]]:
        ...


@runtime_checkable
class ContentRenderer(Protocol):
    """Renders a note body into a container owned by ``scope``.

    Raises:
        NoteRenderError: conversion or display failed.
    """

    def render(self, content: str, source_path: str, container: Any, scope: "RenderScope") -> None:
        ...


@runtime_checkable
class Navigator(Protocol):
    """Opens a note or URL. Fire-and-forget."""

    def open(self, target: str, source_path: Optional[str] = None) -> None:
        ...

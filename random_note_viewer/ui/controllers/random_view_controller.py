from __future__ import annotations

"""Controller for the random note view."""

import logging
from typing import Any, Callable, List, Optional, Sequence

from random_note_viewer.core.interfaces import (
    ContentRenderer,
    MetadataSource,
    Navigator,
    NoteStorage,
    ThreadRunner,
)
from random_note_viewer.core.metadata_renderer import FragmentKind, render_metadata
from random_note_viewer.core.models import NoteRecord
from random_note_viewer.core.render_scope import RenderScope, ScopeSlot
from random_note_viewer.core.selection import RandomSelector

logger = logging.getLogger(__name__)

__all__ = [
    "RandomViewController",
    "BUTTON_LABEL",
    "EMPTY_MESSAGE",
    "PROPERTIES_HEADING",
    "failure_message",
]

BUTTON_LABEL = "🎲 Random"
EMPTY_MESSAGE = "No files to display"
PROPERTIES_HEADING = "Properties"


def failure_message(record: NoteRecord) -> str:
    return f"Failed to render file: {record.basename}"


def _run_inline(work_fn: Callable[[], Any], done_fn: Callable[[Any], None]) -> None:
    done_fn(work_fn())


class RandomViewController:
    """Drives the pick-and-render cycle of one random view panel.

    The content region always shows exactly one of: the empty-state message,
    a rendered note, or a failure line naming the note.

    Parameters
    ----------
    panel : object
        Panel with ``clear``, ``build_button_region``, ``build_content_region``,
        ``clear_content``, ``show_message`` and ``create_document_view``
        (see :class:`~random_note_viewer.ui.widgets.random_panel.RandomPanel`).
    storage : NoteStorage
        Reads note text; called through ``run_in_thread``.
    metadata_cache : MetadataSource
        Frontmatter lookup; synchronous.
    renderer : ContentRenderer
        Renders the note body into the document body container.
    navigator : Navigator
        Opens notes and URLs when links are clicked.
    run_in_thread : Callable, optional
        ``run_in_thread(work_fn, done_fn)``; runs ``work_fn`` off the UI
        thread and delivers its result to ``done_fn`` on the UI thread.
        Defaults to running both inline.
    selector : RandomSelector, optional
        Random selection policy; inject a seeded one for deterministic runs.

    Notes
    -----
    - No Tkinter code appears in this module; widgets are reached only
      through the panel and the objects it returns.
    - A draw renders only if it is still the most recent draw when its read
      completes. Superseded draws are dropped silently.
    """

    def __init__(
        self,
        panel: Any,
        storage: NoteStorage,
        metadata_cache: MetadataSource,
        renderer: ContentRenderer,
        navigator: Navigator,
        *,
        run_in_thread: Optional[ThreadRunner] = None,
        selector: Optional[RandomSelector] = None,
    ) -> None:
        # Dependencies
        self._panel = panel
        self._storage = storage
        self._metadata = metadata_cache
        self._renderer = renderer
        self._navigator = navigator
        self._run_in_thread: ThreadRunner = run_in_thread or _run_inline
        self._selector = selector or RandomSelector()

        # State
        self._records: List[NoteRecord] = []
        self._children: List[RenderScope] = []
        self._slot = ScopeSlot(owner=self)
        self._draw_seq: int = 0
        self._closed = False

    # ---------------------------------------------------------------------------------
    # Capabilities
    # ---------------------------------------------------------------------------------

    def add_child(self, scope: RenderScope) -> RenderScope:
        if scope not in self._children:
            self._children.append(scope)
        return scope

    def remove_child(self, scope: RenderScope) -> None:
        try:
            self._children.remove(scope)
        except ValueError:
            pass

    @property
    def records(self) -> List[NoteRecord]:
        return list(self._records)

    @property
    def current_scope(self) -> Optional[RenderScope]:
        return self._slot.current

    # ---------------------------------------------------------------------------------
    # Public API
    # ---------------------------------------------------------------------------------

    def on_data_updated(self, records: Sequence[NoteRecord]) -> None:
        """Replace the record set and rebuild the panel.

        Performs one draw immediately when ``records`` is non-empty, else
        shows the empty-state message.
        """
        if self._closed:
            return
        self._records = list(records or [])
        self._invalidate()

        self._panel.clear()
        self._panel.build_button_region(BUTTON_LABEL, self.draw)
        self._panel.build_content_region()

        if self._records:
            self.draw()
        else:
            self._panel.show_message(EMPTY_MESSAGE)

    def draw(self) -> None:
        """Pick a random note and render it into a fresh render scope.

        The previous scope is disposed before the read starts, so while a read
        is pending the old note stays on screen with its title and property
        links already unbound. The content region is only rebuilt when the
        read completes.
        """
        if self._closed:
            return
        if not self._records:
            self._invalidate()
            self._show_empty_state()
            return

        record = self._selector.choose(self._records)
        if record is None:
            return

        self._draw_seq += 1
        draw_id = self._draw_seq
        scope = self._slot.replace(RenderScope(label=record.relative_path))
        logger.debug("Draw %d: %s", draw_id, record.relative_path)

        storage = self._storage

        def _work():
            try:
                return ("ok", storage.read(record))
            except Exception as ex:
                return ("err", ex)

        def _done(result):
            if not self._is_current(draw_id, scope):
                logger.debug("Draw %d superseded; discarding %s", draw_id, record.relative_path)
                return
            kind, payload = (result if isinstance(result, tuple) and len(result) == 2 else ("err", None))
            try:
                if kind == "err":
                    if isinstance(payload, BaseException):
                        raise payload
                    raise RuntimeError("Read returned no result")
                self._render_document(record, payload, scope)
            except Exception as exc:
                self._show_error(record, exc, scope)

        self._run_in_thread(_work, _done)

    def close(self) -> None:
        """Tear the view down: dispose the live scope and every child scope."""
        if self._closed:
            return
        self._closed = True
        self._invalidate()
        for child in list(self._children):
            child.dispose()
        self._children.clear()

    # ---------------------------------------------------------------------------------
    # Internal helpers
    # ---------------------------------------------------------------------------------

    def _invalidate(self) -> None:
        """Retire the live scope so pending draws can no longer render."""
        self._draw_seq += 1
        self._slot.clear()

    def _is_current(self, draw_id: int, scope: RenderScope) -> bool:
        return not self._closed and draw_id == self._draw_seq and self._slot.is_live(scope)

    def _show_empty_state(self) -> None:
        self._panel.clear_content()
        self._panel.show_message(EMPTY_MESSAGE)

    def _render_document(self, record: NoteRecord, content: str, scope: RenderScope) -> None:
        self._panel.clear_content()
        view = self._panel.create_document_view()
        self._render_title(view.header, record, scope)
        self._render_metadata(view.header, record, scope)
        self._renderer.render(content, record.relative_path, view.body, scope)

    def _render_title(self, header: Any, record: NoteRecord, scope: RenderScope) -> None:
        link = header.add_title(record.basename, record.relative_path)
        source = record.relative_path

        def _on_click(_event=None):
            self._navigator.open(source, source)
            return "break"  # suppress further handling of the click

        scope.register_event(link, "<Button-1>", _on_click)

    def _render_metadata(self, header: Any, record: NoteRecord, scope: RenderScope) -> None:
        entries = render_metadata(self._metadata.get_metadata(record))
        if not entries:
            return
        table = header.add_properties(PROPERTIES_HEADING)
        source = record.relative_path
        for key, fragment in entries:
            cell = table.add_property(key)
            if not fragment.is_link:
                cell.show_text(fragment.text)
                continue
            link = cell.show_link(
                fragment.text,
                fragment.target,
                external=fragment.kind is FragmentKind.EXTERNAL_LINK,
            )
            target = fragment.target

            def _on_click(_event=None, target=target):
                self._navigator.open(target, source)
                return "break"

            scope.register_event(link, "<Button-1>", _on_click)

    def _show_error(self, record: NoteRecord, error: BaseException, scope: RenderScope) -> None:
        logger.error(
            "Failed to render file: %s (%s)", record.basename, record.relative_path,
            exc_info=(type(error), error, error.__traceback__),
        )
        # Release listeners registered by the partial render before discarding it
        scope.dispose()
        self._panel.clear_content()
        self._panel.show_message(failure_message(record))

# -*- coding: utf-8 -*-
"""Tk-based GUI front-end for Random Note Viewer.

Exposes the :class:`RandomNoteApp` widget, which is instantiated by ``run.py``.
It wires the vault query, storage, metadata cache, renderer and navigator to
one :class:`RandomViewController` and keeps the record set fresh by polling
the vault.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any, Callable, Optional

import tkinter as tk
from tkinter import ttk

from random_note_viewer.config import ViewSettings
from random_note_viewer.core.services import (
    MarkdownRenderer,
    MetadataCache,
    NoteNavigator,
    VaultQuery,
    VaultStorage,
)
from random_note_viewer.ui.controllers.random_view_controller import RandomViewController
from random_note_viewer.ui.widgets.random_panel import RandomPanel

logger = logging.getLogger(__name__)

__all__ = ["RandomNoteApp", "VIEW_TYPE", "VIEW_NAME"]

VIEW_TYPE = "random-view"
VIEW_NAME = "Random"


class RandomNoteApp:
    """Main application object wrapping all Tkinter UI components."""

    def __init__(self, root: tk.Tk, vault_dir: Path | str, settings: Optional[ViewSettings] = None) -> None:
        self.root = root
        self.settings = settings or ViewSettings()
        self._poll_job: Optional[str] = None

        # Services
        self.metadata_cache = MetadataCache()
        self.query = VaultQuery(
            vault_dir,
            pattern=self.settings.pattern,
            exclude_dirs=self.settings.exclude_dirs,
            query_filter=self.settings.query_filter,
            metadata_cache=self.metadata_cache,
        )
        self.storage = VaultStorage(encoding=self.settings.encoding)
        self.navigator = NoteNavigator(self.query)
        self.renderer = MarkdownRenderer(
            link_handler=self.navigator.open,
            extensions=self.settings.markdown_extensions,
        )

        # --- Widgets -----------------------------------------------------
        container = ttk.Frame(root)
        container.pack(fill="both", expand=True)
        self.panel = RandomPanel(container)
        self.panel.pack(fill="both", expand=True)

        self.controller = RandomViewController(
            self.panel,
            self.storage,
            self.metadata_cache,
            self.renderer,
            self.navigator,
            run_in_thread=self._run_in_thread,
        )
        self.query.subscribe(self.controller)

        logger.info("Random view '%s' on vault %s", VIEW_TYPE, self.query.vault_root)
        self.query.refresh(force=True)
        self._schedule_poll()
        self.root.protocol("WM_DELETE_WINDOW", self.on_close)

    # ---------------------------------------------------------------------------------
    # Threading helpers
    # ---------------------------------------------------------------------------------

    def _run_in_thread(self, work_fn: Callable[[], Any], done_fn: Optional[Callable[[Any], None]] = None) -> None:
        """Run work_fn in a daemon thread; deliver result to done_fn via Tk after()."""
        def _runner():
            result = work_fn()
            try:
                self.root.after(0, (lambda r=result: done_fn(r) if callable(done_fn) else None))
            except (RuntimeError, tk.TclError):
                # Main loop already gone (window closed during a read)
                logger.debug("Dropping read result after shutdown")

        threading.Thread(target=_runner, daemon=True).start()

    # ---------------------------------------------------------------------------------
    # Vault polling
    # ---------------------------------------------------------------------------------

    def _schedule_poll(self) -> None:
        interval = self.settings.refresh_interval_ms
        if interval <= 0:
            return
        self._poll_job = self.root.after(interval, self._poll)

    def _poll(self) -> None:
        self._poll_job = None
        try:
            self.query.refresh()
        except OSError as exc:
            logger.error("Vault refresh failed: %s", exc)
        self._schedule_poll()

    # ---------------------------------------------------------------------------------
    # Shutdown
    # ---------------------------------------------------------------------------------

    def on_close(self) -> None:
        if self._poll_job is not None:
            try:
                self.root.after_cancel(self._poll_job)
            except tk.TclError:
                pass
            self._poll_job = None
        self.query.unsubscribe(self.controller)
        self.controller.close()
        self.panel.clear()
        self.root.destroy()
        logger.info("===== Application terminated =====")

# -*- coding: utf-8 -*-
"""RandomPanel widget.

The visual container of the random view. It holds a button region (one
trigger button, stable across draws) and a content region that is cleared
and rebuilt on every draw.

Public API (UI-only, no services/I/O):
- clear() -> None
- build_button_region(label, on_activate) -> ttk.Button
- build_content_region() -> ttk.Frame
- clear_content() -> None
- show_message(text) -> None
- create_document_view() -> DocumentView
"""

from __future__ import annotations

from typing import Callable, Optional
import tkinter as tk
from tkinter import ttk

from random_note_viewer.ui.widgets.document_view import DocumentView


__all__ = ["RandomPanel"]


class RandomPanel(ttk.Frame):
    """Button row on top, content region below."""

    def __init__(self, parent: tk.Widget, **kwargs) -> None:
        super().__init__(parent, **kwargs)
        self.columnconfigure(0, weight=1)
        self.rowconfigure(1, weight=1)

        self._button_region: Optional[ttk.Frame] = None
        self._button: Optional[ttk.Button] = None
        self._content: Optional[ttk.Frame] = None

    # Public API

    def clear(self) -> None:
        """Destroy both regions."""
        for child in self.winfo_children():
            child.destroy()
        self._button_region = None
        self._button = None
        self._content = None

    def build_button_region(self, label: str, on_activate: Callable[[], None]) -> ttk.Button:
        self._button_region = ttk.Frame(self, padding=(8, 8, 8, 4))
        self._button_region.grid(row=0, column=0, sticky="ew")
        self._button = ttk.Button(self._button_region, text=label, command=on_activate)
        self._button.pack(side="left")
        return self._button

    def build_content_region(self) -> ttk.Frame:
        self._content = ttk.Frame(self)
        self._content.grid(row=1, column=0, sticky="nsew")
        self._content.columnconfigure(0, weight=1)
        self._content.rowconfigure(0, weight=1)
        return self._content

    def clear_content(self) -> None:
        """Destroy everything inside the content region."""
        content = self._ensure_content()
        for child in content.winfo_children():
            child.destroy()

    def show_message(self, text: str) -> None:
        """Show a single line of text in the content region."""
        ttk.Label(self._ensure_content(), text=text, padding=(8, 8)).grid(row=0, column=0, sticky="nw")

    def create_document_view(self) -> DocumentView:
        view = DocumentView(self._ensure_content())
        view.grid(row=0, column=0, sticky="nsew")
        return view

    # Internals

    def _ensure_content(self) -> ttk.Frame:
        if self._content is None:
            return self.build_content_region()
        return self._content

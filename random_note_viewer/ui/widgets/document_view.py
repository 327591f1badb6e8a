# -*- coding: utf-8 -*-
"""DocumentView widget.

Presentation-only layout for one rendered note, shaped like a reading view:
- Header: the note title as a link, then an optional "Properties" table.
- Body: a tkinterweb HtmlFrame when available, or a read-only ScrolledText.

Public API (UI-only, no services/I/O):
- DocumentView.header -> DocumentHeader
    - add_title(text, href) -> LinkLabel
    - add_properties(heading) -> PropertiesTable
        - add_property(key) -> PropertyValue
            - show_text(text) -> None
            - show_link(text, target, external) -> LinkLabel
- DocumentView.body -> DocumentBody
    - html_enabled: bool
    - set_content(text) -> None
    - set_link_handler(handler) -> None

Click handling is not wired here: callers bind on the returned link labels so
that bindings can be owned (and released) by a render scope.
"""

from __future__ import annotations

from typing import Callable, Optional
import tkinter as tk
from tkinter import ttk
from tkinter.scrolledtext import ScrolledText

from random_note_viewer.core.services.markdown_renderer import LINK_BASE_URL

# HTML rendering support (tkinterweb)
try:
    from tkinterweb import HtmlFrame  # type: ignore
    HTML_WEB_AVAILABLE = True
except ImportError:
    HTML_WEB_AVAILABLE = False
    HtmlFrame = None  # type: ignore


__all__ = [
    "DocumentView",
    "DocumentHeader",
    "DocumentBody",
    "PropertiesTable",
    "PropertyValue",
    "LinkLabel",
]

INTERNAL_LINK_COLOR = "#7b3fe4"
EXTERNAL_LINK_COLOR = "#0078b3"


class LinkLabel(ttk.Label):
    """A label that looks like a hyperlink. Carries its target in ``href``."""

    def __init__(self, parent: tk.Widget, *, text: str, href: str, external: bool = False,
                 style: Optional[str] = None, **kwargs) -> None:
        style = style or ("ExternalLink.TLabel" if external else "InternalLink.TLabel")
        super().__init__(parent, text=text, cursor="hand2", style=style, **kwargs)
        self.href = href
        self.external = external


def _configure_styles(widget: tk.Widget) -> None:
    style = ttk.Style(widget)
    style.configure("InternalLink.TLabel", foreground=INTERNAL_LINK_COLOR)
    style.configure("ExternalLink.TLabel", foreground=EXTERNAL_LINK_COLOR, font=("", 10, "underline"))
    style.configure("InlineTitle.TLabel", foreground="", font=("", 18, "bold"))
    style.configure("PropertiesHeading.TLabel", foreground="gray", font=("", 9, "bold"))
    style.configure("PropertyKey.TLabel", foreground="gray")


class PropertyValue(ttk.Frame):
    """Value cell of one property row."""

    def show_text(self, text: str) -> None:
        ttk.Label(self, text=text, wraplength=460, justify="left").pack(side="left", anchor="w")

    def show_link(self, text: str, target: str, external: bool = False) -> LinkLabel:
        link = LinkLabel(self, text=text, href=target, external=external)
        link.pack(side="left", anchor="w")
        return link


class PropertiesTable(ttk.Frame):
    """Heading plus one ``key | value`` row per property."""

    def __init__(self, parent: tk.Widget, *, heading: str = "Properties", **kwargs) -> None:
        super().__init__(parent, **kwargs)
        self.columnconfigure(1, weight=1)
        ttk.Label(self, text=heading, style="PropertiesHeading.TLabel").grid(
            row=0, column=0, columnspan=2, sticky="w", pady=(0, 4)
        )
        self._rows = 0

    def add_property(self, key: str) -> PropertyValue:
        self._rows += 1
        ttk.Label(self, text=key, style="PropertyKey.TLabel").grid(
            row=self._rows, column=0, sticky="nw", padx=(0, 14), pady=1
        )
        value = PropertyValue(self)
        value.grid(row=self._rows, column=1, sticky="ew", pady=1)
        return value


class DocumentHeader(ttk.Frame):
    """Title and metadata region."""

    def add_title(self, text: str, href: str) -> LinkLabel:
        link = LinkLabel(self, text=text, href=href, style="InlineTitle.TLabel")
        link.pack(side="top", anchor="w", pady=(0, 6))
        return link

    def add_properties(self, heading: str = "Properties") -> PropertiesTable:
        table = PropertiesTable(self, heading=heading)
        table.pack(side="top", fill="x", pady=(0, 8))
        return table


class DocumentBody(ttk.Frame):
    """Body region: HTML when tkinterweb is installed, plain text otherwise."""

    def __init__(self, parent: tk.Widget, **kwargs) -> None:
        super().__init__(parent, **kwargs)
        self.columnconfigure(0, weight=1)
        self.rowconfigure(0, weight=1)
        self._link_handler: Optional[Callable[[str], None]] = None
        self.html_enabled = False

        if HTML_WEB_AVAILABLE:
            try:
                self._view = HtmlFrame(
                    self,
                    horizontal_scrollbar="auto",  # type: ignore[arg-type]
                    vertical_scrollbar="auto",    # type: ignore[arg-type]
                    messages_enabled=False,        # silence debug banner
                    on_link_click=self._on_link_click,
                )
                self.html_enabled = True
            except (tk.TclError, TypeError):
                # Tkhtml missing, or a tkinterweb release with other options
                self.html_enabled = False

        if not self.html_enabled:
            self._view = ScrolledText(self, wrap="word", height=20)
            self._view.configure(state="disabled")

        self._view.grid(row=0, column=0, sticky="nsew")

    def set_content(self, text: str) -> None:
        if self.html_enabled:
            self._view.load_html(text or "", base_url=LINK_BASE_URL)
            return
        self._view.configure(state="normal")
        self._view.delete("1.0", "end")
        self._view.insert("1.0", text or "")
        self._view.configure(state="disabled")

    def set_link_handler(self, handler: Optional[Callable[[str], None]]) -> None:
        self._link_handler = handler

    def _on_link_click(self, url: str) -> None:
        handler = self._link_handler
        if callable(handler):
            handler(url)


class DocumentView(ttk.Frame):
    """Header followed by body, the layout of one rendered note."""

    def __init__(self, parent: tk.Widget, **kwargs) -> None:
        super().__init__(parent, **kwargs)
        _configure_styles(self)
        self.columnconfigure(0, weight=1)
        self.rowconfigure(1, weight=1)

        self.header = DocumentHeader(self, padding=(8, 8, 8, 0))
        self.header.grid(row=0, column=0, sticky="ew")

        self.body = DocumentBody(self)
        self.body.grid(row=1, column=0, sticky="nsew", padx=4, pady=(0, 4))

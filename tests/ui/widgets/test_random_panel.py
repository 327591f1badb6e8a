import tkinter as tk
from tkinter import ttk

import pytest

from random_note_viewer.core.services.markdown_renderer import MarkdownRenderer
from random_note_viewer.ui.controllers.random_view_controller import (
    BUTTON_LABEL,
    EMPTY_MESSAGE,
    RandomViewController,
)
from random_note_viewer.ui.widgets.document_view import DocumentView, LinkLabel
from random_note_viewer.ui.widgets.random_panel import RandomPanel
from tests.fakes import make_record


def _can_create_tk_root() -> bool:
    try:
        r = tk.Tk()
        r.destroy()
        return True
    except tk.TclError:
        return False


pytestmark = pytest.mark.skipif(
    not _can_create_tk_root(),
    reason="Tkinter root cannot be created in this environment (likely headless CI without display).",
)


@pytest.fixture
def tk_root():
    root = tk.Tk()
    # Avoid showing a window during tests
    root.withdraw()
    yield root
    try:
        root.update_idletasks()
    except tk.TclError:
        pass
    root.destroy()


@pytest.fixture
def real_panel(tk_root):
    panel = RandomPanel(tk_root)
    panel.pack(fill="both", expand=True)
    return panel


def _labels(widget):
    found = []
    for child in widget.winfo_children():
        if isinstance(child, ttk.Label):
            found.append(child)
        found.extend(_labels(child))
    return found


def _texts(widget):
    return [str(label.cget("text")) for label in _labels(widget)]


def test_button_region_invokes_callback(real_panel):
    pressed = []
    button = real_panel.build_button_region("Roll", lambda: pressed.append(True))

    assert str(button.cget("text")) == "Roll"
    button.invoke()
    assert pressed == [True]


def test_message_and_clear_content(real_panel):
    content = real_panel.build_content_region()
    real_panel.show_message("Nothing here")
    assert _texts(content) == ["Nothing here"]

    real_panel.clear_content()
    assert content.winfo_children() == []


def test_show_message_creates_content_region_on_demand(real_panel):
    real_panel.show_message("Hello")
    assert "Hello" in _texts(real_panel)


def test_clear_destroys_both_regions(real_panel):
    real_panel.build_button_region("Roll", lambda: None)
    real_panel.build_content_region()

    real_panel.clear()

    assert real_panel.winfo_children() == []


def test_document_view_header_layout(real_panel):
    real_panel.build_content_region()
    view = real_panel.create_document_view()
    assert isinstance(view, DocumentView)

    title = view.header.add_title("Alpha", "notes/Alpha.md")
    table = view.header.add_properties("Properties")
    table.add_property("status").show_text("draft")
    internal = table.add_property("up").show_link("Index", "Index")
    external = table.add_property("site").show_link("https://example.com", "https://example.com", external=True)

    assert isinstance(title, LinkLabel) and title.href == "notes/Alpha.md"
    assert not internal.external and internal.href == "Index"
    assert external.external
    assert str(external.cget("style")) == "ExternalLink.TLabel"
    assert _texts(view.header) == [
        "Alpha", "Properties", "status", "draft", "up", "Index", "site", "https://example.com",
    ]


def test_document_body_content_and_link_handler(real_panel):
    real_panel.build_content_region()
    body = real_panel.create_document_view().body
    clicked = []

    body.set_content("<p>hello</p>" if body.html_enabled else "hello")
    if not body.html_enabled:
        assert body._view.get("1.0", "end-1c") == "hello"

    body.set_link_handler(clicked.append)
    body._on_link_click("Index")
    body.set_link_handler(None)
    body._on_link_click("Ignored")

    assert clicked == ["Index"]


def test_controller_drives_real_panel(real_panel, storage, metadata, navigator):
    metadata.data["Alpha"] = {"up": "[[Index]]"}
    ctrl = RandomViewController(real_panel, storage, metadata, MarkdownRenderer(), navigator)

    ctrl.on_data_updated([make_record("Alpha")])

    assert BUTTON_LABEL in [str(w.cget("text")) for w in real_panel.winfo_children()[0].winfo_children()]
    links = [w for w in _labels(real_panel) if isinstance(w, LinkLabel)]
    assert [w.href for w in links] == ["Alpha.md", "Index"]
    assert all(w.bind("<Button-1>") for w in links)

    ctrl.current_scope.dispose()
    assert [w.bind("<Button-1>") for w in links] == ["", ""]

    ctrl.on_data_updated([])
    assert _texts(real_panel) == [EMPTY_MESSAGE]

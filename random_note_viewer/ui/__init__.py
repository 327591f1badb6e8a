"""Random Note Viewer UI package.

Tkinter-based panel and document widgets (``ui.widgets``) and the
toolkit-free controller that drives them (``ui.controllers``). Widgets are
not imported here so the controller stays usable without a Tk installation.
"""

from .controllers.random_view_controller import RandomViewController  # noqa: F401

__all__: list[str] = [
    "RandomViewController",
]

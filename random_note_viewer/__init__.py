"""Top-level package for Random Note Viewer.

The core package is GUI-agnostic: models, services and the metadata
renderer can be used without Tk. The Tk front-end lives in ``ui`` and is
launched by ``run.py``.
"""

from .core.models import NoteRecord  # re-export for convenience

__all__: list[str] = [
    "NoteRecord",
]

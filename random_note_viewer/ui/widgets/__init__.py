"""UI widgets package.

Presentation-only Tk components for the random view.
"""

from .document_view import DocumentView  # noqa: F401
from .random_panel import RandomPanel  # noqa: F401

__all__ = ["DocumentView", "RandomPanel"]

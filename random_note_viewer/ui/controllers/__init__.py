"""UI controllers package.

Controllers mediate between the panel widgets and the core services. They
contain no toolkit code.
"""

from .random_view_controller import RandomViewController  # noqa: F401

__all__: list[str] = ["RandomViewController"]

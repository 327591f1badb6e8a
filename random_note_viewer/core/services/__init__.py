from __future__ import annotations

"""Collaborator services used by the random view.

Vault query (record set provider), storage, metadata cache, Markdown
renderer and navigation.
"""

from .metadata_cache import MetadataCache  # noqa: F401
from .vault_storage import VaultStorage  # noqa: F401
from .vault_query import QueryFilter, VaultQuery  # noqa: F401
from .markdown_renderer import MarkdownRenderer  # noqa: F401
from .navigation import NoteNavigator  # noqa: F401

__all__: list[str] = [
    "MetadataCache",
    "VaultStorage",
    "QueryFilter",
    "VaultQuery",
    "MarkdownRenderer",
    "NoteNavigator",
]

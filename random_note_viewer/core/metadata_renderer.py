from __future__ import annotations

"""Typed rendering of raw frontmatter values.

Maps one raw value to a :class:`ValueFragment`, first match wins:

1. ``"[[target]]"``: internal link, text and target are the inner string.
2. A string starting with ``http``: external link to the raw string.
3. Any other string: plain text, verbatim.
4. A list or tuple: plain text, elements joined with ``", "``.
5. Anything else: plain text of ``str(value)``; booleans and None keep
   their YAML spelling (``true``, ``false``, ``null``).

Pure functions, no toolkit code.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Mapping, Optional, Tuple

__all__ = [
    "FragmentKind",
    "ValueFragment",
    "render_metadata_value",
    "render_metadata",
    "LIST_SEPARATOR",
]

LIST_SEPARATOR = ", "

# YAML spellings, as written in the frontmatter
_YAML_SCALARS = {True: "true", False: "false", None: "null"}


class FragmentKind(str, Enum):
    TEXT = "text"
    INTERNAL_LINK = "internal-link"
    EXTERNAL_LINK = "external-link"


@dataclass(frozen=True)
class ValueFragment:
    """A rendered metadata value.

    Attributes
    ----------
    kind : FragmentKind
        Visual type; internal and external links are styled separately.
    text : str
        Visible text.
    target : str, optional
        Link target for link kinds, None for plain text.
    """

    kind: FragmentKind
    text: str
    target: Optional[str] = None

    @property
    def is_link(self) -> bool:
        return self.kind is not FragmentKind.TEXT


def _as_text(value: Any) -> str:
    if value is None or isinstance(value, bool):
        return _YAML_SCALARS[value]
    return str(value)


def render_metadata_value(value: Any) -> ValueFragment:
    """Render one raw frontmatter value. Never raises."""
    if isinstance(value, str):
        if value.startswith("[[") and value.endswith("]]"):
            link = value[2:-2]
            return ValueFragment(FragmentKind.INTERNAL_LINK, link, link)
        if value.startswith("http"):
            return ValueFragment(FragmentKind.EXTERNAL_LINK, value, value)
        return ValueFragment(FragmentKind.TEXT, value)
    if isinstance(value, (list, tuple)):
        return ValueFragment(FragmentKind.TEXT, LIST_SEPARATOR.join(_as_text(item) for item in value))
    return ValueFragment(FragmentKind.TEXT, _as_text(value))


def render_metadata(metadata: Optional[Mapping[str, Any]]) -> List[Tuple[str, ValueFragment]]:
    """Render every entry of ``metadata`` in mapping order."""
    if not metadata:
        return []
    return [(str(key), render_metadata_value(value)) for key, value in metadata.items()]

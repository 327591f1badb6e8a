from __future__ import annotations

"""Markdown body rendering.

Converts a note body to HTML with Python-Markdown after rewriting wiki
links (``[[target]]``, ``[[target|alias]]``, ``[[target#heading]]`` and
embeds ``![[...]]``) into internal anchors. Containers that cannot display
HTML receive the text content extracted with ``lxml.html``.

Container contract (duck-typed):
- ``html_enabled: bool``
- ``set_content(text: str) -> None``
  HTML containers load it with ``LINK_BASE_URL`` as base URL.
- ``set_link_handler(handler: Optional[Callable[[str], None]]) -> None``
"""

import html
import logging
import re
from typing import Any, Callable, Iterable, List, Optional
from urllib.parse import quote, unquote

import markdown
from lxml import html as lxml_html

from random_note_viewer.core.exceptions import NoteRenderError
from random_note_viewer.core.render_scope import RenderScope
from random_note_viewer.core.services.metadata_cache import split_frontmatter

logger = logging.getLogger(__name__)

__all__ = ["MarkdownRenderer", "DEFAULT_EXTENSIONS", "LINK_BASE_URL", "rewrite_wikilinks"]

DEFAULT_EXTENSIONS = ("extra", "sane_lists")
# Base URL handed to the HTML widget; clicked hrefs come back joined onto it
LINK_BASE_URL = "note:///"

_WIKILINK_RE = re.compile(
    r"(?P<embed>!?)\[\[(?P<target>[^\]\|#]*)(?P<heading>#[^\]\|]*)?(?:\|(?P<alias>[^\]]*))?\]\]"
)
_EXTERNAL_PREFIXES = ("http://", "https://", "mailto:")


def _wikilink_anchor(match: "re.Match[str]") -> str:
    target = match.group("target").strip()
    heading = (match.group("heading") or "").lstrip("#").strip()
    alias = (match.group("alias") or "").strip()
    label = alias or (f"{target} > {heading}" if target and heading else target or heading)
    href = quote(target, safe="/")
    if heading:
        href = f"{href}#{quote(heading)}"
    css = "internal-link internal-embed" if match.group("embed") else "internal-link"
    return f'<a class="{css}" href="{href}">{html.escape(label)}</a>'


def rewrite_wikilinks(text: str) -> str:
    """Replace wiki links in ``text`` with HTML anchors."""
    return _WIKILINK_RE.sub(_wikilink_anchor, text)


class MarkdownRenderer:
    """Renders note bodies into a document body container.

    Parameters
    ----------
    link_handler : Callable[[str], None], optional
        Called with the target of a clicked link. Internal targets are
        URL-unquoted and stripped of their ``#heading`` part.
    extensions : Iterable[str]
        Python-Markdown extension names.
    """

    def __init__(
        self,
        link_handler: Optional[Callable[[str], None]] = None,
        extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    ) -> None:
        self._link_handler = link_handler
        self._extensions: List[str] = list(extensions)

    # -----------------------------
    # Public API
    # -----------------------------

    def to_html(self, content: str) -> str:
        """Convert a full note (frontmatter included) to an HTML fragment."""
        _raw, body = split_frontmatter(content or "")
        return markdown.markdown(rewrite_wikilinks(body), extensions=self._extensions)

    def render(self, content: str, source_path: str, container: Any, scope: RenderScope) -> None:
        """Render ``content`` into ``container``; hooks are owned by ``scope``.

        Raises:
            NoteRenderError: conversion failed or the container rejected
                the content.
        """
        try:
            html_text = self.to_html(content)
            if getattr(container, "html_enabled", False):
                container.set_content(html_text)
            else:
                container.set_content(self._plain_text(html_text))
            container.set_link_handler(self._make_link_handler(source_path))
            scope.register(lambda: container.set_link_handler(None))
        except NoteRenderError:
            raise
        except Exception as exc:
            raise NoteRenderError(f"Could not render note: {exc}", path=source_path, cause=exc) from exc

    # -----------------------------
    # Internals
    # -----------------------------

    @staticmethod
    def _plain_text(html_text: str) -> str:
        if not html_text.strip():
            return ""
        root = lxml_html.fragment_fromstring(html_text, create_parent="div")
        for block in root.iter("p", "li", "h1", "h2", "h3", "h4", "h5", "h6", "pre", "tr"):
            if not (block.tail or "").startswith("\n"):
                block.tail = "\n" + (block.tail or "")
        return root.text_content().strip()

    def _make_link_handler(self, source_path: str) -> Callable[[str], None]:
        def _on_link(href: str) -> None:
            handler = self._link_handler
            if not callable(handler) or not href:
                return
            if href.startswith(LINK_BASE_URL):
                href = href[len(LINK_BASE_URL):]
            if href.startswith(_EXTERNAL_PREFIXES):
                handler(href)
                return
            target = unquote(href.split("#", 1)[0])
            if not target:
                logger.debug("Ignoring in-page anchor %s in %s", href, source_path)
                return
            handler(target)

        return _on_link

"""Content renderer — README markdown to HTML with resolved image sources."""

from __future__ import annotations

import html
import logging

from bs4 import BeautifulSoup

from readme_gallery.domain.entities import DEFAULT_BRANCH, ReadmeDocument
from readme_gallery.domain.exceptions import RenderUnavailableError
from readme_gallery.domain.ports.markdown_engine import MarkdownEngine
from readme_gallery.services.image_links import raw_base_url, rewrite_tree_images

logger = logging.getLogger(__name__)


def preformatted(text: str) -> str:
    """Escape *text* and wrap it in a ``<pre>`` block."""
    return f"<pre>{html.escape(text)}</pre>"


class ContentRenderer:
    """Renders a :class:`ReadmeDocument` to HTML.

    Without a markdown engine the README is shown verbatim in a ``<pre>``
    block and no image rewriting takes place.
    """

    def __init__(
        self,
        engine: MarkdownEngine | None,
        raw_host: str = "https://raw.githubusercontent.com",
    ) -> None:
        self._engine = engine
        self._raw_host = raw_host

    def to_html(self, text: str) -> str:
        """Render markdown *text*; raises :class:`RenderUnavailableError` without an engine."""
        if self._engine is None:
            raise RenderUnavailableError("No markdown engine configured.")
        return self._engine.render(text)

    def render(self, document: ReadmeDocument) -> str:
        try:
            markup = self.to_html(document.raw_text)
        except RenderUnavailableError:
            logger.info("Markdown engine unavailable — showing %s as plain text", document.ref.full_name)
            return preformatted(document.raw_text)

        soup = BeautifulSoup(markup, "html.parser")
        base = raw_base_url(document.ref, document.default_branch or DEFAULT_BRANCH, self._raw_host)
        changed = rewrite_tree_images(soup, base)
        if changed:
            logger.debug("Rewrote %d rendered image sources for %s", changed, document.ref.full_name)
        return str(soup)

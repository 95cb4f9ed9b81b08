"""markdown-it-py adapter — implements the MarkdownEngine port."""

from __future__ import annotations

from markdown_it import MarkdownIt


class MarkdownItEngine:
    """Concrete ``MarkdownEngine`` with GitHub-flavoured extensions.

    Single newlines become ``<br>``, tables and strikethrough are enabled,
    and raw HTML in the README (``<img>``, ``<p align>``) is passed through.
    """

    def __init__(self) -> None:
        self._md = MarkdownIt(
            "commonmark",
            {"html": True, "breaks": True},
        ).enable("table").enable("strikethrough")

    def render(self, text: str) -> str:
        return self._md.render(text)

"""Port: markdown engine — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol


class MarkdownEngine(Protocol):
    """Black-box markdown renderer: markdown text in, HTML out."""

    def render(self, text: str) -> str:
        """Render *text* to an HTML fragment."""
        ...

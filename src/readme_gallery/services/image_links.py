"""Relative image link rewriting.

Two independent passes share one URL formula:

* :func:`rewrite_markdown_images` runs on the README's markdown source.
* :func:`rewrite_tree_images` runs on the rendered HTML tree, catching
  ``<img>`` tags written as raw HTML or re-emitted by the markdown engine.
"""

from __future__ import annotations

import re

from bs4 import BeautifulSoup

from readme_gallery.domain.value_objects import RepoRef

_RAW_HOST = "https://raw.githubusercontent.com"

# ![alt](path) where path is not already http(s); CommonMark allows
# whitespace inside the parentheses
_MD_IMAGE_RE = re.compile(r"!\[([^\]]*)\]\(\s*(?!https?://)([^)]+?)\s*\)")


def raw_base_url(ref: RepoRef, branch: str, raw_host: str = _RAW_HOST) -> str:
    """``https://<raw-host>/<owner>/<repo>/<branch>``."""
    return f"{raw_host.rstrip('/')}/{ref.owner}/{ref.repo}/{branch}"


def is_absolute(path: str) -> bool:
    return path.startswith(("http://", "https://"))


def clean_path(path: str) -> str:
    """Drop a leading ``./`` and then a leading ``../``."""
    return path.removeprefix("./").removeprefix("../")


def rewrite_markdown_images(text: str, base_url: str) -> str:
    """Point relative ``![alt](path)`` references at *base_url*.

    Rewritten links are absolute, so a second application is a no-op.
    """

    def _replace(m: re.Match[str]) -> str:
        alt, path = m.group(1), m.group(2).strip()
        if not path or is_absolute(path):
            return m.group(0)
        return f"![{alt}]({base_url}/{clean_path(path)})"

    return _MD_IMAGE_RE.sub(_replace, text)


def rewrite_tree_images(soup: BeautifulSoup, base_url: str) -> int:
    """Rewrite relative ``<img src>`` attributes in *soup* in place.

    Returns the number of attributes changed.
    """
    changed = 0
    for img in soup.find_all("img"):
        src = (img.get("src") or "").strip()
        if not src or is_absolute(src):
            continue
        img["src"] = f"{base_url}/{clean_path(src)}"
        changed += 1
    return changed

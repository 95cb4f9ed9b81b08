"""List presenter — configured repositories to list entries.

Pure formatting: nothing here touches the network.  READMEs are fetched
only when a viewer page is opened.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Sequence
from urllib.parse import quote

from readme_gallery.domain.entities import ListEntry, RepoConfigEntry

# encodeURIComponent leaves these unescaped
_URI_SAFE = "!~*'()"

_ISO_DAY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

_FALLBACK_FORMATS = (
    "%Y/%m/%d",
    "%Y.%m.%d",
    "%d %B %Y",
    "%d %b %Y",
    "%B %d, %Y",
    "%b %d, %Y",
    "%a, %d %b %Y %H:%M:%S %z",
)


def _parse_date(value: str) -> datetime | None:
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        pass
    for fmt in _FALLBACK_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    return None


def format_date(value: str | None) -> str:
    """Return *value* as ``YYYY-MM-DD``.

    ``None`` or empty renders as ``-``; strings that cannot be parsed are
    returned unchanged.  Timestamps keep the calendar day of their own
    offset.
    """
    if not value:
        return "-"
    if _ISO_DAY_RE.match(value):
        return value
    parsed = _parse_date(value.strip())
    if parsed is None:
        return value
    return parsed.strftime("%Y-%m-%d")


def build_viewer_url(owner: str, repo: str, title: str, viewer_path: str = "readme-viewer") -> str:
    """``/{viewer_path}/?owner=..&repo=..&title=..`` with every value percent-encoded."""
    path = viewer_path.strip("/")
    return (
        f"/{path}/?owner={quote(owner, safe=_URI_SAFE)}"
        f"&repo={quote(repo, safe=_URI_SAFE)}"
        f"&title={quote(title, safe=_URI_SAFE)}"
    )


def present(entries: Sequence[RepoConfigEntry], viewer_path: str = "readme-viewer") -> list[ListEntry]:
    """Build one :class:`ListEntry` per configured repository, in order."""
    items: list[ListEntry] = []
    for entry in entries:
        title = entry.name or entry.repo
        items.append(
            ListEntry(
                owner=entry.owner,
                repo=entry.repo,
                title=title,
                date=format_date(entry.date),
                url=build_viewer_url(entry.owner, entry.repo, title, viewer_path),
            )
        )
    return items

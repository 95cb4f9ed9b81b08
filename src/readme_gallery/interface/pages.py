"""HTML page rendering for the list and viewer pages."""

from __future__ import annotations

from html import escape
from typing import Sequence

from readme_gallery.domain.entities import ListEntry, ReadmeView

_PAGE = """\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{title}</title>
</head>
<body>
{body}
</body>
</html>
"""


def _page(title: str, body: str) -> str:
    return _PAGE.format(title=escape(title), body=body)


def render_list_item(entry: ListEntry) -> str:
    return (
        '<div class="readme-item">\n'
        '  <div class="readme-item-header">\n'
        '    <h2 class="readme-item-title">\n'
        f'      <a href="{escape(entry.url)}">{escape(entry.title)}</a>\n'
        "    </h2>\n"
        f'    <span class="readme-item-date">{escape(entry.date)}</span>\n'
        "  </div>\n"
        "</div>\n"
    )


def render_list_page(site_title: str, entries: Sequence[ListEntry]) -> str:
    items = "".join(render_list_item(e) for e in entries)
    body = f"<h1>{escape(site_title)}</h1>\n<div id=\"github-readmes\">\n{items}</div>"
    return _page(site_title, body)


def render_viewer_page(view: ReadmeView, back_url: str = "/") -> str:
    header = (
        '<div class="readme-viewer-header">\n'
        f'  <a class="readme-back" href="{escape(back_url)}">&larr; Back</a>\n'
        f'  <h1 class="readme-title">{escape(view.title)}</h1>\n'
    )
    if view.ok:
        header += f'  <span class="readme-date">{escape(view.date)}</span>\n'
        if view.html_url:
            header += (
                f'  <a class="readme-source" href="{escape(view.html_url)}">'
                "View on GitHub</a>\n"
            )
        content = f'<div class="readme-content markdown-body">\n{view.html}\n</div>'
    else:
        content = f'<div class="readme-error">{escape(view.error or "")}</div>'
    header += "</div>\n"
    return _page(view.title, header + content)

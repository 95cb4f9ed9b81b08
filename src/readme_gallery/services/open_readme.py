"""Open-README use case — fetch, render and package a viewer page."""

from __future__ import annotations

from readme_gallery.domain.entities import ReadmeView
from readme_gallery.domain.value_objects import RepoRef
from readme_gallery.services.content_renderer import ContentRenderer
from readme_gallery.services.list_presenter import format_date
from readme_gallery.services.readme_fetcher import ReadmeFetcher


UNAVAILABLE_MESSAGE = "Unable to load the README for this repository."


class OpenReadmeUseCase:
    """Runs :class:`ReadmeFetcher` then :class:`ContentRenderer` for one repository.

    Fetch failures never propagate: the returned :class:`ReadmeView` carries
    an ``error`` instead of content.
    """

    def __init__(self, readme_fetcher: ReadmeFetcher, renderer: ContentRenderer) -> None:
        self._fetcher = readme_fetcher
        self._renderer = renderer

    async def execute(self, ref: RepoRef, title: str | None = None) -> ReadmeView:
        title = title or ref.repo
        document = await self._fetcher.fetch(ref)
        if document is None:
            return ReadmeView(ref=ref, title=title, error=UNAVAILABLE_MESSAGE)

        html = self._renderer.render(document)
        date = document.metadata.date if document.metadata else None
        return ReadmeView(
            ref=ref,
            title=title,
            html=html,
            html_url=document.html_url,
            default_branch=document.default_branch,
            date=format_date(date),
        )

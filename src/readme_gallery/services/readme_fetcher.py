"""README fetcher — payload + metadata in, link-normalised document out."""

from __future__ import annotations

import asyncio
import logging

from readme_gallery.domain.entities import DEFAULT_BRANCH, ReadmeDocument
from readme_gallery.domain.exceptions import ReadmeGalleryError
from readme_gallery.domain.ports.repo_fetcher import RepoFetcher
from readme_gallery.domain.value_objects import RepoRef
from readme_gallery.services.image_links import raw_base_url, rewrite_markdown_images
from readme_gallery.services.metadata_fetcher import RepoMetadataFetcher
from readme_gallery.services.readme_decoder import decode_readme_content

logger = logging.getLogger(__name__)


class ReadmeFetcher:
    """Fetches and decodes a repository README.

    The README payload and the repository metadata are requested
    concurrently.  A failed metadata lookup only costs the branch name
    (``"main"`` is assumed); a failed README fetch or decode yields ``None``.

    Parameters
    ----------
    repo_fetcher:
        Adapter for the GitHub API.
    metadata_fetcher:
        Shared metadata lookup; built from *repo_fetcher* when omitted.
    raw_host:
        Host serving raw repository files.
    """

    def __init__(
        self,
        repo_fetcher: RepoFetcher,
        metadata_fetcher: RepoMetadataFetcher | None = None,
        raw_host: str = "https://raw.githubusercontent.com",
    ) -> None:
        self._fetcher = repo_fetcher
        self._metadata = metadata_fetcher or RepoMetadataFetcher(repo_fetcher)
        self._raw_host = raw_host

    async def fetch(self, ref: RepoRef) -> ReadmeDocument | None:
        payload_result, metadata = await asyncio.gather(
            self._fetcher.fetch_readme(ref),
            self._metadata.fetch(ref),
            return_exceptions=True,
        )
        if isinstance(payload_result, ReadmeGalleryError):
            logger.warning("Error fetching README for %s: %s", ref.full_name, payload_result)
            return None
        if isinstance(payload_result, BaseException):
            raise payload_result
        if isinstance(metadata, BaseException):
            raise metadata

        try:
            text = decode_readme_content(payload_result.content)
        except ReadmeGalleryError as exc:
            logger.warning("Error decoding README for %s: %s", ref.full_name, exc)
            return None

        branch = metadata.default_branch if metadata else DEFAULT_BRANCH
        text = rewrite_markdown_images(text, raw_base_url(ref, branch, self._raw_host))

        logger.info("Fetched README %s for %s (branch %s)", payload_result.name, ref.full_name, branch)
        return ReadmeDocument(
            ref=ref,
            raw_text=text,
            html_url=payload_result.html_url,
            display_name=payload_result.name,
            default_branch=branch,
            metadata=metadata,
        )

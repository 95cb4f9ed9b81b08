"""Repository metadata lookup — default branch and representative date."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from readme_gallery.domain.entities import DEFAULT_BRANCH, RepoMetadata
from readme_gallery.domain.exceptions import DecodeError, ReadmeGalleryError
from readme_gallery.domain.ports.repo_fetcher import RepoFetcher
from readme_gallery.domain.value_objects import RepoRef

logger = logging.getLogger(__name__)


def _optional_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise DecodeError(f"Field {key!r} is {type(value).__name__}, expected a string.")
    return value


def metadata_from_payload(data: dict[str, Any]) -> RepoMetadata:
    """Build :class:`RepoMetadata` from a ``/repos/{owner}/{repo}`` body.

    Date preference: ``created_at``, then ``updated_at``, then now (UTC).
    Raises :class:`DecodeError` when a field is present but not a string.
    """
    date = (
        _optional_str(data, "created_at")
        or _optional_str(data, "updated_at")
        or datetime.now(timezone.utc).isoformat()
    )
    return RepoMetadata(
        default_branch=_optional_str(data, "default_branch") or DEFAULT_BRANCH,
        date=date,
    )


class RepoMetadataFetcher:
    """Fetches :class:`RepoMetadata`, degrading to ``None`` on any failure."""

    def __init__(self, repo_fetcher: RepoFetcher) -> None:
        self._fetcher = repo_fetcher

    async def fetch(self, ref: RepoRef) -> RepoMetadata | None:
        try:
            data = await self._fetcher.fetch_repo(ref)
            metadata = metadata_from_payload(data)
        except ReadmeGalleryError as exc:
            logger.warning("Error fetching repo info for %s: %s", ref.full_name, exc)
            return None
        logger.debug(
            "Metadata for %s: branch=%s date=%s",
            ref.full_name,
            metadata.default_branch,
            metadata.date,
        )
        return metadata

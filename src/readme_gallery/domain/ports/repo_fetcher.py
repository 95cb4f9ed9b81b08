"""Port: repository fetcher — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Any, Protocol

from readme_gallery.domain.entities import ReadmePayload
from readme_gallery.domain.value_objects import RepoRef


class RepoFetcher(Protocol):
    """Abstract contract for fetching GitHub repository data."""

    async def fetch_repo(self, ref: RepoRef) -> dict[str, Any]:
        """Return the JSON body of ``GET /repos/{owner}/{repo}``."""
        ...

    async def fetch_readme(self, ref: RepoRef) -> ReadmePayload:
        """Return the README endpoint's payload, still base64-encoded."""
        ...

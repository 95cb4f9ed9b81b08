"""GitHub REST API adapter — implements the RepoFetcher port."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from readme_gallery.domain.entities import ReadmePayload
from readme_gallery.domain.exceptions import (
    DecodeError,
    NetworkError,
    RepositoryNotFoundError,
)
from readme_gallery.domain.value_objects import RepoRef

logger = logging.getLogger(__name__)

_GITHUB_API = "https://api.github.com"


class GitHubRestAdapter:
    """Concrete RepoFetcher backed by the GitHub v3 REST API."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        token: str | None = None,
        api_url: str = _GITHUB_API,
    ) -> None:
        self._client = client
        self._api_url = api_url.rstrip("/")
        self._api_headers: dict[str, str] = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": "readme-gallery/1.0",
        }
        if token:
            self._api_headers["Authorization"] = f"Bearer {token}"

    async def fetch_repo(self, ref: RepoRef) -> dict[str, Any]:
        """GET /repos/{owner}/{repo} → raw JSON object."""
        resp = await self._api_get(f"/repos/{ref.owner}/{ref.repo}")
        return self._json_object(resp)

    async def fetch_readme(self, ref: RepoRef) -> ReadmePayload:
        """GET /repos/{owner}/{repo}/readme → ReadmePayload."""
        resp = await self._api_get(f"/repos/{ref.owner}/{ref.repo}/readme")
        data = self._json_object(resp)
        content = data.get("content")
        if not isinstance(content, str):
            raise DecodeError(f"README payload for {ref.full_name} has no content.")
        return ReadmePayload(
            content=content,
            html_url=self._str_field(data, "html_url", ""),
            name=self._str_field(data, "name", "README.md"),
        )

    async def _api_get(self, endpoint: str) -> httpx.Response:
        """Perform a GitHub API GET request with error translation."""
        url = f"{self._api_url}{endpoint}"
        logger.debug("GET %s", url)
        try:
            resp = await self._client.get(url, headers=self._api_headers)
        except httpx.HTTPError as exc:
            raise NetworkError(f"Network error fetching {url}: {exc}") from exc

        if resp.is_success:
            return resp

        if resp.status_code == 404:
            raise RepositoryNotFoundError(f"Not found: {url}")

        raise NetworkError(f"GitHub API returned HTTP {resp.status_code} for {url}")

    @staticmethod
    def _str_field(data: dict[str, Any], key: str, default: str) -> str:
        value = data.get(key)
        if isinstance(value, str) and value:
            return value
        if value not in (None, ""):
            logger.debug("Ignoring non-string %s in README payload: %r", key, value)
        return default

    @staticmethod
    def _json_object(resp: httpx.Response) -> dict[str, Any]:
        try:
            data = resp.json()
        except ValueError as exc:
            raise DecodeError(f"Malformed JSON from {resp.url}") from exc
        if not isinstance(data, dict):
            raise DecodeError(f"Unexpected JSON payload from {resp.url}")
        return data

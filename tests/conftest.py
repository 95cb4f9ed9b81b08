"""Shared fixtures for the readme_gallery test-suite."""

from __future__ import annotations

import base64
from typing import Any

import httpx
import pytest

from readme_gallery.domain.entities import ReadmePayload
from readme_gallery.domain.exceptions import NetworkError
from readme_gallery.domain.value_objects import RepoRef

API = "https://api.github.com"
RAW_BASE = "https://raw.githubusercontent.com/octo/demo/develop"


def b64(text: str, wrap: int = 60) -> str:
    """Encode *text* the way the contents API does: UTF-8, base64, wrapped lines."""
    encoded = base64.b64encode(text.encode("utf-8")).decode("ascii")
    return "\n".join(encoded[i : i + wrap] for i in range(0, len(encoded), wrap)) + "\n"


class FakeRepoFetcher:
    """In-memory ``RepoFetcher`` that records how often it was called."""

    def __init__(
        self,
        readme: str | None = "# Demo\n",
        repo: dict[str, Any] | None = None,
        repo_error: Exception | None = None,
    ) -> None:
        self.readme = readme
        self.repo = repo if repo is not None else {"default_branch": "develop", "created_at": "2020-01-02T03:04:05Z"}
        self.repo_error = repo_error
        self.calls: list[str] = []

    async def fetch_repo(self, ref: RepoRef) -> dict[str, Any]:
        self.calls.append(f"repo:{ref.full_name}")
        if self.repo_error is not None:
            raise self.repo_error
        return self.repo

    async def fetch_readme(self, ref: RepoRef) -> ReadmePayload:
        self.calls.append(f"readme:{ref.full_name}")
        if self.readme is None:
            raise NetworkError("GitHub API returned HTTP 404")
        return ReadmePayload(
            content=b64(self.readme),
            html_url=f"https://github.com/{ref.full_name}#readme",
            name="README.md",
        )


@pytest.fixture()
def ref() -> RepoRef:
    return RepoRef(owner="octo", repo="demo")


@pytest.fixture()
async def http_client():
    async with httpx.AsyncClient(timeout=httpx.Timeout(5.0)) as client:
        yield client

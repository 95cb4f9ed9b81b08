"""FastAPI dependency injection wiring."""

from __future__ import annotations

import httpx

from readme_gallery.domain.entities import RepoConfigEntry
from readme_gallery.infrastructure.config import Settings, get_settings
from readme_gallery.infrastructure.github_rest_adapter import GitHubRestAdapter
from readme_gallery.infrastructure.markdown_engine import MarkdownItEngine
from readme_gallery.infrastructure.repo_config import load_repo_config
from readme_gallery.services.content_renderer import ContentRenderer
from readme_gallery.services.metadata_fetcher import RepoMetadataFetcher
from readme_gallery.services.open_readme import OpenReadmeUseCase
from readme_gallery.services.readme_fetcher import ReadmeFetcher

_http_client: httpx.AsyncClient | None = None


async def startup() -> None:
    """Initialise shared resources — called from the lifespan context manager."""
    global _http_client  # noqa: PLW0603

    settings = get_settings()
    _http_client = httpx.AsyncClient(timeout=httpx.Timeout(settings.request_timeout))


async def shutdown() -> None:
    """Release shared resources."""
    global _http_client  # noqa: PLW0603

    if _http_client:
        await _http_client.aclose()
        _http_client = None


def get_repo_entries() -> list[RepoConfigEntry]:
    """Read the configured repositories (re-read on every request)."""
    return load_repo_config(get_settings().repos_file)


def get_use_case() -> OpenReadmeUseCase:
    """Build the open-README use case with injected adapters."""
    settings: Settings = get_settings()

    assert _http_client is not None, "startup() was not called"

    token = settings.github_token.get_secret_value() if settings.github_token else None
    github_adapter = GitHubRestAdapter(
        client=_http_client,
        token=token,
        api_url=settings.github_api_url,
    )
    engine = MarkdownItEngine() if settings.markdown_enabled else None

    return OpenReadmeUseCase(
        readme_fetcher=ReadmeFetcher(
            repo_fetcher=github_adapter,
            metadata_fetcher=RepoMetadataFetcher(github_adapter),
            raw_host=settings.raw_content_url,
        ),
        renderer=ContentRenderer(engine, raw_host=settings.raw_content_url),
    )

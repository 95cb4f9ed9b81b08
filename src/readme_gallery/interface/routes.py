"""Routes — thin controllers that delegate to the presenter and use case."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse

from readme_gallery.domain.entities import RepoConfigEntry
from readme_gallery.domain.exceptions import ReadmeUnavailableError
from readme_gallery.domain.value_objects import RepoRef
from readme_gallery.infrastructure.config import Settings, get_settings
from readme_gallery.interface.dependencies import get_repo_entries, get_use_case
from readme_gallery.interface.pages import render_list_page, render_viewer_page
from readme_gallery.interface.schemas import ErrorResponse, ReadmeResponse, RepoListItem
from readme_gallery.services.list_presenter import present
from readme_gallery.services.open_readme import OpenReadmeUseCase

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def list_page(
    entries: list[RepoConfigEntry] = Depends(get_repo_entries),
    settings: Settings = Depends(get_settings),
) -> HTMLResponse:
    """Render the repository list.  No GitHub requests are made."""
    items = present(entries, settings.viewer_path)
    return HTMLResponse(render_list_page(settings.site_title, items))


@router.get("/api/repos", response_model=list[RepoListItem])
async def list_repos(
    entries: list[RepoConfigEntry] = Depends(get_repo_entries),
    settings: Settings = Depends(get_settings),
) -> list[RepoListItem]:
    """Return the configured repositories as list entries."""
    return [
        RepoListItem(
            owner=item.owner,
            repo=item.repo,
            title=item.title,
            date=item.date,
            url=item.url,
        )
        for item in present(entries, settings.viewer_path)
    ]


@router.get(
    "/api/repos/{owner}/{repo}/readme",
    response_model=ReadmeResponse,
    responses={
        422: {"model": ErrorResponse, "description": "Invalid owner or repository name"},
        502: {"model": ErrorResponse, "description": "README could not be fetched from GitHub"},
    },
)
async def readme(
    owner: str,
    repo: str,
    title: str | None = None,
    use_case: OpenReadmeUseCase = Depends(get_use_case),
) -> ReadmeResponse:
    """Fetch and render a repository README."""
    ref = RepoRef(owner=owner, repo=repo)
    view = await use_case.execute(ref, title)
    if not view.ok:
        raise ReadmeUnavailableError(f"{view.error} ({ref.full_name})")
    return ReadmeResponse(
        owner=ref.owner,
        repo=ref.repo,
        title=view.title,
        html_url=view.html_url,
        default_branch=view.default_branch,
        date=view.date,
        html=view.html,
    )


async def readme_viewer(
    owner: str = Query(...),
    repo: str = Query(...),
    title: str | None = Query(None),
    use_case: OpenReadmeUseCase = Depends(get_use_case),
) -> HTMLResponse:
    """Viewer page; a failed fetch renders a visible error block."""
    ref = RepoRef(owner=owner, repo=repo)
    view = await use_case.execute(ref, title)
    return HTMLResponse(render_viewer_page(view))


def viewer_router(viewer_path: str) -> APIRouter:
    """Mount :func:`readme_viewer` under ``/{viewer_path}/``."""
    pages = APIRouter()
    pages.add_api_route(
        f"/{viewer_path.strip('/')}/",
        readme_viewer,
        methods=["GET"],
        response_class=HTMLResponse,
    )
    return pages

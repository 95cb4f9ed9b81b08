"""Pydantic response DTOs for the API boundary."""

from __future__ import annotations

from pydantic import BaseModel


class RepoListItem(BaseModel):
    """One entry of ``GET /api/repos``."""

    owner: str
    repo: str
    title: str
    date: str
    url: str


class ReadmeResponse(BaseModel):
    """Successful response from ``GET /api/repos/{owner}/{repo}/readme``."""

    owner: str
    repo: str
    title: str
    html_url: str
    default_branch: str
    date: str
    html: str


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    status: str = "error"
    message: str

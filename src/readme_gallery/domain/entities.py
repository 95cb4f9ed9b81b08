"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass

from readme_gallery.domain.value_objects import RepoRef

DEFAULT_BRANCH = "main"


@dataclass(frozen=True, slots=True)
class RepoConfigEntry:
    """One configured repository, as supplied by the site owner."""

    owner: str
    repo: str
    name: str | None = None
    date: str | None = None


@dataclass(frozen=True, slots=True)
class RepoMetadata:
    """Branch and representative date derived from ``GET /repos/{owner}/{repo}``."""

    default_branch: str = DEFAULT_BRANCH
    date: str = ""


@dataclass(frozen=True, slots=True)
class ReadmePayload:
    """The README endpoint's fields, before decoding."""

    content: str
    html_url: str
    name: str


@dataclass(frozen=True, slots=True)
class ReadmeDocument:
    """Decoded, link-normalised README source plus its provenance.

    ``metadata`` is whatever the concurrent metadata lookup returned; it is
    ``None`` when that lookup failed and ``default_branch`` fell back to
    ``"main"``.
    """

    ref: RepoRef
    raw_text: str
    html_url: str
    display_name: str
    default_branch: str
    metadata: RepoMetadata | None = None


@dataclass(frozen=True, slots=True)
class ListEntry:
    """One rendered item of the repository list."""

    owner: str
    repo: str
    title: str
    date: str
    url: str


@dataclass(frozen=True, slots=True)
class ReadmeView:
    """What the viewer page shows for an opened repository.

    A non-empty ``error`` means the README could not be produced; ``html``
    is then empty.
    """

    ref: RepoRef
    title: str
    html: str = ""
    html_url: str = ""
    default_branch: str = DEFAULT_BRANCH
    date: str = ""
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

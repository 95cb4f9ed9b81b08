"""Value objects — self-validating domain primitives."""

from __future__ import annotations

import re
from dataclasses import dataclass

from readme_gallery.domain.exceptions import InvalidRepoRefError

_NAME_RE = re.compile(r"^[A-Za-z0-9\-_.]+$")


@dataclass(frozen=True, slots=True)
class RepoRef:
    """Identifies a GitHub repository by *owner* and *repo* name.

    Both parts must be non-empty and made of the characters GitHub allows
    in account and repository names; the dot segments ``.`` and ``..``
    are rejected.
    """

    owner: str
    repo: str

    def __post_init__(self) -> None:
        for label, value in (("owner", self.owner), ("repo", self.repo)):
            if not value or value in (".", "..") or not _NAME_RE.match(value):
                raise InvalidRepoRefError(
                    f"Invalid repository {label}: '{value}'."
                )

    @classmethod
    def from_string(cls, value: str) -> RepoRef:
        """Parse ``owner/repo``."""
        owner, sep, repo = value.strip().partition("/")
        if not sep:
            raise InvalidRepoRefError(
                f"Invalid repository reference: '{value}'. Expected format: <owner>/<repo>"
            )
        return cls(owner=owner, repo=repo)

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

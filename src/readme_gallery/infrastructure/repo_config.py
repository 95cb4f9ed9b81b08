"""Repository list loader — reads the ordered configuration sequence."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from readme_gallery.domain.entities import RepoConfigEntry
from readme_gallery.domain.exceptions import InvalidRepoConfigError

logger = logging.getLogger(__name__)

_ENTRIES = TypeAdapter(list[RepoConfigEntry])


def parse_repo_config(raw: str | bytes) -> list[RepoConfigEntry]:
    """Validate a JSON array of ``{owner, repo, name?, date?}`` objects."""
    if not raw or not raw.strip():
        return []
    try:
        return _ENTRIES.validate_json(raw)
    except ValidationError as exc:
        raise InvalidRepoConfigError(f"Invalid repository configuration: {exc}") from exc


def load_repo_config(path: str | Path) -> list[RepoConfigEntry]:
    """Load the configured repositories from *path*.

    A missing file yields an empty list; the list page then renders nothing.
    """
    p = Path(path)
    if not p.exists():
        logger.info("Repository config %s not found — no repositories configured", p)
        return []
    entries = parse_repo_config(p.read_bytes())
    logger.debug("Loaded %d repositories from %s", len(entries), p)
    return entries

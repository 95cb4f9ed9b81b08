"""Domain exception hierarchy.

Adapters raise these; the fetch layer catches them at their origin and
degrades to an absent result.  Anything that still reaches the interface
layer is translated to an HTTP status code by the error handlers.
"""

from __future__ import annotations


class ReadmeGalleryError(Exception):
    """Base exception for the entire application."""


# ── Input validation ────────────────────────────────────────────────────────


class InvalidRepoRefError(ReadmeGalleryError):
    """The supplied owner / repo pair is not a valid repository reference."""


class InvalidRepoConfigError(ReadmeGalleryError):
    """The repository configuration file could not be parsed."""


# ── GitHub API errors ───────────────────────────────────────────────────────


class NetworkError(ReadmeGalleryError):
    """Transport failure or non-2xx response from the GitHub API."""


class RepositoryNotFoundError(NetworkError):
    """The repository (or its README) does not exist (404)."""


# ── Processing errors ───────────────────────────────────────────────────────


class DecodeError(ReadmeGalleryError):
    """README content was not valid base64 or not valid UTF-8."""


class RenderUnavailableError(ReadmeGalleryError):
    """No markdown engine is configured."""


class ReadmeUnavailableError(ReadmeGalleryError):
    """The README could not be fetched for display."""

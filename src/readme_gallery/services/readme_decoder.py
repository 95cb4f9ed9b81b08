"""README content decoding.

The contents API returns base64 wrapped at 60 columns.  The text must be
decoded in two stages (base64 → bytes, then bytes → UTF-8); decoding the
base64 output as Latin-1 or ASCII mangles every multi-byte character.
"""

from __future__ import annotations

import base64
import binascii
import re

from readme_gallery.domain.exceptions import DecodeError

_WHITESPACE_RE = re.compile(r"\s+")


def decode_readme_content(encoded: str) -> str:
    """Return the UTF-8 text carried by base64 *encoded*.

    Raises :class:`DecodeError` on malformed base64 or invalid UTF-8.
    """
    compact = _WHITESPACE_RE.sub("", encoded)
    try:
        raw = base64.b64decode(compact, validate=True)
    except binascii.Error as exc:
        raise DecodeError(f"Malformed base64 README content: {exc}") from exc
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeError(f"README is not valid UTF-8: {exc}") from exc

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Security utilities for the mdrender resource policy.

This module decides, for each URL found in a link ``href`` or image ``src``,
whether the rendered document may reference it. External web and contact
URLs are allowed, every other scheme and every absolute path is denied, and
relative paths are allowed only when they resolve inside the boundary
directory.

Functions
---------
- get_url_scheme: Extract the lower-cased scheme of a URL, if any
- is_allowed_resource: Allow/deny decision for one URL
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from urllib.parse import unquote

from mdrender.constants import EXTERNAL_URL_SCHEMES
from mdrender.utils.paths import canonicalize_path, is_within_directory, normalize_path

logger = logging.getLogger(__name__)

_SCHEME_PATTERN = re.compile(r"^([a-zA-Z][a-zA-Z0-9+.\-]*):")


def get_url_scheme(url: str) -> str | None:
    """Extract the lower-cased scheme of a URL.

    Parameters
    ----------
    url : str
        URL to inspect

    Returns
    -------
    str or None
        Scheme without the trailing colon, or None for scheme-less URLs

    Examples
    --------
        >>> get_url_scheme("HTTPS://example.com")
        'https'
        >>> get_url_scheme("docs/file.md") is None
        True

    """
    match = _SCHEME_PATTERN.match(url)
    if match is None:
        return None
    return match.group(1).lower()


def is_allowed_resource(url: str, base_dir: Path | None, allowed_root_dir: Path | None = None) -> bool:
    """Decide whether a link or image URL may appear in the rendered document.

    Rules are evaluated in order and the first match wins:

    1. Empty URLs and fragment-only URLs (``#section``) are allowed.
    2. ``http``, ``https``, ``mailto`` and ``tel`` URLs are allowed.
    3. ``file:`` URLs are denied.
    4. Any other URL containing ``:`` is denied.
    5. Absolute paths are denied.
    6. Without a ``base_dir`` every remaining (relative) URL is denied.
    7. A path part (query and fragment removed, percent-decoded) that is
       absolute or contains a NUL byte is denied. Otherwise it is joined
       onto ``base_dir`` and normalized; it is allowed only if it resolves
       inside ``allowed_root_dir``, or ``base_dir`` when no root is given.

    Parameters
    ----------
    url : str
        URL as written by the author (HTML entities already decoded)
    base_dir : Path or None
        Directory relative URLs are resolved against
    allowed_root_dir : Path or None, default None
        Boundary directory; defaults to ``base_dir``

    Returns
    -------
    bool
        True if the URL is allowed

    Examples
    --------
        >>> is_allowed_resource("https://example.com", None)
        True
        >>> is_allowed_resource("../secret.png", Path("/tmp/base"))
        False
        >>> is_allowed_resource("../background/topic.md", Path("/tmp/repo/docs/a"), Path("/tmp/repo/docs"))
        True

    """
    if not url or url.startswith("#"):
        return True

    scheme = get_url_scheme(url)
    if scheme in EXTERNAL_URL_SCHEMES:
        return True

    if scheme == "file":
        return False

    if ":" in url:
        return False

    if url.startswith(("/", "\\")):
        return False

    if base_dir is None:
        return False

    raw_path = re.split(r"[?#]", url, maxsplit=1)[0]
    if not raw_path:
        return True

    candidate = unquote(raw_path)
    if candidate.startswith(("/", "\\")) or "\x00" in candidate:
        return False

    joined = normalize_path(base_dir / candidate)
    if joined is None:
        return False

    boundary_dir = allowed_root_dir if allowed_root_dir is not None else base_dir
    boundary = canonicalize_path(boundary_dir)
    if boundary is None:
        return False

    target = canonicalize_path(joined)
    if target is None:
        return False

    return is_within_directory(target, boundary)


__all__ = ["get_url_scheme", "is_allowed_resource"]

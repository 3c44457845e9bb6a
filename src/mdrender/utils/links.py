#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Link navigation helpers for hosts displaying rendered documents.

When a reader clicks a link in a rendered page, the host decides whether to
open it externally, scroll within the page, or open another markdown
document. These helpers make that decision from the link URL and the path of
the document currently shown.
"""

from __future__ import annotations

import os
from pathlib import Path
from urllib.parse import unquote, urlsplit

from mdrender.constants import DIRECTORY_INDEX_NAMES, EXTERNAL_URL_SCHEMES, MARKDOWN_EXTENSIONS
from mdrender.utils.paths import normalize_path
from mdrender.utils.security import get_url_scheme


def is_external_link(url: str) -> bool:
    """Check whether a link should be handed to an external application.

    Parameters
    ----------
    url : str
        Link URL

    Returns
    -------
    bool
        True for ``http``, ``https``, ``mailto`` and ``tel`` URLs

    """
    return get_url_scheme(url) in EXTERNAL_URL_SCHEMES


def resolve_link_path(url: str, current_file: str | os.PathLike[str] | None) -> Path | None:
    """Resolve a relative or ``file:`` link to a filesystem path.

    Parameters
    ----------
    url : str
        Link URL
    current_file : str, PathLike or None
        Markdown file the link appears in

    Returns
    -------
    Path or None
        Normalized path the link refers to, or None for other schemes,
        unresolvable relative links and links escaping the filesystem root

    """
    parts = urlsplit(url)
    scheme = parts.scheme.lower()

    if scheme == "file":
        return normalize_path(unquote(parts.path))
    if scheme:
        return None

    if not parts.path:
        return normalize_path(current_file) if current_file is not None else None

    path = unquote(parts.path)
    if path.startswith("/"):
        return normalize_path(path)
    if current_file is None:
        return None
    return normalize_path(Path(current_file).parent / path)


def is_in_page_anchor(url: str, current_file: str | os.PathLike[str] | None) -> bool:
    """Check whether a link targets a fragment of the document currently shown.

    Parameters
    ----------
    url : str
        Link URL
    current_file : str, PathLike or None
        Markdown file the link appears in

    Returns
    -------
    bool
        True for ``#fragment`` links and for links to the current file that
        carry a non-empty fragment

    """
    if current_file is None:
        return False

    if not urlsplit(url).fragment:
        return False

    if url.startswith("#"):
        return True

    target = resolve_link_path(url, current_file)
    return target is not None and target == normalize_path(current_file)


def find_directory_index(directory: Path) -> Path | None:
    """Return the first README or index file inside ``directory``, if any."""
    if not directory.is_dir():
        return None

    for name in DIRECTORY_INDEX_NAMES:
        candidate = directory / name
        if candidate.is_file():
            return candidate

    return None


def markdown_target_path(url: str, current_file: str | os.PathLike[str] | None) -> Path | None:
    """Resolve a link to the markdown document it opens, if any.

    Parameters
    ----------
    url : str
        Link URL
    current_file : str, PathLike or None
        Markdown file the link appears in

    Returns
    -------
    Path or None
        The linked markdown file; the README/index file when the link names
        a directory; None when the link does not open a markdown document

    Examples
    --------
        >>> markdown_target_path("../guide/setup.md#install", "/repo/docs/intro.md")
        PosixPath('/repo/guide/setup.md')
        >>> markdown_target_path("https://example.com/a.md", "/repo/intro.md") is None
        True

    """
    target = resolve_link_path(url, current_file)
    if target is None:
        return None

    if target.suffix[1:].lower() in MARKDOWN_EXTENSIONS:
        return target

    return find_directory_index(target)


__all__ = [
    "is_external_link",
    "resolve_link_path",
    "is_in_page_anchor",
    "find_directory_index",
    "markdown_target_path",
]

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdrender/utils/paths.py
"""Lexical path normalization and best-effort canonicalization.

:func:`normalize_path` is the first line of defense against path traversal:
it resolves ``.`` and ``..`` purely lexically and refuses any path that climbs
above its starting point. :func:`canonicalize_path` additionally consults the
filesystem to resolve symbolic links, and degrades to lexical normalization
when the lookup fails.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def normalize_path(path: str | os.PathLike[str]) -> Path | None:
    """Reduce a path to a canonical, traversal-free form without touching the filesystem.

    Components are walked left to right: ``.`` and empty components are
    dropped, ``..`` pops the last kept component. Both ``/`` and ``\\`` are
    treated as separators. An absolute path keeps its root.

    Parameters
    ----------
    path : str or PathLike
        Path to normalize

    Returns
    -------
    Path or None
        The normalized path, or None if a ``..`` would escape above the start

    Examples
    --------
        >>> normalize_path("/tmp/base/./docs/../same.md")
        PosixPath('/tmp/base/same.md')
        >>> normalize_path("/tmp/../../etc") is None
        True
        >>> normalize_path("a/..")
        PosixPath('.')

    """
    raw = os.fspath(path).replace("\\", "/")
    root = "/" if raw.startswith("/") else ""

    parts: list[str] = []
    for part in raw.split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            if not parts:
                return None
            parts.pop()
            continue
        parts.append(part)

    return Path(root + "/".join(parts))


def canonicalize_path(path: str | os.PathLike[str]) -> Path | None:
    """Canonicalize a path via the filesystem, falling back to lexical normalization.

    Symbolic links in every existing prefix of the path are resolved; the
    entity itself need not exist.

    Parameters
    ----------
    path : str or PathLike
        Path to canonicalize

    Returns
    -------
    Path or None
        Canonical path, the lexically normalized path when the filesystem
        lookup fails, or None when normalization fails too

    """
    try:
        return Path(path).resolve()
    except (OSError, RuntimeError, ValueError) as e:
        logger.debug("Canonicalization failed for %s, using lexical normalization: %s", path, e)
        return normalize_path(path)


def is_within_directory(target: Path, boundary: Path) -> bool:
    """Check whether ``target`` is ``boundary`` or lies beneath it.

    The comparison is made on path components, so ``/tmp/repo2`` is not
    within ``/tmp/repo``.

    Parameters
    ----------
    target : Path
        Candidate path
    boundary : Path
        Ancestor directory

    Returns
    -------
    bool
        True if ``target`` is inside ``boundary``

    """
    try:
        target.relative_to(boundary)
        return True
    except ValueError:
        return False


__all__ = ["normalize_path", "canonicalize_path", "is_within_directory"]

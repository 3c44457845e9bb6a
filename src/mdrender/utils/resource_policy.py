#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdrender/utils/resource_policy.py
"""Enforce the resource policy on rendered (not yet sanitized) HTML.

Every ``<a href>`` and ``<img src>`` is checked with
:func:`mdrender.utils.security.is_allowed_resource`. Denied links keep their
element but point at ``#blocked-resource``; denied images lose their ``src``
attribute entirely. Each denial is recorded as a ``blocked_resource``
diagnostic carrying the original URL.
"""

from __future__ import annotations

import logging
from pathlib import Path

from bs4 import BeautifulSoup

from mdrender.constants import (
    BLOCKED_IMAGE_MESSAGE,
    BLOCKED_LINK_MESSAGE,
    BLOCKED_RESOURCE_HREF,
    DIAGNOSTIC_BLOCKED_RESOURCE,
)
from mdrender.models import Diagnostic
from mdrender.utils.security import is_allowed_resource

logger = logging.getLogger(__name__)


def _attribute_url(value: object) -> str:
    # Multi-valued attribute lists only show up for class-like attributes
    if isinstance(value, list):
        return " ".join(str(v) for v in value)
    return str(value)


def _blocked(url: str, message: str) -> Diagnostic:
    logger.debug("%s: %s", message, url)
    return Diagnostic(code=DIAGNOSTIC_BLOCKED_RESOURCE, message=message, resource=url)


def enforce_resource_policy(
    content: str,
    base_dir: Path | None,
    allowed_root_dir: Path | None = None,
) -> tuple[str, list[Diagnostic]]:
    """Neutralize links and images the resource policy denies.

    The HTML is parsed rather than pattern-matched, so attribute quoting,
    letter case and attribute order written by the author in raw HTML cannot
    hide a URL from the policy.

    Parameters
    ----------
    content : str
        HTML produced by the markdown parser
    base_dir : Path or None
        Directory relative URLs are resolved against
    allowed_root_dir : Path or None, default None
        Boundary directory; defaults to ``base_dir``

    Returns
    -------
    tuple[str, list[Diagnostic]]
        Rewritten HTML and one diagnostic per blocked resource, links first,
        each kind in document order

    Examples
    --------
        >>> html_out, diags = enforce_resource_policy('<a href="/etc/passwd">x</a>', None)
        >>> html_out
        '<a href="#blocked-resource">x</a>'
        >>> diags[0].resource
        '/etc/passwd'

    """
    diagnostics: list[Diagnostic] = []
    soup = BeautifulSoup(content, "html.parser")

    for link in soup.find_all("a", href=True):
        url = _attribute_url(link["href"])
        if not is_allowed_resource(url, base_dir, allowed_root_dir):
            diagnostics.append(_blocked(url, BLOCKED_LINK_MESSAGE))
            link["href"] = BLOCKED_RESOURCE_HREF

    for image in soup.find_all("img", src=True):
        url = _attribute_url(image["src"])
        if not is_allowed_resource(url, base_dir, allowed_root_dir):
            diagnostics.append(_blocked(url, BLOCKED_IMAGE_MESSAGE))
            del image["src"]

    # Always re-serialize: the parsed tree is what the policy approved
    return str(soup), diagnostics


__all__ = ["enforce_resource_policy"]

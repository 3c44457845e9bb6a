#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdrender/utils/html_sanitizer.py
"""HTML sanitization for rendered markdown.

The allow-list engine is bleach; this module only supplies its policy
configuration. A BeautifulSoup pass runs first to drop executable elements
together with their content, because bleach's ``strip`` mode keeps the text
of the tags it removes and would otherwise leave script source visible in the
page.

The sanitizer is idempotent: sanitizing its own output returns it unchanged.
"""

from __future__ import annotations

import logging

import bleach
from bs4 import BeautifulSoup

from mdrender.constants import (
    SANITIZER_ALLOWED_TAGS,
    SANITIZER_CONTENT_STRIPPED_ELEMENTS,
    SANITIZER_GENERIC_ATTRIBUTES,
    SANITIZER_TAG_ATTRIBUTES,
    SANITIZER_URL_SCHEMES,
)

logger = logging.getLogger(__name__)


def build_allowed_attributes() -> dict[str, list[str]]:
    """Build the per-tag attribute allow-list in bleach's dictionary form.

    Returns
    -------
    dict[str, list[str]]
        Mapping of tag name (``"*"`` for every tag) to allowed attributes

    """
    allowed: dict[str, list[str]] = {"*": list(SANITIZER_GENERIC_ATTRIBUTES)}
    for tag, attributes in SANITIZER_TAG_ATTRIBUTES.items():
        allowed[tag] = list(attributes)
    return allowed


def strip_executable_elements(content: str) -> str:
    """Remove ``script`` and ``style`` elements along with their content.

    Parameters
    ----------
    content : str
        Untrusted HTML

    Returns
    -------
    str
        HTML without executable elements

    Examples
    --------
    >>> strip_executable_elements("<p>a</p><script>alert(1)</script>")
    '<p>a</p>'

    """
    soup = BeautifulSoup(content, "html.parser")
    removed = 0
    for element in soup.find_all(SANITIZER_CONTENT_STRIPPED_ELEMENTS):
        element.decompose()
        removed += 1
    if removed:
        logger.debug("Removed %d executable element(s) before sanitization", removed)
    return str(soup)


def sanitize_html(content: str) -> str:
    """Sanitize untrusted HTML against the rendering allow-list.

    Disallowed tags are stripped (their text is kept), disallowed attributes
    and comments are removed, and URLs with schemes other than ``http``,
    ``https``, ``mailto`` and ``tel`` are dropped. Relative URLs pass through
    unmodified.

    Parameters
    ----------
    content : str
        Untrusted HTML

    Returns
    -------
    str
        Sanitized HTML

    Examples
    --------
    >>> sanitize_html("<p onclick='x()'>Hello <script>alert('xss')</script></p>")
    '<p>Hello </p>'

    >>> sanitize_html('<a href="docs/file.md" target="_blank">doc</a>')
    '<a href="docs/file.md">doc</a>'

    """
    return bleach.clean(
        strip_executable_elements(content),
        tags=SANITIZER_ALLOWED_TAGS,
        attributes=build_allowed_attributes(),
        protocols=SANITIZER_URL_SCHEMES,
        strip=True,
        strip_comments=True,
    )


__all__ = ["build_allowed_attributes", "strip_executable_elements", "sanitize_html"]

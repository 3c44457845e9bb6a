#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdrender/toc.py
"""Table-of-contents extraction and heading anchor injection.

Anchors are computed in two passes. :func:`collect_toc` scans the raw
markdown line by line, so HTML produced by the grammar parser cannot
influence it. :func:`inject_heading_ids` then walks the heading elements of
the sanitized HTML and attaches those anchors positionally: the i-th heading
of level L receives the next unconsumed TOC entry of level L.

Headings that do not come from an ATX line (setext headings, raw HTML
headings) are not in the TOC and can shift the correlation; this is an
accepted limitation of positional matching.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from mdrender.constants import ANCHOR_PREFIX, FALLBACK_ANCHOR_STEM, MAX_HEADING_LEVEL
from mdrender.models import TocItem

logger = logging.getLogger(__name__)

_ATTRIBUTE_PATTERN = re.compile(
    r"""\s+(?P<name>[^\s"'=<>/]+)(?:\s*=\s*(?:"[^"]*"|'[^']*'|[^\s"'=<>`]+))?"""
)
_HEADING_START_PATTERN = re.compile(
    r"""<h(?P<level>[1-6])(?P<attrs>(?:\s+[^\s"'=<>/]+(?:\s*=\s*(?:"[^"]*"|'[^']*'|[^\s"'=<>`]+))?)*)\s*(?P<close>/?)>""",
    re.IGNORECASE,
)


def slugify(text: str) -> str:
    """Derive a lower-case, id-safe slug from heading text.

    ASCII letters and digits are kept (lower-cased), every run of whitespace
    or hyphens becomes a single hyphen, everything else, including non-ASCII
    characters, is dropped. Leading and trailing hyphens are trimmed.
    Text without ASCII letters or digits yields an empty slug, so such
    headings get the bare anchor prefix (``user-content-``, then
    ``user-content--1``).

    Parameters
    ----------
    text : str
        Heading text

    Returns
    -------
    str
        Slug, possibly empty

    Examples
    --------
        >>> slugify("Hello, World!")
        'hello-world'
        >>> slugify("  API -- Reference (v2.0) ")
        'api-reference-v20'
        >>> slugify("Café")
        'caf'

    """
    chars: list[str] = []
    for ch in text:
        if ch.isascii() and ch.isalnum():
            chars.append(ch.lower())
        elif ch.isspace() or ch == "-":
            if not chars or chars[-1] != "-":
                chars.append("-")
    return "".join(chars).strip("-")


class SlugRegistry:
    """Hand out unique slugs for one render call.

    The first occurrence of a base slug is returned bare; the n-th repeat gets
    ``-n`` appended (``same``, ``same-1``, ``same-2``). A suffixed slug that
    collides with one already issued keeps counting upward.
    """

    def __init__(self, reserved: Sequence[str] = ()) -> None:
        self._counts: dict[str, int] = {}
        self._issued: set[str] = set(reserved)

    def unique(self, base: str) -> str:
        """Return a slug derived from ``base`` that has not been issued yet."""
        count = self._counts.get(base, 0)
        slug = base if count == 0 else f"{base}-{count}"
        while slug in self._issued:
            count += 1
            slug = f"{base}-{count}"
        self._counts[base] = count + 1
        self._issued.add(slug)
        return slug


def parse_atx_heading(line: str) -> tuple[int, str] | None:
    """Parse one markdown line as an ATX heading.

    Parameters
    ----------
    line : str
        A single line of markdown

    Returns
    -------
    tuple[int, str] or None
        ``(level, title)`` or None when the line is not a heading

    Examples
    --------
        >>> parse_atx_heading("  ## Install ##  ")
        (2, 'Install')
        >>> parse_atx_heading("####### too deep") is None
        True
        >>> parse_atx_heading("#   ") is None
        True

    """
    trimmed = line.strip()
    level = len(trimmed) - len(trimmed.lstrip("#"))
    if level == 0 or level > MAX_HEADING_LEVEL:
        return None

    title = trimmed[level:].strip().rstrip("#").strip()
    if not title:
        return None

    return level, title


def collect_toc(markdown: str) -> list[TocItem]:
    """Extract the table of contents from raw markdown text.

    Parameters
    ----------
    markdown : str
        Markdown source

    Returns
    -------
    list[TocItem]
        One entry per ATX heading line, in document order, with anchors
        unique within the call

    Examples
    --------
        >>> [item.anchor for item in collect_toc("# Same\\n## Same\\n")]
        ['user-content-same', 'user-content-same-1']

    """
    toc: list[TocItem] = []
    registry = SlugRegistry()

    for line in markdown.split("\n"):
        heading = parse_atx_heading(line)
        if heading is None:
            continue

        level, title = heading
        slug = registry.unique(slugify(title))
        toc.append(TocItem(level=level, title=title, anchor=f"{ANCHOR_PREFIX}{slug}"))

    return toc


def _strip_id_attribute(attrs: str) -> str:
    return "".join(
        match.group(0) for match in _ATTRIBUTE_PATTERN.finditer(attrs) if match.group("name").lower() != "id"
    )


def inject_heading_ids(content: str, toc: Sequence[TocItem]) -> str:
    """Attach TOC anchors to the heading elements of rendered HTML.

    A single running index into ``toc`` is shared by all levels. For each
    ``<h1>``..``<h6>`` start tag the first entry at or after the index with
    the same level is consumed and the index moves past it. When no such
    entry remains, ``user-content-heading-<index>`` is used instead. Any
    ``id`` already on the element is replaced; the element's content is not
    touched.

    Parameters
    ----------
    content : str
        Sanitized HTML
    toc : Sequence[TocItem]
        Entries produced by :func:`collect_toc` for the same document

    Returns
    -------
    str
        HTML with ``id`` attributes on every heading element

    Examples
    --------
        >>> toc = collect_toc("# Intro\\n## Usage\\n")
        >>> inject_heading_ids("<h1>Intro</h1><h2>Usage</h2>", toc)
        '<h1 id="user-content-intro">Intro</h1><h2 id="user-content-usage">Usage</h2>'

    """
    index = 0
    fallbacks = SlugRegistry(reserved=[item.anchor for item in toc])

    def replace(match: re.Match[str]) -> str:
        nonlocal index
        level = int(match.group("level"))

        position = next((i for i in range(index, len(toc)) if toc[i].level == level), None)
        if position is None:
            anchor = fallbacks.unique(f"{ANCHOR_PREFIX}{FALLBACK_ANCHOR_STEM}-{index}")
            logger.debug("No TOC entry left for <h%d>, using fallback anchor %s", level, anchor)
        else:
            anchor = toc[position].anchor
            index = position + 1

        attrs = _strip_id_attribute(match.group("attrs"))
        return f'<h{level} id="{anchor}"{attrs}{match.group("close")}>'

    return _HEADING_START_PATTERN.sub(replace, content)


__all__ = ["slugify", "SlugRegistry", "parse_atx_heading", "collect_toc", "inject_heading_ids"]

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the mdrender library.

This module centralizes the hardcoded values used across the rendering
pipeline so that the policy in force is discoverable in one place.

Constants are organized by category:
1. Render Option Defaults
2. Anchors and Table of Contents
3. Resource Policy
4. Sanitizer Allow-List
5. Document Shell
6. Link Navigation
"""

from __future__ import annotations

from typing import Literal

OutputFormat = Literal["json", "html", "document"]

# =============================================================================
# Render Option Defaults
# =============================================================================

DEFAULT_ENABLE_GFM = True
DEFAULT_ENABLE_MERMAID = True
DEFAULT_ENABLE_MATH = True
DEFAULT_THEME = "github-light"
DEFAULT_OUTPUT_FORMAT: OutputFormat = "json"

# =============================================================================
# Anchors and Table of Contents
# =============================================================================

# Prefix keeping generated ids apart from ids written by the author
ANCHOR_PREFIX = "user-content-"
FALLBACK_ANCHOR_STEM = "heading"
MAX_HEADING_LEVEL = 6

# =============================================================================
# Resource Policy
# =============================================================================

DIAGNOSTIC_BLOCKED_RESOURCE = "blocked_resource"
BLOCKED_LINK_MESSAGE = "Link blocked by local-base policy"
BLOCKED_IMAGE_MESSAGE = "Image blocked by local-base policy"
BLOCKED_RESOURCE_HREF = "#blocked-resource"

EXTERNAL_URL_SCHEMES = frozenset({"http", "https", "mailto", "tel"})

# =============================================================================
# Sanitizer Allow-List
# =============================================================================

SANITIZER_DEFAULT_TAGS = frozenset(
    {
        "a",
        "abbr",
        "acronym",
        "b",
        "blockquote",
        "br",
        "caption",
        "cite",
        "col",
        "colgroup",
        "dd",
        "del",
        "dfn",
        "dl",
        "dt",
        "em",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "hr",
        "i",
        "img",
        "ins",
        "li",
        "mark",
        "ol",
        "p",
        "q",
        "s",
        "samp",
        "small",
        "strike",
        "strong",
        "tt",
        "u",
        "ul",
        "var",
    }
)

SANITIZER_EXTRA_TAGS = frozenset(
    {
        "table",
        "thead",
        "tbody",
        "tr",
        "th",
        "td",
        "pre",
        "code",
        "div",
        "span",
        "input",
        "details",
        "summary",
        "sup",
        "sub",
        "kbd",
        "figure",
        "figcaption",
    }
)

SANITIZER_ALLOWED_TAGS = SANITIZER_DEFAULT_TAGS | SANITIZER_EXTRA_TAGS

SANITIZER_GENERIC_ATTRIBUTES = ("class", "id", "role", "aria-hidden", "lang", "title")

SANITIZER_TAG_ATTRIBUTES: dict[str, tuple[str, ...]] = {
    "a": ("href", "title"),
    "img": ("src", "alt", "title", "width", "height"),
    "input": ("type", "checked", "disabled"),
    "code": ("class",),
    "div": ("class",),
    "span": ("class",),
}

SANITIZER_URL_SCHEMES = EXTERNAL_URL_SCHEMES

# Elements removed together with their content before allow-listing
SANITIZER_CONTENT_STRIPPED_ELEMENTS = ("script", "style")

# =============================================================================
# Document Shell
# =============================================================================

DEFAULT_DOCUMENT_TITLE = "Document"
DOCUMENT_CSP_POLICY = (
    "default-src 'none'; img-src data: file:; style-src 'unsafe-inline'; script-src 'unsafe-inline';"
)

# =============================================================================
# Link Navigation
# =============================================================================

MARKDOWN_EXTENSIONS = frozenset({"md", "markdown", "mdown", "mkd", "mkdn", "mdtxt", "mdtext"})

# Checked in order when a link points at a directory
DIRECTORY_INDEX_NAMES = (
    "README.md",
    "readme.md",
    "Readme.md",
    "README.markdown",
    "readme.markdown",
    "INDEX.md",
    "index.md",
)

ENV_VAR_PREFIX = "MDRENDER_"

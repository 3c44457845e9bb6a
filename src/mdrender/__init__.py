"""mdrender - markdown to sanitized, safely-linkable HTML.

mdrender turns a markdown document into HTML that is safe to display, a table
of contents with stable anchors, and a list of diagnostics for the links and
images it refused to keep. The conversion is a pure function of the markdown
text and a :class:`RenderOptions` record, and is also exposed as a JSON-in /
JSON-out boundary for callers in other runtimes.

Key Features
------------
- GitHub-flavored markdown through mistune (tables, task lists,
  strikethrough, footnotes, smart punctuation)
- Allow-list HTML sanitization through bleach
- Resource policy: external URLs pass, unknown schemes and absolute paths are
  blocked, relative paths must stay inside a boundary directory
- Deterministic, collision-free heading anchors
- Mermaid code blocks rewritten for client-side diagram rendering

Examples
--------
Render a string:

    >>> from mdrender import RenderOptions, render_markdown
    >>> doc = render_markdown("# Intro\\n\\n[guide](guide.md)", RenderOptions(base_dir="docs"))
    >>> doc.toc[0].anchor
    'user-content-intro'

Cross a language boundary with JSON:

    >>> from mdrender import render_json
    >>> result = render_json(b"# Intro", b'{"enable_mermaid": false}')
    >>> result.ok
    True

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from mdrender.api import render_file, render_markdown
from mdrender.document import build_html_document
from mdrender.exceptions import (
    FileAccessError,
    FileError,
    FileNotFoundError,
    InputEncodingError,
    InvalidOptionsError,
    MdRenderError,
    RenderingError,
    ValidationError,
)
from mdrender.ffi import RenderResult, render_json
from mdrender.models import Diagnostic, RenderedDocument, TocItem
from mdrender.options import RenderOptions

__version__ = "0.1.0"

__all__ = [
    "render_markdown",
    "render_file",
    "render_json",
    "build_html_document",
    "RenderOptions",
    "RenderedDocument",
    "RenderResult",
    "TocItem",
    "Diagnostic",
    "MdRenderError",
    "ValidationError",
    "InvalidOptionsError",
    "InputEncodingError",
    "FileError",
    "FileNotFoundError",
    "FileAccessError",
    "RenderingError",
]

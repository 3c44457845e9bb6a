#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdrender/api.py
"""Public rendering API.

:func:`render_markdown` is a pure function of ``(markdown, options)``. Each
call runs a fixed, linear pipeline on freshly created state:

1. parse markdown to untrusted HTML (mistune)
2. rewrite mermaid code blocks into diagram containers, if enabled
3. enforce the resource policy, collecting ``blocked_resource`` diagnostics
4. sanitize the HTML (bleach)
5. inject the TOC anchors into the heading elements

The table of contents is computed once from the original markdown text and
only consumed by the last stage. No stage raises on malformed markdown, so
concurrent calls need no coordination.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from mdrender.exceptions import FileAccessError, FileNotFoundError, InputEncodingError
from mdrender.mermaid import rewrite_mermaid_blocks
from mdrender.models import RenderedDocument
from mdrender.options.render import RenderOptions
from mdrender.parsers.markdown import MarkdownHtmlParser, ParserCapabilities
from mdrender.toc import collect_toc, inject_heading_ids
from mdrender.utils.html_sanitizer import sanitize_html
from mdrender.utils.resource_policy import enforce_resource_policy

logger = logging.getLogger(__name__)


def render_markdown(markdown: str, options: RenderOptions | None = None) -> RenderedDocument:
    """Render markdown into sanitized HTML with a table of contents.

    Parameters
    ----------
    markdown : str
        Markdown source text
    options : RenderOptions or None, default None
        Render configuration; defaults apply when omitted

    Returns
    -------
    RenderedDocument
        Sanitized HTML, TOC entries and diagnostics

    Examples
    --------
    Basic rendering:

        >>> doc = render_markdown("# Hello\\n\\nSee [notes](notes.md).")
        >>> doc.toc[0].anchor
        'user-content-hello'
        >>> [d.resource for d in doc.diagnostics]
        ['notes.md']

    Allowing relative links inside a base directory:

        >>> doc = render_markdown("[notes](notes.md)", RenderOptions(base_dir="/srv/docs"))
        >>> doc.diagnostics
        ()

    """
    options = options or RenderOptions()

    parser = MarkdownHtmlParser(ParserCapabilities.from_gfm(options.enable_gfm))
    content = parser.parse(markdown)

    if options.enable_mermaid:
        content = rewrite_mermaid_blocks(content)

    toc = collect_toc(markdown)

    content, diagnostics = enforce_resource_policy(content, options.base_dir, options.boundary_dir)
    content = sanitize_html(content)
    content = inject_heading_ids(content, toc)

    logger.debug("Rendered %d heading(s) with %d diagnostic(s)", len(toc), len(diagnostics))

    return RenderedDocument(html=content, toc=tuple(toc), diagnostics=tuple(diagnostics))


def read_markdown_file(path: str | os.PathLike[str]) -> str:
    """Read a markdown file as UTF-8 text.

    Parameters
    ----------
    path : str or PathLike
        File to read

    Returns
    -------
    str
        File contents

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    FileAccessError
        If the file cannot be read
    InputEncodingError
        If the file is not valid UTF-8

    """
    file_path = Path(path)
    try:
        data = file_path.read_bytes()
    except OSError as e:
        if not file_path.exists():
            raise FileNotFoundError(str(file_path), original_error=e) from e
        raise FileAccessError(str(file_path), original_error=e) from e

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InputEncodingError(f"Markdown file is not UTF-8 encoded: {file_path}", original_error=e) from e


def render_file(path: str | os.PathLike[str], options: RenderOptions | None = None) -> RenderedDocument:
    """Render a markdown file, resolving relative resources next to it.

    When ``options`` leaves ``base_dir`` unset, the directory containing the
    file is used.

    Parameters
    ----------
    path : str or PathLike
        Markdown file to render
    options : RenderOptions or None, default None
        Render configuration

    Returns
    -------
    RenderedDocument
        The rendered document

    Raises
    ------
    FileNotFoundError, FileAccessError, InputEncodingError
        If the file cannot be read as UTF-8 text

    """
    options = options or RenderOptions()
    markdown = read_markdown_file(path)

    if options.base_dir is None:
        options = options.create_updated(base_dir=Path(path).parent)

    logger.debug("Rendering %s with base_dir=%s", path, options.base_dir)
    return render_markdown(markdown, options)


__all__ = ["render_markdown", "render_file", "read_markdown_file"]

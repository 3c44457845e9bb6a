#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdrender/document.py
"""Standalone HTML page around a rendered document.

The page is self-contained: a restrictive Content-Security-Policy allows only
inline styles and scripts plus ``data:``/``file:`` images, so a host can load
it from disk with the viewer stylesheet and the mermaid/math scripts inlined.
"""

from __future__ import annotations

from collections.abc import Sequence
from html import escape

from mdrender.constants import DEFAULT_DOCUMENT_TITLE, DOCUMENT_CSP_POLICY
from mdrender.models import RenderedDocument
from mdrender.options.render import RenderOptions


def _flag(value: bool) -> str:
    return "true" if value else "false"


def build_html_document(
    rendered: RenderedDocument,
    options: RenderOptions | None = None,
    *,
    title: str | None = None,
    css: str = "",
    scripts: Sequence[str] = (),
) -> str:
    """Wrap rendered HTML in a complete HTML document.

    Parameters
    ----------
    rendered : RenderedDocument
        Result of a render call
    options : RenderOptions or None, default None
        Options used for the render; controls the theme class and the
        ``data-enable-mermaid`` / ``data-enable-math`` body attributes
    title : str or None, default None
        Page title; defaults to the first TOC entry, then ``"Document"``
    css : str, default ""
        Stylesheet text inlined in a ``<style>`` element
    scripts : Sequence[str], default ()
        Script sources inlined after the content, in order

    Returns
    -------
    str
        Complete HTML document

    """
    options = options or RenderOptions()
    if title is None:
        title = rendered.toc[0].title if rendered.toc else DEFAULT_DOCUMENT_TITLE

    parts = [
        "<!DOCTYPE html>",
        "<html>",
        "<head>",
        '<meta charset="utf-8">',
        '<meta name="viewport" content="width=device-width, initial-scale=1">',
        f'<meta http-equiv="Content-Security-Policy" content="{escape(DOCUMENT_CSP_POLICY)}">',
        f"<title>{escape(title)}</title>",
    ]

    if css:
        parts.append("<style>")
        parts.append(css)
        parts.append("</style>")

    parts.append("</head>")
    parts.append(
        f'<body class="markdown-body {escape(options.theme)}" '
        f'data-enable-mermaid="{_flag(options.enable_mermaid)}" '
        f'data-enable-math="{_flag(options.enable_math)}">'
    )
    parts.append("<article>")
    parts.append(rendered.html)
    parts.append("</article>")

    for script in scripts:
        parts.append("<script>")
        # A closing tag inside the source would end the element early
        parts.append(script.replace("</script", "<\\/script"))
        parts.append("</script>")

    parts.append("</body>")
    parts.append("</html>")

    return "\n".join(parts)


__all__ = ["build_html_document"]

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdrender/parsers/markdown.py
"""Markdown to HTML conversion through mistune.

This module is the narrow contract with the grammar parser: given markdown
text and a set of capability flags it returns well-formed but untrusted HTML.
Raw HTML in the source is passed through and URLs are left exactly as the
author wrote them, so that the resource policy and the sanitizer downstream
see the real input. Math syntax is never parsed; ``$...$`` and ``$$...$$``
remain literal text for an external typesetter.

"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any

import mistune

logger = logging.getLogger(__name__)

_OPENING_CONTEXT = r"(^|(?<=[\s(\[{—–]))"
_DOUBLE_OPEN_PATTERN = re.compile(_OPENING_CONTEXT + '"')
_SINGLE_OPEN_PATTERN = re.compile(_OPENING_CONTEXT + "'")


@dataclass(frozen=True)
class ParserCapabilities:
    """Grammar extensions the parser is allowed to recognize.

    Parameters
    ----------
    tables : bool, default False
        GFM pipe tables
    task_lists : bool, default False
        ``- [ ]`` and ``- [x]`` checkboxes
    strikethrough : bool, default False
        ``~~text~~``
    footnotes : bool, default False
        ``[^1]`` references and definitions
    smart_punctuation : bool, default False
        Curly quotes, en/em dashes and ellipses in text

    """

    tables: bool = False
    task_lists: bool = False
    strikethrough: bool = False
    footnotes: bool = False
    smart_punctuation: bool = False

    @classmethod
    def from_gfm(cls, enable_gfm: bool) -> ParserCapabilities:
        """Return the capability set for the ``enable_gfm`` render option."""
        return cls(
            tables=enable_gfm,
            task_lists=enable_gfm,
            strikethrough=enable_gfm,
            footnotes=enable_gfm,
            smart_punctuation=enable_gfm,
        )

    def mistune_plugins(self) -> list[str]:
        """Return the mistune plugin names for the enabled capabilities."""
        plugins = []
        if self.strikethrough:
            plugins.append("strikethrough")
        if self.tables:
            plugins.append("table")
        if self.footnotes:
            plugins.append("footnotes")
        if self.task_lists:
            plugins.append("task_lists")
        return plugins


def smarten_punctuation(text: str) -> str:
    """Replace ASCII punctuation with typographic equivalents.

    Examples
    --------
    >>> smarten_punctuation('"Wait" -- it\\'s 1990--2000...')
    '“Wait” – it’s 1990–2000…'

    """
    text = text.replace("---", "—").replace("--", "–").replace("...", "…")
    text = _DOUBLE_OPEN_PATTERN.sub("“", text).replace('"', "”")
    text = _SINGLE_OPEN_PATTERN.sub("‘", text).replace("'", "’")
    return text


class SmartPunctuationRenderer(mistune.HTMLRenderer):
    """HTML renderer that leaves URLs untouched and optionally smartens text.

    mistune rewrites ``javascript:``, ``file:`` and ``data:`` URLs to
    ``#harmful-link`` by default; that is disabled here because the resource
    policy must see, report and neutralize those URLs itself.

    Parameters
    ----------
    smart_punctuation : bool, default False
        Apply :func:`smarten_punctuation` to text runs

    """

    def __init__(self, smart_punctuation: bool = False) -> None:
        """Initialize the renderer with raw HTML pass-through enabled."""
        super().__init__(escape=False, allow_harmful_protocols=True)
        self._smart_punctuation = smart_punctuation

    def text(self, text: str) -> str:
        if self._smart_punctuation:
            text = smarten_punctuation(text)
        return super().text(text)


class MarkdownHtmlParser:
    r"""Convert markdown to untrusted HTML with mistune.

    Parameters
    ----------
    capabilities : ParserCapabilities or None, default = None
        Enabled grammar extensions; none when omitted

    Examples
    --------
        >>> parser = MarkdownHtmlParser(ParserCapabilities.from_gfm(True))
        >>> parser.parse("# Title\n\n~~old~~")
        '<h1>Title</h1>\n<p><del>old</del></p>\n'

    """

    def __init__(self, capabilities: ParserCapabilities | None = None) -> None:
        """Initialize the parser with its capability set."""
        self.capabilities = capabilities or ParserCapabilities()

    def _create_markdown(self) -> Any:
        renderer = SmartPunctuationRenderer(smart_punctuation=self.capabilities.smart_punctuation)
        return mistune.create_markdown(renderer=renderer, plugins=self.capabilities.mistune_plugins())

    def parse(self, markdown: str) -> str:
        """Render markdown text to HTML.

        Parameters
        ----------
        markdown : str
            Markdown source

        Returns
        -------
        str
            Untrusted HTML reflecting only the enabled capabilities

        """
        logger.debug("Parsing markdown with plugins: %s", self.capabilities.mistune_plugins())
        result = self._create_markdown()(markdown)
        # mistune returns a str for HTML renderers; guard against renderer misconfiguration
        return result if isinstance(result, str) else ""


__all__ = ["ParserCapabilities", "SmartPunctuationRenderer", "MarkdownHtmlParser", "smarten_punctuation"]

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Markdown grammar parser adapters."""

from mdrender.parsers.markdown import MarkdownHtmlParser, ParserCapabilities, SmartPunctuationRenderer

__all__ = ["MarkdownHtmlParser", "ParserCapabilities", "SmartPunctuationRenderer"]

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the mistune-backed markdown parser."""

import pytest
from bs4 import BeautifulSoup

from mdrender.parsers.markdown import MarkdownHtmlParser, ParserCapabilities, smarten_punctuation


@pytest.fixture
def gfm_parser():
    return MarkdownHtmlParser(ParserCapabilities.from_gfm(True))


@pytest.fixture
def plain_parser():
    return MarkdownHtmlParser(ParserCapabilities.from_gfm(False))


@pytest.mark.unit
class TestParserCapabilities:
    """Test capability flags and plugin selection."""

    def test_gfm_enables_everything(self):
        capabilities = ParserCapabilities.from_gfm(True)

        assert capabilities.tables and capabilities.task_lists and capabilities.footnotes
        assert capabilities.smart_punctuation
        assert set(capabilities.mistune_plugins()) == {"strikethrough", "table", "footnotes", "task_lists"}

    def test_plain_has_no_plugins(self):
        assert ParserCapabilities.from_gfm(False).mistune_plugins() == []
        assert ParserCapabilities().mistune_plugins() == []


@pytest.mark.unit
class TestSmartenPunctuation:
    """Test typographic replacements."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("a -- b", "a – b"),
            ("a --- b", "a — b"),
            ("wait...", "wait…"),
            ('"quoted"', "“quoted”"),
            ("it's", "it’s"),
            ("'single'", "‘single’"),
            ('("inner")', "(“inner”)"),
        ],
    )
    def test_replacements(self, text, expected):
        assert smarten_punctuation(text) == expected

    def test_plain_text_unchanged(self):
        assert smarten_punctuation("nothing to do") == "nothing to do"


@pytest.mark.unit
class TestMarkdownHtmlParser:
    """Test markdown to HTML conversion."""

    def test_headings_and_paragraphs(self, plain_parser):
        soup = BeautifulSoup(plain_parser.parse("# Title\n\nBody **bold**"), "html.parser")

        assert soup.h1.get_text() == "Title"
        assert soup.h1.get("id") is None
        assert soup.strong.get_text() == "bold"

    def test_gfm_table(self, gfm_parser):
        soup = BeautifulSoup(gfm_parser.parse("| a | b |\n|---|---|\n| 1 | 2 |\n"), "html.parser")

        assert soup.table is not None
        assert [th.get_text() for th in soup.find_all("th")] == ["a", "b"]

    def test_table_not_parsed_without_gfm(self, plain_parser):
        assert "<table" not in plain_parser.parse("| a | b |\n|---|---|\n| 1 | 2 |\n")

    def test_task_list(self, gfm_parser):
        soup = BeautifulSoup(gfm_parser.parse("- [x] done\n- [ ] todo\n"), "html.parser")
        boxes = soup.find_all("input")

        assert len(boxes) == 2
        assert all(box["type"] == "checkbox" for box in boxes)
        assert boxes[0].has_attr("checked")
        assert not boxes[1].has_attr("checked")

    def test_strikethrough(self, gfm_parser, plain_parser):
        assert "<del>old</del>" in gfm_parser.parse("~~old~~")
        assert "<del>" not in plain_parser.parse("~~old~~")

    def test_footnotes(self, gfm_parser):
        html_out = gfm_parser.parse("Claim[^1].\n\n[^1]: Source.\n")

        assert "footnote" in html_out
        assert "Source." in html_out

    def test_smart_punctuation_only_with_gfm(self, gfm_parser, plain_parser):
        assert "–" in gfm_parser.parse("a -- b")
        assert "--" in plain_parser.parse("a -- b")

    def test_code_not_smartened(self, gfm_parser):
        html_out = gfm_parser.parse("```\na -- b...\n```\n")
        assert "a -- b..." in html_out

    def test_fenced_code_language_class(self, plain_parser):
        soup = BeautifulSoup(plain_parser.parse("```mermaid\nA-->B\n```\n"), "html.parser")

        assert soup.code["class"] == ["language-mermaid"]
        assert soup.code.get_text() == "A-->B\n"

    def test_math_left_literal(self, gfm_parser):
        html_out = gfm_parser.parse("Inline $E=mc^2$ and\n\n$$a^2$$\n")

        assert "$E=mc^2$" in html_out
        assert "$$a^2$$" in html_out

    def test_raw_html_passed_through(self, plain_parser):
        """Raw HTML reaches the sanitizer intact."""
        assert "<script>" in plain_parser.parse("<script>alert(1)</script>\n")

    def test_urls_left_as_written(self, plain_parser):
        """Harmful schemes are not rewritten so the resource policy can report them."""
        soup = BeautifulSoup(
            plain_parser.parse("[x](javascript:alert) ![i](file:///etc/passwd)"), "html.parser"
        )

        assert soup.a["href"] == "javascript:alert"
        assert soup.img["src"] == "file:///etc/passwd"

    def test_parser_is_reusable(self, plain_parser):
        assert plain_parser.parse("a") == plain_parser.parse("a")

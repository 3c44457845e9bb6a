#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for table-of-contents extraction and heading anchors."""

import re

import pytest
from bs4 import BeautifulSoup
from hypothesis import given
from hypothesis import strategies as st

from mdrender.models import TocItem
from mdrender.toc import SlugRegistry, collect_toc, inject_heading_ids, parse_atx_heading, slugify


@pytest.mark.unit
class TestSlugify:
    """Test slug derivation."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Hello, World!", "hello-world"),
            ("Getting Started", "getting-started"),
            ("  API -- Reference (v2.0) ", "api-reference-v20"),
            ("Café", "caf"),
            ("multiple   spaces\tand-tabs", "multiple-spaces-and-tabs"),
            ("!!!", ""),
            ("", ""),
        ],
    )
    def test_slugify(self, text, expected):
        assert slugify(text) == expected

    def test_slug_charset(self):
        assert re.fullmatch(r"[a-z0-9-]*", slugify("Ünïcödé & Symbols: <b>bold</b> 42"))


@pytest.mark.unit
class TestSlugRegistry:
    """Test duplicate handling."""

    def test_repeats_are_numbered(self):
        registry = SlugRegistry()
        assert [registry.unique("same") for _ in range(3)] == ["same", "same-1", "same-2"]

    def test_collision_with_literal_suffix(self):
        """A heading literally named 'same-1' does not collide with the generated one."""
        registry = SlugRegistry()
        issued = [registry.unique("same"), registry.unique("same-1"), registry.unique("same")]

        assert issued == ["same", "same-1", "same-2"]
        assert len(set(issued)) == len(issued)

    def test_reserved_slugs_skipped(self):
        registry = SlugRegistry(reserved=["intro"])
        assert registry.unique("intro") == "intro-1"

    def test_empty_base(self):
        registry = SlugRegistry()
        assert registry.unique("") == ""
        assert registry.unique("") == "-1"


@pytest.mark.unit
class TestParseAtxHeading:
    """Test single-line heading recognition."""

    @pytest.mark.parametrize(
        "line,expected",
        [
            ("# Title", (1, "Title")),
            ("###### Six", (6, "Six")),
            ("  ## Indented ##  ", (2, "Indented")),
            ("##NoSpace", (2, "NoSpace")),
            ("### Trailing ###", (3, "Trailing")),
        ],
    )
    def test_headings(self, line, expected):
        assert parse_atx_heading(line) == expected

    @pytest.mark.parametrize("line", ["####### Seven", "#", "##   ", "plain text", "", "   "])
    def test_non_headings(self, line):
        assert parse_atx_heading(line) is None


@pytest.mark.unit
class TestCollectToc:
    """Test TOC extraction from markdown."""

    def test_levels_titles_and_anchors(self):
        toc = collect_toc("# Intro\ntext\n## Install ##\n### Linux\n")

        assert toc == [
            TocItem(level=1, title="Intro", anchor="user-content-intro"),
            TocItem(level=2, title="Install", anchor="user-content-install"),
            TocItem(level=3, title="Linux", anchor="user-content-linux"),
        ]

    def test_titles_without_ascii_alphanumerics(self):
        toc = collect_toc("# !!!\n# ---\n")

        assert [item.anchor for item in toc] == ["user-content-", "user-content--1"]

    def test_duplicate_titles_unique_anchors(self):
        toc = collect_toc("# Same\n## Same\n### Same\n")

        assert [item.anchor for item in toc] == [
            "user-content-same",
            "user-content-same-1",
            "user-content-same-2",
        ]

    def test_title_keeps_inline_markup(self):
        """Titles are the raw heading text, not rendered HTML."""
        toc = collect_toc("## Use `render` **now**\n")

        assert toc[0].title == "Use `render` **now**"
        assert toc[0].anchor == "user-content-use-render-now"

    def test_empty_and_setext_documents(self):
        assert collect_toc("") == []
        assert collect_toc("Title\n=====\n") == []

    def test_crlf_line_endings(self):
        toc = collect_toc("# One\r\n## Two\r\n")
        assert [item.title for item in toc] == ["One", "Two"]


@pytest.mark.unit
class TestInjectHeadingIds:
    """Test positional anchor injection."""

    def test_anchors_assigned_in_order(self):
        toc = collect_toc("# A\n## B\n## C\n")
        html_out = inject_heading_ids("<h1>A</h1>\n<h2>B</h2>\n<h2>C</h2>", toc)

        ids = [h["id"] for h in BeautifulSoup(html_out, "html.parser").find_all(["h1", "h2"])]
        assert ids == ["user-content-a", "user-content-b", "user-content-c"]

    def test_existing_id_replaced(self):
        toc = [TocItem(level=2, title="X", anchor="user-content-x")]
        html_out = inject_heading_ids('<h2 class="c" id="author-id">X</h2>', toc)

        heading = BeautifulSoup(html_out, "html.parser").h2
        assert heading["id"] == "user-content-x"
        assert heading["class"] == ["c"]
        assert "author-id" not in html_out

    def test_fallback_anchor_when_toc_exhausted(self):
        html_out = inject_heading_ids("<h1>Raw</h1>", [])
        assert 'id="user-content-heading-0"' in html_out

    def test_fallback_anchors_are_unique(self):
        html_out = inject_heading_ids("<h1>a</h1><h1>b</h1>", [])

        ids = [h["id"] for h in BeautifulSoup(html_out, "html.parser").find_all("h1")]
        assert len(set(ids)) == 2

    def test_level_mismatch_skips_forward(self):
        """A heading takes the next entry of its own level."""
        toc = collect_toc("# One\n## Two\n")
        html_out = inject_heading_ids("<h2>Two</h2>", toc)

        assert 'id="user-content-two"' in html_out

    def test_content_untouched(self):
        toc = collect_toc("# Title\n")
        html_out = inject_heading_ids("<h1>Title <em>x</em></h1><p>h1</p>", toc)

        assert html_out == '<h1 id="user-content-title">Title <em>x</em></h1><p>h1</p>'

    def test_non_heading_tags_ignored(self):
        html_out = inject_heading_ids("<hr><header>x</header><h7>y</h7>", [])
        assert "id=" not in html_out


_TITLES = st.text(alphabet="abcXYZ 019-", min_size=1, max_size=12).filter(lambda t: t.strip(" ") != "")
_HEADINGS = st.lists(st.tuples(st.integers(min_value=1, max_value=6), _TITLES), max_size=15)


@pytest.mark.unit
@pytest.mark.fuzzing
class TestTocProperties:
    """Property-based tests for TOC invariants."""

    @given(_HEADINGS)
    def test_one_entry_per_heading_with_unique_anchors(self, headings):
        markdown = "\n".join(f"{'#' * level} {title}" for level, title in headings)
        toc = collect_toc(markdown)

        assert len(toc) == len(headings)
        assert [item.level for item in toc] == [level for level, _ in headings]
        assert len({item.anchor for item in toc}) == len(toc)
        assert all(item.anchor.startswith("user-content-") for item in toc)

    @given(_HEADINGS)
    def test_injection_follows_toc_order(self, headings):
        markdown = "\n".join(f"{'#' * level} {title}" for level, title in headings)
        toc = collect_toc(markdown)
        html_in = "".join(f"<h{level}>{title}</h{level}>" for level, title in headings)

        soup = BeautifulSoup(inject_heading_ids(html_in, toc), "html.parser")
        ids = [h["id"] for h in soup.find_all(re.compile(r"^h[1-6]$"))]
        assert ids == [item.anchor for item in toc]

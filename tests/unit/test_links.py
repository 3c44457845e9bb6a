#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for link navigation helpers."""

from pathlib import Path

import pytest

from mdrender.utils.links import (
    find_directory_index,
    is_external_link,
    is_in_page_anchor,
    markdown_target_path,
    resolve_link_path,
)


@pytest.mark.unit
class TestIsExternalLink:
    @pytest.mark.parametrize("url", ["https://example.com", "HTTP://x", "mailto:a@b.c", "tel:+1"])
    def test_external(self, url):
        assert is_external_link(url)

    @pytest.mark.parametrize("url", ["docs/a.md", "#top", "file:///a.md", "javascript:x"])
    def test_not_external(self, url):
        assert not is_external_link(url)


@pytest.mark.unit
class TestResolveLinkPath:
    """Test link to path resolution."""

    def test_relative_link(self):
        assert resolve_link_path("../guide/setup.md#install", "/repo/docs/intro.md") == Path("/repo/guide/setup.md")

    def test_percent_encoded_link(self):
        assert resolve_link_path("my%20notes.md", "/repo/a.md") == Path("/repo/my notes.md")

    def test_file_url(self):
        assert resolve_link_path("file:///repo/a.md", None) == Path("/repo/a.md")

    def test_absolute_path(self):
        assert resolve_link_path("/repo/b.md", "/elsewhere/a.md") == Path("/repo/b.md")

    def test_fragment_only_resolves_to_current_file(self):
        assert resolve_link_path("#top", "/repo/a.md") == Path("/repo/a.md")

    def test_other_schemes_and_missing_context(self):
        assert resolve_link_path("https://example.com/a.md", "/repo/a.md") is None
        assert resolve_link_path("b.md", None) is None

    def test_escaping_root(self):
        assert resolve_link_path("../../../x.md", "/repo/a.md") is None


@pytest.mark.unit
class TestIsInPageAnchor:
    def test_fragment_link(self):
        assert is_in_page_anchor("#section", "/repo/a.md")

    def test_same_file_with_fragment(self):
        assert is_in_page_anchor("a.md#section", "/repo/a.md")
        assert is_in_page_anchor("./a.md#section", "/repo/a.md")

    def test_other_file_or_no_fragment(self):
        assert not is_in_page_anchor("b.md#section", "/repo/a.md")
        assert not is_in_page_anchor("a.md", "/repo/a.md")
        assert not is_in_page_anchor("#", "/repo/a.md")

    def test_without_current_file(self):
        assert not is_in_page_anchor("#section", None)


@pytest.mark.unit
class TestMarkdownTargetPath:
    """Test resolution of links to markdown documents."""

    def test_markdown_file(self, repo_tree):
        current = repo_tree / "docs" / "index.md"
        assert markdown_target_path("standards/style.md", current) == repo_tree / "docs" / "standards" / "style.md"

    @pytest.mark.parametrize("suffix", [".md", ".MARKDOWN", ".mdown", ".mkd"])
    def test_extensions_case_insensitive(self, suffix):
        assert markdown_target_path(f"notes{suffix}", "/repo/a.md") == Path(f"/repo/notes{suffix}")

    def test_directory_opens_readme(self, repo_tree):
        assert markdown_target_path("../", repo_tree / "docs" / "index.md") == repo_tree / "README.md"

    def test_directory_opens_index(self, repo_tree):
        assert markdown_target_path("docs", repo_tree / "README.md") == repo_tree / "docs" / "index.md"

    def test_non_markdown_targets(self, repo_tree):
        assert markdown_target_path("image.png", repo_tree / "README.md") is None
        assert markdown_target_path("docs/standards", repo_tree / "README.md") is None
        assert markdown_target_path("https://example.com/a.md", repo_tree / "README.md") is None


@pytest.mark.unit
def test_find_directory_index_missing_directory(tmp_path):
    assert find_directory_index(tmp_path / "missing") is None

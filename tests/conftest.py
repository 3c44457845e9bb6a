"""Pytest configuration and shared fixtures for the mdrender test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "security: Tests for the resource policy and sanitizer")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture
def repo_tree(tmp_path: Path) -> Path:
    """Provide a small documentation repository on disk.

    Layout::

        repo/
          README.md
          docs/
            index.md
            standards/
              style.md
            background-knowledge/
              topic.md
        outside.md

    Returns
    -------
    Path
        The resolved ``repo`` directory.

    """
    root = tmp_path.resolve()
    repo = root / "repo"
    (repo / "docs" / "standards").mkdir(parents=True)
    (repo / "docs" / "background-knowledge").mkdir(parents=True)
    (repo / "README.md").write_text("# Repo\n", encoding="utf-8")
    (repo / "docs" / "index.md").write_text("# Docs\n", encoding="utf-8")
    (repo / "docs" / "standards" / "style.md").write_text("# Style\n", encoding="utf-8")
    (repo / "docs" / "background-knowledge" / "topic.md").write_text("# Topic\n", encoding="utf-8")
    (root / "outside.md").write_text("# Outside\n", encoding="utf-8")
    return repo


@pytest.fixture
def sample_markdown() -> str:
    """Provide a sample document exercising every pipeline stage.

    Returns
    -------
    str
        Markdown with headings, a table, a task list, a mermaid block,
        math, links and an image.

    """
    return """# Sample Document

This is a **sample document** with _italic text_ and some `inline code`.

## Tables

| Header 1 | Header 2 |
|----------|----------|
| Row 1    | Data 1   |

## Tasks

- [x] done
- [ ] todo

## Diagram

```mermaid
flowchart TD
A-->B
```

## Math

Inline $E=mc^2$ and block:

$$a^2 + b^2 = c^2$$

## Links

[Sibling](same.md), [nested](docs/file.md), [web](https://example.com) and ![logo](images/logo.png).
"""

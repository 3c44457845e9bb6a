#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Rewrite mermaid code blocks into diagram containers.

A fenced block tagged ``mermaid`` is rendered by the grammar parser as
``<pre><code class="language-mermaid">...</code></pre>``. A client-side
diagram renderer looks for ``<div class="mermaid">`` instead, so the block is
rewritten before sanitization. The diagram source is carried over verbatim
and is not validated.
"""

from __future__ import annotations

import re

_MERMAID_BLOCK_PATTERN = re.compile(r'<pre><code class="language-mermaid">(.*?)</code></pre>', re.DOTALL)


def rewrite_mermaid_blocks(content: str) -> str:
    """Turn mermaid code blocks into ``<div class="mermaid">`` containers.

    Parameters
    ----------
    content : str
        HTML produced by the grammar parser

    Returns
    -------
    str
        HTML with every mermaid code block rewritten

    Examples
    --------
    >>> rewrite_mermaid_blocks('<pre><code class="language-mermaid">graph TD\\nA--&gt;B\\n</code></pre>')
    '<div class="mermaid">graph TD\\nA--&gt;B\\n</div>'

    """
    return _MERMAID_BLOCK_PATTERN.sub(r'<div class="mermaid">\1</div>', content)


__all__ = ["rewrite_mermaid_blocks"]

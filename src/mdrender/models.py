#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdrender/models.py
"""Result records produced by a render call.

Every record here is frozen: a :class:`RenderedDocument` is the terminal
value of the pipeline and is never processed further.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class TocItem:
    """A table-of-contents entry extracted from an ATX heading.

    Parameters
    ----------
    level : int
        Heading level, 1 through 6
    title : str
        Display text of the heading, never empty
    anchor : str
        Identifier unique within the render call

    """

    level: int
    title: str
    anchor: str

    def to_dict(self) -> dict[str, Any]:
        """Convert the entry to a JSON-serializable dictionary."""
        return {"level": self.level, "title": self.title, "anchor": self.anchor}


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal finding recorded during a render call.

    Parameters
    ----------
    code : str
        Taxonomy tag, e.g. ``"blocked_resource"``
    message : str
        Human-readable description
    resource : str or None
        The offending URL, if any

    """

    code: str
    message: str
    resource: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert the diagnostic to a JSON-serializable dictionary."""
        return {"code": self.code, "message": self.message, "resource": self.resource}


@dataclass(frozen=True)
class RenderedDocument:
    """Sanitized HTML plus its table of contents and diagnostics.

    Parameters
    ----------
    html : str
        Sanitized HTML fragment with heading anchors injected
    toc : tuple of TocItem
        Headings in document order
    diagnostics : tuple of Diagnostic
        Blocked resources and other findings, in the order they were recorded

    """

    html: str
    toc: tuple[TocItem, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Convert the document to the boundary's JSON record.

        Returns
        -------
        dict
            ``{"html": ..., "toc": [...], "diagnostics": [...]}``

        """
        return {
            "html": self.html,
            "toc": [item.to_dict() for item in self.toc],
            "diagnostics": [diagnostic.to_dict() for diagnostic in self.diagnostics],
        }

    def to_json(self, indent: int | None = None) -> str:
        """Serialize the document as JSON text."""
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=indent)


__all__ = ["TocItem", "Diagnostic", "RenderedDocument"]

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for rendering markdown to sanitized HTML.

This module defines :class:`RenderOptions`, the record callers pass to
:func:`mdrender.render_markdown` directly or as JSON across the
:mod:`mdrender.ffi` boundary.
"""
# src/mdrender/options/render.py

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from mdrender.constants import (
    DEFAULT_ENABLE_GFM,
    DEFAULT_ENABLE_MATH,
    DEFAULT_ENABLE_MERMAID,
    DEFAULT_THEME,
)
from mdrender.exceptions import InvalidOptionsError
from mdrender.options.base import CloneFrozenMixin

_BOOL_FIELDS = ("enable_gfm", "enable_mermaid", "enable_math")
_PATH_FIELDS = ("base_dir", "allowed_root_dir")


@dataclass(frozen=True)
class RenderOptions(CloneFrozenMixin):
    """Configuration options for one render call.

    Parameters
    ----------
    enable_gfm : bool, default True
        Enable the GitHub-flavored extensions of the grammar parser: tables,
        task lists, strikethrough, footnotes and smart punctuation.
    enable_mermaid : bool, default True
        Rewrite ``mermaid`` fenced code blocks into ``<div class="mermaid">``
        containers for a client-side diagram renderer.
    enable_math : bool, default True
        Advertise math typesetting to the document shell. Math delimiters are
        always left as literal text in the HTML.
    base_dir : Path or None, default None
        Directory relative links and images are resolved against. Without it
        every relative resource is blocked.
    allowed_root_dir : Path or None, default None
        Boundary directory for resolved resources. Defaults to ``base_dir``.
    theme : str, default "github-light"
        Theme name applied as a class on the standalone document body.

    Examples
    --------
        >>> options = RenderOptions(base_dir="/tmp/repo/docs")
        >>> options.base_dir
        PosixPath('/tmp/repo/docs')
        >>> RenderOptions.from_json('{"enable_mermaid": false}').enable_mermaid
        False

    """

    enable_gfm: bool = field(
        default=DEFAULT_ENABLE_GFM,
        metadata={"help": "Enable tables, task lists, strikethrough, footnotes and smart punctuation"},
    )
    enable_mermaid: bool = field(
        default=DEFAULT_ENABLE_MERMAID,
        metadata={"help": "Rewrite mermaid code fences into diagram containers"},
    )
    enable_math: bool = field(
        default=DEFAULT_ENABLE_MATH,
        metadata={"help": "Enable client-side math typesetting in the document shell"},
    )
    base_dir: Path | None = field(
        default=None,
        metadata={"help": "Directory relative links and images are resolved against"},
    )
    allowed_root_dir: Path | None = field(
        default=None,
        metadata={"help": "Boundary directory for relative resources (defaults to base_dir)"},
    )
    theme: str = field(
        default=DEFAULT_THEME,
        metadata={"help": "Theme class applied to the standalone document body"},
    )

    def __post_init__(self) -> None:
        """Validate field types and coerce path-like values to ``Path``.

        Raises
        ------
        InvalidOptionsError
            If any field carries a value of the wrong type.

        """
        for name in _BOOL_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise InvalidOptionsError(
                    f"{name} must be a boolean, got {type(value).__name__}",
                    parameter_name=name,
                    parameter_value=value,
                )

        for name in _PATH_FIELDS:
            value = getattr(self, name)
            if value is None or isinstance(value, Path):
                continue
            if isinstance(value, (str, os.PathLike)):
                object.__setattr__(self, name, Path(value))
                continue
            raise InvalidOptionsError(
                f"{name} must be a path string or null, got {type(value).__name__}",
                parameter_name=name,
                parameter_value=value,
            )

        if not isinstance(self.theme, str):
            raise InvalidOptionsError(
                f"theme must be a string, got {type(self.theme).__name__}",
                parameter_name="theme",
                parameter_value=self.theme,
            )

    @property
    def boundary_dir(self) -> Path | None:
        """Return the directory resolved resources must stay within."""
        return self.allowed_root_dir if self.allowed_root_dir is not None else self.base_dir

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RenderOptions:
        """Build options from a decoded JSON object.

        Missing keys take their defaults and unknown keys are ignored.

        Parameters
        ----------
        data : Mapping[str, Any]
            Decoded options record

        Returns
        -------
        RenderOptions
            Validated options

        Raises
        ------
        InvalidOptionsError
            If ``data`` is not a mapping or a field has the wrong type

        """
        if not isinstance(data, Mapping):
            raise InvalidOptionsError(
                f"options must be a JSON object, got {type(data).__name__}", parameter_value=data
            )

        return cls.from_mapping(data)

    @classmethod
    def from_json(cls, payload: str | bytes) -> RenderOptions:
        """Build options from a JSON document.

        Parameters
        ----------
        payload : str or bytes
            JSON text of the options record

        Returns
        -------
        RenderOptions
            Validated options

        Raises
        ------
        InvalidOptionsError
            If the payload is not valid JSON or does not describe valid options

        """
        try:
            data = json.loads(payload)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise InvalidOptionsError(f"invalid options json: {e}", original_error=e) from e
        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        """Convert options to a JSON-serializable dictionary.

        Returns
        -------
        dict
            Options record with paths rendered as strings

        """
        return {
            "enable_gfm": self.enable_gfm,
            "enable_mermaid": self.enable_mermaid,
            "enable_math": self.enable_math,
            "base_dir": str(self.base_dir) if self.base_dir is not None else None,
            "allowed_root_dir": str(self.allowed_root_dir) if self.allowed_root_dir is not None else None,
            "theme": self.theme,
        }

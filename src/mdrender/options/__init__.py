#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration records for the mdrender pipeline."""

from mdrender.options.base import CloneFrozenMixin
from mdrender.options.render import RenderOptions

__all__ = ["CloneFrozenMixin", "RenderOptions"]

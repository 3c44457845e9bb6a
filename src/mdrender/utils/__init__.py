#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Path, security and sanitization helpers for the mdrender pipeline."""

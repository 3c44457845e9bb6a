#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdrender/ffi.py
"""JSON boundary for callers in other runtimes.

:func:`render_json` takes markdown text and a JSON options record and returns
a :class:`RenderResult` carrying either the JSON-serialized
:class:`~mdrender.models.RenderedDocument` or a descriptive error message.
Both arguments may be given as ``str`` or as UTF-8 encoded ``bytes``, which is
the form a C-style caller hands over.

The error travels inside the result value. There is no process-wide
"last error" slot, so concurrent callers cannot observe each other's
failures, and no buffer needs to be released explicitly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from mdrender.api import render_markdown
from mdrender.exceptions import InputEncodingError, InvalidOptionsError, MdRenderError, RenderingError
from mdrender.options.render import RenderOptions

logger = logging.getLogger(__name__)

NULL_INPUT_MESSAGE = "null pointer passed to ffi"
INVALID_UTF8_MESSAGE = "invalid utf-8 input passed to ffi"


@dataclass(frozen=True)
class RenderResult:
    """Outcome of a boundary render call: a JSON payload or an error message.

    Exactly one of ``payload`` and ``error`` is set.

    Parameters
    ----------
    payload : str or None
        JSON text ``{"html": ..., "toc": [...], "diagnostics": [...]}``
    error : str or None
        Description of the failure

    """

    payload: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        """Whether the render succeeded."""
        return self.error is None

    def unwrap(self) -> str:
        """Return the payload, raising when the call failed.

        Raises
        ------
        RenderingError
            If the result carries an error

        """
        if self.error is not None:
            raise RenderingError(self.error)
        return self.payload if self.payload is not None else ""


def _decode_argument(value: str | bytes | None) -> str:
    if value is None:
        raise InputEncodingError(NULL_INPUT_MESSAGE)
    if isinstance(value, str):
        return value
    try:
        return bytes(value).decode("utf-8")
    except UnicodeDecodeError as e:
        raise InputEncodingError(INVALID_UTF8_MESSAGE, original_error=e) from e


def render_json(markdown: str | bytes | None, options_json: str | bytes | None) -> RenderResult:
    """Render markdown and return the JSON-serialized result.

    Parameters
    ----------
    markdown : str, bytes or None
        Markdown text, or its UTF-8 encoding
    options_json : str, bytes or None
        JSON options record (see :class:`~mdrender.options.render.RenderOptions`)

    Returns
    -------
    RenderResult
        The JSON payload on success; otherwise an error message. Caller
        errors (missing arguments, invalid UTF-8, malformed options) never
        raise.

    Examples
    --------
        >>> result = render_json("# Hi", '{"base_dir": null}')
        >>> result.ok
        True
        >>> render_json("# Hi", "{not json").error.startswith("invalid options json")
        True

    """
    try:
        markdown_text = _decode_argument(markdown)
        options_text = _decode_argument(options_json)
        options = RenderOptions.from_json(options_text)
    except InvalidOptionsError as e:
        message = e.message if e.message.startswith("invalid options json") else f"invalid options json: {e.message}"
        logger.debug("Rejected options: %s", message)
        return RenderResult(error=message)
    except InputEncodingError as e:
        return RenderResult(error=e.message)

    try:
        rendered = render_markdown(markdown_text, options)
    except MdRenderError as e:
        logger.debug("Render failed: %s", e.message)
        return RenderResult(error=f"markdown render failed: {e.message}")
    except Exception as e:
        # Nothing may escape the boundary; the caller only sees the result value
        logger.debug("Unexpected render failure: %r", e)
        return RenderResult(error=f"markdown render failed: {e}")

    try:
        payload = rendered.to_json()
    except (TypeError, ValueError) as e:
        return RenderResult(error=f"serialization failed: {e}")

    return RenderResult(payload=payload)


__all__ = ["RenderResult", "render_json", "NULL_INPUT_MESSAGE", "INVALID_UTF8_MESSAGE"]

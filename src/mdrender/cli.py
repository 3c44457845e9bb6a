#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for the mdrender library.

Examples
--------
Render a file to the JSON record (HTML, TOC, diagnostics):
    $ mdrender README.md

Render a standalone page, allowing links anywhere under the repository:
    $ mdrender docs/guide/intro.md --allowed-root-dir . --format document --out intro.html

Read markdown from stdin:
    $ cat notes.md | mdrender - --base-dir . --format html

Show blocked resources as a table:
    $ mdrender README.md --rich --format html

Use environment variables for defaults:
    $ export MDRENDER_THEME=github-dark
    $ mdrender notes.md --format document
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.table import Table

from mdrender.api import read_markdown_file, render_markdown
from mdrender.constants import DEFAULT_OUTPUT_FORMAT, ENV_VAR_PREFIX
from mdrender.document import build_html_document
from mdrender.exceptions import InputEncodingError, MdRenderError
from mdrender.logging_utils import configure_logging
from mdrender.models import RenderedDocument
from mdrender.options.render import RenderOptions

logger = logging.getLogger(__name__)

_TRUTHY = ("true", "1", "yes", "on")


def get_env_var_value(key: str) -> Optional[str]:
    """Get environment variable with the MDRENDER_ prefix.

    Parameters
    ----------
    key : str
        The parameter name (e.g., 'theme', 'base_dir')

    Returns
    -------
    Optional[str]
        Environment variable value or None if not set

    """
    env_key = f"{ENV_VAR_PREFIX}{key.upper().replace('-', '_')}"
    return os.environ.get(env_key)


def apply_env_vars_to_parser(parser: argparse.ArgumentParser) -> None:
    """Apply environment variables as defaults to parser arguments.

    CLI arguments still take precedence over environment variables. Boolean
    switches read the variable named after their destination, so
    ``MDRENDER_ENABLE_MERMAID=false`` has the same effect as ``--no-mermaid``.

    Parameters
    ----------
    parser : argparse.ArgumentParser
        The argument parser to modify

    """
    for action in parser._actions:
        if not action.dest or action.dest in ("help", "input"):
            continue

        env_value = get_env_var_value(action.dest)
        if env_value is None:
            continue

        if isinstance(action, (argparse._StoreTrueAction, argparse._StoreFalseAction)):
            action.default = env_value.lower() in _TRUTHY
        elif action.choices:
            if env_value in action.choices:
                action.default = env_value
            else:
                logger.warning(
                    "Invalid choice for %s%s: %s. Choices: %s",
                    ENV_VAR_PREFIX,
                    action.dest.upper(),
                    env_value,
                    list(action.choices),
                )
        else:
            action.default = env_value


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the mdrender command."""
    parser = argparse.ArgumentParser(
        prog="mdrender",
        description="Render markdown to sanitized HTML with a table of contents and resource diagnostics.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input", help="Markdown file to render, or '-' to read from stdin")
    parser.add_argument("--out", "-o", help="Write output to this file instead of stdout")
    parser.add_argument(
        "--format",
        choices=["json", "html", "document"],
        default=DEFAULT_OUTPUT_FORMAT,
        help="Output: JSON record, HTML fragment, or standalone HTML document (default: %(default)s)",
    )
    parser.add_argument("--options-json", help="Load render options from a JSON file; flags below override it")

    render_group = parser.add_argument_group("render options")
    render_group.add_argument(
        "--base-dir", help="Directory relative links are resolved against (default: the input file's directory)"
    )
    render_group.add_argument(
        "--allowed-root-dir", help="Boundary directory for relative links and images (default: base dir)"
    )
    render_group.add_argument(
        "--no-gfm", dest="enable_gfm", action="store_false", default=None, help="Disable GitHub-flavored extensions"
    )
    render_group.add_argument(
        "--no-mermaid",
        dest="enable_mermaid",
        action="store_false",
        default=None,
        help="Leave mermaid code blocks as code",
    )
    render_group.add_argument(
        "--no-math", dest="enable_math", action="store_false", default=None, help="Disable math in the document shell"
    )
    render_group.add_argument("--theme", help="Theme class for the standalone document")

    log_group = parser.add_argument_group("logging")
    log_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: %(default)s)",
    )
    log_group.add_argument("--log-file", help="Also write log output to this file")
    log_group.add_argument("--trace", action="store_true", help="Include timestamps and logger names in log output")

    parser.add_argument(
        "--rich", action="store_true", help="Print a table of blocked resources to stderr using rich formatting"
    )

    apply_env_vars_to_parser(parser)
    return parser


def build_options(parsed_args: argparse.Namespace) -> RenderOptions:
    """Map parsed arguments onto render options.

    Raises
    ------
    MdRenderError
        If the options file cannot be read or is invalid

    """
    if parsed_args.options_json:
        try:
            payload = Path(parsed_args.options_json).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise MdRenderError(f"Cannot read options file {parsed_args.options_json}: {e}", original_error=e) from e
        options = RenderOptions.from_json(payload)
    else:
        options = RenderOptions()

    updates: dict[str, object] = {}
    for name in ("base_dir", "allowed_root_dir", "theme", "enable_gfm", "enable_mermaid", "enable_math"):
        value = getattr(parsed_args, name)
        if value is not None:
            updates[name] = value

    if options.base_dir is None and "base_dir" not in updates and parsed_args.input != "-":
        updates["base_dir"] = Path(parsed_args.input).parent

    return options.create_updated(**updates) if updates else options


def format_output(rendered: RenderedDocument, options: RenderOptions, output_format: str) -> str:
    """Serialize a rendered document in the requested output format."""
    if output_format == "html":
        return rendered.html
    if output_format == "document":
        return build_html_document(rendered, options)
    return rendered.to_json(indent=2)


def print_diagnostics_table(rendered: RenderedDocument, console: Console) -> None:
    """Print the diagnostics of a render as a rich table."""
    table = Table(title="Blocked Resources")
    table.add_column("Code", style="cyan", no_wrap=True)
    table.add_column("Resource", style="magenta")
    table.add_column("Message")

    for diagnostic in rendered.diagnostics:
        table.add_row(diagnostic.code, diagnostic.resource or "", diagnostic.message)

    console.print(table)


def _read_stdin() -> str:
    data = sys.stdin.buffer.read()
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InputEncodingError("Markdown read from stdin is not UTF-8 encoded", original_error=e) from e


def main(args: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    try:
        options = build_options(parsed_args)
        markdown = _read_stdin() if parsed_args.input == "-" else read_markdown_file(parsed_args.input)
        rendered = render_markdown(markdown, options)
    except MdRenderError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    for diagnostic in rendered.diagnostics:
        logger.warning("%s: %s (%s)", diagnostic.code, diagnostic.message, diagnostic.resource)

    if parsed_args.rich and rendered.diagnostics:
        print_diagnostics_table(rendered, Console(stderr=True))

    output = format_output(rendered, options, parsed_args.format)

    if parsed_args.out:
        output_path = Path(parsed_args.out)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(output, encoding="utf-8")
        except OSError as e:
            print(f"Error: Cannot write {output_path}: {e}", file=sys.stderr)
            return 1
        logger.info("Wrote %s", output_path)
    else:
        print(output)

    return 0

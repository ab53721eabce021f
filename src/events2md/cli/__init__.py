#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Command-line interface for events2md.

Render a JSON event stream (see ``events2md.serialization``) to Markdown.

Examples
--------
Render to stdout::

    $ events2md document.events.json

Write to a file::

    $ events2md document.events.json -o document.md

Read from stdin and preview in the terminal::

    $ cat document.events.json | events2md - --preview

Configuration
-------------
Option defaults are read from the first configuration file found among
``.events2md.toml``, ``.events2md.yaml``, ``.events2md.yml``,
``.events2md.json`` or a ``[tool.events2md]`` section of ``pyproject.toml``
(searched from the working directory upwards, then in the home directory).
``--config`` or the ``EVENTS2MD_CONFIG`` environment variable select a file
explicitly. Command-line flags override configuration file values.

"""

import argparse
import logging
import os
import sys
from typing import Any, Optional, Sequence, cast

from events2md import __version__
from events2md.api import render_json
from events2md.cli.config import CONFIG_ENV_VAR, load_config_with_priority
from events2md.cli.output import print_markdown
from events2md.constants import (
    EXIT_FILE_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    UNHANDLED_MACRO_MODES,
)
from events2md.exceptions import DependencyError, FileError, ParsingError, RenderingError
from events2md.logging_utils import LOG_LEVELS, configure_logging
from events2md.options.markdown import MarkdownRendererOptions
from events2md.utils.io_utils import write_text

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the events2md command."""
    parser = argparse.ArgumentParser(
        prog="events2md",
        description="Render a JSON document event stream as Markdown.",
    )
    parser.add_argument("input", help="JSON event stream file, or '-' to read from stdin")
    parser.add_argument("-o", "--out", help="Write Markdown to this file instead of stdout")
    parser.add_argument("--config", help="Configuration file (.toml, .yaml, .yml, .json or pyproject.toml)")

    rendering = parser.add_argument_group("rendering options")
    rendering.add_argument(
        "--no-escape",
        dest="escape_special",
        action="store_const",
        const=False,
        default=None,
        help="Do not escape Markdown metacharacters in document text",
    )
    rendering.add_argument(
        "--no-table-pipe-escape",
        dest="table_pipe_escape",
        action="store_const",
        const=False,
        default=None,
        help="Do not escape pipe characters inside table cells",
    )
    rendering.add_argument(
        "--unhandled-macros",
        dest="unhandled_macro_mode",
        choices=UNHANDLED_MACRO_MODES,
        default=None,
        help="How to render macros other than 'code' (default: xwiki)",
    )

    output = parser.add_argument_group("output")
    output.add_argument("--preview", action="store_true", help="Show the rendered document with Rich formatting")
    output.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    output.add_argument("--log-file", help="Also write log messages to this file")
    output.add_argument("--trace", action="store_true", help="Log at DEBUG level with timestamps and source locations")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def build_options(args: argparse.Namespace, config: dict[str, Any]) -> MarkdownRendererOptions:
    """Combine configuration file values and command-line flags into renderer options.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed arguments; ``None`` values mean "not given"
    config : dict
        Values loaded from a configuration file

    Returns
    -------
    MarkdownRendererOptions
        Options with flags taking precedence over the configuration file

    Raises
    ------
    ValueError
        If a value is out of range

    """
    values = dict(config)
    for name in ("escape_special", "table_pipe_escape", "unhandled_macro_mode"):
        value = getattr(args, name, None)
        if value is not None:
            values[name] = value
    return MarkdownRendererOptions.from_dict(values)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the events2md command.

    Parameters
    ----------
    argv : sequence of str, optional
        Command-line arguments (defaults to sys.argv[1:])

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, log_file=args.log_file, trace_mode=args.trace)

    try:
        config = load_config_with_priority(args.config, os.environ.get(CONFIG_ENV_VAR))
        options = build_options(args, config)
    except (argparse.ArgumentTypeError, ValueError, TypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    source = sys.stdin if args.input == "-" else args.input
    try:
        # Without an output target the text is returned
        markdown = cast(str, render_json(source, options))
    except (FileError, ParsingError) as e:
        logger.error(e.message)
        return EXIT_FILE_ERROR
    except RenderingError as e:
        logger.error(f"Rendering failed: {e.message}")
        return EXIT_RENDERING_ERROR

    try:
        if args.out:
            write_text(markdown, args.out)
            logger.info(f"Wrote {args.out}")
        else:
            print_markdown(markdown, preview=args.preview)
    except (RenderingError, DependencyError) as e:
        logger.error(e.message)
        return EXIT_RENDERING_ERROR

    return EXIT_SUCCESS

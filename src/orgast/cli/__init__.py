#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgast/cli/__init__.py
"""Command-line interface for the orgast org-mode parser.

Examples
--------
Print the AST of a document as JSON::

    $ orgast parse notes.org --indent 2

Parse with custom TODO keywords and fail on unterminated blocks::

    $ orgast parse notes.org --todo "TODO STARTED" --done "DONE" --strict

Round-trip a document through the AST::

    $ orgast serialize notes.org --out normalized.org

Show the headline tree::

    $ orgast outline notes.org

Find the nodes at line 12, column 5::

    $ orgast locate notes.org 12:5

Options are also read from ``.orgast.toml`` (or ``.yaml``/``.json``, or the
``[tool.orgast]`` table of ``pyproject.toml``) found in the working
directory, its parents, or the home directory. Explicit flags win over the
file. ``ORGAST_CONFIG`` names a configuration file to use instead.

"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import fields
from typing import Any, Optional

from orgast.cli.builder import add_options_arguments
from orgast.cli.commands import COMMAND_HANDLERS
from orgast.cli.config import discover_config_file, load_config_file, options_from_config
from orgast.constants import (
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_VALIDATION_ERROR,
)
from orgast.exceptions import (
    FileError,
    InvalidOptionsError,
    OrgAstError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from orgast.logging_utils import configure_logging
from orgast.options.org import OrgParserOptions, OrgSerializerOptions

logger = logging.getLogger(__name__)

__all__ = ["main", "create_parser", "load_config_file"]

CONFIG_ENV_VAR = "ORGAST_CONFIG"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _package_version() -> str:
    from importlib.metadata import PackageNotFoundError, version

    try:
        return version("orgast")
    except PackageNotFoundError:
        return "unknown"


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``orgast`` command."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("file", help="Org file to read, or - for standard input")
    add_options_arguments(common, OrgParserOptions, "parser options")

    parser = argparse.ArgumentParser(
        prog="orgast",
        description="Parse org-mode documents into a typed AST with source positions.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    parser.add_argument("--config", help="Configuration file (TOML, YAML, JSON or pyproject.toml)")
    parser.add_argument("--no-config", action="store_true", help="Ignore configuration files")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log records to this file")
    parser.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    parse_cmd = subparsers.add_parser("parse", parents=[common], help="Print the AST as JSON")
    parse_cmd.add_argument("--indent", type=int, default=2, help="JSON indentation, 0 for compact (default: 2)")
    parse_cmd.add_argument("--out", "-o", help="Write to this file instead of standard output")

    serialize_cmd = subparsers.add_parser("serialize", parents=[common], help="Parse and write back org text")
    serialize_cmd.add_argument("--out", "-o", help="Write to this file instead of standard output")
    add_options_arguments(serialize_cmd, OrgSerializerOptions, "serializer options")

    subparsers.add_parser("outline", parents=[common], help="Show the headline tree")

    locate_cmd = subparsers.add_parser("locate", parents=[common], help="Show the nodes at a position")
    locate_cmd.add_argument("position", help="1-based LINE:COL")

    return parser


def _setup_logging(parsed_args: argparse.Namespace) -> None:
    log_level = logging.DEBUG if parsed_args.trace else getattr(logging, parsed_args.log_level)
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _load_config(parsed_args: argparse.Namespace) -> dict[str, Any]:
    if parsed_args.no_config:
        return {}
    config_path = parsed_args.config or os.environ.get(CONFIG_ENV_VAR) or discover_config_file()
    if not config_path:
        return {}
    logger.debug(f"Loading configuration from {config_path}")
    return load_config_file(config_path)


def _explicit(parsed_args: argparse.Namespace, options_class: type) -> dict[str, Any]:
    names = {f.name for f in fields(options_class)}
    return {name: value for name, value in vars(parsed_args).items() if name in names and value is not None}


def resolve_options(parsed_args: argparse.Namespace) -> tuple[OrgParserOptions, OrgSerializerOptions]:
    """Merge configuration file values with explicit command-line flags.

    Raises
    ------
    argparse.ArgumentTypeError
        If the configuration file or a flag value is invalid

    """
    parser_options, serializer_options = options_from_config(_load_config(parsed_args))
    try:
        parser_options = parser_options.create_updated(**_explicit(parsed_args, OrgParserOptions))
        serializer_options = serializer_options.create_updated(**_explicit(parsed_args, OrgSerializerOptions))
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e
    return parser_options, serializer_options


def _report(message: str) -> None:
    from rich.console import Console
    from rich.markup import escape

    Console(stderr=True, highlight=False).print(f"[bold red]Error:[/] {escape(message)}")


def main(args: Optional[list[str]] = None) -> int:
    """Run the ``orgast`` command and return its exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)
    _setup_logging(parsed_args)

    try:
        parser_options, serializer_options = resolve_options(parsed_args)
    except argparse.ArgumentTypeError as e:
        _report(str(e))
        return EXIT_VALIDATION_ERROR

    handler = COMMAND_HANDLERS[parsed_args.command]
    try:
        return handler(parsed_args, parser_options=parser_options, serializer_options=serializer_options)
    except (ValidationError, InvalidOptionsError) as e:
        _report(str(e))
        return EXIT_VALIDATION_ERROR
    except FileError as e:
        _report(str(e))
        return EXIT_FILE_ERROR
    except ParsingError as e:
        _report(str(e))
        return EXIT_PARSING_ERROR
    except RenderingError as e:
        _report(str(e))
        return EXIT_RENDERING_ERROR
    except OrgAstError as e:
        _report(str(e))
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgast/cli/commands.py
"""Subcommand handlers for the orgast CLI.

Each handler receives the parsed arguments and resolved options, writes its
result, and returns an exit code. Library errors propagate to
:func:`orgast.cli.main`, which maps them to exit codes.
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
from pathlib import Path
from typing import Any, Optional

from orgast.ast.nodes import Document, Headline, Node
from orgast.ast.serialization import ast_to_json
from orgast.ast.visitors import iter_headlines
from orgast.constants import EXIT_SUCCESS
from orgast.exceptions import OutputWriteError, ValidationError
from orgast.options.org import OrgParserOptions, OrgSerializerOptions
from orgast.parsers.org import OrgParser
from orgast.positions import format_position, get_node_path
from orgast.renderers.org import OrgSerializer
from orgast.utils.io_utils import write_text

logger = logging.getLogger(__name__)

POSITION_ARG_PATTERN = re.compile(r"^(\d+):(\d+)$")
STDIN_MARKER = "-"


def read_document(path: str, options: OrgParserOptions) -> Document:
    """Parse the file at ``path``, or standard input for ``-``."""
    parser = OrgParser(options)
    if path == STDIN_MARKER:
        logger.debug("Reading org text from standard input")
        return parser.parse(sys.stdin.buffer.read())
    return parser.parse(Path(path))


def emit(text: str, out: Optional[str]) -> None:
    """Write command output to ``out`` or to standard output.

    Raises
    ------
    OutputWriteError
        If the output file cannot be written

    """
    if out is None:
        sys.stdout.write(text)
        sys.stdout.flush()
        return
    try:
        write_text(text, Path(out))
    except OSError as e:
        raise OutputWriteError(out, original_error=e) from e
    logger.info(f"Wrote {len(text)} characters to {out}")


def parse_position_arg(value: str) -> tuple[int, int]:
    """Convert a 1-based ``LINE:COL`` argument to a 0-based pair.

    Raises
    ------
    ValidationError
        If the value is not two positive integers separated by a colon

    """
    match = POSITION_ARG_PATTERN.match(value.strip())
    if not match or int(match.group(1)) < 1 or int(match.group(2)) < 1:
        raise ValidationError(
            f"Position must be LINE:COL with 1-based numbers, got {value!r}",
            parameter_name="position",
            parameter_value=value,
        )
    return int(match.group(1)) - 1, int(match.group(2)) - 1


def handle_parse(args: argparse.Namespace, parser_options: OrgParserOptions, **_: Any) -> int:
    """Print the AST of a document as JSON."""
    doc = read_document(args.file, parser_options)
    text = ast_to_json(doc, indent=args.indent or None, include_positions=parser_options.add_positions)
    emit(text + "\n", args.out)
    return EXIT_SUCCESS


def handle_serialize(
    args: argparse.Namespace,
    parser_options: OrgParserOptions,
    serializer_options: OrgSerializerOptions,
    **_: Any,
) -> int:
    """Parse a document and write it back as org text."""
    doc = read_document(args.file, parser_options)
    emit(OrgSerializer(serializer_options).render_to_string(doc), args.out)
    return EXIT_SUCCESS


def _headline_label(headline: Headline) -> str:
    from rich.markup import escape

    parts = []
    if headline.todo_keyword:
        color = "green" if headline.todo_type == "done" else "red"
        parts.append(f"[bold {color}]{escape(headline.todo_keyword)}[/]")
    if headline.priority:
        parts.append(f"[yellow]\\[#{escape(headline.priority)}][/]")
    title = escape(headline.raw_value)
    parts.append(f"[dim]{title}[/]" if headline.commented or headline.archived else title)
    if headline.tags:
        parts.append("[cyan]:" + escape(":".join(headline.tags)) + ":[/]")
    parts.append(f"[dim](line {headline.line_number})[/]")
    return " ".join(parts)


def handle_outline(args: argparse.Namespace, parser_options: OrgParserOptions, **_: Any) -> int:
    """Print the headline tree of a document."""
    from rich.console import Console
    from rich.markup import escape
    from rich.tree import Tree

    doc = read_document(args.file, parser_options)
    title = doc.keywords.get("TITLE") or ("<stdin>" if args.file == STDIN_MARKER else Path(args.file).name)
    tree = Tree(f"[bold]{escape(title)}[/]")

    def add(parent: Tree, headlines: list[Headline]) -> None:
        for headline in headlines:
            branch = parent.add(_headline_label(headline))
            add(branch, headline.children)

    add(tree, doc.children)
    Console(highlight=False).print(tree)
    logger.debug(f"Outlined {sum(1 for _ in iter_headlines(doc))} headlines")
    return EXIT_SUCCESS


def _describe(node: Node) -> str:
    location = format_position(node.position) if node.position is not None else "?"
    label = ""
    if isinstance(node, Headline):
        label = f" {node.raw_value!r}"
    elif hasattr(node, "value") and isinstance(getattr(node, "value"), str):
        value = getattr(node, "value")
        label = f" {value[:40]!r}" if value else ""
    return f"{node.type} {location}{label}"


def handle_locate(args: argparse.Namespace, parser_options: OrgParserOptions, **_: Any) -> int:
    """Print the path of nodes containing a ``LINE:COL`` position."""
    from rich.console import Console
    from rich.markup import escape

    line, column = parse_position_arg(args.position)
    doc = read_document(args.file, parser_options.create_updated(add_positions=True))

    path = get_node_path(doc, line, column)
    console = Console(highlight=False)
    if not path:
        console.print(f"[yellow]No node at {args.position}[/]")
        return EXIT_SUCCESS
    for depth, node in enumerate(path):
        console.print("  " * depth + escape(_describe(node)))
    return EXIT_SUCCESS


COMMAND_HANDLERS = {
    "parse": handle_parse,
    "serialize": handle_serialize,
    "outline": handle_outline,
    "locate": handle_locate,
}

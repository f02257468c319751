#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgast/__init__.py
"""orgast - an org-mode parser producing a typed AST with exact source ranges.

orgast turns org-mode text into a tree of dataclass nodes: a document of
nested headlines, each with planning data, a properties drawer and a section
of elements (paragraphs, blocks, drawers, tables, lists, footnotes, clocks
and more), with inline objects parsed inside paragraphs and titles. Every
node records its character range in the source and, optionally, its
line/column position. The tree can be serialized back to org text.

Key Features
------------
- Headline tree with TODO keywords, priorities, tags and planning lines
- Block, drawer, table, list, footnote and LaTeX environment parsing
- Inline objects: emphasis, links, timestamps, entities, footnote references
- Position annotation and position queries for editor tooling
- Serialization back to org text
- JSON export of the AST

Examples
--------
Parse a document and inspect its headlines:

    >>> from orgast import parse_org
    >>> doc = parse_org("* TODO Write report :work:\\nSCHEDULED: <2024-01-15 Mon>")
    >>> headline = doc.children[0]
    >>> headline.todo_keyword, headline.raw_value, headline.tags
    ('TODO', 'Write report', ['work'])
    >>> headline.planning.scheduled.day_start
    15

Round-trip through the serializer:

    >>> from orgast import serialize
    >>> print(serialize(doc), end="")
    * TODO Write report :work:
    SCHEDULED: <2024-01-15 Mon>

"""

__version__ = "1.0.0"

from orgast.ast import Document, Headline, Node, NodeVisitor, ast_to_json, iter_headlines, node_to_dict, walk
from orgast.exceptions import (
    FileError,
    InvalidOptionsError,
    OrgAstError,
    OrgFileNotFoundError,
    ParsingError,
    RenderingError,
    StrictModeError,
    ValidationError,
)
from orgast.options import OrgParserOptions, OrgSerializerOptions
from orgast.parsers.org import OrgParser, parse_org
from orgast.positions import add_positions, find_node_at_position, find_nodes_in_range, get_node_path
from orgast.renderers.org import OrgSerializer, serialize, serialize_element, serialize_object

__all__ = [
    "__version__",
    # Parsing
    "parse_org",
    "OrgParser",
    "OrgParserOptions",
    # Serialization
    "serialize",
    "serialize_element",
    "serialize_object",
    "OrgSerializer",
    "OrgSerializerOptions",
    # AST
    "Document",
    "Headline",
    "Node",
    "NodeVisitor",
    "walk",
    "iter_headlines",
    "node_to_dict",
    "ast_to_json",
    # Positions
    "add_positions",
    "find_node_at_position",
    "find_nodes_in_range",
    "get_node_path",
    # Errors
    "OrgAstError",
    "ValidationError",
    "InvalidOptionsError",
    "FileError",
    "OrgFileNotFoundError",
    "ParsingError",
    "StrictModeError",
    "RenderingError",
]

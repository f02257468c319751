#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgast/ast/__init__.py
"""Abstract Syntax Tree for org-mode documents.

The module consists of several components:

- nodes: document structure and element classes
- objects: inline object classes
- visitors: visitor base class and traversal helpers
- serialization: dictionary and JSON export

Examples
--------
    >>> from orgast import parse_org
    >>> from orgast.ast import iter_headlines
    >>> doc = parse_org("* TODO Task :work:")
    >>> [h.raw_value for h in iter_headlines(doc)]
    ['Task']

"""

from orgast.ast.nodes import (
    AffiliatedKeywords,
    BabelCall,
    CenterBlock,
    Clock,
    Comment,
    CommentBlock,
    DiarySexp,
    Document,
    Drawer,
    DynamicBlock,
    Element,
    ExampleBlock,
    ExportBlock,
    FixedWidth,
    FootnoteDefinition,
    Headline,
    HorizontalRule,
    Inlinetask,
    Item,
    Keyword,
    LatexEnvironment,
    Node,
    NodeProperty,
    Paragraph,
    PlainList,
    Planning,
    PropertyDrawer,
    QuoteBlock,
    Range,
    Section,
    SourceLocation,
    SourcePosition,
    SpecialBlock,
    SrcBlock,
    Table,
    TableRow,
    VerseBlock,
)
from orgast.ast.objects import (
    Bold,
    Code,
    Entity,
    ExportSnippet,
    FootnoteReference,
    InlineBabelCall,
    InlineSrcBlock,
    Italic,
    LatexFragment,
    LineBreak,
    Link,
    Macro,
    OrgObject,
    PlainText,
    RadioTarget,
    StatisticsCookie,
    StrikeThrough,
    Subscript,
    Superscript,
    TableCell,
    Target,
    Timestamp,
    Underline,
    Verbatim,
)
from orgast.ast.serialization import ast_to_json, node_to_dict
from orgast.ast.visitors import NodeVisitor, iter_headlines, walk

__all__ = [
    # Base
    "Node",
    "Element",
    "OrgObject",
    "Range",
    "SourceLocation",
    "SourcePosition",
    "AffiliatedKeywords",
    # Structure
    "Document",
    "Headline",
    "Section",
    "Inlinetask",
    # Elements
    "BabelCall",
    "CenterBlock",
    "Clock",
    "Comment",
    "CommentBlock",
    "DiarySexp",
    "Drawer",
    "DynamicBlock",
    "ExampleBlock",
    "ExportBlock",
    "FixedWidth",
    "FootnoteDefinition",
    "HorizontalRule",
    "Item",
    "Keyword",
    "LatexEnvironment",
    "NodeProperty",
    "Paragraph",
    "PlainList",
    "Planning",
    "PropertyDrawer",
    "QuoteBlock",
    "SpecialBlock",
    "SrcBlock",
    "Table",
    "TableRow",
    "VerseBlock",
    # Objects
    "Bold",
    "Code",
    "Entity",
    "ExportSnippet",
    "FootnoteReference",
    "InlineBabelCall",
    "InlineSrcBlock",
    "Italic",
    "LatexFragment",
    "LineBreak",
    "Link",
    "Macro",
    "PlainText",
    "RadioTarget",
    "StatisticsCookie",
    "StrikeThrough",
    "Subscript",
    "Superscript",
    "TableCell",
    "Target",
    "Timestamp",
    "Underline",
    "Verbatim",
    # Helpers
    "NodeVisitor",
    "walk",
    "iter_headlines",
    "node_to_dict",
    "ast_to_json",
]

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgast/ast/nodes.py
"""AST node classes for org-mode documents.

This module defines the node hierarchy produced by the org parser. Every node
carries a ``range`` of character offsets into the parsed text, a
``post_blank`` count and, once positions have been annotated, a
``position`` holding 0-based line/column pairs.

Node Hierarchy
--------------
All nodes inherit from :class:`Node` and support the visitor pattern through
their ``type`` tag (``"src-block"`` dispatches to ``visit_src_block``).

Document structure:
    - Document, Headline, Section, Inlinetask

Greater elements (contain other elements):
    - Drawer, PropertyDrawer, QuoteBlock, CenterBlock, SpecialBlock
    - DynamicBlock, FootnoteDefinition, PlainList, Item, Table

Lesser elements:
    - Paragraph, Keyword, Comment, HorizontalRule, FixedWidth
    - SrcBlock, ExampleBlock, VerseBlock, CommentBlock, ExportBlock
    - LatexEnvironment, BabelCall, DiarySexp, Planning, Clock
    - NodeProperty, TableRow

Inline objects live in :mod:`orgast.ast.objects`.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar, Optional, Union

from orgast.constants import CheckboxState, ClockStatus, ListType, RowType, TableType, TodoType

if TYPE_CHECKING:
    from orgast.ast.objects import OrgObject, TableCell, Timestamp


@dataclass
class Range:
    """Half-open ``[start, end)`` character offsets into the source text."""

    start: int
    end: int


@dataclass
class SourceLocation:
    """A single point in the source text.

    Parameters
    ----------
    line : int
        0-based line number
    column : int
        0-based column within the line
    offset : int
        Character offset from the start of the document

    """

    line: int
    column: int
    offset: int


@dataclass
class SourcePosition:
    """Start and end locations of a node."""

    start: SourceLocation
    end: SourceLocation


@dataclass
class AffiliatedKeywords:
    """Keywords such as ``#+NAME:`` and ``#+CAPTION:`` attached to the element below them.

    Parameters
    ----------
    caption : str or tuple of (str, str), optional
        Caption text, or ``(short, long)`` for ``#+CAPTION: [short]long``
    name : str, optional
        Element name from ``#+NAME:`` (or an inline ``label:`` in the caption)
    attr : dict
        Backend attributes from ``#+ATTR_<backend>:`` keyed by lowercase backend
    results : str, optional
        Value of ``#+RESULTS:``
    header : list of str
        Values of ``#+HEADER:`` lines in document order
    plot : str, optional
        Value of ``#+PLOT:``

    """

    caption: Union[str, tuple[str, str], None] = None
    name: Optional[str] = None
    attr: dict[str, dict[str, str]] = field(default_factory=dict)
    results: Optional[str] = None
    header: list[str] = field(default_factory=list)
    plot: Optional[str] = None


def _default_range() -> Range:
    return Range(0, 0)


@dataclass
class Node:
    """Base class for all AST nodes.

    Parameters
    ----------
    range : Range
        Character offsets of the node in the source text
    post_blank : int, default 0
        Number of trailing blank lines absorbed by the node
    position : SourcePosition, optional
        Line/column data added by :func:`orgast.positions.add_positions`

    """

    type: ClassVar[str] = "node"

    range: Range = field(default_factory=_default_range, kw_only=True)
    post_blank: int = field(default=0, kw_only=True)
    position: Optional[SourcePosition] = field(default=None, kw_only=True, compare=False)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_<type>`` or ``visitor.generic_visit``.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result of the visitor method

        """
        method = getattr(visitor, "visit_" + self.type.replace("-", "_").replace(".", "_"), None)
        if method is None:
            return visitor.generic_visit(self)
        return method(self)

    def child_nodes(self) -> list[Node]:
        """Return the direct children of this node in document order."""
        return list(getattr(self, "children", None) or [])


@dataclass
class Element(Node):
    """Base class for block-level elements."""

    type: ClassVar[str] = "element"

    affiliated: Optional[AffiliatedKeywords] = field(default=None, kw_only=True)


# ============================================================================
# Document structure
# ============================================================================


@dataclass
class Section(Element):
    """Ordered element content owned by a headline or by the document preamble."""

    type: ClassVar[str] = "section"

    children: list[Element] = field(default_factory=list)


@dataclass
class Planning(Element):
    """``SCHEDULED``/``DEADLINE``/``CLOSED`` line directly below a headline."""

    type: ClassVar[str] = "planning"

    closed: Optional[Timestamp] = None
    deadline: Optional[Timestamp] = None
    scheduled: Optional[Timestamp] = None

    def child_nodes(self) -> list[Node]:
        """Return the present timestamps in serialization order."""
        return [ts for ts in (self.closed, self.deadline, self.scheduled) if ts is not None]


@dataclass
class Headline(Element):
    """An outline node introduced by one or more leading stars.

    Parameters
    ----------
    level : int
        Number of stars
    raw_value : str
        Title text with TODO keyword, priority, tags and ``COMMENT`` removed
    title : list of OrgObject, optional
        Parsed title objects (absent when inline parsing is disabled)
    todo_keyword : str, optional
        Recognized TODO keyword
    todo_type : {"todo", "done"}, optional
        Classification of ``todo_keyword``
    priority : str, optional
        Single priority letter from ``[#X]``
    tags : list of str
        Tags in source order
    archived : bool
        True when ``ARCHIVE`` is among the tags
    commented : bool
        True when the title starts with ``COMMENT``
    footnote_section : bool
        True when the title is ``Footnotes``
    line_number : int
        1-based line number of the headline
    pre_blank : int
        Blank lines between the headline (with its planning line and
        properties drawer) and its first content
    planning : Planning, optional
        Planning line directly below the headline
    properties_drawer : dict, optional
        Flat key/value map of the properties drawer
    section : Section, optional
        Content between this headline and the next one
    children : list of Headline
        Child headlines

    """

    type: ClassVar[str] = "headline"

    level: int = 1
    raw_value: str = ""
    title: Optional[list[OrgObject]] = None
    todo_keyword: Optional[str] = None
    todo_type: Optional[TodoType] = None
    priority: Optional[str] = None
    tags: list[str] = field(default_factory=list)
    archived: bool = False
    commented: bool = False
    footnote_section: bool = False
    custom_id: Optional[str] = None
    id: Optional[str] = None
    category: Optional[str] = None
    effort: Optional[str] = None
    line_number: int = 0
    pre_blank: int = 0
    planning: Optional[Planning] = None
    properties_drawer: Optional[dict[str, str]] = None
    section: Optional[Section] = None
    children: list[Headline] = field(default_factory=list)

    def child_nodes(self) -> list[Node]:
        """Return title objects, planning, section and child headlines."""
        nodes: list[Node] = list(self.title or [])
        if self.planning is not None:
            nodes.append(self.planning)
        if self.section is not None:
            nodes.append(self.section)
        nodes.extend(self.children)
        return nodes


@dataclass
class Inlinetask(Element):
    """A headline-like task at or above the inline task level, closed by ``END``.

    ``terminated`` is False when no ``END`` line was found and the task ran
    to the next headline or the end of the document.
    """

    type: ClassVar[str] = "inlinetask"

    level: int = 15
    raw_value: str = ""
    title: Optional[list[OrgObject]] = None
    todo_keyword: Optional[str] = None
    todo_type: Optional[TodoType] = None
    priority: Optional[str] = None
    tags: list[str] = field(default_factory=list)
    terminated: bool = True
    children: list[Element] = field(default_factory=list)

    def child_nodes(self) -> list[Node]:
        """Return title objects followed by body elements."""
        return [*(self.title or []), *self.children]


@dataclass
class Document(Node):
    """Root node of a parsed org document.

    Parameters
    ----------
    keywords : dict
        Single-valued document keywords (``TITLE``, ``AUTHOR``, ...)
    keyword_lists : dict
        Repeatable keywords such as ``LATEX_HEADER`` in source order
    properties : dict
        Values of ``#+PROPERTY:`` lines
    section : Section, optional
        Content before the first headline
    children : list of Headline
        Top-level headlines
    metadata : dict
        Well-known keywords under lowercase names when metadata extraction is on

    """

    type: ClassVar[str] = "org-data"

    keywords: dict[str, str] = field(default_factory=dict)
    keyword_lists: dict[str, list[str]] = field(default_factory=dict)
    properties: dict[str, str] = field(default_factory=dict)
    section: Optional[Section] = None
    children: list[Headline] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def child_nodes(self) -> list[Node]:
        """Return the preamble section followed by the top-level headlines."""
        nodes: list[Node] = [self.section] if self.section is not None else []
        nodes.extend(self.children)
        return nodes


# ============================================================================
# Lesser elements
# ============================================================================


@dataclass
class Paragraph(Element):
    """Consecutive text lines; children are inline objects."""

    type: ClassVar[str] = "paragraph"

    children: list[OrgObject] = field(default_factory=list)


@dataclass
class Keyword(Element):
    """A ``#+KEY[option]: value`` line."""

    type: ClassVar[str] = "keyword"

    key: str = ""
    value: str = ""
    option: Optional[str] = None


@dataclass
class Comment(Element):
    type: ClassVar[str] = "comment"

    value: str = ""


@dataclass
class HorizontalRule(Element):
    type: ClassVar[str] = "horizontal-rule"


@dataclass
class FixedWidth(Element):
    """Lines prefixed with ``: ``; ``value`` holds the stripped text.

    ``indentation`` is the column of the colon on the first line.
    """

    type: ClassVar[str] = "fixed-width"

    value: str = ""
    indentation: int = 0


@dataclass
class NodeProperty(Element):
    type: ClassVar[str] = "node-property"

    key: str = ""
    value: str = ""


@dataclass
class SrcBlock(Element):
    """A ``#+BEGIN_SRC`` block.

    ``parameters`` keeps the raw text after the language so the block can be
    written back unchanged; ``headers`` is the parsed ``:key value`` map.
    """

    type: ClassVar[str] = "src-block"

    language: str = ""
    value: str = ""
    parameters: Optional[str] = None
    headers: dict[str, str] = field(default_factory=dict)
    line_number: int = 0
    end_line_number: int = 0


@dataclass
class ExampleBlock(Element):
    type: ClassVar[str] = "example-block"

    value: str = ""
    switches: Optional[str] = None


@dataclass
class VerseBlock(Element):
    type: ClassVar[str] = "verse-block"

    value: str = ""


@dataclass
class CommentBlock(Element):
    type: ClassVar[str] = "comment-block"

    value: str = ""


@dataclass
class ExportBlock(Element):
    type: ClassVar[str] = "export-block"

    backend: str = ""
    value: str = ""


@dataclass
class LatexEnvironment(Element):
    """``\\begin{name}`` ... ``\\end{name}``; ``value`` includes both delimiter lines."""

    type: ClassVar[str] = "latex-environment"

    name: str = ""
    value: str = ""


@dataclass
class BabelCall(Element):
    """A ``#+CALL: name[inside](args)[end]`` line."""

    type: ClassVar[str] = "babel-call"

    call: str = ""
    inside_header: Optional[str] = None
    arguments: Optional[str] = None
    end_header: Optional[str] = None


@dataclass
class DiarySexp(Element):
    type: ClassVar[str] = "diary-sexp"

    value: str = ""
    description: Optional[str] = None


@dataclass
class Clock(Element):
    """A ``CLOCK:`` line; ``status`` is ``closed`` once an end timestamp is present."""

    type: ClassVar[str] = "clock"

    start: Optional[Timestamp] = None
    end: Optional[Timestamp] = None
    duration: Optional[str] = None
    status: ClockStatus = "running"

    def child_nodes(self) -> list[Node]:
        """Return the start and end timestamps."""
        return [ts for ts in (self.start, self.end) if ts is not None]


@dataclass
class TableRow(Element):
    type: ClassVar[str] = "table-row"

    row_type: RowType = "standard"
    children: list[TableCell] = field(default_factory=list)


# ============================================================================
# Greater elements
# ============================================================================


@dataclass
class Drawer(Element):
    type: ClassVar[str] = "drawer"

    name: str = ""
    children: list[Element] = field(default_factory=list)


@dataclass
class PropertyDrawer(Element):
    type: ClassVar[str] = "property-drawer"

    children: list[NodeProperty] = field(default_factory=list)


@dataclass
class QuoteBlock(Element):
    type: ClassVar[str] = "quote-block"

    children: list[Element] = field(default_factory=list)


@dataclass
class CenterBlock(Element):
    type: ClassVar[str] = "center-block"

    children: list[Element] = field(default_factory=list)


@dataclass
class SpecialBlock(Element):
    """``#+BEGIN_<TYPE>`` block of a type with no dedicated element."""

    type: ClassVar[str] = "special-block"

    block_type: str = ""
    children: list[Element] = field(default_factory=list)


@dataclass
class DynamicBlock(Element):
    type: ClassVar[str] = "dynamic-block"

    name: str = ""
    arguments: Optional[str] = None
    children: list[Element] = field(default_factory=list)


@dataclass
class FootnoteDefinition(Element):
    type: ClassVar[str] = "footnote-definition"

    label: str = ""
    children: list[Element] = field(default_factory=list)


@dataclass
class Table(Element):
    """An org table, or an opaque ``table.el`` table stored in ``value``.

    ``indentation`` is the column of the first row of an ``org`` table.
    """

    type: ClassVar[str] = "table"

    table_type: TableType = "org"
    value: Optional[str] = None
    indentation: int = 0
    children: list[TableRow] = field(default_factory=list)


@dataclass
class Item(Element):
    """A list item.

    Parameters
    ----------
    bullet : str
        Bullet marker without trailing space (``"-"``, ``"1."``)
    counter : int, optional
        Number of an ordered item
    checkbox : {"on", "off", "trans"}, optional
        Checkbox state
    tag : list of OrgObject, optional
        Term of a descriptive item
    children : list of Element
        Item body

    """

    type: ClassVar[str] = "item"

    bullet: str = "-"
    counter: Optional[int] = None
    checkbox: Optional[CheckboxState] = None
    tag: Optional[list[OrgObject]] = None
    children: list[Element] = field(default_factory=list)

    def child_nodes(self) -> list[Node]:
        """Return tag objects followed by body elements."""
        return [*(self.tag or []), *self.children]


@dataclass
class PlainList(Element):
    """A run of items sharing one bullet indentation.

    ``indentation`` is the column of the bullets, relative to the enclosing
    item body for nested lists.
    """

    type: ClassVar[str] = "plain-list"

    list_type: ListType = "unordered"
    indentation: int = 0
    children: list[Item] = field(default_factory=list)

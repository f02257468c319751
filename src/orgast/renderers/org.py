#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgast/renderers/org.py
"""Org-mode serializer.

This module renders an org AST back to org text. It is the structural
inverse of :mod:`orgast.parsers.org`: headline decoration is rebuilt in the
order stars, TODO keyword, ``[#priority]``, ``COMMENT``, title and
``:tags:``; planning lines list CLOSED, DEADLINE and SCHEDULED in that order;
blocks, drawers, tables and lists are reassembled from their fields.

Every ``visit_*`` method returns the text of its node without a trailing
newline. Element sequences are joined with one newline per element plus one
per ``post_blank`` line. Node types without a ``visit_*`` method render as
the empty string, so serialization never fails on a well-formed tree.

Paragraph text is rebuilt from inline objects. A tree parsed with inline
object parsing disabled has empty paragraphs and serializes without their
text.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Optional

from orgast.ast.nodes import (
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
    Section,
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
from orgast.ast.visitors import NodeVisitor
from orgast.constants import CHECKBOX_MARKERS, TABLE_RULE_ROW
from orgast.exceptions import OutputWriteError
from orgast.options.org import OrgSerializerOptions
from orgast.parsers.affiliated import is_affiliated_keyword
from orgast.parsers.timestamps import format_timestamp
from orgast.renderers.base import BaseRenderer, RenderOutput

logger = logging.getLogger(__name__)

# Link types written without a "type:" prefix inside brackets
_UNPREFIXED_LINK_TYPES = frozenset({"fuzzy", "internal", "custom-id", "coderef"})


def _block(text: str, post_blank: int) -> str:
    return text + "\n" * (1 + post_blank)


def _indent(text: str, prefix: str) -> str:
    return "\n".join(prefix + line if line else line for line in text.split("\n"))


class OrgSerializer(NodeVisitor, BaseRenderer):
    """Render an org AST back to org-mode text.

    Parameters
    ----------
    options : OrgSerializerOptions or None, default = None
        Serializer configuration

    Examples
    --------
        >>> from orgast import parse_org
        >>> doc = parse_org("* TODO [#A] Task :work:\\nBody text")
        >>> print(OrgSerializer().render_to_string(doc), end="")
        * TODO [#A] Task :work:
        Body text

    """

    def __init__(self, options: Optional[OrgSerializerOptions] = None):
        """Initialize the serializer with the given options."""
        BaseRenderer._validate_options_type(options, OrgSerializerOptions, "org")
        options = options or OrgSerializerOptions()
        BaseRenderer.__init__(self, options)
        self.options: OrgSerializerOptions = options

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def render_to_string(self, doc: Document) -> str:
        """Serialize a document to org text."""
        text = self.visit(doc)
        logger.debug(f"Serialized document to {len(text)} characters")
        return text

    def render(self, doc: Document, output: RenderOutput) -> None:
        """Serialize a document and write it to a path or stream.

        Raises
        ------
        OutputWriteError
            If writing to ``output`` fails

        """
        text = self.render_to_string(doc)
        try:
            self.write_text_output(text, output)
        except (OSError, TypeError) as e:
            raise OutputWriteError(str(getattr(output, "name", output)), original_error=e) from e

    def serialize_element(self, element: Node) -> str:
        """Serialize one element (or headline) without a trailing newline."""
        return self.visit(element) or ""

    def serialize_object(self, obj: Node) -> str:
        """Serialize one inline object."""
        return self.visit(obj) or ""

    def generic_visit(self, node: Node) -> str:
        """Unknown node types serialize to the empty string."""
        return ""

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _objects(self, objects: Optional[Sequence[OrgObject]]) -> str:
        return "".join(self.visit(obj) or "" for obj in objects or ())

    def _elements(self, elements: Sequence[Node]) -> str:
        """Join elements, each followed by a newline and its blank lines."""
        return "".join(_block(self.visit(element) or "", element.post_blank) for element in elements)

    def _verbatim_block(self, name: str, arguments: Optional[str], value: str) -> str:
        begin = f"#+BEGIN_{name}" + (f" {arguments}" if arguments else "")
        if value:
            return f"{begin}\n{value}\n#+END_{name}"
        return f"{begin}\n#+END_{name}"

    def _greater_block(self, begin: str, end: str, children: Sequence[Element]) -> str:
        return f"{begin}\n{self._elements(children)}{end}"

    def _title_line(self, node: Headline | Inlinetask) -> str:
        parts = ["*" * node.level]
        if node.todo_keyword:
            parts.append(node.todo_keyword)
        if node.priority:
            parts.append(f"[#{node.priority}]")
        if isinstance(node, Headline) and node.commented:
            parts.append("COMMENT")
        title = node.raw_value or self._objects(node.title)
        if title:
            parts.append(title)
        if node.tags:
            parts.append(":" + ":".join(node.tags) + ":")
        return " ".join(parts)

    # ------------------------------------------------------------------
    # Document structure
    # ------------------------------------------------------------------

    def visit_org_data(self, node: Document) -> str:
        out = ""
        if node.section is not None:
            out = self._preamble(node.section, has_headlines=bool(node.children))
        for headline in node.children:
            out += self.visit(headline) + "\n"

        if not out.strip():
            return ""
        out = out.rstrip("\n")
        return out + "\n" if self.options.trailing_newline else out

    def _preamble(self, section: Section, has_headlines: bool) -> str:
        """Render the text before the first headline.

        The leading run of document keywords is separated from what follows
        by a blank line when ``blank_line_after_keywords`` is set.
        """
        children = section.children
        if not self.options.blank_line_after_keywords:
            return self._elements(children)

        run = 0
        while run < len(children) and isinstance(children[run], Keyword):
            if is_affiliated_keyword(children[run].key):
                break
            run += 1
        followed = run < len(children) or has_headlines
        if run == 0 or not followed or children[run - 1].post_blank > 0:
            return self._elements(children)
        return self._elements(children[:run]) + "\n" + self._elements(children[run:])

    def visit_headline(self, node: Headline) -> str:
        out = self._title_line(node) + "\n"
        if node.planning is not None:
            out += self.visit(node.planning) + "\n"
        if node.properties_drawer is not None:
            out += ":PROPERTIES:\n"
            for key, value in node.properties_drawer.items():
                out += f":{key}: {value}".rstrip() + "\n"
            out += ":END:\n"
        out += "\n" * node.pre_blank
        if node.section is not None:
            out += self._elements(node.section.children)
        for child in node.children:
            out += self.visit(child) + "\n"
        return out[:-1]

    def visit_section(self, node: Section) -> str:
        return self._elements(node.children)[:-1]

    def visit_inlinetask(self, node: Inlinetask) -> str:
        out = self._title_line(node)
        if node.children or node.terminated:
            out += "\n" + self._elements(node.children) + "*" * node.level + " END"
        return out

    def visit_planning(self, node: Planning) -> str:
        parts = []
        if node.closed is not None:
            parts.append(f"CLOSED: {format_timestamp(node.closed)}")
        if node.deadline is not None:
            parts.append(f"DEADLINE: {format_timestamp(node.deadline)}")
        if node.scheduled is not None:
            parts.append(f"SCHEDULED: {format_timestamp(node.scheduled)}")
        return " ".join(parts)

    # ------------------------------------------------------------------
    # Lesser elements
    # ------------------------------------------------------------------

    def visit_paragraph(self, node: Paragraph) -> str:
        return self._objects(node.children)

    def visit_keyword(self, node: Keyword) -> str:
        option = f"[{node.option}]" if node.option is not None else ""
        return f"#+{node.key}{option}: {node.value}".rstrip()

    def visit_comment(self, node: Comment) -> str:
        return f"# {node.value}" if node.value else "#"

    def visit_horizontal_rule(self, node: HorizontalRule) -> str:
        return "-----"

    def visit_fixed_width(self, node: FixedWidth) -> str:
        prefix = " " * node.indentation
        return "\n".join(f"{prefix}: {line}" if line else f"{prefix}:" for line in node.value.split("\n"))

    def visit_node_property(self, node: NodeProperty) -> str:
        return f":{node.key}: {node.value}".rstrip()

    def visit_src_block(self, node: SrcBlock) -> str:
        arguments = " ".join(part for part in (node.language, node.parameters) if part)
        return self._verbatim_block("SRC", arguments, node.value)

    def visit_example_block(self, node: ExampleBlock) -> str:
        return self._verbatim_block("EXAMPLE", node.switches, node.value)

    def visit_export_block(self, node: ExportBlock) -> str:
        return self._verbatim_block("EXPORT", node.backend, node.value)

    def visit_verse_block(self, node: VerseBlock) -> str:
        return self._verbatim_block("VERSE", None, node.value)

    def visit_comment_block(self, node: CommentBlock) -> str:
        return self._verbatim_block("COMMENT", None, node.value)

    def visit_latex_environment(self, node: LatexEnvironment) -> str:
        return node.value

    def visit_babel_call(self, node: BabelCall) -> str:
        out = f"#+CALL: {node.call}"
        if node.inside_header:
            out += f"[{node.inside_header}]"
        out += f"({node.arguments or ''})"
        if node.end_header:
            out += f"[{node.end_header}]"
        return out

    def visit_diary_sexp(self, node: DiarySexp) -> str:
        out = f"%%({node.value})"
        if node.description:
            out += f" {node.description}"
        return out

    def visit_clock(self, node: Clock) -> str:
        out = "CLOCK:"
        if node.start is not None:
            out += f" {format_timestamp(node.start)}"
        if node.end is not None:
            out += f"--{format_timestamp(node.end)}"
        if node.duration:
            out += f" =>  {node.duration}"
        return out

    # ------------------------------------------------------------------
    # Greater elements
    # ------------------------------------------------------------------

    def visit_drawer(self, node: Drawer) -> str:
        return self._greater_block(f":{node.name}:", ":END:", node.children)

    def visit_property_drawer(self, node: PropertyDrawer) -> str:
        return self._greater_block(":PROPERTIES:", ":END:", node.children)

    def visit_quote_block(self, node: QuoteBlock) -> str:
        return self._greater_block("#+BEGIN_QUOTE", "#+END_QUOTE", node.children)

    def visit_center_block(self, node: CenterBlock) -> str:
        return self._greater_block("#+BEGIN_CENTER", "#+END_CENTER", node.children)

    def visit_special_block(self, node: SpecialBlock) -> str:
        return self._greater_block(f"#+BEGIN_{node.block_type}", f"#+END_{node.block_type}", node.children)

    def visit_dynamic_block(self, node: DynamicBlock) -> str:
        begin = f"#+BEGIN: {node.name}" + (f" {node.arguments}" if node.arguments else "")
        return self._greater_block(begin, "#+END:", node.children)

    def visit_footnote_definition(self, node: FootnoteDefinition) -> str:
        body = self._elements(node.children)[:-1]
        return f"[fn:{node.label}] {body}".rstrip(" ")

    def visit_table(self, node: Table) -> str:
        if node.table_type == "table.el" and node.value:
            return node.value
        prefix = " " * node.indentation
        return "\n".join(prefix + self.visit(row) for row in node.children)

    def visit_table_row(self, node: TableRow) -> str:
        if node.row_type == "rule":
            return TABLE_RULE_ROW
        if not node.children:
            return "|"
        return "| " + " | ".join(self.visit(cell) for cell in node.children) + " |"

    def visit_plain_list(self, node: PlainList) -> str:
        return _indent(self._elements(node.children)[:-1], " " * node.indentation)

    def visit_item(self, node: Item) -> str:
        head = node.bullet
        if node.counter is not None:
            head += f" [@{node.counter}]"
        if node.checkbox:
            head += " " + CHECKBOX_MARKERS[node.checkbox]
        if node.tag is not None:
            head += f" {self._objects(node.tag)} ::"

        body = self._elements(node.children)[:-1]
        if not body:
            return head
        # Continuation lines align with the text after the bullet
        prefix = " " * (len(node.bullet) + 1)
        if isinstance(node.children[0], Paragraph):
            first, _, rest = body.partition("\n")
            head += f" {first}" if first else ""
            return f"{head}\n{_indent(rest, prefix)}" if rest else head
        return f"{head}\n{_indent(body, prefix)}"

    # ------------------------------------------------------------------
    # Objects
    # ------------------------------------------------------------------

    def visit_plain_text(self, node: PlainText) -> str:
        return node.value

    def visit_bold(self, node: Bold) -> str:
        return f"*{self._objects(node.children)}*"

    def visit_italic(self, node: Italic) -> str:
        return f"/{self._objects(node.children)}/"

    def visit_underline(self, node: Underline) -> str:
        return f"_{self._objects(node.children)}_"

    def visit_strike_through(self, node: StrikeThrough) -> str:
        return f"+{self._objects(node.children)}+"

    def visit_code(self, node: Code) -> str:
        return f"={node.value}="

    def visit_verbatim(self, node: Verbatim) -> str:
        return f"~{node.value}~"

    def visit_link(self, node: Link) -> str:
        if node.format == "plain":
            return node.raw_link or (f"{node.link_type}:{node.path}" if node.link_type else node.path)
        if node.format == "angle":
            return f"<{node.raw_link or node.link_type + ':' + node.path}>"

        target = node.raw_link
        if not target:
            target = node.path if node.link_type in _UNPREFIXED_LINK_TYPES else f"{node.link_type}:{node.path}"
            if node.search_option:
                target += f"::{node.search_option}"
        if node.children:
            return f"[[{target}][{self._objects(node.children)}]]"
        return f"[[{target}]]"

    def visit_timestamp(self, node: Timestamp) -> str:
        return format_timestamp(node)

    def visit_entity(self, node: Entity) -> str:
        return f"\\{node.name}" + ("{}" if node.uses_brackets else "")

    def visit_latex_fragment(self, node: LatexFragment) -> str:
        return node.value

    def visit_subscript(self, node: Subscript) -> str:
        content = self._objects(node.children)
        return f"_{{{content}}}" if node.uses_braces else f"_{content}"

    def visit_superscript(self, node: Superscript) -> str:
        content = self._objects(node.children)
        return f"^{{{content}}}" if node.uses_braces else f"^{content}"

    def visit_footnote_reference(self, node: FootnoteReference) -> str:
        if node.reference_type == "standard":
            return f"[fn:{node.label or ''}]"
        return f"[fn:{node.label or ''}:{self._objects(node.children)}]"

    def visit_statistics_cookie(self, node: StatisticsCookie) -> str:
        return node.value

    def visit_target(self, node: Target) -> str:
        return f"<<{node.value}>>"

    def visit_radio_target(self, node: RadioTarget) -> str:
        return f"<<<{self._objects(node.children)}>>>"

    def visit_line_break(self, node: LineBreak) -> str:
        return "\\\\"

    def visit_inline_babel_call(self, node: InlineBabelCall) -> str:
        out = f"call_{node.call}"
        if node.inside_header:
            out += f"[{node.inside_header}]"
        out += f"({node.arguments or ''})"
        if node.end_header:
            out += f"[{node.end_header}]"
        return out

    def visit_inline_src_block(self, node: InlineSrcBlock) -> str:
        parameters = f"[{node.parameters}]" if node.parameters else ""
        return f"src_{node.language}{parameters}{{{node.value}}}"

    def visit_export_snippet(self, node: ExportSnippet) -> str:
        return f"@@{node.backend}:{node.value}@@"

    def visit_macro(self, node: Macro) -> str:
        if node.args:
            return f"{{{{{{{node.key}({','.join(node.args)})}}}}}}"
        return f"{{{{{{{node.key}}}}}}}"

    def visit_table_cell(self, node: TableCell) -> str:
        return self._objects(node.children) if node.children else node.value


def serialize(doc: Document, options: Optional[OrgSerializerOptions] = None) -> str:
    """Serialize a document to org text.

    Parameters
    ----------
    doc : Document
        Parsed (or hand-built) document
    options : OrgSerializerOptions, optional
        Serializer configuration

    Returns
    -------
    str
        The org text

    """
    return OrgSerializer(options).render_to_string(doc)


def serialize_element(element: Node) -> str:
    """Serialize a single element without a trailing newline."""
    return OrgSerializer().serialize_element(element)


def serialize_object(obj: Node) -> str:
    """Serialize a single inline object."""
    return OrgSerializer().serialize_object(obj)

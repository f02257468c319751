#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgast/parsers/elements.py
"""Element classifier.

Walks a run of lines top to bottom and turns each construct into an element.
The same routine builds the document preamble, every headline section and
the interior of greater blocks, drawers, footnote definitions and list
items. Dispatch order matters because several constructs share a leading
character; the first branch that accepts a line wins and every branch
consumes at least one line.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Optional

from orgast.ast.nodes import (
    BabelCall,
    Clock,
    Comment,
    DiarySexp,
    Element,
    FixedWidth,
    FootnoteDefinition,
    HorizontalRule,
    Keyword,
    Paragraph,
    Range,
)
from orgast.constants import MULTI_VALUE_KEYWORDS
from orgast.exceptions import StrictModeError
from orgast.options.org import OrgParserOptions
from orgast.parsers.affiliated import build_affiliated, is_affiliated_keyword
from orgast.parsers.blocks import (
    BEGIN_BLOCK_PATTERN,
    DRAWER_START_PATTERN,
    DYNAMIC_BLOCK_START_PATTERN,
    LATEX_BEGIN_PATTERN,
    BlockResult,
    parse_property_drawer,
    try_parse_block,
)
from orgast.parsers.lines import LineIndex
from orgast.parsers.lists import ObjectParser, find_list_end, is_list_item_line, parse_list
from orgast.parsers.tables import find_table_end, is_table_line, parse_table
from orgast.parsers.timestamps import parse_timestamp

logger = logging.getLogger(__name__)

KEYWORD_PATTERN = re.compile(r"^#\+(\w+)(?:\[([^\]]*)\])?:\s*(.*)$")
BABEL_CALL_PATTERN = re.compile(
    r"^#\+CALL:\s*(\S+?)(?:\[([^\]]*)\])?\(([^)]*)\)(?:\[([^\]]*)\])?\s*$",
    re.IGNORECASE,
)
PROPERTY_VALUE_PATTERN = re.compile(r"^(\S+)\s+(.*)$")
HORIZONTAL_RULE_PATTERN = re.compile(r"^\s*-{5,}\s*$")
FIXED_WIDTH_PATTERN = re.compile(r"^\s*:(?:[ \t]|$)")
FOOTNOTE_DEFINITION_PATTERN = re.compile(r"^\[fn:([^\]]+)\]\s*")
DIARY_SEXP_PATTERN = re.compile(r"^\s*%%\(")
CLOCK_PATTERN = re.compile(r"^CLOCK:\s*(\[[^\]]+\])(?:--(\[[^\]]+\]))?\s*(?:=>\s*(\d+:\d+))?")
STRAY_DRAWER_PATTERN = re.compile(r"^\s*:(PROPERTIES|END):\s*$", re.IGNORECASE)
HEADLINE_PATTERN = re.compile(r"^\*+\s")


@dataclass
class ClassifiedContent:
    """Elements of a line run plus the document-level values found in it.

    Parameters
    ----------
    elements : list of Element
        Elements in source order
    keywords : dict
        Single-valued ``#+KEY:`` values; later lines overwrite earlier ones
    keyword_lists : dict
        Values of repeatable keywords such as ``LATEX_HEADER`` in order
    properties : dict
        Values of ``#+PROPERTY: name value`` lines

    """

    elements: list[Element] = field(default_factory=list)
    keywords: dict[str, str] = field(default_factory=dict)
    keyword_lists: dict[str, list[str]] = field(default_factory=dict)
    properties: dict[str, str] = field(default_factory=dict)


def _indent(line: str) -> int:
    return len(line) - len(line.lstrip())


def _line_range(lines: Sequence[str], starts: Sequence[int], first: int, last: int) -> Range:
    return Range(starts[first], starts[last] + len(lines[last]))


class ElementClassifier:
    """Classify runs of lines into elements.

    Parameters
    ----------
    options : OrgParserOptions
        Parser options; ``strict`` turns unterminated constructs into errors
    parse_objects : callable, optional
        ``(text, base_offset) -> objects`` for paragraph, cell and tag text.
        When omitted those nodes carry no object children.
    line_index : LineIndex, optional
        Index of the whole document, used to report exact line numbers for
        constructs nested inside list items

    """

    def __init__(
        self,
        options: OrgParserOptions,
        parse_objects: Optional[ObjectParser] = None,
        line_index: Optional[LineIndex] = None,
    ):
        self.options = options
        self.parse_objects = parse_objects
        self.line_index = line_index

    def classify_elements(self, lines: list[str], starts: list[int], first_line: int = 0) -> list[Element]:
        """Classify ``lines`` and return only the elements."""
        return self.classify(lines, starts, first_line).elements

    def classify(self, lines: Sequence[str], starts: Sequence[int], first_line: int = 0) -> ClassifiedContent:
        """Classify a run of lines.

        Parameters
        ----------
        lines : sequence of str
            Lines without terminators
        starts : sequence of int
            Document offset of each line
        first_line : int, default 0
            Absolute 0-based line number of ``lines[0]``

        Returns
        -------
        ClassifiedContent
            The elements with any keywords and properties found

        Raises
        ------
        StrictModeError
            In strict mode, when a block, drawer or LaTeX environment is not
            closed or a stray ``:END:`` line appears

        """
        content = ClassifiedContent()
        elements = content.elements
        pending: list[Keyword] = []
        index = 0
        total = len(lines)

        while index < total:
            line = lines[index]
            stripped = line.strip()

            if not stripped:
                if elements:
                    elements[-1].post_blank += 1
                pending = []
                index += 1
                continue

            element: Optional[Element] = None
            next_index = index + 1

            if line.startswith("#+"):
                if DYNAMIC_BLOCK_START_PATTERN.match(line):
                    result = try_parse_block(lines, starts, index, self.classify_elements, first_line)
                    if result is not None:
                        element, next_index = self._accept_block(result, first_line + index + 1)
                if element is None:
                    call = BABEL_CALL_PATTERN.match(line)
                    if call:
                        element = BabelCall(
                            call=call.group(1),
                            inside_header=call.group(2),
                            arguments=call.group(3) or None,
                            end_header=call.group(4),
                            range=_line_range(lines, starts, index, index),
                        )
                if element is None and not BEGIN_BLOCK_PATTERN.match(line):
                    keyword = self._parse_keyword(line, starts[index], content)
                    if keyword is not None:
                        elements.append(keyword)
                        if is_affiliated_keyword(keyword.key):
                            pending.append(keyword)
                        else:
                            pending = []
                        index += 1
                        continue

            if element is None and (line == "#" or line.startswith("# ")):
                elements.append(Comment(value=line[2:], range=_line_range(lines, starts, index, index)))
                pending = []
                index += 1
                continue

            if element is None and line[0] in "#\\:":
                result = try_parse_block(lines, starts, index, self.classify_elements, first_line)
                if result is not None:
                    element, next_index = self._accept_block(result, first_line + index + 1)

            if element is None:
                element, next_index = self._classify_line(lines, starts, index, first_line)

            if element is None:
                # Stray :END: lines produce nothing
                pending = []
                index = next_index
                continue

            if pending:
                element.affiliated = build_affiliated(pending)
                pending = []
            elements.append(element)
            index = next_index

        return content

    def _accept_block(self, result: BlockResult, line_number: int) -> tuple[Element, int]:
        if not result.terminated:
            self._unterminated(result.element.type, line_number)
        return result.element, result.end

    def _unterminated(self, construct: str, line_number: int) -> None:
        if self.options.strict:
            raise StrictModeError(construct=construct, line_number=line_number)
        logger.debug(f"Unterminated {construct} starting at line {line_number} extends to the end of its scope")

    def _parse_keyword(self, line: str, start: int, content: ClassifiedContent) -> Optional[Keyword]:
        match = KEYWORD_PATTERN.match(line)
        if not match:
            return None
        key = match.group(1).upper()
        value = match.group(3).strip()

        if key == "PROPERTY":
            prop = PROPERTY_VALUE_PATTERN.match(value)
            if prop:
                content.properties[prop.group(1)] = prop.group(2).strip()
        elif key in MULTI_VALUE_KEYWORDS:
            content.keyword_lists.setdefault(key, []).append(value)
        else:
            content.keywords[key] = value

        return Keyword(key=key, value=value, option=match.group(2), range=Range(start, start + len(line)))

    def _classify_line(
        self, lines: Sequence[str], starts: Sequence[int], index: int, first_line: int
    ) -> tuple[Optional[Element], int]:
        line = lines[index]

        if HORIZONTAL_RULE_PATTERN.match(line):
            return HorizontalRule(range=_line_range(lines, starts, index, index)), index + 1

        if FIXED_WIDTH_PATTERN.match(line):
            return self._parse_fixed_width(lines, starts, index)

        if is_table_line(line):
            end = find_table_end(lines, index)
            table = parse_table(lines[index:end], starts[index:end], self.parse_objects)
            return table, end

        if is_list_item_line(line):
            end = find_list_end(lines, index)
            body_line = first_line + index

            def classify_body(body_lines: list[str], body_starts: list[int]) -> list[Element]:
                return self.classify_elements(body_lines, body_starts, self._line_of(body_starts, body_line))

            plain_list = parse_list(lines[index:end], starts[index:end], self.parse_objects, classify_body)
            if plain_list is not None:
                return plain_list, end

        footnote = FOOTNOTE_DEFINITION_PATTERN.match(line)
        if footnote:
            return self._parse_footnote_definition(lines, starts, index, first_line, footnote)

        if DIARY_SEXP_PATTERN.match(line):
            diary = self._parse_diary_sexp(line, starts[index])
            if diary is not None:
                return diary, index + 1

        if line.lstrip().startswith("CLOCK:"):
            clock = self._parse_clock(line, starts[index])
            if clock is not None:
                return clock, index + 1

        stray = STRAY_DRAWER_PATTERN.match(line)
        if stray:
            if stray.group(1).upper() == "PROPERTIES":
                drawer, _, end, terminated = parse_property_drawer(lines, starts, index)
                if not terminated:
                    self._unterminated(drawer.type, first_line + index + 1)
                return drawer, end
            if self.options.strict:
                raise StrictModeError(
                    construct=":END:",
                    line_number=first_line + index + 1,
                    message=f"Stray :END: at line {first_line + index + 1}",
                )
            logger.debug(f"Dropping stray :END: at line {first_line + index + 1}")
            return None, index + 1

        return self._parse_paragraph(lines, starts, index)

    def _line_of(self, body_starts: Sequence[int], fallback: int) -> int:
        if self.line_index is not None and body_starts:
            return self.line_index.line_of(body_starts[0])
        return fallback

    def _parse_fixed_width(self, lines: Sequence[str], starts: Sequence[int], index: int) -> tuple[Element, int]:
        end = index
        values: list[str] = []
        while end < len(lines) and FIXED_WIDTH_PATTERN.match(lines[end]):
            text = lines[end].lstrip()
            values.append(text[2:] if len(text) > 1 else "")
            end += 1
        element = FixedWidth(
            value="\n".join(values),
            indentation=_indent(lines[index]),
            range=_line_range(lines, starts, index, end - 1),
        )
        return element, end

    def _parse_footnote_definition(
        self,
        lines: Sequence[str],
        starts: Sequence[int],
        index: int,
        first_line: int,
        match: re.Match[str],
    ) -> tuple[Element, int]:
        end = index + 1
        while end < len(lines):
            line = lines[end]
            if HEADLINE_PATTERN.match(line) or FOOTNOTE_DEFINITION_PATTERN.match(line):
                break
            if not line.strip():
                ahead = end + 1
                if ahead >= len(lines) or not lines[ahead].strip() or _indent(lines[ahead]) == 0:
                    break
            end += 1

        body_lines = [lines[index][match.end() :], *lines[index + 1 : end]]
        body_starts = [starts[index] + match.end(), *starts[index + 1 : end]]
        definition = FootnoteDefinition(
            label=match.group(1),
            children=self.classify_elements(body_lines, body_starts, first_line + index),
            range=_line_range(lines, starts, index, end - 1),
        )
        return definition, end

    def _parse_diary_sexp(self, line: str, start: int) -> Optional[DiarySexp]:
        open_paren = line.index("%%(") + 2
        depth = 0
        for position in range(open_paren, len(line)):
            char = line[position]
            if char == "(":
                depth += 1
            elif char == ")":
                depth -= 1
                if depth == 0:
                    description = line[position + 1 :].strip()
                    return DiarySexp(
                        value=line[open_paren + 1 : position],
                        description=description or None,
                        range=Range(start, start + len(line)),
                    )
        return None

    def _parse_clock(self, line: str, start: int) -> Optional[Clock]:
        indent = _indent(line)
        match = CLOCK_PATTERN.match(line[indent:])
        if not match:
            return None
        clock_start = parse_timestamp(match.group(1), start + indent + match.start(1))
        if clock_start is None:
            return None
        clock_end = None
        if match.group(2):
            clock_end = parse_timestamp(match.group(2), start + indent + match.start(2))
        return Clock(
            start=clock_start,
            end=clock_end,
            duration=match.group(3),
            status="closed" if clock_end is not None else "running",
            range=Range(start, start + len(line)),
        )

    def _parse_paragraph(self, lines: Sequence[str], starts: Sequence[int], index: int) -> tuple[Element, int]:
        end = index + 1
        while end < len(lines) and not self._ends_paragraph(lines[end]):
            end += 1

        paragraph = Paragraph(range=_line_range(lines, starts, index, end - 1))
        if self.parse_objects is not None:
            paragraph.children = self.parse_objects("\n".join(lines[index:end]), starts[index])
        return paragraph, end

    @staticmethod
    def _ends_paragraph(line: str) -> bool:
        if not line.strip():
            return True
        first = line.lstrip()[0]
        if HEADLINE_PATTERN.match(line):
            return True
        if first == "#":
            return line.lstrip().startswith(("#+", "# ")) or line.strip() == "#"
        if first == "\\" and LATEX_BEGIN_PATTERN.match(line):
            return True
        if first == ":" and (DRAWER_START_PATTERN.match(line) or FIXED_WIDTH_PATTERN.match(line)):
            return True
        if first == "|":
            return True
        if first == "-" and HORIZONTAL_RULE_PATTERN.match(line):
            return True
        return is_list_item_line(line) or FOOTNOTE_DEFINITION_PATTERN.match(line) is not None

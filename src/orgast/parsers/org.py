#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgast/parsers/org.py
"""Org-mode to AST parser.

This module turns org-mode text into the typed tree defined in
:mod:`orgast.ast`. The parser scans for headline lines, hands the content of
each headline (everything up to the next headline of any level) to the
element classifier, and threads headlines into a tree with a level stack.
Headline lines with at least ``inlinetask_min_level`` stars are inline tasks:
they are closed by an ``END`` line and stay inside the surrounding section.

Parsing never fails on malformed markup. Unterminated blocks, drawers and
inline tasks extend to the end of their scope unless ``strict`` is set.
"""

from __future__ import annotations

import logging
import re
from typing import NamedTuple, Optional, Union

from orgast.ast.nodes import Document, Element, Headline, Inlinetask, Range, Section
from orgast.ast.objects import OrgObject
from orgast.constants import METADATA_KEYWORDS, PROMOTED_PROPERTIES, TodoType
from orgast.exceptions import OrgAstError, ParsingError, StrictModeError
from orgast.options.org import OrgParserOptions
from orgast.parsers.base import BaseParser, ParserInput
from orgast.parsers.blocks import PROPERTIES_START_PATTERN, inlinetask_end_pattern, parse_property_drawer
from orgast.parsers.elements import ElementClassifier
from orgast.parsers.inline import InlineObjectParser
from orgast.parsers.lines import LineIndex
from orgast.parsers.lists import ObjectParser
from orgast.parsers.planning import parse_planning_line
from orgast.parsers.todo import parse_todo_keywords
from orgast.positions import add_positions
from orgast.utils.encoding import normalize_newlines

logger = logging.getLogger(__name__)

HEADLINE_MARKER_PATTERN = re.compile(r"^(\*+)\s+(.*)$")
HEADLINE_START_PATTERN = re.compile(r"^\*+\s")
TODO_PREFIX_PATTERN = re.compile(r"^(\S+)\s+")
PRIORITY_PATTERN = re.compile(r"^\[#([A-Z])\]\s+")
TAGS_PATTERN = re.compile(r"\s+:([^:\s]+(?::[^:\s]+)*):$")
COMMENT_PREFIX = "COMMENT "


class TitleParts(NamedTuple):
    """Decorations split off a headline or inline task title.

    ``start`` is the document offset of the first character of ``raw_value``.
    """

    raw_value: str
    start: int
    todo_keyword: Optional[str]
    todo_type: Optional[TodoType]
    priority: Optional[str]
    tags: list[str]
    commented: bool


class OrgParser(BaseParser):
    r"""Convert org-mode text to an AST.

    Parameters
    ----------
    options : OrgParserOptions or None, default None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> parser = OrgParser()
        >>> doc = parser.parse("* TODO Write report :work:\nSCHEDULED: <2024-01-15 Mon>")
        >>> headline = doc.children[0]
        >>> headline.todo_keyword, headline.tags
        ('TODO', ['work'])

    Custom workflow:

        >>> options = OrgParserOptions(todo_keywords=("TODO", "REVIEW"), done_keywords=("DONE",))
        >>> doc = OrgParser(options).parse("* REVIEW Draft")
        >>> doc.children[0].todo_keyword
        'REVIEW'

    """

    def __init__(self, options: OrgParserOptions | None = None):
        BaseParser._validate_options_type(options, OrgParserOptions, "org")
        options = options or OrgParserOptions()
        super().__init__(options)
        self.options: OrgParserOptions = options
        self._inline_parser = InlineObjectParser() if options.parse_inline_objects else None

    def parse(self, input_data: ParserInput) -> Document:
        """Parse org-mode input into a :class:`Document`.

        Parameters
        ----------
        input_data : str, Path, bytes or stream
            Org text, a path to an org file, raw bytes or a stream

        Returns
        -------
        Document
            Root of the parsed tree

        Raises
        ------
        FileError
            If a file input cannot be read
        StrictModeError
            If ``strict`` is set and an unterminated construct is found
        ParsingError
            If an unexpected internal error occurs

        """
        return self.parse_text(self._load_text_content(input_data))

    def parse_text(self, text: str) -> Document:
        """Parse org text that is already in memory.

        ``text`` is used as is; it is never interpreted as a path.
        """
        try:
            return self._parse(text)
        except OrgAstError:
            raise
        except Exception as e:
            raise ParsingError(
                f"Failed to parse org document: {e}", parsing_stage="document", original_error=e
            ) from e

    def _parse(self, text: str) -> Document:
        line_index = LineIndex.from_text(text)
        logger.debug(f"Parsing org document: {len(line_index)} lines")

        builder = _DocumentBuilder(self.options, line_index, self._inline_parser)
        document = builder.build()

        if self.options.extract_metadata:
            document.metadata = extract_metadata(document)
        if self.options.add_positions:
            add_positions(document, line_index)

        logger.debug(
            f"Parsed org document: {builder.headline_count} headlines, {builder.inlinetask_count} inline tasks"
        )
        return document


class _DocumentBuilder:
    """State of a single parse: the line table, keyword sets and headline stack."""

    def __init__(
        self,
        options: OrgParserOptions,
        line_index: LineIndex,
        inline_parser: Optional[InlineObjectParser],
    ):
        self.options = options
        self.lines = line_index.lines
        self.offsets = line_index.offsets
        self.parse_objects: Optional[ObjectParser] = inline_parser.parse if inline_parser is not None else None
        self.classifier = ElementClassifier(options, self.parse_objects, line_index)
        self.headline_count = 0
        self.inlinetask_count = 0

        todo_keywords = list(options.todo_keywords)
        done_keywords = list(options.done_keywords)
        if options.use_in_buffer_todo_keywords:
            workflow = parse_todo_keywords(self.lines)
            if workflow is not None:
                logger.debug(f"In-buffer TODO workflow: {workflow.active_states} | {workflow.done_states}")
                todo_keywords.extend(workflow.active_states)
                done_keywords.extend(workflow.done_states)
        self.done_keywords = frozenset(done_keywords)
        self.all_keywords = frozenset(todo_keywords) | self.done_keywords

    def build(self) -> Document:
        document = Document(range=Range(0, self.offsets[-1] - 1 if self.lines else 0))
        first_headline = self._next_headline(0)

        if first_headline > 0:
            content = self.classifier.classify(self.lines[:first_headline], self.offsets[:first_headline], 0)
            document.keywords = content.keywords
            document.keyword_lists = content.keyword_lists
            document.properties = content.properties
            if content.elements:
                document.section = Section(children=content.elements, range=Range(0, self._boundary(first_headline)))

        stack: list[Headline] = []
        index = first_headline
        while index < len(self.lines):
            match = HEADLINE_MARKER_PATTERN.match(self.lines[index])
            owner: Union[Document, Headline] = stack[-1] if stack else document

            if match is None:
                # Content following an inline task's END line
                end = self._next_headline(index)
                elements = self.classifier.classify_elements(self.lines[index:end], self.offsets[index:end], index)
                self._append_to_section(owner, elements, index, end)
                index = end
                continue

            level = len(match.group(1))
            if level >= self.options.inlinetask_min_level:
                inlinetask, resume = self._parse_inlinetask(index, level, match)
                self._append_to_section(owner, [inlinetask], index, resume)
                index = resume
                continue

            end = self._next_headline(index + 1)
            headline = self._parse_headline(index, end, level, match)
            while stack and stack[-1].level >= level:
                stack.pop()
            if stack:
                stack[-1].children.append(headline)
            else:
                document.children.append(headline)
            stack.append(headline)
            index = end

        return document

    def _next_headline(self, start: int) -> int:
        """Return the index of the first headline line at or after ``start``, or the line count."""
        lines = self.lines
        index = start
        while index < len(lines):
            line = lines[index]
            if line[:1] == "*" and HEADLINE_START_PATTERN.match(line):
                return index
            index += 1
        return index

    def _end_offset(self, end: int) -> int:
        """Offset just past the last character of the line before ``end``."""
        return self.offsets[end] - 1

    def _boundary(self, end: int) -> int:
        """Offset where line ``end`` begins, clamped to the end of the text."""
        return min(self.offsets[end], self.offsets[-1] - 1)

    def _append_to_section(self, owner: Union[Document, Headline], elements: list[Element], start: int, end: int):
        if not elements:
            return
        if owner.section is None:
            owner.section = Section(range=Range(self.offsets[start], self._boundary(end)))
        owner.section.children.extend(elements)
        owner.section.range.end = max(owner.section.range.end, self._boundary(end))
        owner.range.end = max(owner.range.end, self._boundary(end))

    def _split_title(self, text: str, start: int) -> TitleParts:
        todo_keyword: Optional[str] = None
        todo_type: Optional[TodoType] = None
        priority: Optional[str] = None
        tags: list[str] = []
        commented = False
        title = text.rstrip()

        todo_match = TODO_PREFIX_PATTERN.match(title)
        if todo_match and todo_match.group(1) in self.all_keywords:
            todo_keyword = todo_match.group(1)
            todo_type = "done" if todo_keyword in self.done_keywords else "todo"
            title = title[todo_match.end() :]
            start += todo_match.end()

        priority_match = PRIORITY_PATTERN.match(title)
        if priority_match:
            priority = priority_match.group(1)
            title = title[priority_match.end() :]
            start += priority_match.end()

        tags_match = TAGS_PATTERN.search(title)
        if tags_match:
            tags = tags_match.group(1).split(":")
            title = title[: tags_match.start()]

        if title.startswith(COMMENT_PREFIX):
            commented = True
            title = title[len(COMMENT_PREFIX) :]
            start += len(COMMENT_PREFIX)

        leading = len(title) - len(title.lstrip())
        return TitleParts(title.strip(), start + leading, todo_keyword, todo_type, priority, tags, commented)

    def _title_objects(self, parts: TitleParts) -> Optional[list[OrgObject]]:
        if self.parse_objects is None:
            return None
        return self.parse_objects(parts.raw_value, parts.start)

    def _parse_headline(self, index: int, end: int, level: int, match: re.Match[str]) -> Headline:
        lines, offsets = self.lines, self.offsets
        parts = self._split_title(match.group(2), offsets[index] + match.start(2))
        self.headline_count += 1

        headline = Headline(
            level=level,
            raw_value=parts.raw_value,
            title=self._title_objects(parts),
            todo_keyword=parts.todo_keyword,
            todo_type=parts.todo_type,
            priority=parts.priority,
            tags=parts.tags,
            archived="ARCHIVE" in parts.tags,
            commented=parts.commented,
            footnote_section=parts.raw_value.lower() == "footnotes",
            line_number=index + 1,
            range=Range(offsets[index], self._boundary(end)),
        )

        content = index + 1
        if content < end:
            planning = parse_planning_line(lines[content], offsets[content])
            if planning is not None:
                headline.planning = planning
                content += 1

        if content < end and PROPERTIES_START_PATTERN.match(lines[content]):
            _, properties, consumed, terminated = parse_property_drawer(
                lines[content:end], offsets[content:end], 0
            )
            if not terminated:
                self._unterminated("property-drawer", content + 1)
            headline.properties_drawer = properties
            for key, field_name in PROMOTED_PROPERTIES.items():
                if properties.get(key):
                    setattr(headline, field_name, properties[key])
            content += consumed

        first = content
        while first < end and not lines[first].strip():
            first += 1
        headline.pre_blank = first - content
        if first < end:
            elements = self.classifier.classify_elements(lines[first:end], offsets[first:end], first)
            if elements:
                headline.section = Section(children=elements, range=Range(offsets[content], self._boundary(end)))
        return headline

    def _parse_inlinetask(self, index: int, level: int, match: re.Match[str]) -> tuple[Inlinetask, int]:
        lines, offsets = self.lines, self.offsets
        parts = self._split_title(match.group(2), offsets[index] + match.start(2))
        self.inlinetask_count += 1

        end_pattern = inlinetask_end_pattern(level)
        close = index + 1
        terminated = False
        while close < len(lines):
            line = lines[close]
            if end_pattern.match(line):
                terminated = True
                break
            marker = HEADLINE_MARKER_PATTERN.match(line) if line[:1] == "*" else None
            if marker and len(marker.group(1)) <= level:
                break
            close += 1

        if not terminated:
            self._unterminated("inlinetask", index + 1)
        resume = close + 1 if terminated else close

        inlinetask = Inlinetask(
            level=level,
            raw_value=parts.raw_value,
            title=self._title_objects(parts),
            todo_keyword=parts.todo_keyword,
            todo_type=parts.todo_type,
            priority=parts.priority,
            tags=parts.tags,
            terminated=terminated,
            children=self.classifier.classify_elements(
                lines[index + 1 : close], offsets[index + 1 : close], index + 1
            ),
            range=Range(offsets[index], self._end_offset(resume)),
        )
        # Blank lines after END belong to the task
        while resume < len(lines) and not lines[resume].strip():
            inlinetask.post_blank += 1
            resume += 1
        return inlinetask, resume

    def _unterminated(self, construct: str, line_number: int) -> None:
        if self.options.strict:
            raise StrictModeError(construct=construct, line_number=line_number)
        logger.debug(f"Unterminated {construct} starting at line {line_number} extends to the end of its scope")


def extract_metadata(document: Document) -> dict[str, object]:
    """Collect well-known document keywords under lowercase names.

    ``FILETAGS`` (``:a:b:``) becomes a list of tags; other values are kept
    as written.
    """
    metadata: dict[str, object] = {}
    for key, name in METADATA_KEYWORDS.items():
        value = document.keywords.get(key)
        if value is None:
            continue
        if key == "FILETAGS":
            metadata[name] = [tag for tag in value.strip().strip(":").split(":") if tag]
        else:
            metadata[name] = value
    return metadata


def parse_org(text: str, options: OrgParserOptions | None = None) -> Document:
    """Parse org text with default or given options.

    Examples
    --------
        >>> doc = parse_org("* Level 1\\n** Level 2")
        >>> doc.children[0].children[0].level
        2

    """
    return OrgParser(options).parse_text(normalize_newlines(text))

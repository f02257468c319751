#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgast/ast/objects.py
"""Inline object nodes.

Objects are produced by the inline object parser from paragraph text,
headline titles, table cells and descriptive item tags. Markup objects
(bold, italic, underline, strike-through) nest; code and verbatim hold a
literal ``value``.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from typing import ClassVar, Optional, Union

from orgast.ast.nodes import Node
from orgast.constants import (
    FootnoteReferenceType,
    LatexFragmentType,
    LinkFormat,
    RepeaterType,
    TimestampType,
    TimeUnit,
    WarningType,
)


@dataclass
class OrgObject(Node):
    """Base class for inline objects."""

    type: ClassVar[str] = "object"


@dataclass
class PlainText(OrgObject):
    type: ClassVar[str] = "plain-text"

    value: str = ""


@dataclass
class Bold(OrgObject):
    type: ClassVar[str] = "bold"

    children: list[OrgObject] = field(default_factory=list)


@dataclass
class Italic(OrgObject):
    type: ClassVar[str] = "italic"

    children: list[OrgObject] = field(default_factory=list)


@dataclass
class Underline(OrgObject):
    type: ClassVar[str] = "underline"

    children: list[OrgObject] = field(default_factory=list)


@dataclass
class StrikeThrough(OrgObject):
    type: ClassVar[str] = "strike-through"

    children: list[OrgObject] = field(default_factory=list)


@dataclass
class Code(OrgObject):
    type: ClassVar[str] = "code"

    value: str = ""


@dataclass
class Verbatim(OrgObject):
    type: ClassVar[str] = "verbatim"

    value: str = ""


@dataclass
class Link(OrgObject):
    """A link in plain, angle or bracket form.

    Parameters
    ----------
    link_type : str
        ``"http"``, ``"https"``, ``"file"``, ``"id"``, ``"custom-id"``,
        ``"coderef"``, ``"fuzzy"`` or any other protocol
    path : str
        Target without the protocol prefix; ``http`` and ``https`` links
        keep the full URL
    format : {"plain", "angle", "bracket"}
        Syntax the link was written in
    raw_link : str, optional
        Link text exactly as written between the brackets
    search_option : str, optional
        Part after ``::`` in ``file:`` links
    children : list of OrgObject
        Description objects of a bracket link

    """

    type: ClassVar[str] = "link"

    link_type: str = "fuzzy"
    path: str = ""
    format: LinkFormat = "bracket"
    raw_link: Optional[str] = None
    search_option: Optional[str] = None
    children: list[OrgObject] = field(default_factory=list)


@dataclass
class Timestamp(OrgObject):
    """An active or inactive timestamp, possibly a range.

    ``raw_value`` is the literal as written; serialization prefers it so the
    original text is reproduced exactly.
    """

    type: ClassVar[str] = "timestamp"

    timestamp_type: TimestampType = "active"
    raw_value: str = ""
    year_start: int = 1970
    month_start: int = 1
    day_start: int = 1
    hour_start: Optional[int] = None
    minute_start: Optional[int] = None
    year_end: Optional[int] = None
    month_end: Optional[int] = None
    day_end: Optional[int] = None
    hour_end: Optional[int] = None
    minute_end: Optional[int] = None
    repeater_type: Optional[RepeaterType] = None
    repeater_value: Optional[int] = None
    repeater_unit: Optional[TimeUnit] = None
    warning_type: Optional[WarningType] = None
    warning_value: Optional[int] = None
    warning_unit: Optional[TimeUnit] = None

    @property
    def is_active(self) -> bool:
        return self.timestamp_type in ("active", "active-range")

    def start_date(self) -> Union[datetime.date, datetime.datetime]:
        """Return the start as a ``date``, or a ``datetime`` when a time is present."""
        if self.hour_start is not None:
            return datetime.datetime(
                self.year_start, self.month_start, self.day_start, self.hour_start, self.minute_start or 0
            )
        return datetime.date(self.year_start, self.month_start, self.day_start)

    def end_date(self) -> Union[datetime.date, datetime.datetime, None]:
        """Return the end of a range or time span, or None for a single point.

        A same-day time span (``<2024-01-15 Mon 10:00-12:00>``) ends on the
        start date at ``hour_end:minute_end``.
        """
        if self.year_end is None and self.hour_end is None:
            return None
        year = self.year_end if self.year_end is not None else self.year_start
        month = self.month_end if self.month_end is not None else self.month_start
        day = self.day_end if self.day_end is not None else self.day_start
        if self.hour_end is not None:
            return datetime.datetime(year, month, day, self.hour_end, self.minute_end or 0)
        return datetime.date(year, month, day)


@dataclass
class Entity(OrgObject):
    """A named entity such as ``\\alpha`` with its LaTeX, HTML and UTF-8 forms."""

    type: ClassVar[str] = "entity"

    name: str = ""
    uses_brackets: bool = False
    latex: str = ""
    html: str = ""
    utf8: str = ""


@dataclass
class LatexFragment(OrgObject):
    type: ClassVar[str] = "latex-fragment"

    value: str = ""
    fragment_type: LatexFragmentType = "inline-math"


@dataclass
class Subscript(OrgObject):
    type: ClassVar[str] = "subscript"

    uses_braces: bool = False
    children: list[OrgObject] = field(default_factory=list)


@dataclass
class Superscript(OrgObject):
    type: ClassVar[str] = "superscript"

    uses_braces: bool = False
    children: list[OrgObject] = field(default_factory=list)


@dataclass
class FootnoteReference(OrgObject):
    """``[fn:label]``, ``[fn:label:definition]`` or ``[fn::definition]``."""

    type: ClassVar[str] = "footnote-reference"

    label: Optional[str] = None
    reference_type: FootnoteReferenceType = "standard"
    children: list[OrgObject] = field(default_factory=list)


@dataclass
class StatisticsCookie(OrgObject):
    type: ClassVar[str] = "statistics-cookie"

    value: str = ""


@dataclass
class Target(OrgObject):
    type: ClassVar[str] = "target"

    value: str = ""


@dataclass
class RadioTarget(OrgObject):
    type: ClassVar[str] = "radio-target"

    children: list[OrgObject] = field(default_factory=list)


@dataclass
class LineBreak(OrgObject):
    type: ClassVar[str] = "line-break"


@dataclass
class InlineBabelCall(OrgObject):
    type: ClassVar[str] = "inline-babel-call"

    call: str = ""
    inside_header: Optional[str] = None
    arguments: Optional[str] = None
    end_header: Optional[str] = None


@dataclass
class InlineSrcBlock(OrgObject):
    type: ClassVar[str] = "inline-src-block"

    language: str = ""
    value: str = ""
    parameters: Optional[str] = None


@dataclass
class ExportSnippet(OrgObject):
    type: ClassVar[str] = "export-snippet"

    backend: str = ""
    value: str = ""


@dataclass
class Macro(OrgObject):
    type: ClassVar[str] = "macro"

    key: str = ""
    args: list[str] = field(default_factory=list)


@dataclass
class TableCell(OrgObject):
    """A table cell; ``value`` is the trimmed cell text."""

    type: ClassVar[str] = "table-cell"

    value: str = ""
    children: list[OrgObject] = field(default_factory=list)

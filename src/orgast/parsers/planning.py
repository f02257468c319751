#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgast/parsers/planning.py
"""Planning lines: ``SCHEDULED:``, ``DEADLINE:`` and ``CLOSED:``.

A planning line is only attributed to a headline when it is the line
directly below it; the tree builder enforces that, this module only
recognizes and edits the line itself.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Optional

from orgast.ast.nodes import Planning, Range
from orgast.parsers.timestamps import parse_timestamp

PLANNING_START_PATTERN = re.compile(r"^\s*(SCHEDULED|DEADLINE|CLOSED):")
PLANNING_FIELD_PATTERNS = {
    "scheduled": re.compile(r"SCHEDULED:\s*(<[^>]+>|\[[^\]]+\])"),
    "deadline": re.compile(r"DEADLINE:\s*(<[^>]+>|\[[^\]]+\])"),
    "closed": re.compile(r"CLOSED:\s*(<[^>]+>|\[[^\]]+\])"),
}
CLOSED_AT_START_PATTERN = re.compile(r"^\s*CLOSED:\s*\[[^\]]*\]\s*")
CLOSED_ANYWHERE_PATTERN = re.compile(r"\s*CLOSED:\s*\[[^\]]*\]")
INDENT_PATTERN = re.compile(r"^(\s*)")


def is_planning_line(line: str) -> bool:
    return PLANNING_START_PATTERN.match(line) is not None


def parse_planning_line(line: str, offset: int = 0) -> Optional[Planning]:
    """Parse a planning line into a :class:`Planning` element.

    Keywords may appear in any order. A keyword whose timestamp cannot be
    parsed is left unset.

    Parameters
    ----------
    line : str
        The full source line
    offset : int, default 0
        Document offset of the start of ``line``

    Returns
    -------
    Planning or None
        None when the line is not a planning line or no timestamp parsed

    """
    if not is_planning_line(line):
        return None

    planning = Planning(range=Range(offset, offset + len(line)))
    found = False
    for name, pattern in PLANNING_FIELD_PATTERNS.items():
        match = pattern.search(line)
        if not match:
            continue
        ts = parse_timestamp(match.group(1), offset + match.start(1))
        if ts is not None:
            setattr(planning, name, ts)
            found = True

    return planning if found else None


def find_planning_line(lines: Sequence[str], heading_index: int) -> Optional[int]:
    """Return the index of the planning line of the headline at ``heading_index``.

    Only the line directly below the headline is considered.
    """
    candidate = heading_index + 1
    if candidate < len(lines) and PLANNING_START_PATTERN.match(lines[candidate]):
        return candidate
    return None


def build_planning_line(existing_line: str, closed_timestamp: str) -> str:
    """Return ``existing_line`` with ``CLOSED: closed_timestamp`` at the front.

    An existing ``CLOSED`` entry is replaced and indentation is kept.

    Examples
    --------
    >>> build_planning_line("DEADLINE: <2026-01-27 Tue>", "[2026-01-27 Tue 14:00]")
    'CLOSED: [2026-01-27 Tue 14:00] DEADLINE: <2026-01-27 Tue>'

    """
    indent = INDENT_PATTERN.match(existing_line).group(1)  # type: ignore[union-attr]
    rest = CLOSED_AT_START_PATTERN.sub("", existing_line, count=1)
    rest = CLOSED_ANYWHERE_PATTERN.sub("", rest, count=1).strip()
    if rest:
        return f"{indent}CLOSED: {closed_timestamp} {rest}"
    return f"{indent}CLOSED: {closed_timestamp}"


def remove_closed(line: str) -> str:
    """Remove the ``CLOSED`` entry from a planning line.

    Returns the empty string when nothing else remains on the line.
    """
    indent = INDENT_PATTERN.match(line).group(1)  # type: ignore[union-attr]
    rest = CLOSED_AT_START_PATTERN.sub("", line, count=1)
    rest = CLOSED_ANYWHERE_PATTERN.sub("", rest, count=1).strip()
    return indent + rest if rest else ""

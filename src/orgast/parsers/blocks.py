#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgast/parsers/blocks.py
"""Block dispatcher for delimited constructs.

Recognizes ``#+BEGIN_*`` blocks, ``#+BEGIN:`` dynamic blocks, LaTeX
environments and drawers, and scans forward to their closing line. A block
without a closing line extends to the end of the lines it was given; the
caller decides whether that is acceptable.
"""

from __future__ import annotations

import functools
import re
from collections.abc import Callable, Sequence
from typing import NamedTuple, Optional

from orgast.ast.nodes import (
    CenterBlock,
    CommentBlock,
    Drawer,
    DynamicBlock,
    Element,
    ExampleBlock,
    ExportBlock,
    LatexEnvironment,
    NodeProperty,
    PropertyDrawer,
    QuoteBlock,
    Range,
    SpecialBlock,
    SrcBlock,
    VerseBlock,
)
from orgast.constants import DEFAULT_EXPORT_BACKEND, PRECOMPILED_INLINETASK_LEVELS

# (lines, starts, first_line) -> elements
ContentClassifier = Callable[[list[str], list[int], int], list[Element]]

BEGIN_BLOCK_PATTERN = re.compile(r"^#\+BEGIN_", re.IGNORECASE)
SRC_BLOCK_START_PATTERN = re.compile(r"^#\+BEGIN_SRC(?![\w-])(?:[ \t]+(\S+))?(.*)$", re.IGNORECASE)
EXAMPLE_BLOCK_START_PATTERN = re.compile(r"^#\+BEGIN_EXAMPLE(?![\w-])(.*)$", re.IGNORECASE)
EXPORT_BLOCK_START_PATTERN = re.compile(r"^#\+BEGIN_EXPORT(?![\w-])(?:[ \t]+(\S+))?", re.IGNORECASE)
SPECIAL_BLOCK_START_PATTERN = re.compile(r"^#\+BEGIN_([\w-]+)", re.IGNORECASE)
DYNAMIC_BLOCK_START_PATTERN = re.compile(r"^#\+BEGIN:[ \t]*(\S+)(.*)$", re.IGNORECASE)
DYNAMIC_BLOCK_END_PATTERN = re.compile(r"^#\+END:?\s*$", re.IGNORECASE)
LATEX_BEGIN_PATTERN = re.compile(r"^\\begin\{(\w+\*?)\}")
DRAWER_START_PATTERN = re.compile(r"^:([\w-]+):\s*$")
PROPERTIES_START_PATTERN = re.compile(r"^\s*:PROPERTIES:\s*$", re.IGNORECASE)
PROPERTY_LINE_PATTERN = re.compile(r"^\s*:(\S+):\s*(.*)$")
HEADER_ARGS_PATTERN = re.compile(r":(\S+)\s+([^\s:]\S*)")

VERBATIM_BLOCKS = {"EXAMPLE": ExampleBlock, "VERSE": VerseBlock, "COMMENT": CommentBlock}
GREATER_BLOCKS = {"QUOTE": QuoteBlock, "CENTER": CenterBlock}


class BlockResult(NamedTuple):
    """A parsed block and where scanning should resume.

    Attributes
    ----------
    element : Element
        The parsed element
    end : int
        Index of the first line after the block
    terminated : bool
        False when the closing line was missing and the block ran to the end

    """

    element: Element
    end: int
    terminated: bool


@functools.lru_cache(maxsize=None)
def block_end_pattern(name: str) -> re.Pattern[str]:
    """Return the compiled ``#+END_<name>`` pattern, memoized by upper-case name."""
    return re.compile(rf"^#\+END_{re.escape(name.upper())}(?![\w-])", re.IGNORECASE)


@functools.lru_cache(maxsize=None)
def latex_end_pattern(name: str) -> re.Pattern[str]:
    """Return the compiled ``\\end{name}`` pattern for a LaTeX environment."""
    return re.compile(rf"^\\end\{{{re.escape(name)}\}}")


_INLINETASK_END_PATTERNS = {
    level: re.compile(rf"^\*{{{level}}}\s+END\s*$") for level in PRECOMPILED_INLINETASK_LEVELS
}


@functools.lru_cache(maxsize=None)
def _compile_inlinetask_end(level: int) -> re.Pattern[str]:
    return re.compile(rf"^\*{{{level}}}\s+END\s*$")


def inlinetask_end_pattern(level: int) -> re.Pattern[str]:
    """Return the pattern matching the ``END`` line of an inline task of ``level`` stars."""
    pattern = _INLINETASK_END_PATTERNS.get(level)
    return pattern if pattern is not None else _compile_inlinetask_end(level)


def parse_header_args(params: str) -> dict[str, str]:
    """Parse ``:key value`` pairs from a block parameter string.

    Keys without a value are dropped.

    Examples
    --------
    >>> parse_header_args(":results output :exports both")
    {'results': 'output', 'exports': 'both'}

    """
    return {match.group(1): match.group(2) for match in HEADER_ARGS_PATTERN.finditer(params)}


def _scan(lines: Sequence[str], index: int, is_end: Callable[[str], bool]) -> tuple[int, bool]:
    """Return the index of the closing line (or ``len(lines)``) and whether it was found."""
    close = index + 1
    while close < len(lines):
        if is_end(lines[close]):
            return close, True
        close += 1
    return close, False


def _interior(lines: Sequence[str], starts: Sequence[int], index: int, close: int) -> tuple[list[str], list[int]]:
    return list(lines[index + 1 : close]), list(starts[index + 1 : close])


def _block_range(lines: Sequence[str], starts: Sequence[int], index: int, close: int) -> Range:
    last = min(close, len(lines) - 1)
    return Range(starts[index], starts[last] + len(lines[last]))


def parse_property_drawer(
    lines: Sequence[str], starts: Sequence[int], index: int
) -> tuple[PropertyDrawer, dict[str, str], int, bool]:
    """Parse a ``:PROPERTIES:`` drawer starting at ``index``.

    Returns
    -------
    tuple
        ``(drawer, properties, end, terminated)`` where ``properties`` is the
        flat key/value map and ``end`` is the index after ``:END:``

    """
    close, terminated = _scan(lines, index, lambda line: line.strip().upper() == ":END:")
    drawer = PropertyDrawer(range=_block_range(lines, starts, index, close))
    properties: dict[str, str] = {}
    for line_index in range(index + 1, close):
        line = lines[line_index]
        match = PROPERTY_LINE_PATTERN.match(line)
        if not match:
            continue
        key, value = match.group(1), match.group(2)
        properties[key] = value
        start = starts[line_index]
        drawer.children.append(NodeProperty(key=key, value=value, range=Range(start, start + len(line))))
    return drawer, properties, close + 1 if terminated else close, terminated


def try_parse_block(
    lines: Sequence[str],
    starts: Sequence[int],
    index: int,
    classify: ContentClassifier,
    first_line: int = 0,
) -> Optional[BlockResult]:
    """Parse the delimited block opened at ``lines[index]``, if any.

    Parameters
    ----------
    lines : sequence of str
        Lines being classified
    starts : sequence of int
        Document offset of each line
    index : int
        Index of the candidate opening line
    classify : callable
        ``(lines, starts, first_line) -> elements`` used for the interior of
        quote, center, special and dynamic blocks and drawers
    first_line : int, default 0
        Absolute 0-based line number of ``lines[0]``

    Returns
    -------
    BlockResult or None
        None when the line does not open a block

    """
    line = lines[index]
    if not line:
        return None
    first_char = line[0]

    if first_char == "#":
        return _try_org_block(lines, starts, index, classify, first_line)
    if first_char == "\\":
        match = LATEX_BEGIN_PATTERN.match(line)
        if not match:
            return None
        name = match.group(1)
        end_pattern = latex_end_pattern(name)
        close, terminated = _scan(lines, index, lambda candidate: end_pattern.match(candidate) is not None)
        last = min(close, len(lines) - 1)
        element = LatexEnvironment(
            name=name,
            value="\n".join(lines[index : last + 1]),
            range=_block_range(lines, starts, index, close),
        )
        return BlockResult(element, close + 1 if terminated else close, terminated)
    if first_char == ":":
        match = DRAWER_START_PATTERN.match(line)
        if not match or match.group(1).upper() in ("PROPERTIES", "END"):
            return None
        close, terminated = _scan(lines, index, lambda candidate: candidate.strip().upper() == ":END:")
        drawer = Drawer(
            name=match.group(1),
            children=classify(*_interior(lines, starts, index, close), first_line + index + 1),
            range=_block_range(lines, starts, index, close),
        )
        return BlockResult(drawer, close + 1 if terminated else close, terminated)
    return None


def _try_org_block(
    lines: Sequence[str],
    starts: Sequence[int],
    index: int,
    classify: ContentClassifier,
    first_line: int,
) -> Optional[BlockResult]:
    line = lines[index]

    dynamic = DYNAMIC_BLOCK_START_PATTERN.match(line)
    if dynamic:
        close, terminated = _scan(lines, index, lambda candidate: bool(DYNAMIC_BLOCK_END_PATTERN.match(candidate)))
        element: Element = DynamicBlock(
            name=dynamic.group(1),
            arguments=dynamic.group(2).strip() or None,
            children=classify(*_interior(lines, starts, index, close), first_line + index + 1),
            range=_block_range(lines, starts, index, close),
        )
        return BlockResult(element, close + 1 if terminated else close, terminated)

    if not BEGIN_BLOCK_PATTERN.match(line):
        return None

    special = SPECIAL_BLOCK_START_PATTERN.match(line)
    if special is None:
        return None
    name = special.group(1)
    kind = name.upper()
    end_pattern = block_end_pattern(kind)
    close, terminated = _scan(lines, index, lambda candidate: end_pattern.match(candidate) is not None)
    body, body_starts = _interior(lines, starts, index, close)
    block_range = _block_range(lines, starts, index, close)
    resume = close + 1 if terminated else close

    if kind == "SRC":
        src = SRC_BLOCK_START_PATTERN.match(line)
        language = (src.group(1) or "") if src else ""
        params = (src.group(2) or "") if src else ""
        element = SrcBlock(
            language=language.lower(),
            value="\n".join(body),
            parameters=params.strip() or None,
            headers=parse_header_args(params),
            line_number=first_line + index + 1,
            end_line_number=first_line + min(close, len(lines) - 1) + 1,
            range=block_range,
        )
    elif kind == "EXAMPLE":
        example = EXAMPLE_BLOCK_START_PATTERN.match(line)
        switches = example.group(1).strip() if example else ""
        element = ExampleBlock(value="\n".join(body), switches=switches or None, range=block_range)
    elif kind in VERBATIM_BLOCKS:
        element = VERBATIM_BLOCKS[kind](value="\n".join(body), range=block_range)
    elif kind in GREATER_BLOCKS:
        element = GREATER_BLOCKS[kind](children=classify(body, body_starts, first_line + index + 1), range=block_range)
    elif kind == "EXPORT":
        export = EXPORT_BLOCK_START_PATTERN.match(line)
        backend = (export.group(1) if export and export.group(1) else DEFAULT_EXPORT_BACKEND).lower()
        element = ExportBlock(backend=backend, value="\n".join(body), range=block_range)
    else:
        element = SpecialBlock(
            block_type=name,
            children=classify(body, body_starts, first_line + index + 1),
            range=block_range,
        )
    return BlockResult(element, resume, terminated)

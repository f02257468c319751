#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgast/parsers/lists.py
"""Plain list sub-parser.

A list is a run of lines starting with a bullet (``-``, ``+``, ``*`` or
``N.``/``N)``). It continues across blank lines only when the next
non-blank line is indented at least as much as the first bullet and is
either another item or an indented continuation. Items split at the
indentation of the first bullet; deeper bullets belong to the item body.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from typing import Optional

from orgast.ast.nodes import Element, Item, Paragraph, PlainList, Range
from orgast.ast.objects import OrgObject, PlainText
from orgast.constants import CheckboxState, ListType

ObjectParser = Callable[[str, int], list[OrgObject]]
BodyClassifier = Callable[[list[str], list[int]], list[Element]]

BULLET_PATTERN = re.compile(r"^(\s*)([-+*]|\d+[.)])(?:[ \t]+|$)")
ORDERED_BULLET_PATTERN = re.compile(r"^\s*\d+[.)](?:[ \t]|$)")
DESCRIPTIVE_PATTERN = re.compile(r"^\s*[-+*][ \t]+(?:\[[X \-]\][ \t]+)?(.+?)[ \t]+::(?:[ \t]|$)")
COUNTER_PATTERN = re.compile(r"\[@(\d+)\][ \t]*")
CHECKBOX_PATTERN = re.compile(r"\[([X \-])\][ \t]*")
TAG_PATTERN = re.compile(r"(.+?)[ \t]+::(?:[ \t]+|$)")
HEADLINE_PATTERN = re.compile(r"^\*+ ")

CHECKBOX_STATES: dict[str, CheckboxState] = {"X": "on", " ": "off", "-": "trans"}


def _indent(line: str) -> int:
    return len(line) - len(line.lstrip())


def is_list_item_line(line: str) -> bool:
    """Return True when ``line`` starts with a list bullet."""
    return BULLET_PATTERN.match(line) is not None


def find_list_end(lines: Sequence[str], start: int) -> int:
    """Return the index one past the last line of the list starting at ``start``.

    Trailing blank lines are not part of the list.
    """
    first_indent = _indent(lines[start])
    index = start
    while index < len(lines):
        line = lines[index]
        if not line.strip():
            ahead = index + 1
            while ahead < len(lines) and not lines[ahead].strip():
                ahead += 1
            if ahead >= len(lines):
                break
            next_indent = _indent(lines[ahead])
            if next_indent < first_indent:
                break
            if not is_list_item_line(lines[ahead]) and next_indent <= first_indent:
                break
            index += 1
            continue

        if index > start:
            if HEADLINE_PATTERN.match(line) or line.startswith("#+") or line.lstrip().startswith("|"):
                break
            indent = _indent(line)
            if indent < first_indent:
                break
            if indent == first_indent and not is_list_item_line(line):
                break
        index += 1
    return index


def _list_type(first_line: str) -> ListType:
    if ORDERED_BULLET_PATTERN.match(first_line):
        return "ordered"
    if DESCRIPTIVE_PATTERN.match(first_line):
        return "descriptive"
    return "unordered"


def _dedent(lines: list[str], starts: list[int]) -> tuple[list[str], list[int]]:
    indents = [_indent(line) for line in lines if line.strip()]
    if not indents:
        return ["" for _ in lines], list(starts)
    width = min(indents)
    out_lines: list[str] = []
    out_starts: list[int] = []
    for line, start in zip(lines, starts):
        cut = min(width, _indent(line))
        out_lines.append(line[cut:])
        out_starts.append(start + cut)
    return out_lines, out_starts


def _parse_item(
    lines: list[str],
    starts: list[int],
    list_type: ListType,
    parse_objects: Optional[ObjectParser],
    classify_body: Optional[BodyClassifier],
) -> Item:
    first = lines[0]
    bullet_match = BULLET_PATTERN.match(first)
    item = Item(bullet=bullet_match.group(2) if bullet_match else "-")
    content_start = bullet_match.end() if bullet_match else 0

    counter_match = COUNTER_PATTERN.match(first, content_start)
    if counter_match:
        item.counter = int(counter_match.group(1))
        content_start = counter_match.end()

    checkbox_match = CHECKBOX_PATTERN.match(first, content_start)
    if checkbox_match:
        item.checkbox = CHECKBOX_STATES[checkbox_match.group(1)]
        content_start = checkbox_match.end()

    if list_type == "descriptive":
        tag_match = TAG_PATTERN.match(first, content_start)
        if tag_match:
            tag_text = tag_match.group(1)
            tag_start = starts[0] + content_start
            if parse_objects is not None:
                item.tag = parse_objects(tag_text, tag_start)
            else:
                item.tag = [PlainText(value=tag_text, range=Range(tag_start, tag_start + len(tag_text)))]
            content_start = tag_match.end()

    # Trailing blank lines are recorded as post_blank
    last = len(lines) - 1
    while last > 0 and not lines[last].strip():
        last -= 1
    item.post_blank = len(lines) - 1 - last
    item.range = Range(starts[0], starts[last] + len(lines[last]))

    rest_lines, rest_starts = _dedent(lines[1 : last + 1], starts[1 : last + 1])
    body_lines = [first[content_start:], *rest_lines]
    body_starts = [starts[0] + content_start, *rest_starts]

    if classify_body is not None:
        item.children = classify_body(body_lines, body_starts)
    else:
        while body_lines and not body_lines[0].strip():
            body_lines.pop(0)
            body_starts.pop(0)
        if body_lines:
            base = body_starts[0] + len(body_lines[0]) - len(body_lines[0].lstrip())
            paragraph = Paragraph(range=Range(base, item.range.end))
            if parse_objects is not None:
                paragraph.children = parse_objects("\n".join(body_lines).strip(), base)
            item.children = [paragraph]
    return item


def parse_list(
    lines: Sequence[str],
    starts: Sequence[int],
    parse_objects: Optional[ObjectParser] = None,
    classify_body: Optional[BodyClassifier] = None,
) -> Optional[PlainList]:
    """Parse the lines of a plain list.

    Parameters
    ----------
    lines : sequence of str
        List lines as delimited by :func:`find_list_end`
    starts : sequence of int
        Document offset of each line
    parse_objects : callable, optional
        ``(text, base_offset) -> objects`` used for descriptive tags
    classify_body : callable, optional
        ``(lines, starts) -> elements`` used to classify each item body so
        nested lists and blocks become child elements. Without it each
        item body becomes a single paragraph.

    Returns
    -------
    PlainList or None
        None when the first line is not a list item

    """
    if not lines or not is_list_item_line(lines[0]):
        return None

    list_type = _list_type(lines[0])
    base_indent = _indent(lines[0])
    groups: list[tuple[list[str], list[int]]] = []

    for line, start in zip(lines, starts):
        if is_list_item_line(line) and _indent(line) == base_indent:
            groups.append(([line], [start]))
        else:
            groups[-1][0].append(line)
            groups[-1][1].append(start)

    items = [
        _parse_item(item_lines, item_starts, list_type, parse_objects, classify_body)
        for item_lines, item_starts in groups
    ]
    plain_list = PlainList(list_type=list_type, indentation=base_indent, children=items)
    plain_list.range = Range(starts[0], items[-1].range.end)
    return plain_list

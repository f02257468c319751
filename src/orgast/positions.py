#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgast/positions.py
"""Line/column positions for AST nodes.

:func:`add_positions` converts the character ``range`` of every node into a
:class:`~orgast.ast.nodes.SourcePosition` of 0-based line/column pairs. The
query helpers below work on annotated trees and treat positions as half-open:
a node contains ``(line, column)`` when ``start <= (line, column) < end``.

A headline's own range stops where its first child headline starts, so the
queries search a headline's children even when the point lies past the
headline's own content.
"""

from __future__ import annotations

from typing import Optional, Union

from orgast.ast.nodes import Document, Headline, Node, SourceLocation, SourcePosition
from orgast.ast.visitors import walk
from orgast.parsers.lines import LineIndex


def add_positions(root: Node, source: Union[str, LineIndex]) -> Node:
    """Annotate ``root`` and all of its descendants with line/column positions.

    Parameters
    ----------
    root : Node
        Tree to annotate in place
    source : str or LineIndex
        The text the tree was parsed from, or its line index

    Returns
    -------
    Node
        ``root``, for chaining

    """
    index = source if isinstance(source, LineIndex) else LineIndex.from_text(source)
    for node in walk(root):
        start_line, start_column = index.locate(node.range.start)
        end_line, end_column = index.locate(node.range.end)
        node.position = SourcePosition(
            start=SourceLocation(start_line, start_column, node.range.start),
            end=SourceLocation(end_line, end_column, node.range.end),
        )
    return root


def _key(location: SourceLocation) -> tuple[int, int]:
    return location.line, location.column


def _extent(node: Node) -> Optional[tuple[tuple[int, int], tuple[int, int]]]:
    """Return the searchable ``(start, end)`` of ``node``, including child headlines."""
    if node.position is None:
        return None
    start, end = _key(node.position.start), _key(node.position.end)
    if isinstance(node, (Headline, Document)) and node.children:
        last = _extent(node.children[-1])
        if last is not None and last[1] > end:
            end = last[1]
    return start, end


def _last_line(extent: tuple[tuple[int, int], tuple[int, int]]) -> int:
    """Return the last line an extent covers; an end at column 0 stops on the line before."""
    start, end = extent
    if end[1] == 0 and end[0] > start[0]:
        return end[0] - 1
    return end[0]


def get_node_path(root: Node, line: int, column: int) -> list[Node]:
    """Return the nodes from ``root`` down to the deepest node containing a point.

    Parameters
    ----------
    root : Node
        Annotated tree
    line, column : int
        0-based position

    Returns
    -------
    list of Node
        Outermost first; empty when ``root`` does not contain the point

    """
    point = (line, column)
    path: list[Node] = []
    candidates = [root]
    while candidates:
        for node in candidates:
            extent = _extent(node)
            if extent is not None and extent[0] <= point < extent[1]:
                path.append(node)
                candidates = node.child_nodes()
                break
        else:
            break
    return path


def find_node_at_position(root: Node, line: int, column: int) -> Optional[Node]:
    """Return the deepest node containing the 0-based ``(line, column)``, or None."""
    path = get_node_path(root, line, column)
    return path[-1] if path else None


def find_nodes_in_range(root: Node, start_line: int, end_line: int) -> list[Node]:
    """Return every node overlapping the inclusive 0-based line range, in document order."""
    results: list[Node] = []
    stack = [root]
    while stack:
        node = stack.pop()
        extent = _extent(node)
        if extent is None or extent[0][0] > end_line or _last_line(extent) < start_line:
            continue
        results.append(node)
        stack.extend(reversed(node.child_nodes()))
    return results


def format_location(location: SourceLocation) -> str:
    """Format a location as 1-based ``"line:column"``."""
    return f"{location.line + 1}:{location.column + 1}"


def format_position(position: SourcePosition) -> str:
    """Format a position as ``"line:column-line:column"``."""
    return f"{format_location(position.start)}-{format_location(position.end)}"

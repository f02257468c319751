#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgast/ast/visitors.py
"""Visitor pattern support and tree traversal helpers.

Nodes dispatch on their ``type`` tag: a node whose type is ``"src-block"``
calls ``visit_src_block`` when the visitor defines it and
``generic_visit`` otherwise. Visitors therefore only implement the node
kinds they care about.

Examples
--------
Count paragraphs:

    >>> class ParagraphCounter(NodeVisitor):
    ...     def __init__(self):
    ...         self.count = 0
    ...     def visit_paragraph(self, node):
    ...         self.count += 1
    ...         self.generic_visit(node)
    ...     def generic_visit(self, node):
    ...         for child in node.child_nodes():
    ...             child.accept(self)

"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from orgast.ast.nodes import Document, Headline, Node


class NodeVisitor:
    """Base class for AST visitors."""

    def visit(self, node: Node) -> Any:
        """Visit ``node`` through its ``accept`` method."""
        return node.accept(self)

    def generic_visit(self, node: Node) -> Any:
        """Fallback for node types without a ``visit_*`` method.

        Parameters
        ----------
        node : Node
            The node to visit

        Returns
        -------
        Any
            Result of processing (default: None)

        """
        return None


def walk(node: Node) -> Iterator[Node]:
    """Yield ``node`` and all of its descendants in document (pre-)order."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.child_nodes()))


def iter_headlines(root: Document | Headline) -> Iterator[Headline]:
    """Yield every headline below ``root`` depth-first, in document order.

    Inline tasks are not headlines and are not yielded.
    """
    stack: list[Headline] = list(reversed(root.children))
    while stack:
        headline = stack.pop()
        yield headline
        stack.extend(reversed(headline.children))

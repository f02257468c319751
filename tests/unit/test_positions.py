#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_positions.py
"""Unit tests for position annotation and position queries."""

import pytest
from utils import SAMPLE_ORG

from orgast.ast.nodes import SourceLocation, SourcePosition
from orgast.ast.visitors import walk
from orgast.options.org import OrgParserOptions
from orgast.parsers.lines import LineIndex
from orgast.parsers.org import parse_org
from orgast.positions import (
    add_positions,
    find_node_at_position,
    find_nodes_in_range,
    format_location,
    format_position,
    get_node_path,
)

TEXT = "* A\nbody *b*\n** B\nchild text"


@pytest.mark.unit
class TestAddPositions:
    """Tests for add_positions."""

    def test_headline_position(self) -> None:
        """Test that a headline and its section end where the next headline starts."""
        doc = parse_org(TEXT)
        a = doc.children[0]
        assert a.position is not None
        assert a.section is not None and a.section.position is not None
        assert (a.position.start.line, a.position.start.column) == (0, 0)
        assert (a.position.end.line, a.position.end.column) == (2, 0)
        assert a.section.range.end == a.children[0].range.start
        assert (a.section.position.end.line, a.section.position.end.column) == (2, 0)

    def test_last_section_ends_at_document_end(self) -> None:
        """Test that the final section stops at the end of the text."""
        doc = parse_org(TEXT + "\n")
        b = doc.children[0].children[0]
        assert b.section is not None
        assert b.section.range.end == b.range.end == len(TEXT) + 1

    def test_object_position(self) -> None:
        """Test the position of an inline object."""
        doc = parse_org(TEXT)
        bold = next(node for node in walk(doc) if node.type == "bold")
        assert bold.position is not None
        assert (bold.position.start.line, bold.position.start.column) == (1, 5)
        assert (bold.position.end.line, bold.position.end.column) == (1, 8)

    def test_offsets_agree_with_ranges(self) -> None:
        """Test that every position carries the offsets of its range."""
        doc = parse_org(SAMPLE_ORG)
        index = LineIndex.from_text(SAMPLE_ORG)
        for node in walk(doc):
            assert node.position is not None
            assert node.position.start.offset == node.range.start
            assert node.position.end.offset == node.range.end
            start = node.position.start
            assert index.offset_of(start.line, start.column) == node.range.start

    def test_annotate_after_parsing(self) -> None:
        """Test annotating a tree parsed without positions."""
        doc = parse_org(TEXT, OrgParserOptions(add_positions=False))
        assert all(node.position is None for node in walk(doc))
        assert add_positions(doc, TEXT) is doc
        assert all(node.position is not None for node in walk(doc))


@pytest.mark.unit
class TestQueries:
    """Tests for the position query helpers."""

    def test_deepest_node(self) -> None:
        """Test finding the innermost node at a point."""
        doc = parse_org(TEXT)
        node = find_node_at_position(doc, 1, 6)
        assert node is not None
        assert node.type == "plain-text"
        assert node.value == "b"

    def test_node_path(self) -> None:
        """Test the path from the root to the innermost node."""
        doc = parse_org(TEXT)
        path = get_node_path(doc, 1, 6)
        assert [node.type for node in path] == ["org-data", "headline", "section", "paragraph", "bold", "plain-text"]

    def test_point_inside_child_headline(self) -> None:
        """Test that the search descends into child headlines."""
        doc = parse_org(TEXT)
        path = get_node_path(doc, 3, 2)
        headlines = [node for node in path if node.type == "headline"]
        assert [h.raw_value for h in headlines] == ["A", "B"]
        assert path[-1].value == "child text"

    def test_point_outside_document(self) -> None:
        """Test a point past the end of the document."""
        doc = parse_org(TEXT)
        assert find_node_at_position(doc, 10, 0) is None
        assert get_node_path(doc, 10, 0) == []

    def test_unannotated_tree(self) -> None:
        """Test that a tree without positions matches nothing."""
        doc = parse_org(TEXT, OrgParserOptions(add_positions=False))
        assert find_node_at_position(doc, 0, 0) is None

    def test_nodes_in_line_range(self) -> None:
        """Test collecting the nodes overlapping a line range."""
        doc = parse_org(TEXT)
        nodes = find_nodes_in_range(doc, 2, 2)
        assert [node.type for node in nodes] == ["org-data", "headline", "headline", "plain-text"]
        assert nodes[2].raw_value == "B"


@pytest.mark.unit
class TestFormatting:
    """Tests for location formatting."""

    def test_format_location_is_one_based(self) -> None:
        """Test 1-based formatting."""
        assert format_location(SourceLocation(0, 0, 0)) == "1:1"

    def test_format_position(self) -> None:
        """Test formatting a start/end pair."""
        position = SourcePosition(SourceLocation(1, 2, 10), SourceLocation(3, 0, 30))
        assert format_position(position) == "2:3-4:1"

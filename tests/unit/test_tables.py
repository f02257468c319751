#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_tables.py
"""Unit tests for the table sub-parser."""

import pytest

from orgast.parsers.inline import parse_objects
from orgast.parsers.lines import compute_line_offsets
from orgast.parsers.tables import find_table_end, get_table_alignments, is_table_line, parse_table


def table_from(text: str, with_objects: bool = False):
    lines = text.split("\n")
    starts = compute_line_offsets(lines)[:-1]
    return parse_table(lines, starts, parse_objects if with_objects else None)


@pytest.mark.unit
class TestTableLines:
    """Tests for table line detection."""

    @pytest.mark.parametrize("line", ["| a |", "  |-----|", "|", "+---+---+"])
    def test_table_lines(self, line: str) -> None:
        """Test lines that belong to a table."""
        assert is_table_line(line)

    @pytest.mark.parametrize("line", ["text | with bar", "", "- item", "+ plus item"])
    def test_non_table_lines(self, line: str) -> None:
        """Test lines that do not belong to a table."""
        assert not is_table_line(line)

    def test_find_table_end(self) -> None:
        """Test finding the end of a table run."""
        lines = ["intro", "| a |", "|---|", "| b |", "after"]
        assert find_table_end(lines, 1) == 4
        assert find_table_end(lines, 0) == 0


@pytest.mark.unit
class TestParseTable:
    """Tests for parse_table."""

    def test_rows_and_cells(self) -> None:
        """Test standard and rule rows."""
        table = table_from("| Name | Qty |\n|------+-----|\n| Pen  | 3   |")
        assert table.table_type == "org"
        assert [row.row_type for row in table.children] == ["standard", "rule", "standard"]
        assert [cell.value for cell in table.children[0].children] == ["Name", "Qty"]
        assert [cell.value for cell in table.children[2].children] == ["Pen", "3"]
        assert table.children[1].children == []

    def test_table_range(self) -> None:
        """Test that the table range spans every row."""
        text = "| a |\n| b |"
        table = table_from(text)
        assert (table.range.start, table.range.end) == (0, len(text))

    def test_cell_ranges(self) -> None:
        """Test that cell ranges cover the text between bars."""
        text = "  | x | yy |"
        table = table_from(text)
        cells = table.children[0].children
        assert [text[cell.range.start : cell.range.end] for cell in cells] == [" x ", " yy "]

    def test_empty_cell(self) -> None:
        """Test that an empty cell is kept without children."""
        table = table_from("| a || b |", with_objects=True)
        cells = table.children[0].children
        assert [cell.value for cell in cells] == ["a", "", "b"]
        assert cells[1].children == []

    def test_missing_closing_bar(self) -> None:
        """Test a row that does not end with a bar."""
        table = table_from("| a | b")
        assert [cell.value for cell in table.children[0].children] == ["a", "b"]

    def test_lone_bar(self) -> None:
        """Test a row consisting of a single bar."""
        table = table_from("|")
        assert table.children[0].row_type == "standard"
        assert table.children[0].children == []

    def test_cell_objects(self) -> None:
        """Test that cell contents are parsed into objects at absolute offsets."""
        text = "| *hot* | =x= |"
        table = table_from(text, with_objects=True)
        first, second = table.children[0].children
        bold = first.children[0]
        assert bold.type == "bold"
        assert text[bold.range.start : bold.range.end] == "*hot*"
        assert second.children[0].type == "code"

    def test_table_el(self) -> None:
        """Test that a table.el table keeps its text verbatim."""
        text = "+---+---+\n| a | b |\n+---+---+"
        table = table_from(text)
        assert table.table_type == "table.el"
        assert table.value == text
        assert table.children == []


@pytest.mark.unit
class TestAlignments:
    """Tests for alignment cookies."""

    def test_alignment_cookies(self) -> None:
        """Test reading column alignments."""
        table = table_from("| <l> | <r5> |\n|-----+------|\n| a   | b    |")
        assert get_table_alignments(table) == ["l", "r"]

    def test_later_cookie_overrides(self) -> None:
        """Test that a later cookie replaces an earlier one."""
        table = table_from("| <l> |\n| <c> |")
        assert get_table_alignments(table) == ["c"]

    def test_sparse_cookies(self) -> None:
        """Test columns without cookies."""
        table = table_from("| a | <c> |")
        assert get_table_alignments(table) == [None, "c"]

    def test_no_cookies(self) -> None:
        """Test a table without any cookies."""
        assert get_table_alignments(table_from("| <b> | x |")) == []

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_todo_keywords.py
"""Unit tests for in-buffer TODO workflow declarations."""

import pytest

from orgast.parsers.todo import TodoWorkflow, parse_todo_keyword_line, parse_todo_keywords


@pytest.mark.unit
class TestParseTodoKeywordLine:
    """Tests for parse_todo_keyword_line."""

    def test_explicit_separator(self) -> None:
        """Test states on both sides of the bar."""
        workflow = parse_todo_keyword_line("#+TODO: TODO NEXT | DONE CANCELLED")
        assert workflow == TodoWorkflow(("TODO", "NEXT"), ("DONE", "CANCELLED"))

    def test_last_state_is_done_without_separator(self) -> None:
        """Test that the last state is the done state when there is no bar."""
        workflow = parse_todo_keyword_line("#+SEQ_TODO: DRAFT REVIEW PUBLISHED")
        assert workflow is not None
        assert workflow.active_states == ("DRAFT", "REVIEW")
        assert workflow.done_states == ("PUBLISHED",)

    def test_single_state_is_active(self) -> None:
        """Test that a lone state is active only."""
        workflow = parse_todo_keyword_line("#+TYP_TODO: OPEN")
        assert workflow == TodoWorkflow(("OPEN",), ())

    def test_fast_access_keys_are_stripped(self) -> None:
        """Test that selection keys in parentheses are removed."""
        workflow = parse_todo_keyword_line("#+TODO: TODO(t) WAIT(w@/!) | DONE(d!)")
        assert workflow is not None
        assert workflow.all_states == ("TODO", "WAIT", "DONE")

    def test_case_insensitive_keyword(self) -> None:
        """Test that the keyword name is matched case-insensitively."""
        assert parse_todo_keyword_line("#+todo: A | B") == TodoWorkflow(("A",), ("B",))

    def test_empty_and_unrelated_lines(self) -> None:
        """Test lines that declare nothing."""
        assert parse_todo_keyword_line("#+TODO:") is None
        assert parse_todo_keyword_line("#+TITLE: Notes") is None


@pytest.mark.unit
class TestParseTodoKeywords:
    """Tests for parse_todo_keywords."""

    def test_combines_declarations(self) -> None:
        """Test that several lines combine in order without duplicates."""
        lines = ["#+TODO: TODO | DONE", "#+TODO: TODO WAIT | DONE GAVEUP", "* TODO Task"]
        workflow = parse_todo_keywords(lines)
        assert workflow is not None
        assert workflow.active_states == ("TODO", "WAIT")
        assert workflow.done_states == ("DONE", "GAVEUP")

    def test_stops_at_first_headline(self) -> None:
        """Test that declarations below the first headline are ignored."""
        lines = ["* Heading", "#+TODO: LATE | OVER"]
        assert parse_todo_keywords(lines) is None

    def test_no_declarations(self) -> None:
        """Test a document without workflow lines."""
        assert parse_todo_keywords(["#+TITLE: x", "text"]) is None

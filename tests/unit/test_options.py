#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_options.py
"""Unit tests for parser and serializer options."""

import dataclasses

import pytest

from orgast.constants import DEFAULT_DONE_KEYWORDS, DEFAULT_TODO_KEYWORDS
from orgast.options.org import OrgParserOptions, OrgSerializerOptions


@pytest.mark.unit
class TestOrgParserOptions:
    """Tests for OrgParserOptions."""

    def test_defaults(self) -> None:
        """Test the default values."""
        options = OrgParserOptions()
        assert options.todo_keywords == DEFAULT_TODO_KEYWORDS
        assert options.done_keywords == DEFAULT_DONE_KEYWORDS
        assert options.parse_inline_objects
        assert options.add_positions
        assert options.extract_metadata
        assert options.inlinetask_min_level == 15
        assert not options.use_in_buffer_todo_keywords
        assert not options.strict

    def test_frozen(self) -> None:
        """Test that options cannot be mutated."""
        options = OrgParserOptions()
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.strict = True  # type: ignore[misc]

    def test_lists_become_tuples(self) -> None:
        """Test that keyword lists from config files are normalized."""
        options = OrgParserOptions(todo_keywords=["TODO", "NEXT"], done_keywords=["DONE"])  # type: ignore[arg-type]
        assert options.todo_keywords == ("TODO", "NEXT")
        assert options.done_keywords == ("DONE",)
        assert hash(options) == hash(OrgParserOptions(todo_keywords=("TODO", "NEXT"), done_keywords=("DONE",)))

    @pytest.mark.parametrize("level", [0, -3])
    def test_invalid_inlinetask_level(self, level: int) -> None:
        """Test that the inline task level must be positive."""
        with pytest.raises(ValueError, match="inlinetask_min_level"):
            OrgParserOptions(inlinetask_min_level=level)

    @pytest.mark.parametrize("keyword", ["", "TWO WORDS", "TAB\tBED"])
    def test_invalid_keywords(self, keyword: str) -> None:
        """Test that blank keywords and keywords with whitespace are rejected."""
        with pytest.raises(ValueError, match="TODO keywords"):
            OrgParserOptions(todo_keywords=("TODO", keyword))

    def test_create_updated(self) -> None:
        """Test cloning with changed values."""
        options = OrgParserOptions()
        strict = options.create_updated(strict=True)
        assert strict.strict
        assert not options.strict
        assert strict.todo_keywords == options.todo_keywords

    def test_create_updated_validates(self) -> None:
        """Test that cloning runs validation again."""
        with pytest.raises(ValueError):
            OrgParserOptions().create_updated(inlinetask_min_level=0)

    @pytest.mark.parametrize("name", ["strict", "extract_metadata", "add_positions"])
    def test_boolean_options_reject_strings(self, name: str) -> None:
        """Test that a string such as "false" is not accepted as a boolean."""
        with pytest.raises(ValueError, match=f"{name} must be true or false"):
            OrgParserOptions(**{name: "false"})

    def test_field_metadata(self) -> None:
        """Test that every option field carries CLI metadata."""
        for f in dataclasses.fields(OrgParserOptions):
            assert "help" in f.metadata
            assert "cli_name" in f.metadata


@pytest.mark.unit
class TestOrgSerializerOptions:
    """Tests for OrgSerializerOptions."""

    def test_defaults(self) -> None:
        """Test the default values."""
        options = OrgSerializerOptions()
        assert options.blank_line_after_keywords
        assert options.trailing_newline

    def test_create_updated(self) -> None:
        """Test cloning with changed values."""
        options = OrgSerializerOptions().create_updated(trailing_newline=False)
        assert not options.trailing_newline

    def test_boolean_options_reject_numbers(self) -> None:
        """Test that 0 and 1 are not accepted as booleans."""
        with pytest.raises(ValueError, match="trailing_newline must be true or false"):
            OrgSerializerOptions(trailing_newline=0)

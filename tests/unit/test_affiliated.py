#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_affiliated.py
"""Unit tests for affiliated keywords."""

import pytest

from orgast.ast.nodes import Keyword
from orgast.parsers.affiliated import (
    build_affiliated,
    is_affiliated_keyword,
    parse_caption,
    parse_colon_attributes,
)
from orgast.parsers.org import parse_org


@pytest.mark.unit
class TestAffiliatedHelpers:
    """Tests for the helper functions."""

    @pytest.mark.parametrize("key", ["NAME", "caption", "ATTR_HTML", "attr_latex", "RESULTS", "HEADER", "PLOT"])
    def test_affiliated_keys(self, key: str) -> None:
        """Test keys that attach to the next element."""
        assert is_affiliated_keyword(key)

    @pytest.mark.parametrize("key", ["TITLE", "AUTHOR", "OPTIONS", "ATTR"])
    def test_document_keys(self, key: str) -> None:
        """Test keys that do not attach to an element."""
        assert not is_affiliated_keyword(key)

    def test_colon_attributes(self) -> None:
        """Test that values may contain spaces and run to the next key."""
        assert parse_colon_attributes(":width 50% :alt a small cat :float") == {
            "width": "50%",
            "alt": "a small cat",
        }

    def test_caption_with_label(self) -> None:
        """Test a caption with a trailing label."""
        assert parse_caption("Quarterly numbers label:tab:q") == ("Quarterly numbers", "tab:q")

    def test_caption_short_form(self) -> None:
        """Test the [short]long caption form."""
        assert parse_caption("[Short]The long caption") == (("Short", "The long caption"), None)


@pytest.mark.unit
class TestBuildAffiliated:
    """Tests for build_affiliated."""

    def test_collects_run(self) -> None:
        """Test collecting a run of keywords."""
        keywords = [
            Keyword(key="NAME", value="fig-1"),
            Keyword(key="CAPTION", value="A figure"),
            Keyword(key="ATTR_HTML", value=":width 300"),
            Keyword(key="ATTR_HTML", value=":alt diagram"),
            Keyword(key="HEADER", value=":var x=1"),
            Keyword(key="HEADER", value=":var y=2"),
        ]
        affiliated = build_affiliated(keywords)
        assert affiliated is not None
        assert affiliated.name == "fig-1"
        assert affiliated.caption == "A figure"
        assert affiliated.attr == {"html": {"width": "300", "alt": "diagram"}}
        assert affiliated.header == [":var x=1", ":var y=2"]

    def test_first_value_wins(self) -> None:
        """Test that the first NAME of a run is kept."""
        affiliated = build_affiliated([Keyword(key="NAME", value="first"), Keyword(key="NAME", value="second")])
        assert affiliated is not None
        assert affiliated.name == "first"

    def test_caption_option(self) -> None:
        """Test #+CAPTION[short]: long."""
        affiliated = build_affiliated([Keyword(key="CAPTION", value="Long text", option="Short")])
        assert affiliated is not None
        assert affiliated.caption == ("Short", "Long text")

    def test_no_affiliated_keys(self) -> None:
        """Test that a run of document keywords yields None."""
        assert build_affiliated([Keyword(key="TITLE", value="x")]) is None


@pytest.mark.unit
class TestAffiliatedInDocuments:
    """Tests for affiliated keywords attached by the element classifier."""

    def test_name_attaches_to_table(self) -> None:
        """Test that #+NAME attaches to the table below it."""
        doc = parse_org("#+NAME: data\n#+CAPTION: Numbers\n| a | b |\n")
        assert doc.section is not None
        keyword_name, keyword_caption, table = doc.section.children
        assert keyword_name.type == "keyword"
        assert keyword_caption.type == "keyword"
        assert table.type == "table"
        assert table.affiliated is not None
        assert table.affiliated.name == "data"
        assert table.affiliated.caption == "Numbers"

    def test_blank_line_breaks_attachment(self) -> None:
        """Test that a blank line between keyword and element detaches it."""
        doc = parse_org("#+NAME: data\n\n| a |\n")
        assert doc.section is not None
        table = doc.section.children[-1]
        assert table.type == "table"
        assert table.affiliated is None

    def test_results_attach_to_fixed_width(self) -> None:
        """Test that #+RESULTS attaches to the output below it."""
        doc = parse_org("#+RESULTS:\n: 42\n")
        assert doc.section is not None
        fixed = doc.section.children[-1]
        assert fixed.type == "fixed-width"
        assert fixed.affiliated is not None
        assert fixed.affiliated.results == ""

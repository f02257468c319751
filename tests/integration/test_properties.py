#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_properties.py
"""Property-based tests for the parser and serializer.

This module uses Hypothesis to build org-like documents from common line
shapes and arbitrary text, then checks structural properties that must hold
for every input.

Test Coverage:
- Line offsets add up to the document length
- Headline levels strictly increase from parent to child
- Sections never contain headlines
- Every element consumes at least one line
- Serialization never fails
- Well-formed documents keep their element tree through a round trip, and
  serializing a re-parsed document reproduces the same text
"""

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from orgast.ast.nodes import Document, Headline, Node
from orgast.ast.objects import OrgObject
from orgast.ast.visitors import iter_headlines, walk
from orgast.parsers.lines import LineIndex
from orgast.parsers.org import parse_org
from orgast.renderers.org import serialize, serialize_element

ORG_LINES = [
    "* Heading",
    "** TODO [#B] Task :tag:",
    "*** DONE Sub",
    "*" * 15 + " Inline task",
    "*" * 15 + " TODO Call Bob",
    "*" * 15 + " END",
    "Plain *bold* and /italic/ text",
    "A [[https://orgmode.org][link]] and <2024-01-15 Mon>",
    "",
    "   ",
    "#+TITLE: Title",
    "#+NAME: thing",
    "#+BEGIN_SRC python :results output",
    "#+END_SRC",
    "#+BEGIN_QUOTE",
    "#+END_QUOTE",
    "#+BEGIN: clocktable",
    "#+END:",
    ":PROPERTIES:",
    ":ID: abc",
    ":LOGBOOK:",
    ":END:",
    "SCHEDULED: <2024-01-15 Mon>",
    "DEADLINE: <2026-01-27 Tue>",
    "CLOSED: [2024-01-14 Sun 10:00]",
    "CLOCK: [2024-01-15 Mon 09:00]--[2024-01-15 Mon 10:00] =>  1:00",
    "- item",
    "  - nested item",
    "1. [ ] numbered",
    "- Term :: definition",
    "| a | b |",
    "|---+---|",
    "+---+",
    ": fixed width",
    "# comment",
    "-----",
    "[fn:1] Footnote",
    "%%(diary-anniversary 1 1 2000)",
    "\\begin{equation}",
    "\\end{equation}",
]

org_line = st.one_of(
    st.sampled_from(ORG_LINES),
    st.text(alphabet=st.characters(blacklist_categories=("Cs",), blacklist_characters="\n\r"), max_size=40),
)
org_document = st.lists(org_line, max_size=40).map("\n".join)

# Multi-line constructs kept whole, so every block, drawer and task is closed
WELL_FORMED_UNITS = [
    "* Heading",
    "** TODO [#B] Task :tag:",
    "*** DONE Sub",
    "* Planned\nSCHEDULED: <2024-01-15 Mon>",
    "* Task\n:PROPERTIES:\n:END:",
    "* Task\n:PROPERTIES:\n:ID: abc\n:END:",
    "",
    "SCHEDULED: <2024-01-15 Mon>",
    "DEADLINE: <2026-01-27 Tue>",
    "Plain *bold* and /italic/ text",
    "A [[https://orgmode.org][link]] and <2024-01-15 Mon>",
    "*" * 15 + " TODO Call Bob\n" + "*" * 15 + " END",
    "*" * 15 + " Note\nTask body\n" + "*" * 15 + " END",
    "- item",
    "  - indented item",
    "1. [ ] numbered",
    "- Term :: definition",
    "| a | b |\n|---+---|",
    "#+BEGIN_SRC python\nprint(1)\n#+END_SRC",
    "#+BEGIN_QUOTE\nQuoted text\n#+END_QUOTE",
    ":LOGBOOK:\nCLOCK: [2024-01-15 Mon 09:00]--[2024-01-15 Mon 10:00] =>  1:00\n:END:",
    ": fixed width",
    "# comment",
    "-----",
    "#+TITLE: Title",
    "[fn:1] Footnote",
]

well_formed_document = st.lists(st.sampled_from(WELL_FORMED_UNITS), max_size=30).map("\n".join)


def _shape(node: Node) -> tuple:
    """Return the node type tree without inline objects."""
    return node.type, [_shape(child) for child in node.child_nodes() if not isinstance(child, OrgObject)]


def _check_nesting(parent: Document | Headline) -> None:
    for child in parent.children:
        if isinstance(parent, Headline):
            assert child.level > parent.level
        _check_nesting(child)


@pytest.mark.integration
class TestParserProperties:
    """Structural properties of parsed documents."""

    @given(org_document)
    @settings(suppress_health_check=[HealthCheck.too_slow], deadline=None)
    def test_line_offsets_add_up(self, text):
        """Test that line lengths plus terminators equal the document length."""
        index = LineIndex.from_text(text)
        expected = len(text) + 1 if text else 0
        assert sum(len(line) + 1 for line in index.lines) == expected
        assert index.offsets[-1] == expected

    @given(org_document)
    @settings(suppress_health_check=[HealthCheck.too_slow], deadline=None)
    def test_headline_levels_nest(self, text):
        """Test that every child headline is deeper than its parent."""
        _check_nesting(parse_org(text))

    @given(org_document)
    @settings(suppress_health_check=[HealthCheck.too_slow], deadline=None)
    def test_sections_hold_no_headlines(self, text):
        """Test that a section never contains a headline."""
        doc = parse_org(text)
        sections = [doc.section] if doc.section is not None else []
        sections.extend(h.section for h in iter_headlines(doc) if h.section is not None)
        for section in sections:
            assert not any(node.type == "headline" for node in walk(section))

    @given(org_document)
    @settings(suppress_health_check=[HealthCheck.too_slow], deadline=None)
    def test_elements_advance(self, text):
        """Test that sibling elements start on strictly increasing offsets."""
        doc = parse_org(text)
        for node in walk(doc):
            if node.type != "section":
                continue
            starts = [child.range.start for child in node.children]
            assert starts == sorted(set(starts))

    @given(org_document)
    @settings(suppress_health_check=[HealthCheck.too_slow], deadline=None)
    def test_child_headlines_follow_parent_content(self, text):
        """Test that a child headline starts where or after its parent's own content ends."""
        for headline in iter_headlines(parse_org(text)):
            if headline.section is not None:
                assert headline.range.start < headline.section.range.start
                assert headline.section.range.end <= headline.range.end
            for child in headline.children:
                assert headline.range.end <= child.range.start

    @given(org_document)
    @settings(suppress_health_check=[HealthCheck.too_slow], deadline=None)
    def test_headline_count_matches_star_lines(self, text):
        """Test that headline lines outside blocks all become headlines or inline tasks."""
        doc = parse_org(text)
        stars = sum(1 for node in walk(doc) if node.type in ("headline", "inlinetask"))
        assert stars <= sum(1 for line in text.split("\n") if line.startswith("*"))


@pytest.mark.integration
class TestSerializerProperties:
    """Properties of the serializer over parsed documents."""

    @given(org_document)
    @settings(suppress_health_check=[HealthCheck.too_slow], deadline=None)
    def test_serialize_is_total(self, text):
        """Test that every parsed document and element serializes to a string."""
        doc = parse_org(text)
        assert isinstance(serialize(doc), str)
        for node in walk(doc):
            assert isinstance(serialize_element(node), str)

    @given(st.lists(st.sampled_from(ORG_LINES), max_size=30).map("\n".join))
    @settings(suppress_health_check=[HealthCheck.too_slow], deadline=None)
    def test_headlines_survive_round_trip(self, text):
        """Test that titles, keywords and tags come back after serializing."""
        doc = parse_org(text)
        again = parse_org(serialize(doc))

        def outline(root):
            return [(h.level, h.todo_keyword, h.raw_value, h.tags) for h in iter_headlines(root)]

        assert outline(again) == outline(doc)

    @given(well_formed_document)
    @settings(suppress_health_check=[HealthCheck.too_slow], deadline=None)
    def test_element_tree_survives_round_trip(self, text):
        """Test that re-parsing serialized output gives the same element tree."""
        doc = parse_org(text)
        again = parse_org(serialize(doc))

        assert _shape(again) == _shape(doc)
        assert [h.planning is None for h in iter_headlines(again)] == [h.planning is None for h in iter_headlines(doc)]

    @given(well_formed_document)
    @settings(suppress_health_check=[HealthCheck.too_slow], deadline=None)
    def test_serialization_is_a_fixpoint(self, text):
        """Test that serializing a re-parsed document reproduces the text."""
        once = serialize(parse_org(text))
        assert serialize(parse_org(once)) == once

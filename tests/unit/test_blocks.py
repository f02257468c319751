#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_blocks.py
"""Unit tests for the block dispatcher.

Tests cover:
- Source, example, export, verse and comment blocks
- Greater blocks, special blocks and dynamic blocks
- LaTeX environments and drawers
- Header argument parsing and memoized end patterns
- Unterminated blocks

"""

import pytest

from orgast.ast.nodes import (
    CenterBlock,
    Drawer,
    DynamicBlock,
    ExampleBlock,
    ExportBlock,
    LatexEnvironment,
    Paragraph,
    QuoteBlock,
    SpecialBlock,
    SrcBlock,
    VerseBlock,
)
from orgast.options.org import OrgParserOptions
from orgast.parsers.blocks import (
    block_end_pattern,
    inlinetask_end_pattern,
    latex_end_pattern,
    parse_header_args,
    parse_property_drawer,
    try_parse_block,
)
from orgast.parsers.elements import ElementClassifier
from orgast.parsers.lines import compute_line_offsets


def parse_block(text: str, index: int = 0):
    lines = text.split("\n")
    starts = compute_line_offsets(lines)[:-1]
    classifier = ElementClassifier(OrgParserOptions())
    return try_parse_block(lines, starts, index, classifier.classify_elements)


@pytest.mark.unit
class TestVerbatimBlocks:
    """Tests for blocks whose body is kept verbatim."""

    def test_src_block(self) -> None:
        """Test a source block with header arguments."""
        result = parse_block("#+BEGIN_SRC python :results output\nprint(1)\n#+END_SRC")
        assert result is not None
        block = result.element
        assert isinstance(block, SrcBlock)
        assert block.language == "python"
        assert block.value == "print(1)"
        assert block.parameters == ":results output"
        assert block.headers == {"results": "output"}
        assert (block.line_number, block.end_line_number) == (1, 3)
        assert result.end == 3
        assert result.terminated

    def test_src_block_case_insensitive(self) -> None:
        """Test lowercase delimiters and a mixed-case language."""
        result = parse_block("#+begin_src Emacs-Lisp\n(message \"hi\")\n#+end_src")
        assert result is not None
        assert isinstance(result.element, SrcBlock)
        assert result.element.language == "emacs-lisp"

    def test_src_block_without_language(self) -> None:
        """Test a source block with no language."""
        result = parse_block("#+BEGIN_SRC\nx\n#+END_SRC")
        assert result is not None
        assert result.element.language == ""
        assert result.element.parameters is None

    def test_body_keeps_markup_lines(self) -> None:
        """Test that org syntax inside a block stays verbatim."""
        result = parse_block("#+BEGIN_SRC org\n* not a headline\n#+TITLE: x\n#+END_SRC")
        assert result is not None
        assert result.element.value == "* not a headline\n#+TITLE: x"

    def test_example_block_switches(self) -> None:
        """Test example block switches."""
        result = parse_block("#+BEGIN_EXAMPLE -n\nline\n#+END_EXAMPLE")
        assert result is not None
        assert isinstance(result.element, ExampleBlock)
        assert result.element.switches == "-n"

    def test_export_block_backend(self) -> None:
        """Test the export block backend and its default."""
        result = parse_block("#+BEGIN_EXPORT LaTeX\n\\clearpage\n#+END_EXPORT")
        assert result is not None
        assert isinstance(result.element, ExportBlock)
        assert result.element.backend == "latex"

        result = parse_block("#+BEGIN_EXPORT\n<br>\n#+END_EXPORT")
        assert result is not None
        assert result.element.backend == "html"

    def test_verse_block(self) -> None:
        """Test a verse block."""
        result = parse_block("#+BEGIN_VERSE\n  Roses\n  Violets\n#+END_VERSE")
        assert result is not None
        assert isinstance(result.element, VerseBlock)
        assert result.element.value == "  Roses\n  Violets"

    def test_empty_body(self) -> None:
        """Test a block with no lines between its delimiters."""
        result = parse_block("#+BEGIN_COMMENT\n#+END_COMMENT")
        assert result is not None
        assert result.element.type == "comment-block"
        assert result.element.value == ""

    def test_end_of_other_block_does_not_close(self) -> None:
        """Test that only the matching END line closes a block."""
        result = parse_block("#+BEGIN_SRC sh\n#+END_EXAMPLE\n#+END_SRC")
        assert result is not None
        assert result.element.value == "#+END_EXAMPLE"


@pytest.mark.unit
class TestGreaterBlocks:
    """Tests for blocks whose body is classified into elements."""

    def test_quote_block(self) -> None:
        """Test that a quote block holds paragraphs."""
        result = parse_block("#+BEGIN_QUOTE\nTo be.\n#+END_QUOTE")
        assert result is not None
        assert isinstance(result.element, QuoteBlock)
        assert isinstance(result.element.children[0], Paragraph)

    def test_center_block(self) -> None:
        """Test a center block."""
        result = parse_block("#+BEGIN_CENTER\nMiddle\n#+END_CENTER")
        assert result is not None
        assert isinstance(result.element, CenterBlock)

    def test_special_block(self) -> None:
        """Test that an unknown block name becomes a special block."""
        result = parse_block("#+BEGIN_note\nRemember.\n#+END_note")
        assert result is not None
        assert isinstance(result.element, SpecialBlock)
        assert result.element.block_type == "note"
        assert len(result.element.children) == 1

    def test_nested_blocks(self) -> None:
        """Test a source block inside a quote block."""
        result = parse_block("#+BEGIN_QUOTE\n#+BEGIN_SRC sh\nls\n#+END_SRC\n#+END_QUOTE")
        assert result is not None
        inner = result.element.children[0]
        assert isinstance(inner, SrcBlock)
        assert inner.value == "ls"

    def test_dynamic_block(self) -> None:
        """Test a dynamic block with arguments."""
        result = parse_block("#+BEGIN: clocktable :scope file\n| a |\n#+END:")
        assert result is not None
        block = result.element
        assert isinstance(block, DynamicBlock)
        assert block.name == "clocktable"
        assert block.arguments == ":scope file"
        assert block.children[0].type == "table"


@pytest.mark.unit
class TestLatexAndDrawers:
    """Tests for LaTeX environments and drawers."""

    def test_latex_environment(self) -> None:
        """Test that the value includes both delimiter lines."""
        text = "\\begin{equation}\nx = 1\n\\end{equation}"
        result = parse_block(text)
        assert result is not None
        assert isinstance(result.element, LatexEnvironment)
        assert result.element.name == "equation"
        assert result.element.value == text

    def test_starred_latex_environment(self) -> None:
        """Test an environment name ending in a star."""
        result = parse_block("\\begin{align*}\na\n\\end{align*}")
        assert result is not None
        assert result.element.name == "align*"

    def test_drawer(self) -> None:
        """Test a generic drawer."""
        result = parse_block(":LOGBOOK:\n- Note taken\n:END:")
        assert result is not None
        assert isinstance(result.element, Drawer)
        assert result.element.name == "LOGBOOK"
        assert result.element.children[0].type == "plain-list"

    def test_properties_is_not_a_generic_drawer(self) -> None:
        """Test that PROPERTIES and END are not opened as generic drawers."""
        assert parse_block(":PROPERTIES:\n:A: 1\n:END:") is None
        assert parse_block(":END:") is None

    def test_property_drawer(self) -> None:
        """Test parsing a property drawer."""
        lines = [":PROPERTIES:", ":ID: abc123", ":Effort: 1:30", ":END:", "after"]
        starts = compute_line_offsets(lines)[:-1]
        drawer, properties, end, terminated = parse_property_drawer(lines, starts, 0)
        assert properties == {"ID": "abc123", "Effort": "1:30"}
        assert [child.key for child in drawer.children] == ["ID", "Effort"]
        assert end == 4
        assert terminated


@pytest.mark.unit
class TestUnterminated:
    """Tests for blocks without a closing line."""

    def test_block_runs_to_end(self) -> None:
        """Test that an unterminated block extends to the last line."""
        result = parse_block("#+BEGIN_SRC sh\necho 1\necho 2")
        assert result is not None
        assert not result.terminated
        assert result.end == 3
        assert result.element.value == "echo 1\necho 2"
        assert result.element.range.end == len("#+BEGIN_SRC sh\necho 1\necho 2")

    def test_unterminated_drawer(self) -> None:
        """Test an unterminated drawer."""
        result = parse_block(":NOTES:\ntext")
        assert result is not None
        assert not result.terminated

    def test_not_a_block(self) -> None:
        """Test lines that open nothing."""
        assert parse_block("plain text") is None
        assert parse_block("#+TITLE: x") is None
        assert parse_block("") is None


@pytest.mark.unit
class TestPatternsAndHeaders:
    """Tests for memoized patterns and header arguments."""

    def test_header_args(self) -> None:
        """Test parsing :key value pairs."""
        assert parse_header_args(":results output :exports both :tangle") == {"results": "output", "exports": "both"}

    def test_malformed_header_args_are_dropped(self) -> None:
        """Test that tokens without a key are ignored."""
        assert parse_header_args("stray words :session") == {}

    def test_block_end_pattern_is_memoized(self) -> None:
        """Test that the same name returns the same compiled pattern."""
        assert block_end_pattern("SRC") is block_end_pattern("SRC")
        assert block_end_pattern("SRC").match("#+end_src")
        assert not block_end_pattern("SRC").match("#+END_SRCX")

    def test_latex_end_pattern(self) -> None:
        """Test the LaTeX end pattern escapes the name."""
        assert latex_end_pattern("align*").match("\\end{align*}")

    @pytest.mark.parametrize("level", [3, 15, 40])
    def test_inlinetask_end_pattern(self, level: int) -> None:
        """Test END patterns for precompiled and lazily compiled levels."""
        pattern = inlinetask_end_pattern(level)
        assert pattern is inlinetask_end_pattern(level)
        assert pattern.match("*" * level + " END")
        assert not pattern.match("*" * (level + 1) + " END")

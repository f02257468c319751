#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgast/options/org.py
"""Configuration options for org-mode parsing and serialization."""

from __future__ import annotations

from dataclasses import dataclass, field

from orgast.constants import (
    DEFAULT_ADD_POSITIONS,
    DEFAULT_BLANK_LINE_AFTER_KEYWORDS,
    DEFAULT_DONE_KEYWORDS,
    DEFAULT_INLINETASK_MIN_LEVEL,
    DEFAULT_PARSE_INLINE_OBJECTS,
    DEFAULT_STRICT_MODE,
    DEFAULT_TODO_KEYWORDS,
    DEFAULT_TRAILING_NEWLINE,
    DEFAULT_USE_IN_BUFFER_TODO_KEYWORDS,
)
from orgast.options.base import BaseParserOptions, BaseRendererOptions


@dataclass(frozen=True)
class OrgParserOptions(BaseParserOptions):
    """Configuration options for org-mode-to-AST parsing.

    Parameters
    ----------
    todo_keywords : tuple[str, ...]
        Words recognized as TODO keywords at the start of a headline title.
        Done keywords are always recognized as well.
    done_keywords : tuple[str, ...]
        Subset of keywords classified as ``"done"``; all others are ``"todo"``.
    parse_inline_objects : bool, default True
        Run the inline object parser over paragraphs, titles, table cells
        and item tags. When False those nodes carry no object children.
    add_positions : bool, default True
        Annotate every node with 0-based line/column positions after parsing.
    inlinetask_min_level : int, default 15
        Headline markers with at least this many stars are parsed as inline
        tasks. Must be at least 1.
    use_in_buffer_todo_keywords : bool, default False
        Extend the keyword sets with ``#+TODO:``, ``#+SEQ_TODO:`` and
        ``#+TYP_TODO:`` lines found before the first headline.
    strict : bool, default False
        Raise ``StrictModeError`` for unterminated blocks, drawers, dynamic
        blocks, LaTeX environments, inline tasks and for stray ``:END:``
        lines instead of tolerating them.

    Examples
    --------
    Custom TODO keywords:
        >>> options = OrgParserOptions(
        ...     todo_keywords=("TODO", "STARTED"),
        ...     done_keywords=("DONE",),
        ... )

    """

    todo_keywords: tuple[str, ...] = field(
        default=DEFAULT_TODO_KEYWORDS,
        metadata={"help": "TODO keywords to recognize in headlines", "cli_name": "todo", "importance": "core"},
    )
    done_keywords: tuple[str, ...] = field(
        default=DEFAULT_DONE_KEYWORDS,
        metadata={"help": "Keywords that mark a headline as done", "cli_name": "done", "importance": "core"},
    )
    parse_inline_objects: bool = field(
        default=DEFAULT_PARSE_INLINE_OBJECTS,
        metadata={
            "help": "Parse emphasis, links, timestamps and other inline objects",
            "cli_name": "no-inline",
            "importance": "core",
        },
    )
    add_positions: bool = field(
        default=DEFAULT_ADD_POSITIONS,
        metadata={
            "help": "Annotate nodes with line/column positions",
            "cli_name": "no-positions",
            "importance": "core",
        },
    )
    inlinetask_min_level: int = field(
        default=DEFAULT_INLINETASK_MIN_LEVEL,
        metadata={
            "help": "Minimum number of stars for an inline task",
            "cli_name": "inlinetask-min-level",
            "type": int,
            "importance": "advanced",
        },
    )
    use_in_buffer_todo_keywords: bool = field(
        default=DEFAULT_USE_IN_BUFFER_TODO_KEYWORDS,
        metadata={
            "help": "Honour #+TODO: workflow lines before the first headline",
            "cli_name": "in-buffer-todo",
            "importance": "advanced",
        },
    )
    strict: bool = field(
        default=DEFAULT_STRICT_MODE,
        metadata={
            "help": "Fail on unterminated blocks, drawers and inline tasks",
            "cli_name": "strict",
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate and normalize option values.

        Raises
        ------
        ValueError
            If ``inlinetask_min_level`` is below 1 or a keyword is blank.

        """
        super().__post_init__()

        if self.inlinetask_min_level < 1:
            raise ValueError(f"inlinetask_min_level must be at least 1, got {self.inlinetask_min_level}")

        # Accept lists from config files and keep the frozen value hashable
        object.__setattr__(self, "todo_keywords", tuple(self.todo_keywords))
        object.__setattr__(self, "done_keywords", tuple(self.done_keywords))

        for keyword in (*self.todo_keywords, *self.done_keywords):
            if not keyword or any(ch.isspace() for ch in keyword):
                raise ValueError(f"TODO keywords must be non-empty and contain no whitespace, got {keyword!r}")


@dataclass(frozen=True)
class OrgSerializerOptions(BaseRendererOptions):
    """Configuration options for AST-to-org-mode serialization.

    Parameters
    ----------
    blank_line_after_keywords : bool, default True
        Emit a blank line after the document keyword block.
    trailing_newline : bool, default True
        End the serialized document with a single newline.

    """

    blank_line_after_keywords: bool = field(
        default=DEFAULT_BLANK_LINE_AFTER_KEYWORDS,
        metadata={
            "help": "Emit a blank line after document keywords",
            "cli_name": "no-blank-line-after-keywords",
            "importance": "core",
        },
    )
    trailing_newline: bool = field(
        default=DEFAULT_TRAILING_NEWLINE,
        metadata={
            "help": "End output with a newline",
            "cli_name": "no-trailing-newline",
            "importance": "core",
        },
    )

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgast/constants.py
"""Constants and default values for the orgast library.

This module centralizes the default configuration values, literal type
aliases and fixed keyword sets used across the parser, the serializer and
the command-line interface.

Constants are organized by category:
1. Type Definitions - Literal types used by AST nodes
2. Parser Defaults - Default values for ``OrgParserOptions``
3. Keyword Sets - Keyword names with special handling
4. Serializer Defaults - Default values for ``OrgSerializerOptions``
5. CLI - Exit codes and configuration file names
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

TodoType = Literal["todo", "done"]
TimestampType = Literal["active", "inactive", "active-range", "inactive-range", "diary"]
RepeaterType = Literal["+", "++", ".+"]
WarningType = Literal["-", "--"]
TimeUnit = Literal["h", "d", "w", "m", "y"]
LinkFormat = Literal["plain", "angle", "bracket"]
FootnoteReferenceType = Literal["standard", "inline", "anonymous"]
ListType = Literal["ordered", "unordered", "descriptive"]
CheckboxState = Literal["on", "off", "trans"]
TableType = Literal["org", "table.el"]
RowType = Literal["standard", "rule"]
ClockStatus = Literal["running", "closed"]
LatexFragmentType = Literal["inline-math", "display-math", "command"]

# =============================================================================
# Parser Defaults
# =============================================================================

DEFAULT_TODO_KEYWORDS: tuple[str, ...] = (
    "TODO",
    "NEXT",
    "WAIT",
    "WAITING",
    "HOLD",
    "SOMEDAY",
    "DONE",
    "CANCELLED",
    "CANCELED",
    "IN-PROGRESS",
)
DEFAULT_DONE_KEYWORDS: tuple[str, ...] = ("DONE", "CANCELLED", "CANCELED")
DEFAULT_PARSE_INLINE_OBJECTS = True
DEFAULT_ADD_POSITIONS = True
DEFAULT_INLINETASK_MIN_LEVEL = 15
DEFAULT_USE_IN_BUFFER_TODO_KEYWORDS = False
DEFAULT_STRICT_MODE = False
DEFAULT_EXTRACT_METADATA = True

# Inline task END patterns are compiled eagerly for this range of levels
PRECOMPILED_INLINETASK_LEVELS = range(15, 31)

# Default backend for ``#+BEGIN_EXPORT`` without an explicit backend
DEFAULT_EXPORT_BACKEND = "html"

# =============================================================================
# Keyword Sets
# =============================================================================

# Keywords that may repeat and accumulate in order instead of overwriting
MULTI_VALUE_KEYWORDS = frozenset({"LATEX_HEADER", "LATEX_HEADER_EXTRA", "HTML_HEAD", "HTML_HEAD_EXTRA"})

# Properties promoted to first-class headline fields
PROMOTED_PROPERTIES: dict[str, str] = {
    "CUSTOM_ID": "custom_id",
    "ID": "id",
    "CATEGORY": "category",
    "EFFORT": "effort",
}

# Keywords that attach to the element directly below them
AFFILIATED_KEYWORD_NAMES = frozenset(
    {
        "CAPTION",
        "DATA",
        "HEADER",
        "HEADERS",
        "LABEL",
        "NAME",
        "PLOT",
        "RESNAME",
        "RESULT",
        "RESULTS",
        "SOURCE",
        "SRCNAME",
        "TBLNAME",
    }
)

# In-buffer keywords declaring TODO workflows
TODO_WORKFLOW_KEYWORDS = frozenset({"TODO", "SEQ_TODO", "TYP_TODO"})

# Keywords copied into ``Document.metadata`` when metadata extraction is on
METADATA_KEYWORDS: dict[str, str] = {
    "TITLE": "title",
    "AUTHOR": "author",
    "EMAIL": "email",
    "DATE": "date",
    "LANGUAGE": "language",
    "DESCRIPTION": "description",
    "KEYWORDS": "keywords",
    "FILETAGS": "filetags",
    "CATEGORY": "category",
}

# Link types recognized without brackets (``type:path``)
PLAIN_LINK_TYPES: tuple[str, ...] = (
    "ref",
    "doi",
    "id",
    "file",
    "mailto",
    "shell",
    "elisp",
    "help",
    "info",
    "roam",
    "cmd",
    "nb",
    "eqref",
    "pageref",
    "nameref",
    "autoref",
    "label",
    "bibliography",
    "bibliographystyle",
    "bibstyle",
)

CITATION_LINK_TYPES: tuple[str, ...] = (
    "cite",
    "citep",
    "citet",
    "citeauthor",
    "citeyear",
    "Citep",
    "Citet",
    "citealp",
    "citealt",
    "citenum",
)

# =============================================================================
# Serializer Defaults
# =============================================================================

DEFAULT_BLANK_LINE_AFTER_KEYWORDS = True
DEFAULT_TRAILING_NEWLINE = True
TABLE_RULE_ROW = "|---|"
CHECKBOX_MARKERS: dict[str, str] = {"on": "[X]", "off": "[ ]", "trans": "[-]"}

# =============================================================================
# CLI
# =============================================================================

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7

CONFIG_FILENAMES = (".orgast.toml", ".orgast.yaml", ".orgast.yml", ".orgast.json")

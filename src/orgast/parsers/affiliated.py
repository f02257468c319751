#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgast/parsers/affiliated.py
"""Affiliated keywords.

A contiguous run of ``#+NAME:``, ``#+CAPTION:``, ``#+ATTR_<backend>:``,
``#+HEADER:``, ``#+RESULTS:`` or ``#+PLOT:`` lines directly above an element
describes that element. The keyword lines stay in the element list; the
collected values are attached to the following element's ``affiliated``
field.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Optional, Union

from orgast.ast.nodes import AffiliatedKeywords, Keyword
from orgast.constants import AFFILIATED_KEYWORD_NAMES

ATTR_KEYWORD_PATTERN = re.compile(r"^ATTR_(\w+)$", re.IGNORECASE)
ATTRIBUTE_KEY_PATTERN = re.compile(r":([a-zA-Z][\w-]*)")
CAPTION_LABEL_PATTERN = re.compile(r"\s+label:([a-zA-Z0-9_:-]+)\s*$")
CAPTION_SHORT_PATTERN = re.compile(r"^\[([^\]]*)\]\s*(.*)$")

NAME_KEYWORDS = frozenset({"NAME", "LABEL", "SRCNAME", "TBLNAME", "RESNAME"})


def is_affiliated_keyword(key: str) -> bool:
    """Return True when ``key`` names a keyword that attaches to the next element."""
    key = key.upper()
    return key in AFFILIATED_KEYWORD_NAMES or ATTR_KEYWORD_PATTERN.match(key) is not None


def parse_colon_attributes(text: str) -> dict[str, str]:
    """Parse ``:key value`` attribute pairs.

    Values run up to the next ``:key`` and may contain spaces. Keys without
    a value are dropped.

    Examples
    --------
    >>> parse_colon_attributes(":width 50% :placement [H]")
    {'width': '50%', 'placement': '[H]'}

    """
    matches = list(ATTRIBUTE_KEY_PATTERN.finditer(text))
    result: dict[str, str] = {}
    for index, match in enumerate(matches):
        end = matches[index + 1].start() if index + 1 < len(matches) else len(text)
        value = text[match.end() : end].strip()
        if value:
            result[match.group(1)] = value
    return result


def parse_caption(text: str) -> tuple[Union[str, tuple[str, str]], Optional[str]]:
    """Split a caption into its text and an optional trailing ``label:``.

    Returns
    -------
    tuple
        ``(caption, label)`` where ``caption`` is ``(short, long)`` for the
        ``[short]long`` form

    """
    label = None
    label_match = CAPTION_LABEL_PATTERN.search(text)
    if label_match:
        label = label_match.group(1)
        text = text[: label_match.start()].strip()

    short_match = CAPTION_SHORT_PATTERN.match(text)
    if short_match:
        return (short_match.group(1), short_match.group(2)), label
    return text, label


def build_affiliated(keywords: Sequence[Keyword]) -> Optional[AffiliatedKeywords]:
    """Collect the affiliated values of a run of keyword elements.

    For single-valued fields the first line of the run wins; ``HEADER``
    values keep document order and ``ATTR_*`` lines merge per backend.

    Parameters
    ----------
    keywords : sequence of Keyword
        The run of keyword elements, in document order

    Returns
    -------
    AffiliatedKeywords or None
        None when no keyword of the run is affiliated

    """
    affiliated = AffiliatedKeywords()
    found = False

    for keyword in reversed(keywords):
        key = keyword.key.upper()
        value = keyword.value
        attr_match = ATTR_KEYWORD_PATTERN.match(key)
        if attr_match:
            backend = attr_match.group(1).lower()
            affiliated.attr[backend] = {**parse_colon_attributes(value), **affiliated.attr.get(backend, {})}
        elif key == "CAPTION":
            caption, label = parse_caption(value)
            if keyword.option is not None:
                # #+CAPTION[short]: long
                caption = (keyword.option, caption if isinstance(caption, str) else caption[1])
            affiliated.caption = caption
            if label and not affiliated.name:
                affiliated.name = label
        elif key in NAME_KEYWORDS:
            affiliated.name = value
        elif key in ("RESULTS", "RESULT"):
            affiliated.results = value
        elif key in ("HEADER", "HEADERS"):
            affiliated.header.insert(0, value)
        elif key == "PLOT":
            affiliated.plot = value
        elif key not in AFFILIATED_KEYWORD_NAMES:
            continue
        found = True

    return affiliated if found else None

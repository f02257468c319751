#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgast/parsers/inline.py
r"""Inline object parser.

Turns a run of paragraph, title, cell or tag text into a sequence of inline
objects. The scanner jumps from one candidate start character to the next
and routes on that character to the object parsers that can begin with it;
everything in between becomes ``plain-text``.

Recognized objects:

- emphasis: ``*bold*``, ``/italic/``, ``_underline_``, ``+strike+``,
  ``=code=``, ``~verbatim~``
- links: ``[[path][description]]``, ``<https://...>``, ``https://...``,
  ``file:notes.org::*Heading``, ``cite:key``
- timestamps: ``<2024-01-15 Mon>``, ``[2024-01-15 Mon 10:00]`` and ranges
- entities (``\alpha``), LaTeX fragments (``$x$``, ``\(x\)``, ``\cmd{}``)
- ``a_{i}`` / ``a^2`` sub- and superscripts
- footnote references, statistics cookies, targets, radio targets
- ``\\`` line breaks, ``call_`` and ``src_`` calls, ``@@html:..@@``
  snippets and ``{{{macro}}}`` calls

Every object carries absolute document offsets: callers pass the offset of
the first character of ``text`` as ``base_offset``.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from typing import Optional

from orgast.ast.nodes import Range
from orgast.ast.objects import (
    Bold,
    Code,
    Entity,
    ExportSnippet,
    FootnoteReference,
    InlineBabelCall,
    InlineSrcBlock,
    Italic,
    LatexFragment,
    LineBreak,
    Link,
    Macro,
    OrgObject,
    PlainText,
    RadioTarget,
    StatisticsCookie,
    StrikeThrough,
    Subscript,
    Superscript,
    Target,
    Timestamp,
    Underline,
    Verbatim,
)
from orgast.constants import CITATION_LINK_TYPES, PLAIN_LINK_TYPES
from orgast.parsers.entities import get_entity
from orgast.parsers.timestamps import parse_timestamp

LATEX_COMMAND_PATTERN = re.compile(r"\\([a-zA-Z]+)(\{[^}]*\})?")
ENTITY_PATTERN = re.compile(r"\\(there4|sup[123]|frac[13][24]|[a-zA-Z]+)(\{\})?")
STATISTICS_COOKIE_PATTERN = re.compile(r"\[(\d*/\d*|\d*%)\]")
FOOTNOTE_REFERENCE_PATTERN = re.compile(r"\[fn:([^:\]]*)(?::([^\]]*))?\]")
TARGET_PATTERN = re.compile(r"<<([^<>\n]+)>>")
RADIO_TARGET_PATTERN = re.compile(r"<<<([^<>\n]+)>>>")
INLINE_SRC_PATTERN = re.compile(r"src_([a-zA-Z0-9-]+)(?:\[([^\]]*)\])?\{([^}]*)\}")
INLINE_BABEL_PATTERN = re.compile(r"call_([a-zA-Z0-9_-]+)(?:\[([^\]]*)\])?\(([^)]*)\)(?:\[([^\]]*)\])?")
EXPORT_SNIPPET_PATTERN = re.compile(r"@@([a-zA-Z0-9-]+):([^@]*)@@")
MACRO_PATTERN = re.compile(r"\{\{\{([a-zA-Z][a-zA-Z0-9_-]*)(?:\(([^)]*)\))?\}\}\}")
SUBSCRIPT_PATTERN = re.compile(r"_([a-zA-Z0-9]+)")
SUPERSCRIPT_PATTERN = re.compile(r"\^([a-zA-Z0-9]+)")
CITATION_LINK_PATTERN = re.compile(rf"({'|'.join(CITATION_LINK_TYPES)}):([\w&;,:-]+)")
PLAIN_LINK_PATTERN = re.compile(rf"({'|'.join(PLAIN_LINK_TYPES)}):([-\w&;,:./#?=%~]+)")
URL_LINK_PATTERN = re.compile(r"(https?)://([^\s\[\]<>]+)")
ANGLE_LINK_PATTERN = re.compile(rf"<((?:https?|{'|'.join(PLAIN_LINK_TYPES)}):[^<>\s\]][^<>\n\]]*)>")
LINK_PROTOCOL_PATTERN = re.compile(r"[a-z]+")
WORD_CHAR_PATTERN = re.compile(r"\w")
SUB_SUPER_PREFIX_PATTERN = re.compile(r"[a-zA-Z0-9)]")

PRE_EMPHASIS_CHARS = frozenset({" ", "\t", "\n", "-", "(", "{", "'", '"'})
POST_EMPHASIS_CHARS = frozenset(
    {" ", "\t", "\n", "-", ".", ",", ":", "!", "?", ";", "'", '"', ")", "}", "\\", "[", "]"}
)
EMPHASIS_TYPES = {
    "*": "bold",
    "/": "italic",
    "_": "underline",
    "+": "strike-through",
    "=": "code",
    "~": "verbatim",
}
_MARKUP_CLASSES: dict[str, Callable[..., OrgObject]] = {
    "bold": Bold,
    "italic": Italic,
    "underline": Underline,
    "strike-through": StrikeThrough,
}

_TRAILING_URL_PUNCTUATION = ".,;:!?)"

# (text, pos, base_offset) -> object or None
ObjectMethod = Callable[[str, int, int], Optional[OrgObject]]

ALL_OBJECT_TYPES = frozenset(
    {
        "bold",
        "code",
        "entity",
        "export-snippet",
        "footnote-reference",
        "inline-babel-call",
        "inline-src-block",
        "italic",
        "latex-fragment",
        "line-break",
        "link",
        "macro",
        "radio-target",
        "statistics-cookie",
        "strike-through",
        "subscript",
        "superscript",
        "target",
        "timestamp",
        "underline",
        "verbatim",
    }
)


class InlineObjectParser:
    """Character-routed scanner producing inline objects.

    Parameters
    ----------
    allowed_types : iterable of str, optional
        Object types to recognize; everything else stays plain text. None
        allows every type.
    parse_nested : bool, default True
        Parse objects inside markup, link descriptions, radio targets and
        braced sub/superscripts. When False those hold a single
        ``plain-text`` child.

    Examples
    --------
    >>> parser = InlineObjectParser()
    >>> [obj.type for obj in parser.parse("a *bold* move")]
    ['plain-text', 'bold', 'plain-text']

    """

    def __init__(self, allowed_types: Optional[Iterable[str]] = None, parse_nested: bool = True):
        self.allowed_types: Optional[frozenset[str]] = None
        if allowed_types is not None:
            self.allowed_types = frozenset(allowed_types)
            unknown = self.allowed_types - ALL_OBJECT_TYPES
            if unknown:
                raise ValueError(f"Unknown inline object types: {', '.join(sorted(unknown))}")
        self.parse_nested = parse_nested

        # start character -> (object type, parser method) tried in order
        routes: dict[str, list[tuple[str, ObjectMethod]]] = {
            "\\": [
                ("line-break", self._parse_line_break),
                ("latex-fragment", self._parse_latex_fragment),
                ("entity", self._parse_entity),
            ],
            "$": [("latex-fragment", self._parse_latex_fragment)],
            "[": [
                ("footnote-reference", self._parse_footnote_reference),
                ("link", self._parse_bracket_link),
                ("statistics-cookie", self._parse_statistics_cookie),
                ("timestamp", self._parse_timestamp),
            ],
            "<": [
                ("radio-target", self._parse_radio_target),
                ("target", self._parse_target),
                ("timestamp", self._parse_timestamp),
                ("link", self._parse_angle_link),
            ],
            "@": [("export-snippet", self._parse_export_snippet)],
            "{": [("macro", self._parse_macro)],
            "_": [("subscript", self._parse_subscript), ("underline", self._parse_emphasis)],
            "^": [("superscript", self._parse_superscript)],
        }
        for marker in ("*", "/", "+", "=", "~"):
            routes[marker] = [(EMPHASIS_TYPES[marker], self._parse_emphasis)]
        routes.setdefault("s", []).append(("inline-src-block", self._parse_inline_src_block))
        routes.setdefault("c", []).append(("inline-babel-call", self._parse_inline_babel_call))
        for link_type in CITATION_LINK_TYPES:
            self._add_link_route(routes, link_type[0], self._parse_citation_link)
        self._add_link_route(routes, "h", self._parse_url_link)
        for link_type in PLAIN_LINK_TYPES:
            self._add_link_route(routes, link_type[0], self._parse_plain_link)

        self._routes: dict[str, list[tuple[str, ObjectMethod]]] = {}
        for char, candidates in routes.items():
            allowed = [(object_type, method) for object_type, method in candidates if self._is_allowed(object_type)]
            if allowed:
                self._routes[char] = allowed
        self._start_chars: Optional[re.Pattern[str]] = None
        if self._routes:
            self._start_chars = re.compile("[" + re.escape("".join(sorted(self._routes))) + "]")

    @staticmethod
    def _add_link_route(routes: dict[str, list[tuple[str, ObjectMethod]]], char: str, method: ObjectMethod) -> None:
        candidates = routes.setdefault(char, [])
        if ("link", method) not in candidates:
            candidates.append(("link", method))

    def _is_allowed(self, object_type: str) -> bool:
        return self.allowed_types is None or object_type in self.allowed_types

    def parse(self, text: str, base_offset: int = 0) -> list[OrgObject]:
        """Parse ``text`` into inline objects.

        Parameters
        ----------
        text : str
            Text to scan; it is never modified
        base_offset : int, default 0
            Document offset of ``text[0]``

        Returns
        -------
        list of OrgObject
            Objects in source order; gaps are filled with ``plain-text``

        """
        objects: list[OrgObject] = []
        pos = 0
        plain_start = 0
        length = len(text)

        while pos < length and self._start_chars is not None:
            match = self._start_chars.search(text, pos)
            if match is None:
                break
            pos = match.start()
            parsed: Optional[OrgObject] = None
            for _, method in self._routes[text[pos]]:
                parsed = method(text, pos, base_offset)
                if parsed is not None:
                    break
            if parsed is None:
                pos += 1
                continue
            if plain_start < pos:
                objects.append(_plain_text(text[plain_start:pos], base_offset + plain_start))
            objects.append(parsed)
            pos = parsed.range.end - base_offset
            plain_start = pos

        if plain_start < length:
            objects.append(_plain_text(text[plain_start:], base_offset + plain_start))
        return objects

    def _nested(self, content: str, offset: int) -> list[OrgObject]:
        if self.parse_nested:
            return self.parse(content, offset)
        return [_plain_text(content, offset)] if content else []

    # ------------------------------------------------------------------
    # Backslash and dollar constructs
    # ------------------------------------------------------------------

    def _parse_line_break(self, text: str, pos: int, base: int) -> Optional[OrgObject]:
        if not text.startswith("\\\\", pos):
            return None
        after = text[pos + 2] if pos + 2 < len(text) else "\n"
        if after not in ("\n", " "):
            return None
        return LineBreak(range=Range(base + pos, base + pos + 2))

    def _parse_latex_fragment(self, text: str, pos: int, base: int) -> Optional[OrgObject]:
        if text.startswith("$$", pos):
            close = text.find("$$", pos + 2)
            if close > pos + 2:
                return _latex(text, pos, close + 2, base, "display-math")
            return None
        if text[pos] == "$":
            close = _find_closing_delimiter(text, pos + 1, "$")
            if close > pos + 1 and "\n" not in text[pos + 1 : close]:
                return _latex(text, pos, close + 1, base, "inline-math")
            return None
        if text.startswith("\\(", pos):
            close = text.find("\\)", pos + 2)
            return _latex(text, pos, close + 2, base, "inline-math") if close > pos + 2 else None
        if text.startswith("\\[", pos):
            close = text.find("\\]", pos + 2)
            return _latex(text, pos, close + 2, base, "display-math") if close > pos + 2 else None

        entity = ENTITY_PATTERN.match(text, pos)
        if entity and get_entity(entity.group(1)) is not None:
            return None
        match = LATEX_COMMAND_PATTERN.match(text, pos)
        if match:
            return _latex(text, pos, match.end(), base, "command")
        return None

    def _parse_entity(self, text: str, pos: int, base: int) -> Optional[OrgObject]:
        match = ENTITY_PATTERN.match(text, pos)
        if not match:
            return None
        entity = get_entity(match.group(1))
        if entity is None:
            return None
        return Entity(
            name=match.group(1),
            uses_brackets=match.group(2) == "{}",
            latex=entity.latex,
            html=entity.html,
            utf8=entity.utf8,
            range=Range(base + pos, base + match.end()),
        )

    # ------------------------------------------------------------------
    # Bracketed constructs
    # ------------------------------------------------------------------

    def _parse_footnote_reference(self, text: str, pos: int, base: int) -> Optional[OrgObject]:
        if not text.startswith("[fn:", pos):
            return None
        match = FOOTNOTE_REFERENCE_PATTERN.match(text, pos)
        if not match:
            return None
        label = match.group(1) or None
        definition = match.group(2)
        if label is None and definition is None:
            return None

        reference = FootnoteReference(label=label, range=Range(base + pos, base + match.end()))
        if definition is not None:
            reference.reference_type = "inline" if label else "anonymous"
            reference.children = self._nested(definition, base + match.start(2))
        return reference

    def _parse_bracket_link(self, text: str, pos: int, base: int) -> Optional[OrgObject]:
        if not text.startswith("[[", pos):
            return None
        link_end = _find_bracket_close(text, pos + 2)
        if link_end < 0 or link_end + 1 >= len(text):
            return None
        raw_link = text[pos + 2 : link_end]

        description: list[OrgObject] = []
        following = text[link_end + 1]
        if following == "]":
            full_end = link_end + 2
        elif following == "[":
            desc_start = link_end + 2
            desc_end = _find_bracket_close(text, desc_start)
            if desc_end < 0 or not text.startswith("]", desc_end + 1):
                return None
            description = self._nested(text[desc_start:desc_end], base + desc_start)
            full_end = desc_end + 2
        else:
            return None

        link_type, path, search_option = _classify_link(raw_link)
        return Link(
            link_type=link_type,
            path=path,
            format="bracket",
            raw_link=raw_link,
            search_option=search_option,
            children=description,
            range=Range(base + pos, base + full_end),
        )

    def _parse_statistics_cookie(self, text: str, pos: int, base: int) -> Optional[OrgObject]:
        match = STATISTICS_COOKIE_PATTERN.match(text, pos)
        if not match:
            return None
        return StatisticsCookie(value=match.group(0), range=Range(base + pos, base + match.end()))

    def _parse_timestamp(self, text: str, pos: int, base: int) -> Optional[OrgObject]:
        opener = text[pos]
        closer = ">" if opener == "<" else "]"
        end = _find_balanced(text, pos, opener, closer)
        if end < 0:
            return None

        if text.startswith("%%(", pos + 1) and opener == "<":
            return Timestamp(
                timestamp_type="diary",
                raw_value=text[pos:end],
                range=Range(base + pos, base + end),
            )

        if text.startswith("--" + opener, end):
            range_end = _find_balanced(text, end + 2, opener, closer)
            if range_end > 0:
                timestamp = parse_timestamp(text[pos:range_end], base + pos)
                if timestamp is not None:
                    return timestamp
        return parse_timestamp(text[pos:end], base + pos)

    def _parse_target(self, text: str, pos: int, base: int) -> Optional[OrgObject]:
        if not text.startswith("<<", pos) or text.startswith("<<<", pos):
            return None
        match = TARGET_PATTERN.match(text, pos)
        if not match:
            return None
        return Target(value=match.group(1), range=Range(base + pos, base + match.end()))

    def _parse_radio_target(self, text: str, pos: int, base: int) -> Optional[OrgObject]:
        match = RADIO_TARGET_PATTERN.match(text, pos)
        if not match:
            return None
        return RadioTarget(
            children=self._nested(match.group(1), base + pos + 3),
            range=Range(base + pos, base + match.end()),
        )

    def _parse_angle_link(self, text: str, pos: int, base: int) -> Optional[OrgObject]:
        match = ANGLE_LINK_PATTERN.match(text, pos)
        if not match:
            return None
        raw_link = match.group(1)
        link_type, path, search_option = _classify_link(raw_link)
        return Link(
            link_type=link_type,
            path=path,
            format="angle",
            raw_link=raw_link,
            search_option=search_option,
            range=Range(base + pos, base + match.end()),
        )

    def _parse_export_snippet(self, text: str, pos: int, base: int) -> Optional[OrgObject]:
        match = EXPORT_SNIPPET_PATTERN.match(text, pos)
        if not match:
            return None
        return ExportSnippet(
            backend=match.group(1),
            value=match.group(2),
            range=Range(base + pos, base + match.end()),
        )

    def _parse_macro(self, text: str, pos: int, base: int) -> Optional[OrgObject]:
        match = MACRO_PATTERN.match(text, pos)
        if not match:
            return None
        args = [arg.strip() for arg in match.group(2).split(",")] if match.group(2) else []
        return Macro(key=match.group(1), args=args, range=Range(base + pos, base + match.end()))

    # ------------------------------------------------------------------
    # Word-prefixed constructs
    # ------------------------------------------------------------------

    def _parse_inline_src_block(self, text: str, pos: int, base: int) -> Optional[OrgObject]:
        match = INLINE_SRC_PATTERN.match(text, pos)
        if not match:
            return None
        return InlineSrcBlock(
            language=match.group(1),
            parameters=match.group(2),
            value=match.group(3),
            range=Range(base + pos, base + match.end()),
        )

    def _parse_inline_babel_call(self, text: str, pos: int, base: int) -> Optional[OrgObject]:
        match = INLINE_BABEL_PATTERN.match(text, pos)
        if not match:
            return None
        return InlineBabelCall(
            call=match.group(1),
            inside_header=match.group(2),
            arguments=match.group(3),
            end_header=match.group(4),
            range=Range(base + pos, base + match.end()),
        )

    def _parse_citation_link(self, text: str, pos: int, base: int) -> Optional[OrgObject]:
        if _follows_word(text, pos):
            return None
        match = CITATION_LINK_PATTERN.match(text, pos)
        if not match:
            return None
        return Link(
            link_type=match.group(1).lower(),
            path=match.group(2),
            format="plain",
            raw_link=match.group(0),
            range=Range(base + pos, base + match.end()),
        )

    def _parse_plain_link(self, text: str, pos: int, base: int) -> Optional[OrgObject]:
        if _follows_word(text, pos):
            return None
        match = PLAIN_LINK_PATTERN.match(text, pos)
        if not match:
            return None
        link_type = match.group(1).lower()
        path = match.group(2)
        search_option = None
        if link_type == "file" and "::" in path:
            path, search_option = path.split("::", 1)
        return Link(
            link_type=link_type,
            path=path,
            format="plain",
            raw_link=match.group(0),
            search_option=search_option,
            range=Range(base + pos, base + match.end()),
        )

    def _parse_url_link(self, text: str, pos: int, base: int) -> Optional[OrgObject]:
        if _follows_word(text, pos):
            return None
        match = URL_LINK_PATTERN.match(text, pos)
        if not match:
            return None
        url = _trim_url(match.group(0))
        return Link(
            link_type=match.group(1).lower(),
            path=url,
            format="plain",
            raw_link=url,
            range=Range(base + pos, base + pos + len(url)),
        )

    # ------------------------------------------------------------------
    # Scripts and emphasis
    # ------------------------------------------------------------------

    def _parse_script(
        self, text: str, pos: int, base: int, pattern: re.Pattern[str], cls: Callable[..., OrgObject]
    ) -> Optional[OrgObject]:
        if pos == 0 or not SUB_SUPER_PREFIX_PATTERN.match(text[pos - 1]):
            return None
        if text.startswith("{", pos + 1):
            close = _find_balanced(text, pos + 1, "{", "}")
            if close < 0:
                return None
            return cls(
                uses_braces=True,
                children=self._nested(text[pos + 2 : close - 1], base + pos + 2),
                range=Range(base + pos, base + close),
            )
        match = pattern.match(text, pos)
        if not match:
            return None
        return cls(
            uses_braces=False,
            children=[_plain_text(match.group(1), base + pos + 1)],
            range=Range(base + pos, base + match.end()),
        )

    def _parse_subscript(self, text: str, pos: int, base: int) -> Optional[OrgObject]:
        return self._parse_script(text, pos, base, SUBSCRIPT_PATTERN, Subscript)

    def _parse_superscript(self, text: str, pos: int, base: int) -> Optional[OrgObject]:
        return self._parse_script(text, pos, base, SUPERSCRIPT_PATTERN, Superscript)

    def _parse_emphasis(self, text: str, pos: int, base: int) -> Optional[OrgObject]:
        marker = text[pos]
        if pos > 0 and text[pos - 1] not in PRE_EMPHASIS_CHARS:
            return None
        if pos + 1 >= len(text) or text[pos + 1].isspace():
            return None
        close = _find_emphasis_close(text, pos + 1, marker)
        if close < 0:
            return None
        if close + 1 < len(text) and text[close + 1] not in POST_EMPHASIS_CHARS:
            return None

        content = text[pos + 1 : close]
        obj_range = Range(base + pos, base + close + 1)
        object_type = EMPHASIS_TYPES[marker]
        if object_type == "code":
            return Code(value=content, range=obj_range)
        if object_type == "verbatim":
            return Verbatim(value=content, range=obj_range)
        return _MARKUP_CLASSES[object_type](children=self._nested(content, base + pos + 1), range=obj_range)


# ----------------------------------------------------------------------
# Helpers
# ----------------------------------------------------------------------


def _plain_text(value: str, start: int) -> PlainText:
    return PlainText(value=value, range=Range(start, start + len(value)))


def _latex(text: str, start: int, end: int, base: int, fragment_type: str) -> LatexFragment:
    return LatexFragment(
        value=text[start:end],
        fragment_type=fragment_type,  # type: ignore[arg-type]
        range=Range(base + start, base + end),
    )


def _follows_word(text: str, pos: int) -> bool:
    return pos > 0 and WORD_CHAR_PATTERN.match(text[pos - 1]) is not None


def _find_closing_delimiter(text: str, start: int, delimiter: str) -> int:
    pos = start
    while pos < len(text):
        char = text[pos]
        if char == delimiter:
            return pos
        if char == "\\":
            pos += 1
        pos += 1
    return -1


def _find_balanced(text: str, pos: int, opener: str, closer: str) -> int:
    """Return the index just past the closer matching ``text[pos]``, or -1."""
    depth = 0
    for index in range(pos, len(text)):
        char = text[index]
        if char == opener:
            depth += 1
        elif char == closer:
            depth -= 1
            if depth == 0:
                return index + 1
    return -1


def _find_bracket_close(text: str, start: int) -> int:
    """Return the index of the ``]`` closing a link part that begins at ``start``."""
    depth = 0
    for index in range(start, len(text)):
        char = text[index]
        if char == "[":
            depth += 1
        elif char == "]":
            if depth == 0:
                return index
            depth -= 1
    return -1


def _find_emphasis_close(text: str, start: int, marker: str) -> int:
    for index in range(start, len(text)):
        char = text[index]
        if char == "\n":
            return -1
        if char == marker and index > start and not text[index - 1].isspace():
            return index
    return -1


def _classify_link(raw_link: str) -> tuple[str, str, Optional[str]]:
    """Return ``(link_type, path, search_option)`` for a bracket or angle link target."""
    if raw_link.startswith(("http://", "https://")):
        return ("https" if raw_link.startswith("https://") else "http"), raw_link, None
    if raw_link.startswith("file:"):
        path = raw_link[5:]
        if "::" in path:
            path, search_option = path.split("::", 1)
            return "file", path, search_option
        return "file", path, None
    if raw_link.startswith("id:"):
        return "id", raw_link[3:], None
    if raw_link.startswith("#"):
        return "custom-id", raw_link[1:], None
    if raw_link.startswith("(") and raw_link.endswith(")"):
        return "coderef", raw_link[1:-1], None
    if ":" in raw_link:
        protocol, _, rest = raw_link.partition(":")
        if LINK_PROTOCOL_PATTERN.fullmatch(protocol):
            return protocol, rest, None
    return "fuzzy", raw_link, None


def _trim_url(url: str) -> str:
    while url and url[-1] in _TRAILING_URL_PUNCTUATION:
        if url[-1] == ")" and url.count("(") >= url.count(")"):
            break
        url = url[:-1]
    return url


def parse_objects(
    text: str,
    base_offset: int = 0,
    allowed_types: Optional[Iterable[str]] = None,
    parse_nested: bool = True,
) -> list[OrgObject]:
    """Parse ``text`` into inline objects with a one-off :class:`InlineObjectParser`."""
    return InlineObjectParser(allowed_types=allowed_types, parse_nested=parse_nested).parse(text, base_offset)

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgast/parsers/todo.py
"""In-buffer TODO workflow declarations.

``#+TODO: TODO NEXT | DONE CANCELLED`` declares active states before the
``|`` and done states after it. Without a ``|`` the last state is the done
state; a single state is active only. ``#+SEQ_TODO:`` and ``#+TYP_TODO:``
are read the same way, and several declarations combine in order.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional

TODO_KEYWORD_LINE_PATTERN = re.compile(r"^#\+(TODO|SEQ_TODO|TYP_TODO):\s*(.*)$", re.IGNORECASE)
FAST_ACCESS_KEY_PATTERN = re.compile(r"\([^)]*\)$")
HEADLINE_PATTERN = re.compile(r"^\*+\s")


@dataclass(frozen=True)
class TodoWorkflow:
    """Active and done states declared in a document."""

    active_states: tuple[str, ...] = ()
    done_states: tuple[str, ...] = ()

    @property
    def all_states(self) -> tuple[str, ...]:
        return self.active_states + self.done_states


def _states(text: str) -> list[str]:
    # "TODO(t)" and "DONE(d@/!)" carry fast-access keys
    return [FAST_ACCESS_KEY_PATTERN.sub("", word) for word in text.split() if FAST_ACCESS_KEY_PATTERN.sub("", word)]


def parse_todo_keyword_line(line: str) -> Optional[TodoWorkflow]:
    """Parse one ``#+TODO:`` style line, or return None if it declares nothing."""
    match = TODO_KEYWORD_LINE_PATTERN.match(line.strip())
    if not match:
        return None
    states = match.group(2).strip()
    if not states:
        return None

    if "|" in states:
        before, _, after = states.partition("|")
        active, done = _states(before), _states(after)
    else:
        words = _states(states)
        if len(words) <= 1:
            active, done = words, []
        else:
            active, done = words[:-1], words[-1:]

    if not active and not done:
        return None
    return TodoWorkflow(tuple(active), tuple(done))


def parse_todo_keywords(lines: Iterable[str]) -> Optional[TodoWorkflow]:
    """Combine the TODO declarations found before the first headline.

    Parameters
    ----------
    lines : iterable of str
        Document lines

    Returns
    -------
    TodoWorkflow or None
        Combined workflow with duplicates removed, or None when the document
        declares no states

    """
    active: dict[str, None] = {}
    done: dict[str, None] = {}
    for line in lines:
        if HEADLINE_PATTERN.match(line):
            break
        workflow = parse_todo_keyword_line(line)
        if workflow is None:
            continue
        active.update(dict.fromkeys(workflow.active_states))
        done.update(dict.fromkeys(workflow.done_states))

    if not active and not done:
        return None
    return TodoWorkflow(tuple(active), tuple(done))

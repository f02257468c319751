#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgast/parsers/lines.py
"""Line splitting and offset bookkeeping.

Every line is assumed to be followed by a newline, including the last one,
so ``offsets[i + 1] - 1`` is always the end of line ``i`` and the final
sentinel is one past the length of the text.
"""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence


def split_lines(text: str) -> list[str]:
    """Split text on ``\\n``; the empty string has no lines."""
    if not text:
        return []
    return text.split("\n")


def compute_line_offsets(lines: Sequence[str]) -> list[int]:
    """Return the start offset of every line plus a trailing sentinel.

    Parameters
    ----------
    lines : sequence of str
        Lines without their terminators

    Returns
    -------
    list of int
        ``len(lines) + 1`` offsets; ``offsets[0] == 0`` and
        ``offsets[-1] == sum(len(line) + 1 for line in lines)``

    """
    offsets = [0] * (len(lines) + 1)
    total = 0
    for index, line in enumerate(lines):
        total += len(line) + 1
        offsets[index + 1] = total
    return offsets


class LineIndex:
    """Lines of a document with their offsets and offset-to-line lookups.

    Parameters
    ----------
    lines : sequence of str
        Lines without terminators

    """

    def __init__(self, lines: Sequence[str]):
        self.lines = list(lines)
        self.offsets = compute_line_offsets(self.lines)

    @classmethod
    def from_text(cls, text: str) -> LineIndex:
        return cls(split_lines(text))

    def __len__(self) -> int:
        return len(self.lines)

    def line_start(self, line: int) -> int:
        return self.offsets[line]

    def line_end(self, line: int) -> int:
        """Offset of the newline that terminates ``line``."""
        return self.offsets[line + 1] - 1

    def line_of(self, offset: int) -> int:
        """Return the 0-based line containing ``offset``.

        Offsets before the start clamp to line 0 and offsets past the end
        clamp to the last line.
        """
        if not self.lines:
            return 0
        line = bisect_right(self.offsets, offset) - 1
        return max(0, min(line, len(self.lines) - 1))

    def locate(self, offset: int) -> tuple[int, int]:
        """Return the 0-based ``(line, column)`` of ``offset``."""
        line = self.line_of(offset)
        return line, max(0, offset - self.offsets[line])

    def offset_of(self, line: int, column: int) -> int:
        """Return the offset of a 0-based ``(line, column)`` pair."""
        if not self.lines:
            return 0
        line = max(0, min(line, len(self.lines) - 1))
        return self.offsets[line] + max(0, column)

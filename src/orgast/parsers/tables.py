#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgast/parsers/tables.py
"""Table sub-parser.

Org tables are runs of lines starting with ``|``. Rows starting with ``|-``
are rule rows; all other rows are split into cells on ``|``. A run that
contains ``+---+`` border lines is a ``table.el`` table and is kept as an
opaque ``value``.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from typing import Optional

from orgast.ast.nodes import Range, Table, TableRow
from orgast.ast.objects import OrgObject, TableCell

ObjectParser = Callable[[str, int], list[OrgObject]]

TABLE_LINE_PATTERN = re.compile(r"^\s*\|")
TABLE_EL_LINE_PATTERN = re.compile(r"^\s*\+[-+]+\+\s*$")
TABLE_CELLS_PATTERN = re.compile(r"^\|(.+)\|$")
ALIGNMENT_COOKIE_PATTERN = re.compile(r"^<([lcr])(\d*)>$")


def is_table_line(line: str) -> bool:
    """Return True for org table rows and ``table.el`` border lines."""
    return TABLE_LINE_PATTERN.match(line) is not None or TABLE_EL_LINE_PATTERN.match(line) is not None


def find_table_end(lines: Sequence[str], start: int) -> int:
    """Return the index one past the last table line starting at ``start``."""
    end = start
    while end < len(lines) and is_table_line(lines[end]):
        end += 1
    return end


def _parse_row(line: str, start: int, parse_objects: Optional[ObjectParser]) -> TableRow:
    stripped = line.strip()
    row_range = Range(start, start + len(line))
    if stripped.startswith("|-"):
        return TableRow(row_type="rule", range=row_range)

    row = TableRow(row_type="standard", range=row_range)
    match = TABLE_CELLS_PATTERN.match(stripped) if stripped.endswith("|") else None
    if match is None:
        # Rows without a closing bar still yield their cells
        if not stripped.startswith("|") or len(stripped) < 2:
            return row
        cells_text = stripped[1:]
    else:
        cells_text = match.group(1)

    cell_start = start + line.index("|") + 1
    for raw in cells_text.split("|"):
        value = raw.strip()
        cell = TableCell(value=value, range=Range(cell_start, cell_start + len(raw)))
        if parse_objects is not None and value:
            cell.children = parse_objects(value, cell_start + len(raw) - len(raw.lstrip()))
        row.children.append(cell)
        cell_start += len(raw) + 1
    return row


def parse_table(
    lines: Sequence[str],
    starts: Sequence[int],
    parse_objects: Optional[ObjectParser] = None,
) -> Table:
    """Parse a run of table lines.

    Parameters
    ----------
    lines : sequence of str
        The table lines
    starts : sequence of int
        Document offset of each line
    parse_objects : callable, optional
        ``(text, base_offset) -> objects`` used for cell contents

    Returns
    -------
    Table
        An ``org`` table with row children, or a ``table.el`` table with
        the verbatim text in ``value`` and no rows

    """
    table_range = Range(starts[0], starts[-1] + len(lines[-1]))
    if any(TABLE_EL_LINE_PATTERN.match(line) for line in lines):
        return Table(table_type="table.el", value="\n".join(lines), range=table_range)

    rows = [_parse_row(line, start, parse_objects) for line, start in zip(lines, starts)]
    indentation = len(lines[0]) - len(lines[0].lstrip())
    return Table(table_type="org", children=rows, indentation=indentation, range=table_range)


def get_table_alignments(table: Table) -> list[Optional[str]]:
    """Return the alignment cookie letter (``l``, ``c``, ``r``) of each column.

    Columns without a cookie map to None. Later cookies override earlier ones.
    """
    alignments: list[Optional[str]] = []
    for row in table.children:
        if row.row_type != "standard":
            continue
        for index, cell in enumerate(row.children):
            if not cell.value.startswith("<"):
                continue
            match = ALIGNMENT_COOKIE_PATTERN.match(cell.value)
            if match:
                while len(alignments) <= index:
                    alignments.append(None)
                alignments[index] = match.group(1)
    return alignments

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgast/parsers/timestamps.py
"""Parsing and formatting of org timestamps.

Supported forms::

    <2024-01-15 Mon>                   active date
    [2024-01-15 Mon 10:30]             inactive date and time
    <2024-01-15 Mon 10:00-12:00>       same-day time span
    <2024-01-15 Mon .+1w -2d>          repeater and warning
    <2024-01-15 Mon>--<2024-01-17 Wed> date range
"""

from __future__ import annotations

import datetime
import re
from typing import Optional, cast

from orgast.ast.nodes import Range
from orgast.ast.objects import Timestamp
from orgast.constants import RepeaterType, TimeUnit, WarningType

TIMESTAMP_INNER_PATTERN = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})"
    r"(?:\s+[^\s\d+\-.>\]][^\s>\]]*)?"
    r"(?:\s+(\d{1,2}):(\d{2})(?:-(\d{1,2}):(\d{2}))?)?"
    r"(?:\s+([.+]?\+\d+[hdwmy]))?"
    r"(?:\s+(-{1,2}\d+[hdwmy]))?\s*$"
)
TIMESTAMP_RANGE_PATTERN = re.compile(r"^([<\[][^<>\[\]]+[>\]])--([<\[][^<>\[\]]+[>\]])$")
REPEATER_PATTERN = re.compile(r"^([.+]?\+)(\d+)([hdwmy])$")
WARNING_PATTERN = re.compile(r"^(-{1,2})(\d+)([hdwmy])$")

DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def parse_repeater(text: str) -> Optional[tuple[RepeaterType, int, TimeUnit]]:
    """Parse ``+1w``, ``++2d`` or ``.+1m`` into ``(type, value, unit)``."""
    match = REPEATER_PATTERN.match(text)
    if not match:
        return None
    return cast(RepeaterType, match.group(1)), int(match.group(2)), cast(TimeUnit, match.group(3))


def parse_warning(text: str) -> Optional[tuple[WarningType, int, TimeUnit]]:
    """Parse ``-3d`` or ``--1w`` into ``(type, value, unit)``."""
    match = WARNING_PATTERN.match(text)
    if not match:
        return None
    return cast(WarningType, match.group(1)), int(match.group(2)), cast(TimeUnit, match.group(3))


def _parse_single(token: str, offset: int) -> Optional[Timestamp]:
    if len(token) < 3:
        return None
    opener, closer = token[0], token[-1]
    if (opener, closer) not in (("<", ">"), ("[", "]")):
        return None

    match = TIMESTAMP_INNER_PATTERN.match(token[1:-1])
    if not match:
        return None

    year, month, day, hour_start, minute_start, hour_end, minute_end, repeater, warning = match.groups()
    ts = Timestamp(
        timestamp_type="active" if opener == "<" else "inactive",
        raw_value=token,
        year_start=int(year),
        month_start=int(month),
        day_start=int(day),
        range=Range(offset, offset + len(token)),
    )
    if hour_start is not None:
        ts.hour_start = int(hour_start)
        ts.minute_start = int(minute_start)
    if hour_end is not None:
        ts.hour_end = int(hour_end)
        ts.minute_end = int(minute_end)
    if repeater:
        parsed_repeater = parse_repeater(repeater)
        if parsed_repeater:
            ts.repeater_type, ts.repeater_value, ts.repeater_unit = parsed_repeater
    if warning:
        parsed_warning = parse_warning(warning)
        if parsed_warning:
            ts.warning_type, ts.warning_value, ts.warning_unit = parsed_warning
    return ts


def parse_timestamp(token: str, offset: int = 0) -> Optional[Timestamp]:
    """Parse a timestamp token into a :class:`Timestamp`.

    Parameters
    ----------
    token : str
        The literal including its angle or square brackets. A
        ``<start>--<end>`` range is accepted as well.
    offset : int, default 0
        Document offset of the first character of ``token``

    Returns
    -------
    Timestamp or None
        None when the token has no recognizable date

    """
    token = token.strip()
    range_match = TIMESTAMP_RANGE_PATTERN.match(token)
    if range_match:
        start = _parse_single(range_match.group(1), offset)
        end = _parse_single(range_match.group(2), offset + range_match.start(2))
        if start is None or end is None or start.timestamp_type != end.timestamp_type:
            return None
        start.timestamp_type = "active-range" if start.timestamp_type == "active" else "inactive-range"
        start.raw_value = token
        start.range = Range(offset, offset + len(token))
        start.year_end, start.month_end, start.day_end = end.year_start, end.month_start, end.day_start
        if end.hour_start is not None:
            start.hour_end, start.minute_end = end.hour_start, end.minute_start
        return start
    return _parse_single(token, offset)


def _format_point(year: int, month: int, day: int, hour: Optional[int], minute: Optional[int]) -> str:
    try:
        day_name = DAY_NAMES[datetime.date(year, month, day).weekday()]
        text = f"{year:04d}-{month:02d}-{day:02d} {day_name}"
    except ValueError:
        text = f"{year:04d}-{month:02d}-{day:02d}"
    if hour is not None:
        text += f" {hour:02d}:{(minute or 0):02d}"
    return text


def _format_suffix(ts: Timestamp) -> str:
    suffix = ""
    if ts.repeater_type and ts.repeater_value is not None and ts.repeater_unit:
        suffix += f" {ts.repeater_type}{ts.repeater_value}{ts.repeater_unit}"
    if ts.warning_type and ts.warning_value is not None and ts.warning_unit:
        suffix += f" {ts.warning_type}{ts.warning_value}{ts.warning_unit}"
    return suffix


def format_timestamp(ts: Timestamp, prefer_raw: bool = True) -> str:
    """Render a timestamp back to org syntax.

    Parameters
    ----------
    ts : Timestamp
        Timestamp to render
    prefer_raw : bool, default True
        Return ``raw_value`` unchanged when it is set

    Returns
    -------
    str
        The timestamp literal, e.g. ``<2024-01-15 Mon 10:00 +1w>``

    """
    if prefer_raw and ts.raw_value:
        return ts.raw_value

    opener, closer = ("<", ">") if ts.timestamp_type in ("active", "active-range", "diary") else ("[", "]")
    start = _format_point(ts.year_start, ts.month_start, ts.day_start, ts.hour_start, ts.minute_start)

    if ts.year_end is not None and ts.month_end is not None and ts.day_end is not None:
        end = _format_point(ts.year_end, ts.month_end, ts.day_end, ts.hour_end, ts.minute_end)
        suffix = _format_suffix(ts)
        return f"{opener}{start}{suffix}{closer}--{opener}{end}{suffix}{closer}"

    if ts.hour_end is not None:
        start += f"-{ts.hour_end:02d}:{(ts.minute_end or 0):02d}"
    return f"{opener}{start}{_format_suffix(ts)}{closer}"

# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Time-offset primitives for absolute range values.

Purpose:
    Attach, convert and normalize the per-boundary offsets (minutes east of
    UTC) that a date-range control applies to absolute values.

    * :func:`set_time_offset` stamps a zone suffix on boundaries that have a
      time but no zone (the value leaving the control).
    * :func:`shift_time_offset` converts zoned boundaries into wall-clock time
      at the control's offset (the value entering the control).
    * :func:`normalize_time_offset` turns the host's offset configuration into
      a coupled :class:`TimeOffset`.

Layer:
    domain/services

Notes:
    - Pure domain logic:
        * No logging.
        * Relative values, ``None`` and cleared absolute values pass through.
        * An unknown offset leaves a boundary untouched, so both operations are
          no-ops for :meth:`TimeOffset.unknown`.
    - Boundaries that do not parse are returned unchanged; nothing here raises.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime, timedelta, timezone

from arche_daterange.domain.entities.range_value import (
    AbsoluteValue,
    RangeValue,
    TimeOffset,
)
from arche_daterange.domain.services.date_time import (
    has_time_zone,
    parse_date,
    split_date_time,
)

__all__ = [
    "GetTimeOffset",
    "format_time_offset_iso",
    "normalize_time_offset",
    "set_time_offset",
    "shift_time_offset",
]

GetTimeOffset = Callable[[date], int | None]
"""Callback returning the offset, in minutes, in effect on a given date."""


def format_time_offset_iso(minutes: int) -> str:
    """Render an offset in minutes as an ISO 8601 zone designator.

    Args:
        minutes: Offset east of UTC.

    Returns:
        ``"Z"`` for UTC, otherwise ``"+HH:MM"`` / ``"-HH:MM"``.
    """
    if minutes == 0:
        return "Z"
    sign = "-" if minutes < 0 else "+"
    hours, mins = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}:{mins:02d}"


def _stamp_boundary(boundary: str, minutes: int | None) -> str:
    if minutes is None or not split_date_time(boundary).time or has_time_zone(boundary):
        return boundary
    return f"{boundary}{format_time_offset_iso(minutes)}"


def _shift_boundary(boundary: str, minutes: int | None) -> str:
    if minutes is None or not has_time_zone(boundary):
        return boundary
    try:
        instant = datetime.fromisoformat(boundary)
    except ValueError:
        return boundary
    target = timezone(timedelta(minutes=minutes))
    shifted = instant.astimezone(target).replace(tzinfo=None)
    return shifted.isoformat(timespec=_timespec_for(shifted.microsecond))


def _timespec_for(microsecond: int) -> str:
    # Keep sub-second precision only when the boundary carried some.
    if microsecond == 0:
        return "seconds"
    if microsecond % 1000 == 0:
        return "milliseconds"
    return "microseconds"


def set_time_offset(value: RangeValue | None, time_offset: TimeOffset) -> RangeValue | None:
    """Attach the control's offset to boundaries lacking zone information.

    A boundary is stamped only when its offset is known, it has a time
    component and it carries no zone yet, so applying the function twice is
    the same as applying it once.

    Args:
        value: Value to stamp.
        time_offset: Per-boundary offsets.

    Returns:
        A new absolute value with zoned boundaries, or ``value`` itself when
        nothing applies.
    """
    match value:
        case AbsoluteValue() if not value.is_cleared:
            return AbsoluteValue(
                start_date=_stamp_boundary(value.start_date, time_offset.start_date),
                end_date=_stamp_boundary(value.end_date, time_offset.end_date),
            )
        case _:
            return value


def shift_time_offset(value: RangeValue | None, time_offset: TimeOffset) -> RangeValue | None:
    """Express zoned boundaries as wall-clock time at the control's offset.

    ``2024-01-01T10:00:00Z`` shifted by ``+120`` minutes becomes
    ``2024-01-01T12:00:00``. Boundaries without a zone are assumed to be in the
    control's offset already and are left alone. Sub-second precision is kept
    when the boundary has any.

    Args:
        value: Value to shift.
        time_offset: Per-boundary target offsets.

    Returns:
        A new absolute value with zone-less boundaries, or ``value`` itself
        when nothing applies.
    """
    match value:
        case AbsoluteValue() if not value.is_cleared:
            return AbsoluteValue(
                start_date=_shift_boundary(value.start_date, time_offset.start_date),
                end_date=_shift_boundary(value.end_date, time_offset.end_date),
            )
        case _:
            return value


def normalize_time_offset(
    value: RangeValue | None,
    *,
    time_offset: int | None = None,
    get_time_offset: GetTimeOffset | None = None,
) -> TimeOffset:
    """Resolve the host's offset configuration into a coupled :class:`TimeOffset`.

    ``get_time_offset`` takes precedence over the scalar ``time_offset`` and is
    asked once per boundary with that boundary's calendar date, which lets a
    caller honour daylight-saving changes inside the range.

    Args:
        value: Current value. Only absolute values receive an offset.
        time_offset: Offset in minutes applied to both boundaries.
        get_time_offset: Per-date offset callback.

    Returns:
        Known offsets for both boundaries, or :meth:`TimeOffset.unknown` when
        the value is not absolute, no configuration is given, a boundary date
        does not parse, or the callback has no answer for either boundary.
    """
    if not isinstance(value, AbsoluteValue):
        return TimeOffset.unknown()

    if get_time_offset is not None:
        start = parse_date(value.start_date)
        end = parse_date(value.end_date)
        if start is None or end is None:
            return TimeOffset.unknown()
        start_offset = get_time_offset(start)
        end_offset = get_time_offset(end)
        if start_offset is None or end_offset is None:
            return TimeOffset.unknown()
        return TimeOffset(start_date=start_offset, end_date=end_offset)

    if time_offset is not None:
        return TimeOffset.uniform(time_offset)

    return TimeOffset.unknown()

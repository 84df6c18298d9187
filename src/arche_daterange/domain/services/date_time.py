# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""ISO date/time string primitives.

Purpose:
    Split, join and normalize the ISO 8601 strings that travel through a
    date-range control, and answer small shape questions about them
    ("is this a bare date?", "does this carry a zone?").

Layer:
    domain/services

Notes:
    - Pure domain logic:
        * No logging.
        * No validation: malformed input is returned in whatever shape the
          string operations leave it; nothing here raises.
    - The date/time separator is always the literal ``"T"``.
"""

from __future__ import annotations

import re
from datetime import date

from arche_daterange.domain.entities.range_value import PendingBoundary

__all__ = [
    "DATE_TIME_SEPARATOR",
    "has_time_zone",
    "is_iso_date_only",
    "join_date_time",
    "normalize_time_string",
    "parse_date",
    "split_date_time",
]

DATE_TIME_SEPARATOR = "T"

_ISO_DATE_ONLY_RE = re.compile(r"\d{4}-\d{2}-\d{2}")
# Zone designator at the end of a time string: "Z", "+02", "+0200" or "+02:00".
_ZONE_SUFFIX_RE = re.compile(r"(?:Z|[+-]\d{2}(?::?\d{2})?)$")


def split_date_time(value: str) -> PendingBoundary:
    """Split an ISO date-time string into its date and time parts.

    Args:
        value: ISO date or date-time string. The empty string is allowed.

    Returns:
        Pending boundary holding the text before and after the first ``"T"``.
        Missing parts are empty strings, so ``""`` splits into ``("", "")``
        and a bare date keeps an empty time.
    """
    date_part, _, time_part = value.partition(DATE_TIME_SEPARATOR)
    return PendingBoundary(date=date_part, time=time_part)


def join_date_time(date_part: str, time_part: str) -> str:
    """Combine a date and a time into an ISO date-time string.

    Args:
        date_part: ISO date, e.g. ``2024-01-01``.
        time_part: Time of day, e.g. ``10:00:00``.

    Returns:
        ``"{date}T{time}"``, or ``""`` when ``date_part`` is empty so that an
        unset date never produces a dangling time.
    """
    if not date_part:
        return ""
    return f"{date_part}{DATE_TIME_SEPARATOR}{time_part}"


def normalize_time_string(time_part: str) -> str:
    """Pad a time of day to ``HH:MM:SS``.

    Missing minutes or seconds become ``00`` and single-digit components are
    zero-padded. A trailing zone designator is preserved.

    Examples:
        >>> normalize_time_string("10")
        '10:00:00'
        >>> normalize_time_string("9:5")
        '09:05:00'
        >>> normalize_time_string("10:30+02:00")
        '10:30:00+02:00'

    Args:
        time_part: Time as typed by the user or split from a boundary.

    Returns:
        Normalized time string.
    """
    zone_match = _ZONE_SUFFIX_RE.search(time_part)
    zone = zone_match.group(0) if zone_match else ""
    clock = time_part[: len(time_part) - len(zone)]

    parts = clock.split(":") if clock else []
    parts += [""] * (3 - len(parts))
    hours, minutes, seconds = (p.zfill(2) if p else "00" for p in parts[:3])
    return f"{hours}:{minutes}:{seconds}{zone}"


def is_iso_date_only(value: str) -> bool:
    """Return True for a bare ``YYYY-MM-DD`` date without a time part."""
    return _ISO_DATE_ONLY_RE.fullmatch(value) is not None


def has_time_zone(value: str) -> bool:
    """Return True when a date-time's time part ends in a zone designator.

    Only the part after ``"T"`` is inspected, so the hyphens of a bare date are
    never mistaken for a negative offset.
    """
    _, sep, time_part = value.partition(DATE_TIME_SEPARATOR)
    return bool(sep) and _ZONE_SUFFIX_RE.search(time_part) is not None


def parse_date(value: str) -> date | None:
    """Parse the date portion of an ISO date or date-time string.

    Args:
        value: ISO date or date-time string.

    Returns:
        The calendar date, or ``None`` when the date portion does not parse.
    """
    date_part = split_date_time(value).date
    try:
        return date.fromisoformat(date_part)
    except ValueError:
        return None

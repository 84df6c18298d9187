# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Date-range picker enumerations.

Purpose:
    Provide the small closed vocabularies used by range values and the picker
    configuration: value kinds, selector modes and relative time units.

Layer:
    domain

Notes:
    - Values are the exact string tokens used by the host control so they can
      be carried over JSON without translation.
"""

from __future__ import annotations

from enum import Enum


class RangeValueType(str, Enum):
    """Kind of a range value (the tag of the value union)."""

    ABSOLUTE = "absolute"
    RELATIVE = "relative"


class RangeSelectorMode(str, Enum):
    """Which range selectors the picker offers."""

    DEFAULT = "default"
    ABSOLUTE_ONLY = "absolute-only"
    RELATIVE_ONLY = "relative-only"


class TimeUnit(str, Enum):
    """Units a relative range can be expressed in."""

    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


__all__ = ["RangeSelectorMode", "RangeValueType", "TimeUnit"]

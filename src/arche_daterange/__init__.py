# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Normalization and conversion core for date-range picker values."""

from __future__ import annotations

from arche_daterange.domain.entities.range_value import (
    AbsoluteValue,
    PendingAbsoluteValue,
    PendingBoundary,
    RangeValue,
    RelativeOption,
    RelativeValue,
    TimeOffset,
)
from arche_daterange.domain.enums.range_picker import RangeSelectorMode, RangeValueType, TimeUnit
from arche_daterange.domain.services.range_value_format import (
    format_initial_value,
    format_value,
    get_default_mode,
    join_absolute_value,
    split_absolute_value,
)

__version__ = "0.1.0"

__all__ = [
    "AbsoluteValue",
    "PendingAbsoluteValue",
    "PendingBoundary",
    "RangeSelectorMode",
    "RangeValue",
    "RangeValueType",
    "RelativeOption",
    "RelativeValue",
    "TimeOffset",
    "TimeUnit",
    "format_initial_value",
    "format_value",
    "get_default_mode",
    "join_absolute_value",
    "split_absolute_value",
]

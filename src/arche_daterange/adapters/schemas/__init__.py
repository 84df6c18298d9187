# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Range Schemas package (Adapters Layer).

Purpose:
    Public, host-facing schema surface for date-range values.

    This module re-exports the resource schemas and the parse/dump helpers. It
    intentionally does NOT expose BaseRangeSchema to keep the base class
    internal to this package.

Layer:
    adapters/schemas
"""

from __future__ import annotations

from arche_daterange.adapters.schemas.range_value import (
    AbsoluteValueSchema,
    PendingAbsoluteValueSchema,
    RelativeOptionSchema,
    RelativeValueSchema,
    TimeOffsetSchema,
    dump_pending_value,
    dump_range_value,
    parse_pending_value,
    parse_range_value,
    parse_relative_options,
    parse_time_offset,
)

__all__ = [
    # Schemas
    "AbsoluteValueSchema",
    "RelativeValueSchema",
    "RelativeOptionSchema",
    "PendingAbsoluteValueSchema",
    "TimeOffsetSchema",
    # Helpers
    "parse_range_value",
    "dump_range_value",
    "parse_relative_options",
    "parse_pending_value",
    "dump_pending_value",
    "parse_time_offset",
]

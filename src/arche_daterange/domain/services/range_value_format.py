# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Normalization policy for date-range picker values.

Purpose:
    Decide, for each combination of value kind, date-only mode, presence of a
    time component and emptiness, which transformation a range value goes
    through when it is displayed, initialized or edited:

    * :func:`format_value` - value to show/store for the current configuration.
    * :func:`get_default_mode` - whether the picker opens on the absolute or
      relative selector.
    * :func:`split_absolute_value` / :func:`join_absolute_value` - convert
      between the canonical absolute value and the editable pending split.
    * :func:`format_initial_value` - first-load reconciliation of a persisted
      value with the current configuration.

Layer:
    domain/services

Notes:
    - Pure domain logic:
        * No logging.
        * No validation; string handling is delegated to
          :mod:`arche_daterange.domain.services.date_time` and offsets to
          :mod:`arche_daterange.domain.services.time_offset`.
    - Relative values are never touched by date-only or offset logic.
    - A cleared absolute value (both boundaries empty) is returned as is by
      every formatter.
"""

from __future__ import annotations

from collections.abc import Sequence

from arche_daterange.domain.entities.range_value import (
    AbsoluteValue,
    PendingAbsoluteValue,
    RangeValue,
    RelativeOption,
    RelativeValue,
    TimeOffset,
)
from arche_daterange.domain.enums.range_picker import RangeSelectorMode, RangeValueType
from arche_daterange.domain.services.date_time import (
    is_iso_date_only,
    join_date_time,
    normalize_time_string,
    split_date_time,
)
from arche_daterange.domain.services.time_offset import set_time_offset, shift_time_offset

__all__ = [
    "DEFAULT_END_TIME",
    "DEFAULT_START_TIME",
    "format_initial_value",
    "format_value",
    "get_default_mode",
    "join_absolute_value",
    "split_absolute_value",
]

# An unset time on a boundary expands the range to cover the whole day.
DEFAULT_START_TIME = "00:00:00"
DEFAULT_END_TIME = "23:59:59"


def _to_date_only(value: AbsoluteValue) -> AbsoluteValue:
    return AbsoluteValue(
        start_date=split_date_time(value.start_date).date,
        end_date=split_date_time(value.end_date).date,
    )


def format_value(
    value: RangeValue | None,
    *,
    time_offset: TimeOffset,
    date_only: bool,
) -> RangeValue | None:
    """Produce the value to show or store for the current configuration.

    Decision table (first match wins):

    ==========================  ==========================================
    value                       result
    ==========================  ==========================================
    ``None`` / relative         unchanged
    absolute, cleared           unchanged
    absolute, ``date_only``     each boundary truncated to its date part
    absolute                    :func:`set_time_offset` with ``time_offset``
    ==========================  ==========================================

    Date-only mode wins over the offset: an offset means nothing without a
    time of day.

    Args:
        value: Current value.
        time_offset: Per-boundary offsets to apply.
        date_only: Whether the picker discards time-of-day components.

    Returns:
        The formatted value.
    """
    match value:
        case None | RelativeValue():
            return value
        case AbsoluteValue() if value.is_cleared:
            return value
        case AbsoluteValue() if date_only:
            return _to_date_only(value)
        case AbsoluteValue():
            return set_time_offset(value, time_offset)


def get_default_mode(
    value: RangeValue | None,
    relative_options: Sequence[RelativeOption],
    range_selector_mode: RangeSelectorMode,
) -> RangeValueType:
    """Decide whether the picker operates in absolute or relative mode.

    An existing value's kind always wins over configuration; only without a
    value does the selector mode (and, in default mode, the availability of
    relative options) decide.

    Args:
        value: Current value, if any.
        relative_options: Relative ranges the picker offers.
        range_selector_mode: Configured selector mode.

    Returns:
        The mode to open the picker in.
    """
    if value is not None:
        return value.type
    if range_selector_mode is RangeSelectorMode.RELATIVE_ONLY:
        return RangeValueType.RELATIVE
    if range_selector_mode is RangeSelectorMode.ABSOLUTE_ONLY:
        return RangeValueType.ABSOLUTE
    return RangeValueType.RELATIVE if len(relative_options) > 0 else RangeValueType.ABSOLUTE


def split_absolute_value(value: AbsoluteValue | None) -> PendingAbsoluteValue:
    """Decompose an absolute value into editable (date, time) pairs.

    Args:
        value: Absolute value, or ``None`` for no selection.

    Returns:
        Pending value; all parts are empty when ``value`` is ``None``.
    """
    if value is None:
        return PendingAbsoluteValue.empty()
    return PendingAbsoluteValue(
        start=split_date_time(value.start_date),
        end=split_date_time(value.end_date),
    )


def join_absolute_value(pending: PendingAbsoluteValue) -> AbsoluteValue:
    """Recompose a pending value into a canonical absolute value.

    A missing start time defaults to start-of-day and a missing end time to
    end-of-day. Times are normalized to ``HH:MM:SS`` before joining, and an
    empty date yields an empty boundary.

    Args:
        pending: Pending value being edited.

    Returns:
        Absolute value built from ``pending``.
    """
    start_time = normalize_time_string(pending.start.time or DEFAULT_START_TIME)
    end_time = normalize_time_string(pending.end.time or DEFAULT_END_TIME)
    return AbsoluteValue(
        start_date=join_date_time(pending.start.date, start_time),
        end_date=join_date_time(pending.end.date, end_time),
    )


def format_initial_value(
    value: RangeValue | None,
    date_only: bool,
    normalized_time_offset: TimeOffset,
) -> RangeValue | None:
    """Reconcile a persisted or incoming value with the current configuration.

    Used once when the picker is initialized. Checks for values that are
    already canonical for the current mode run before any offset shifting:

    1. Not absolute (``None`` or relative): :func:`shift_time_offset`, which
       passes such values through.
    2. Cleared absolute value: unchanged.
    3. ``date_only``: :func:`format_value`, which truncates to dates.
    4. Both boundaries already bare dates: unchanged.
    5. Otherwise: :func:`shift_time_offset`.

    Args:
        value: Incoming value.
        date_only: Whether the picker discards time-of-day components.
        normalized_time_offset: Coupled per-boundary offsets.

    Returns:
        The initial value for the picker.
    """
    match value:
        case AbsoluteValue() if value.is_cleared:
            return value
        case AbsoluteValue() if date_only:
            return format_value(value, date_only=date_only, time_offset=normalized_time_offset)
        case AbsoluteValue() if is_iso_date_only(value.start_date) and is_iso_date_only(
            value.end_date
        ):
            return value
        case _:
            return shift_time_offset(value, normalized_time_offset)

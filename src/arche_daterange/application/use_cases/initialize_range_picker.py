# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Use Case: Initialize Range Picker.

Purpose:
    Reconcile an incoming (persisted or host-supplied) range value with the
    picker configuration when the picker is first shown: resolve the time
    offset, normalize the value, pick the opening mode and pre-fill the
    editable pending split.

Layer:
    application/use_cases
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from arche_daterange.config.settings import Settings
from arche_daterange.domain.entities.range_value import (
    AbsoluteValue,
    PendingAbsoluteValue,
    RangeValue,
    RelativeOption,
)
from arche_daterange.domain.enums.range_picker import RangeValueType
from arche_daterange.domain.services.range_value_format import (
    format_initial_value,
    get_default_mode,
    split_absolute_value,
)
from arche_daterange.domain.services.time_offset import GetTimeOffset, normalize_time_offset

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RangePickerState:
    """Initial picker state.

    Attributes:
        value: Normalized value to display, or ``None`` for no selection.
        mode: Selector the picker opens on.
        pending: Editable split of ``value`` when it is absolute, otherwise
            the empty pending value.
    """

    value: RangeValue | None
    mode: RangeValueType
    pending: PendingAbsoluteValue


class InitializeRangePicker:
    """Use case computing the initial state of a date-range picker.

    Args:
        settings: Picker configuration (date-only mode, selector mode and the
            default scalar time offset).
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize the use case.

        Args:
            settings: Picker configuration.
        """
        self._settings = settings

    def execute(
        self,
        value: RangeValue | None,
        relative_options: Sequence[RelativeOption] = (),
        *,
        time_offset: int | None = None,
        get_time_offset: GetTimeOffset | None = None,
    ) -> RangePickerState:
        """Compute the initial picker state for ``value``.

        Args:
            value: Incoming value, or ``None`` when nothing is selected.
            relative_options: Relative ranges offered by the picker.
            time_offset: Scalar offset in minutes; defaults to
                ``Settings.time_offset``.
            get_time_offset: Per-date offset callback; wins over ``time_offset``.

        Returns:
            RangePickerState: Normalized value, opening mode and pending split.
        """
        scalar_offset = time_offset if time_offset is not None else self._settings.time_offset
        offset = normalize_time_offset(
            value, time_offset=scalar_offset, get_time_offset=get_time_offset
        )
        initial = format_initial_value(value, self._settings.date_only, offset)
        mode = get_default_mode(initial, relative_options, self._settings.range_selector_mode)
        pending = split_absolute_value(initial if isinstance(initial, AbsoluteValue) else None)

        logger.debug(
            "daterange.initialize.resolved",
            extra={
                "value_type": initial.type.value if initial is not None else None,
                "picker_mode": mode.value,
                "date_only": self._settings.date_only,
                "offset_known": offset.is_known,
                "changed": initial != value,
            },
        )
        return RangePickerState(value=initial, mode=mode, pending=pending)

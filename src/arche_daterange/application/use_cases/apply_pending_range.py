# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Use Case: Apply Pending Range.

Purpose:
    Turn the (date, time) pairs a user typed into the canonical absolute value
    the picker emits on confirmation: fill default times, join, then truncate
    or stamp the offset according to the configuration.

Layer:
    application/use_cases
"""

from __future__ import annotations

import logging

from arche_daterange.config.settings import Settings
from arche_daterange.domain.entities.range_value import (
    PendingAbsoluteValue,
    RangeValue,
    TimeOffset,
)
from arche_daterange.domain.services.range_value_format import (
    format_value,
    join_absolute_value,
)
from arche_daterange.domain.services.time_offset import normalize_time_offset

logger = logging.getLogger(__name__)


class ApplyPendingRange:
    """Use case producing the value emitted when the user applies an edit.

    Args:
        settings: Picker configuration (date-only mode and default offset).
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize the use case.

        Args:
            settings: Picker configuration.
        """
        self._settings = settings

    def execute(
        self,
        pending: PendingAbsoluteValue,
        *,
        time_offset: TimeOffset | None = None,
    ) -> RangeValue | None:
        """Join and format a pending value.

        Args:
            pending: Pending value being applied.
            time_offset: Explicit per-boundary offsets. When omitted, the
                scalar ``Settings.time_offset`` is used for both boundaries.

        Returns:
            The absolute value to emit. Cleared pending values come back as
            the cleared absolute value.
        """
        joined = join_absolute_value(pending)
        offset = (
            time_offset
            if time_offset is not None
            else normalize_time_offset(joined, time_offset=self._settings.time_offset)
        )
        result = format_value(joined, time_offset=offset, date_only=self._settings.date_only)

        logger.debug(
            "daterange.apply.formatted",
            extra={
                "cleared": joined.is_cleared,
                "date_only": self._settings.date_only,
                "offset_known": offset.is_known,
            },
        )
        return result

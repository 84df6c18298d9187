# src/arche_daterange/dependencies/bootstrap.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Composition root for the date-range core.

This module wires settings, logging and use cases together. It is
intentionally thin: configuration is read from Settings, and all behavior
lives in the application and domain layers.

The single public surface is :func:`bootstrap`, which returns a simple state
object with the resolved Settings and ready-to-use use cases.
"""

from __future__ import annotations

from dataclasses import dataclass

from arche_daterange.application.use_cases.apply_pending_range import ApplyPendingRange
from arche_daterange.application.use_cases.initialize_range_picker import InitializeRangePicker
from arche_daterange.config.settings import Settings, get_settings
from arche_daterange.infrastructure.logging.logger import (
    configure_root_logging,
    get_json_logger,
)

logger = get_json_logger(__name__)


@dataclass
class BootstrapState:
    """State returned by :func:`bootstrap`."""

    settings: Settings
    initialize_range_picker: InitializeRangePicker
    apply_pending_range: ApplyPendingRange


def bootstrap(settings: Settings | None = None) -> BootstrapState:
    """Configure logging and build the use cases.

    Args:
        settings: Explicit settings; defaults to the cached :func:`get_settings`.

    Returns:
        BootstrapState: Resolved settings and use cases sharing them.
    """
    resolved = settings if settings is not None else get_settings()
    configure_root_logging(resolved.log_level)
    logger.info(
        "bootstrap.ready",
        extra={
            "date_only": resolved.date_only,
            "range_selector_mode": resolved.range_selector_mode.value,
        },
    )
    return BootstrapState(
        settings=resolved,
        initialize_range_picker=InitializeRangePicker(resolved),
        apply_pending_range=ApplyPendingRange(resolved),
    )

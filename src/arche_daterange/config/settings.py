# src/arche_daterange/config/settings.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Date-range picker configuration (Pydantic Settings, v2)

Summary:
    Typed, validated picker defaults read from the process environment. Use
    cases receive a `Settings` instance explicitly; only `get_settings()`
    reads the environment.

Design:
    - Pydantic v2 BaseSettings with `extra='forbid'` to catch unknown fields.
    - Every field is bound to a `DATERANGE_*` environment variable.
    - Singleton accessor `get_settings()` with LRU cache.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from arche_daterange.domain.enums.range_picker import RangeSelectorMode

logger = logging.getLogger(__name__)

# UTC-12:00 through UTC+14:00, in minutes.
_MIN_OFFSET_MINUTES = -12 * 60
_MAX_OFFSET_MINUTES = 14 * 60


class Settings(BaseSettings):
    """Typed picker configuration.

    These are defaults for a picker instance; a host may still override any of
    them per call.
    """

    date_only: bool = Field(
        default=False,
        description="Discard time-of-day components and store bare ISO dates.",
        validation_alias="DATERANGE_DATE_ONLY",
    )

    range_selector_mode: RangeSelectorMode = Field(
        default=RangeSelectorMode.DEFAULT,
        description="Which selectors the picker offers: default, absolute-only or relative-only.",
        validation_alias="DATERANGE_RANGE_SELECTOR_MODE",
    )

    time_offset: int | None = Field(
        default=None,
        ge=_MIN_OFFSET_MINUTES,
        le=_MAX_OFFSET_MINUTES,
        description=(
            "Offset in minutes east of UTC applied to both boundaries of absolute "
            "values. Unset means the offset is unknown and no shift is applied."
        ),
        validation_alias="DATERANGE_TIME_OFFSET",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Root log level used by configure_root_logging().",
        validation_alias="DATERANGE_LOG_LEVEL",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="forbid",
        case_sensitive=False,
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached singleton `Settings` instance.

    Returns:
        Settings: Validated picker settings.

    Raises:
        RuntimeError: If configuration is invalid.
    """
    try:
        settings = Settings()
        logger.info(
            "Settings initialized",
            extra={
                "date_only": settings.date_only,
                "range_selector_mode": settings.range_selector_mode.value,
                "time_offset_set": settings.time_offset is not None,
                "log_level": settings.log_level,
            },
        )
        return settings
    except ValidationError as exc:
        logger.exception("Invalid date-range configuration")
        raise RuntimeError(f"Invalid configuration: {exc}") from exc

# tests/unit/application/use_cases/test_initialize_range_picker.py
from __future__ import annotations

import logging
from datetime import date

import pytest

from arche_daterange.application.use_cases.initialize_range_picker import (
    InitializeRangePicker,
    RangePickerState,
)
from arche_daterange.config.settings import Settings
from arche_daterange.domain.entities.range_value import (
    AbsoluteValue,
    PendingAbsoluteValue,
    PendingBoundary,
    RelativeOption,
    RelativeValue,
)
from arche_daterange.domain.enums.range_picker import RangeSelectorMode, RangeValueType, TimeUnit

OPTIONS = [RelativeOption(key="last-1-day", amount=1, unit=TimeUnit.DAY)]


def _settings(**overrides: object) -> Settings:
    return Settings(**overrides)


def test_no_value_opens_relative_when_options_exist() -> None:
    state = InitializeRangePicker(_settings()).execute(None, OPTIONS)

    assert state == RangePickerState(
        value=None,
        mode=RangeValueType.RELATIVE,
        pending=PendingAbsoluteValue.empty(),
    )


def test_no_value_respects_absolute_only_mode() -> None:
    settings = _settings(range_selector_mode=RangeSelectorMode.ABSOLUTE_ONLY)

    state = InitializeRangePicker(settings).execute(None, OPTIONS)

    assert state.mode is RangeValueType.ABSOLUTE


def test_relative_value_is_kept_and_opens_relative() -> None:
    value = RelativeValue(amount=1, unit=TimeUnit.DAY, key="last-1-day")
    settings = _settings(range_selector_mode=RangeSelectorMode.ABSOLUTE_ONLY, time_offset=60)

    state = InitializeRangePicker(settings).execute(value, OPTIONS)

    assert state.value is value
    assert state.mode is RangeValueType.RELATIVE
    assert state.pending == PendingAbsoluteValue.empty()


def test_zoned_value_is_shifted_into_settings_offset_and_split() -> None:
    value = AbsoluteValue("2024-01-01T08:00:00Z", "2024-01-01T20:00:00Z")

    state = InitializeRangePicker(_settings(time_offset=-300)).execute(value, OPTIONS)

    assert state.value == AbsoluteValue("2024-01-01T03:00:00", "2024-01-01T15:00:00")
    assert state.mode is RangeValueType.ABSOLUTE
    assert state.pending == PendingAbsoluteValue(
        start=PendingBoundary("2024-01-01", "03:00:00"),
        end=PendingBoundary("2024-01-01", "15:00:00"),
    )


def test_callback_offset_wins_over_scalar() -> None:
    value = AbsoluteValue("2024-07-01T12:00:00Z", "2024-07-02T12:00:00Z")

    def offset_for(_: date) -> int:
        return 120

    state = InitializeRangePicker(_settings(time_offset=0)).execute(
        value, get_time_offset=offset_for
    )

    assert state.value == AbsoluteValue("2024-07-01T14:00:00", "2024-07-02T14:00:00")


def test_date_only_settings_truncate_initial_value() -> None:
    value = AbsoluteValue("2024-01-01T08:00:00Z", "2024-01-03T20:00:00Z")

    state = InitializeRangePicker(_settings(date_only=True, time_offset=60)).execute(value)

    assert state.value == AbsoluteValue("2024-01-01", "2024-01-03")
    assert state.pending.start == PendingBoundary("2024-01-01", "")


def test_logs_resolution_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="arche_daterange.application")

    InitializeRangePicker(_settings()).execute(AbsoluteValue("2024-01-01", "2024-01-02"))

    record = next(r for r in caplog.records if r.getMessage() == "daterange.initialize.resolved")
    assert record.levelno == logging.DEBUG
    assert record.picker_mode == "absolute"
    assert record.changed is False

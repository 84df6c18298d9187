# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Range value entities (Domain Layer).

Purpose:
    Model the three representations a date-range control juggles:

    * :class:`AbsoluteValue` - two ISO date or date-time strings.
    * :class:`RelativeValue` - a symbolic range such as "last 7 days".
    * :class:`PendingAbsoluteValue` - the editable (date, time) split of an
      absolute value while the user is typing.

    plus the per-boundary :class:`TimeOffset` correction and the
    :class:`RelativeOption` descriptors offered by the picker.

Layer:
    domain/entities

Notes:
    - ``RangeValue`` is a closed union. Consumers dispatch with ``match`` on
      the concrete class; ``None`` stands for "no value selected".
    - Boundary strings are never validated here. Malformed dates travel
      through untouched and are the primitives' concern.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from arche_daterange.domain.entities.base import BaseEntity
from arche_daterange.domain.enums.range_picker import RangeValueType, TimeUnit
from arche_daterange.domain.exceptions.range_value import RangeValueValidationError

__all__ = [
    "AbsoluteValue",
    "PendingAbsoluteValue",
    "PendingBoundary",
    "RangeValue",
    "RelativeOption",
    "RelativeValue",
    "TimeOffset",
]


def _require_str(owner: str, field_name: str, value: object) -> None:
    if not isinstance(value, str):
        raise RangeValueValidationError(
            f"{owner}.{field_name} must be a string",
            details={"field": field_name, "type": type(value).__name__},
        )


def _coerce_unit(owner: str, unit: object) -> TimeUnit:
    try:
        return TimeUnit(unit)
    except ValueError as exc:
        raise RangeValueValidationError(
            f"{owner}.unit is not a supported time unit",
            details={"field": "unit", "value": unit},
        ) from exc


def _require_amount(owner: str, amount: object) -> None:
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise RangeValueValidationError(
            f"{owner}.amount must be an integer",
            details={"field": "amount", "type": type(amount).__name__},
        )


@dataclass(frozen=True, slots=True)
class AbsoluteValue(BaseEntity):
    """Range bound by two explicit calendar date/time strings.

    Attributes:
        start_date: ISO date (``2024-01-01``) or date-time
            (``2024-01-01T10:00:00``, optionally zoned) for the range start.
            The empty string means "unset".
        end_date: Same as ``start_date`` for the range end.
    """

    type: ClassVar[RangeValueType] = RangeValueType.ABSOLUTE

    start_date: str
    end_date: str

    def __post_init__(self) -> None:
        """Check that both boundaries are strings.

        Raises:
            RangeValueValidationError: If a boundary is not a string.
        """
        _require_str("AbsoluteValue", "start_date", self.start_date)
        _require_str("AbsoluteValue", "end_date", self.end_date)

    @classmethod
    def cleared(cls) -> AbsoluteValue:
        """Return the cleared-range marker (both boundaries unset)."""
        return cls(start_date="", end_date="")

    @property
    def is_cleared(self) -> bool:
        """True when both boundaries carry the empty-string sentinel."""
        return self.start_date == "" and self.end_date == ""


@dataclass(frozen=True, slots=True)
class RelativeValue(BaseEntity):
    """Range bound symbolically, e.g. "last 7 days".

    The normalization core treats relative values as opaque and never rewrites
    them.

    Attributes:
        amount: Number of units the range spans.
        unit: Unit of ``amount``.
        key: Identifier of the :class:`RelativeOption` the value came from, if any.
    """

    type: ClassVar[RangeValueType] = RangeValueType.RELATIVE

    amount: int
    unit: TimeUnit
    key: str | None = None

    def __post_init__(self) -> None:
        """Coerce ``unit`` into :class:`TimeUnit` and check ``amount``.

        Raises:
            RangeValueValidationError: On a non-integer amount or unknown unit.
        """
        _require_amount("RelativeValue", self.amount)
        object.__setattr__(self, "unit", _coerce_unit("RelativeValue", self.unit))


RangeValue = AbsoluteValue | RelativeValue


@dataclass(frozen=True, slots=True)
class RelativeOption(BaseEntity):
    """Relative range offered by the picker as a quick choice.

    Attributes:
        key: Stable identifier for the option.
        amount: Number of units the option spans.
        unit: Unit of ``amount``.
    """

    key: str
    amount: int
    unit: TimeUnit

    def __post_init__(self) -> None:
        """Coerce ``unit`` and check ``key`` and ``amount``.

        Raises:
            RangeValueValidationError: On a malformed option.
        """
        _require_str("RelativeOption", "key", self.key)
        _require_amount("RelativeOption", self.amount)
        object.__setattr__(self, "unit", _coerce_unit("RelativeOption", self.unit))

    def to_value(self) -> RelativeValue:
        """Return the relative value this option selects."""
        return RelativeValue(amount=self.amount, unit=self.unit, key=self.key)


@dataclass(frozen=True, slots=True)
class PendingBoundary(BaseEntity):
    """Editable (date, time) pair for one range boundary.

    Attributes:
        date: Date portion as typed, e.g. ``2024-01-01``; may be empty.
        time: Time portion as typed, e.g. ``10:30``; may be empty.
    """

    date: str = ""
    time: str = ""

    def __post_init__(self) -> None:
        """Check that both parts are strings.

        Raises:
            RangeValueValidationError: If a part is not a string.
        """
        _require_str("PendingBoundary", "date", self.date)
        _require_str("PendingBoundary", "time", self.time)


@dataclass(frozen=True, slots=True)
class PendingAbsoluteValue(BaseEntity):
    """Decomposed absolute value used while the user edits the range.

    Attributes:
        start: Pending start boundary.
        end: Pending end boundary.
    """

    start: PendingBoundary
    end: PendingBoundary

    def __post_init__(self) -> None:
        """Check that both boundaries are :class:`PendingBoundary` instances.

        Raises:
            RangeValueValidationError: If a boundary has the wrong type.
        """
        for name in ("start", "end"):
            if not isinstance(getattr(self, name), PendingBoundary):
                raise RangeValueValidationError(
                    f"PendingAbsoluteValue.{name} must be a PendingBoundary",
                    details={"field": name},
                )

    @classmethod
    def empty(cls) -> PendingAbsoluteValue:
        """Return a pending value with every date and time unset."""
        return cls(start=PendingBoundary(), end=PendingBoundary())


@dataclass(frozen=True, slots=True)
class TimeOffset(BaseEntity):
    """Per-boundary offset, in minutes east of UTC.

    An offset is either known for both boundaries or for neither; a mixed
    offset would shift one end of the range and not the other.

    Attributes:
        start_date: Offset applied to the start boundary, or ``None`` when unknown.
        end_date: Offset applied to the end boundary, or ``None`` when unknown.
    """

    start_date: int | None = None
    end_date: int | None = None

    def __post_init__(self) -> None:
        """Enforce the coupled-offset invariant.

        Raises:
            RangeValueValidationError: If exactly one boundary offset is set,
                or an offset is not an integer.
        """
        if (self.start_date is None) != (self.end_date is None):
            raise RangeValueValidationError(
                "TimeOffset boundaries must both be set or both be unset",
                details={"start_date": self.start_date, "end_date": self.end_date},
            )
        for name in ("start_date", "end_date"):
            value = getattr(self, name)
            if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
                raise RangeValueValidationError(
                    f"TimeOffset.{name} must be an integer number of minutes",
                    details={"field": name, "type": type(value).__name__},
                )

    @classmethod
    def unknown(cls) -> TimeOffset:
        """Return the offset that leaves every boundary untouched."""
        return cls()

    @classmethod
    def uniform(cls, minutes: int) -> TimeOffset:
        """Return an offset applying ``minutes`` to both boundaries."""
        return cls(start_date=minutes, end_date=minutes)

    @property
    def is_known(self) -> bool:
        """True when both boundary offsets are set."""
        return self.start_date is not None

# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Range value schemas (Adapters Layer).

Purpose:
    Parse the JSON-shaped values a date-range control exchanges with its host
    into domain entities, and dump domain entities back into that shape.

    Wire shapes:

    * ``{"type": "absolute", "startDate": "...", "endDate": "..."}``
    * ``{"type": "relative", "amount": 7, "unit": "day", "key": "last-7-days"}``
    * ``{"start": {"date": "...", "time": "..."}, "end": {...}}`` (pending)
    * ``{"startDate": 120, "endDate": 120}`` (time offset, minutes)

Layer:
    adapters/schemas

Notes:
    - Pydantic validation errors are re-raised as
      :class:`RangeValueValidationError` with the error list in ``details``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Annotated, Any, Literal

from pydantic import Field, TypeAdapter, ValidationError

from arche_daterange.adapters.schemas.base import BaseRangeSchema
from arche_daterange.domain.entities.range_value import (
    AbsoluteValue,
    PendingAbsoluteValue,
    PendingBoundary,
    RangeValue,
    RelativeOption,
    RelativeValue,
    TimeOffset,
)
from arche_daterange.domain.enums.range_picker import TimeUnit
from arche_daterange.domain.exceptions.range_value import RangeValueValidationError

__all__ = [
    "AbsoluteValueSchema",
    "PendingAbsoluteValueSchema",
    "PendingBoundarySchema",
    "RangeValueSchema",
    "RelativeOptionSchema",
    "RelativeValueSchema",
    "TimeOffsetSchema",
    "dump_pending_value",
    "dump_range_value",
    "parse_pending_value",
    "parse_range_value",
    "parse_relative_options",
    "parse_time_offset",
]


class AbsoluteValueSchema(BaseRangeSchema):
    """Absolute range as exchanged with the host."""

    type: Literal["absolute"]
    start_date: str
    end_date: str

    def to_domain(self) -> AbsoluteValue:
        """Map to the domain entity."""
        return AbsoluteValue(start_date=self.start_date, end_date=self.end_date)

    @classmethod
    def from_domain(cls, value: AbsoluteValue) -> AbsoluteValueSchema:
        """Build from the domain entity."""
        return cls(type="absolute", start_date=value.start_date, end_date=value.end_date)


class RelativeValueSchema(BaseRangeSchema):
    """Relative range as exchanged with the host."""

    type: Literal["relative"]
    amount: int
    unit: TimeUnit
    key: str | None = None

    def to_domain(self) -> RelativeValue:
        """Map to the domain entity."""
        return RelativeValue(amount=self.amount, unit=self.unit, key=self.key)

    @classmethod
    def from_domain(cls, value: RelativeValue) -> RelativeValueSchema:
        """Build from the domain entity."""
        return cls(type="relative", amount=value.amount, unit=value.unit, key=value.key)


RangeValueSchema = Annotated[
    AbsoluteValueSchema | RelativeValueSchema,
    Field(discriminator="type"),
]


class RelativeOptionSchema(BaseRangeSchema):
    """Relative quick-choice offered by the picker."""

    type: Literal["relative"] = "relative"
    key: str
    amount: int
    unit: TimeUnit

    def to_domain(self) -> RelativeOption:
        """Map to the domain entity."""
        return RelativeOption(key=self.key, amount=self.amount, unit=self.unit)


class PendingBoundarySchema(BaseRangeSchema):
    """Editable (date, time) pair for one boundary."""

    date: str = ""
    time: str = ""


class PendingAbsoluteValueSchema(BaseRangeSchema):
    """Editable split of an absolute value."""

    start: PendingBoundarySchema = Field(default_factory=PendingBoundarySchema)
    end: PendingBoundarySchema = Field(default_factory=PendingBoundarySchema)

    def to_domain(self) -> PendingAbsoluteValue:
        """Map to the domain entity."""
        return PendingAbsoluteValue(
            start=PendingBoundary(date=self.start.date, time=self.start.time),
            end=PendingBoundary(date=self.end.date, time=self.end.time),
        )

    @classmethod
    def from_domain(cls, value: PendingAbsoluteValue) -> PendingAbsoluteValueSchema:
        """Build from the domain entity."""
        return cls(
            start=PendingBoundarySchema(date=value.start.date, time=value.start.time),
            end=PendingBoundarySchema(date=value.end.date, time=value.end.time),
        )


class TimeOffsetSchema(BaseRangeSchema):
    """Per-boundary offsets in minutes; both set or both unset."""

    start_date: int | None = None
    end_date: int | None = None

    def to_domain(self) -> TimeOffset:
        """Map to the domain entity.

        Raises:
            RangeValueValidationError: If only one boundary offset is set.
        """
        return TimeOffset(start_date=self.start_date, end_date=self.end_date)


_RANGE_VALUE_ADAPTER: TypeAdapter[AbsoluteValueSchema | RelativeValueSchema] = TypeAdapter(
    RangeValueSchema
)


def _invalid(what: str, exc: ValidationError) -> RangeValueValidationError:
    return RangeValueValidationError(
        f"Invalid {what}",
        details={"errors": exc.errors(include_url=False, include_context=False)},
    )


def parse_range_value(raw: Mapping[str, Any] | None) -> RangeValue | None:
    """Parse a host value into a domain range value.

    Args:
        raw: Wire mapping, or ``None`` when nothing is selected.

    Returns:
        The domain value, or ``None``.

    Raises:
        RangeValueValidationError: If the mapping is not a valid range value.
    """
    if raw is None:
        return None
    try:
        schema = _RANGE_VALUE_ADAPTER.validate_python(raw)
    except ValidationError as exc:
        raise _invalid("range value", exc) from exc
    return schema.to_domain()


def dump_range_value(value: RangeValue | None) -> dict[str, Any] | None:
    """Serialize a domain range value into the host's wire shape.

    Args:
        value: Domain value, or ``None``.

    Returns:
        Wire mapping, or ``None``. A relative value without a key omits it.
    """
    match value:
        case None:
            return None
        case AbsoluteValue():
            return AbsoluteValueSchema.from_domain(value).model_dump_wire()
        case RelativeValue():
            return RelativeValueSchema.from_domain(value).model_dump_wire(exclude_none=True)


def parse_relative_options(raw: Iterable[Mapping[str, Any]]) -> list[RelativeOption]:
    """Parse the host's relative options.

    Raises:
        RangeValueValidationError: If any option is malformed.
    """
    options: list[RelativeOption] = []
    for index, item in enumerate(raw):
        try:
            schema = RelativeOptionSchema.model_validate(item)
        except ValidationError as exc:
            raise _invalid(f"relative option at index {index}", exc) from exc
        options.append(schema.to_domain())
    return options


def parse_pending_value(raw: Mapping[str, Any] | None) -> PendingAbsoluteValue:
    """Parse a pending value; ``None`` gives the empty pending value.

    Raises:
        RangeValueValidationError: If the mapping is malformed.
    """
    if raw is None:
        return PendingAbsoluteValue.empty()
    try:
        schema = PendingAbsoluteValueSchema.model_validate(raw)
    except ValidationError as exc:
        raise _invalid("pending value", exc) from exc
    return schema.to_domain()


def dump_pending_value(value: PendingAbsoluteValue) -> dict[str, Any]:
    """Serialize a pending value into the host's wire shape."""
    return PendingAbsoluteValueSchema.from_domain(value).model_dump_wire()


def parse_time_offset(raw: Mapping[str, Any] | None) -> TimeOffset:
    """Parse per-boundary offsets; ``None`` gives the unknown offset.

    Raises:
        RangeValueValidationError: If the mapping is malformed or mixed.
    """
    if raw is None:
        return TimeOffset.unknown()
    try:
        schema = TimeOffsetSchema.model_validate(raw)
    except ValidationError as exc:
        raise _invalid("time offset", exc) from exc
    return schema.to_domain()

# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""
Range Value Domain Exceptions

Purpose:
    Errors raised at the edges of the range-value model: entity invariants and
    adapter parsing. The normalization services themselves never raise.

Layer: domain/exceptions
"""
from __future__ import annotations

from .base import DomainError


class RangeValueValidationError(DomainError):
    """A range value, pending value or time offset violates its invariants."""

    code = "RANGE_VALUE_INVALID"


__all__ = ["RangeValueValidationError"]

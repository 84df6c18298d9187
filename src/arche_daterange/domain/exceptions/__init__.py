"""Domain exception hierarchy."""

from __future__ import annotations

from .base import DomainError
from .range_value import RangeValueValidationError

__all__ = ["DomainError", "RangeValueValidationError"]

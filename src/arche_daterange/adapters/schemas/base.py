# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Base Range Schema (Adapters Layer).

Purpose:
    Canonical Pydantic base for the JSON shapes exchanged with the host
    date-range control. Enforces strict config and camelCase wire names.

Layer: adapters/schemas

Notes:
    - Transport-facing only. Domain code must not import from this module.
    - Strings are not stripped or otherwise rewritten; boundary strings reach
      the domain exactly as the host sent them.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseRangeSchema(BaseModel):
    """Base class for all host-facing range schemas.

    Provides:
        • Strict `extra='forbid'` validation.
        • camelCase aliases (``startDate``) with snake_case population allowed.
        • Immutable instances.
        • Consistent `model_dump_wire()` for serializing back to the host.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    def model_dump_wire(self, **kwargs: Any) -> dict[str, Any]:
        """Return a JSON-serializable dict using the host's field names."""
        return self.model_dump(mode="json", by_alias=True, **kwargs)

# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator

import pytest

from arche_daterange.config.settings import get_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Run every test against a clean ``DATERANGE_*`` environment.

    Clears the cached settings before and after so env changes made inside a
    test never leak into the next one.
    """
    for key in list(os.environ):
        if key.startswith("DATERANGE_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

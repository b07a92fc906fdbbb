# tests/conftest.py
from __future__ import annotations

from collections.abc import Iterator

import pytest

from jsend.config.settings import get_settings


@pytest.fixture(autouse=True)
def _reset_settings_cache(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Give each test a fresh settings singleton and a clean JSEND_* environment."""
    for name in ("JSEND_LOG_LEVEL", "JSEND_JSON_INDENT"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

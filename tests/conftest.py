"""Pytest configuration shared by all literal-sql tests."""

from __future__ import annotations

import pytest

from literal_sql.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Give every test settings freshly loaded from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

"""Shared fixtures for the localization engine test suite."""

import pytest

from localization.configuration import get_settings
from localization.i18n import reset_i18n


@pytest.fixture(autouse=True)
def isolate_shared_state():
    """Rebuild cached settings and the shared engine for every test."""
    get_settings.cache_clear()
    reset_i18n()
    yield
    reset_i18n()
    get_settings.cache_clear()

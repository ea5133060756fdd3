"""Feature-level fixtures for translation engine tests."""

from unittest.mock import MagicMock

import pytest

from localization.i18n import TranslationRegistry
from tests.factories.i18n import make_i18n, make_i18n_settings, make_translations


@pytest.fixture
def i18n_settings():
    """I18nSettings with no emit delay and a short load timeout."""
    return make_i18n_settings()


@pytest.fixture
def sample_translations():
    """Sample fragment with plain, nested and plural entries for en and fr."""
    return make_translations()


@pytest.fixture
def i18n(sample_translations):
    """Isolated engine preloaded with the sample fragment."""
    return make_i18n(translations=sample_translations)


@pytest.fixture
def empty_i18n():
    """Isolated engine without translations."""
    return make_i18n()


@pytest.fixture
def registry():
    """Fresh binding registry."""
    return TranslationRegistry()


@pytest.fixture
def event_recorder():
    """Mock handler recording every call."""
    return MagicMock(name="event_handler")

"""Tests for localization.i18n.factory module."""

import json

import pytest

from localization.configuration import get_settings
from localization.i18n import I18n, create_i18n, get_i18n, reset_i18n, translatable
from localization.persistence import InMemoryPreferenceStore, JsonFilePreferenceStore
from tests.factories.i18n import make_i18n_settings

pytestmark = pytest.mark.unit


class TestCreateI18n:
    """Tests for create_i18n()."""

    def test_returns_independent_instances(self):
        first = create_i18n(settings=make_i18n_settings())
        second = create_i18n(settings=make_i18n_settings())
        assert isinstance(first, I18n)
        assert first is not second
        assert first.persist_locale is False

    def test_registers_translations(self):
        engine = create_i18n(
            settings=make_i18n_settings(), translations={"en": {"greeting": "Hi"}}
        )
        assert engine.t("greeting") == "Hi"

    def test_initial_locale(self):
        engine = create_i18n(settings=make_i18n_settings(), locale="fr")
        assert engine.locale == "fr"


class TestGetI18n:
    """Tests for the shared engine."""

    def test_returns_same_instance(self):
        assert get_i18n() is get_i18n()

    def test_reset_builds_new_instance(self):
        first = get_i18n()
        reset_i18n()
        assert get_i18n() is not first

    def test_persists_locale(self):
        engine = get_i18n()
        assert engine.persist_locale is True
        assert isinstance(engine.preference_store, InMemoryPreferenceStore)

    @pytest.mark.asyncio
    async def test_json_preferences_file(self, monkeypatch, tmp_path):
        """The shared engine persists to the configured preferences file."""
        path = tmp_path / "prefs.json"
        monkeypatch.setenv("I18N_PREFERENCES_FILE", str(path))
        monkeypatch.setenv("I18N_SUPPORTED_LOCALES", '["en", "fr"]')
        monkeypatch.setenv("I18N_NAMESPACES_LOADED_DELAY_SECONDS", "0")
        get_settings.cache_clear()

        engine = get_i18n()
        assert isinstance(engine.preference_store, JsonFilePreferenceStore)
        await engine.set_locale("fr")

        assert json.loads(path.read_text(encoding="utf-8")) == {"i18n.locale": "fr"}

        reset_i18n()
        assert get_i18n().locale == "fr"

    def test_translate_target_defaults_to_shared_engine(self):
        @translatable(title="user.name")
        class SharedLabels:
            pass

        get_i18n().register_translations({"en": {"user": {"name": "Name"}}})
        assert I18n.translate_target(SharedLabels) == {"title": "Name"}

"""Test data factories for translation engine testing.

Provides deterministic builders for:
- I18nSettings
- Translation fragments
- Namespace resolvers (succeeding, failing, slow)
- Engine instances
"""

import asyncio
from typing import Any, Dict, Optional

from localization.configuration import I18nSettings
from localization.events import EventBus
from localization.i18n import I18n, TranslationRegistry, create_i18n
from localization.persistence import InMemoryPreferenceStore


def make_i18n_settings(**overrides: Any) -> I18nSettings:
    """Create I18nSettings suited to tests (no emit delay, short timeout).

    Args:
        **overrides: Field values replacing the defaults.

    Returns:
        I18nSettings instance.
    """
    values = {
        "default_locale": "en",
        "supported_locales": ["en", "fr"],
        "enable_fallback": True,
        "namespace_load_timeout_seconds": 1.0,
        "namespace_max_concurrency": 8,
        "namespaces_loaded_delay_seconds": 0,
        "locale_preference_key": "i18n.locale",
        "preferences_file": None,
    }
    values.update(overrides)
    return I18nSettings(**values)


def make_translations() -> Dict[str, Dict[str, Any]]:
    """Sample translation fragment for two locales."""
    return {
        "en": {
            "greeting": "Hello, %{name}!",
            "farewell": "Goodbye!",
            "user": {
                "name": "Name",
                "email": "Email Address",
            },
            "nested": {"example": "Nested Example", "deep": {"value": "Deep value"}},
            "items": {
                "zero": "No items",
                "one": "%{countStr} item",
                "other": "%{countStr} items",
            },
            "validator": {
                "length": "This field must be exactly %{length} characters long",
                "numberLessThan": "This field must be less than %{ruleParams[0]}",
            },
        },
        "fr": {
            "greeting": "Bonjour, %{name} !",
            "user": {"name": "Nom", "email": "Adresse Email"},
            "items": {"one": "%{countStr} élément", "other": "%{countStr} éléments"},
        },
    }


def make_resolver(fragments: Dict[str, Dict[str, Any]], calls: Optional[list] = None):
    """Create an async namespace resolver serving one fragment per locale.

    Args:
        fragments: locale -> fragment returned for that locale.
        calls: Optional list the requested locales are appended to.
    """

    async def _resolver(locale: str) -> Dict[str, Any]:
        if calls is not None:
            calls.append(locale)
        return fragments.get(locale, {})

    return _resolver


def make_failing_resolver(message: str = "network unavailable"):
    """Create an async namespace resolver that always raises."""

    async def _resolver(locale: str) -> Dict[str, Any]:
        raise RuntimeError(message)

    return _resolver


def make_slow_resolver(delay: float, fragment: Optional[Dict[str, Any]] = None):
    """Create an async namespace resolver that settles after delay seconds."""

    async def _resolver(locale: str) -> Dict[str, Any]:
        await asyncio.sleep(delay)
        return fragment or {}

    return _resolver


def make_i18n(
    translations: Optional[Dict[str, Dict[str, Any]]] = None,
    persist_locale: bool = False,
    registry: Optional[TranslationRegistry] = None,
    **settings_overrides: Any,
) -> I18n:
    """Create an isolated engine with its own bus, store and registry."""
    settings = make_i18n_settings(**settings_overrides)
    registry = registry if registry is not None else TranslationRegistry()
    if persist_locale:
        return I18n(
            settings=settings,
            events=EventBus(),
            preference_store=InMemoryPreferenceStore(),
            persist_locale=True,
            registry=registry,
            translations=translations,
        )
    return create_i18n(
        settings=settings,
        events=EventBus(),
        preference_store=InMemoryPreferenceStore(),
        registry=registry,
        translations=translations,
    )

"""Factory functions for creating translation engines.

get_i18n() returns the process-wide shared engine, created on first call.
It is the only instance that persists the active locale. create_i18n()
builds independent engines, e.g. one per test.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping, Optional

from localization.configuration import I18nSettings, get_settings
from localization.events import EventBus
from localization.i18n.binding import TranslationRegistry
from localization.i18n.engine import DateLocaleHook, I18n
from localization.logging import get_module_logger
from localization.persistence import (
    InMemoryPreferenceStore,
    JsonFilePreferenceStore,
    PreferenceStore,
)

logger = get_module_logger()


def create_i18n(
    settings: Optional[I18nSettings] = None,
    events: Optional[EventBus] = None,
    preference_store: Optional[PreferenceStore] = None,
    date_locale_hook: Optional[DateLocaleHook] = None,
    registry: Optional[TranslationRegistry] = None,
    locale: Optional[str] = None,
    translations: Optional[Mapping[str, Any]] = None,
) -> I18n:
    """Create an independent engine that does not persist its locale.

    Args:
        settings: Engine settings (default: from environment).
        events: Event bus (default: a new private bus).
        preference_store: Preference store (default: in-memory).
        date_locale_hook: Side effect run with the target locale of a switch.
        registry: Binding registry (default: the process-wide registry).
        locale: Initial locale (default: settings.default_locale).
        translations: Fragment registered right away.

    Returns:
        I18n: New engine instance.

    Usage:
        i18n = create_i18n(translations={"en": {"greeting": "Hi"}})
        i18n.t("greeting")  # "Hi"
    """
    return I18n(
        settings=settings,
        events=events,
        preference_store=preference_store,
        persist_locale=False,
        date_locale_hook=date_locale_hook,
        registry=registry,
        locale=locale,
        translations=translations,
    )


def _default_preference_store(settings: I18nSettings) -> PreferenceStore:
    if settings.preferences_file:
        return JsonFilePreferenceStore(Path(settings.preferences_file))
    return InMemoryPreferenceStore()


@lru_cache
def get_i18n() -> I18n:
    """Get the process-wide shared engine.

    The stored locale is read once here; every later switch of this
    instance to a supported locale is persisted.

    Returns:
        I18n: Cached engine instance.
    """
    settings = get_settings().i18n
    i18n = I18n(
        settings=settings,
        preference_store=_default_preference_store(settings),
        persist_locale=True,
    )
    logger.info("shared_i18n_created", locale=i18n.locale)
    return i18n


def reset_i18n() -> None:
    """Drop the shared engine so the next get_i18n() builds a new one."""
    get_i18n.cache_clear()

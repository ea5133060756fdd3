"""i18n system - translation engine.

Provides locale switching with asynchronous namespace loading,
pluralization, nested key resolution, declarative key-to-member
bindings and string interpolation.

Main components:
- interpolation: %{key} substitution with flattened parameters
- resolution: nested key lookup in the translation tree
- pluralization: plural records and locale-aware count formatting
- translator: Translator lookup primitive
- namespaces: NamespaceLoader for resolver registration and loading
- engine: I18n locale state machine
- binding: TranslationRegistry and the translation binder
- factory: get_i18n() shared instance and create_i18n()
"""

from localization.i18n.binding import (
    TranslationRegistry,
    resolve_translations,
    translatable,
    translate_target,
    translation_registry,
)
from localization.i18n.engine import I18n
from localization.i18n.errors import (
    ConfigurationError,
    I18nError,
    InvalidLocaleError,
    InvalidNamespaceError,
    ResolutionError,
)
from localization.i18n.factory import create_i18n, get_i18n, reset_i18n
from localization.i18n.interpolation import flatten_params, interpolate, stringify
from localization.i18n.models import (
    BASE_LOCALE,
    LocaleState,
    NamespaceLoadReport,
    TranslationKeyBinding,
)
from localization.i18n.namespaces import NamespaceLoader
from localization.i18n.pluralization import COUNT_STR_PARAM, format_count
from localization.i18n.resolution import get_nested_translation
from localization.i18n.translator import Translator

__all__ = [
    "I18n",
    "Translator",
    "NamespaceLoader",
    "NamespaceLoadReport",
    "LocaleState",
    "TranslationKeyBinding",
    "TranslationRegistry",
    "translation_registry",
    "translatable",
    "resolve_translations",
    "translate_target",
    "create_i18n",
    "get_i18n",
    "reset_i18n",
    "interpolate",
    "flatten_params",
    "stringify",
    "get_nested_translation",
    "format_count",
    "COUNT_STR_PARAM",
    "BASE_LOCALE",
    "I18nError",
    "ConfigurationError",
    "InvalidNamespaceError",
    "InvalidLocaleError",
    "ResolutionError",
]

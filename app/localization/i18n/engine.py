"""Translation engine with locale switching and namespace loading.

I18n extends the Translator lookup primitive with:
- a locale state machine (Idle -> Loading -> Idle) driven by set_locale()
- namespace resolvers loaded concurrently per locale
- plural-aware translate() exposing the formatted count as %{countStr}
- change notifications on an EventBus
- member-to-key bindings resolved into object instances

Usage:
    from localization.i18n import get_i18n

    i18n = get_i18n()
    i18n.register_translations({"en": {"greeting": "Hello, %{name}!"}})
    i18n.t("greeting", name="Ada")  # "Hello, Ada!"

    i18n.register_namespace_resolver("common", load_common)
    await i18n.set_locale("fr")
"""

import asyncio
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

import yaml

from localization.configuration import I18nSettings, get_settings
from localization.events import EventBus, I18nEvent, Subscription
from localization.i18n import binding
from localization.i18n.binding import TranslationRegistry, translation_registry
from localization.i18n.errors import InvalidLocaleError
from localization.i18n.models import (
    BASE_LOCALE,
    LocaleState,
    NamespaceLoadReport,
    TranslationTree,
)
from localization.i18n.namespaces import NamespaceLoader, NamespaceResolver
from localization.i18n.pluralization import (
    COUNT_STR_PARAM,
    format_count,
    is_count,
    is_plural_record,
)
from localization.i18n.resolution import Scope, get_nested_translation
from localization.i18n.translator import Translator
from localization.logging import get_module_logger
from localization.persistence import InMemoryPreferenceStore, PreferenceStore

logger = get_module_logger()

DateLocaleHook = Callable[[str], Any]


class I18n(Translator):
    """Localization engine.

    Attributes:
        settings: Engine settings.
        events: Bus receiving translations-changed, namespaces-before-load,
            namespace-loaded, namespaces-loaded and locale-changed.
        preference_store: Store the active locale is persisted to.
        persist_locale: Whether this instance persists locale switches. Only
            the shared instance does.
        date_locale_hook: Called with the new locale when a switch starts, so
            calendar/date formatting can follow.
        registry: Member-to-key bindings used by resolve_translations().
        namespaces: Namespace resolver registry and loader.
    """

    def __init__(
        self,
        settings: Optional[I18nSettings] = None,
        events: Optional[EventBus] = None,
        preference_store: Optional[PreferenceStore] = None,
        persist_locale: bool = False,
        date_locale_hook: Optional[DateLocaleHook] = None,
        registry: Optional[TranslationRegistry] = None,
        locale: Optional[str] = None,
        translations: Optional[Mapping[str, Any]] = None,
    ):
        """Initialize the engine.

        Args:
            settings: Engine settings (default: from environment).
            events: Event bus (default: a new private bus).
            preference_store: Preference store (default: in-memory).
            persist_locale: Read the stored locale now and persist switches.
            date_locale_hook: Side effect run with the target locale of a switch.
            registry: Binding registry (default: translation_registry).
            locale: Initial locale. Takes precedence over a stored locale.
            translations: Fragment registered right away.
        """
        self.settings = settings or get_settings().i18n
        self.events = events or EventBus()
        self.preference_store = preference_store or InMemoryPreferenceStore()
        self.persist_locale = persist_locale
        self.date_locale_hook = date_locale_hook
        self.registry = registry or translation_registry
        self.namespaces = NamespaceLoader(
            store=self.store, events=self.events, settings=self.settings
        )
        self._locales: List[str] = [BASE_LOCALE]
        self._pending_loads = 0
        self._switch_generation = 0
        self._switch: Optional["asyncio.Future[TranslationTree]"] = None

        if not locale and persist_locale:
            locale = self.preference_store.get(self.settings.locale_preference_key)

        super().__init__(
            locale=locale or self.settings.default_locale,
            default_locale=self.settings.default_locale,
            enable_fallback=self.settings.enable_fallback,
        )
        self.set_locales(self.settings.supported_locales)

        if translations:
            self.register_translations(translations)

        logger.info(
            "initialized_i18n",
            locale=self.locale,
            supported_locales=self._locales,
            persist_locale=persist_locale,
        )

    # Events

    def on(self, event: Union[I18nEvent, str], handler: Callable[..., Any]) -> Subscription:
        return self.events.on(event, handler)

    def once(self, event: Union[I18nEvent, str], handler: Callable[..., Any]) -> Subscription:
        return self.events.once(event, handler)

    def off(self, event: Union[I18nEvent, str], handler: Callable[..., Any]) -> None:
        self.events.off(event, handler)

    def off_all(self) -> None:
        self.events.off_all()

    def trigger(self, event: Union[I18nEvent, str], *args: Any) -> List[Any]:
        return self.events.trigger(event, *args)

    # Translations

    def store(self, translations: Mapping[str, Any]) -> None:
        """Merge a fragment into the tree and announce translations-changed."""
        super().store(translations)
        self.trigger(
            I18nEvent.TRANSLATIONS_CHANGED, self.locale, self.get_translations()
        )

    def register_translations(self, translations: Mapping[str, Any]) -> TranslationTree:
        """Merge a static fragment into the tree.

        Returns:
            The whole translation tree.
        """
        if not isinstance(translations, Mapping):
            logger.warning(
                "invalid_translations_format",
                expected="dict",
                received=type(translations).__name__,
            )
            return self.get_translations()
        self.store(translations)
        return self.get_translations()

    def register_translations_from_file(self, path: Union[str, Path]) -> TranslationTree:
        """Register a fragment read from a YAML file.

        Expected format:
        en:
          greeting: "Hello, %{name}!"

        Raises:
            FileNotFoundError: If path does not exist.
            ValueError: If the file is not valid YAML.
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=str(path), error=str(e))
            raise ValueError(f"Failed to parse {path}: {e}") from e

        if not isinstance(data, dict):
            logger.warning("invalid_yaml_format", file=str(path), expected="dict")
            return self.get_translations()

        logger.info("loaded_translations_file", file=str(path), locales=list(data))
        return self.register_translations(data)

    def get_translations(self, locale: Optional[str] = None) -> Dict[str, Any]:
        """Get the whole tree, or the subtree of one locale."""
        if locale:
            return self.translations.get(locale, {})
        return self.translations

    def get_nested_translation(
        self, scope: Scope, locale: Optional[str] = None
    ) -> Optional[Any]:
        return get_nested_translation(self.translations, scope, locale or self.locale)

    def can_pluralize(self, scope: Scope, locale: Optional[str] = None) -> bool:
        """Check whether scope resolves to a plural record (string one and other)."""
        return is_plural_record(self.get_nested_translation(scope, locale))

    def translate(
        self, scope: Scope, options: Optional[Mapping[str, Any]] = None, **params: Any
    ) -> str:
        """Render a scope, selecting a plural variant when count is numeric.

        When the scope holds a plural record, the count formatted for the
        locale is available to the template as %{countStr}.

        Args:
            scope: Dotted key or sequence of segments.
            options: Interpolation parameters plus locale, default_value, count.
            **params: Extra parameters merged over options.

        Returns:
            Rendered string.
        """
        options = {**(options or {}), **params}
        count = options.get("count")
        locale = options.get("locale") or self.locale
        if is_count(count) and is_plural_record(self.resolve(scope, locale)):
            options[COUNT_STR_PARAM] = format_count(count, locale)
            return self.pluralize(count, scope, options)
        return super().translate(scope, options)

    t = translate

    def translate_object(
        self, mapping: Any, options: Optional[Mapping[str, Any]] = None
    ) -> Dict[str, str]:
        """Translate every non-empty string value of a mapping as a key.

        Other values are dropped; anything but a mapping yields {}.
        """
        if not isinstance(mapping, Mapping):
            return {}
        return {
            name: self.translate(key, options)
            for name, key in mapping.items()
            if isinstance(key, str) and key
        }

    # Locales

    @property
    def is_loading(self) -> bool:
        return self._pending_loads > 0

    @property
    def state(self) -> LocaleState:
        return LocaleState(
            current_locale=self.locale,
            is_loading=self.is_loading,
            supported_locales=tuple(self._locales),
        )

    def get_locales(self) -> List[str]:
        return list(self._locales)

    def set_locales(self, locales: Sequence[str]) -> List[str]:
        """Replace the supported locales.

        Blank and duplicate entries are dropped; "en" is always included.

        Returns:
            The normalized supported locales.
        """
        normalized: List[str] = []
        for locale in locales or []:
            if isinstance(locale, str) and locale.strip() and locale.strip() not in normalized:
                normalized.append(locale.strip())
        if BASE_LOCALE not in normalized:
            normalized.insert(0, BASE_LOCALE)
        self._locales = normalized
        return list(normalized)

    def is_locale_supported(self, locale: str) -> bool:
        return locale in self._locales

    def has_locale(self, locale: str) -> bool:
        """Check whether the tree holds translations for locale."""
        return isinstance(locale, str) and locale in self.translations

    async def set_locale(self, locale: str) -> TranslationTree:
        """Switch the current locale and load its namespaces.

        The current locale changes immediately. The call completes once the
        namespaces of the new locale have loaded and locale-changed has fired.
        Setting the current locale again is a no-op; if that locale is still
        loading, the call waits for the same switch.

        When switches overlap, only the newest one fires locale-changed;
        earlier ones still complete once their own load settles.

        Args:
            locale: Target locale.

        Returns:
            The whole translation tree.

        Raises:
            InvalidLocaleError: If locale is blank.
        """
        if not isinstance(locale, str) or not locale.strip():
            raise InvalidLocaleError("Cannot switch to a blank locale.")
        locale = locale.strip()

        if locale == self.locale:
            if self._switch is not None and not self._switch.done():
                return await asyncio.shield(self._switch)
            return self.get_translations()

        self._switch_generation += 1
        previous, self._locale = self.locale, locale
        self._pending_loads += 1
        self._switch = asyncio.ensure_future(
            self._switch_locale(locale, previous, self._switch_generation)
        )
        return await asyncio.shield(self._switch)

    async def _switch_locale(
        self, locale: str, previous: str, generation: int
    ) -> TranslationTree:
        try:
            logger.info("locale_switch_started", locale=locale, previous=previous)
            self.trigger(I18nEvent.NAMESPACES_BEFORE_LOAD, locale)
            self._update_date_locale(locale)
            if self.persist_locale and self.is_locale_supported(locale):
                self.preference_store.set(self.settings.locale_preference_key, locale)

            report = await self.load_namespaces(locale)
        finally:
            self._pending_loads -= 1

        if generation != self._switch_generation:
            logger.info(
                "locale_switch_superseded", locale=locale, current_locale=self.locale
            )
            return self.get_translations()

        self.trigger(I18nEvent.LOCALE_CHANGED, locale, report.translations)
        logger.info(
            "locale_changed",
            locale=locale,
            loaded=report.loaded,
            failed=list(report.failed),
        )
        return self.get_translations()

    def _update_date_locale(self, locale: str) -> None:
        if self.date_locale_hook is None:
            return
        try:
            self.date_locale_hook(locale)
        except Exception as e:
            logger.error("date_locale_update_failed", locale=locale, error=str(e))

    # Namespaces

    def register_namespace_resolver(self, name: str, resolver: NamespaceResolver) -> None:
        """Register or replace the resolver of a namespace.

        Invalid arguments are logged and ignored.
        """
        self.namespaces.register(name, resolver)

    async def load_namespace(
        self,
        name: str,
        locale: Optional[str] = None,
        update_translations: bool = True,
    ) -> TranslationTree:
        """Load one namespace for locale (default: current locale).

        Returns:
            Dictionary {locale: fragment}.

        Raises:
            InvalidNamespaceError: If no resolver is registered under name.
            InvalidLocaleError: If no locale can be determined.
        """
        return await self.namespaces.load(name, locale or self.locale, update_translations)

    async def load_namespaces(
        self, locale: Optional[str] = None, update_translations: bool = True
    ) -> NamespaceLoadReport:
        """Load every registered namespace for locale (default: current locale).

        is_loading stays true until every resolver has settled.

        Returns:
            NamespaceLoadReport with the aggregate and the failed namespaces.
        """
        self._pending_loads += 1
        try:
            return await self.namespaces.load_all(
                locale or self.locale, update_translations
            )
        finally:
            self._pending_loads -= 1

    # Bindings

    def resolve_translations(
        self, target: Any, options: Optional[Mapping[str, Any]] = None
    ) -> List[str]:
        """Overwrite bound members of target with their translations.

        Returns:
            Names of the members that were updated.
        """
        return binding.resolve_translations(
            target, self.translate, self.registry, options
        )

    @staticmethod
    def translate_target(
        target_cls: type,
        i18n: Optional["I18n"] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, str]:
        """Translate the bindings declared on a class.

        Args:
            target_cls: Class declaring bindings.
            i18n: Engine to translate with (default: the shared instance).
            options: Options passed to every translate call.

        Returns:
            Mapping of member name -> translated string.
        """
        if i18n is None:
            from localization.i18n.factory import get_i18n

            i18n = get_i18n()
        return binding.translate_target(
            target_cls, i18n.translate, i18n.registry, options
        )

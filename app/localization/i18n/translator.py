"""Translation lookup primitive.

Holds the translation tree and renders a scope for a locale: dictionary
lookup, fallback to the default locale, plural bucket selection and
interpolation. The engine builds locale switching and namespace loading
on top of it.
"""

from typing import Any, Callable, Dict, Mapping, Optional

from localization.i18n.interpolation import interpolate
from localization.i18n.models import TranslationTree
from localization.i18n.pluralization import is_count, select_plural
from localization.i18n.resolution import Scope, get_nested_translation, split_scope
from localization.logging import get_module_logger

logger = get_module_logger()

MissingPlaceholder = Callable[["Translator", str, str, Dict[str, Any]], str]


class Translator:
    """Renders translation scopes against an in-memory translation tree.

    Attributes:
        translations: Tree of {locale: {segment: leaf | plural record | mapping}}.
        default_locale: Locale consulted when a key is missing and fallback is on.
        enable_fallback: Whether missing keys fall back to default_locale.
        missing_placeholder: Optional hook rendering placeholders that have no
            matching parameter. Without it placeholders pass through unchanged.
    """

    def __init__(
        self,
        locale: Optional[str] = None,
        default_locale: str = "en",
        enable_fallback: bool = True,
    ):
        self.translations: TranslationTree = {}
        self.default_locale = default_locale
        self.enable_fallback = enable_fallback
        self.missing_placeholder: Optional[MissingPlaceholder] = None
        self._locale = locale or default_locale

    @property
    def locale(self) -> str:
        """Locale used when an operation does not name one."""
        return self._locale

    def get_locale(self) -> str:
        return self._locale

    def store(self, translations: Mapping[str, Any]) -> None:
        """Merge a fragment into the tree.

        Each locale's entries are shallow-merged over the existing ones: a
        top-level key of the fragment replaces the whole subtree under it.

        Args:
            translations: Fragment of {locale: {key: value}}.
        """
        for locale, entries in translations.items():
            if not isinstance(entries, Mapping):
                logger.warning(
                    "invalid_translations_format", locale=locale, expected="dict"
                )
                continue
            self.translations[locale] = {**self.translations.get(locale, {}), **entries}

    def lookup(self, scope: Scope, locale: Optional[str] = None) -> Optional[Any]:
        """Resolve a scope for a locale without fallback or rendering."""
        return get_nested_translation(self.translations, scope, locale or self.locale)

    def translate(
        self, scope: Scope, options: Optional[Mapping[str, Any]] = None, **params: Any
    ) -> str:
        """Retrieve and interpolate a translated message.

        Args:
            scope: Dotted key or sequence of segments.
            options: Interpolation parameters plus the reserved options
                ``locale``, ``default_value`` and ``count``.
            **params: Extra parameters merged over options.

        Returns:
            Rendered string. A missing key renders as
            ``[missing "<locale>.<scope>" translation]``.
        """
        return self._translate(scope, {**(options or {}), **params})

    def pluralize(
        self, count: Any, scope: Scope, options: Optional[Mapping[str, Any]] = None
    ) -> str:
        """Render the plural variant of scope matching count."""
        return self._translate(scope, {**(options or {}), "count": count})

    def get_missing_placeholder_string(
        self,
        placeholder: str,
        message: Optional[str] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Render a placeholder that has no matching parameter.

        Args:
            placeholder: Full placeholder text, e.g. "%{name}".
            message: Template the placeholder belongs to.
            options: Options the template is rendered with.

        Returns:
            Hook output when missing_placeholder is set, else placeholder itself.
        """
        if callable(self.missing_placeholder):
            return self.missing_placeholder(
                self, placeholder, message or "", dict(options or {})
            )
        return placeholder

    def missing_translation(self, scope: Scope, locale: str) -> str:
        """Text rendered for a scope absent from the tree."""
        return f'[missing "{".".join([locale, *split_scope(scope)])}" translation]'

    def resolve(self, scope: Scope, locale: Optional[str] = None) -> Optional[Any]:
        """Resolve a scope for a locale, falling back to the default locale."""
        locale = locale or self.locale
        value = self.lookup(scope, locale)
        if value is None and self.enable_fallback and locale != self.default_locale:
            value = self.lookup(scope, self.default_locale)
            if value is not None:
                logger.debug(
                    "used_fallback_translation",
                    scope=str(scope),
                    requested_locale=locale,
                    fallback_locale=self.default_locale,
                )
        return value

    def _translate(self, scope: Scope, options: Dict[str, Any]) -> str:
        locale = options.get("locale") or self.locale
        value = self.resolve(scope, locale)

        if value is None and options.get("default_value") is not None:
            value = options["default_value"]

        count = options.get("count")
        if isinstance(value, Mapping) and is_count(count):
            value = select_plural(value, count)

        if value is None:
            logger.debug("translation_not_found", scope=str(scope), locale=locale)
            return self.missing_translation(scope, locale)

        return interpolate(
            value,
            options,
            on_missing=lambda placeholder: self.get_missing_placeholder_string(
                placeholder, str(value), options
            ),
        )

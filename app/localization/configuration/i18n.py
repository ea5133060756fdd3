"""Localization engine settings."""

from typing import List, Optional

from pydantic import Field, field_validator

from localization.configuration.base import InfrastructureSettings


class I18nSettings(InfrastructureSettings):
    """Localization engine configuration.

    Environment Variables:
        I18N_DEFAULT_LOCALE: Locale always present in supported locales (default: en)
        I18N_SUPPORTED_LOCALES: JSON list of supported locales (default: ["en"])
        I18N_ENABLE_FALLBACK: Look up missing keys in the default locale (default: True)
        I18N_NAMESPACE_LOAD_TIMEOUT_SECONDS: Overall timeout of a namespaces fan-out
        I18N_NAMESPACE_MAX_CONCURRENCY: Resolvers allowed to run at once (default: 8)
        I18N_NAMESPACES_LOADED_DELAY_SECONDS: Delay before namespaces-loaded fires
        I18N_LOCALE_PREFERENCE_KEY: Preference key holding the active locale
        I18N_PREFERENCES_FILE: JSON file used by the shared instance to persist the locale

    Example:
        ```python
        from localization.configuration import get_settings

        settings = get_settings()
        timeout = settings.i18n.namespace_load_timeout_seconds
        ```
    """

    default_locale: str = Field(
        default="en",
        alias="I18N_DEFAULT_LOCALE",
        description="Locale always contained in the supported locales",
    )
    supported_locales: List[str] = Field(
        default_factory=lambda: ["en"],
        alias="I18N_SUPPORTED_LOCALES",
        description="Locales the active locale may be persisted for",
    )
    enable_fallback: bool = Field(
        default=True,
        alias="I18N_ENABLE_FALLBACK",
        description="Resolve keys missing in a locale against the default locale",
    )
    namespace_load_timeout_seconds: float = Field(
        default=30.0,
        alias="I18N_NAMESPACE_LOAD_TIMEOUT_SECONDS",
        description="Overall timeout for loading all namespaces of a locale",
    )
    namespace_max_concurrency: int = Field(
        default=8,
        alias="I18N_NAMESPACE_MAX_CONCURRENCY",
        description="Maximum number of namespace resolvers running concurrently",
    )
    namespaces_loaded_delay_seconds: float = Field(
        default=0.01,
        alias="I18N_NAMESPACES_LOADED_DELAY_SECONDS",
        description="Delay before emitting namespaces-loaded so late subscribers attach",
    )
    locale_preference_key: str = Field(
        default="i18n.locale",
        alias="I18N_LOCALE_PREFERENCE_KEY",
        description="Preference store key for the active locale",
    )
    preferences_file: Optional[str] = Field(
        default=None,
        alias="I18N_PREFERENCES_FILE",
        description="JSON file the shared instance persists the active locale to",
    )

    @field_validator("namespace_max_concurrency")
    @classmethod
    def _at_least_one(cls, value: int) -> int:
        if value < 1:
            raise ValueError("namespace_max_concurrency must be at least 1")
        return value

"""Configuration module - public API.

Exports:
    get_settings: Cached Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Localization engine settings section

Example:
    ```python
    from localization.configuration import get_settings

    settings = get_settings()
    default_locale = settings.i18n.default_locale
    ```
"""

from functools import lru_cache

from localization.configuration.i18n import I18nSettings
from localization.configuration.settings import Settings


@lru_cache
def get_settings() -> Settings:
    """Get process-wide settings singleton.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


__all__ = ["Settings", "I18nSettings", "get_settings"]

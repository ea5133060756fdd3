"""Top-level settings object for the localization engine."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from localization.configuration.i18n import I18nSettings


class Settings(BaseSettings):
    """Engine-wide settings with one section per concern.

    Environment Variables:
        PREFIX: Deployment prefix; empty in production
        LOG_LEVEL: Level name for the engine's loggers (default: INFO)

    Sections:
        i18n: I18nSettings, read from the I18N_* variables

    Example:
        ```python
        from localization.configuration import get_settings

        settings = get_settings()
        timeout = settings.i18n.namespace_load_timeout_seconds
        ```
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    i18n: I18nSettings

    def __init__(self, **kwargs):
        # Sections read their own variables, so they are built here rather
        # than parsed from the aggregator's environment.
        kwargs.setdefault("i18n", I18nSettings())
        super().__init__(**kwargs)

    @field_validator("LOG_LEVEL")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"

    @property
    def is_production(self) -> bool:
        """True when no deployment PREFIX is set."""
        return not self.PREFIX

"""Base class shared by the settings sections."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class InfrastructureSettings(BaseSettings):
    """Settings section read from the environment or a local .env file.

    Fields declare their environment variable as an alias; passing the
    field name directly (e.g. in tests) works as well.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )

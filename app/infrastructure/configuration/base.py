"""Base classes for settings modules.

Every settings class reads its fields from the process environment and,
when present, a `.env` file in the working directory. Field names are the
environment variable names, matched case-sensitively.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_SETTINGS_CONFIG = SettingsConfigDict(
    env_file=".env",
    case_sensitive=True,
    extra="ignore",
)


class IntegrationSettings(BaseSettings):
    """Settings for an external system the bridge talks to (IRC, AWS)."""

    model_config = ENV_SETTINGS_CONFIG


class FeatureSettings(BaseSettings):
    """Settings for a feature module (the notification queue)."""

    model_config = ENV_SETTINGS_CONFIG

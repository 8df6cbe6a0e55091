"""IRC notification bridge settings aggregator."""

from pydantic import Field
from pydantic_settings import BaseSettings

from infrastructure.configuration.base import ENV_SETTINGS_CONFIG
from infrastructure.configuration.features import NotifyQueueSettings
from infrastructure.configuration.integrations import AwsSettings, IrcSettings


class Settings(BaseSettings):
    """Top-level settings object.

    Application-wide values live here; each integration and feature keeps
    its own settings class, instantiated from the environment unless one is
    passed in explicitly (tests do this).

    Environment Variables:
        PREFIX: Environment prefix; empty in production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        GIT_SHA: Git commit SHA reported in every log entry

    Example:
        ```python
        from infrastructure.configuration import settings

        server = settings.irc.IRC_SERVER
        queue_name = settings.notify.NOTIFY_QUEUE_NAME
        ```
    """

    model_config = ENV_SETTINGS_CONFIG

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    irc: IrcSettings = Field(default_factory=IrcSettings)
    aws: AwsSettings = Field(default_factory=AwsSettings)
    notify: NotifyQueueSettings = Field(default_factory=NotifyQueueSettings)

    @property
    def is_production(self) -> bool:
        return not self.PREFIX


settings = Settings()

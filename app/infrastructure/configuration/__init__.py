"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the IRC
notification bridge using Pydantic BaseSettings with domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)

Example:
    ```python
    from infrastructure.configuration import settings

    server = settings.irc.IRC_SERVER
    region = settings.aws.AWS_REGION
    queue_name = settings.notify.NOTIFY_QUEUE_NAME
    ```
"""

from infrastructure.configuration.settings import Settings, settings

__all__ = ["Settings", "settings"]

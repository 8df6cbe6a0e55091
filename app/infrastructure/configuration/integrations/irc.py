"""IRC integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class IrcSettings(IntegrationSettings):
    """IRC server and bot identity configuration.

    Environment Variables:
        IRC_SERVER: IRC server hostname (e.g. irc.libera.chat)
        IRC_PORT: IRC server port (default: 6697)
        IRC_NICK: Nickname the bot registers with
        IRC_USER_NAME: Username sent in the USER command
        IRC_REAL_NAME: Real name sent in the USER command
        IRC_PASSWORD: Server password sent with PASS
        IRC_SECURE: Connect over TLS (default: True)
        IRC_DEBUG: Log every raw protocol line at debug level (default: False)
        IRC_JOIN_TIMEOUT_SECONDS: How long to wait for a JOIN echo (default: 10)
        IRC_CONNECT_TIMEOUT_SECONDS: How long to wait for registration (default: 60)

    Example:
        ```python
        from infrastructure.configuration import settings

        server = settings.irc.IRC_SERVER
        nick = settings.irc.IRC_NICK
        ```
    """

    IRC_SERVER: str = Field(default="", alias="IRC_SERVER")
    IRC_PORT: int = Field(default=6697, alias="IRC_PORT")
    IRC_NICK: str = Field(default="", alias="IRC_NICK")
    IRC_USER_NAME: str = Field(default="", alias="IRC_USER_NAME")
    IRC_REAL_NAME: str = Field(default="", alias="IRC_REAL_NAME")
    IRC_PASSWORD: str = Field(default="", alias="IRC_PASSWORD")
    IRC_SECURE: bool = Field(default=True, alias="IRC_SECURE")
    IRC_DEBUG: bool = Field(default=False, alias="IRC_DEBUG")
    IRC_JOIN_TIMEOUT_SECONDS: float = Field(
        default=10.0, alias="IRC_JOIN_TIMEOUT_SECONDS"
    )
    IRC_CONNECT_TIMEOUT_SECONDS: float = Field(
        default=60.0, alias="IRC_CONNECT_TIMEOUT_SECONDS"
    )

"""IRC session exceptions."""


class IrcSessionError(Exception):
    """Base class for IRC session failures."""


class IrcConnectionError(IrcSessionError):
    """Connecting or completing registration with the server failed."""


class IrcProtocolError(IrcSessionError):
    """An error event sent by the server.

    Attributes:
        command: The event type reported by the server (e.g. 'cannotsendtochan').
    """

    def __init__(self, message: str, command: str | None = None):
        super().__init__(message)
        self.command = command

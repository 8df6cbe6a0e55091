"""IRC protocol session public API.

    from infrastructure.clients.irc import IrcConnectionOptions, IrcSession

    session = IrcSession(IrcConnectionOptions(...), monitor)
    session.connect()
    session.join_channel("#ops")
    session.send("#ops", "deploy finished")
    session.disconnect()
"""

from infrastructure.clients.irc.errors import (
    IrcConnectionError,
    IrcProtocolError,
    IrcSessionError,
)
from infrastructure.clients.irc.session import (
    IrcConnectionOptions,
    IrcSession,
    SessionState,
)

__all__ = [
    "IrcConnectionError",
    "IrcConnectionOptions",
    "IrcProtocolError",
    "IrcSession",
    "IrcSessionError",
    "SessionState",
]

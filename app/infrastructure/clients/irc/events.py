"""Classification of events produced by the IRC reactor.

Every event the reactor dispatches falls into one of these kinds:
raw protocol lines, server error replies (one of which is suppressed),
routine traffic the session expects, and everything else, which is
forwarded to the monitor as an unhandled notice.
"""

from enum import Enum
from typing import Any

import irc.events

RAW_MESSAGE_EVENT = "all_raw_messages"


def _is_error_numeric(code: str) -> bool:
    return code.isdigit() and 400 <= int(code) < 600


ERROR_EVENTS = frozenset(
    name for code, name in irc.events.numeric.items() if _is_error_numeric(code)
) | {"error"}

# ERR_NOSUCHNICK races with users leaving; not actionable
SUPPRESSED_ERROR_EVENTS = frozenset({"nosuchnick"})

ROUTINE_EVENTS = frozenset(
    {
        # registration and server info
        "welcome",
        "yourhost",
        "created",
        "myinfo",
        "featurelist",
        "luserclient",
        "luserop",
        "luserunknown",
        "luserchannels",
        "luserme",
        "luserconns",
        "n_local",
        "n_global",
        "motdstart",
        "motd",
        "endofmotd",
        "umodeis",
        # channel membership
        "join",
        "part",
        "kick",
        "quit",
        "nick",
        "mode",
        "umode",
        "topic",
        "currenttopic",
        "topicinfo",
        "notopic",
        "namreply",
        "endofnames",
        "channelmodeis",
        "channelcreate",
        # messages and keepalive
        "privmsg",
        "pubmsg",
        "privnotice",
        "pubnotice",
        "action",
        "ctcp",
        "ctcpreply",
        "ping",
        "pong",
        "cap",
        "disconnect",
    }
)


class EventKind(Enum):
    """How the session treats a reactor event."""

    RAW = "raw"
    ERROR = "error"
    SUPPRESSED_ERROR = "suppressed_error"
    ROUTINE = "routine"
    UNHANDLED = "unhandled"


def classify_event(event_type: str) -> EventKind:
    """Classify a reactor event type.

    Numeric replies the irc library has no name for keep their numeric
    code as the type; codes in the 400-599 range are errors.
    """
    if event_type == RAW_MESSAGE_EVENT:
        return EventKind.RAW
    if event_type in SUPPRESSED_ERROR_EVENTS:
        return EventKind.SUPPRESSED_ERROR
    if event_type in ERROR_EVENTS or _is_error_numeric(event_type):
        return EventKind.ERROR
    if event_type in ROUTINE_EVENTS:
        return EventKind.ROUTINE
    return EventKind.UNHANDLED


def describe_event(event: Any) -> dict[str, Any]:
    """Flatten a reactor event into a dict suitable for reporting."""
    return {
        "command": event.type,
        "source": str(event.source) if event.source is not None else None,
        "target": event.target,
        "arguments": list(event.arguments or []),
    }

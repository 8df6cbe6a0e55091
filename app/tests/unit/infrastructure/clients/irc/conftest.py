"""Fixtures for IRC session tests.

`FakeReactor` stands in for `irc.client.Reactor`: it records global
handlers and lets tests fire events synchronously. `FakeConnection`
records outgoing commands and, by default, answers registration with
RPL_WELCOME and our own JOINs with the JOIN echo, like a server would.
It can also drop the connection on a write the way the irc library does
when the socket fails: disconnect, then return without raising.
"""

import threading
import time
from typing import Any, Dict, List, Optional

import irc.client
import pytest

from infrastructure.clients.irc import IrcConnectionOptions, IrcSession

NICK = "notifier"


class FakeConnection:
    def __init__(self, reactor: "FakeReactor"):
        self.reactor = reactor
        self.connected = False
        self.nickname = NICK
        self.auto_welcome = True
        self.auto_confirm_join = True
        # Mimic the irc library: a failed socket write disconnects and returns
        self.drop_on_join = False
        self.drop_on_privmsg = False
        self.connect_error: Optional[Exception] = None
        self.connect_calls: List[Dict[str, Any]] = []
        self.joined: List[str] = []
        self.messages: List[tuple] = []
        self.quit_messages: List[str] = []

    def connect(self, server, port, nickname, **kwargs):
        self.connect_calls.append(
            {"server": server, "port": port, "nickname": nickname, **kwargs}
        )
        if self.connect_error is not None:
            raise self.connect_error
        self.connected = True
        self.nickname = nickname
        if self.auto_welcome:
            self.reactor.fire("welcome", "irc.example.org", nickname, ["Welcome"])

    def is_connected(self):
        return self.connected

    def get_nickname(self):
        return self.nickname

    def join(self, channel, key=""):
        self.joined.append(channel)
        if self.drop_on_join:
            self.disconnect("Broken pipe")
            return
        if self.auto_confirm_join:
            self.reactor.fire("join", f"{self.nickname}!bot@host", channel)

    def privmsg(self, target, text):
        if self.drop_on_privmsg:
            self.disconnect("Broken pipe")
            return
        self.messages.append((target, text))

    def disconnect(self, message=""):
        if not self.connected:
            return
        self.connected = False
        self.quit_messages.append(message)
        self.reactor.fire("disconnect", "irc.example.org", "", [message])


class FakeReactor:
    def __init__(self):
        self.handlers: Dict[str, List[Any]] = {}
        self.mutex = threading.RLock()
        self.connection = FakeConnection(self)

    def server(self):
        return self.connection

    def add_global_handler(self, event, handler, priority=0):
        self.handlers.setdefault(event, []).append(handler)

    def process_once(self, timeout=0):
        time.sleep(0.01)

    def fire(self, event_type, source=None, target=None, arguments=None):
        if source is not None and "!" in str(source):
            source = irc.client.NickMask(source)
        event = irc.client.Event(event_type, source, target, arguments or [])
        for handler in self.handlers.get(event_type, []):
            handler(self.connection, event)
        for handler in self.handlers.get("all_events", []):
            handler(self.connection, event)
        return event


@pytest.fixture
def connection_options_factory():
    def _factory(**overrides) -> IrcConnectionOptions:
        values = {
            "server": "irc.example.org",
            "port": 6697,
            "nick": NICK,
            "username": "notifier",
            "realname": "Notification Bridge",
            "password": "hunter2",
        }
        values.update(overrides)
        return IrcConnectionOptions(**values)

    return _factory


@pytest.fixture
def fake_reactor():
    return FakeReactor()


@pytest.fixture
def make_session(fake_reactor, recording_monitor, connection_options_factory):
    """Factory for IrcSession instances on the fake reactor.

    Sessions are disconnected at teardown so no event loop thread outlives
    its test.
    """
    sessions: List[IrcSession] = []

    def _factory(join_timeout_seconds=0.05, connect_timeout_seconds=0.5, **options):
        session = IrcSession(
            connection_options_factory(**options),
            recording_monitor,
            reactor=fake_reactor,
            join_timeout_seconds=join_timeout_seconds,
            connect_timeout_seconds=connect_timeout_seconds,
        )
        sessions.append(session)
        return session

    yield _factory

    for session in sessions:
        session.disconnect()


@pytest.fixture
def connected_session(make_session):
    session = make_session()
    session.connect()
    return session

"""IRC protocol session.

Owns one persistent connection to an IRC server and exposes the four
operations the notification bridge needs: connect, join a channel, send a
message, disconnect. The irc library's reactor runs on a dedicated event
loop thread; callers block on threading primitives that the reactor's
event handlers release.

Joining a channel has no reliable failure signal: the server echoes our
own JOIN on success and otherwise may answer with an unrelated error
numeric, or nothing at all. `join_channel` therefore races the JOIN echo
against a timer and treats the timer firing as a soft success.
"""

import functools
import ssl
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

import irc.client
import irc.connection
from irc.strings import IRCFoldedCase
import structlog

from infrastructure.clients.irc.errors import (
    IrcConnectionError,
    IrcProtocolError,
    IrcSessionError,
)
from infrastructure.clients.irc.events import (
    EventKind,
    classify_event,
    describe_event,
)
from infrastructure.clients.irc.text import payload_limit, split_message
from infrastructure.observability.monitor import Monitor

logger = structlog.get_logger()

JOIN_TIMEOUT_SECONDS = 10.0
CONNECT_TIMEOUT_SECONDS = 60.0
EVENT_POLL_INTERVAL_SECONDS = 0.2
QUIT_MESSAGE = "Notification bridge shutting down"


class SessionState(Enum):
    """Lifecycle of the session.

    disconnected -> connecting -> connected -> draining -> disconnected
    """

    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    DRAINING = "draining"


@dataclass
class IrcConnectionOptions:
    """Server address and bot identity.

    Attributes:
        server: IRC server hostname
        port: IRC server port
        nick: Nickname to register
        username: Username sent with USER
        realname: Real name sent with USER
        password: Server password sent with PASS
        secure: Wrap the socket in TLS
        debug: Log every raw protocol line at debug level
    """

    server: str
    port: int
    nick: str
    username: str
    realname: str
    password: str
    secure: bool = True
    debug: bool = False

    def __post_init__(self) -> None:
        """Validate required fields."""
        for name in ("server", "port", "nick", "username", "realname", "password"):
            if not getattr(self, name):
                raise ValueError(f"{name} is required")


def _fold(name: str) -> str:
    return IRCFoldedCase(name).lower()


class IrcSession:
    """A single persistent IRC connection.

    Args:
        options: Server address and identity
        monitor: Sink for protocol errors and unhandled server messages
        reactor: Optional irc reactor (injected in tests)
        join_timeout_seconds: How long join_channel waits for the JOIN echo
        connect_timeout_seconds: How long connect waits for RPL_WELCOME
    """

    def __init__(
        self,
        options: IrcConnectionOptions,
        monitor: Monitor,
        reactor: Optional[Any] = None,
        join_timeout_seconds: float = JOIN_TIMEOUT_SECONDS,
        connect_timeout_seconds: float = CONNECT_TIMEOUT_SECONDS,
    ) -> None:
        self._options = options
        self._monitor = monitor
        self._join_timeout = join_timeout_seconds
        self._connect_timeout = connect_timeout_seconds
        self._reactor = reactor if reactor is not None else irc.client.Reactor()
        self._connection = self._reactor.server()

        self._lock = threading.Lock()
        self._state = SessionState.DISCONNECTED
        self._draining = False
        self._closing = False
        # Set on RPL_WELCOME, or on disconnect while registering
        self._registered = threading.Event()
        self._pending_joins: dict[str, threading.Event] = {}
        self._channels: set[str] = set()

        self._loop_stop = threading.Event()
        self._loop_thread: Optional[threading.Thread] = None

        self.log = logger.bind(
            component="irc_session", server=options.server, nick=options.nick
        )
        self._register_handlers()

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def channels(self) -> frozenset[str]:
        """Channels (folded names) the server has confirmed us into."""
        with self._lock:
            return frozenset(self._channels)

    def connect(self) -> None:
        """Connect and complete registration.

        Returns once the server has sent RPL_WELCOME. Calling this while
        already connected, or while another thread is connecting, is not
        an error.

        Raises:
            IrcConnectionError: The transport could not be opened, the
                server closed the connection during registration, or no
                welcome arrived within the connect timeout.
        """
        with self._lock:
            if self._state in (SessionState.CONNECTED, SessionState.DRAINING):
                self.log.info("irc_already_connected")
                return
            already_connecting = self._state == SessionState.CONNECTING
            if not already_connecting:
                self._state = SessionState.CONNECTING
                self._registered.clear()
                self._closing = False

        if not already_connecting:
            self._open_connection()

        if not self._registered.wait(self._connect_timeout):
            self.log.error("irc_registration_timed_out", timeout=self._connect_timeout)
            self._stop_event_loop()
            with self._lock:
                self._closing = True
            self._connection.disconnect("Registration timed out")
            self._set_state(SessionState.DISCONNECTED)
            raise IrcConnectionError(
                f"timed out after {self._connect_timeout}s waiting for "
                f"{self._options.server} to accept registration"
            )

        if self._state not in (SessionState.CONNECTED, SessionState.DRAINING):
            self._stop_event_loop()
            raise IrcConnectionError(
                f"{self._options.server} closed the connection during registration"
            )

    def join_channel(self, name: str) -> bool:
        """Join a channel, waiting at most the join timeout for confirmation.

        Returns:
            True if membership was confirmed, False if the timeout elapsed
            first. A timeout is not an error: the subsequent send may still
            succeed.
        """
        self._ensure_connected()
        key = _fold(name)
        confirmed = threading.Event()
        with self._lock:
            if key in self._channels:
                return True
            self._pending_joins[key] = confirmed

        try:
            self.log.debug("irc_joining_channel", channel=name)
            with self._reactor.mutex:
                self._connection.join(name)
            self._raise_if_dropped(f"JOIN {name}")
            if confirmed.wait(self._join_timeout):
                self.log.info("irc_channel_joined", channel=name)
                return True
            self.log.info(
                "irc_join_timed_out",
                channel=name,
                timeout=self._join_timeout,
                detail="may be ok, proceeding",
            )
            return False
        finally:
            with self._lock:
                if self._pending_joins.get(key) is confirmed:
                    del self._pending_joins[key]

    def send(self, target: str, message: str) -> None:
        """Send a message to a nick or channel.

        Fire-and-forget: IRC has no delivery acknowledgement. Multi-line and
        oversized messages go out as several PRIVMSG lines.

        Raises:
            IrcConnectionError: The connection is gone and could not be
                re-established, or it dropped while the lines were written.
        """
        self._ensure_connected()
        lines = split_message(message, payload_limit(target))
        with self._reactor.mutex:
            for line in lines:
                self._connection.privmsg(target, line)
        self._raise_if_dropped(f"PRIVMSG {target}")
        self.log.debug("irc_message_sent", target=target, lines=len(lines))

    def mark_draining(self) -> None:
        """Flag that the owner is shutting down; in-flight sends still work."""
        with self._lock:
            self._draining = True
            if self._state == SessionState.CONNECTED:
                self._state = SessionState.DRAINING

    def disconnect(self) -> None:
        """Quit and stop the event loop. Safe to call more than once."""
        with self._lock:
            if self._state == SessionState.DISCONNECTED and self._loop_thread is None:
                return
            self._closing = True

        self._stop_event_loop()
        if self._connection.is_connected():
            self._connection.disconnect(QUIT_MESSAGE)
        self._set_state(SessionState.DISCONNECTED)
        self.log.info("irc_disconnected")

    def _open_connection(self) -> None:
        options = self._options
        self.log.info("irc_connecting", port=options.port, secure=options.secure)
        try:
            self._connection.connect(
                options.server,
                options.port,
                options.nick,
                password=options.password,
                username=options.username,
                ircname=options.realname,
                connect_factory=self._connect_factory(),
            )
        except irc.client.ServerConnectionError as e:
            self._set_state(SessionState.DISCONNECTED)
            raise IrcConnectionError(
                f"could not connect to {options.server}:{options.port}: {e}"
            ) from e
        self._start_event_loop()

    def _connect_factory(self) -> irc.connection.Factory:
        if not self._options.secure:
            return irc.connection.Factory()
        context = ssl.create_default_context()
        wrapper = functools.partial(
            context.wrap_socket, server_hostname=self._options.server
        )
        return irc.connection.Factory(wrapper=wrapper)

    def _ensure_connected(self) -> None:
        if (
            self._state in (SessionState.CONNECTED, SessionState.DRAINING)
            and self._connection.is_connected()
        ):
            return
        if self._closing:
            raise IrcSessionError("session has been disconnected")
        self.log.warning("irc_reconnecting", state=self._state.value)
        self.connect()

    def _raise_if_dropped(self, command: str) -> None:
        # The irc library swallows socket errors on write and disconnects
        if not self._connection.is_connected():
            raise IrcConnectionError(f"connection lost while sending {command}")

    def _set_state(self, state: SessionState) -> None:
        with self._lock:
            self._state = state

    # Event loop

    def _start_event_loop(self) -> None:
        if self._loop_thread is not None and self._loop_thread.is_alive():
            return
        self._loop_stop.clear()
        self._loop_thread = threading.Thread(
            target=self._process_events,
            daemon=True,
            name="irc-event-loop",
        )
        self._loop_thread.start()

    def _stop_event_loop(self) -> None:
        self._loop_stop.set()
        thread = self._loop_thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()
        self._loop_thread = None

    def _process_events(self) -> None:
        while not self._loop_stop.is_set():
            try:
                self._reactor.process_once(timeout=EVENT_POLL_INTERVAL_SECONDS)
            except Exception as e:  # pylint: disable=broad-except
                self.log.exception("irc_event_processing_failed", error=str(e))
                self._monitor.report_error(e, {"source": "irc_event_loop"})

    # Reactor event handlers

    def _register_handlers(self) -> None:
        self._reactor.add_global_handler("welcome", self._on_welcome)
        self._reactor.add_global_handler("join", self._on_join)
        self._reactor.add_global_handler("part", self._on_part)
        self._reactor.add_global_handler("kick", self._on_kick)
        self._reactor.add_global_handler("disconnect", self._on_disconnect)
        self._reactor.add_global_handler("all_events", self._on_event)

    def _is_self(self, nick: Any) -> bool:
        nick = getattr(nick, "nick", nick)
        if not nick:
            return False
        return _fold(str(nick)) == _fold(self._connection.get_nickname())

    def _on_welcome(self, connection: Any, event: Any) -> None:
        with self._lock:
            self._state = (
                SessionState.DRAINING if self._draining else SessionState.CONNECTED
            )
        self.log.info("irc_connected")
        self._registered.set()

    def _on_join(self, connection: Any, event: Any) -> None:
        if not self._is_self(event.source):
            return
        key = _fold(event.target)
        with self._lock:
            self._channels.add(key)
            pending = self._pending_joins.get(key)
        if pending is not None:
            pending.set()

    def _on_part(self, connection: Any, event: Any) -> None:
        if self._is_self(event.source):
            with self._lock:
                self._channels.discard(_fold(event.target))

    def _on_kick(self, connection: Any, event: Any) -> None:
        if event.arguments and self._is_self(event.arguments[0]):
            with self._lock:
                self._channels.discard(_fold(event.target))
            self.log.warning("irc_kicked_from_channel", channel=event.target)

    def _on_disconnect(self, connection: Any, event: Any) -> None:
        with self._lock:
            self._state = SessionState.DISCONNECTED
            self._channels.clear()
            closing = self._closing
        self._registered.set()
        if not closing:
            self.log.warning("irc_connection_lost", reason=list(event.arguments or []))
            self._monitor.report_error(
                IrcConnectionError("irc connection lost"), describe_event(event)
            )

    def _on_event(self, connection: Any, event: Any) -> None:
        kind = classify_event(event.type)
        if kind is EventKind.RAW:
            if self._options.debug:
                self.log.debug("irc_raw_message", line=event.arguments[0])
        elif kind is EventKind.SUPPRESSED_ERROR:
            self.log.debug("irc_error_suppressed", **describe_event(event))
        elif kind is EventKind.ERROR:
            self._monitor.report_error(
                IrcProtocolError("irc_error", command=event.type),
                describe_event(event),
            )
        elif kind is EventKind.UNHANDLED:
            self._monitor.notice(describe_event(event))

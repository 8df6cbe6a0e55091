"""Builds a NotificationBridge from application settings."""

from typing import Optional

from infrastructure.clients.aws import SessionProvider, SqsClient
from infrastructure.clients.irc import IrcConnectionOptions, IrcSession
from infrastructure.configuration import Settings
from infrastructure.observability import LoggingMonitor, Monitor
from modules.notify.bridge import NotificationBridge
from modules.notify.queue import NotificationQueue, PollConfig


def create_bridge(
    settings: Settings, monitor: Optional[Monitor] = None
) -> NotificationBridge:
    """Wire the IRC session, SQS queue and consumer together.

    Nothing connects until `start` is called on the returned bridge.

    Raises:
        ValueError: A required IRC or queue setting is missing or invalid.
    """
    monitor = monitor or LoggingMonitor()
    irc_settings = settings.irc
    options = IrcConnectionOptions(
        server=irc_settings.IRC_SERVER,
        port=irc_settings.IRC_PORT,
        nick=irc_settings.IRC_NICK,
        username=irc_settings.IRC_USER_NAME,
        realname=irc_settings.IRC_REAL_NAME,
        password=irc_settings.IRC_PASSWORD,
        secure=irc_settings.IRC_SECURE,
        debug=irc_settings.IRC_DEBUG,
    )

    notify = settings.notify
    poll_config = PollConfig(
        max_number_of_messages=notify.NOTIFY_POLL_BATCH_SIZE,
        wait_time_seconds=notify.NOTIFY_POLL_WAIT_SECONDS,
        visibility_timeout=notify.NOTIFY_VISIBILITY_TIMEOUT_SECONDS,
    )
    session_provider = SessionProvider(
        region=settings.aws.AWS_REGION,
        service_role_map=settings.aws.SERVICE_ROLE_MAP,
        endpoint_url=settings.aws.AWS_ENDPOINT_URL,
    )
    queue = NotificationQueue(
        SqsClient(session_provider), notify.NOTIFY_QUEUE_NAME, poll_config
    )

    session = IrcSession(
        options,
        monitor,
        join_timeout_seconds=irc_settings.IRC_JOIN_TIMEOUT_SECONDS,
        connect_timeout_seconds=irc_settings.IRC_CONNECT_TIMEOUT_SECONDS,
    )
    return NotificationBridge(session, queue, monitor)

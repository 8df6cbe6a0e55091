"""Unit tests for modules.notify.factory."""

import pytest

from infrastructure.clients.irc import IrcSession
from infrastructure.configuration import Settings
from infrastructure.configuration.features import NotifyQueueSettings
from infrastructure.configuration.integrations import AwsSettings, IrcSettings
from infrastructure.observability import LoggingMonitor
from modules.notify.bridge import NotificationBridge
from modules.notify.factory import create_bridge


@pytest.fixture
def make_settings():
    def _factory(queue_name="irc-notifications", password="secret") -> Settings:
        return Settings(
            irc=IrcSettings(
                IRC_SERVER="irc.example.org",
                IRC_NICK="notifier",
                IRC_USER_NAME="notifier",
                IRC_REAL_NAME="Notification Bridge",
                IRC_PASSWORD=password,
            ),
            aws=AwsSettings(AWS_REGION="ca-central-1"),
            notify=NotifyQueueSettings(NOTIFY_QUEUE_NAME=queue_name),
        )

    return _factory


@pytest.mark.unit
class TestCreateBridge:
    def test_builds_bridge_without_connecting(self, make_settings, recording_monitor):
        bridge = create_bridge(make_settings(), recording_monitor)

        assert isinstance(bridge, NotificationBridge)
        assert isinstance(bridge._session, IrcSession)
        assert bridge._queue.queue_name == "irc-notifications"
        assert not bridge.running

    def test_defaults_to_logging_monitor(self, make_settings):
        bridge = create_bridge(make_settings())
        assert isinstance(bridge._monitor, LoggingMonitor)

    def test_missing_queue_name_raises(self, make_settings):
        with pytest.raises(ValueError, match="queue_name"):
            create_bridge(make_settings(queue_name=""))

    def test_missing_irc_password_raises(self, make_settings):
        with pytest.raises(ValueError, match="password"):
            create_bridge(make_settings(password=""))
